"""Prowl CLI — prowl routes / prowl watch.

Entry point for the ``prowl`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys

from prowl._errors import ProwlError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the prowl CLI."""
    parser = argparse.ArgumentParser(
        prog="prowl",
        description="Derive a route table from a pages directory.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # prowl routes
    routes_parser = subparsers.add_parser(
        "routes",
        help="Print the derived route table",
    )
    _add_common_arguments(routes_parser)
    routes_parser.add_argument(
        "--export-static",
        action="store_true",
        default=None,
        help="Reject variable paths (static HTML export)",
    )
    routes_parser.add_argument(
        "--html-suffix",
        action="store_true",
        default=None,
        help="Rewrite leaf paths to .html files (with --export-static)",
    )
    routes_parser.add_argument(
        "--json", action="store_true", help="Print the table as JSON to stdout",
    )

    # prowl watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Rebuild the route table on file changes",
    )
    _add_common_arguments(watch_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument(
        "--pages-dir", default=None, help="Pages directory relative to root",
    )


def _get_version() -> str:
    """Get the package version."""
    from prowl import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from prowl.app import show, watch

    try:
        if args.command == "routes":
            show(
                args.root,
                as_json=args.json,
                pages_dir=args.pages_dir,
                export_static=args.export_static,
                html_suffix=args.html_suffix,
            )
        elif args.command == "watch":
            watch(args.root, pages_dir=args.pages_dir)
    except ProwlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
