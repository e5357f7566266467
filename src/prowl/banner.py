"""Route table banner — human-readable status output.

Prints a header, the derived route tree, and timing to stderr. Detects
``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from prowl.routes.config_file import find_route_config_file
from prowl.routes.node import count_routes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prowl._types import ProwlMode
    from prowl.config import ProwlConfig
    from prowl.routes.node import RouteNode


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_MAGENTA = "\033[35m" if _COLOR else ""


_MODE_STYLES: dict[str, tuple[str, str]] = {
    "routes": (_YELLOW, "routes"),
    "watch": (_GREEN, "watch"),
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    color, label = _MODE_STYLES.get(mode, (_DIM, mode))
    return f"{color}[{label}]{_RESET}"


def _styled_path(path: str) -> str:
    """Highlight variable segments of a route path."""
    segments = [
        f"{_MAGENTA}{segment}{_RESET}" if segment.startswith(":") else segment
        for segment in path.split("/")
    ]
    return "/".join(segments)


# ---------------------------------------------------------------------------
# Route tree
# ---------------------------------------------------------------------------

def render_route_tree(routes: Sequence[RouteNode], prefix: str = "  ") -> list[str]:
    """Render a route table as tree lines, in match order.

    Layout routes are marked with ``*`` and their children are indented
    beneath them.
    """
    lines: list[str] = []
    for i, route in enumerate(routes):
        last = i == len(routes) - 1
        branch = "└─" if last else "├─"
        marker = f" {_CYAN}*{_RESET}" if route.routes is not None else ""
        component = f"  {_DIM}{route.component}{_RESET}" if route.component else ""
        path = _styled_path(route.path) if route.path is not None else f"{_DIM}(any){_RESET}"
        lines.append(f"{prefix}{_DIM}{branch}{_RESET} {path}{marker}{component}")
        if route.routes:
            child_prefix = prefix + ("   " if last else f"{_DIM}│{_RESET}  ")
            lines.extend(render_route_tree(route.routes, child_prefix))
    return lines


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_banner(
    config: ProwlConfig,
    routes: Sequence[RouteNode],
    mode: ProwlMode,
    *,
    load_ms: float = 0.0,
    warnings: list[str] | None = None,
) -> None:
    """Print the route table banner to stderr.

    Args:
        config: Resolved ProwlConfig.
        routes: Route table to display.
        mode: One of ``"routes"``, ``"watch"``.
        load_ms: Time spent building the table in milliseconds.
        warnings: Optional list of warning messages to display.

    """
    from prowl import __version__

    badge = _mode_badge(mode)
    lines: list[str] = [
        "",
        f"  {_BOLD}prowl{_RESET} {_DIM}v{__version__}{_RESET}  {badge}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    total = count_routes(routes)
    label = "route" if total == 1 else "routes"
    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    source = find_route_config_file(config.root, config.route_config_files) or config.pages_path
    lines.append(f"  {total} {label} from {_DIM}{source}{_RESET}{timing}")
    if config.export_static:
        suffix = " (.html)" if config.html_suffix else ""
        lines.append(f"  {_YELLOW}static export{_RESET}{suffix}")
    lines.append("")
    lines.extend(render_route_tree(routes))

    if mode == "watch":
        lines.append("")
        lines.append(f"  {_DIM}Watching for changes...{_RESET}")

    if warnings:
        lines.append("")
        lines.extend(f"  {_YELLOW}!{_RESET} {w}" for w in warnings)

    lines.append("")

    print("\n".join(lines), file=sys.stderr)
