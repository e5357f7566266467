"""Prowl entry points — show and watch.

Both modes load ``prowl.yaml`` (if present), merge keyword overrides, and
build the route table once. ``watch`` then keeps rebuilding it as pages,
layouts, or config files change.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from prowl.config_loader import load_config
from prowl.observability import EventLog, RouteLoadFailed, RoutesChanged, RoutesLoaded
from prowl.routes.config_file import find_route_config_file
from prowl.routes.node import routes_to_json
from prowl.routes.table import load_routes

if TYPE_CHECKING:
    from prowl.config import ProwlConfig
    from prowl.routes.node import RouteNode


def show(
    root: str | Path = ".",
    *,
    as_json: bool = False,
    **overrides: object,
) -> list[RouteNode]:
    """Build the route table once and print it.

    Args:
        root: Path to the project root directory.
        as_json: Print the table as JSON to stdout instead of the tree
            banner on stderr.
        **overrides: Override ProwlConfig fields.

    Raises:
        ProwlError: If the route table cannot be built.

    """
    from prowl.banner import print_banner

    config = load_config(Path(root), **overrides)
    t0 = time.perf_counter()
    routes = load_routes(config)
    load_ms = (time.perf_counter() - t0) * 1000

    if as_json:
        print(routes_to_json(routes))
    else:
        print_banner(config, routes, mode="routes", load_ms=load_ms, warnings=_warnings(config))
    return routes


def watch(root: str | Path = ".", **overrides: object) -> None:
    """Print the route table and reprint it whenever routing inputs change.

    Runs until interrupted.

    Args:
        root: Path to the project root directory.
        **overrides: Override ProwlConfig fields. They keep precedence when
            the config file is reloaded.

    """
    from prowl.banner import print_banner
    from prowl.watcher import RouteWatcher

    config = load_config(Path(root), **overrides)
    log = EventLog()

    def _print(routes: list[RouteNode]) -> None:
        loaded = log.latest(RoutesLoaded)
        print_banner(
            watcher.config,
            routes,
            mode="watch",
            load_ms=loaded.duration_ms if loaded is not None else 0.0,
            warnings=_warnings(watcher.config),
        )

    watcher = RouteWatcher(config, overrides=overrides, log=log, on_update=_print)
    _print(watcher.load())

    try:
        watcher.run()
    except KeyboardInterrupt:
        rebuilds = log.count(RoutesChanged)
        failures = log.count(RouteLoadFailed)
        summary = f"Stopped after {rebuilds} rebuilds"
        if failures:
            summary += f" ({failures} failed)"
        print(f"\n  {summary}.", file=sys.stderr)


def _warnings(config: ProwlConfig) -> list[str]:
    """Collect non-fatal setup problems worth showing in the banner."""
    if find_route_config_file(config.root, config.route_config_files) is not None:
        return []
    if not config.pages_path.is_dir():
        return [f"Pages directory not found: {config.pages_path}"]
    return []
