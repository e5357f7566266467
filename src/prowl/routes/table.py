"""Route table entry point.

Picks a producer, patches the result, and records what happened::

    config = load_config(Path("my-app"))
    routes = load_routes(config)

An explicit route config file at the project root wins over the pages
directory. Per-page ``Route`` meta is only injected into derived routes;
a route config file is expected to carry its own.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from prowl._errors import ProwlError
from prowl.config import RoutePaths
from prowl.observability.events import RouteLoadFailed, RoutesLoaded, now_ns
from prowl.routes.config_file import find_route_config_file, load_route_config_file
from prowl.routes.discovery import derive_routes
from prowl.routes.node import RouteNode, count_routes
from prowl.routes.patch import PatchOptions, patch_routes

if TYPE_CHECKING:
    from prowl.config import ProwlConfig
    from prowl.observability.log import EventLog


def load_routes(
    config: ProwlConfig,
    *,
    log: EventLog | None = None,
    trigger_path: str = "",
) -> list[RouteNode]:
    """Build the patched route table for a project.

    Args:
        config: Resolved project configuration.
        log: Optional event log that receives a ``RoutesLoaded`` event, or a
            ``RouteLoadFailed`` event before a prowl error propagates.
        trigger_path: File change that caused this load, recorded on failure.

    Raises:
        RouteConflictError: On ambiguous directory/file routing.
        RouteConfigError: On a malformed route config file.
        VariablePathExportError: On variable paths with ``export_static``.

    """
    t0 = time.perf_counter()
    try:
        routes, source, origin = _produce(config)
        patch_routes(routes, PatchOptions(
            export_static=config.export_static,
            html_suffix=config.html_suffix,
            patch_meta=source == "pages",
            pages=config.pages,
        ))
    except ProwlError as exc:
        if log is not None:
            log.append(RouteLoadFailed(
                error_type=type(exc).__name__,
                message=str(exc),
                trigger_path=trigger_path,
                timestamp_ns=now_ns(),
            ))
        raise

    if log is not None:
        log.append(RoutesLoaded(
            source=source,
            path=origin,
            route_count=count_routes(routes),
            duration_ms=(time.perf_counter() - t0) * 1000,
            timestamp_ns=now_ns(),
        ))
    return routes


def _produce(config: ProwlConfig) -> tuple[list[RouteNode], str, str]:
    """Return (routes, source kind, path read)."""
    route_config = find_route_config_file(config.root, config.route_config_files)
    if route_config is not None:
        return load_route_config_file(route_config), "config_file", str(route_config)

    paths = RoutePaths.from_config(config)
    return derive_routes(paths, config.conventions), "pages", str(paths.pages_path)
