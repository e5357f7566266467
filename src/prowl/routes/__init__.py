"""Route table derivation.

Maps a pages directory (or an explicit route config file) to the nested
route table consumed by router generation.

Public API::

    from prowl.routes import derive_routes, load_routes

    routes = load_routes(config)                      # full pipeline
    routes = derive_routes(RoutePaths(cwd, pages))    # directory walk only
"""

from prowl.routes.config_file import find_route_config_file, load_route_config_file
from prowl.routes.discovery import derive_routes
from prowl.routes.node import RouteNode, count_routes, routes_to_json
from prowl.routes.patch import PatchOptions, add_html_suffix, patch_routes
from prowl.routes.table import load_routes

__all__ = [
    "PatchOptions",
    "RouteNode",
    "add_html_suffix",
    "count_routes",
    "derive_routes",
    "find_route_config_file",
    "load_route_config_file",
    "load_routes",
    "patch_routes",
    "routes_to_json",
]
