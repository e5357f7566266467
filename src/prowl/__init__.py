"""Prowl — derive a route table from a pages directory.

Walks a directory of page components and produces the ordered, nested
route table a router generator consumes. Files become routes, ``_layout``
files wrap their directory's routes, and ``$name`` segments become
variables.

Quick start::

    import prowl

    routes = prowl.load_routes(prowl.load_config(Path("my-app")))

Two modes::

    prowl.show("my-app/")           # Print the route table once
    prowl.watch("my-app/")          # Reprint it on every change

Conventions::

    pages/index.js            -> /
    pages/about.js            -> /about
    pages/users/_layout.js    -> /users        (layout, nested routes)
    pages/users/$id.js        -> /users/:id
    pages/posts/$slug$.js     -> /posts/:slug?
    pages/settings/page.js    -> /settings     (whole directory is one route)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ProwlConfig",
    "RouteNode",
    "__version__",
    "derive_routes",
    "load_config",
    "load_routes",
    "show",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import prowl`` fast while providing a clean top-level API.
    """
    if name == "ProwlConfig":
        from prowl.config import ProwlConfig

        return ProwlConfig

    if name == "load_config":
        from prowl.config_loader import load_config

        return load_config

    if name == "RouteNode":
        from prowl.routes.node import RouteNode

        return RouteNode

    if name == "derive_routes":
        from prowl.routes.discovery import derive_routes

        return derive_routes

    if name == "load_routes":
        from prowl.routes.table import load_routes

        return load_routes

    if name == "show":
        from prowl.app import show

        return show

    if name == "watch":
        from prowl.app import watch

        return watch

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
