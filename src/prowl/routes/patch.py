"""Route patching — the single post-derivation pass over a route table.

Applies, in place:

- a static-export guard: variable paths cannot be written as static files
- ``meta`` injection from per-page options (``pages: {"/": {"Route": ...}}``)
- ``.html`` suffix rewriting for static exports
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from prowl._errors import VariablePathExportError
from prowl._types import PageOptions
from prowl.routes.node import RouteNode

# Per-page option injected into route meta
ROUTE_WRAPPER_KEY = "Route"


@dataclass(frozen=True, slots=True)
class PatchOptions:
    """What the patch pass should do.

    Attributes:
        export_static: Reject variable paths anywhere in the tree.
        html_suffix: Rewrite leaf paths to ``.html`` (only with
            ``export_static``).
        patch_meta: Inject ``Route`` wrappers from *pages* into leaf meta.
        pages: Per-page options keyed by route path.

    """

    export_static: bool = False
    html_suffix: bool = False
    patch_meta: bool = True
    pages: PageOptions = field(default_factory=dict)


def patch_routes(routes: Sequence[RouteNode], options: PatchOptions) -> None:
    """Patch a route table in place.

    Raises:
        VariablePathExportError: If *options.export_static* is set and any
            route path contains a variable segment.

    """
    for route in routes:
        path = route.path
        if options.export_static and path is not None and ":" in path:
            raise VariablePathExportError(path)

        if route.routes is not None:
            patch_routes(route.routes, options)
            continue

        # Path-less config entries are catch-alls; no page options or file name
        if path is None:
            continue

        if options.patch_meta:
            wrapper = options.pages.get(path, {}).get(ROUTE_WRAPPER_KEY)
            if wrapper:
                route.meta = {ROUTE_WRAPPER_KEY: wrapper}

        if options.export_static and options.html_suffix:
            route.path = add_html_suffix(path)


def add_html_suffix(path: str) -> str:
    """Map a route path to its exported file name.

    ``/`` -> ``/``, ``/users/`` -> ``/users.html``, ``/about`` -> ``/about.html``
    """
    if path == "/":
        return path
    if path.endswith("/"):
        return f"{path[:-1]}.html"
    return f"{path}.html"
