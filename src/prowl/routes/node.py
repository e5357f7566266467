"""RouteNode — one entry in the route table.

A node is either a leaf (``exact=True``) backed by a single page component,
or a layout-backed parent (``exact=False``) whose ``routes`` are rendered
inside the layout component.

Nodes are plain slotted dataclasses rather than frozen ones: the route
patcher is allowed to rewrite ``path`` and fill ``meta`` after derivation.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from prowl._errors import RouteConfigError
from prowl._types import ComponentRef, RoutePath

# Keys with a dedicated RouteNode field; everything else lands in ``extra``
_KNOWN_KEYS = frozenset({"path", "exact", "component", "routes", "meta"})


@dataclass(slots=True)
class RouteNode:
    """A URL pattern paired with the component that renders it.

    Attributes:
        path: URL pattern, ``:name`` for variable segments and a trailing
            ``?`` for optional ones. Derived routes always start with ``/``;
            a route config entry may omit it (a catch-all fallback).
        exact: True for leaf routes, False for layout-backed routes. *None*
            when a route config entry leaves it unset.
        component: ``./``-prefixed reference to the source file, relative to
            the project root.
        routes: Nested child routes of a layout, or *None* for leaves.
        meta: Extra routing metadata filled in by the patcher.
        extra: Additional keys carried over verbatim from a route config file.

    """

    path: RoutePath | None
    exact: bool | None = False
    component: ComponentRef | None = None
    routes: list[RouteNode] | None = None
    meta: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_layout(self) -> bool:
        return self.routes is not None

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and all of its descendants, depth-first."""
        yield self
        for child in self.routes or ():
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape consumed by router generation."""
        data: dict[str, Any] = {}
        if self.path is not None:
            data["path"] = self.path
        if self.exact is not None:
            data["exact"] = self.exact
        if self.component is not None:
            data["component"] = self.component
        if self.routes is not None:
            data["routes"] = [child.to_dict() for child in self.routes]
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: object) -> RouteNode:
        """Build a node from one entry of a route config file.

        Entries are carried through as written. Only the shape needed to
        hold them is checked: each entry must be an object, ``path`` must be
        a string when present, and nested ``routes`` must be an array.

        Raises:
            RouteConfigError: If the entry does not have that shape.

        """
        if not isinstance(data, Mapping):
            msg = f"Route entry must be an object, got {data!r}"
            raise RouteConfigError(msg)

        path = data.get("path")
        if path is not None and not isinstance(path, str):
            msg = f"Route entry 'path' must be a string, got {path!r}"
            raise RouteConfigError(msg)

        children = data.get("routes")
        routes: list[RouteNode] | None = None
        if children is not None:
            if not isinstance(children, list):
                msg = f"Route {path!r}: 'routes' must be an array, got {children!r}"
                raise RouteConfigError(msg)
            routes = [cls.from_dict(child) for child in children]

        meta = data.get("meta")
        extra = {k: v for k, v in data.items() if k not in _KNOWN_KEYS}
        if meta is not None and not isinstance(meta, Mapping):
            extra["meta"] = meta
        return cls(
            path=path,
            exact=bool(data["exact"]) if "exact" in data else None,
            component=data.get("component"),
            routes=routes,
            meta=dict(meta) if isinstance(meta, Mapping) else None,
            extra=extra,
        )


def count_routes(routes: Sequence[RouteNode]) -> int:
    """Count every node in a route table, nested children included."""
    return sum(1 for route in routes for _ in route.walk())


def routes_to_json(routes: Sequence[RouteNode], *, indent: int | None = 2) -> str:
    """Serialize a route table to JSON."""
    return json.dumps([route.to_dict() for route in routes], indent=indent, ensure_ascii=False)
