"""Explicit route table files.

When a project root holds ``_routes.json`` (or another configured name),
its array of route objects is used as-is instead of deriving routes from
the pages directory::

    [
      {"path": "/", "exact": true, "component": "./src/pages/index.js"},
      {"path": "/users", "component": "./src/layouts/Users.js", "routes": [...]}
    ]
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from prowl._errors import RouteConfigError
from prowl.routes.node import RouteNode


def find_route_config_file(root: Path, candidates: Sequence[str]) -> Path | None:
    """Return the first route config file present in *root*, if any."""
    for name in candidates:
        path = root / name
        if path.exists():
            return path
    return None


def load_route_config_file(path: Path) -> list[RouteNode]:
    """Parse a route config file into RouteNode objects.

    Raises:
        RouteConfigError: If the file is not valid JSON, is not an array,
            or holds an entry without a string ``path``.

    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in route config {path}: {exc}"
        raise RouteConfigError(msg) from exc

    if not isinstance(data, list):
        msg = f"Route config {path} must be an array, but got {data!r}"
        raise RouteConfigError(msg)

    return [RouteNode.from_dict(entry) for entry in data]
