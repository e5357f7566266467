"""Directory-convention route derivation.

Walks the pages directory tree and maps it to a nested route table:

- page files (``.js``, ``.jsx``, ``.ts``, ``.tsx``) become leaf routes
- a directory holding an index route file (``page.js``) becomes one leaf
  route for the whole directory
- a directory holding ``_layout.*`` becomes a parent route whose children
  are derived from the directory's contents
- any other directory contributes its children directly

Names starting with ``$`` become variable segments (``$id`` -> ``:id``,
``$id$`` -> ``:id?``).

Sibling order matters because routers take the first matching pattern.
Static entries are placed at the front in reverse listing order, variable
entries at the back in listing order, so literal routes always win over
variable ones declared in the same directory.
"""

from __future__ import annotations

import stat
from collections.abc import Sequence
from pathlib import Path

from prowl._errors import RouteConflictError
from prowl.config import Conventions, RoutePaths
from prowl.routes.node import RouteNode
from prowl.routes.paths import (
    component_ref,
    is_variable,
    join_logical,
    page_path,
    route_path,
    strip_index,
)


def derive_routes(
    paths: RoutePaths,
    conventions: Conventions | None = None,
    dir_path: str = "",
) -> list[RouteNode]:
    """Derive the ordered route table for ``paths.pages_path / dir_path``.

    Args:
        paths: Project root and absolute pages directory.
        conventions: File-naming conventions (defaults when omitted).
        dir_path: Logical sub-path below the pages directory, ``/``-separated.

    Returns:
        Routes for every eligible entry under the directory. Empty when the
        directory does not exist.

    Raises:
        RouteConflictError: If a directory with an index route file has a
            same-named sibling page.
        OSError: If an entry cannot be stat'ed, e.g. a dangling symlink.

    """
    conventions = conventions or Conventions()
    directory = paths.pages_path / dir_path if dir_path else paths.pages_path
    if not directory.is_dir():
        return []

    # Static entries in listing order; reversed on return
    head: list[RouteNode] = []
    # Variable entries and spliced children, in listing order
    tail: list[RouteNode] = []

    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        name = entry.name
        if name.startswith("."):
            continue

        target = tail if is_variable(name) else head

        # Follows symlinks; a dangling link or a vanished entry raises here
        mode = entry.stat().st_mode
        if stat.S_ISREG(mode):
            if entry.suffix not in conventions.extensions:
                continue
            if entry.stem == conventions.layout_stem:
                continue
            target.append(RouteNode(
                path=page_path(join_logical(dir_path, entry.stem)),
                exact=True,
                component=component_ref(paths.cwd, entry),
            ))
        elif stat.S_ISDIR(mode):
            derived = _derive_directory(entry, paths, conventions, dir_path)
            if isinstance(derived, RouteNode):
                target.append(derived)
            else:
                # No layout: splice the children in at the current position
                tail.extend(derived)

    return [*reversed(head), *tail]


def _derive_directory(
    directory: Path,
    paths: RoutePaths,
    conventions: Conventions,
    dir_path: str,
) -> RouteNode | list[RouteNode]:
    """Resolve one subdirectory to a single node, or to its flattened children."""
    logical = join_logical(dir_path, directory.name)

    index_file = find_first(directory, conventions.index_route_files)
    if index_file is not None:
        sibling = directory.parent / f"{directory.name}{conventions.default_extension}"
        if sibling.exists():
            raise RouteConflictError(
                f"{logical}{conventions.default_extension}",
                f"{logical}/{index_file.name}",
            )
        return RouteNode(
            path=strip_index(route_path(logical)),
            exact=True,
            component=component_ref(paths.cwd, index_file),
        )

    layout_file = find_first(directory, conventions.layout_files)
    children = derive_routes(paths, conventions, logical)
    if layout_file is None:
        return children

    return RouteNode(
        path=route_path(logical),
        exact=False,
        component=component_ref(paths.cwd, layout_file),
        routes=children,
    )


def find_first(directory: Path, candidates: Sequence[str]) -> Path | None:
    """Return the first candidate that exists as a file in *directory*."""
    for name in candidates:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None
