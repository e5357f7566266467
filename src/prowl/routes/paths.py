"""URL path helpers for file-derived routes.

    users/$id.js        -> /users/:id
    posts/$slug$.js     -> /posts/:slug?
    settings/index.js   -> /settings/
    index.js            -> /
"""

from __future__ import annotations

import os
from pathlib import Path

VARIABLE_MARK = "$"


def to_posix(path: str) -> str:
    """Normalize Windows separators to forward slashes."""
    return path.replace("\\", "/")


def is_variable(name: str) -> bool:
    """Whether a raw file or directory name declares a variable segment."""
    return name.startswith(VARIABLE_MARK)


def variable_segment(segment: str) -> str:
    """Translate one raw path segment into its route form.

    A leading ``$`` becomes ``:`` (named variable) and a trailing ``$``
    becomes ``?`` (optional).
    """
    if segment.startswith(VARIABLE_MARK):
        segment = ":" + segment[1:]
    if segment.endswith(VARIABLE_MARK):
        segment = segment[:-1] + "?"
    return segment


def variable_path(path: str) -> str:
    """Translate every segment of a logical path."""
    return "/".join(variable_segment(segment) for segment in to_posix(path).split("/"))


def join_logical(dir_path: str, name: str) -> str:
    """Join a logical sub-path and an entry name with a forward slash."""
    return f"{dir_path}/{name}" if dir_path else name


def route_path(logical: str) -> str:
    """Build the raw route path for a logical path: ``users/$id`` -> ``/users/:id``."""
    return to_posix("/" + variable_path(logical))


def strip_index(path: str) -> str:
    """Drop a trailing ``index`` segment, keeping the slash: ``/foo/index`` -> ``/foo/``."""
    if path.endswith("/index"):
        return path[: -len("index")]
    return path


def page_path(logical: str) -> str:
    """Route path for a page file, including the root index collapse."""
    path = route_path(logical)
    if path == "/index/index":
        return "/"
    return strip_index(path)


def component_ref(cwd: Path, file_path: Path) -> str:
    """Reference a source file relative to the project root: ``./src/pages/a.js``."""
    return "./" + to_posix(os.path.relpath(file_path, cwd))
