"""Prowl error hierarchy.

All prowl-specific errors inherit from ProwlError for easy catching.
"""

from pathlib import Path


class ProwlError(Exception):
    """Base error for all prowl operations."""


class ConfigError(ProwlError):
    """Invalid or missing configuration."""


class RouteConfigError(ConfigError):
    """The explicit route config file is malformed."""


class RouteError(ProwlError):
    """Error while deriving routes from the pages directory."""


class RouteConflictError(RouteError):
    """Two naming conventions resolve to the same route.

    Raised when a directory holds an index route file (``users/page.js``)
    and a sibling page file with the directory's name (``users.js``) exists
    next to it.

    Attributes:
        file_path: Sibling page file, relative to the pages directory.
        index_path: Index route file inside the directory, relative to the
            pages directory.

    """

    def __init__(self, file_path: str | Path, index_path: str | Path) -> None:
        self.file_path = str(file_path)
        self.index_path = str(index_path)
        super().__init__(
            f"Route conflict: both {self.file_path!r} and {self.index_path!r} "
            f"exist in the pages directory and resolve to the same route."
        )


class ExportError(ProwlError):
    """Error in static-export specific route handling."""


class VariablePathExportError(ExportError):
    """A variable route path cannot be exported as a static file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Variable path {path!r} doesn't work with export_static.")
