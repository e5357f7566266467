"""Prowl configuration.

ProwlConfig is the central configuration object, frozen after creation.
Conventions holds the file-naming rules the route deriver recognises, and
RoutePaths is the resolved path bundle handed to the deriver.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Page-capable source extensions
DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Files that turn a whole directory into a single route, most preferred first
DEFAULT_INDEX_ROUTE_FILES: tuple[str, ...] = ("page.js", "page.jsx", "page.ts", "page.tsx")

# Layout candidates, most preferred first
DEFAULT_LAYOUT_FILES: tuple[str, ...] = (
    "_layout.tsx",
    "_layout.ts",
    "_layout.jsx",
    "_layout.js",
)

# Explicit route table files looked up at the project root
DEFAULT_ROUTE_CONFIG_FILES: tuple[str, ...] = ("_routes.json", ".routes.json")


@dataclass(frozen=True, slots=True)
class Conventions:
    """File-naming conventions for directory-based route derivation.

    Attributes:
        extensions: Extensions of files that may become pages.
        default_extension: Extension used when checking a directory for a
            same-named sibling page (``users/`` vs ``users.js``).
        index_route_files: Candidate names that make a directory resolve to
            one route, checked in order.
        layout_files: Candidate layout names, checked in order.
        layout_stem: File stem reserved for layouts; such files never
            become pages themselves.

    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    default_extension: str = ".js"
    index_route_files: tuple[str, ...] = DEFAULT_INDEX_ROUTE_FILES
    layout_files: tuple[str, ...] = DEFAULT_LAYOUT_FILES
    layout_stem: str = "_layout"


@dataclass(frozen=True, slots=True)
class RoutePaths:
    """Resolved paths consumed by the route deriver.

    Attributes:
        cwd: Project root; component references are relative to it.
        pages_path: Absolute path to the pages directory.

    """

    cwd: Path
    pages_path: Path

    @classmethod
    def from_config(cls, config: "ProwlConfig") -> "RoutePaths":
        return cls(cwd=config.root, pages_path=config.pages_path)


@dataclass(frozen=True, slots=True)
class ProwlConfig:
    """Configuration for a prowl run.

    Attributes:
        root: Project root directory. Always resolved to an absolute path on
              construction.
        pages_dir: Pages directory relative to root. When unset, ``src/pages``
            is used if ``root/src`` exists, otherwise ``pages``.
        export_static: Whether the build exports static HTML. Variable paths
            are rejected in this mode.
        html_suffix: Rewrite leaf paths to ``.html`` files (only with
            ``export_static``).
        pages: Per-route options keyed by route path. A ``Route`` entry is
            injected into the matching leaf route's ``meta``.
        route_config_files: Explicit route table file names looked up at
            root, in order. When one exists, directory derivation is skipped.
        conventions: File-naming conventions for directory derivation.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str | None = None
    export_static: bool = False
    html_suffix: bool = False
    pages: dict[str, dict[str, Any]] = field(default_factory=dict)
    route_config_files: tuple[str, ...] = DEFAULT_ROUTE_CONFIG_FILES
    conventions: Conventions = field(default_factory=Conventions)

    def __post_init__(self) -> None:
        # Component references are computed relative to root, so it must be
        # absolute before any path arithmetic happens.
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def src_path(self) -> Path:
        """Absolute path to the source directory (``src/`` or root)."""
        src = self.root / "src"
        return src if src.is_dir() else self.root

    @property
    def pages_path(self) -> Path:
        """Absolute path to the pages directory.

        ``..`` segments are collapsed so the result compares cleanly against
        paths reported by the file watcher.
        """
        if self.pages_dir is not None:
            return Path(os.path.normpath(self.root / self.pages_dir))
        return self.src_path / "pages"
