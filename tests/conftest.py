"""Shared test fixtures for prowl."""

from __future__ import annotations

from pathlib import Path

import pytest

from prowl.config import RoutePaths


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create an empty project root with a ``src/pages`` directory.

    Returns the project root.
    """
    (tmp_path / "src" / "pages").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def pages(project: Path) -> Path:
    """The project's pages directory."""
    return project / "src" / "pages"


@pytest.fixture
def paths(project: Path, pages: Path) -> RoutePaths:
    """RoutePaths for the project fixture."""
    return RoutePaths(cwd=project, pages_path=pages)


@pytest.fixture
def app_site(project: Path, pages: Path) -> Path:
    """A small but complete pages tree.

    Layout::

        src/pages/
            index.js
            about.js
            users/
                _layout.js
                index.js
                $id.js
            settings/
                page.js
    """
    for rel in (
        "index.js",
        "about.js",
        "users/_layout.js",
        "users/index.js",
        "users/$id.js",
        "settings/page.js",
    ):
        path = pages / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("export default () => null;\n")
    return project
