"""Tests for prowl.banner — route table output."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import patch

from prowl.banner import print_banner, render_route_tree
from prowl.config import ProwlConfig
from prowl.routes.node import RouteNode


def _routes() -> list[RouteNode]:
    return [
        RouteNode(
            path="/users",
            exact=False,
            component="./src/pages/users/_layout.js",
            routes=[
                RouteNode(path="/users/", exact=True, component="./src/pages/users/index.js"),
                RouteNode(path="/users/:id", exact=True, component="./src/pages/users/$id.js"),
            ],
        ),
        RouteNode(path="/", exact=True, component="./src/pages/index.js"),
    ]


class TestRenderRouteTree:
    def test_lines_in_match_order(self) -> None:
        lines = render_route_tree(_routes())
        assert len(lines) == 4
        assert "/users *" in lines[0]
        assert "/users/" in lines[1]
        assert "/users/:id" in lines[2]
        assert lines[3].strip().startswith("└─ /")

    def test_children_indented(self) -> None:
        lines = render_route_tree(_routes())
        assert lines[1].index("/users/") > lines[0].index("/users")

    def test_components_shown(self) -> None:
        lines = render_route_tree(_routes())
        assert "./src/pages/users/_layout.js" in lines[0]

    def test_empty_table(self) -> None:
        assert render_route_tree([]) == []

    def test_path_less_route_shown_as_catch_all(self) -> None:
        lines = render_route_tree([RouteNode(path=None, exact=None, component="./404.js")])
        assert "(any)" in lines[0]
        assert "./404.js" in lines[0]


class TestPrintBanner:
    """Tests for the route table banner."""

    def _capture_banner(self, routes: list[RouteNode], **kwargs: object) -> str:
        """Call print_banner and capture stderr output."""
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            config = kwargs.pop("config", None) or ProwlConfig(root=Path("/tmp/test-app"))
            print_banner(config, routes, **kwargs)  # type: ignore[arg-type]
        return buf.getvalue()

    def test_routes_mode(self) -> None:
        output = self._capture_banner(_routes(), mode="routes", load_ms=12.4)

        assert "prowl" in output
        assert "[routes]" in output
        assert "4 routes" in output
        assert "12ms" in output
        assert "/users/:id" in output
        assert "Watching for changes" not in output

    def test_watch_mode(self) -> None:
        output = self._capture_banner(_routes(), mode="watch")
        assert "[watch]" in output
        assert "Watching for changes" in output

    def test_single_route_singular(self) -> None:
        routes = [RouteNode(path="/", exact=True, component="./index.js")]
        output = self._capture_banner(routes, mode="routes")
        assert "1 route " in output

    def test_static_export_shown(self) -> None:
        config = ProwlConfig(root=Path("/tmp/test-app"), export_static=True, html_suffix=True)
        output = self._capture_banner([], mode="routes", config=config)
        assert "static export (.html)" in output

    def test_warnings_shown(self) -> None:
        output = self._capture_banner([], mode="routes", warnings=["Pages directory not found"])
        assert "! Pages directory not found" in output

    def test_route_config_file_named_as_source(self, tmp_path: Path) -> None:
        (tmp_path / "_routes.json").write_text("[]")
        output = self._capture_banner([], mode="routes", config=ProwlConfig(root=tmp_path))
        assert "_routes.json" in output
