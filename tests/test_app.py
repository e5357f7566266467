"""Tests for prowl.app — show and watch entry points."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from prowl.app import show, watch
from prowl.watcher import ChangeEvent, RouteWatcher


class TestShow:
    def test_returns_routes(self, app_site: Path) -> None:
        routes = show(app_site)
        assert [r.path for r in routes] == ["/users", "/settings", "/", "/about"]

    def test_reads_config_file(self, project: Path) -> None:
        (project / "views").mkdir()
        (project / "views" / "home.js").write_text("")
        (project / "prowl.yaml").write_text("pages_dir: views\n")
        assert [r.path for r in show(project)] == ["/home"]

    def test_json_to_stdout(self, app_site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        show(app_site, as_json=True)
        captured = capsys.readouterr()
        assert json.loads(captured.out)[2]["path"] == "/"
        assert captured.err == ""

    def test_pages_meta_from_config(self, app_site: Path) -> None:
        (app_site / "prowl.yaml").write_text("pages:\n  /about:\n    Route: ./Private.js\n")
        routes = show(app_site)
        assert routes[-1].meta == {"Route": "./Private.js"}


class TestWatch:
    def test_prints_initial_table_and_stops_on_interrupt(
        self,
        app_site: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _interrupt(self: RouteWatcher, stop_event: object = None) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(RouteWatcher, "run", _interrupt)
        watch(app_site)
        err = capsys.readouterr().err
        assert "[watch]" in err
        assert "/users/:id" in err
        assert "Stopped after 0 rebuilds" in err

    def test_summary_counts_rebuilds_and_failures(
        self,
        app_site: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        pages = app_site / "src" / "pages"

        def _two_changes(self: RouteWatcher, stop_event: object = None) -> None:
            contact = pages / "contact.js"
            contact.write_text("")
            self.handle([ChangeEvent(path=contact, kind="created", category="pages")])
            clash = pages / "settings.js"
            clash.write_text("")
            self.handle([ChangeEvent(path=clash, kind="created", category="pages")])
            raise KeyboardInterrupt

        monkeypatch.setattr(RouteWatcher, "run", _two_changes)
        watch(app_site)
        err = capsys.readouterr().err
        assert "/contact" in err
        assert "Stopped after 1 rebuilds (1 failed)" in err
