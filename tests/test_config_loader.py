"""Tests for prowl.config_loader — prowl.yaml / prowl.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from prowl._errors import ConfigError
from prowl.config_loader import find_config_file, load_config


class TestFindConfigFile:
    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_config_file(tmp_path) is None

    def test_yaml_before_toml(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.toml").write_text("")
        (tmp_path / "prowl.yml").write_text("")
        assert find_config_file(tmp_path) == tmp_path / "prowl.yml"


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.export_static is False

    def test_yaml_values(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text(
            "pages_dir: app/pages\n"
            "export_static: true\n"
            "html_suffix: true\n"
            "pages:\n"
            "  /admin:\n"
            "    Route: ./routes/Private.js\n"
        )
        config = load_config(tmp_path)
        assert config.pages_path == tmp_path / "app" / "pages"
        assert config.export_static is True
        assert config.html_suffix is True
        assert config.pages == {"/admin": {"Route": "./routes/Private.js"}}

    def test_prowl_section(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("prowl:\n  pages_dir: views\nname: my-app\n")
        assert load_config(tmp_path).pages_dir == "views"

    def test_toml_values(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.toml").write_text(
            '[prowl]\npages_dir = "views"\nindex_route_files = ["route.js"]\n'
        )
        config = load_config(tmp_path)
        assert config.pages_dir == "views"
        assert config.conventions.index_route_files == ("route.js",)

    def test_export_static_mapping_shorthand(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("export_static:\n  html_suffix: true\n")
        config = load_config(tmp_path)
        assert config.export_static is True
        assert config.html_suffix is True

    def test_convention_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text(
            "extensions: [.js, .vue]\n"
            "default_extension: .vue\n"
            "layout_files: [_layout.vue]\n"
        )
        conventions = load_config(tmp_path).conventions
        assert conventions.extensions == (".js", ".vue")
        assert conventions.default_extension == ".vue"
        assert conventions.layout_files == ("_layout.vue",)
        # untouched fields keep defaults
        assert conventions.index_route_files[0] == "page.js"

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("pages_dir: views\nexport_static: true\n")
        config = load_config(tmp_path, pages_dir="other", export_static=False)
        assert config.pages_dir == "other"
        assert config.export_static is False

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("pages_dir: views\n")
        assert load_config(tmp_path, pages_dir=None).pages_dir == "views"

    def test_empty_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("")
        assert load_config(tmp_path).pages_dir is None


class TestLoadConfigErrors:
    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("pages: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.toml").write_text("pages_dir = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(tmp_path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("export_static: yes please\n")
        with pytest.raises(ConfigError, match="export_static"):
            load_config(tmp_path)

    def test_page_options_must_be_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("pages:\n  /admin: ./Private.js\n")
        with pytest.raises(ConfigError, match="pages"):
            load_config(tmp_path)

    def test_string_list_required(self, tmp_path: Path) -> None:
        (tmp_path / "prowl.yaml").write_text("index_route_files: page.js\n")
        with pytest.raises(ConfigError, match="list of strings"):
            load_config(tmp_path)

    def test_unknown_override_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Unknown config option"):
            load_config(tmp_path, colour="blue")
