"""Load ProwlConfig from prowl.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, TypeVar

import yaml

from prowl._errors import ConfigError
from prowl.config import Conventions, ProwlConfig

CONFIG_FILE_NAMES: tuple[str, ...] = ("prowl.yaml", "prowl.yml", "prowl.toml")

_TOP_LEVEL_KEYS = frozenset({
    "pages_dir",
    "export_static",
    "html_suffix",
    "pages",
    "route_config_files",
})

_CONVENTION_KEYS = frozenset({
    "extensions",
    "default_extension",
    "index_route_files",
    "layout_files",
    "layout_stem",
})


def load_config(root: Path, **overrides: object) -> ProwlConfig:
    """Load ProwlConfig from root, optionally merging prowl.yaml.

    Looks for prowl.yaml, prowl.yml, or prowl.toml in root. If found, loads
    and merges with overrides. Overrides that are ``None`` are ignored so
    that unset CLI flags never mask file values.

    Raises:
        ConfigError: If the config file cannot be parsed or holds values of
            the wrong type.

    """
    file_config = _read_prowl_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    return _build_config(root, merged)


def find_config_file(root: Path) -> Path | None:
    """Return the first prowl config file present in root."""
    for name in CONFIG_FILE_NAMES:
        path = root / name
        if path.is_file():
            return path
    return None


def _read_prowl_config(root: Path) -> dict[str, object]:
    """Read prowl config from yaml/toml if present. Returns empty dict otherwise."""
    path = find_config_file(root)
    if path is None:
        return {}
    if path.suffix == ".toml":
        return _parse_toml(path)
    return _parse_yaml(path)


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_prowl_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_prowl_section(data)


def _flatten_prowl_section(data: dict[str, object]) -> dict[str, object]:
    """Extract prowl.* keys into top-level config."""
    result: dict[str, object] = {}
    prowl = data.get("prowl")
    if isinstance(prowl, dict):
        result.update(prowl)
    for k, v in data.items():
        if k != "prowl" and k in _TOP_LEVEL_KEYS | _CONVENTION_KEYS:
            result[k] = v
    return result


def _build_config(root: Path, merged: dict[str, object]) -> ProwlConfig:
    """Validate merged values and construct the frozen config."""
    unknown = set(merged) - _TOP_LEVEL_KEYS - _CONVENTION_KEYS
    if unknown:
        msg = f"Unknown config option(s): {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    kwargs: dict[str, Any] = {}

    export_static = merged.get("export_static", False)
    html_suffix = merged.get("html_suffix", False)
    # export_static: {html_suffix: true} is shorthand for both flags
    if isinstance(export_static, dict):
        html_suffix = bool(export_static.get("html_suffix", html_suffix))
        export_static = True
    kwargs["export_static"] = _expect(export_static, bool, "export_static")
    kwargs["html_suffix"] = _expect(html_suffix, bool, "html_suffix")

    if "pages_dir" in merged:
        kwargs["pages_dir"] = str(merged["pages_dir"])

    if "pages" in merged:
        pages = _expect(merged["pages"], dict, "pages")
        for route_path, options in pages.items():
            if not isinstance(options, dict):
                msg = f"pages[{route_path!r}] must be a mapping, got {type(options).__name__}"
                raise ConfigError(msg)
        kwargs["pages"] = pages

    if "route_config_files" in merged:
        kwargs["route_config_files"] = _string_tuple(
            merged["route_config_files"], "route_config_files",
        )

    convention_kwargs: dict[str, Any] = {}
    for key in _CONVENTION_KEYS & set(merged):
        value = merged[key]
        if key in ("default_extension", "layout_stem"):
            convention_kwargs[key] = _expect(value, str, key)
        else:
            convention_kwargs[key] = _string_tuple(value, key)
    if convention_kwargs:
        kwargs["conventions"] = Conventions(**convention_kwargs)

    return ProwlConfig(root=root, **kwargs)


T = TypeVar("T")


def _expect(value: object, kind: type[T], key: str) -> T:
    if not isinstance(value, kind):
        msg = f"Config option {key!r} must be {kind.__name__}, got {type(value).__name__}"
        raise ConfigError(msg)
    return value


def _string_tuple(value: object, key: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        msg = f"Config option {key!r} must be a list of strings"
        raise ConfigError(msg)
    if not all(isinstance(item, str) for item in value):
        msg = f"Config option {key!r} must be a list of strings"
        raise ConfigError(msg)
    return tuple(value)
