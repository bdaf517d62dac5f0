"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from locale_radix.common.constants import DEFAULT_LOCALE, DEFAULT_SENSITIVITY
from locale_radix.common.errors import ConfigError
from locale_radix.common.fs import read_yaml
from locale_radix.common.schema import validate_sort_config

DEFAULT_SORT_CONFIG = {
    "locale": DEFAULT_LOCALE,
    "sensitivity": DEFAULT_SENSITIVITY,
    "input_format": "lines",
    "key_field": None,
}


@dataclass(frozen=True)
class SortConfig:
    locale: str
    sensitivity: str
    input_format: str
    key_field: str | None = None


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_mapping(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    loaded = read_yaml(path)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return loaded


def load_sort_config(
    config_path: Path | None = None,
    *,
    overlay_path: Path | None = None,
    overrides: dict | None = None,
    allow_unknown: bool = False,
) -> SortConfig:
    cfg: dict = dict(DEFAULT_SORT_CONFIG)
    if config_path is not None:
        cfg = _deep_merge(cfg, _read_mapping(config_path))
    if overlay_path is not None and overlay_path.exists():
        cfg = _deep_merge(cfg, _read_mapping(overlay_path))
    if overrides:
        cfg = _deep_merge(cfg, {key: value for key, value in overrides.items() if value is not None})

    validated = validate_sort_config(cfg, allow_unknown=allow_unknown)
    return SortConfig(
        locale=validated["locale"],
        sensitivity=validated["sensitivity"],
        input_format=validated["input_format"],
        key_field=validated.get("key_field"),
    )
