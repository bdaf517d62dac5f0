"""Minimal strict schema for YAML sort config validation."""

from __future__ import annotations

from locale_radix.common.constants import INPUT_FORMATS, SENSITIVITIES
from locale_radix.common.errors import ConfigError

SORT_CONFIG_REQUIRED = {"locale", "sensitivity", "input_format"}
SORT_CONFIG_KNOWN = SORT_CONFIG_REQUIRED | {"key_field"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_sort_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("sort config must be a mapping")
    _assert_required_keys(cfg, SORT_CONFIG_REQUIRED, "sort config")
    _assert_no_unknown_keys(cfg, SORT_CONFIG_KNOWN, "sort config", allow_unknown)

    if not isinstance(cfg["locale"], str) or not cfg["locale"].strip():
        raise ConfigError("sort config locale must be a non-empty string")
    if cfg["sensitivity"] not in SENSITIVITIES:
        raise ConfigError(
            f"sort config sensitivity must be one of {', '.join(SENSITIVITIES)}: {cfg['sensitivity']!r}"
        )
    if cfg["input_format"] not in INPUT_FORMATS:
        raise ConfigError(
            f"sort config input_format must be one of {', '.join(INPUT_FORMATS)}: {cfg['input_format']!r}"
        )
    key_field = cfg.get("key_field")
    if key_field is not None and (not isinstance(key_field, str) or not key_field):
        raise ConfigError("sort config key_field must be a non-empty string or null")

    return cfg
