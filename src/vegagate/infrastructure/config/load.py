"""Layered configuration loading: defaults < YAML < env/.env < CLI."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_TOP_LEVEL_KEYS: tuple[str, ...] = ("app_name", "environment")

# Flat override key (env var suffix / CLI flag) -> (section, key) in config.yaml.
_SECTIONED_KEYS: dict[str, tuple[str, str]] = {
    "providers_dir": ("providers", "providers_dir"),
    "extractors_dir": ("providers", "extractors_dir"),
    "manifest_path": ("providers", "manifest_path"),
    "base_url_registry": ("providers", "base_url_registry"),
    "call_timeout_seconds": ("providers", "call_timeout_seconds"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_follow_redirects": ("http", "follow_redirects"),
    "http_user_agent": ("http", "user_agent"),
    "website_dir": ("website", "dir"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
}

_SECTIONS: frozenset[str] = frozenset(s for s, _ in _SECTIONED_KEYS.values())


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` in place; nested mappings merge key-wise."""
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _deep_merge(current, value)
        else:
            base[key] = value
    return base


def _normalize_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """Bring one layer into the sectioned shape of config.yaml.

    Layers may mix sectioned keys (``providers: {manifest_path: ...}``) with
    the flat keys env vars and CLI flags use (``manifest_path``); unknown
    keys are dropped.
    """
    out: dict[str, Any] = {
        section: dict(data[section])
        for section in _SECTIONS
        if isinstance(data.get(section), Mapping)
    }
    out.update({key: data[key] for key in _TOP_LEVEL_KEYS if key in data})

    for flat_key, (section, key) in _SECTIONED_KEYS.items():
        if flat_key in data:
            out.setdefault(section, {})[key] = data[flat_key]
    return out


def _read_yaml_layer(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(config_path)
    parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the validated AppConfig.

    A ``.env`` file only fills variables that are not already set in the
    process environment. Nothing is written to disk.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    layers: list[Mapping[str, Any]] = [deepcopy(DEFAULT_CONFIG)]
    if config_path is not None:
        layers.append(_read_yaml_layer(config_path))
    layers.append(EnvOverrides().to_update_dict())
    layers.append(cli_overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        _deep_merge(merged, _normalize_layer(layer))
    return AppConfig.model_validate(merged)
