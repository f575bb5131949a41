"""Layered configuration loading.

Each source is turned into a *layer* in the sectioned shape of
``config.yaml`` and merged over the previous one:

    defaults < YAML file < VIDRESOLVE_* env (incl. .env) < CLI overrides

The merged mapping is validated once by ``AppConfig``.
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_TOP_LEVEL_KEYS: tuple[str, ...] = ("app_name", "environment")

# flat key (env / CLI / AppConfig field) -> (section, key inside section)
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "site_base_url": ("site", "base_url"),
    "site_catalog_path": ("site", "catalog_path"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_user_agent": ("http", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
}

_SECTIONS: frozenset[str] = frozenset(s for s, _ in _FLAT_KEYS.values())


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    """Merge *layer* into *target* in place; nested mappings merge key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value
    return target


def _to_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """Bring flat or sectioned input into the sectioned layer shape.

    Unknown keys are dropped; a flat key wins over the same value given
    inside its section.
    """
    layer: dict[str, Any] = {
        section: dict(data[section])
        for section in _SECTIONS
        if isinstance(data.get(section), Mapping)
    }
    layer.update({k: data[k] for k in _TOP_LEVEL_KEYS if k in data})

    for flat_key, (section, key) in _FLAT_KEYS.items():
        if flat_key in data:
            layer.setdefault(section, {})[key] = data[flat_key]
    return layer


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def _layers(
    config_path: Path | None, cli_overrides: Mapping[str, Any]
) -> Iterator[dict[str, Any]]:
    # Lowest precedence first.
    yield _to_layer(deepcopy(DEFAULT_CONFIG))
    if config_path is not None:
        yield _to_layer(_read_yaml(config_path))
    yield _to_layer(EnvOverrides().to_update_dict())
    yield _to_layer(cli_overrides)


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the validated ``AppConfig`` from all layers.

    Only reads the given files; never creates anything on disk.  A .env
    file feeds the environment layer and does not override variables that
    are already set.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    merged: dict[str, Any] = {}
    for layer in _layers(config_path, cli_overrides or {}):
        _merge_into(merged, layer)

    return AppConfig.model_validate(merged)
