"""Layered configuration loading: defaults < file < environment < CLI."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

import yaml

from relay_scan.exceptions import ConfigValidationError

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON mapping from ``path``."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigValidationError(f"Cannot read config file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Malformed config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    # Accept both "port_speed" and "port-speed" style keys
    return {str(k).replace("-", "_"): v for k, v in data.items()}


def _load_env(env_prefix: str, keys: set[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for key in keys:
        env_key = f"{env_prefix}{key.upper()}"
        if env_key in os.environ:
            values[key] = os.environ[env_key]
    return values


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Caster] | None = None,
) -> dict[str, Any]:
    """Merge configuration layers for the keys in ``defaults``.

    ``cli_values`` holds only the options given on the command line; each one
    overrides the file and environment layers, even when it equals the default.
    """

    keys = set(defaults)
    casters = casters or {}
    merged: dict[str, Any] = dict(defaults)

    if config_path is not None:
        file_values = _load_yaml(Path(config_path))
        unknown = set(file_values) - keys
        if unknown:
            raise ConfigValidationError(f"Unknown keys in {config_path}: {sorted(unknown)}")
        merged.update(file_values)

    merged.update(_load_env(env_prefix, keys))

    for key, value in cli_values.items():
        if key in keys:
            merged[key] = value

    for key, caster in casters.items():
        value = merged.get(key)
        if value is None:
            continue
        try:
            merged[key] = caster(value)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc
    return merged


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def optional_str(value: Any) -> str | None:
    text = str(value).strip()
    return text or None


__all__ = ["load_config_with_precedence", "optional_str", "parse_bool"]
