"""Shared utilities for config loading."""

from pathlib import Path
from typing import Any, Optional

import yaml


class ConfigError(ValueError):
    """Raised when a config file is malformed or a required key is missing."""


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Dicts merge, lists/scalars replace."""
    merged = base.copy()
    for key, val in override.items():
        if isinstance(merged.get(key), dict) and isinstance(val, dict):
            merged[key] = deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_yaml(path: Path) -> Optional[dict]:
    """Load a YAML mapping. Missing or empty file -> None, non-mapping -> ConfigError."""
    if not path.exists():
        return None
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML ({e})") from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return data


def require(data: dict, key: str, section: str = "") -> Any:
    """Fetch a required key, naming the dotted path in the error."""
    if data.get(key) in (None, ""):
        where = f"{section}.{key}" if section else key
        raise ConfigError(f"Missing config value: {where}")
    return data[key]
