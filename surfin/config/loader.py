"""YAML config loader with dotted-key lookups."""

from pathlib import Path
from typing import Any

import yaml

from surfin.config.schema import SurfinConfig


class ConfigError(ValueError):
    """Raised when a config file doesn't hold a YAML mapping."""


def load_config(path: str | Path | None = None) -> SurfinConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every setting takes its default.
    Raises yaml.YAMLError for unparseable YAML, ConfigError for a document
    that isn't a mapping and ValidationError for bad values.
    """
    if path is None:
        return SurfinConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(raw).__name__}")
    return SurfinConfig(**raw)


def get_config_value(config: SurfinConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'layout.viewport_width'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
