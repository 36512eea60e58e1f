"""YAML config loader and dotted-key access."""

from pathlib import Path
from typing import Any

import yaml

from cityweather.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every setting takes its default.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout_ms'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def override_config(config: AppConfig, **updates: Any) -> AppConfig:
    """Return a re-validated copy with dotted keys replaced.

    Keys use double underscores for nesting, e.g. api__timeout_ms=2000.
    None values are skipped so unset CLI flags leave the config alone.
    """
    data = config.model_dump()
    for key, value in updates.items():
        if value is None:
            continue
        parts = key.split("__")
        target = data
        for part in parts[:-1]:
            target = target[part]
        target[parts[-1]] = value
    return AppConfig(**data)
