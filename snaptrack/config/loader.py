from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import StoreConfig, TrackerConfig

"""Config loader.

Responsibilities:
- Load YAML config (default: config/tracker.yml)
- Validate against the bundled config_schema.json
- Apply defaults for every omitted key
- Apply environment overrides (SNAPTRACK_STORE_DIR, SNAPTRACK_STORE_DISABLED)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
    "apply_env_overrides",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/tracker.yml")

ENV_STORE_DIR = "SNAPTRACK_STORE_DIR"
ENV_STORE_DISABLED = "SNAPTRACK_STORE_DISABLED"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails schema validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def apply_env_overrides(cfg: TrackerConfig) -> TrackerConfig:
    store = cfg.store
    store_dir = os.getenv(ENV_STORE_DIR)
    if store_dir:
        store = StoreConfig(enabled=store.enabled, directory=store_dir)
    if os.getenv(ENV_STORE_DISABLED) == "1":
        store = StoreConfig(enabled=False, directory=store.directory)
    return TrackerConfig(store=store, logs_directory=cfg.logs_directory)


def load_config(path: Path | None = None) -> TrackerConfig:
    """Load the tracker config.

    path=None reads DEFAULT_CONFIG_PATH when it exists and falls back to
    built-in defaults otherwise; an explicit path must exist.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return apply_env_overrides(TrackerConfig())
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = TrackerConfig()
    store_raw = data.get("store", {})
    store = StoreConfig(
        enabled=store_raw.get("enabled", defaults.store.enabled),
        directory=store_raw.get("directory", defaults.store.directory),
    )
    cfg = TrackerConfig(
        store=store,
        logs_directory=data.get("logs_directory", defaults.logs_directory),
    )
    return apply_env_overrides(cfg)
