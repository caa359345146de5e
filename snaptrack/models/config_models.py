from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for the tracker.

Built by snaptrack.config.loader; kept here so
services can depend on the shapes without importing YAML / jsonschema.
"""


@dataclass(frozen=True)
class StoreConfig:
    """Durable-store settings.

    Environment variables (SNAPTRACK_STORE_DIR / SNAPTRACK_STORE_DISABLED)
    take precedence over these values.
    """
    enabled: bool = True
    directory: str = ".snaptrack"


@dataclass(frozen=True)
class TrackerConfig:
    """Root configuration object."""
    store: StoreConfig = StoreConfig()
    logs_directory: str = "./logs"
