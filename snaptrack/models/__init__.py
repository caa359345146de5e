"""Domain models for the snapshot tracker.

This package contains the data shapes shared by the parser, the reconciler,
the projector and the session.
"""

from .config_models import StoreConfig, TrackerConfig
from .diffed_record import DiffedRecord
from .error_record import ErrorRecord
from .snapshot import Snapshot
from .summary import Summary

__all__ = [
    # Configuration models
    "StoreConfig",
    "TrackerConfig",
    # Tracking models
    "DiffedRecord",
    "ErrorRecord",
    "Snapshot",
    "Summary",
]
