"""snaptrack - track status changes in pasted tabular data across two snapshots."""

__version__ = "0.1.0"
