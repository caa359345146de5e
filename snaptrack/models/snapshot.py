from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

"""Snapshot model.

A Snapshot pairs the header active at capture time with the records parsed
from one submission. The header keeps column order explicit, the records are
read-only mappings keyed by header names.
"""

__all__ = [
    "Snapshot",
]


@dataclass(frozen=True)
class Snapshot:
    """One captured table (baseline or current)."""
    header: tuple[str, ...]
    records: tuple[Mapping[str, str], ...]

    @classmethod
    def empty(cls) -> Snapshot:
        return cls(header=(), records=())

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)
