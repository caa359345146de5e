from __future__ import annotations

from dataclasses import dataclass

"""Summary counts over a full (unfiltered) diffed view."""

__all__ = [
    "Summary",
]


@dataclass(frozen=True)
class Summary:
    total: int  # rows in current
    changed: int  # status_changed rows
    new: int  # is_new rows
