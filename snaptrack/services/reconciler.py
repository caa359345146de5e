from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..models.diffed_record import DiffedRecord

"""Baseline vs current reconciliation.

Pairs each current record with the baseline record that has the same
identifier value and classifies it:

- no baseline match            -> is_new
- match, status values differ  -> status_changed (+ old_status, label)
- match, same status           -> unchanged

Status comparison is exact string inequality (no case / whitespace folding).
Duplicate identifiers in the baseline resolve to the first one in baseline
order.
"""

__all__ = [
    "reconcile",
    "build_baseline_index",
]

logger = logging.getLogger(__name__)


def build_baseline_index(
    baseline: Sequence[Mapping[str, str]], id_field: str
) -> dict[str, Mapping[str, str]]:
    """Map identifier value -> first baseline record carrying it."""
    index: dict[str, Mapping[str, str]] = {}
    duplicates = 0
    for record in baseline:
        key = record.get(id_field, "")
        if key in index:
            duplicates += 1
            continue
        index[key] = record
    if duplicates:
        logger.debug(
            "baseline has %d duplicate %s value(s); first occurrence wins", duplicates, id_field
        )
    return index


def reconcile(
    baseline: Sequence[Mapping[str, str]],
    current: Sequence[Mapping[str, str]],
    id_field: str,
    status_field: str,
) -> list[DiffedRecord]:
    """Classify every current record against the baseline, keeping current order.

    Returns an empty list when the baseline is empty, whatever current holds:
    there is nothing to compare against until a baseline exists.
    """
    if not baseline:
        return []

    index = build_baseline_index(baseline, id_field)
    diffed: list[DiffedRecord] = []
    for record in current:
        values = dict(record)
        match = index.get(record.get(id_field, ""))
        if match is None:
            diffed.append(DiffedRecord(values=values, is_new=True))
            continue
        old_status = match.get(status_field, "")
        new_status = record.get(status_field, "")
        if old_status != new_status:
            diffed.append(DiffedRecord.changed(values, old_status, new_status))
        else:
            diffed.append(DiffedRecord(values=values))
    return diffed
