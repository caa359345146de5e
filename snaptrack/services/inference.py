from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

"""Identifier / status column inference.

Picks the row identifier and the status field from a header by name:
- id: first name containing "id" (case-insensitive), else the first column
- status: first name containing "status" (case-insensitive), else the literal
  "Status" even when the header has no such column

The fallback status name may be absent from every record; lookups then read
as "" and no row is ever reported as status-changed.
"""

__all__ = [
    "InferredColumns",
    "infer_columns",
    "DEFAULT_STATUS_FIELD",
]

ID_MARKER = "id"
STATUS_MARKER = "status"
DEFAULT_STATUS_FIELD = "Status"


@dataclass(frozen=True)
class InferredColumns:
    id_field: str
    status_field: str


def _first_containing(header: Sequence[str], marker: str) -> str | None:
    for name in header:
        if marker in name.lower():
            return name
    return None


def infer_columns(header: Sequence[str]) -> InferredColumns:
    if not header:
        raise ValueError("cannot infer columns from an empty header")
    id_field = _first_containing(header, ID_MARKER)
    status_field = _first_containing(header, STATUS_MARKER)
    return InferredColumns(
        id_field=id_field if id_field is not None else header[0],
        status_field=status_field if status_field is not None else DEFAULT_STATUS_FIELD,
    )
