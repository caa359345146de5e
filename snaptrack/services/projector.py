from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..models.diffed_record import DiffedRecord

"""Filter + sort projection over diffed records.

The projection is non-destructive: it never mutates the diffed input and
returns a fresh list on each call.
"""

__all__ = [
    "SortDirection",
    "SortDirective",
    "project",
    "matches_search",
]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortDirective:
    field: str | None = None
    direction: SortDirection = SortDirection.ASC

    def toggled(self, field: str) -> SortDirective:
        """Same field flips direction; a different field starts ascending."""
        if self.field == field:
            flipped = SortDirection.DESC if self.direction is SortDirection.ASC else SortDirection.ASC
            return SortDirective(field=field, direction=flipped)
        return SortDirective(field=field, direction=SortDirection.ASC)


def matches_search(record: DiffedRecord, term: str) -> bool:
    needle = term.lower()
    return any(needle in text.lower() for text in record.searchable_texts())


def project(
    diffed: Sequence[DiffedRecord],
    search_term: str = "",
    sort: SortDirective | None = None,
) -> list[DiffedRecord]:
    """Return the filtered, ordered rows to display.

    - search_term: case-insensitive substring over every value of a row,
      derived flags included ("true"/"false"). Empty term keeps everything.
    - sort: stable sort on the string value of sort.field ("" when absent).
      Descending reverses the comparison, so ties keep input order both ways.
    """
    if search_term:
        rows = [r for r in diffed if matches_search(r, search_term)]
    else:
        rows = list(diffed)

    if sort is None or sort.field is None:
        return rows

    field = sort.field
    return sorted(
        rows,
        key=lambda r: r.field_text(field),
        reverse=sort.direction is SortDirection.DESC,
    )
