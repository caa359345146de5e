from __future__ import annotations

import logging
from enum import Enum

from ..models.diffed_record import DiffedRecord
from ..models.snapshot import Snapshot
from ..models.summary import Summary
from ..tabular.reader import ParsedTable, ParseError, parse_tabular
from .inference import InferredColumns, infer_columns
from .projector import SortDirective, project
from .reconciler import reconcile
from .store import SnapshotStore

"""Tracking session: the only stateful component.

States:
    EMPTY     no baseline (initial, and after reset)
    TRACKING  baseline captured, zero or more updates applied

set_baseline() moves EMPTY -> TRACKING, update() stays in TRACKING and
reset() returns to EMPTY. A failed parse records last_error and leaves every
snapshot as it was.

The view is not cached: get_view() rebuilds it from the snapshots, the
current header, the search term and the sort directive on each call.
"""

__all__ = [
    "SessionState",
    "SessionStateError",
    "TrackerSession",
]

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    EMPTY = "empty"
    TRACKING = "tracking"


class SessionStateError(Exception):
    """Raised when an operation is not offered in the session's current state."""


class TrackerSession:
    def __init__(self, store: SnapshotStore | None = None) -> None:
        self._store = store
        self.baseline = Snapshot.empty()
        self.current = Snapshot.empty()
        self.header: tuple[str, ...] = ()
        self.paste_buffer = ""
        self.last_error = ""
        self.search_term = ""
        self.sort = SortDirective()
        if store is not None:
            self._restore(store)

    def _restore(self, store: SnapshotStore) -> None:
        stored = store.load()
        if stored is None:
            return
        self.baseline, self.current = stored.snapshots()
        self.header = stored.header
        logger.info(
            "restored session: baseline=%d current=%d", len(self.baseline), len(self.current)
        )

    @property
    def state(self) -> SessionState:
        return SessionState.EMPTY if self.baseline.is_empty else SessionState.TRACKING

    def paste(self, text: str) -> None:
        self.paste_buffer = text

    def _parse(self, text: str | None) -> ParsedTable | None:
        source = self.paste_buffer if text is None else text
        try:
            return parse_tabular(source)
        except ParseError as e:
            self.last_error = str(e)
            logger.warning("input rejected: %s", self.last_error)
            return None

    def _persist(self) -> None:
        if self._store is not None:
            self._store.save(self.baseline, self.current, self.header)

    def set_baseline(self, text: str | None = None) -> bool:
        """Capture the baseline (and current) from text, or the paste buffer.

        Returns True on success. On a parse failure last_error holds the
        message and False is returned.
        """
        if self.state is SessionState.TRACKING:
            raise SessionStateError("baseline already set; reset before capturing a new one")
        parsed = self._parse(text)
        if parsed is None:
            return False
        snapshot = Snapshot(header=parsed.header, records=parsed.records)
        self.header = parsed.header
        self.baseline = snapshot
        self.current = snapshot
        self.paste_buffer = ""
        self.last_error = ""
        self._persist()
        logger.info("baseline set: %d rows, columns=%s", len(snapshot), list(parsed.header))
        return True

    def update(self, text: str | None = None) -> bool:
        """Replace the current snapshot; the baseline is kept."""
        if self.state is SessionState.EMPTY:
            raise SessionStateError("no baseline set; capture a baseline first")
        parsed = self._parse(text)
        if parsed is None:
            return False
        self.header = parsed.header
        self.current = Snapshot(header=parsed.header, records=parsed.records)
        self.paste_buffer = ""
        self.last_error = ""
        self._persist()
        logger.info("current updated: %d rows", len(self.current))
        return True

    def reset(self) -> None:
        self.baseline = Snapshot.empty()
        self.current = Snapshot.empty()
        self.header = ()
        self.paste_buffer = ""
        self.last_error = ""
        self.search_term = ""
        self.sort = SortDirective()
        if self._store is not None:
            self._store.clear()
        logger.info("session reset")

    def set_search(self, term: str) -> None:
        self.search_term = term

    def set_sort(self, field: str) -> None:
        self.sort = self.sort.toggled(field)

    def columns(self) -> InferredColumns | None:
        if not self.header:
            return None
        return infer_columns(self.header)

    def _diffed(self) -> list[DiffedRecord]:
        columns = self.columns()
        if columns is None:
            return []
        return reconcile(
            self.baseline.records, self.current.records, columns.id_field, columns.status_field
        )

    def get_view(self) -> list[DiffedRecord]:
        return project(self._diffed(), self.search_term, self.sort)

    def get_summary(self) -> Summary:
        diffed = self._diffed()
        return Summary(
            total=len(diffed),
            changed=sum(1 for r in diffed if r.status_changed),
            new=sum(1 for r in diffed if r.is_new),
        )
