from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema
from jsonschema.exceptions import ValidationError

from ..models.snapshot import Snapshot

"""Durable-store mirror for a tracking session.

Three named slots live in one directory as JSON arrays:

- baseline.json: baseline records
- current.json:  current records
- header.json:   header of the most recent parse

Slots are written after each successful session mutation (only when the
value is non-empty, all staged before any is replaced), read once when a session starts, and cleared as a unit
on reset. Reads fail open: a missing, unreadable or invalid slot is logged
and the whole store is treated as absent.
"""

__all__ = [
    "SnapshotStore",
    "StoredState",
    "SLOT_NAMES",
    "SCHEMA_PATH",
]

logger = logging.getLogger(__name__)

SLOT_NAMES = ("baseline", "current", "header")
SCHEMA_PATH = Path(__file__).with_name("store_schema.json")


@dataclass(frozen=True)
class StoredState:
    header: tuple[str, ...]
    baseline: tuple[Mapping[str, str], ...]
    current: tuple[Mapping[str, str], ...]

    def snapshots(self) -> tuple[Snapshot, Snapshot]:
        # baseline header is not stored separately; both share the last header
        return (
            Snapshot(header=self.header, records=self.baseline),
            Snapshot(header=self.header, records=self.current),
        )


def _load_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


class SnapshotStore:
    """Directory-backed store for baseline / current / header."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def slot_path(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def _stage_slot(self, name: str, payload: list[Any]) -> Path:
        tmp = self.slot_path(name).with_suffix(".json.tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return tmp

    def save(
        self,
        baseline: Snapshot,
        current: Snapshot,
        header: tuple[str, ...],
    ) -> None:
        """Write the non-empty slots.

        Every slot is staged to a temp file before any is replaced, so a
        failed write leaves the previous set of slots in place.
        """
        payloads: dict[str, list[Any]] = {}
        if not baseline.is_empty:
            payloads["baseline"] = [dict(r) for r in baseline.records]
        if not current.is_empty:
            payloads["current"] = [dict(r) for r in current.records]
        if header:
            payloads["header"] = list(header)
        if not payloads:
            return

        self.directory.mkdir(parents=True, exist_ok=True)
        staged: dict[str, Path] = {}
        try:
            for name, payload in payloads.items():
                staged[name] = self._stage_slot(name, payload)
        except Exception:
            for name in payloads:
                self.slot_path(name).with_suffix(".json.tmp").unlink(missing_ok=True)
            raise
        for name, tmp in staged.items():
            tmp.replace(self.slot_path(name))
        logger.debug("store saved to %s", self.directory)

    def load(self) -> StoredState | None:
        """Read all slots; None when nothing usable is stored."""
        if not any(self.slot_path(n).exists() for n in SLOT_NAMES):
            return None

        data: dict[str, Any] = {}
        for name in SLOT_NAMES:
            path = self.slot_path(name)
            if not path.exists():
                logger.warning("store slot missing, ignoring stored state: %s", path)
                return None
            try:
                data[name] = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                logger.warning("store slot unreadable, ignoring stored state: %s (%s)", path, e)
                return None

        try:
            jsonschema.validate(data, _load_schema())
        except ValidationError as e:
            logger.warning("stored state failed validation, ignoring: %s", e.message)
            return None

        if not data["baseline"] or not data["current"] or not data["header"]:
            logger.warning("stored state incomplete, ignoring")
            return None

        return StoredState(
            header=tuple(data["header"]),
            baseline=tuple(MappingProxyType(r) for r in data["baseline"]),
            current=tuple(MappingProxyType(r) for r in data["current"]),
        )

    def clear(self) -> None:
        for name in SLOT_NAMES:
            self.slot_path(name).unlink(missing_ok=True)
        logger.debug("store cleared at %s", self.directory)
