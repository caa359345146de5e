from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..models.diffed_record import DiffedRecord

"""Presentation helpers: view -> DataFrame, text table, file export.

The Progress column shows "NEW" for new rows and the "<old> → <new>" label
for status changes. Fields whose name contains "date" are shortened to the
part before the first space when rendered as text (e.g. "2024-05-01 00:00"
-> "2024-05-01"); exported files keep full values.
"""

__all__ = [
    "PROGRESS_COLUMN",
    "EMPTY_VIEW_MESSAGE",
    "view_to_frame",
    "render_view",
    "export_view",
]

PROGRESS_COLUMN = "Progress"
NEW_MARKER = "NEW"
EMPTY_VIEW_MESSAGE = "No rows to display."


def progress_text(record: DiffedRecord) -> str:
    if record.is_new:
        return NEW_MARKER
    if record.status_changed and record.status_change_label is not None:
        return record.status_change_label
    return ""


def view_to_frame(view: Sequence[DiffedRecord], header: Sequence[str]) -> pd.DataFrame:
    columns = list(dict.fromkeys(header))
    rows = [[r.get(c) for c in columns] + [progress_text(r)] for r in view]
    return pd.DataFrame(rows, columns=columns + [PROGRESS_COLUMN], dtype=str)


def _shorten_dates(frame: pd.DataFrame) -> pd.DataFrame:
    out = frame.copy()
    for col in out.columns:
        if col != PROGRESS_COLUMN and "date" in str(col).lower():
            out[col] = out[col].str.split(" ").str[0]
    return out


def render_view(view: Sequence[DiffedRecord], header: Sequence[str]) -> str:
    if not view:
        return EMPTY_VIEW_MESSAGE
    frame = _shorten_dates(view_to_frame(view, header))
    return frame.to_string(index=False)


def export_view(view: Sequence[DiffedRecord], header: Sequence[str], path: Path) -> Path:
    """Write the view to path; format chosen by suffix (.tsv/.txt, .csv, .xlsx)."""
    frame = view_to_frame(view, header)
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix in (".tsv", ".txt"):
        frame.to_csv(path, sep="\t", index=False)
    elif suffix == ".csv":
        frame.to_csv(path, index=False)
    elif suffix == ".xlsx":
        frame.to_excel(path, index=False, engine="openpyxl")
    else:
        raise ValueError(f"unsupported export format: {path.suffix or '(none)'}")
    return path
