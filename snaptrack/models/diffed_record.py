from __future__ import annotations

from dataclasses import dataclass

"""DiffedRecord model.

A DiffedRecord is a current-snapshot record annotated with its classification
against the baseline. It is derived data: it is rebuilt from the two snapshots
every time a view is requested and is never written to the store.
"""

__all__ = [
    "DiffedRecord",
    "STATUS_CHANGE_ARROW",
]

STATUS_CHANGE_ARROW = " → "


def _flag_text(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class DiffedRecord:
    """A current record plus its change classification.

    Attributes:
        values: Field name -> value, exactly as parsed for the current snapshot
        is_new: No baseline record shares this record's identifier value
        status_changed: Baseline and current status values differ
        old_status: Baseline status, set only when status_changed
        status_change_label: "<old> → <new>", set only when status_changed
    """
    values: dict[str, str]
    is_new: bool = False
    status_changed: bool = False
    old_status: str | None = None
    status_change_label: str | None = None

    @staticmethod
    def changed(values: dict[str, str], old_status: str, new_status: str) -> DiffedRecord:
        return DiffedRecord(
            values=values,
            is_new=False,
            status_changed=True,
            old_status=old_status,
            status_change_label=f"{old_status}{STATUS_CHANGE_ARROW}{new_status}",
        )

    def get(self, field: str, default: str = "") -> str:
        return self.values.get(field, default)

    def field_text(self, field: str) -> str:
        """String form of a record field or derived field; "" when absent.

        Record values take precedence over derived names.
        """
        if field in self.values:
            return self.values[field]
        if field == "is_new":
            return _flag_text(self.is_new)
        if field == "status_changed":
            return _flag_text(self.status_changed)
        if field == "old_status":
            return self.old_status or ""
        if field == "status_change_label":
            return self.status_change_label or ""
        return ""

    def searchable_texts(self) -> list[str]:
        texts = list(self.values.values())
        texts.append(_flag_text(self.is_new))
        texts.append(_flag_text(self.status_changed))
        if self.old_status is not None:
            texts.append(self.old_status)
        if self.status_change_label is not None:
            texts.append(self.status_change_label)
        return texts
