from __future__ import annotations
from snaptrack.models.diffed_record import DiffedRecord
from snaptrack.services.reconciler import build_baseline_index, reconcile


def _rows(*pairs):
    return [{"TaskID": i, "Status": s} for i, s in pairs]


def test_classifies_unchanged_changed_and_new():
    baseline = _rows(("T1", "Open"), ("T2", "Open"))
    current = _rows(("T1", "Done"), ("T2", "Open"), ("T3", "Open"))
    out = reconcile(baseline, current, "TaskID", "Status")

    assert [r.get("TaskID") for r in out] == ["T1", "T2", "T3"]
    t1, t2, t3 = out
    assert t1.status_changed and not t1.is_new
    assert t1.old_status == "Open"
    assert t1.status_change_label == "Open → Done"
    assert t2 == DiffedRecord(values={"TaskID": "T2", "Status": "Open"})
    assert t2.old_status is None and t2.status_change_label is None
    assert t3.is_new and not t3.status_changed
    assert t3.old_status is None


def test_preserves_current_order():
    baseline = _rows(("A", "x"), ("B", "x"), ("C", "x"))
    current = _rows(("C", "x"), ("A", "y"), ("B", "x"))
    out = reconcile(baseline, current, "TaskID", "Status")
    assert [r.get("TaskID") for r in out] == ["C", "A", "B"]


def test_empty_baseline_yields_nothing():
    assert reconcile([], _rows(("T1", "Open")), "TaskID", "Status") == []


def test_one_output_per_current_record_even_with_duplicates():
    baseline = _rows(("T1", "Open"))
    current = _rows(("T1", "Open"), ("T1", "Done"))
    out = reconcile(baseline, current, "TaskID", "Status")
    assert len(out) == 2
    assert not out[0].status_changed
    assert out[1].status_change_label == "Open → Done"


def test_duplicate_baseline_ids_first_match_wins():
    baseline = _rows(("T1", "Open"), ("T1", "Blocked"))
    out = reconcile(baseline, _rows(("T1", "Blocked")), "TaskID", "Status")
    assert out[0].status_changed
    assert out[0].status_change_label == "Open → Blocked"
    assert build_baseline_index(baseline, "TaskID")["T1"]["Status"] == "Open"


def test_status_compared_exactly():
    out = reconcile(_rows(("T1", "open")), _rows(("T1", "Open ")), "TaskID", "Status")
    assert out[0].status_change_label == "open → Open "


def test_missing_status_field_never_changes():
    baseline = [{"Key": "a", "State": "x"}]
    current = [{"Key": "a", "State": "y"}]
    out = reconcile(baseline, current, "Key", "Status")
    assert not out[0].status_changed and not out[0].is_new


def test_inputs_are_not_mutated():
    baseline = _rows(("T1", "Open"))
    current = _rows(("T1", "Done"))
    out = reconcile(baseline, current, "TaskID", "Status")
    assert current == [{"TaskID": "T1", "Status": "Done"}]
    assert out[0].values is not current[0]
