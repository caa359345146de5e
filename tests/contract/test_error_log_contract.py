from __future__ import annotations

import io
import json
from pathlib import Path

from snaptrack.cli import main as cli_main

"""Rejected input is written to logs/errors-*.log as JSON Lines with fixed keys."""


def test_rejected_input_written_to_error_log(temp_workdir: Path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("only header"))
    assert cli_main(["baseline"]) == 2
    logs = sorted((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    record = json.loads(logs[0].read_text(encoding="utf-8").strip())
    assert set(record) == {"timestamp", "operation", "source", "error_type", "message"}
    assert record["operation"] == "baseline"
    assert record["source"] == "<stdin>"
    assert record["error_type"] == "MALFORMED_INPUT"
    assert record["message"] == "Data must include headers and at least one row"


def test_success_writes_no_error_log(temp_workdir: Path, baseline_text: str, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(baseline_text))
    assert cli_main(["baseline", "-"]) == 0
    assert list((temp_workdir / "logs").glob("errors-*.log")) == []
