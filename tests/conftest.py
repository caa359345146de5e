# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from snaptrack.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    # handlers bind sys.stdout at setup time; rebuild per test so capsys sees output
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _no_store_env(monkeypatch):
    monkeypatch.delenv("SNAPTRACK_STORE_DIR", raising=False)
    monkeypatch.delenv("SNAPTRACK_STORE_DISABLED", raising=False)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def baseline_text() -> str:
    return "TaskID\tStatus\nT1\tOpen\nT2\tOpen"


@pytest.fixture()
def update_text() -> str:
    return "TaskID\tStatus\nT1\tDone\nT2\tOpen\nT3\tOpen"


@pytest.fixture()
def task_export_text() -> str:
    # shape of a typical project-tool export
    return (
        "ProjectName\tTaskID\tSubject\tStatus\tAssigned\tTask Due Date\n"
        "Apollo\t101\tLogin page\tDevelopment\tkim\t2024-05-01 00:00:00\n"
        "Apollo\t102\tPassword reset\tDevelopment QA\tlee\t2024-05-03 00:00:00\n"
        "Hermes\t201\tInvoice export\tComplete\tpat\t2024-04-28 00:00:00\n"
    )


@pytest.fixture()
def sample_config_yaml() -> str:
    return """store:
  enabled: true
  directory: ./state
logs_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "tracker.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
