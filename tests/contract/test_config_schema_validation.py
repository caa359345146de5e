from __future__ import annotations

import json

import jsonschema
import pytest
import yaml
from jsonschema.exceptions import ValidationError

from snaptrack.config.loader import SCHEMA_PATH

"""Config schema contract: the shipped example validates, unknown keys do not."""


def _schema():
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_config_schema_accepts_example(sample_config_yaml: str):
    jsonschema.validate(yaml.safe_load(sample_config_yaml), _schema())


def test_config_schema_accepts_empty_mapping():
    jsonschema.validate({}, _schema())


@pytest.mark.parametrize(
    "data",
    [
        {"store": {"enabled": True, "directory": ""}},
        {"store": {"path": "x"}},
        {"logs_directory": 5},
        {"database": {}},
    ],
)
def test_config_schema_rejects(data):
    with pytest.raises(ValidationError):
        jsonschema.validate(data, _schema())
