from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

"""Tab-delimited text reader.

- First line is the header row, every following line is a data row.
- Input shorter than header + one data row is rejected with MalformedInputError.
- Short rows are padded with "" and surplus trailing segments are dropped.
- Records are read-only mappings; copy with dict(record) to edit.

There is no quoting or escaping: a value cannot contain a tab or a newline.
"""

__all__ = [
    "ParseError",
    "MalformedInputError",
    "ParsedTable",
    "parse_tabular",
]

FIELD_DELIMITER = "\t"
MISSING_ROWS_MESSAGE = "Data must include headers and at least one row"


class ParseError(Exception):
    """Base class for errors raised while reading pasted tabular text."""


class MalformedInputError(ParseError):
    """Raised when the input lacks a header line or any data line."""

    def __init__(self, message: str = MISSING_ROWS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ParsedTable:
    header: tuple[str, ...]  # column order == display order
    records: tuple[Mapping[str, str], ...]

    def __len__(self) -> int:
        return len(self.records)


def _split_fields(line: str) -> list[str]:
    return [segment.strip() for segment in line.split(FIELD_DELIMITER)]


def parse_tabular(text: str) -> ParsedTable:
    """Parse tab-delimited text into a header and string-valued records.

    Steps:
    1. Trim the whole input and split it into lines
    2. Require at least 2 lines (header + one data row)
    3. Split the header on tabs, trimming each name
    4. Match each data line to the header by position

    Duplicate header names are not rejected: the later column overwrites the
    earlier one in each record.
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise MalformedInputError()

    header = tuple(_split_fields(lines[0]))
    records: list[Mapping[str, str]] = []
    for line in lines[1:]:
        values = _split_fields(line)
        record: dict[str, str] = {}
        for index, name in enumerate(header):
            record[name] = values[index] if index < len(values) else ""
        records.append(MappingProxyType(record))

    return ParsedTable(header=header, records=tuple(records))
