"""Fixed-size numbered record tables with sorting and a plain-text file format.

A table holds up to ``capacity`` records, numbered from 1. Each record is a
name followed by two whole numbers. A table sorts on one of the three
fields. Empty slots always go to the end. A table saves itself as a header
line holding the record count, followed by one ``name first second`` line
per record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def compare_names(left: str, right: str) -> int:
    """Compare two names character by character.

    Returns -1 when ``left`` is greater than ``right`` and 1 otherwise.
    Equal names give 1; of two names where one is a prefix of the other,
    the longer one is the greater.
    """
    for left_char, right_char in zip(left, right):
        if left_char > right_char:
            return -1
        if right_char > left_char:
            return 1
    return -1 if len(left) > len(right) else 1


@dataclass(frozen=True)
class Record:
    """One entry: a single-word name and two whole numbers."""

    name: str
    first: int
    second: int


def _field(record: Record, index: int) -> Union[str, int]:
    return (record.name, record.first, record.second)[index]


@dataclass(frozen=True)
class Schema:
    """Describes one kind of record table.

    ``sort_field`` selects the field to sort by: 0 is the name, 1 the first
    number and 2 the second. ``header`` is the template of the file's first
    line, with ``{}`` standing for the record count. When ``required_positive``
    names a numeric field, a record whose value there is not positive counts
    as an empty slot.
    """

    title: str
    labels: tuple[str, str, str]
    capacity: int
    sort_field: int
    descending: bool = False
    header: str = "{}"
    path: str = "records.txt"
    required_positive: Optional[int] = None
    name_length: int = 30

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        if self.sort_field not in (0, 1, 2):
            raise ValueError("sort_field must be 0, 1 or 2")
        if self.required_positive not in (None, 1, 2):
            raise ValueError("required_positive must be None, 1 or 2")
        if self.header.count("{}") != 1:
            raise ValueError("header must contain exactly one '{}'")
        if self.name_length < 2:
            raise ValueError("name_length must be at least 2")

    def is_present(self, record: Optional[Record]) -> bool:
        """Tell whether ``record`` counts as a filled slot."""
        if record is None:
            return False
        if self.required_positive is None:
            return True
        return _field(record, self.required_positive) > 0  # type: ignore[operator]

    def header_line(self, count: int) -> str:
        """Return the file's first line for ``count`` records."""
        return self.header.format(count)

    def header_pattern(self) -> "re.Pattern[str]":
        """Return a pattern that matches the header and captures the count."""
        prefix, suffix = self.header.split("{}")
        return re.compile(
            r"\s*" + re.escape(prefix.strip()) + r"\s*(-?\d+)\s*"
            + re.escape(suffix.strip())
        )


class RecordTable:
    """A numbered table of records described by a :class:`Schema`."""

    def __init__(self, schema: Schema) -> None:
        self.schema = schema
        self._slots: list[Optional[Record]] = [None] * schema.capacity
        self._sorted = False

    @property
    def is_sorted(self) -> bool:
        """True when the table has been sorted since the last change."""
        return self._sorted

    def _index(self, number: int) -> int:
        if not 1 <= number <= self.schema.capacity:
            raise IndexError(
                f"record number {number} is outside 1..{self.schema.capacity}"
            )
        return number - 1

    def _check_name(self, name: str) -> None:
        if not name or any(ch.isspace() for ch in name):
            raise ValueError("name must be a single non-empty word")
        if len(name) >= self.schema.name_length:
            raise ValueError(
                f"name must be shorter than {self.schema.name_length} characters"
            )

    def put(self, number: int, record: Record) -> None:
        """Store ``record`` in slot ``number`` (1-based), replacing what was there."""
        index = self._index(number)
        self._check_name(record.name)
        self._slots[index] = record
        self._sorted = False

    def get(self, number: int) -> Record:
        """Return the record in slot ``number``.

        Raises IndexError for a number outside the table and KeyError for an
        empty slot.
        """
        record = self._slots[self._index(number)]
        if not self.schema.is_present(record):
            raise KeyError(number)
        assert record is not None
        return record

    def sort(self) -> bool:
        """Sort the records; empty slots move to the end.

        Returns False when the table was already sorted and nothing was done.
        """
        if self._sorted:
            return False
        present = [r for r in self._slots if self.schema.is_present(r)]
        absent = [r for r in self._slots if not self.schema.is_present(r)]
        field_index = self.schema.sort_field
        present.sort(
            key=lambda r: _field(r, field_index),
            reverse=self.schema.descending,
        )
        self._slots = [*present, *absent]
        self._sorted = True
        return True

    def entries(self) -> list[tuple[int, Record]]:
        """Sort if needed, then return ``(number, record)`` for every filled slot."""
        self.sort()
        return [
            (number, record)
            for number, record in enumerate(self._slots, start=1)
            if self.schema.is_present(record)
        ]

    def _present(self) -> list[Record]:
        return [r for r in self._slots if self.schema.is_present(r)]  # type: ignore[misc]

    def dumps(self) -> str:
        """Return the table in its file format, records in slot order."""
        records = self._present()
        lines = [self.schema.header_line(len(records))]
        lines.extend(f"{r.name} {r.first} {r.second}" for r in records)
        return "\n".join(lines) + "\n"

    def loads(self, text: str) -> None:
        """Replace the table's contents with records parsed from ``text``.

        Records fill the slots from number 1 on. Raises ValueError when the
        text is malformed or holds more records than the table can.
        """
        match = self.schema.header_pattern().match(text)
        if match is None:
            raise ValueError("missing or malformed header line")
        count = int(match.group(1))
        if count < 0:
            raise ValueError("record count must not be negative")
        if count > self.schema.capacity:
            raise ValueError(
                f"{count} records do not fit in {self.schema.capacity} slots"
            )
        tokens = text[match.end():].split()
        if len(tokens) < 3 * count:
            raise ValueError("fewer records than the header announces")
        records = []
        for start in range(0, 3 * count, 3):
            name, first, second = tokens[start:start + 3]
            self._check_name(name)
            try:
                records.append(Record(name, int(first), int(second)))
            except ValueError as exc:
                raise ValueError(f"bad number in record {name!r}") from exc
        self._slots = [*records, *[None] * (self.schema.capacity - count)]
        self._sorted = False

    def save(self, path: Optional[PathLike] = None) -> Path:
        """Write the table to ``path`` (the schema's path by default)."""
        target = Path(path if path is not None else self.schema.path)
        target.write_text(self.dumps(), encoding="utf-8")
        return target

    def load(self, path: Optional[PathLike] = None) -> None:
        """Read the table from ``path`` (the schema's path by default)."""
        source = Path(path if path is not None else self.schema.path)
        self.loads(source.read_text(encoding="utf-8"))