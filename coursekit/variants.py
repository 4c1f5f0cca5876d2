"""Registry of the record-table variants, each described by a :class:`Schema`.

A variant is named by its number, such as ``"3-9"``. Each one fixes the
fields, the table size, the sort field and direction, the file header and
the default file path.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from coursekit.records import Schema

_SCHEMAS: Mapping[str, Schema] = MappingProxyType(
    {
        "3-1": Schema(
            title="Books",
            labels=("Title", "Pages", "Price"),
            capacity=300,
            sort_field=2,
            header="~{}~",
            path="books.txt",
            required_positive=2,
            name_length=24,
        ),
        "3-3": Schema(
            title="Firms",
            labels=("Name", "Workers", "Authorized capital"),
            capacity=200,
            sort_field=2,
            header="<{}>",
            path="file.db",
            name_length=30,
        ),
        "3-9": Schema(
            title="Firms",
            labels=("Name", "Workers", "Authorized capital"),
            capacity=200,
            sort_field=2,
            header="#{}",
            path="database.txt",
            required_positive=2,
            name_length=30,
        ),
        "3-10": Schema(
            title="Employees",
            labels=("Last name", "Year of birth", "Salary"),
            capacity=300,
            sort_field=1,
            descending=True,
            header="[{}]",
            path="local.db",
            name_length=40,
        ),
        "3-19": Schema(
            title="Routes",
            labels=("Destination", "Distance", "Trips"),
            capacity=100,
            sort_field=0,
            header="> {}",
            path="routes_file.txt",
            name_length=30,
        ),
        "4-1": Schema(
            title="Parts",
            labels=("Name", "Amount", "Weight"),
            capacity=100,
            sort_field=0,
            header="{}",
            path="detailsDb.txt",
            required_positive=1,
            name_length=30,
        ),
        "4-8": Schema(
            title="Students",
            labels=("Last name", "Year", "Scholarship"),
            capacity=100,
            sort_field=1,
            header="{}",
            path="students.db",
            name_length=30,
        ),
        "4-11": Schema(
            title="Firms",
            labels=("Name", "Staff", "Authorized capital"),
            capacity=200,
            sort_field=2,
            descending=True,
            header="#{}",
            path="FirmsDb.txt",
            required_positive=2,
            name_length=30,
        ),
        "4-20": Schema(
            title="Students",
            labels=("Last name", "Year", "Scholarship"),
            capacity=300,
            sort_field=0,
            descending=True,
            header="({})",
            path="database.txt",
            name_length=40,
        ),
    }
)


def _sort_key(name: str) -> tuple[int, ...]:
    return tuple(int(part) for part in name.split("-"))


def variant_names() -> list[str]:
    """Return the names of all known variants in numeric order."""
    return sorted(_SCHEMAS, key=_sort_key)


def get_schema(name: str) -> Schema:
    """Return the schema of variant ``name``; raise KeyError if unknown."""
    try:
        return _SCHEMAS[name.strip()]
    except KeyError:
        raise KeyError(f"unknown variant {name!r}") from None