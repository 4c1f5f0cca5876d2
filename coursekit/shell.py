"""Interactive menu for working with one record table."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Callable, Iterator, Optional, Sequence, TextIO

from coursekit.records import Record, RecordTable
from coursekit.variants import get_schema, variant_names

_DEFAULT_VARIANT = "4-20"


class _EndOfInput(Exception):
    """Raised when the input stream runs dry."""


class Shell:
    """Numbered-command menu over a :class:`RecordTable`.

    Input is read as whitespace-separated words, so several answers may be
    given on one line. The session ends on command 0 or at end of input.
    """

    def __init__(
        self,
        table: RecordTable,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.table = table
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = self._read_tokens()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._enter,
            2: self._show_one,
            3: self._sort,
            4: self._show_all,
            5: self._save,
            6: self._load,
        }

    def _read_tokens(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def _ask_int(self, prompt: str) -> int:
        token = self._ask(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"{token!r} is not a whole number") from None

    def _show_menu(self) -> None:
        schema = self.table.schema
        direction = "descending" if schema.descending else "ascending"
        sort_label = schema.labels[schema.sort_field].lower()
        self._say()
        self._say(f"\t{schema.title}: available commands")
        self._say("#1 Enter a record with any number")
        self._say("#2 Show the record with a given number")
        self._say(f"#3 Sort records by {sort_label} in {direction} order")
        self._say("#4 Show all records in sorted order")
        self._say("#5 Save all records to the file")
        self._say("#6 Load records from the file")
        self._say("#0 Exit")

    def _describe(self, number: int, record: Record) -> None:
        labels = self.table.schema.labels
        self._say(f"~ Record {number} ~")
        self._say(f"@ {labels[0]}: {record.name}")
        self._say(f"@ {labels[1]}: {record.first}")
        self._say(f"@ {labels[2]}: {record.second}")

    def _enter(self) -> None:
        labels = self.table.schema.labels
        number = self._ask_int("Number: ")
        name = self._ask(f"@ {labels[0]}: ")
        first = self._ask_int(f"@ {labels[1]}: ")
        second = self._ask_int(f"@ {labels[2]}: ")
        self.table.put(number, Record(name, first, second))

    def _show_one(self) -> None:
        number = self._ask_int("Number: ")
        try:
            record = self.table.get(number)
        except KeyError:
            self._say(f"No record with number {number}")
            return
        self._describe(number, record)

    def _sort(self) -> None:
        if self.table.sort():
            self._say("Table sorted")
        else:
            self._say("Table is already sorted")

    def _show_all(self) -> None:
        if not self.table.is_sorted:
            self._sort()
        entries = self.table.entries()
        if not entries:
            self._say("No records")
        for number, record in entries:
            self._say()
            self._describe(number, record)

    def _save(self) -> None:
        try:
            target = self.table.save()
        except OSError as exc:
            self._say(f"Could not save records: {exc}")
            return
        self._say(f"Records saved to '{target}'")

    def _load(self) -> None:
        try:
            self.table.load()
        except (OSError, ValueError) as exc:
            self._say(f"Could not load records: {exc}")
            return
        self._say(f"Records loaded from '{self.table.schema.path}'")

    def run(self) -> int:
        """Run the menu until command 0 or end of input; return 0."""
        while True:
            self._show_menu()
            try:
                command = self._ask_int("\nCommand: ")
            except _EndOfInput:
                self._say()
                return 0
            except ValueError as exc:
                self._say(f"Wrong command: {exc}")
                continue
            if command == 0:
                return 0
            action = self._actions.get(command)
            if action is None:
                self._say(f"Wrong command number {command}")
                continue
            try:
                action()
            except _EndOfInput:
                self._say()
                return 0
            except (ValueError, IndexError) as exc:
                self._say(f"Invalid input: {exc}")
            self._say("~" * 16)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive session for one record-table variant."""
    parser = argparse.ArgumentParser(
        prog="coursekit", description="Manage a numbered record table."
    )
    parser.add_argument(
        "variant",
        nargs="?",
        default=_DEFAULT_VARIANT,
        choices=variant_names(),
        help="record-table variant (default: %(default)s)",
    )
    parser.add_argument("--path", help="file to save to and load from")
    args = parser.parse_args(argv)

    schema = get_schema(args.variant)
    if args.path:
        schema = dataclasses.replace(schema, path=args.path)
    return Shell(RecordTable(schema)).run()


if __name__ == "__main__":
    raise SystemExit(main())