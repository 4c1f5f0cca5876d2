"""Small string, sorting and file-filtering exercises."""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TypeVar, Union

T = TypeVar("T")


def join_without_spaces(first: str, second: str) -> str:
    """Concatenate both strings, dropping every space."""
    return (first + second).replace(" ", "")


def blank_every_third(text: str) -> str:
    """Replace every third character (positions 3, 6, 9, ...) with a space."""
    return "".join(" " if index % 3 == 2 else ch for index, ch in enumerate(text))


def count_digits(text: str) -> int:
    """Count the ASCII digits in ``text``."""
    return sum(ch in string.digits for ch in text)


def _selection_sort(items: Sequence[T], key) -> tuple[list[T], list[int]]:
    """Sort descending by ``key``, swapping the first maximum into place.

    Returns the sorted list and the running swap count after each position.
    """
    result = list(items)
    swaps = 0
    history = []
    for start in range(len(result)):
        best = max(range(start, len(result)), key=lambda i: key(result[i]))
        if best != start:
            result[start], result[best] = result[best], result[start]
            swaps += 1
        history.append(swaps)
    return result, history


def sort_by_digit_count(strings: Iterable[str]) -> list[tuple[str, int, int]]:
    """Sort strings by digit count, most digits first.

    Returns ``(string, digit_count, swaps_so_far)`` for each position of the
    sorted order.
    """
    ordered, history = _selection_sort(list(strings), count_digits)
    return [
        (text, count_digits(text), swaps) for text, swaps in zip(ordered, history)
    ]


@dataclass
class Route:
    """A transport route."""

    name: str
    length: int
    stops: int
    cost: int


def sort_routes_by_cost(routes: Iterable[Route]) -> list[Route]:
    """Return the routes ordered from the most to the least expensive."""
    ordered, _ = _selection_sort(list(routes), lambda route: route.cost)
    return ordered


def _chunks(line: str, size: int) -> Iterator[str]:
    for start in range(0, len(line), size):
        yield line[start:start + size]


def filter_lines_ending_with_digit(
    lines: Iterable[str], max_length: int
) -> Iterator[str]:
    """Yield the pieces of text whose last character before the newline is a digit.

    Lines longer than ``max_length`` characters are read in pieces of at
    most ``max_length`` characters, each judged on its own. Pieces are
    yielded unchanged, newline included.
    """
    if max_length < 1:
        raise ValueError("max_length must be positive")
    for line in lines:
        for piece in _chunks(line, max_length):
            content = piece.split("\n", 1)[0]
            if content and content[-1] in string.digits:
                yield piece


def filter_file(path: Union[str, Path], max_length: int) -> Path:
    """Copy the digit-ending pieces of ``path`` into ``path`` + ``.out``.

    Returns the path of the written file.
    """
    source = Path(path)
    target = Path(f"{source}.out")
    with source.open(encoding="utf-8") as inp, target.open("w", encoding="utf-8") as out:
        out.writelines(filter_lines_ending_with_digit(inp, max_length))
    return target