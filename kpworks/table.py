"""A keyed table of text lines: reading, sorting and searching."""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from itertools import pairwise
from os import PathLike

KEY_SIZE = 5
RULE = "|============================================|"
TITLE = "|  Ключ  | Значение                          |"

_LINE = re.compile(r"\s*(\S{1,%d})\s*([^\n]*)" % KEY_SIZE)


@dataclass(frozen=True)
class Entry:
    """One row of the table: a short key and its line of text."""

    key: str
    string: str


def shake_sort(entries: MutableSequence[Entry]) -> None:
    """Sort entries in place by key with a cocktail shaker sort."""
    left, right = 0, len(entries) - 1
    swapped = True
    while left < right and swapped:
        swapped = False
        for i in range(left, right):
            if entries[i].key > entries[i + 1].key:
                entries[i], entries[i + 1] = entries[i + 1], entries[i]
                swapped = True
        right -= 1
        for i in range(right, left, -1):
            if entries[i - 1].key > entries[i].key:
                entries[i - 1], entries[i] = entries[i], entries[i - 1]
                swapped = True
        left += 1


def binary_search(entries: Sequence[Entry], key: str) -> Entry | None:
    """Find an entry by key in a table sorted ascending; None if absent."""
    left, right = 0, len(entries) - 1
    while left <= right:
        middle = (left + right) // 2
        found = entries[middle]
        if key < found.key:
            right = middle - 1
        elif key > found.key:
            left = middle + 1
        else:
            return found
    return None


def is_sorted(entries: Sequence[Entry]) -> bool:
    """True when keys never decrease."""
    return all(a.key <= b.key for a, b in pairwise(entries))


def is_sorted_descending(entries: Sequence[Entry]) -> bool:
    """True when keys never increase."""
    return all(a.key >= b.key for a, b in pairwise(entries))


def format_table(entries: Iterable[Entry]) -> str:
    """Lay the table out with a framed header, one row per line."""
    lines = [RULE, TITLE, RULE]
    lines.extend(f"| {e.key:>6} | {e.string:<41} " for e in entries)
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def _parse_line(line: str) -> Entry | None:
    match = _LINE.match(line)
    if match is None:
        return None
    return Entry(match.group(1), match.group(2))


def read_table(path: str | PathLike[str]) -> list[Entry]:
    """Read "key text" lines; a key is at most five non-blank characters."""
    with open(path, encoding="utf-8") as stream:
        return [entry for line in stream if (entry := _parse_line(line)) is not None]


def write_table(path: str | PathLike[str], entries: Iterable[Entry]) -> None:
    """Write the table back as "key text" lines."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.writelines(f"{e.key} {e.string}\n" for e in entries)