"""Interactive menu over a keyed table stored in a text file."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from kpworks.table import (
    KEY_SIZE,
    binary_search,
    format_table,
    is_sorted,
    is_sorted_descending,
    read_table,
    shake_sort,
    write_table,
)

MENU = (
    "\nВыберите дейтсвие:\n"
    "0)Выход\n"
    "1)Отсортировать таблицу\n"
    "2)Найти строку по ключу\n"
    "3)Распечатать таблицу\n"
    "4)Перезаписать файл\n"
)


class _Scanner:
    """Reads whitespace-separated numbers and words from a text stream."""

    _INT = re.compile(r"[+-]?\d+")
    _WORD = re.compile(r"\S+")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0

    def _ready(self) -> None:
        while True:
            while self._pos < len(self._line) and self._line[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._line):
                return
            self._line = self._stream.readline()
            self._pos = 0
            if not self._line:
                raise EOFError

    def read_int(self) -> int:
        self._ready()
        match = self._INT.match(self._line, self._pos)
        if match is None:
            self._pos = self._WORD.match(self._line, self._pos).end()
            raise ValueError("not a number")
        self._pos = match.end()
        return int(match.group())

    def read_word(self, limit: int) -> str:
        self._ready()
        word = self._WORD.match(self._line, self._pos).group()[:limit]
        self._pos += len(word)
        return word


def main(argv: Sequence[str] | None = None) -> int:
    """Load the table named in argv and serve the menu on standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if len(args) != 1:
        out.write("Используйте: kpworks-table <filename>\n")
        return 1
    filename = args[0]
    try:
        table = read_table(filename)
    except OSError:
        out.write("Не удалось открыть файл.\n")
        return 1
    out.write("Исходная таблица выглядит так:\n")
    out.write(format_table(table))
    scanner = _Scanner(sys.stdin)
    try:
        while True:
            out.write(MENU)
            try:
                choice = scanner.read_int()
            except ValueError:
                out.write("Указанного действия не существует!\n")
                continue
            if choice == 0:
                return 0
            if choice == 1:
                shake_sort(table)
                out.write(format_table(table))
            elif choice == 2:
                if is_sorted_descending(table):
                    ordered = table[::-1]
                elif is_sorted(table):
                    ordered = table
                else:
                    out.write("Для начала отсортируйте таблицу!\n")
                    continue
                out.write("Введите ключ: ")
                out.flush()
                found = binary_search(ordered, scanner.read_word(KEY_SIZE))
                if found is None:
                    out.write("Указанного ключа в таблице нет\n")
                else:
                    out.write(f"| {found.key:>6} | {found.string} |\n")
            elif choice == 3:
                out.write(format_table(table))
            elif choice == 4:
                try:
                    write_table(filename, table)
                except OSError:
                    out.write("Не удалось открыть файл.\n")
                else:
                    out.write("Файл успешно перезаписан!\n")
            else:
                out.write("Указанного действия не существует!\n")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())