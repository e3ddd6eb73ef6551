"""Interactive menu for editing a ring of characters."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from kpworks.ringlist import RingList

MENU = (
    "\n"
    "0)Выход\n"
    "1)Распечатать список\n"
    "2)Добавить элемент в начало\n"
    "3)Добавить элемент в конец\n"
    "4)Добавить элемент по индексу\n"
    "5)Удалить элемент в начале\n"
    "6)Удалить элемент в конце\n"
    "7)Удалить элемент по индексу\n"
    "8)Узнать размер списка\n"
    "9)Удалить k последних элементов\n"
    "\n"
    "Введите номер желаемого действия\n"
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


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu over standard input until the user chooses to leave."""
    out = sys.stdout
    scanner = _Scanner(sys.stdin)
    ring = RingList()
    try:
        while True:
            out.write(MENU)
            try:
                choice = scanner.read_int()
            except ValueError:
                out.write("Такого действия не существует\n")
                continue
            if choice == 0:
                out.write("\nЗавершение работы...\n")
                return 0
            if choice == 1:
                out.write(ring.render() + "\n")
            elif choice in (2, 3):
                _prompt(out, "Введите литеру: ")
                element = scanner.read_word(1)
                (ring.push_front if choice == 2 else ring.push_back)(element)
            elif choice == 4:
                _prompt(out, "Введите номер индекса: ")
                index = scanner.read_int()
                _prompt(out, "Введите литеру: ")
                element = scanner.read_word(1)
                try:
                    ring.insert(index, element)
                except IndexError as exc:
                    out.write(f"{exc}\n")
            elif choice in (5, 6):
                try:
                    ring.pop_front() if choice == 5 else ring.pop_back()
                except IndexError as exc:
                    out.write(f"{exc}\n")
                out.write("Удаление завершено!\n")
                out.write(ring.render() + "\n")
            elif choice == 7:
                _prompt(out, "Введите номер индекса: ")
                index = scanner.read_int()
                before = len(ring)
                try:
                    ring.delete(index)
                except IndexError as exc:
                    out.write(f"{exc}\n")
                if len(ring) != before:
                    out.write("Удаление завершено!\n")
                out.write(ring.render() + "\n")
            elif choice == 8:
                out.write(f"Размер списка: {len(ring)}\n")
            elif choice == 9:
                _prompt(out, "Введите значение k:")
                k = scanner.read_int()
                try:
                    ring.drop_last(k)
                except ValueError:
                    out.write("Значение k не может быть отрицательным\n")
                out.write(ring.render() + "\n")
            else:
                out.write("Такого действия не существует\n")
    except (EOFError, ValueError):
        return 0


if __name__ == "__main__":
    sys.exit(main())