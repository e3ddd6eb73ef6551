"""A circular list of single characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

OUT_OF_RANGE = "Выход за границы списка!"
EMPTY = "Список пуст!"


class RingList:
    """A ring of characters that can be edited at both ends and by index."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        for item in items:
            self.push_back(item)

    @staticmethod
    def _check(data: str) -> str:
        if not isinstance(data, str) or len(data) != 1:
            raise ValueError("an item must be a single character")
        return data

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"RingList({self._items!r})"

    def push_front(self, data: str) -> None:
        """Put an item before the first one."""
        self._items.insert(0, self._check(data))

    def push_back(self, data: str) -> None:
        """Put an item after the last one."""
        self._items.append(self._check(data))

    def insert(self, index: int, data: str) -> None:
        """Insert an item so that it ends up at position index (0..len)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(OUT_OF_RANGE)
        self._items.insert(index, self._check(data))

    def pop_front(self) -> str:
        """Remove and return the first item."""
        if not self._items:
            raise IndexError(EMPTY)
        return self._items.pop(0)

    def pop_back(self) -> str:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError(EMPTY)
        return self._items.pop()

    def delete(self, index: int) -> str | None:
        """Remove the item at index (0..len) and return it.

        An index equal to the length goes round the ring to the first item.
        Deleting from an empty ring does nothing and returns None.
        """
        if not 0 <= index <= len(self._items):
            raise IndexError(OUT_OF_RANGE)
        if not self._items:
            return None
        return self._items.pop(index % len(self._items))

    def drop_last(self, k: int) -> None:
        """Remove the last k items; nothing happens when k exceeds the length."""
        if k < 0:
            raise ValueError("k must not be negative")
        if k > len(self._items):
            return
        del self._items[len(self._items) - k:]

    def render(self) -> str:
        """Return the items as "(a, b, c)", or a notice when the ring is empty."""
        if not self._items:
            return EMPTY
        return "(" + ", ".join(self._items) + ")"