"""Sparse integer matrices keyed by concatenated row and column numbers."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike


def plus_index(i: int, j: int) -> int:
    """Encode a 1-based position as the decimal digits of i followed by j."""
    return i * 10 ** len(str(j)) + j if j else i


@dataclass
class SparseMatrix:
    """A matrix holding only its nonzero values.

    Values are read line by line; each line holds ``size_row`` values and
    there are ``size_column`` lines.
    """

    size_row: int
    size_column: int
    entries: dict[int, int] = field(default_factory=dict)

    def _positions(self):
        for i in range(1, self.size_column + 1):
            for j in range(1, self.size_row + 1):
                yield i, j

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the element-wise sum; shapes must match."""
        if (self.size_row, self.size_column) != (other.size_row, other.size_column):
            raise ValueError("matrices of different shapes cannot be added")
        total = {}
        for key in sorted(self.entries.keys() | other.entries.keys()):
            value = self.entries.get(key, 0) + other.entries.get(key, 0)
            if value:
                total[key] = value
        return SparseMatrix(self.size_row, self.size_column, total)

    def is_symmetric(self) -> bool:
        """True when the matrix is square and its nonzero pattern is symmetric."""
        if self.size_row != self.size_column:
            return False
        return all(
            plus_index(j, i) in self.entries
            for i, j in self._positions()
            if plus_index(i, j) in self.entries
        )

    def to_dense(self) -> list[list[int]]:
        """Return the values line by line, zeros included."""
        return [
            [self.entries.get(plus_index(i, j), 0) for j in range(1, self.size_row + 1)]
            for i in range(1, self.size_column + 1)
        ]

    def render(self) -> str:
        """Lay the values out tab-separated, starting a line every size_column values."""
        flat = [value for line in self.to_dense() for value in line]
        return "".join(
            ("\n" if k % self.size_column == 0 else "") + f"{value}\t"
            for k, value in enumerate(flat)
        )


def read_matrix(path: str | PathLike[str]) -> SparseMatrix:
    """Read a matrix: two sizes followed by its values, whitespace separated."""
    with open(path, encoding="utf-8") as stream:
        tokens = stream.read().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"{path}: not an integer matrix") from exc
    if len(numbers) < 2:
        raise ValueError(f"{path}: matrix sizes are missing")
    size_row, size_column, *values = numbers
    if size_row <= 0 or size_column <= 0:
        raise ValueError(f"{path}: matrix sizes must be positive")
    entries = {}
    for position, value in enumerate(values):
        if value:
            slow, fast = divmod(position, size_row)
            entries[plus_index(slow + 1, fast + 1)] = value
    return SparseMatrix(size_row, size_column, entries)