"""Command that adds two sparse matrices and checks the sum for symmetry."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from kpworks.sparse import read_matrix


def main(argv: Sequence[str] | None = None) -> int:
    """Add the matrices stored in two files and report the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Используйте: kpworks-sparse <filename> <filename>")
        return 1
    out = sys.stdout
    out.write("Вас приветствует программа по обработке разряженных матриц!\n")
    try:
        first = read_matrix(args[0])
        second = read_matrix(args[1])
    except OSError:
        out.write("Не удалось открыть файл!\n")
        return 0
    except ValueError as exc:
        out.write(f"Ошибка чтения матрицы: {exc}\n")
        return 0
    for number, matrix in ((1, first), (2, second)):
        out.write(f"\nИсходная матрица {number} равна:\n")
        out.write(matrix.render())
        out.write("\n")
    out.write("\nРезультат функции:\n")
    try:
        total = first.add(second)
    except ValueError:
        out.write("Невозможно сложить\n")
        return 0
    out.write("\nПолученная матрица равна:\n")
    out.write(total.render())
    out.write("\n")
    out.write("\nСимметрична" if total.is_symmetric() else "\n Не симметрична")
    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())