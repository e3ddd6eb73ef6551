"""Table of a Taylor series against the function it expands."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

MAX_ITER = 50

HEADER = (
    "Taylor series value table for function f(x) = (3*x - 5)/(x^2 - 4*x + 3)\n"
    "|_____________________________________________________________ \n"
    "|    x    |       sum of row        |         function        |\n"
    "|_________|_________________________|_________________________|"
)
FOOTER = "|_________|_________________________|_________________________|"


def machine_epsilon() -> float:
    """Return the smallest power of two that still changes 1 when added."""
    eps = 1.0
    while 1 + eps / 2.0 != 1:
        eps /= 2.0
    return eps


def function(x: float) -> float:
    """Evaluate f(x) = (3x - 5) / (x^2 - 4x + 3)."""
    return (3 * x - 5) / (x * x - 4 * x + 3)


def taylor(x: float, n: int) -> float:
    """Sum the first n + 1 terms of the Maclaurin series of f at x."""
    total = 0.0
    three = 3.0
    power = 1.0
    for _ in range(n + 1):
        total -= (1 + 2.0 / three) * power
        three *= 3.0
        power *= x
    return total


def value_table(a: float, b: float, n: int) -> Iterator[tuple[float, float, float]]:
    """Yield (x, series sum, f(x)) for n equal steps from a to b."""
    if n <= 0:
        raise ValueError("the number of steps must be positive")
    step = (b - a) / n
    limit = b + machine_epsilon()

    def rows() -> Iterator[tuple[float, float, float]]:
        x = a
        while x <= limit:
            yield x, taylor(x, MAX_ITER), function(x)
            x += step

    return rows()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the value table; the step count comes from argv or the prompt."""
    args = sys.argv[1:] if argv is None else list(argv)
    raw = args[0] if args else input("Enter the number of iterations: ")
    try:
        n = int(raw)
        rows = value_table(0.0, 0.5, n)
    except ValueError:
        print("Invalid number of iterations", file=sys.stderr)
        return 1
    print(f"Machine epsilon for long double = {machine_epsilon():.16e}")
    print(HEADER)
    for x, series, exact in rows:
        print(f"| {x:.5f} | {series:.20f} | {exact:.20f} |")
    print(FOOTER)
    return 0


if __name__ == "__main__":
    sys.exit(main())