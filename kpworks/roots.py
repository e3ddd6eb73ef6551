"""Root finding by bisection, fixed-point iteration and Newton's method."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Sequence

Func = Callable[[float], float]


class MethodNotApplicable(ValueError):
    """Raised when a method's convergence condition fails on the interval."""


def machine_epsilon() -> float:
    """Return the smallest power of two that still changes 1 when added."""
    eps = 1.0
    while 1 + eps / 2.0 != 1:
        eps /= 2.0
    return eps


def f9(x: float) -> float:
    return x * x - math.log(1 + x) - 3


def f9_iteration(x: float) -> float:
    return (math.log(1 + x) + 3) / x


def f9_iteration_derivative(x: float) -> float:
    return (-2 * x - (1 + x) * math.log(1 + x) - 3) / (x * x + x * x * x)


def f9_derivative(x: float) -> float:
    return 2 * x - 1 / (1 + x)


def f9_second_derivative(x: float) -> float:
    return (2 * x * x + 4 * x + 3) / ((1 + x) * (1 + x))


def f10(x: float) -> float:
    return 2 * x * math.sin(x) - math.cos(x)


def f10_iteration(x: float) -> float:
    return 1 / (2 * math.tan(x))


def f10_iteration_derivative(x: float) -> float:
    return (-1 / (math.sin(x) * math.sin(x))) / 2


def f10_derivative(x: float) -> float:
    return 3 * math.sin(x) + 2 * x * math.cos(x)


def f10_second_derivative(x: float) -> float:
    return 5 * math.cos(x) - 2 * x * math.sin(x)


def dichotomy(f: Func, a: float, b: float, relative_eps: float, abs_eps: float) -> float:
    """Find a root of f on [a, b] by halving the interval."""
    x = (a + b) / 2
    if f(a) * f(b) >= 0:
        raise MethodNotApplicable("f has the same sign at both ends")
    while abs(a - b) > max(relative_eps * abs(x), abs_eps):
        x = (a + b) / 2
        if f(x) * f(a) < 0:
            b = x
        else:
            a = x
    return x


def iterations(
    phi: Func, phi_derivative: Func, a: float, b: float, relative_eps: float, abs_eps: float
) -> float:
    """Find a fixed point of phi, starting at the middle of [a, b]."""
    x = (a + b) / 2
    if abs(phi_derivative(x)) >= 1:
        raise MethodNotApplicable("phi is not a contraction at the starting point")
    while abs(phi(x) - x) >= max(relative_eps * abs(x), abs_eps):
        x = phi(x)
    return x


def newton(
    f: Func, df: Func, d2f: Func, a: float, b: float, relative_eps: float, abs_eps: float
) -> float:
    """Find a root of f by Newton's method."""
    x = a + b / 2  # starting point a + b/2
    if abs(f(x) * d2f(x)) >= df(x) * df(x):
        raise MethodNotApplicable("convergence condition fails at the starting point")
    while abs(f(x) / df(x)) > max(relative_eps * abs(x), abs_eps):
        x -= f(x) / df(x)
    return x


def _attempt(method: Callable[..., float], *args: object) -> float | None:
    try:
        return method(*args)
    except MethodNotApplicable:
        return None


def _report(d: float | None, i: float | None, n: float | None) -> None:
    for value, found, missing in (
        (d, "Dichotomy method", "The dichotomy method isn't suitable"),
        (i, "Iterations method", "The iterations method isn't suitable"),
        (n, "Newton's method", "The Newton's method isn't suitable"),
    ):
        print(missing if value is None else f"{found}: {value:.10f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve both equations with all three methods and print the results."""
    abs_eps = machine_epsilon()
    relative_eps = math.sqrt(abs_eps)
    problems = (
        (" x^2 - ln(1 + x) - 3 = 0 ", 2.0, 3.0,
         (f9, f9_iteration, f9_iteration_derivative, f9_derivative, f9_second_derivative)),
        (" 2*x*sin(x) - cos(x) = 0 ", 0.4, 1.0,
         (f10, f10_iteration, f10_iteration_derivative, f10_derivative, f10_second_derivative)),
    )
    for number, (title, a, b, (f, phi, dphi, df, d2f)) in enumerate(problems):
        d = _attempt(dichotomy, f, a, b, relative_eps, abs_eps)
        i = _attempt(iterations, phi, dphi, a, b, relative_eps, abs_eps)
        n = _attempt(newton, f, df, d2f, a, b, relative_eps, abs_eps)
        if number:
            print("\n")
        print(f"Machine epsilon for long double = {abs_eps:.16e}")
        print(title)
        _report(d, i, n)
    return 0


if __name__ == "__main__":
    sys.exit(main())