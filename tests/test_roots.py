import math
import sys

import pytest

from kpworks import roots

EPS = sys.float_info.epsilon
REL = math.sqrt(EPS)


def _numeric_derivative(f, x, h=1e-6):
    return (f(x + h) - f(x - h)) / (2 * h)


def test_machine_epsilon():
    assert roots.machine_epsilon() == EPS


@pytest.mark.parametrize(
    "f, df, x",
    [
        (roots.f9, roots.f9_derivative, 2.5),
        (roots.f9_derivative, roots.f9_second_derivative, 2.5),
        (roots.f9_iteration, roots.f9_iteration_derivative, 2.5),
        (roots.f10, roots.f10_derivative, 0.7),
        (roots.f10_derivative, roots.f10_second_derivative, 0.7),
        (roots.f10_iteration, roots.f10_iteration_derivative, 0.7),
    ],
)
def test_derivatives_agree_with_difference_quotient(f, df, x):
    assert df(x) == pytest.approx(_numeric_derivative(f, x), rel=1e-6)


def test_dichotomy_f9():
    root = roots.dichotomy(roots.f9, 2, 3, REL, EPS)
    assert 2 <= root <= 3
    assert roots.f9(root) == pytest.approx(0, abs=1e-6)


def test_dichotomy_f10():
    root = roots.dichotomy(roots.f10, 0.4, 1, REL, EPS)
    assert 0.4 <= root <= 1
    assert roots.f10(root) == pytest.approx(0, abs=1e-6)


def test_dichotomy_same_sign_raises():
    with pytest.raises(roots.MethodNotApplicable):
        roots.dichotomy(roots.f9, 3, 4, REL, EPS)


def test_iterations_f9_is_fixed_point():
    x = roots.iterations(roots.f9_iteration, roots.f9_iteration_derivative, 2, 3, REL, EPS)
    assert roots.f9_iteration(x) == pytest.approx(x, abs=1e-6)
    assert roots.f9(x) == pytest.approx(0, abs=1e-6)


def test_iterations_f10_not_applicable():
    with pytest.raises(roots.MethodNotApplicable):
        roots.iterations(roots.f10_iteration, roots.f10_iteration_derivative, 0.4, 1, REL, EPS)


def test_newton_agrees_with_dichotomy():
    for f, df, d2f, a, b in (
        (roots.f9, roots.f9_derivative, roots.f9_second_derivative, 2, 3),
        (roots.f10, roots.f10_derivative, roots.f10_second_derivative, 0.4, 1),
    ):
        by_newton = roots.newton(f, df, d2f, a, b, REL, EPS)
        by_halving = roots.dichotomy(f, a, b, REL, EPS)
        assert by_newton == pytest.approx(by_halving, abs=1e-6)


def test_newton_not_applicable():
    with pytest.raises(roots.MethodNotApplicable):
        roots.newton(lambda x: 1.0, lambda x: 0.0, lambda x: 1.0, 0, 1, REL, EPS)


def test_not_applicable_is_value_error():
    with pytest.raises(ValueError):
        roots.dichotomy(roots.f10, 1, 2, REL, EPS)


def test_main_output(capsys):
    assert roots.main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Dichotomy method: ") == 2
    assert out.count("Newton's method: ") == 2
    assert "Iterations method: " in out
    assert "The iterations method isn't suitable" in out
    assert " x^2 - ln(1 + x) - 3 = 0 " in out
    assert " 2*x*sin(x) - cos(x) = 0 " in out