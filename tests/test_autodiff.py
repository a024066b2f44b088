import math

import mpmath
import numpy as np
import pytest

from dualad import function as dlf
from dualad.autodiff import deriv, value_and_deriv


def test_deriv():
    df = deriv(lambda x: (x + dlf.sin(x**2)) / x)
    assert df(1.4) == pytest.approx(-1.23095, 1e-5)

    df = deriv(lambda x: x**2 + dlf.sqrt(x + 3))
    assert df(1.2) == pytest.approx(2.64398, 1e-5)


@pytest.mark.parametrize("x", [0.3, 0.7, 1.9, 4.2])
def test_deriv_against_mpmath(x):
    def f(t):
        return dlf.sin(t) * dlf.exp(t) / dlf.sqrt(t) + dlf.log(t) * dlf.cos(2 * t)

    def g(t):
        return mpmath.sin(t) * mpmath.exp(t) / mpmath.sqrt(t) + mpmath.log(t) * mpmath.cos(2 * t)

    expected = float(mpmath.diff(g, x))
    assert deriv(f)(x) == pytest.approx(expected, rel=1e-10)


def test_tan_against_mpmath():
    expected = float(mpmath.diff(lambda t: mpmath.tan(t) ** 3, 0.4))
    assert deriv(lambda t: dlf.tan(t) ** 3)(0.4) == pytest.approx(expected, rel=1e-10)


def test_extra_arguments_are_constants():
    df = deriv(lambda x, a, *, b: a * x**2 + b)
    assert df(3.0, 2.0, b=7.0) == pytest.approx(12.0)


def test_constant_function():
    df = deriv(lambda x: 5.0)
    assert df(2.0) == 0.0

    value, slope = value_and_deriv(lambda x: 5.0)(2.0)
    assert value == 5.0
    assert slope == 0.0


def test_value_and_deriv():
    f = value_and_deriv(lambda x: x * dlf.exp(x))
    value, slope = f(1.0)
    assert value == pytest.approx(math.e)
    assert slope == pytest.approx(2 * math.e)


def test_dtype():
    df = deriv(lambda x: dlf.cos(x) * 3, dtype=np.float32)
    result = df(0.5)
    assert type(result) is np.float32
    assert result == pytest.approx(-3 * math.sin(0.5), rel=1e-6)
