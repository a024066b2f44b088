"""
###############################################
Mathematical functions (:mod:`dualad.function`)
###############################################

.. currentmodule:: dualad.function

This module provides mathematical functions accepting both dual numbers and plain
real numbers.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    cos
    sin
    tan

Exponents and logarithmic functions
===================================

.. autosummary::
    :toctree: generated/

    exp
    log
    sqrt

Floating-point classification
=============================

.. autosummary::
    :toctree: generated/

    isfinite
    isinf
    isnan

"""

from typing import Any, overload

import numpy as np

from dualad.context import getcontext
from dualad.dual import Dual


def _apply(x, name: str, ufunc: np.ufunc):
    match x:
        case Dual():
            return getattr(x, name)()

        case np.floating() | np.integer() | float() | int():
            with getcontext().errstate():
                return ufunc(x)

        case _:
            raise TypeError(f"unsupported argument type: {type(x).__name__!r}")


@overload
def cos[T: np.floating](x: Dual[T], /) -> Dual[T]: ...


@overload
def cos(x: float | int, /) -> np.float64: ...


@overload
def cos(x: Any, /) -> Any: ...


def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> print(format(cos(1.0), ".6f"))
    0.540302
    >>> print(format(cos(Dual.seed_variable(1.0)), ".6f"))
    0.540302-0.841471ε
    """
    return _apply(x, "cos", np.cos)


@overload
def sin[T: np.floating](x: Dual[T], /) -> Dual[T]: ...


@overload
def sin(x: float | int, /) -> np.float64: ...


@overload
def sin(x: Any, /) -> Any: ...


def sin(x, /):
    """Sine.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    >>> print(format(sin(Dual.seed_variable(1.0)), ".6f"))
    0.841471+0.540302ε
    """
    return _apply(x, "sin", np.sin)


def tan(x, /):
    """Tangent.

    This is computed as ``sin(x) / cos(x)`` for any argument.

    Examples
    --------
    >>> print(format(tan(Dual.seed_variable(0.0)), ".6f"))
    0.000000+1.000000ε
    """
    return sin(x) / cos(x)


@overload
def exp[T: np.floating](x: Dual[T], /) -> Dual[T]: ...


@overload
def exp(x: float | int, /) -> np.float64: ...


@overload
def exp(x: Any, /) -> Any: ...


def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> print(format(exp(Dual.seed_variable(1.0)), ".6f"))
    2.718282+2.718282ε
    """
    return _apply(x, "exp", np.exp)


@overload
def log[T: np.floating](x: Dual[T], /) -> Dual[T]: ...


@overload
def log(x: float | int, /) -> np.float64: ...


@overload
def log(x: Any, /) -> Any: ...


def log(x, /):
    """Natural logarithm.

    Unlike :func:`math.log`, a non-positive argument returns ``nan`` or ``-inf``
    instead of raising :exc:`ValueError`.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    >>> print(log(-1.0))
    nan
    """
    return _apply(x, "ln", np.log)


@overload
def sqrt[T: np.floating](x: Dual[T], /) -> Dual[T]: ...


@overload
def sqrt(x: float | int, /) -> np.float64: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> print(sqrt(Dual.seed_variable(4.0)))
    2.0+0.25ε
    """
    return _apply(x, "sqrt", np.sqrt)


def isnan(x, /) -> bool:
    """Return ``True`` if `x` or either part of the dual number `x` is ``nan``."""
    if isinstance(x, Dual):
        return bool(np.isnan(x.real) or np.isnan(x.dual))

    return bool(np.isnan(x))


def isinf(x, /) -> bool:
    """Return ``True`` if `x` or either part of the dual number `x` is infinite."""
    if isinstance(x, Dual):
        return bool(np.isinf(x.real) or np.isinf(x.dual))

    return bool(np.isinf(x))


def isfinite(x, /) -> bool:
    """Return ``True`` if `x`, or both parts of the dual number `x`, are finite.

    Examples
    --------
    >>> isfinite(Dual(1.0, 1.0) / Dual(0.0, 0.0))
    False
    """
    if isinstance(x, Dual):
        return bool(np.isfinite(x.real) and np.isfinite(x.dual))

    return bool(np.isfinite(x))
