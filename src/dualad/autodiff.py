"""
##################################################
Automatic differentiation (:mod:`dualad.autodiff`)
##################################################

.. currentmodule:: dualad.autodiff

This module provides differential operators for univariate scalar-valued functions.

.. autosummary::
    :toctree: generated/

    deriv
    value_and_deriv

"""

from collections.abc import Callable
from typing import Any

import numpy as np

from dualad.dual import Dual


def _evaluate(fun: Callable, x, args, kwargs, dtype) -> tuple[Any, Any]:
    seed = Dual.seed_variable(x, dtype=dtype)
    tmp = fun(seed, *args, **kwargs)

    if isinstance(tmp, Dual):
        return tmp.real, tmp.derivative

    return tmp, seed.dtype(0)


def deriv(
    fun: Callable[..., Any], *, dtype: type[np.floating] | None = None
) -> Callable[..., Any]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. Its first positional argument is the variable; the
        remaining arguments are passed through unchanged and treated as constants.
    dtype : type[numpy.floating], optional
        Floating type of the seeded variable.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must be written in terms of the operators and functions supported by
    :class:`~dualad.dual.Dual`, e.g. :mod:`dualad.function`. A function returning a
    plain number is regarded as a constant and its derivative is zero.

    Examples
    --------
    >>> from dualad import function as dlf
    >>> f = lambda x: x**2 + dlf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398
    """

    def result(x, /, *args, **kwargs):
        return _evaluate(fun, x, args, kwargs, dtype)[1]

    return result


def value_and_deriv(
    fun: Callable[..., Any], *, dtype: type[np.floating] | None = None
) -> Callable[..., tuple[Any, Any]]:
    """Return a function that evaluates the univariate scalar-valued function together
    with its derivative.

    Parameters
    ----------
    fun : Callable
        Differentiated function (cf. :func:`deriv`).
    dtype : type[numpy.floating], optional
        Floating type of the seeded variable.

    Returns
    -------
    Callable
        Function returning the pair ``(fun(x), fun'(x))``.

    Examples
    --------
    >>> from dualad import function as dlf
    >>> f = value_and_deriv(lambda x: x * dlf.exp(x))
    >>> value, slope = f(0.0)
    >>> print(value, slope)
    0.0 1.0
    """

    def result(x, /, *args, **kwargs):
        return _evaluate(fun, x, args, kwargs, dtype)

    return result
