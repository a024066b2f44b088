"""
###############################
Context (:mod:`dualad.context`)
###############################

.. currentmodule:: dualad.context

This module provides the configuration shared by all dual numbers.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Any, Literal, Self

import numpy as np

type ErrorPolicy = Literal["ignore", "warn", "raise", "call", "print", "log"]

_POLICIES: frozenset[str] = frozenset(("ignore", "warn", "raise", "call", "print", "log"))


class Context:
    """Create a new context.

    Parameters
    ----------
    dtype : type[numpy.floating], default=numpy.float64
        Floating type used when neither component of a dual number determines one,
        e.g. ``Dual(3, 4)``.
    symbol : str, default="ε"
        Infinitesimal symbol used by :func:`str` and :func:`format`.
    errors : Literal["ignore", "warn", "raise", "call", "print", "log"], default="ignore"
        Floating-point error policy passed to :class:`numpy.errstate`. With the
        default, division by zero and out-of-domain arguments silently produce
        ``nan`` or ``inf``.

    Examples
    --------
    >>> ctx = Context(symbol="eps")
    >>> ctx.symbol
    'eps'
    >>> ctx.dtype.__name__
    'float64'
    """

    __slots__ = ("_dtype", "_symbol", "_errors")
    _dtype: type[np.floating]
    _symbol: str
    _errors: ErrorPolicy

    def __init__(
        self,
        dtype: type[np.floating] = np.float64,
        symbol: str = "ε",
        errors: ErrorPolicy = "ignore",
    ):
        if not (isinstance(dtype, type) and issubclass(dtype, np.floating)):
            raise TypeError(f"dtype must be a numpy floating type, not {dtype!r}")

        if errors not in _POLICIES:
            raise ValueError(f"unknown error policy: {errors!r}")

        self._dtype = dtype
        self._symbol = symbol
        self._errors = errors

    @property
    def dtype(self) -> type[np.floating]:
        return self._dtype

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def errors(self) -> ErrorPolicy:
        return self._errors

    def copy(self) -> Self:
        return self.__class__(self._dtype, self._symbol, self._errors)

    def errstate(self) -> np.errstate:
        """Return a :class:`numpy.errstate` applying the error policy of the context."""
        return np.errstate(all=self._errors)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dtype={self._dtype.__name__}, "
            f"symbol={self._symbol!r}, errors={self._errors!r})"
        )

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualad")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, **overrides: Any):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Keyword arguments override the corresponding fields of the copy.

    Examples
    --------
    >>> with localcontext(symbol="eps") as ctx:
    ...     print(ctx.symbol)
    eps
    >>> print(getcontext().symbol)
    ε
    """
    if ctx is None:
        ctx = getcontext()

    fields = {"dtype": ctx.dtype, "symbol": ctx.symbol, "errors": ctx.errors}

    for key, value in overrides.items():
        if key not in fields:
            raise TypeError(f"unexpected keyword argument {key!r}")

        fields[key] = value

    ctx = Context(**fields)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
