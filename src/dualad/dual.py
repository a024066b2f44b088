"""
#################################
Dual numbers (:mod:`dualad.dual`)
#################################

.. currentmodule:: dualad.dual

This module provides the dual number type used for forward-mode automatic
differentiation.

.. autosummary::
    :toctree: generated/

    Dual

"""

from typing import Self, final

import numpy as np

from dualad.context import getcontext
from dualad.misc.formatspec import FormatSpec
from dualad.typing import FloatType, RealLike


def _resolve_dtype(*values: object, dtype: FloatType | None = None) -> FloatType:
    if dtype is not None:
        if not (isinstance(dtype, type) and issubclass(dtype, np.floating)):
            raise TypeError(f"dtype must be a numpy floating type, not {dtype!r}")

        return dtype

    for value in values:
        if isinstance(value, np.floating):
            return type(value)

    return getcontext().dtype


def _convert[T: np.floating](value: object, dtype: type[T]) -> T:
    match value:
        case np.floating():
            if type(value) is not dtype:
                raise TypeError("mixing precisions is not supported")

            return value  # type: ignore

        case np.integer() | int() | float():
            return dtype(value)

        case _:
            raise TypeError(f"expected a real number, not {type(value).__name__!r}")


@final
class Dual[T: np.floating]:
    r"""Dual number.

    A dual number :math:`a+a'\varepsilon` with :math:`\varepsilon^2=0` carries the
    value :math:`a` of an expression together with its first derivative :math:`a'`
    with respect to one seeded variable. Substituting a dual number for a real
    variable in an expression built from arithmetic operators and the elementary
    functions of this class yields the exact derivative of the expression.

    Parameters
    ----------
    real : T | int | float
        Value part.
    dual : T | int | float
        Derivative part.
    dtype : type[numpy.floating], optional
        Floating type of both components. If omitted, it is taken from whichever
        component is a NumPy floating scalar, falling back to
        :attr:`Context.dtype <dualad.context.Context.dtype>`.

    Attributes
    ----------
    real : T
    dual : T
    derivative : T
        Alias of `dual`.
    dtype : type[T]

    Raises
    ------
    TypeError
        If a component is not a real number, or the components have different
        floating types.

    Warnings
    --------
    A plain scalar combined with a dual number by an arithmetic operator is treated
    as a constant, i.e. its derivative is zero. Use :meth:`seed_variable` to create
    the variable being differentiated.

    Notes
    -----
    Instances are immutable and hashable. Equality is exact; no tolerance is applied.
    Out-of-domain arguments (division by zero, the logarithm of a non-positive
    number, the square root of a negative number) are not checked and result in
    ``nan`` or ``inf`` following IEEE 754. See :class:`~dualad.context.Context`
    for the error policy.

    Examples
    --------
    >>> x = Dual(3.0, 4.0)
    >>> y = Dual(1.0, 2.0)
    >>> print(x * y)
    3.0+10.0ε
    >>> print(x / y)
    3.0-2.0ε

    The derivative of :math:`x\sin x + 1` at :math:`x=0`:

    >>> x = Dual.seed_variable(0.0)
    >>> print((x * x.sin() + 1).derivative)
    0.0
    """

    __slots__ = ("_real", "_dual")
    __array_ufunc__ = None
    _real: T
    _dual: T

    def __init__(
        self, real: T | RealLike, dual: T | RealLike, *, dtype: type[T] | None = None
    ):
        dtype = _resolve_dtype(real, dual, dtype=dtype)  # type: ignore
        object.__setattr__(self, "_real", _convert(real, dtype))
        object.__setattr__(self, "_dual", _convert(dual, dtype))

    @classmethod
    def _make(cls, real: T, dual: T) -> Self:
        result = object.__new__(cls)
        object.__setattr__(result, "_real", real)
        object.__setattr__(result, "_dual", dual)
        return result

    @classmethod
    def seed_variable(cls, value: T | RealLike, *, dtype: type[T] | None = None) -> Self:
        """Return the independent variable at `value`.

        The derivative part is one.

        Examples
        --------
        >>> print(Dual.seed_variable(2.5))
        2.5+1.0ε
        """
        return cls(value, 1, dtype=dtype)

    @classmethod
    def constant(cls, value: T | RealLike, *, dtype: type[T] | None = None) -> Self:
        """Return `value` as a constant.

        The derivative part is zero.

        Examples
        --------
        >>> print(Dual.constant(2.5))
        2.5+0.0ε
        """
        return cls(value, 0, dtype=dtype)

    @classmethod
    def zero(cls, dtype: type[T] | None = None) -> Self:
        """Additive identity."""
        return cls(0, 0, dtype=dtype)

    @classmethod
    def one(cls, dtype: type[T] | None = None) -> Self:
        """Multiplicative identity.

        Both parts are one. This is not ``Dual.constant(1)``.
        """
        return cls(1, 1, dtype=dtype)

    @property
    def real(self) -> T:
        return self._real

    @property
    def dual(self) -> T:
        return self._dual

    @property
    def derivative(self) -> T:
        return self._dual

    @property
    def dtype(self) -> type[T]:
        return type(self._real)

    def copy(self) -> Self:
        return self._make(self._real, self._dual)

    def is_zero(self) -> bool:
        return bool(self._real == 0 and self._dual == 0)

    def sin(self) -> Self:
        """Sine."""
        a = self._real

        with getcontext().errstate():
            return self._make(np.sin(a), self._dual * np.cos(a))

    def cos(self) -> Self:
        """Cosine."""
        a = self._real

        with getcontext().errstate():
            return self._make(np.cos(a), -self._dual * np.sin(a))

    def tan(self) -> Self:
        """Tangent.

        This is computed as ``self.sin() / self.cos()``.
        """
        return self.sin() / self.cos()

    def exp(self) -> Self:
        """Exponential."""
        with getcontext().errstate():
            tmp = np.exp(self._real)
            return self._make(tmp, self._dual * tmp)

    def ln(self) -> Self:
        """Natural logarithm.

        The result is ``nan`` for a negative real part, and ``-inf`` for zero.
        """
        a = self._real

        with getcontext().errstate():
            return self._make(np.log(a), self._dual / a)

    log = ln

    def sqrt(self) -> Self:
        """Square root.

        The derivative part diverges if the real part is zero.
        """
        with getcontext().errstate():
            tmp = np.sqrt(self._real)
            return self._make(tmp, self._dual / (self.dtype(2) * tmp))

    def _coerce(self, value: object) -> Self | None:
        match value:
            case Dual():
                if value.dtype is not self.dtype:
                    raise TypeError("mixing precisions is not supported")

                return value  # type: ignore

            case np.floating() | np.integer() | int() | float():
                return self.constant(value, dtype=self.dtype)

            case _:
                return None

    def _is_negative_dual(self) -> bool:
        return bool(not np.isnan(self._dual) and np.signbit(self._dual))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(real={self._real}, dual={self._dual}, "
            f"dtype={self.dtype.__name__})"
        )

    def __str__(self) -> str:
        symbol = getcontext().symbol

        if self._is_negative_dual():
            return f"{self._real}-{-self._dual}{symbol}"

        return f"{self._real}+{self._dual}{symbol}"

    def __format__(self, format_spec: str) -> str:
        spec = FormatSpec.fromstr(format_spec)

        if not spec:
            return self.__str__()

        numeric = spec.numeric()
        real = numeric.format(self._real)

        if self._is_negative_dual():
            sign, magnitude = "-", -self._dual
        else:
            sign, magnitude = "+", self._dual

        dual = numeric.replace(sign="-", z=False).format(magnitude)
        return spec.layout().format(f"{real}{sign}{dual}{getcontext().symbol}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        if other.dtype is not self.dtype:  # type: ignore
            raise TypeError("mixing precisions is not supported")

        return bool(other._real == self._real and other._dual == self._dual)  # type: ignore

    def __hash__(self) -> int:
        return hash((self._real, self._dual))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __add__(self, rhs: Self | RealLike) -> Self:
        if (other := self._coerce(rhs)) is None:
            return NotImplemented

        with getcontext().errstate():
            return self._make(self._real + other._real, self._dual + other._dual)

    def __sub__(self, rhs: Self | RealLike) -> Self:
        if (other := self._coerce(rhs)) is None:
            return NotImplemented

        with getcontext().errstate():
            return self._make(self._real - other._real, self._dual - other._dual)

    def __mul__(self, rhs: Self | RealLike) -> Self:
        if (other := self._coerce(rhs)) is None:
            return NotImplemented

        with getcontext().errstate():
            dual = self._dual * other._real + self._real * other._dual
            return self._make(self._real * other._real, dual)

    def __truediv__(self, rhs: Self | RealLike) -> Self:
        if (other := self._coerce(rhs)) is None:
            return NotImplemented

        b = other._real

        with getcontext().errstate():
            dual = (self._dual * b - self._real * other._dual) / (b * b)
            return self._make(self._real / b, dual)

    def __pow__(self, rhs: int | np.integer) -> Self:
        if not isinstance(rhs, int | np.integer):
            return NotImplemented

        rhs = int(rhs)

        if rhs == 0:
            return self.constant(1, dtype=self.dtype)

        a = self._real

        with getcontext().errstate():
            dual = self.dtype(rhs) * a ** (rhs - 1) * self._dual
            return self._make(a**rhs, dual)

    def __neg__(self) -> Self:
        return self._make(-self._real, -self._dual)

    def __pos__(self) -> Self:
        return self._make(+self._real, +self._dual)

    def __radd__(self, lhs: RealLike) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: RealLike) -> Self:
        if (other := self._coerce(lhs)) is None:
            return NotImplemented

        return other.__sub__(self)

    def __rmul__(self, lhs: RealLike) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: RealLike) -> Self:
        if (other := self._coerce(lhs)) is None:
            return NotImplemented

        return other.__truediv__(self)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def __reduce__(self):
        return (type(self), (self._real, self._dual))
