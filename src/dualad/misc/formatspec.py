import dataclasses
import re
from typing import Literal, Self

_PATTERN = re.compile(
    r"(?:(?P<fill>[\s\S])?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<z>z)?"
    r"(?P<alt>#)?"
    r"(?P<zfill>0)?"
    r"(?P<width>\d+)?"
    r"(?P<grouping>[_,])?"
    r"(?:\.(?P<prec>\d+))?"
    r"(?P<type>[eEfFgGn%])?"
)


@dataclasses.dataclass(frozen=True, slots=True)
class FormatSpec:
    r"""Parsed format specification.

    See `Python's documentation
    <https://docs.python.org/3/library/string.html#formatspec>`__ for the meaning of
    each field. Only the presentation types of real numbers are accepted.

    Examples
    --------
    >>> spec = FormatSpec.fromstr("*^12.3f")
    >>> spec.prec, spec.type
    (3, 'f')
    >>> str(spec.numeric())
    '.3f'
    >>> str(spec.layout())
    '*^12'
    """

    fill: str = " "
    align: Literal["<", ">", "=", "^"] | None = None
    sign: Literal["+", "-", " "] = "-"
    z: bool = False
    alt: bool = False
    zfill: bool = False
    width: int | None = None
    grouping: Literal["_", ","] | None = None
    prec: int | None = None
    type: Literal["e", "E", "f", "F", "g", "G", "n", "%"] | None = None

    @classmethod
    def fromstr(cls, format_spec: str) -> Self:
        """Parse `format_spec`.

        Raises
        ------
        ValueError
            If `format_spec` is not a valid specification for real numbers.
        """
        if not format_spec:
            return cls()

        if (match := _PATTERN.fullmatch(format_spec)) is None:
            raise ValueError(f"invalid format specifier: {format_spec!r}")

        fields = {k: v for k, v in match.groupdict().items() if v is not None}

        for flag in ("z", "alt", "zfill"):
            fields[flag] = flag in fields

        for key in ("width", "prec"):
            if key in fields:
                fields[key] = int(fields[key])

        return cls(**fields)

    def numeric(self) -> Self:
        """Return the part of the specification that applies to each number."""
        return dataclasses.replace(self, fill=" ", align=None, zfill=False, width=None)

    def layout(self) -> Self:
        """Return the part of the specification that applies to the whole string."""
        return self.__class__(fill=self.fill, align=self.align, width=self.width)

    def replace(self, **changes) -> Self:
        return dataclasses.replace(self, **changes)

    def format(self, value: object) -> str:
        """Shorthand for ``format(value, str(self))``."""
        return format(value, str(self))

    def __str__(self) -> str:
        result = ""

        if self.align is not None:
            if self.fill != " ":
                result += self.fill

            result += self.align

        if self.sign != "-":
            result += self.sign

        if self.z:
            result += "z"

        if self.alt:
            result += "#"

        if self.zfill:
            result += "0"

        if self.width is not None:
            result += str(self.width)

        if self.grouping is not None:
            result += self.grouping

        if self.prec is not None:
            result += f".{self.prec}"

        if self.type is not None:
            result += self.type

        return result

    def __bool__(self) -> bool:
        return self != self.__class__()
