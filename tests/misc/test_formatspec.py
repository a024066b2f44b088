import pytest

from dualad.misc.formatspec import FormatSpec


def test_parse():
    spec = FormatSpec.fromstr("*^+z#012_.3e")
    assert spec.fill == "*"
    assert spec.align == "^"
    assert spec.sign == "+"
    assert spec.z and spec.alt and spec.zfill
    assert spec.width == 12
    assert spec.grouping == "_"
    assert spec.prec == 3
    assert spec.type == "e"
    assert str(spec) == "*^+z#012_.3e"


def test_empty():
    spec = FormatSpec.fromstr("")
    assert spec == FormatSpec()
    assert not spec
    assert str(spec) == ""
    assert FormatSpec.fromstr(".1f")


def test_invalid():
    with pytest.raises(ValueError):
        FormatSpec.fromstr("abc")

    with pytest.raises(ValueError):
        FormatSpec.fromstr(".3s")


def test_split():
    spec = FormatSpec.fromstr("_>10.2f")
    assert str(spec.numeric()) == ".2f"
    assert str(spec.layout()) == "_>10"
    assert spec.replace(prec=4).prec == 4
    assert spec.prec == 2
    assert spec.numeric().format(1.5) == "1.50"
