import math

import numpy as np
import pytest

from dualad import function as dlf
from dualad import localcontext
from dualad.dual import Dual


@pytest.mark.parametrize(
    "fun, ref",
    [
        (dlf.sin, math.sin),
        (dlf.cos, math.cos),
        (dlf.tan, math.tan),
        (dlf.exp, math.exp),
        (dlf.log, math.log),
        (dlf.sqrt, math.sqrt),
    ],
)
def test_real_argument(fun, ref):
    for x in (0.3, 1.7, 2):
        assert fun(x) == pytest.approx(ref(x))


@pytest.mark.parametrize("name", ["sin", "cos", "tan", "exp", "sqrt"])
def test_dual_argument(name):
    x = Dual.seed_variable(0.8)
    assert getattr(dlf, name)(x) == getattr(x, name)()


def test_log_dual_argument():
    x = Dual.seed_variable(0.8)
    assert dlf.log(x) == x.ln()


def test_dtype_preserved():
    x = np.float32(0.5)
    assert type(dlf.sin(x)) is np.float32
    assert dlf.exp(Dual.seed_variable(x)).dtype is np.float32


def test_no_domain_error():
    assert np.isnan(dlf.log(-1.0))
    assert dlf.log(0.0) == -math.inf
    assert np.isnan(dlf.sqrt(-4))


def test_error_policy():
    with localcontext(errors="raise"):
        with pytest.raises(FloatingPointError):
            dlf.log(-1.0)

        with pytest.raises(FloatingPointError):
            Dual(1.0, 1.0) / Dual(0.0, 0.0)


def test_unsupported_argument():
    with pytest.raises(TypeError):
        dlf.sin("0.5")

    with pytest.raises(TypeError):
        dlf.exp(1j)


def test_classification():
    z = Dual(1.0, 1.0) / Dual(0.0, 0.0)
    assert dlf.isinf(z)
    assert dlf.isnan(z)
    assert not dlf.isfinite(z)

    x = Dual(1.0, 2.0)
    assert dlf.isfinite(x)
    assert not dlf.isnan(x)
    assert not dlf.isinf(x)

    assert dlf.isnan(Dual(-1.0, 1.0).sqrt())
    assert dlf.isnan(math.nan)
    assert dlf.isinf(-math.inf)
    assert dlf.isfinite(2.0)
