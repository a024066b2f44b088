from .autodiff import deriv, value_and_deriv
from .context import Context, getcontext, localcontext, setcontext
from .dual import Dual
from .function import cos, exp, isfinite, isinf, isnan, log, sin, sqrt, tan

__all__ = [
    "deriv",
    "value_and_deriv",
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "Dual",
    "cos",
    "exp",
    "isfinite",
    "isinf",
    "isnan",
    "log",
    "sin",
    "sqrt",
    "tan",
]
