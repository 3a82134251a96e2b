"""
Scientific functions behind the calculator's single-operand keys.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Union

from kalkulator.config import FACTORIAL_LIMIT

Number = Union[int, float]


class DisplayError(ValueError):
    """A value the calculator can only show as the error text."""


class UnaryFunction(Enum):
    SQRT = "sqrt"
    SQUARE = "square"
    RECIPROCAL = "reciprocal"
    PERCENT = "percent"
    FACTORIAL = "factorial"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG10 = "log10"
    LN = "ln"
    NEGATE = "negate"


class Constant(Enum):
    PI = "pi"
    E = "e"


CONSTANT_VALUES: Dict[Constant, float] = {
    Constant.PI: math.pi,
    Constant.E: math.e,
}


def factorial(x: float, limit: int = FACTORIAL_LIMIT) -> int:
    """Exact factorial of ``x`` truncated toward zero.

    Raises DisplayError for negative input or input above ``limit``.
    """
    n = int(x)
    if n < 0 or n > limit:
        raise DisplayError(f"factorial undefined for {n}")
    return math.factorial(n)


# angles are in degrees
def sin(x): return math.sin(math.radians(x))
def cos(x): return math.cos(math.radians(x))
def tan(x): return math.tan(math.radians(x))


_FUNCTIONS: Dict[UnaryFunction, Callable[[float], Number]] = {
    UnaryFunction.SQRT: math.sqrt,
    UnaryFunction.SQUARE: lambda x: x * x,
    UnaryFunction.RECIPROCAL: lambda x: 1 / x,
    UnaryFunction.PERCENT: lambda x: x / 100,
    UnaryFunction.SIN: sin,
    UnaryFunction.COS: cos,
    UnaryFunction.TAN: tan,
    UnaryFunction.LOG10: math.log10,
    UnaryFunction.LN: math.log,
    UnaryFunction.NEGATE: lambda x: -x,
}


def apply_unary(fn: UnaryFunction, x: float, factorial_limit: int = FACTORIAL_LIMIT) -> Number:
    """
    Applies ``fn`` to ``x``.

    math domain errors (sqrt(-1), log(0), ...) propagate as ValueError,
    out-of-range factorials as DisplayError.
    """
    if fn is UnaryFunction.FACTORIAL:
        return factorial(x, factorial_limit)
    return _FUNCTIONS[fn](x)
