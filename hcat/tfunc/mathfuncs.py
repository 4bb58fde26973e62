"""Arithmetic template functions.

Each function takes its operands in pipe order: ``{{ 3 | subtract 2 }}``
calls ``subtract(2, 3)`` and yields ``3 - 2``. Only integers and floats are
accepted; booleans and every other type raise :class:`TypeError`.
"""

from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def _check(name: str, value: object, *, allow_float: bool = True) -> Number:
    """Return *value* if it is a usable number, otherwise raise TypeError."""
    allowed = (int, float) if allow_float else (int,)
    if isinstance(value, bool) or not isinstance(value, allowed):
        raise TypeError(
            f"{name}: unknown type for {value!r} ({type(value).__name__})"
        )
    return value


def _operands(name: str, b: object, a: object, *, allow_float: bool = True):
    # The left operand is validated first so its error wins.
    left = _check(name, a, allow_float=allow_float)
    right = _check(name, b, allow_float=allow_float)
    return left, right


def _is_float(*values: Number) -> bool:
    return any(isinstance(v, float) for v in values)


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _float_div(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def add(b, a):
    """Return ``a + b``."""
    left, right = _operands("add", b, a)
    return left + right


def subtract(b, a):
    """Return ``a - b``."""
    left, right = _operands("subtract", b, a)
    return left - right


def multiply(b, a):
    """Return ``a * b``."""
    left, right = _operands("multiply", b, a)
    return left * right


def divide(b, a):
    """Return ``a / b``; integer operands divide with truncation toward zero."""
    left, right = _operands("divide", b, a)
    if _is_float(left, right):
        return _float_div(float(left), float(right))
    return _trunc_div(left, right)


def modulo(b, a):
    """Return the remainder of ``a / b``, carrying the sign of ``a``.

    Only integers are accepted.
    """
    left, right = _operands("modulo", b, a, allow_float=False)
    return left - right * _trunc_div(left, right)


def minimum(b, a):
    """Return the smaller of ``a`` and ``b``, keeping its type."""
    left, right = _operands("minimum", b, a)
    return left if left < right else right


def maximum(b, a):
    """Return the larger of ``a`` and ``b``, keeping its type."""
    left, right = _operands("maximum", b, a)
    return left if left > right else right