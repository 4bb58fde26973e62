import math

import pytest

from hcat.tfunc.mathfuncs import (
    add,
    divide,
    maximum,
    minimum,
    modulo,
    multiply,
    subtract,
)


@pytest.mark.parametrize(
    "func, b, a, expected",
    [
        (add, 2, 2, 4),
        (subtract, 2, 2, 0),
        (multiply, 2, 2, 4),
        (divide, 2, 2, 1),
        (modulo, 2, 3, 1),
        (minimum, 2, 3, 2),
        (maximum, 2, 3, 3),
    ],
)
def test_source_cases(func, b, a, expected):
    assert func(b, a) == expected


def test_pipe_order():
    assert subtract(2, 10) == 8
    assert divide(2, 10) == 5


def test_mixed_int_float():
    assert add(1.5, 2) == 3.5
    assert multiply(0.5, 4) == 2.0
    assert divide(2, 5.0) == 2.5


def test_integer_division_truncates_toward_zero():
    assert divide(2, -7) == -3
    assert divide(-2, 7) == -3
    assert divide(2, 7) == 3


def test_modulo_sign_follows_dividend():
    assert modulo(2, -7) == -1
    assert modulo(-2, 7) == 1


def test_modulo_rejects_float():
    with pytest.raises(TypeError, match="modulo"):
        modulo(2.0, 3)


def test_integer_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(0, 4)
    with pytest.raises(ZeroDivisionError):
        modulo(0, 4)


def test_float_division_by_zero():
    assert divide(0, 1.0) == math.inf
    assert divide(0, -1.0) == -math.inf
    assert math.isnan(divide(0, 0.0))


def test_minimum_maximum_keep_type():
    assert minimum(2.5, 3) == 2.5
    assert isinstance(minimum(2.5, 3), float)
    assert maximum(2.5, 3) == 3
    assert isinstance(maximum(2.5, 3), int)


@pytest.mark.parametrize("func", [add, subtract, multiply, divide, minimum, maximum])
def test_unknown_type(func):
    with pytest.raises(TypeError, match="unknown type"):
        func("x", 1)
    with pytest.raises(TypeError, match="unknown type"):
        func(1, "x")


def test_bool_rejected():
    with pytest.raises(TypeError):
        add(True, 1)