import pytest

from hcat.tfunc.loop import loop
from hcat.tfunc.parsing import parse_int


def test_loop_count():
    assert "".join("1" for _ in loop(3)) == "111"


def test_loop_index():
    assert "".join(str(i) for i in loop(3)) == "012"


def test_loop_start():
    assert "".join("1" for _ in loop(1, 3)) == "11"


def test_loop_text():
    assert "".join("1" for _ in loop(1, "3")) == "11"


def test_loop_parse_int():
    n = parse_int("3")
    assert "".join("1" for _ in loop(1, n)) == "11"


def test_loop_var():
    n = 3
    assert "".join(str(i) for i in loop(n)) == "012"


def test_loop_values():
    assert list(loop(5, 8)) == [5, 6, 7]
    assert list(loop("2", "4")) == [2, 3]


def test_loop_empty_when_start_not_below_stop():
    assert list(loop(3, 3)) == []
    assert list(loop(5, 2)) == []
    assert list(loop("")) == []


@pytest.mark.parametrize("args", [(), (1, 2, 3)])
def test_loop_wrong_arg_count(args):
    with pytest.raises(TypeError, match="wrong number of arguments"):
        loop(*args)


@pytest.mark.parametrize("value", [1.5, None, True, [3]])
def test_loop_bad_argument_type(value):
    with pytest.raises(TypeError, match="bad argument type"):
        loop(value)


def test_loop_bad_string():
    with pytest.raises(ValueError, match="parseInt"):
        loop(1, "three")