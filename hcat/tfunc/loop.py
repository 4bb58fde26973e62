"""The ``loop`` template function."""

from __future__ import annotations

from hcat.tfunc.parsing import parse_int


def _to_int(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_int(value)
    raise TypeError(f"loop: bad argument type: {type(value).__name__}")


def loop(*args) -> range:
    """Return the integers to iterate over.

    ``loop(stop)`` counts from 0 up to, but not including, *stop*;
    ``loop(start, stop)`` counts from *start*. Arguments may be integers or
    strings holding base-10 integers.
    """
    if len(args) == 1:
        first, second = 0, args[0]
    elif len(args) == 2:
        first, second = args
    else:
        raise TypeError(
            f"loop: wrong number of arguments, expected 1 or 2, but got {len(args)}"
        )
    start = _to_int(first)
    stop = _to_int(second)
    return range(start, stop)