"""Membership template functions."""

from __future__ import annotations

from collections.abc import Iterable


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _matches(element: object, value: object) -> bool:
    if _is_int(element):
        return _is_int(value) and value == element
    if isinstance(element, float):
        return isinstance(value, float) and value == element
    if isinstance(element, str):
        return isinstance(value, str) and value == element
    return False


def is_in(l, v) -> bool:
    """Report whether *v* is found in *l*.

    For a list or tuple, integers match integers, floats match floats and
    strings match strings; other element types never match. For a string,
    *v* must be a substring. Anything else contains nothing.
    """
    if isinstance(l, str):
        return isinstance(v, str) and v in l
    if isinstance(l, (list, tuple)):
        return any(_matches(element, v) for element in l)
    return False


def contains(v, l) -> bool:
    """:func:`is_in` with its arguments reversed, for use in a pipe."""
    return is_in(l, v)


def contains_all(v: Iterable, l) -> bool:
    """True if every item of *v* is in *l*."""
    return all(is_in(l, item) for item in v)


def contains_any(v: Iterable, l) -> bool:
    """True if some item of *v* is in *l*."""
    return any(is_in(l, item) for item in v)


def contains_none(v: Iterable, l) -> bool:
    """True if no item of *v* is in *l*."""
    return not any(is_in(l, item) for item in v)


def contains_not_all(v: Iterable, l) -> bool:
    """True if some item of *v* is missing from *l*."""
    return not all(is_in(l, item) for item in v)