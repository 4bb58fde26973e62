"""String parsing template functions.

An empty string parses to the type's zero value; anything else that is not
valid raises :class:`ValueError`.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

import yaml

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)


def parse_bool(s: str) -> bool:
    """Parse a boolean such as ``true``, ``F`` or ``1``."""
    if s == "":
        return False
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"parseBool: invalid syntax: {s!r}")


def parse_float(s: str) -> float:
    """Parse a decimal or hexadecimal floating-point number."""
    if s == "":
        return 0.0
    if _SPECIAL.fullmatch(s):
        return float(s)
    try:
        if _DECIMAL.fullmatch(s):
            value = float(s)
        elif _HEX.fullmatch(s):
            value = float.fromhex(s)
        else:
            raise ValueError(f"parseFloat: invalid syntax: {s!r}")
    except OverflowError:
        value = math.inf
    if math.isinf(value):
        raise ValueError(f"parseFloat: value out of range: {s!r}")
    return value


def parse_int(s: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    if s == "":
        return 0
    if not _SIGNED.fullmatch(s):
        raise ValueError(f"parseInt: invalid syntax: {s!r}")
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"parseInt: value out of range: {s!r}")
    return value


def parse_uint(s: str) -> int:
    """Parse a base-10 unsigned 64-bit integer."""
    if s == "":
        return 0
    if not _UNSIGNED.fullmatch(s):
        raise ValueError(f"parseUint: invalid syntax: {s!r}")
    value = int(s)
    if value > _UINT64_MAX:
        raise ValueError(f"parseUint: value out of range: {s!r}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def parse_json(s: str) -> Any:
    """Decode a JSON document; an empty string yields an empty dict."""
    if s == "":
        return {}
    return json.loads(s, parse_constant=_reject_constant)


def parse_yaml(s: str) -> Any:
    """Decode a YAML document; an empty string yields an empty dict."""
    if s == "":
        return {}
    return yaml.safe_load(s)