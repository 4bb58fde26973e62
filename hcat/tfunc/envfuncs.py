"""Environment variable template functions."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable


def _lookup(env: list[str], name: str) -> tuple[bool, str]:
    for entry in env:
        key, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"malformed environment entry: {entry!r}")
        if key == name:
            return True, value
    return False, ""


def env_func(env: Iterable[str]) -> Callable[[str], str]:
    """Return a lookup over ``KEY=VALUE`` entries, falling back to the process."""
    entries = list(env)

    def lookup(s: str) -> str:
        found, value = _lookup(entries, s)
        if found:
            return value
        return os.environ.get(s, "")

    return lookup


def env_or_default_func(env: Iterable[str]) -> Callable[[str, str], str]:
    """Like :func:`env_func`, but returns a default for unset variables."""
    entries = list(env)

    def lookup(s: str, default: str) -> str:
        found, value = _lookup(entries, s)
        if found:
            return value
        return os.environ.get(s, default)

    return lookup