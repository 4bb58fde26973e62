"""Mapping template functions."""

from __future__ import annotations

from typing import Any


def _explode_into(m: dict, key: str, value: Any, path: str) -> None:
    while "/" in key:
        top, rest = key.split("/", 1)
        nest = m.setdefault(top, {})
        if not isinstance(nest, dict):
            raise ValueError(
                f"not a map: {path!r}: {top!r} already has value {nest!r}"
            )
        m, path, key = nest, key, rest
    if key != "":
        m[key] = value


def explode(pairs) -> dict:
    """Expand key pairs with slash-separated keys into a nested dict."""
    result: dict = {}
    for pair in pairs:
        try:
            _explode_into(result, pair.key, pair.value, pair.key)
        except ValueError as exc:
            raise ValueError(f"explode: {exc}") from exc
    return result


def explode_map(map_in: dict) -> dict:
    """Expand a flat dict with slash-separated keys into a nested dict."""
    result: dict = {}
    for key in sorted(map_in):
        try:
            _explode_into(result, key, map_in[key], key)
        except ValueError as exc:
            raise ValueError(f"explodeMap: {exc}") from exc
    return result


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == 0 or (
        hasattr(value, "__len__") and len(value) == 0
    )


def _merge(dst: dict, src: dict, override: bool) -> dict:
    for key, src_value in src.items():
        present = key in dst
        dst_value = dst.get(key)
        if present and isinstance(dst_value, dict) and isinstance(src_value, dict):
            _merge(dst_value, src_value, override)
            continue
        if (
            present
            and not _is_empty(dst_value)
            and isinstance(src_value, (dict, list))
        ):
            continue
        if not present or _is_empty(dst_value) or (override and not _is_empty(src_value)):
            dst[key] = src_value
    return dst


def merge_map(dst_map: dict | None, src_map: dict) -> dict:
    """Deep-merge *src_map* into *dst_map*, keeping existing values."""
    return _merge(dst_map if dst_map is not None else {}, src_map, False)


def merge_map_with_override(dst_map: dict | None, src_map: dict) -> dict:
    """Deep-merge *src_map* into *dst_map*, letting *src_map* values win."""
    return _merge(dst_map if dst_map is not None else {}, src_map, True)