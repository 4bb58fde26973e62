"""Template functions that group Consul results."""

from __future__ import annotations

import copy
import re

_UNSAFE = re.compile(r"[^a-zA-Z0-9_-]")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_SUFFIX = "|int"


def _meta_value(meta: dict, key: str) -> str:
    real_key = key[: -len(_INT_SUFFIX)] if key.endswith(_INT_SUFFIX) else key
    value = meta.get(real_key, "")
    if value != "":
        return value
    if key.endswith(_INT_SUFFIX):
        return "0"
    return f"_no_{real_key}_"


def by_meta(meta: str, services) -> dict[str, list]:
    """Group services by one or more comma-separated ServiceMeta fields.

    A field ending in ``|int`` is parsed as an integer and zero-padded so
    groups sort numerically.
    """
    fields = meta.split(",")
    groups: dict[str, list] = {}
    for service in services:
        service_meta = service.service_meta or {}
        parts = []
        for field in fields:
            value = _meta_value(service_meta, field)
            if field.endswith(_INT_SUFFIX):
                if not _INTEGER.fullmatch(value):
                    raise ValueError(f"cannot parse {value} as number : invalid syntax")
                value = f"{int(value):05d}"
            parts.append(_UNSAFE.sub("_", value))
        groups.setdefault("_".join(parts), []).append(service)
    return groups


def by_key(pairs) -> dict[str, dict]:
    """Group key pairs by their top-level key, stripping it from each key."""
    result: dict[str, dict] = {}
    for pair in pairs:
        top, _, key = pair.key.partition("/")
        if key == "":
            continue
        stripped = copy.copy(pair)
        stripped.key = key
        result.setdefault(top, {})[key] = stripped
    return result


def by_tag(services) -> dict[str, list]:
    """Map each tag to the services that carry it."""
    groups: dict[str, list] = {}
    if services is None:
        return groups
    if not isinstance(services, (list, tuple)):
        raise TypeError(f"byTag: wrong argument type {type(services).__name__}")
    for service in services:
        if not hasattr(service, "tags"):
            raise TypeError(f"byTag: wrong argument type {type(service).__name__}")
        for tag in service.tags or ():
            groups.setdefault(tag, []).append(service)
    return groups