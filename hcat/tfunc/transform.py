"""Encoding, hashing and serialisation template functions."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
import re

import tomli_w
import yaml

_STD_ALPHABET = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def _decode(name: str, s: str, alphabet: re.Pattern, altchars) -> str:
    if not alphabet.fullmatch(s) or len(s) % 4:
        raise ValueError(f"{name}: illegal base64 data in {s!r}")
    try:
        raw = base64.b64decode(s, altchars=altchars, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"{name}: {exc}") from exc
    return raw.decode("utf-8", errors="surrogateescape")


def base64_decode(s: str) -> str:
    """Decode standard, padded base64."""
    return _decode("base64Decode", s, _STD_ALPHABET, None)


def base64_encode(s: str) -> str:
    """Encode as standard, padded base64."""
    return base64.b64encode(s.encode()).decode("ascii")


def base64_url_decode(s: str) -> str:
    """Decode URL-safe, padded base64."""
    return _decode("base64URLDecode", s, _URL_ALPHABET, b"-_")


def base64_url_encode(s: str) -> str:
    """Encode as URL-safe, padded base64."""
    return base64.urlsafe_b64encode(s.encode()).decode("ascii")


def sha256_hex(item: str) -> str:
    """Return the hex SHA-256 digest of *item*."""
    return hashlib.sha256(item.encode()).hexdigest()


def md5sum(item: str) -> str:
    """Return the hex MD5 digest of *item*."""
    return hashlib.md5(item.encode()).hexdigest()


def to_lower(s: str) -> str:
    return s.lower()


def to_upper(s: str) -> str:
    return s.upper()


def _is_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def to_title(s: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone."""
    out = []
    previous = " "
    for char in s:
        out.append(char.upper() if _is_separator(previous) else char)
        previous = char
    return "".join(out)


def _dump_json(name: str, value, indent, escape_html: bool) -> str:
    try:
        text = json.dumps(
            value,
            indent=indent,
            separators=(",", ": ") if indent else (",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name}: {exc}") from exc
    text = text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    if escape_html:
        text = (
            text.replace("<", "\\u003c")
            .replace(">", "\\u003e")
            .replace("&", "\\u0026")
        )
    return text.strip()


def to_json(i) -> str:
    """Serialise to compact JSON with HTML characters escaped."""
    return _dump_json("toJSON", i, None, True)


def to_json_pretty(i) -> str:
    """Serialise to indented JSON with HTML characters escaped."""
    return _dump_json("toJSONPretty", i, 2, True)


def to_unescaped_json(i) -> str:
    """Serialise to compact JSON without HTML escaping."""
    return _dump_json("toUnescapedJSON", i, None, False)


def to_unescaped_json_pretty(i) -> str:
    """Serialise to indented JSON without HTML escaping."""
    return _dump_json("toUnescapedJSONPretty", i, 2, False)


def to_yaml(m: dict) -> str:
    """Serialise a mapping to block-style YAML."""
    try:
        text = yaml.safe_dump(
            m, default_flow_style=False, sort_keys=True, allow_unicode=True
        )
    except yaml.YAMLError as exc:
        raise ValueError(f"toYAML: {exc}") from exc
    return text.strip()


def to_toml(m: dict) -> str:
    """Serialise a mapping to TOML."""
    try:
        text = tomli_w.dumps(m)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"toTOML: {exc}") from exc
    return text.strip()