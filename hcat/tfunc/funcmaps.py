"""Named collections of template functions, keyed by their template names."""

from __future__ import annotations

import os
from collections.abc import Callable

from hcat.tfunc import (
    consul_filter,
    contains,
    envfuncs,
    files as file_funcs,
    loop as loop_funcs,
    maps,
    mathfuncs,
    parsing,
    strfuncs,
    timefuncs,
    transform,
)

FuncMap = dict[str, Callable]


def all_unversioned() -> FuncMap:
    """Return every function that does not depend on a versioned backend API."""
    combined: FuncMap = {}
    for build in (consul_filters, env, control, helpers, math_funcs, files):
        combined.update(build())
    return combined


def consul_filters() -> FuncMap:
    """Functions that group Consul results."""
    return {
        "byKey": consul_filter.by_key,
        "byTag": consul_filter.by_tag,
        "byMeta": consul_filter.by_meta,
    }


def env() -> FuncMap:
    """Environment lookups over a snapshot of the current process environment."""
    snapshot = [f"{key}={value}" for key, value in os.environ.items()]
    return {
        "env": envfuncs.env_func(snapshot),
        "envOrDefault": envfuncs.env_or_default_func(snapshot),
    }


def files() -> FuncMap:
    """Functions that work with files."""
    return {"writeToFile": file_funcs.write_to_file}


def control() -> FuncMap:
    """Membership and iteration functions."""
    return {
        "contains": contains.contains,
        "containsAll": contains.contains_all,
        "containsAny": contains.contains_any,
        "containsNone": contains.contains_none,
        "containsNotAll": contains.contains_not_all,
        "in": contains.is_in,
        "loop": loop_funcs.loop,
    }


def math_funcs() -> FuncMap:
    """Arithmetic functions."""
    return {
        "add": mathfuncs.add,
        "subtract": mathfuncs.subtract,
        "multiply": mathfuncs.multiply,
        "divide": mathfuncs.divide,
        "modulo": mathfuncs.modulo,
        "minimum": mathfuncs.minimum,
        "maximum": mathfuncs.maximum,
    }


def helpers() -> FuncMap:
    """Parsing, conversion, encoding, string, mapping and time helpers."""
    return {
        # Parsing
        "parseBool": parsing.parse_bool,
        "parseFloat": parsing.parse_float,
        "parseInt": parsing.parse_int,
        "parseJSON": parsing.parse_json,
        "parseUint": parsing.parse_uint,
        "parseYAML": parsing.parse_yaml,
        # Conversion
        "toLower": transform.to_lower,
        "toUpper": transform.to_upper,
        "toTitle": transform.to_title,
        "toJSON": transform.to_json,
        "toJSONPretty": transform.to_json_pretty,
        "toUnescapedJSON": transform.to_unescaped_json,
        "toUnescapedJSONPretty": transform.to_unescaped_json_pretty,
        "toTOML": transform.to_toml,
        "toYAML": transform.to_yaml,
        # Encoding
        "base64Decode": transform.base64_decode,
        "base64Encode": transform.base64_encode,
        "base64URLDecode": transform.base64_url_decode,
        "base64URLEncode": transform.base64_url_encode,
        "sha256Hex": transform.sha256_hex,
        "md5sum": transform.md5sum,
        # Strings
        "join": strfuncs.join,
        "split": strfuncs.split,
        "trimSpace": strfuncs.trim_space,
        "indent": strfuncs.indent,
        "replaceAll": strfuncs.replace_all,
        "regexReplaceAll": strfuncs.regex_replace_all,
        "regexMatch": strfuncs.regex_match,
        # Mappings
        "explode": maps.explode,
        "explodeMap": maps.explode_map,
        "mergeMap": maps.merge_map,
        "mergeMapWithOverride": maps.merge_map_with_override,
        # Time
        "timestamp": timefuncs.timestamp,
    }