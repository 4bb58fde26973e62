"""String template functions."""

from __future__ import annotations

import re as _re

_REFERENCE = _re.compile(r"\$(?:\$|\{([A-Za-z0-9_]+)\}|([A-Za-z0-9_]+))")


def indent(spaces: int, s: str) -> str:
    """Prefix each non-empty line of *s* with *spaces* spaces."""
    if spaces < 0:
        raise ValueError("indent value must be a positive integer")
    prefix = " " * spaces
    out = []
    at_line_start = True
    for char in s:
        if at_line_start and char != "\n":
            out.append(prefix)
        out.append(char)
        at_line_start = char == "\n"
    return "".join(out)


def join(sep: str, a) -> str:
    """Join the strings of *a* with *sep*; pipe-friendly argument order."""
    return sep.join(a)


def split(sep: str, s: str) -> list[str]:
    """Split *s* (trimmed of surrounding whitespace) on *sep*."""
    s = s.strip()
    if s == "":
        return []
    if sep == "":
        return list(s)
    return s.split(sep)


def trim_space(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return s.strip()


def replace_all(f: str, t: str, s: str) -> str:
    """Replace every occurrence of *f* in *s* with *t*."""
    return s.replace(f, t)


def _expand(template: str, match: _re.Match) -> str:
    """Expand ``$1``, ``${name}`` and ``$$`` references against *match*."""

    def reference(ref: _re.Match) -> str:
        if ref.group(0) == "$$":
            return "$"
        name = ref.group(1) or ref.group(2)
        if name.isdigit():
            index = int(name)
            if index > (match.re.groups or 0):
                return ""
            return match.group(index) or ""
        if name not in match.re.groupindex:
            return ""
        return match.group(name) or ""

    return _REFERENCE.sub(reference, template)


def regex_replace_all(re: str, pl: str, s: str) -> str:
    """Replace every match of the pattern *re* in *s* with the expanded *pl*."""
    compiled = _re.compile(re)
    return compiled.sub(lambda m: _expand(pl, m), s)


def regex_match(re: str, s: str) -> bool:
    """Report whether the pattern *re* matches anywhere in *s*."""
    return _re.compile(re).search(s) is not None