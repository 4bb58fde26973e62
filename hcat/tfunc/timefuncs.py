"""Time template functions, formatting with reference-time layouts."""

from __future__ import annotations

import re
from datetime import datetime, timezone

RFC3339 = "2006-01-02T15:04:05Z07:00"

_MONTHS = [
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
]
_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

_FRACTION = re.compile(r"[.,](0+|9+)(?![0-9])")


def now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


def _zone(t: datetime, token: str) -> str:
    offset = t.utcoffset()
    seconds = int(offset.total_seconds()) if offset is not None else 0
    if token.startswith("Z"):
        if seconds == 0:
            return "Z"
        token = "-" + token[1:]
    sign = "-" if seconds < 0 else "+"
    seconds = abs(seconds)
    hh, mm, ss = seconds // 3600, seconds // 60 % 60, seconds % 60
    colon = ":" in token
    sep = ":" if colon else ""
    digits = len(token.replace(":", "")) - 1
    result = f"{sign}{hh:02d}"
    if digits >= 4:
        result += f"{sep}{mm:02d}"
    if digits >= 6:
        result += f"{sep}{ss:02d}"
    return result


def _hour12(t: datetime) -> int:
    return t.hour % 12 or 12


_TOKENS = [
    ("January", lambda t: _MONTHS[t.month - 1]),
    ("Jan", lambda t: _MONTHS[t.month - 1][:3]),
    ("Monday", lambda t: _DAYS[t.weekday()]),
    ("Mon", lambda t: _DAYS[t.weekday()][:3]),
    ("MST", lambda t: t.tzname() or _zone(t, "-0700")),
    ("2006", lambda t: f"{t.year:04d}"),
    ("002", lambda t: f"{t.timetuple().tm_yday:03d}"),
    ("01", lambda t: f"{t.month:02d}"),
    ("02", lambda t: f"{t.day:02d}"),
    ("03", lambda t: f"{_hour12(t):02d}"),
    ("04", lambda t: f"{t.minute:02d}"),
    ("05", lambda t: f"{t.second:02d}"),
    ("06", lambda t: f"{t.year % 100:02d}"),
    ("_2", lambda t: f"{t.day:2d}"),
    ("15", lambda t: f"{t.hour:02d}"),
    ("1", lambda t: str(t.month)),
    ("2", lambda t: str(t.day)),
    ("3", lambda t: str(_hour12(t))),
    ("4", lambda t: str(t.minute)),
    ("5", lambda t: str(t.second)),
    ("PM", lambda t: "PM" if t.hour >= 12 else "AM"),
    ("pm", lambda t: "pm" if t.hour >= 12 else "am"),
]
_ZONE_TOKENS = [
    "-07:00:00", "-070000", "-07:00", "-0700", "-07",
    "Z07:00:00", "Z070000", "Z07:00", "Z0700", "Z07",
]


def _go_format(t: datetime, layout: str) -> str:
    """Format *t* using a reference-time layout (Mon Jan 2 15:04:05 2006)."""
    out = []
    i = 0
    while i < len(layout):
        fraction = _FRACTION.match(layout, i)
        if fraction:
            digits = f"{t.microsecond * 1000:09d}"[: len(fraction.group(1))]
            if fraction.group(1)[0] == "9":
                digits = digits.rstrip("0")
            if digits:
                out.append(layout[i] + digits)
            i = fraction.end()
            continue
        zone = next((z for z in _ZONE_TOKENS if layout.startswith(z, i)), None)
        if zone:
            out.append(_zone(t, zone))
            i += len(zone)
            continue
        for token, render in _TOKENS:
            if layout.startswith(token, i):
                out.append(render(t))
                i += len(token)
                break
        else:
            out.append(layout[i])
            i += 1
    return "".join(out)


def timestamp(*args: str) -> str:
    """Return the current UTC time.

    With no argument the time is formatted as RFC 3339; ``"unix"`` gives
    seconds since the epoch; any other argument is a layout.
    """
    if len(args) == 0:
        return _go_format(now(), RFC3339)
    if len(args) == 1:
        if args[0] == "unix":
            return str(int(now().timestamp()))
        return _go_format(now(), args[0])
    raise TypeError(
        f"timestamp: wrong number of arguments, expected 0 or 1, but got {len(args)}"
    )