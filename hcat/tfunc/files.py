"""File-writing template function."""

from __future__ import annotations

import os
import re

_OCTAL = re.compile(r"[0-7]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _resolve_uid(username: str) -> int:
    if username == "":
        return os.getuid()
    import pwd

    try:
        return pwd.getpwnam(username).pw_uid
    except KeyError:
        if _INTEGER.fullmatch(username):
            return int(username)
        raise


def _resolve_gid(group_name: str) -> int:
    if group_name == "":
        return os.getgid()
    import grp

    try:
        return grp.getgrnam(group_name).gr_gid
    except KeyError:
        if _INTEGER.fullmatch(group_name):
            return int(group_name)
        raise


def write_to_file(path: str, username: str, group_name: str, permissions: str, *args: str) -> str:
    """Write content to *path*, then set its owner and permissions.

    The last of *args* is the content; when two are given the first is a
    flag string that may hold ``append`` and ``newline``. Empty user and
    group names keep the current owner. Returns an empty string.
    """
    if not args:
        raise TypeError("writeToFile: missing content")
    flags = args[0] if len(args) == 2 else ""
    content = args[-1]

    if not _OCTAL.fullmatch(permissions) or int(permissions, 8) > 0xFFFFFFFF:
        raise ValueError(f"invalid permissions: {permissions!r}")
    perm = int(permissions, 8)

    data = content.encode()
    if "newline" in flags:
        data += b"\n"

    if "append" in flags:
        fd = os.open(path, os.O_APPEND | os.O_WRONLY | os.O_CREAT, perm)
        with os.fdopen(fd, "ab") as handle:
            handle.write(data)
    else:
        directory = os.path.dirname(path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(path, "wb") as handle:
            handle.write(data)

    uid = _resolve_uid(username)
    gid = _resolve_gid(group_name)
    if username or group_name:
        os.chown(path, uid, gid)
    os.chmod(path, perm)
    return ""