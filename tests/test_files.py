import grp
import os
import pwd

import pytest

from hcat.tfunc.files import write_to_file

UID = os.getuid()
GID = os.getgid()
USER = pwd.getpwuid(UID).pw_name
GROUP = grp.getgrgid(GID).gr_name


@pytest.fixture
def existing(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("before")
    return path


@pytest.mark.parametrize(
    "username,group,perm,flags,expected",
    [
        (USER, GROUP, "0644", None, "after"),
        (USER, GROUP, "0666", None, "after"),
        (USER, GROUP, "0644", "append", "beforeafter"),
        (USER, GROUP, "0644", "newline", "after\n"),
        (USER, GROUP, "0644", "append,newline", "beforeafter\n"),
        ("", "", "0644", None, "after"),
        (str(UID), str(GID), "0644", None, "after"),
        ("", str(GID), "0644", None, "after"),
        (str(UID), "", "0644", None, "after"),
    ],
)
def test_write_to_file(existing, username, group, perm, flags, expected):
    args = ("after",) if flags is None else (flags, "after")
    assert write_to_file(str(existing), username, group, perm, *args) == ""
    assert existing.read_text() == expected
    st = os.stat(existing)
    assert st.st_mode & 0o7777 == int(perm, 8)
    assert (st.st_uid, st.st_gid) == (UID, GID)


def test_write_to_file_creates_directory(tmp_path):
    target = tmp_path / "demo" / "testing.tmp"
    assert write_to_file(str(target), USER, GROUP, "0644", "after") == ""
    assert target.read_text() == "after"
    assert os.stat(target).st_mode & 0o777 == 0o644


def test_write_to_file_bad_permissions(tmp_path):
    with pytest.raises(ValueError):
        write_to_file(str(tmp_path / "x"), "", "", "0999", "after")


def test_write_to_file_unknown_user(tmp_path):
    with pytest.raises(KeyError):
        write_to_file(str(tmp_path / "x"), "no-such-user-here", "", "0644", "after")