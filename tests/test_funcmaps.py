from hcat.tfunc import funcmaps


def test_no_duplicate_names():
    seen = set()
    for build in (
        funcmaps.consul_filters,
        funcmaps.env,
        funcmaps.control,
        funcmaps.helpers,
        funcmaps.math_funcs,
    ):
        for name in build():
            assert name not in seen, f"duplicate entry {name}"
            seen.add(name)


def test_all_unversioned_is_union_of_parts():
    parts = [
        funcmaps.consul_filters(),
        funcmaps.env(),
        funcmaps.control(),
        funcmaps.helpers(),
        funcmaps.math_funcs(),
        funcmaps.files(),
    ]
    combined = funcmaps.all_unversioned()
    assert len(combined) == sum(len(p) for p in parts)
    for part in parts:
        assert set(part) <= set(combined)


def test_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("HCAT_TEST", "foo")
    monkeypatch.setenv("EMPTY_VAR", "")
    monkeypatch.delenv("UNSET_VAR", raising=False)
    funcs = funcmaps.env()
    assert funcs["env"]("HCAT_TEST") == "foo"
    assert funcs["envOrDefault"]("HCAT_TEST", "100") == "foo"
    assert funcs["envOrDefault"]("EMPTY_VAR", "200") == ""
    assert funcs["envOrDefault"]("UNSET_VAR", "300") == "300"


def test_math_entries():
    funcs = funcmaps.math_funcs()
    assert funcs["add"](2, 2) == 4
    assert funcs["subtract"](2, 2) == 0
    assert funcs["modulo"](2, 3) == 1
    assert funcs["maximum"](2, 3) == 3


def test_control_entries():
    funcs = funcmaps.control()
    assert list(funcs["loop"](3)) == [0, 1, 2]
    assert funcs["contains"]("prod", ["prod", "staging"]) is True
    assert funcs["containsAll"](["prod", "us-realm"], ["prod", "ca-realm"]) is False
    assert funcs["in"](["a", "b"], "b") is True


def test_helper_entries():
    funcs = funcmaps.helpers()
    assert funcs["join"](";", funcs["split"](",", "a,b,c")) == "a;b;c"
    assert funcs["sha256Hex"]("hello") == (
        "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
    )
    assert funcs["toUpper"]("hi") == "HI"
    assert funcs["parseInt"]("-1") == -1


def test_consul_filter_entries():
    funcs = funcmaps.consul_filters()
    assert funcs["byTag"](None) == {}


def test_files_entry(tmp_path):
    target = tmp_path / "out.txt"
    result = funcmaps.files()["writeToFile"](str(target), "", "", "0644", "after")
    assert result == ""
    assert target.read_text() == "after"