import pytest

from flagslot import (
    Dialect,
    FlagSet,
    InvalidDialectError,
    InvalidNumericError,
    MissingArgumentsError,
    NumericPolicy,
    ValueKind,
)


def build_flagset(*args, **kwargs):
    flags = FlagSet(*args, **kwargs)
    verbose = flags.flag_boolean("-v,--verbose")
    count = flags.flag_int("-n,--count", default=1)
    ratio = flags.flag_float("-r,--ratio", default=0.5)
    name = flags.flag_string("-s,--name", default="hello")
    return flags, (verbose, count, ratio, name)


def test_read_args_from_system_argv():
    flags, (verbose, count, ratio, name) = build_flagset(
        ["prog", "-v", "-n", "3", "--ratio=2", "input.txt", "--bogus"]
    )
    invalid = flags.read_args()

    assert invalid == ["--bogus"]
    assert flags.get_options() == ["input.txt"]
    assert verbose.value is True
    assert count.value == 3
    assert ratio.value == 2.0
    assert name.value == "hello"


def test_initialize_without_system_flag():
    flags, (verbose, *_) = build_flagset()
    flags.initialize(["-v", "input.txt"], from_system=False)
    assert flags.read_args() == []
    assert verbose.value is True
    assert flags.get_options() == ["input.txt"]


def test_read_args_without_source():
    flags, _ = build_flagset()
    with pytest.raises(MissingArgumentsError):
        flags.read_args()


def test_explicit_args_are_not_skipped_by_default():
    flags, (verbose, *_) = build_flagset(["prog"])
    flags.read_args(args=["-v"])
    assert verbose.value is True

    flags.reset()
    flags.read_args(args=["-v"], skip_first=True)
    assert verbose.value is False


def test_dialect_per_call():
    flags, (_, count, *_) = build_flagset()
    assert flags.read_args(args=["--count", "5"]) == ["--count"]
    assert count.value == 1

    assert flags.read_args("permissive", args=["--count", "5"]) == []
    assert count.value == 5


def test_default_dialect():
    flags, (_, count, *_) = build_flagset(dialect="as_is")
    assert flags.dialect is Dialect.PERMISSIVE
    flags.read_args(args=["-n=9"])
    assert count.value == 9


def test_invalid_dialect():
    with pytest.raises(InvalidDialectError):
        FlagSet(dialect="windows")

    flags, _ = build_flagset()
    with pytest.raises(InvalidDialectError):
        flags.read_args("windows", args=[])


def test_options_reflect_latest_call_only():
    flags, _ = build_flagset()
    flags.read_args(args=["a", "b"])
    assert flags.get_options() == ["a", "b"]
    flags.read_args(args=["c"])
    assert flags.get_options() == ["c"]
    assert flags.last_result.options == ["c"]


def test_options_empty_before_first_call():
    flags, _ = build_flagset()
    assert flags.get_options() == []
    assert flags.last_result is None


def test_invalid_numeric_raises_and_clears_last_result():
    flags, (_, count, *_) = build_flagset()
    flags.read_args(args=["a"])
    with pytest.raises(InvalidNumericError, match="'many'"):
        flags.read_args(args=["-n", "many"])
    assert flags.get_options() == []
    assert count.value == 1


def test_invalid_numeric_collect_policy():
    flags, (_, count, *_) = build_flagset(numeric_policy=NumericPolicy.COLLECT)
    assert flags.read_args(args=["-n", "many", "x"]) == ["-n"]
    assert flags.get_options() == ["x"]
    assert count.value == 1


def test_generic_flag_and_values():
    flags = FlagSet()
    level = flags.flag("--level", ValueKind.INTEGER, 2, help="Level")
    debug = flags.flag(["-d", "--debug"], "bool")
    assert flags.values() == {"--level": 2, "-d": False}

    flags.read_args(args=["--level=5", "-d"])
    assert (level.value, debug.value) == (5, True)
    flags.reset()
    assert flags.values() == {"--level": 2, "-d": False}
    assert flags.registry.get("--level").help == "Level"


def test_slot_handle_is_writable():
    flags, (verbose, *_) = build_flagset()
    verbose.value = True
    assert flags.values()["-v"] is True


def test_from_system(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "--verbose", "file"])
    flags = FlagSet.from_system()
    verbose = flags.flag_boolean("-v,--verbose")
    assert flags.read_args() == []
    assert verbose.value is True
    assert flags.get_options() == ["file"]


def test_from_system_always_skips_program_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "file"])
    flags = FlagSet.from_system(from_system=False, dialect="permissive")
    assert flags.dialect is Dialect.PERMISSIVE
    assert flags.read_args() == []
    assert flags.get_options() == ["file"]


def test_bundle_example():
    flags = FlagSet()
    verbose = flags.flag_boolean("-v")
    extract = flags.flag_boolean("-x")
    file = flags.flag_string("-f")
    assert flags.read_args(args=["-vxf", "myfile"]) == []
    assert (verbose.value, extract.value, file.value) == (True, True, "myfile")


def test_repr():
    flags, _ = build_flagset()
    assert "flags=4" in repr(flags)
