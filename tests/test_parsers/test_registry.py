import pytest

from flagslot.exceptions import DuplicateAliasError, InvalidAliasError
from flagslot.parser.flag import Slot
from flagslot.parser.registry import FlagRegistry, split_aliases
from flagslot.parser.value_kind import ValueKind


def test_split_aliases():
    assert split_aliases("-a,--append,--add-behind") == ("-a", "--append", "--add-behind")
    assert split_aliases(" -a , --append ") == ("-a", "--append")
    assert split_aliases(["-a", "--append"]) == ("-a", "--append")
    assert split_aliases("-a,,") == ("-a",)
    assert split_aliases("") == ()


def test_register_returns_shared_slot():
    registry = FlagRegistry()
    slot = registry.register("-a,--append,--add-behind", ValueKind.BOOLEAN)

    assert isinstance(slot, Slot)
    assert slot.value is False
    spec = registry.get("--add-behind")
    assert spec is registry.get("-a") is registry.get("--append")
    assert spec.slot is slot
    assert spec.aliases == ("-a", "--append", "--add-behind")
    assert spec.name == "-a"
    assert len(registry) == 1
    assert registry.aliases == ["-a", "--append", "--add-behind"]


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("bool", False),
        ("int", 0),
        ("float", 0.0),
        ("str", ""),
    ],
)
def test_register_zero_defaults(kind, expected):
    registry = FlagRegistry()
    slot = registry.register("-x", kind)
    assert slot.value == expected
    assert type(slot.value) is type(expected)


def test_register_default():
    registry = FlagRegistry()
    assert registry.register("--name", ValueKind.STRING, "hello").value == "hello"
    ratio = registry.register("--ratio", ValueKind.FLOAT, 1)
    assert ratio.value == 1.0
    assert isinstance(ratio.value, float)


@pytest.mark.parametrize("aliases", ["", ",", " , ", []])
def test_register_without_alias(aliases):
    registry = FlagRegistry()
    with pytest.raises(InvalidAliasError):
        registry.register(aliases, ValueKind.BOOLEAN)
    assert len(registry) == 0


def test_register_duplicate_alias():
    registry = FlagRegistry()
    first = registry.register("-v,--verbose", ValueKind.BOOLEAN)
    with pytest.raises(DuplicateAliasError, match="--verbose"):
        registry.register("-V,--verbose", ValueKind.INTEGER)

    assert "-V" not in registry
    assert registry.get("--verbose").slot is first
    assert len(registry) == 1


def test_register_repeated_alias_in_one_call():
    registry = FlagRegistry()
    with pytest.raises(DuplicateAliasError):
        registry.register("-v,-v", ValueKind.BOOLEAN)
    assert "-v" not in registry


def test_register_default_type_mismatch():
    registry = FlagRegistry()
    with pytest.raises(TypeError):
        registry.register("-n", ValueKind.INTEGER, "3")
    with pytest.raises(TypeError):
        registry.register("-b", ValueKind.BOOLEAN, 1)
    assert len(registry) == 0


def test_slot_rejects_wrong_type():
    registry = FlagRegistry()
    count = registry.register("-n", ValueKind.INTEGER)
    count.value = 5
    assert count.value == 5
    with pytest.raises(TypeError):
        count.value = "5"
    with pytest.raises(TypeError):
        count.value = True
    assert count.value == 5


def test_reset_and_values():
    registry = FlagRegistry()
    verbose = registry.register("-v,--verbose", ValueKind.BOOLEAN)
    name = registry.register("--name", ValueKind.STRING, "hello")
    verbose.value = True
    name.value = "world"

    assert registry.values() == {"-v": True, "--name": "world"}
    registry.reset()
    assert registry.values() == {"-v": False, "--name": "hello"}


def test_delimiter_defaults_to_dash():
    registry = FlagRegistry()
    assert registry.delimiter == "-"
    assert registry.long_prefix == "--"
    assert registry.looks_like_flag("-x")
    assert registry.looks_like_flag("--anything")
    assert not registry.looks_like_flag("input.txt")
    assert registry.is_long_form("--verbose")
    assert not registry.is_long_form("-v")


def test_delimiter_explicit():
    registry = FlagRegistry(delimiter="/")
    registry.register("-v", ValueKind.BOOLEAN)
    assert registry.delimiter == "/"
    assert not registry.looks_like_flag("-v")
    assert registry.looks_like_flag("/v")


def test_delimiter_inferred_from_first_alias():
    registry = FlagRegistry(delimiter=None)
    assert registry.delimiter is None
    assert not registry.looks_like_flag("-v")

    registry.register("/v,//verbose", ValueKind.BOOLEAN)
    registry.register("-x", ValueKind.BOOLEAN)
    assert registry.delimiter == "/"
    assert registry.long_prefix == "//"


@pytest.mark.parametrize("delimiter", ["", "--"])
def test_delimiter_invalid(delimiter):
    with pytest.raises(ValueError):
        FlagRegistry(delimiter=delimiter)
