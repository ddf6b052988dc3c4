import pytest

from flagslot.exceptions import InvalidNumericError
from flagslot.parser.utils import coerce_bool, coerce_value, is_bool_token, strip_quotes
from flagslot.parser.value_kind import ValueKind


@pytest.mark.parametrize(
    "token, expected",
    [
        ('"quoted value"', "quoted value"),
        ("'single'", "single"),
        ('""', ""),
        ('"', '"'),
        ("'", "'"),
        ('"mixed\'', '"mixed\''),
        ('"only-leading', '"only-leading'),
        ('only-trailing"', 'only-trailing"'),
        ('""double""', '"double"'),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_strip_quotes(token, expected):
    assert strip_quotes(token) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", False),
        ('"0"', False),
        ("'0'", False),
        ("1", True),
        ("false", True),
        ("no", True),
        ("", True),
        (None, True),
    ],
)
def test_coerce_bool(token, expected):
    assert coerce_bool(token) is expected


def test_is_bool_token():
    assert is_bool_token("0")
    assert is_bool_token("'1'")
    assert not is_bool_token("true")
    assert not is_bool_token("01")


@pytest.mark.parametrize(
    "kind, token, expected",
    [
        (ValueKind.INTEGER, "42", 42),
        (ValueKind.INTEGER, "-7", -7),
        (ValueKind.INTEGER, '"12"', 12),
        (ValueKind.FLOAT, "3.14", 3.14),
        (ValueKind.FLOAT, "1e3", 1000.0),
        (ValueKind.FLOAT, "'2.5'", 2.5),
        (ValueKind.STRING, "hello", "hello"),
        (ValueKind.STRING, "'hello world'", "hello world"),
        (ValueKind.STRING, "", ""),
        (ValueKind.BOOLEAN, "0", False),
        (ValueKind.BOOLEAN, None, True),
    ],
)
def test_coerce_value(kind, token, expected):
    assert coerce_value(kind, token) == expected


@pytest.mark.parametrize(
    "kind, token, expected",
    [
        (ValueKind.INTEGER, "1_000", 1000),
        (ValueKind.INTEGER, "٣", 3),
        (ValueKind.INTEGER, " 7 ", 7),
        (ValueKind.FLOAT, "2_5.5", 25.5),
        (ValueKind.FLOAT, " 0.5", 0.5),
    ],
)
def test_coerce_value_follows_python_number_syntax(kind, token, expected):
    assert coerce_value(kind, token) == expected


@pytest.mark.parametrize(
    "kind, token",
    [
        (ValueKind.INTEGER, "12abc"),
        (ValueKind.INTEGER, "1__000"),
        (ValueKind.FLOAT, "1.5x"),
    ],
)
def test_coerce_value_rejects_trailing_garbage(kind, token):
    with pytest.raises(InvalidNumericError):
        coerce_value(kind, token)


def test_coerce_value_float_type():
    assert isinstance(coerce_value(ValueKind.FLOAT, "3"), float)


@pytest.mark.parametrize(
    "kind, token",
    [
        (ValueKind.INTEGER, "abc"),
        (ValueKind.INTEGER, "4.2"),
        (ValueKind.INTEGER, ""),
        (ValueKind.FLOAT, "three"),
        (ValueKind.FLOAT, "'1.0"),
    ],
)
def test_coerce_value_invalid_numeric(kind, token):
    with pytest.raises(InvalidNumericError) as excinfo:
        coerce_value(kind, token)
    assert excinfo.value.token == token
    assert excinfo.value.kind is kind
    assert isinstance(excinfo.value, ValueError)


def test_invalid_numeric_message_names_token_and_flag():
    error = InvalidNumericError("abc", ValueKind.INTEGER).with_flag("-n")
    assert error.flag == "-n"
    assert "'abc'" in str(error)
    assert "'-n'" in str(error)


def test_coerce_value_requires_token_for_valued_kinds():
    with pytest.raises(TypeError):
        coerce_value(ValueKind.STRING, None)
