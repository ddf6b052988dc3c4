# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for flagslot parsing.

Every raw value token goes through `strip_quotes` before it is converted, so
that a value quoted for a shell that did not remove the quotes (for example
`--name="quoted value"` passed through `cmd.exe`) still lands unquoted in
its slot.

Functions:
- strip_quotes: Remove one matching pair of surrounding quote characters.
- coerce_bool: Convert a token to a boolean ("0" is the only false token).
- coerce_value: Convert a token to the Python type of a `ValueKind`.
"""
from __future__ import annotations

from typing import Any

from flagslot.exceptions import InvalidNumericError
from flagslot.parser.value_kind import ValueKind

QUOTE_CHARS = ('"', "'")


def strip_quotes(token: str) -> str:
    """
    Strip one matching pair of leading and trailing quote characters.

    Only a balanced pair of the same character is removed. Mixed quoting
    (`"abc'`), a single quote character and unquoted tokens are returned
    unchanged.

    Args:
        token (str): The raw token.

    Returns:
        str: The token without its surrounding quotes.
    """
    if len(token) >= 2 and token[0] in QUOTE_CHARS and token[-1] == token[0]:
        return token[1:-1]
    return token


def coerce_bool(token: str | None) -> bool:
    """
    Convert a token to a boolean.

    The literal "0" is False. Anything else, including a missing token, is True.
    """
    if token is None:
        return True
    return strip_quotes(token) != "0"


def is_bool_token(token: str) -> bool:
    """Return True if the token spells an explicit boolean value ("0" or "1")."""
    return strip_quotes(token) in ("0", "1")


def coerce_value(kind: ValueKind, token: str | None) -> Any:
    """
    Attempt to convert a raw token to the value type of `kind`.

    Numbers are read with Python's `int()` and `float()` on the unquoted
    token, so the whole token must be a number: "12abc" is rejected, while
    surrounding whitespace, digit-group underscores ("1_000") and non-ASCII
    decimal digits ("٣") are accepted.

    Args:
        kind (ValueKind): The value kind of the target slot.
        token (str | None): The raw token. Only booleans accept `None`.

    Returns:
        Any: The coerced value.

    Raises:
        InvalidNumericError: If an integer or float conversion fails.
    """
    if kind is ValueKind.BOOLEAN:
        return coerce_bool(token)
    if token is None:
        raise TypeError(f"A value token is required for {kind} flags")

    value = strip_quotes(token)
    if kind is ValueKind.INTEGER:
        try:
            return int(value)
        except ValueError:
            raise InvalidNumericError(token, kind) from None
    if kind is ValueKind.FLOAT:
        try:
            return float(value)
        except ValueError:
            raise InvalidNumericError(token, kind) from None
    return value
