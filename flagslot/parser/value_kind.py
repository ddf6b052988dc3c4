# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the tag carried by every registered flag and its slot.

A flag's kind decides how its value token is coerced and which Python type its
slot accepts. Like `Dialect`, the enum resolves shorthand aliases so that
configuration files can say `bool` or `int` instead of the full member value.

Example:
    ValueKind("boolean") → ValueKind.BOOLEAN
    ValueKind("int")     → ValueKind.INTEGER (via alias)
    ValueKind("floating") → ValueKind.FLOAT (via alias)
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(Enum):
    """
    The value type bound to a flag.

    Members:
        BOOLEAN: `True` / `False`. `"0"` is the only false token.
        INTEGER: Python `int`.
        FLOAT: Python `float`.
        STRING: Python `str`, quotes stripped.

    Aliases:
        - "bool" → "boolean"
        - "int" → "integer"
        - "floating", "double" → "float"
        - "str" → "string"
    """

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "int": "integer",
            "floating": "float",
            "double": "float",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def zero(self) -> Any:
        """The default slot value for this kind."""
        return _ZERO_VALUES[self]

    def accepts(self, value: Any) -> bool:
        """Return True if `value` has the concrete type this kind stores."""
        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ValueKind.FLOAT:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, str)

    def __str__(self) -> str:
        return self.value


_ZERO_VALUES: dict[ValueKind, Any] = {
    ValueKind.BOOLEAN: False,
    ValueKind.INTEGER: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.STRING: "",
}
