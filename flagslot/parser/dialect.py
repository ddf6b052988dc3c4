# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the parsing dialects and the numeric failure policy.

`Dialect` selects how a flag and its value may be separated:

    STRICT:     "-a 0" and "--append=0" are valid.
                "--append 0" and "-a=0" are not.
    PERMISSIVE: "-a 0", "-a=0", "--append 0" and "--append=0" are all valid.
                Useful for Windows-style flags.

`NumericPolicy` selects what happens when an integer or float value cannot be
converted: abort the parse (`RAISE`) or record the flag as invalid and keep
scanning (`COLLECT`).
"""
from __future__ import annotations

from enum import Enum


class Dialect(Enum):
    """Rule set governing how a flag token and its value are separated."""

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "as_is": "permissive",
            "as-is": "permissive",
            "asis": "permissive",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Dialect:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class NumericPolicy(Enum):
    """What to do with an integer or float value that fails to convert."""

    RAISE = "raise"
    COLLECT = "collect"

    @classmethod
    def _missing_(cls, value: object) -> NumericPolicy:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
