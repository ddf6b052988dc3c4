# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagslot.

Shape problems with individual tokens (unknown flags, missing values, a `=`
where the dialect forbids one) are never raised: they are collected into the
invalid-flags list of a `ParseResult`. The exceptions below cover the cases
that abort a registration or a whole parse call.

All exceptions inherit from `FlagslotError`, the base exception for the package.

Exception Hierarchy:
- FlagslotError
    ├── MissingArgumentsError
    ├── InvalidDialectError
    ├── InvalidNumericError (also a ValueError)
    ├── DuplicateAliasError
    ├── InvalidAliasError
    └── ConfigError
"""
from __future__ import annotations

from typing import Any


class FlagslotError(Exception):
    """Base exception for flagslot."""


class MissingArgumentsError(FlagslotError):
    """Exception raised when a parse is requested without an argument source."""


class InvalidDialectError(FlagslotError):
    """Exception raised when an unknown parsing dialect is requested."""


class InvalidNumericError(FlagslotError, ValueError):
    """Exception raised when a value token cannot be converted to a number."""

    def __init__(self, token: str, kind: Any, flag: str | None = None) -> None:
        self.token = token
        self.kind = kind
        self.flag = flag
        where = f" for flag '{flag}'" if flag else ""
        super().__init__(f"Invalid {kind} value '{token}'{where}")

    def with_flag(self, flag: str) -> InvalidNumericError:
        """Return a copy of this error that names the flag being parsed."""
        return InvalidNumericError(self.token, self.kind, flag)


class DuplicateAliasError(FlagslotError):
    """Exception raised when an alias is already bound to another flag."""


class InvalidAliasError(FlagslotError):
    """Exception raised when a flag is registered without any alias."""


class ConfigError(FlagslotError):
    """Exception raised when a flag definition file cannot be loaded."""
