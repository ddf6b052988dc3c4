# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and token helpers shared by the flagslot dialect parsers.

Contents:
- `ParseResult`: The options and invalid flags collected by one parse pass.
- `split_flag`: Split a token into its flag part and optional inline value.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from flagslot.parser.dialect import Dialect


@dataclass
class ParseResult:
    """
    The output of one parse pass.

    Attributes:
        dialect (Dialect): The dialect the pass ran with.
        options (list[str]): Positional tokens, in the order they were seen.
        invalid_flags (list[str]): Tokens that looked like flags but failed to
            resolve or broke the dialect's value rules, in order.
        expanded (list[str]): Tokens materialized by bundle expansion.
    """

    dialect: Dialect
    options: list[str] = field(default_factory=list)
    invalid_flags: list[str] = field(default_factory=list)
    expanded: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no invalid flag was recorded."""
        return not self.invalid_flags


def split_flag(token: str) -> tuple[str, str | None]:
    """
    Split `token` at its first `=`.

    Returns:
        tuple[str, str | None]: The flag part and the inline value, or None
        when the token has no `=`.

    Example:
        split_flag("--name=a=b") → ("--name", "a=b")
        split_flag("--name")     → ("--name", None)
    """
    flag, sep, value = token.partition("=")
    return flag, (value if sep else None)
