# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The scan loop shared by the strict and permissive dialects.

`DialectParser` walks the working argument list left to right. Every token is
either a registered flag, a bundle to expand, an invalid flag (it starts with
the delimiter but does not resolve) or a positional option. How a flag picks
up its value is left to the dialect subclasses through `_handle_boolean` and
`_handle_valued`, which return the index of the next token to read.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from flagslot.exceptions import InvalidNumericError
from flagslot.logger import logger
from flagslot.parser.bundling import expand_bundle, is_bundle
from flagslot.parser.dialect import Dialect, NumericPolicy
from flagslot.parser.flag import FlagSpec
from flagslot.parser.parser_types import ParseResult, split_flag
from flagslot.parser.registry import FlagRegistry
from flagslot.parser.utils import coerce_bool, coerce_value, is_bool_token
from flagslot.parser.value_kind import ValueKind


class DialectParser(ABC):
    """Base class for the dialect parsers."""

    dialect: Dialect

    def __init__(
        self,
        registry: FlagRegistry,
        numeric_policy: NumericPolicy = NumericPolicy.RAISE,
    ) -> None:
        self.registry = registry
        self.numeric_policy = numeric_policy

    def parse(self, args: list[str], start: int = 0) -> ParseResult:
        """
        Scan `args` from `start` and write parsed values into the slots.

        `args` must be a list the caller is willing to see grow: bundle
        expansion appends to it.
        """
        result = ParseResult(dialect=self.dialect)
        i = start
        while i < len(args):
            token = args[i]
            flag, inline = split_flag(token)
            spec = self.registry.get(flag)
            if spec is None:
                i = self._handle_unknown(token, args, i, result)
            elif spec.kind is ValueKind.BOOLEAN:
                i = self._handle_boolean(spec, token, inline, args, i, result)
            else:
                i = self._handle_valued(spec, token, inline, args, i, result)
        return result

    def _handle_unknown(
        self, token: str, args: list[str], i: int, result: ParseResult
    ) -> int:
        if not self.registry.looks_like_flag(token):
            result.options.append(token)
            return i + 1
        if is_bundle(token, self.registry):
            result.expanded.extend(expand_bundle(args, i, self.registry))
            return i
        self._reject(token, result, "unknown flag")
        return i + 1

    @abstractmethod
    def _handle_boolean(
        self,
        spec: FlagSpec,
        token: str,
        inline: str | None,
        args: list[str],
        i: int,
        result: ParseResult,
    ) -> int: ...

    @abstractmethod
    def _handle_valued(
        self,
        spec: FlagSpec,
        token: str,
        inline: str | None,
        args: list[str],
        i: int,
        result: ParseResult,
    ) -> int: ...

    def _peek_boolean(self, spec: FlagSpec, args: list[str], i: int) -> int:
        """Set a boolean from an explicit following "0"/"1", else to True."""
        if i + 1 < len(args) and is_bool_token(args[i + 1]):
            spec.slot.value = coerce_bool(args[i + 1])
            return i + 2
        spec.slot.value = True
        return i + 1

    def _store(
        self, spec: FlagSpec, token: str, raw: str, result: ParseResult
    ) -> None:
        """Coerce `raw` into the flag's slot, applying the numeric policy."""
        try:
            spec.slot.value = coerce_value(spec.kind, raw)
        except InvalidNumericError as error:
            if self.numeric_policy is NumericPolicy.RAISE:
                raise error.with_flag(token) from None
            self._reject(token, result, str(error))

    def _reject(self, token: str, result: ParseResult, reason: str) -> None:
        logger.debug("Invalid flag '%s': %s", token, reason)
        result.invalid_flags.append(token)
