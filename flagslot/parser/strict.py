# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The strict dialect.

Short flags are separated from their value by whitespace (`-n 3`), long flags
by `=` (`--count=3`). `-n=3` and `--count 3` are recorded as invalid flags.

Booleans are asymmetric on purpose:
- `--verbose` sets True and `--verbose=0` sets False; a following token is
  never consumed.
- `-v` looks at the next token: an explicit `0` or `1` sets the value and is
  consumed, anything else leaves the next token alone and sets True.
"""
from __future__ import annotations

from flagslot.parser.base import DialectParser
from flagslot.parser.dialect import Dialect
from flagslot.parser.flag import FlagSpec
from flagslot.parser.parser_types import ParseResult
from flagslot.parser.utils import coerce_bool


class StrictParser(DialectParser):
    dialect = Dialect.STRICT

    def _handle_boolean(
        self,
        spec: FlagSpec,
        token: str,
        inline: str | None,
        args: list[str],
        i: int,
        result: ParseResult,
    ) -> int:
        if self.registry.is_long_form(token):
            spec.slot.value = coerce_bool(inline)
            return i + 1
        if inline is not None:
            self._reject(token, result, "short flags do not take '='")
            return i + 1
        return self._peek_boolean(spec, args, i)

    def _handle_valued(
        self,
        spec: FlagSpec,
        token: str,
        inline: str | None,
        args: list[str],
        i: int,
        result: ParseResult,
    ) -> int:
        if self.registry.is_long_form(token):
            if inline is None:
                self._reject(token, result, "long flags require '=value'")
            else:
                self._store(spec, token, inline, result)
            return i + 1
        if inline is not None:
            self._reject(token, result, "short flags do not take '='")
            return i + 1
        if i + 1 >= len(args):
            self._reject(token, result, "missing value")
            return i + 1
        self._store(spec, token, args[i + 1], result)
        return i + 2
