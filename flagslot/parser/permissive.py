# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The permissive dialect.

Every flag accepts both separators, so `-a 0`, `-a=0`, `--append 0` and
`--append=0` mean the same thing. Booleans without `=` still only consume a
following token when it is an explicit `0` or `1`.
"""
from __future__ import annotations

from flagslot.parser.base import DialectParser
from flagslot.parser.dialect import Dialect
from flagslot.parser.flag import FlagSpec
from flagslot.parser.parser_types import ParseResult
from flagslot.parser.utils import coerce_bool


class PermissiveParser(DialectParser):
    dialect = Dialect.PERMISSIVE

    def _handle_boolean(
        self,
        spec: FlagSpec,
        token: str,
        inline: str | None,
        args: list[str],
        i: int,
        result: ParseResult,
    ) -> int:
        if inline is not None:
            spec.slot.value = coerce_bool(inline)
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
        if inline is not None:
            self._store(spec, token, inline, result)
            return i + 1
        if i + 1 >= len(args):
            self._reject(token, result, "missing value")
            return i + 1
        self._store(spec, token, args[i + 1], result)
        return i + 2
