# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParseSession`, which runs one parse pass.

A session validates the argument source, picks the dialect parser, and scans a
private copy of the caller's tokens, so bundle expansion never touches the
caller's list. Each call to `run()` returns a fresh `ParseResult`.

Example Usage:
    registry = FlagRegistry()
    verbose = registry.register("-v,--verbose", "bool")
    session = ParseSession(registry, dialect="permissive", skip_first=False)

    result = session.run(["--verbose=0", "input.txt"])
    # verbose.value == False, result.options == ["input.txt"]
"""
from __future__ import annotations

from typing import Sequence

from flagslot.exceptions import InvalidDialectError, MissingArgumentsError
from flagslot.logger import logger
from flagslot.parser.base import DialectParser
from flagslot.parser.dialect import Dialect, NumericPolicy
from flagslot.parser.parser_types import ParseResult
from flagslot.parser.permissive import PermissiveParser
from flagslot.parser.registry import FlagRegistry
from flagslot.parser.strict import StrictParser

DIALECT_PARSERS: dict[Dialect, type[DialectParser]] = {
    Dialect.STRICT: StrictParser,
    Dialect.PERMISSIVE: PermissiveParser,
}


def resolve_dialect(dialect: Dialect | str) -> Dialect:
    """Return the `Dialect` for a member or its name, else raise `InvalidDialectError`."""
    try:
        return Dialect(dialect)
    except ValueError as error:
        raise InvalidDialectError(str(error)) from error


class ParseSession:
    """
    Orchestrates parse passes over one `FlagRegistry`.

    Attributes:
        registry (FlagRegistry): The flags to populate.
        dialect (Dialect): The separator rules to apply.
        skip_first (bool): Skip `args[0]` (the program name in `sys.argv`).
        numeric_policy (NumericPolicy): Raise on or collect bad numeric values.
    """

    def __init__(
        self,
        registry: FlagRegistry,
        dialect: Dialect | str = Dialect.STRICT,
        skip_first: bool = True,
        numeric_policy: NumericPolicy | str = NumericPolicy.RAISE,
    ) -> None:
        self.registry = registry
        self.dialect: Dialect = resolve_dialect(dialect)
        self.skip_first = skip_first
        self.numeric_policy: NumericPolicy = NumericPolicy(numeric_policy)

    def get_parser(self) -> DialectParser:
        return DIALECT_PARSERS[self.dialect](self.registry, self.numeric_policy)

    def run(self, args: Sequence[str] | None) -> ParseResult:
        """
        Parse `args` into the registry's slots.

        Args:
            args (Sequence[str] | None): The raw argument vector. Left untouched.

        Returns:
            ParseResult: Options and invalid flags found in this pass.

        Raises:
            MissingArgumentsError: If `args` is None.
            InvalidNumericError: On a bad numeric value under `NumericPolicy.RAISE`.
        """
        if args is None:
            raise MissingArgumentsError("No argument source to parse")
        working = list(args)
        start = 1 if self.skip_first else 0
        result = self.get_parser().parse(working, start)
        logger.debug(
            "Parsed %d tokens (%s): %d options, %d invalid flags, %d expanded",
            len(args),
            self.dialect,
            len(result.options),
            len(result.invalid_flags),
            len(result.expanded),
        )
        return result
