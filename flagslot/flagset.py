# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagSet`, the public entry point of flagslot.

A `FlagSet` owns a `FlagRegistry` and an optional stored argument source.
Flags are registered with the `flag_*` methods, each returning the `Slot` the
parsed value is written to. `read_args()` runs one parse pass and returns the
invalid flags; `get_options()` returns the positional options of that pass.

Example Usage:
    flags = FlagSet(sys.argv)
    append = flags.flag_boolean("-a,--append,--add-behind")
    count = flags.flag_int("-n,--count", default=1)
    name = flags.flag_string("--name", default="world")

    invalid = flags.read_args()
    if invalid:
        sys.exit(f"unknown flags: {' '.join(invalid)}")
    for path in flags.get_options():
        ...
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, Sequence

from flagslot.exceptions import MissingArgumentsError
from flagslot.parser.dialect import Dialect, NumericPolicy
from flagslot.parser.flag import Slot
from flagslot.parser.parser_types import ParseResult
from flagslot.parser.registry import DEFAULT_DELIMITER, FlagRegistry
from flagslot.parser.session import ParseSession, resolve_dialect
from flagslot.parser.value_kind import ValueKind


class FlagSet:
    """
    Registers typed flags and parses argument vectors into them.

    Args:
        args (Sequence[str] | None): The argument source used by `read_args()`
            when it is called without one.
        from_system (bool): True if `args` comes from the system (`sys.argv`),
            so `args[0]` is the program path and is skipped.
        delimiter (str | None): The flag marker. None infers it from the first
            registered alias.
        dialect (Dialect | str): The default dialect for `read_args()`.
        numeric_policy (NumericPolicy | str): What to do with bad numeric values.
    """

    def __init__(
        self,
        args: Sequence[str] | None = None,
        *,
        from_system: bool = True,
        delimiter: str | None = DEFAULT_DELIMITER,
        dialect: Dialect | str = Dialect.STRICT,
        numeric_policy: NumericPolicy | str = NumericPolicy.RAISE,
    ) -> None:
        self.registry = FlagRegistry(delimiter)
        self.dialect: Dialect = resolve_dialect(dialect)
        self.numeric_policy: NumericPolicy = NumericPolicy(numeric_policy)
        self._args: list[str] | None = None
        self._from_system: bool = from_system
        self.last_result: ParseResult | None = None
        if args is not None:
            self.initialize(args, from_system)

    @classmethod
    def from_system(cls, **kwargs: Any) -> FlagSet:
        """Create a `FlagSet` reading from `sys.argv`."""
        kwargs.pop("from_system", None)
        return cls(sys.argv, from_system=True, **kwargs)

    def initialize(self, args: Sequence[str], from_system: bool = True) -> None:
        """
        Store the argument source.

        Args:
            args (Sequence[str]): The arguments to parse.
            from_system (bool): Set to False if `args` was built by the caller
                rather than the system, so `args[0]` is not skipped.
        """
        self._args = list(args)
        self._from_system = from_system

    def flag(
        self,
        aliases: str | Iterable[str],
        kind: ValueKind | str,
        default: Any = None,
        help: str = "",
    ) -> Slot:
        """Register a flag of any kind and return its slot."""
        return self.registry.register(aliases, kind, default, help)

    def flag_boolean(
        self, aliases: str | Iterable[str], default: bool = False, help: str = ""
    ) -> Slot:
        return self.registry.register(aliases, ValueKind.BOOLEAN, default, help)

    def flag_int(
        self, aliases: str | Iterable[str], default: int = 0, help: str = ""
    ) -> Slot:
        return self.registry.register(aliases, ValueKind.INTEGER, default, help)

    def flag_float(
        self, aliases: str | Iterable[str], default: float = 0.0, help: str = ""
    ) -> Slot:
        return self.registry.register(aliases, ValueKind.FLOAT, default, help)

    def flag_string(
        self, aliases: str | Iterable[str], default: str = "", help: str = ""
    ) -> Slot:
        return self.registry.register(aliases, ValueKind.STRING, default, help)

    def parse(
        self,
        args: Sequence[str] | None = None,
        dialect: Dialect | str | None = None,
        skip_first: bool | None = None,
    ) -> ParseResult:
        """
        Run one parse pass and return the full `ParseResult`.

        Args:
            args (Sequence[str] | None): Arguments to parse instead of the stored source.
                Passing them explicitly does not skip `args[0]` unless `skip_first` says so.
            dialect (Dialect | str | None): Overrides the default dialect.
            skip_first (bool | None): Overrides whether `args[0]` is skipped.

        Raises:
            MissingArgumentsError: If there is nothing to parse.
            InvalidDialectError: If `dialect` is not a known dialect.
            InvalidNumericError: On a bad numeric value under `NumericPolicy.RAISE`.
        """
        if args is None:
            if self._args is None:
                raise MissingArgumentsError(
                    "FlagSet.read_args() could not find an argument source. "
                    "Pass args or call initialize() first."
                )
            args = self._args
            if skip_first is None:
                skip_first = self._from_system
        elif skip_first is None:
            skip_first = False

        session = ParseSession(
            self.registry,
            dialect=self.dialect if dialect is None else dialect,
            skip_first=skip_first,
            numeric_policy=self.numeric_policy,
        )
        self.last_result = None
        self.last_result = session.run(args)
        return self.last_result

    def read_args(
        self,
        dialect: Dialect | str | None = None,
        args: Sequence[str] | None = None,
        skip_first: bool | None = None,
    ) -> list[str]:
        """Read all arguments and return the invalid flags found."""
        return list(self.parse(args, dialect, skip_first).invalid_flags)

    def get_options(self) -> list[str]:
        """Return the options acquired by the latest `read_args()`."""
        if self.last_result is None:
            return []
        return list(self.last_result.options)

    def values(self) -> dict[str, Any]:
        return self.registry.values()

    def reset(self) -> None:
        self.registry.reset()

    def __repr__(self) -> str:
        return (
            f"FlagSet(dialect={self.dialect}, flags={len(self.registry)}, "
            f"delimiter={self.registry.delimiter!r})"
        )
