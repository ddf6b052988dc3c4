# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagRegistry`, the alias index behind flagslot parsing.

Each call to `register()` creates one `FlagSpec` with a fresh `Slot` and indexes
every alias of that flag. Lookups during parsing are plain dictionary lookups;
the registry holds no parsing logic of its own.

The registry also owns the flag delimiter, the single character that makes a
token "look like a flag". It is normally given explicitly (default `-`). With
`delimiter=None` it is inferred from the first character of the first alias
ever registered.

Example Usage:
    registry = FlagRegistry()
    verbose = registry.register("-v,--verbose", ValueKind.BOOLEAN)
    count = registry.register(["-n", "--count"], ValueKind.INTEGER, default=3)

    registry.get("--count") is registry.get("-n")   # True
    count.value                                      # 3
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from flagslot.exceptions import DuplicateAliasError, InvalidAliasError
from flagslot.logger import logger
from flagslot.parser.flag import FlagSpec, Slot
from flagslot.parser.value_kind import ValueKind

DEFAULT_DELIMITER = "-"


def split_aliases(aliases: str | Iterable[str]) -> tuple[str, ...]:
    """
    Normalize an alias declaration into a tuple of alias strings.

    Accepts a comma-separated string (`"-a,--append,--add-behind"`) or an
    iterable of strings. Whitespace around each alias is dropped, as are empty
    entries. Commas cannot be escaped.
    """
    if isinstance(aliases, str):
        parts: Iterable[str] = aliases.split(",")
    else:
        parts = aliases
    result = []
    for alias in parts:
        if not isinstance(alias, str):
            raise InvalidAliasError(f"Alias {alias!r} must be a string")
        alias = alias.strip()
        if alias:
            result.append(alias)
    return tuple(result)


class FlagRegistry:
    """
    Maps flag aliases to `FlagSpec` objects.

    Attributes:
        delimiter (str | None): The short-flag marker, or None until inferred.
    """

    def __init__(self, delimiter: str | None = DEFAULT_DELIMITER) -> None:
        if delimiter is not None and len(delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got {delimiter!r}"
            )
        self.delimiter: str | None = delimiter
        self._index: dict[str, FlagSpec] = {}
        self._flags: list[FlagSpec] = []

    def register(
        self,
        aliases: str | Iterable[str],
        kind: ValueKind | str,
        default: Any = None,
        help: str = "",
    ) -> Slot:
        """
        Register a flag and return its slot.

        Args:
            aliases (str | Iterable[str]): Comma-separated aliases or a list of them.
            kind (ValueKind | str): The value kind of the flag.
            default (Any): The initial slot value. None selects the kind's zero value.
            help (str): Optional help text.

        Returns:
            Slot: The writable handle to the flag's value.

        Raises:
            InvalidAliasError: If no alias is given.
            DuplicateAliasError: If an alias is already registered.
            TypeError: If the default does not match the kind.
        """
        names = split_aliases(aliases)
        if not names:
            raise InvalidAliasError(f"No alias provided in {aliases!r}")
        kind = ValueKind(kind)

        seen: set[str] = set()
        for name in names:
            if name in seen:
                raise DuplicateAliasError(f"Alias '{name}' is repeated in {names}")
            seen.add(name)
            existing = self._index.get(name)
            if existing:
                raise DuplicateAliasError(
                    f"Alias '{name}' is already used by flag '{existing.name}'"
                )

        spec = FlagSpec(aliases=names, kind=kind, slot=Slot(kind, default), help=help)
        if self.delimiter is None:
            self.delimiter = names[0][0]
            logger.debug("Inferred flag delimiter '%s' from '%s'", self.delimiter, names[0])
        for name in names:
            self._index[name] = spec
        self._flags.append(spec)
        logger.debug("Registered %s flag %s", kind, spec.get_alias_text())
        return spec.slot

    def get(self, alias: str) -> FlagSpec | None:
        """Return the flag bound to `alias`, or None."""
        return self._index.get(alias)

    def __contains__(self, alias: object) -> bool:
        return alias in self._index

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self._flags)

    @property
    def flags(self) -> list[FlagSpec]:
        """Registered flags in registration order."""
        return list(self._flags)

    @property
    def aliases(self) -> list[str]:
        return list(self._index)

    @property
    def long_prefix(self) -> str | None:
        """The long-form prefix, i.e. the delimiter doubled."""
        if self.delimiter is None:
            return None
        return self.delimiter * 2

    def looks_like_flag(self, token: str) -> bool:
        """Return True if `token` starts with the flag delimiter."""
        if not self.delimiter:
            return False
        return token.startswith(self.delimiter)

    def is_long_form(self, token: str) -> bool:
        """Return True if `token` is written in long form (e.g. `--name`)."""
        prefix = self.long_prefix
        return prefix is not None and token.startswith(prefix)

    def values(self) -> dict[str, Any]:
        """Return each flag's current value keyed by its first alias."""
        return {spec.name: spec.slot.value for spec in self._flags}

    def reset(self) -> None:
        """Restore every slot to its default value."""
        for spec in self._flags:
            spec.slot.reset()

    def __repr__(self) -> str:
        return f"FlagRegistry(delimiter={self.delimiter!r}, flags={len(self._flags)})"
