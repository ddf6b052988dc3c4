# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Slot` and `FlagSpec`, the registry's data model.

A `Slot` is the typed output cell a caller gets back from registration. It is
tagged with a `ValueKind` and refuses values of any other type, so a slot's
kind and the concrete type of its value always agree. The parser writes
through the slot; callers read `slot.value` after parsing.

A `FlagSpec` groups every alias of one logical flag around a single slot.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flagslot.parser.value_kind import ValueKind


class Slot:
    """
    Typed, writable value holder returned by flag registration.

    Attributes:
        kind (ValueKind): The value kind of the owning flag.
        default (Any): The value restored by `reset()`.
        value (Any): The current value. Assignments are type checked.
    """

    __slots__ = ("kind", "default", "_value")

    def __init__(self, kind: ValueKind, default: Any = None) -> None:
        self.kind: ValueKind = kind
        if default is None:
            default = kind.zero
        self.default: Any = self._check(default)
        self._value: Any = self.default

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = self._check(value)

    def _check(self, value: Any) -> Any:
        if not self.kind.accepts(value):
            raise TypeError(
                f"{self.kind} slot cannot hold {type(value).__name__} value {value!r}"
            )
        if self.kind is ValueKind.FLOAT:
            return float(value)
        return value

    def reset(self) -> None:
        """Restore the default value."""
        self._value = self.default

    def __repr__(self) -> str:
        return f"Slot(kind={self.kind.name}, value={self._value!r})"


@dataclass
class FlagSpec:
    """
    One logical flag.

    Attributes:
        aliases (tuple[str, ...]): Every spelling of the flag, in registration order.
        kind (ValueKind): The value kind; always equal to `slot.kind`.
        slot (Slot): The shared output cell.
        help (str): Optional help text.
    """

    aliases: tuple[str, ...]
    kind: ValueKind
    slot: Slot = field(repr=False)
    help: str = ""

    @property
    def name(self) -> str:
        """The first registered alias."""
        return self.aliases[0]

    @property
    def value(self) -> Any:
        return self.slot.value

    def get_alias_text(self) -> str:
        return ", ".join(self.aliases)
