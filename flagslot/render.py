# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich views of a `FlagSet` and its latest `ParseResult`.

Functions:
- build_flag_table(flagset): Table of every flag, its kind, default and value.
- build_result_table(flagset, result): Flag table plus options and invalid flags.
- result_to_dict(flagset, result): Plain data for JSON output.
"""
from __future__ import annotations

from typing import Any

from rich import box
from rich.markup import escape
from rich.table import Table

from flagslot.flagset import FlagSet
from flagslot.parser.parser_types import ParseResult


def build_flag_table(flagset: FlagSet, title: str | None = "Flags") -> Table:
    """Table of registered flags with their current values."""
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Flag", style="flag")
    table.add_column("Kind", style="kind")
    table.add_column("Default", style="default")
    table.add_column("Value", style="value")
    table.add_column("Help")
    for spec in flagset.registry:
        table.add_row(
            escape(spec.get_alias_text()),
            str(spec.kind),
            escape(repr(spec.slot.default)),
            escape(repr(spec.slot.value)),
            escape(spec.help),
        )
    return table


def build_result_table(flagset: FlagSet, result: ParseResult) -> Table:
    """Flag table followed by the options and invalid flags of `result`."""
    table = build_flag_table(flagset, title=f"Parse result ({result.dialect})")
    table.add_row("")
    for option in result.options:
        table.add_row("[option]option[/]", "", "", escape(option))
    for invalid in result.invalid_flags:
        table.add_row("[invalid]invalid[/]", "", "", escape(invalid))
    return table


def result_to_dict(flagset: FlagSet, result: ParseResult) -> dict[str, Any]:
    return {
        "dialect": str(result.dialect),
        "values": flagset.values(),
        "options": list(result.options),
        "invalid_flags": list(result.invalid_flags),
    }
