"""
flagslot

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .dialect import Dialect, NumericPolicy
from .flag import FlagSpec, Slot
from .parser_types import ParseResult
from .registry import FlagRegistry
from .session import ParseSession
from .value_kind import ValueKind

__all__ = [
    "Dialect",
    "FlagRegistry",
    "FlagSpec",
    "NumericPolicy",
    "ParseResult",
    "ParseSession",
    "Slot",
    "ValueKind",
]
