"""
flagslot

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    DuplicateAliasError,
    FlagslotError,
    InvalidAliasError,
    InvalidDialectError,
    InvalidNumericError,
    MissingArgumentsError,
)
from .flagset import FlagSet
from .parser import (
    Dialect,
    FlagRegistry,
    FlagSpec,
    NumericPolicy,
    ParseResult,
    ParseSession,
    Slot,
    ValueKind,
)
from .version import __version__

logger = logging.getLogger("flagslot")


__all__ = [
    "Dialect",
    "DuplicateAliasError",
    "FlagRegistry",
    "FlagSet",
    "FlagSpec",
    "FlagslotError",
    "InvalidAliasError",
    "InvalidDialectError",
    "InvalidNumericError",
    "MissingArgumentsError",
    "NumericPolicy",
    "ParseResult",
    "ParseSession",
    "Slot",
    "ValueKind",
    "__version__",
]
