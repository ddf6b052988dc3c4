# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Short-flag bundle expansion.

A bundle is one token combining several single-character flags, such as
`-vxf`. When the scan meets a token that is not an alias itself but whose
first two characters are, the bundle is rewritten inside the working argument
list:

    ["-vxf", "myfile"]  →  ["-f", "myfile", "-v", "-x"]

The last flag of the bundle stays in place so it can still consume the value
that follows it. The other flags are appended to the end of the list and are
handled after everything else. Any inline `=value` suffix stays with the last
flag. The scan then re-reads the same index.
"""
from __future__ import annotations

from flagslot.logger import logger
from flagslot.parser.parser_types import split_flag
from flagslot.parser.registry import FlagRegistry


def is_bundle(token: str, registry: FlagRegistry) -> bool:
    """Return True if `token` should be expanded as a short-flag bundle."""
    flag, _ = split_flag(token)
    return (
        len(flag) > 2
        and registry.looks_like_flag(flag)
        and flag not in registry
        and flag[:2] in registry
    )


def expand_bundle(args: list[str], index: int, registry: FlagRegistry) -> list[str]:
    """
    Expand the bundle at `args[index]` in place.

    Args:
        args (list[str]): The working argument list. It only grows.
        index (int): Position of the bundle token.
        registry (FlagRegistry): Supplies the delimiter.

    Returns:
        list[str]: The tokens appended to the end of `args`.
    """
    token = args[index]
    flag, inline = split_flag(token)
    delimiter = flag[0]
    *leading, last = flag[1:]

    args[index] = f"{delimiter}{last}" if inline is None else f"{delimiter}{last}={inline}"
    appended = [f"{delimiter}{char}" for char in leading]
    args.extend(appended)
    logger.debug("Expanded bundle '%s' -> '%s' + %s", token, args[index], appended)
    return appended
