"""
flagslot

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from typing import Sequence

from rich.markup import escape

from flagslot.config import find_config, load_config
from flagslot.console import console
from flagslot.exceptions import ConfigError, FlagslotError
from flagslot.parser.dialect import NumericPolicy
from flagslot.parsers import parse_cli_args
from flagslot.render import build_result_table, result_to_dict
from flagslot.themes import OneColors
from flagslot.utils import setup_logging
from flagslot.version import __version__


def main(argv: Sequence[str] | None = None) -> int:
    cli_args = parse_cli_args(argv)

    if cli_args.version:
        console.print(f"flagslot version {__version__}", highlight=False)
        return 0

    setup_logging(
        mode=cli_args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if cli_args.verbose else logging.WARNING,
    )

    try:
        config_path = cli_args.config or find_config()
        if not config_path:
            raise ConfigError(
                "No flag definition file found. Pass --config or create flagslot.yaml."
            )
        flagset = load_config(config_path)
        if cli_args.numeric_policy:
            flagset.numeric_policy = NumericPolicy(cli_args.numeric_policy)
        tokens = cli_args.args
        if tokens and tokens[0] == "--":
            tokens = tokens[1:]
        result = flagset.parse(
            tokens,
            dialect=cli_args.dialect,
            skip_first=cli_args.skip_first,
        )
    except FlagslotError as error:
        console.print(
            f"[{OneColors.DARK_RED}]❌ {type(error).__name__}:[/] {escape(str(error))}"
        )
        return 1

    if cli_args.json:
        print(json.dumps(result_to_dict(flagset, result), indent=2))
    else:
        console.print(build_result_table(flagset, result))
    return 0 if result.ok else 2


if __name__ == "__main__":
    sys.exit(main())
