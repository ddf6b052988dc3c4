# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse root parser for the `flagslot` command.

The command loads a flag definition file, parses the remaining tokens with
flagslot itself and prints the result. Its own options are handled by
argparse; everything after them is passed through untouched.
"""
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from flagslot.parser.dialect import Dialect, NumericPolicy


def get_root_parser(
    prog: str | None = "flagslot",
    usage: str | None = None,
    description: str | None = "flagslot - parse arguments against a flag definition file.",
    epilog: (
        str | None
    ) = "Tip: separate the tokens to parse with --, e.g. flagslot -c flags.yaml -- -vx in.txt",
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the flagslot CLI.

    Notes:
        ```
        Includes the following arguments:
            -c / --config        : Flag definition file (YAML or TOML).
            -d / --dialect       : strict or permissive.
            --numeric-policy     : raise or collect.
            --skip-first         : Skip the first token (a program name).
            --json               : Print the result as JSON.
            -v / --verbose       : Enable debug logging.
            --log-mode           : cli or json logging.
            --version            : Print the flagslot version.
            args                 : Tokens to parse.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        usage=usage,
        description=description,
        epilog=epilog,
        exit_on_error=exit_on_error,
    )
    parser.add_argument(
        "-c", "--config", help="Flag definition file. Searched for when omitted."
    )
    parser.add_argument(
        "-d",
        "--dialect",
        choices=[dialect.value for dialect in Dialect],
        default=None,
        help="Override the dialect from the config file.",
    )
    parser.add_argument(
        "--numeric-policy",
        choices=[policy.value for policy in NumericPolicy],
        default=None,
        help="Override how invalid numeric values are handled.",
    )
    parser.add_argument(
        "--skip-first",
        action="store_true",
        help="Skip the first token, as when passing a full argv.",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    parser.add_argument("args", nargs=REMAINDER, help="Tokens to parse.")
    return parser


def parse_cli_args(args: Sequence[str] | None = None) -> Namespace:
    return get_root_parser().parse_args(args)
