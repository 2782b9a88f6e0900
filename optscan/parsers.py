# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse-based root parser for the `optscan` command.

The command scans an argument vector with `OptionScanner` and renders the
classified results, which is handy for checking how a getopt-style table will
treat a given command line.
"""

from argparse import (
    REMAINDER,
    ArgumentParser,
    ArgumentTypeError,
    Namespace,
    RawDescriptionHelpFormatter,
)
from typing import Sequence

from optscan.exceptions import OptionSpecError
from optscan.parser.has_argument import HasArgument
from optscan.parser.long_option import LongOption


def parse_long_option(text: str) -> LongOption:
    """Convert `NAME[=none|required|optional]` into a `LongOption`."""
    name, _, kind = text.partition("=")
    try:
        return LongOption(name=name.lstrip("-"), has_argument=kind or HasArgument.NONE)
    except OptionSpecError as error:
        raise ArgumentTypeError(str(error)) from error


def get_root_parser(
    prog: str | None = "optscan",
    description: str | None = "Scan a command line the way POSIX getopt_long does.",
    epilog: str | None = (
        "Example: optscan -s 'ab:' -l output=required -- -a -b 1 --output=x file.txt"
    ),
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the optscan CLI.

    Options:
        -v / --verbose      : Enable debug logging.
        --log-mode          : Force "cli" or "json" log output.
        -q / --quiet        : Do not print getopt diagnostics.
        -c / --config       : Load short and long options from a YAML or TOML file.
        -s / --short        : Short option spec, e.g. "ab:c".
        -l / --long         : Long option, NAME[=none|required|optional]. Repeatable.
        --short-only        : Use the short option scanner only.
        --program           : Program name used in diagnostics.
        --version           : Print the optscan version.
        args                : The command line to scan (without program name).
    """
    parser = ArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Log output format."
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress getopt diagnostics."
    )
    parser.add_argument(
        "-c", "--config", default=None, help="YAML or TOML option table to load."
    )
    parser.add_argument(
        "-s", "--short", default=None, help="Short option spec, e.g. 'ab:c'."
    )
    parser.add_argument(
        "-l",
        "--long",
        action="append",
        type=parse_long_option,
        default=[],
        metavar="NAME[=KIND]",
        help="Long option with kind none, required or optional. Repeatable.",
    )
    parser.add_argument(
        "--short-only", action="store_true", help="Scan short options only."
    )
    parser.add_argument(
        "--program", default=None, help="Program name used in diagnostics."
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    parser.add_argument("args", nargs=REMAINDER, help="Command line to scan.")
    return parser


def parse_cli(args: Sequence[str] | None = None) -> Namespace:
    """Parse the optscan command line, dropping a leading `--` before the scanned args."""
    namespace = get_root_parser().parse_args(args)
    if namespace.args and namespace.args[0] == "--":
        namespace.args = namespace.args[1:]
    return namespace
