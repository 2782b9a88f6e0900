"""
Optscan Option Scanner

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import Namespace
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from optscan.config import OptionSpec, loader
from optscan.console import console
from optscan.exceptions import OptscanError
from optscan.logger import logger
from optscan.parser import (
    FlagSet,
    LongOptionMatch,
    LongOptionTable,
    OptionScanner,
    ScanError,
    ScanResult,
    ShortOption,
    ShortOptionSpec,
)
from optscan.parsers import parse_cli
from optscan.utils import setup_logging
from optscan.version import __version__


def build_spec(namespace: Namespace) -> OptionSpec:
    """Merge the config file (if any) with options given on the command line."""
    if namespace.config:
        spec = loader(namespace.config)
    else:
        spec = OptionSpec(short=ShortOptionSpec.parse(""), long=LongOptionTable())
    if namespace.short is not None:
        spec.short = ShortOptionSpec.parse(namespace.short)
    for option in namespace.long:
        spec.long.add(option)
    if namespace.quiet:
        spec.print_errors = False
    if namespace.program:
        spec.program = namespace.program
    return spec


def scan(spec: OptionSpec, args: Sequence[str]) -> OptionScanner:
    program = spec.program or "optscan"
    return OptionScanner(
        [program, *args],
        spec.short,
        spec.long,
        program=program,
        print_errors=spec.print_errors,
    )


def describe(result: ScanResult) -> tuple[str, str, str]:
    if isinstance(result, ShortOption):
        return ("short", f"-{result.char}", "" if result.value is None else result.value)
    if isinstance(result, LongOptionMatch):
        return ("long", f"--{result.name}", "" if result.value is None else result.value)
    if isinstance(result, FlagSet):
        return ("flag", f"--{result.name}", f"stored {result.stored!r}")
    if isinstance(result, ScanError):
        return ("error", str(result.kind), result.describe())
    return ("end", "", "")


def render(results: list[ScanResult], operands: list[str]) -> None:
    table = Table(title="Scan results", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="bold")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for position, result in enumerate(results, start=1):
        kind, option, value = describe(result)
        style = "red" if kind == "error" else None
        table.add_row(str(position), kind, escape(option), escape(value), style=style)
    console.print(table)
    if operands:
        console.print(f"[bold]Operands:[/] {escape(' '.join(operands))}")


def main(argv: Sequence[str] | None = None) -> int:
    namespace = parse_cli(argv)
    if namespace.version:
        console.print(f"optscan version {__version__}")
        return 0

    setup_logging(
        mode=namespace.log_mode,
        console_log_level=logging.DEBUG if namespace.verbose else logging.WARNING,
    )

    try:
        spec = build_spec(namespace)
    except (OptscanError, FileNotFoundError) as error:
        logger.error("Invalid option configuration: %s", error)
        console.print(f"[bold red]❌ {escape(str(error))}[/]")
        return 2

    scanner = scan(spec, namespace.args)
    results: list[ScanResult] = []
    while True:
        result = scanner.scan_short() if namespace.short_only else scanner.scan_long()
        if not isinstance(result, (ShortOption, LongOptionMatch, FlagSet, ScanError)):
            break
        results.append(result)
    render(results, scanner.operands)
    return 1 if any(isinstance(result, ScanError) for result in results) else 0


if __name__ == "__main__":
    sys.exit(main())
