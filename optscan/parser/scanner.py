# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the option scanner: a POSIX getopt / getopt_long compatible
state machine that returns one classified result per call.

Scanning stops at the first operand (no argument permutation), at the `--`
terminator (which is consumed), or when the argument vector runs out. Clustered
short options (`-abc`) are returned one letter per call, and a value-taking letter
ends its cluster (`-ofile`, or `-o file`). Long options match by exact name only;
`--name=value` supplies an inline value.

Public Interface:
- `OptionScanner`: binds an argument vector, option specs, a cursor and diagnostic
  settings for one session.
- `scan_short(...)`, `scan_long(...)`: stateless entry points taking an explicit cursor.

Example Usage:
    scanner = OptionScanner(sys.argv, "ab:", [LongOption("output", "required")])
    for result in scanner:
        match result:
            case ShortOption(char="a"):
                ...
            case LongOptionMatch(code="output", value=path):
                ...
            case ScanError():
                sys.exit(2)
    files = scanner.operands

Errors never raise. They are returned as `ScanError` values and, unless
`print_errors` is off, rendered to the error console the way getopt prints them.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence

from rich.console import Console

from optscan.console import error_console
from optscan.exceptions import OptionScanError
from optscan.logger import logger
from optscan.parser.cursor import ScanCursor, ScanState
from optscan.parser.has_argument import HasArgument
from optscan.parser.long_option import LongOption, LongOptionTable
from optscan.parser.results import (
    EndOfOptions,
    ErrorKind,
    FlagSet,
    LongOptionMatch,
    ScanError,
    ScanResult,
    ShortOption,
)
from optscan.parser.short_spec import ShortOptionSpec
from optscan.utils import get_program_invocation

END_OF_OPTIONS = EndOfOptions()


class OptionScanner:
    """
    Scans one argument vector for short and long options.

    Args:
        args (Sequence[str]): The argument vector. Index 0 is the program name.
        short_spec (str | ShortOptionSpec): Short option letters, `:` marking
            letters that take a value.
        long_options (LongOptionTable | Iterable[LongOption | tuple] | None):
            Long options recognized by `scan_long`.
        cursor (ScanCursor | None): Cursor to thread through calls. A new one is
            created when omitted.
        program (str | None): Program name used in diagnostics. Defaults to `args[0]`.
        print_errors (bool): Whether to print diagnostics for scan errors.
        console (Console | None): Destination for diagnostics. Defaults to stderr.
    """

    def __init__(
        self,
        args: Sequence[str],
        short_spec: str | ShortOptionSpec = "",
        long_options: LongOptionTable | Iterable[LongOption | tuple] | None = None,
        *,
        cursor: ScanCursor | None = None,
        program: str | None = None,
        print_errors: bool = True,
        console: Console | None = None,
    ) -> None:
        self.args: tuple[str, ...] = tuple(args)
        self.short_spec: ShortOptionSpec = ShortOptionSpec.parse(short_spec)
        self.long_options: LongOptionTable = LongOptionTable.coerce(long_options)
        self.cursor: ScanCursor = cursor or ScanCursor()
        self.program: str = program or (
            self.args[0] if self.args else get_program_invocation()
        )
        self.print_errors: bool = print_errors
        self.console: Console = console or error_console

    def __str__(self) -> str:
        return (
            f"OptionScanner(args={len(self.args)}, short='{self.short_spec}', "
            f"long={len(self.long_options)}, next_index={self.cursor.next_index}, "
            f"state={self.cursor.state})"
        )

    def __repr__(self) -> str:
        return str(self)

    @property
    def optarg(self) -> str | None:
        return self.cursor.current_value

    @property
    def optind(self) -> int:
        return self.cursor.next_index

    @property
    def operands(self) -> list[str]:
        """Tokens not consumed as options; meaningful once scanning has ended."""
        return list(self.args[self.cursor.next_index :])

    def reset(self, start_index: int = 1) -> None:
        self.cursor.reset(start_index)

    def _token(self) -> str:
        return self.args[self.cursor.next_index]

    def _starts_session_end(self) -> ScanResult | None:
        """Check the fresh-token end conditions shared by both scanners."""
        cursor = self.cursor
        if cursor.next_index >= len(self.args):
            cursor.finish()
            return END_OF_OPTIONS
        token = self._token()
        if not token.startswith("-") or token == "-":
            cursor.finish()
            return END_OF_OPTIONS
        if token == "--":
            cursor.finish(consumed=1)
            return END_OF_OPTIONS
        return None

    def _error(self, error: ScanError) -> ScanError:
        self.cursor.error_char = error.option
        logger.debug(
            "[%s] Scan error %s at index %d: %s",
            self.program,
            error.kind,
            self.cursor.next_index,
            error.option,
        )
        if self.print_errors:
            self.console.print(
                error.render(self.program), markup=False, highlight=False, soft_wrap=True
            )
        return error

    def scan_short(self) -> ScanResult:
        """
        Return the next short option.

        Returns:
            ShortOption | EndOfOptions | ScanError
        """
        cursor = self.cursor
        if cursor.state is ScanState.DONE:
            return END_OF_OPTIONS
        if cursor.state is ScanState.FRESH:
            ended = self._starts_session_end()
            if ended is not None:
                return ended
            cursor.enter_cluster()

        token = self._token()
        char = token[cursor.sub_position]
        cursor.current_value = None
        requires_value = self.short_spec.lookup(char)

        if requires_value is None:
            cursor.advance_in_cluster(token)
            return self._error(ScanError(ErrorKind.ILLEGAL_OPTION, char, token[1:]))

        if not requires_value:
            cursor.advance_in_cluster(token)
            logger.debug("[%s] Short option -%s", self.program, char)
            return ShortOption(char)

        rest = token[cursor.sub_position + 1 :]
        if rest:
            value = rest
            cursor.next_token()
        elif cursor.next_index + 1 >= len(self.args):
            cursor.next_token()
            return self._error(ScanError(ErrorKind.MISSING_ARGUMENT, char, token[1:]))
        else:
            value = self.args[cursor.next_index + 1]
            cursor.next_token(count=2)

        cursor.current_value = value
        logger.debug("[%s] Short option -%s = %r", self.program, char, value)
        return ShortOption(char, value)

    def scan_long(self) -> ScanResult:
        """
        Return the next short or long option.

        Tokens shaped `--name` or `--name=value` are resolved against the long
        option table. Anything else is handed to `scan_short` on the same cursor.

        Returns:
            LongOptionMatch | FlagSet | ShortOption | EndOfOptions | ScanError
        """
        cursor = self.cursor
        if cursor.state is ScanState.DONE:
            return END_OF_OPTIONS
        if cursor.state is ScanState.FRESH:
            ended = self._starts_session_end()
            if ended is not None:
                return ended
            token = self._token()
            if token.startswith("--") and len(token) > 2:
                return self._scan_long_token(token[2:])
        return self.scan_short()

    def _scan_long_token(self, body: str) -> ScanResult:
        cursor = self.cursor
        name, separator, inline = body.partition("=")
        inline_value = inline if separator else None
        cursor.current_value = None

        found = self.long_options.find(name)
        if found is None:
            cursor.next_token()
            return self._error(
                ScanError(ErrorKind.UNRECOGNIZED_LONG_OPTION, name, body)
            )

        index, option = found
        cursor.long_index = index
        value: str | None = None
        if option.has_argument is HasArgument.REQUIRED:
            if inline_value is not None:
                value = inline_value
                cursor.next_token()
            elif cursor.next_index + 1 < len(self.args):
                value = self.args[cursor.next_index + 1]
                cursor.next_token(count=2)
            else:
                cursor.next_token()
                return self._error(
                    ScanError(ErrorKind.MISSING_LONG_ARGUMENT, name, body)
                )
        elif option.has_argument is HasArgument.OPTIONAL:
            value = inline_value
            cursor.next_token()
        else:
            cursor.next_token()

        cursor.current_value = value
        logger.debug("[%s] Long option --%s = %r", self.program, name, value)
        if option.flag is not None:
            option.flag.set(option.code)
            return FlagSet(name=name, stored=option.code, value=value, index=index)
        return LongOptionMatch(name=name, code=option.code, value=value, index=index)

    def __iter__(self) -> Iterator[ScanResult]:
        """Yield results from `scan_long` until end-of-options."""
        while True:
            result = self.scan_long()
            if isinstance(result, EndOfOptions):
                return
            yield result

    def collect(self, strict: bool = False) -> tuple[list[ScanResult], list[str]]:
        """
        Scan to the end and return `(results, operands)`.

        Args:
            strict (bool): Raise on the first scan error instead of collecting it.

        Raises:
            OptionScanError: If `strict` is set and a scan error occurs.
        """
        results: list[ScanResult] = []
        for result in self:
            if strict and isinstance(result, ScanError):
                raise OptionScanError(result, self.program)
            results.append(result)
        return results, self.operands


def scan_short(
    args: Sequence[str],
    spec: str | ShortOptionSpec,
    cursor: ScanCursor,
    **kwargs: Any,
) -> ScanResult:
    """Scan the next short option of `args` using an explicit cursor."""
    return OptionScanner(args, spec, cursor=cursor, **kwargs).scan_short()


def scan_long(
    args: Sequence[str],
    spec: str | ShortOptionSpec,
    long_spec: LongOptionTable | Iterable[LongOption | tuple] | None,
    cursor: ScanCursor,
    **kwargs: Any,
) -> ScanResult:
    """Scan the next short or long option of `args` using an explicit cursor."""
    return OptionScanner(args, spec, long_spec, cursor=cursor, **kwargs).scan_long()
