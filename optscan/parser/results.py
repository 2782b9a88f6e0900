# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tagged result types returned by the option scanner.

Every scan call returns exactly one of:
- `ShortOption`: a recognized `-x` option, with its value if it takes one.
- `LongOptionMatch`: a recognized `--name` option, with its value if any.
- `FlagSet`: a recognized `--name` option whose code was written into a `FlagTarget`.
- `EndOfOptions`: option scanning has finished.
- `ScanError`: a structured failure; the cursor has already moved past it.

Each result exposes `code`, the value a C getopt call would have returned
(`-1` for end, `"?"` for errors, `0` for flag writes).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

END_CODE = -1
ERROR_CODE = "?"
FLAG_CODE = 0


class ErrorKind(Enum):
    """Kinds of scan failure."""

    ILLEGAL_OPTION = "illegal_option"
    MISSING_ARGUMENT = "missing_argument"
    UNRECOGNIZED_LONG_OPTION = "unrecognized_long_option"
    MISSING_LONG_ARGUMENT = "missing_long_argument"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShortOption:
    char: str
    value: str | None = None

    @property
    def code(self) -> str:
        return self.char

    @property
    def flag(self) -> str:
        return f"-{self.char}"


@dataclass(frozen=True)
class LongOptionMatch:
    name: str
    code: Any
    value: str | None = None
    index: int = 0

    @property
    def flag(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True)
class FlagSet:
    """A long option that stored its code into a flag target instead of returning it."""

    name: str
    stored: Any
    value: str | None = None
    index: int = 0

    @property
    def code(self) -> int:
        return FLAG_CODE

    @property
    def flag(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True)
class EndOfOptions:
    @property
    def code(self) -> int:
        return END_CODE


@dataclass(frozen=True)
class ScanError:
    """
    Structured scan failure.

    Attributes:
        kind (ErrorKind): What went wrong.
        option (str): The offending option letter or long option name.
        token (str): The full offending token text after its leading dashes. Used
            by the unrecognized long option message, which echoes any `=value`.
    """

    kind: ErrorKind
    option: str
    token: str = ""

    @property
    def code(self) -> str:
        return ERROR_CODE

    def describe(self) -> str:
        """Return the diagnostic message without the program prefix."""
        if self.kind is ErrorKind.ILLEGAL_OPTION:
            return f"illegal option -- {self.option}"
        if self.kind is ErrorKind.MISSING_ARGUMENT:
            return f"option requires an argument -- {self.option}"
        if self.kind is ErrorKind.UNRECOGNIZED_LONG_OPTION:
            return f"unrecognized option '--{self.token or self.option}'"
        return f"option requires argument -- {self.option}"

    def render(self, program: str) -> str:
        """Return the one-line getopt diagnostic for this error."""
        return f"{program}: {self.describe()}"


ScanResult = Union[ShortOption, LongOptionMatch, FlagSet, EndOfOptions, ScanError]
