"""
Optscan Option Scanner

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .cursor import ScanCursor, ScanState
from .has_argument import HasArgument
from .long_option import FlagTarget, LongOption, LongOptionTable
from .results import (
    EndOfOptions,
    ErrorKind,
    FlagSet,
    LongOptionMatch,
    ScanError,
    ScanResult,
    ShortOption,
)
from .scanner import OptionScanner, scan_long, scan_short
from .short_spec import ShortOptionSpec

__all__ = [
    "EndOfOptions",
    "ErrorKind",
    "FlagSet",
    "FlagTarget",
    "HasArgument",
    "LongOption",
    "LongOptionMatch",
    "LongOptionTable",
    "OptionScanner",
    "ScanCursor",
    "ScanError",
    "ScanResult",
    "ScanState",
    "ShortOption",
    "ShortOptionSpec",
    "scan_long",
    "scan_short",
]
