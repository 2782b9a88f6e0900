"""
Optscan Option Scanner

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import (
    EndOfOptions,
    ErrorKind,
    FlagSet,
    FlagTarget,
    HasArgument,
    LongOption,
    LongOptionMatch,
    LongOptionTable,
    OptionScanner,
    ScanCursor,
    ScanError,
    ShortOption,
    scan_long,
    scan_short,
)
from .version import __version__

logger = logging.getLogger("optscan")


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
    "ShortOption",
    "scan_long",
    "scan_short",
    "__version__",
]
