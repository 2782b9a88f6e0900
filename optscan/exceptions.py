# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by optscan.

Scan failures on user input (unknown options, missing values) are never raised;
they come back from the scanner as `ScanError` results. The exceptions below cover
programmer-facing problems such as malformed option specifications, and the opt-in
strict collection mode.

Exception Hierarchy:
- OptscanError
    ├── OptionSpecError
    └── OptionScanError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optscan.parser.results import ScanError


class OptscanError(Exception):
    """Base exception for optscan."""


class OptionSpecError(OptscanError):
    """Exception raised when a short or long option specification is invalid."""


class OptionScanError(OptscanError):
    """Exception raised by strict collection when the scanner reports an error."""

    def __init__(self, error: ScanError, program: str = ""):
        self.error = error
        super().__init__(error.render(program) if program else error.describe())
