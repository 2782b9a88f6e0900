# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `HasArgument`, the enum describing whether a long option takes a value.

Members mirror the classic getopt_long constants. Alias coercion lets option tables
written in config files or ported from C use whichever spelling they already have.

Example:
    HasArgument("required")          → HasArgument.REQUIRED
    HasArgument("required_argument") → HasArgument.REQUIRED (via alias)
    HasArgument(2)                   → HasArgument.OPTIONAL (getopt integer)
"""
from __future__ import annotations

from enum import Enum


class HasArgument(Enum):
    """
    Whether a long option accepts a value.

    Members:
        NONE: The option never takes a value; inline `=value` text is ignored.
        REQUIRED: The option needs a value, inline (`--name=value`) or as the next token.
        OPTIONAL: The option accepts an inline value only.

    Aliases:
        - "no_argument" / 0 → "none"
        - "required_argument" / 1 → "required"
        - "optional_argument" / 2 → "optional"
    """

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"

    @classmethod
    def choices(cls) -> list[HasArgument]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "no_argument": "none",
            "no": "none",
            "required_argument": "required",
            "optional_argument": "optional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> HasArgument:
        if isinstance(value, int) and not isinstance(value, bool):
            ordered = [cls.NONE, cls.REQUIRED, cls.OPTIONAL]
            if 0 <= value < len(ordered):
                return ordered[value]
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
