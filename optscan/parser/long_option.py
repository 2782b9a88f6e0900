# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the long option table used by `scan_long`.

- `FlagTarget`: a writable cell the scanner sets instead of returning a code.
- `LongOption`: one `--name` entry with its argument kind, code and optional flag.
- `LongOptionTable`: an ordered, name-unique sequence of `LongOption` entries.

Matching is exact: `--verb` never selects an entry named `verbose`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from optscan.exceptions import OptionSpecError
from optscan.parser.has_argument import HasArgument


class FlagTarget:
    """A mutable cell written by the scanner when a flag-style long option is seen."""

    def __init__(self, name: str = "", value: Any = None) -> None:
        self.name: str = name
        self.value: Any = value

    def set(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"FlagTarget(name={self.name!r}, value={self.value!r})"


@dataclass(frozen=True)
class LongOption:
    """
    Represents one long option.

    Attributes:
        name (str): Option name without the leading `--`.
        has_argument (HasArgument): Whether the option takes a value.
        flag (FlagTarget | None): If set, receives `code` and the scan reports `FlagSet`.
        code (Any): Identifying value returned or stored. Defaults to `name`.
    """

    name: str
    has_argument: HasArgument = HasArgument.NONE
    flag: FlagTarget | None = None
    code: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise OptionSpecError("Long option name must be a non-empty string")
        if self.name.startswith("-"):
            raise OptionSpecError(
                f"Long option name '{self.name}' must not include leading dashes"
            )
        if "=" in self.name:
            raise OptionSpecError(f"Long option name '{self.name}' must not contain '='")
        if not isinstance(self.has_argument, HasArgument):
            try:
                object.__setattr__(self, "has_argument", HasArgument(self.has_argument))
            except ValueError as error:
                raise OptionSpecError(str(error)) from error
        if self.code is None:
            object.__setattr__(self, "code", self.name)


class LongOptionTable:
    """
    Ordered sequence of long options with unique names.

    Accepts `LongOption` instances or `(name, has_argument[, flag[, code]])` tuples.
    """

    def __init__(self, options: Iterable[LongOption | tuple] | None = None) -> None:
        self._options: list[LongOption] = []
        self._index: dict[str, int] = {}
        for option in options or []:
            self.add(option)

    @classmethod
    def coerce(
        cls, options: LongOptionTable | Iterable[LongOption | tuple] | None
    ) -> LongOptionTable:
        if isinstance(options, LongOptionTable):
            return options
        return cls(options)

    def add(self, option: LongOption | tuple) -> LongOption:
        """
        Append an option to the table.

        Raises:
            OptionSpecError: If the entry is malformed or its name is already present.
        """
        if isinstance(option, tuple):
            option = LongOption(*option)
        if not isinstance(option, LongOption):
            raise OptionSpecError(
                f"Expected LongOption or tuple, got {type(option).__name__}"
            )
        if option.name in self._index:
            raise OptionSpecError(f"Duplicate long option name: '{option.name}'")
        self._index[option.name] = len(self._options)
        self._options.append(option)
        return option

    def find(self, name: str) -> tuple[int, LongOption] | None:
        """Return `(index, option)` for an exact name match, or None."""
        index = self._index.get(name)
        if index is None:
            return None
        return index, self._options[index]

    def names(self) -> list[str]:
        return [option.name for option in self._options]

    def __getitem__(self, index: int) -> LongOption:
        return self._options[index]

    def __iter__(self) -> Iterator[LongOption]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"LongOptionTable({', '.join(self.names())})"
