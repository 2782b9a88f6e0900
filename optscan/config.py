# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declarative option tables."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from optscan.exceptions import OptionSpecError
from optscan.logger import logger
from optscan.parser.has_argument import HasArgument
from optscan.parser.long_option import FlagTarget, LongOption, LongOptionTable
from optscan.parser.short_spec import ShortOptionSpec


class RawLongOption(BaseModel):
    """Raw long option entry as written in a config file."""

    name: str
    has_argument: HasArgument = HasArgument.NONE
    flag: str | None = None
    code: Any = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if value.startswith("--"):
            value = value[2:]
        if not value:
            raise ValueError("name must not be empty.")
        return value

    @field_validator("has_argument", mode="before")
    @classmethod
    def validate_has_argument(cls, value: Any) -> HasArgument:
        if value is None:
            return HasArgument.NONE
        return HasArgument(value)


class OptionSpecConfig(BaseModel):
    """Option table configuration model."""

    program: str | None = None
    short: str = ""
    long: list[RawLongOption] = Field(default_factory=list)
    print_errors: bool = True

    def to_spec(self) -> OptionSpec:
        flags: dict[str, FlagTarget] = {}
        table = LongOptionTable()
        for raw in self.long:
            flag = None
            if raw.flag:
                flag = flags.setdefault(raw.flag, FlagTarget(raw.flag))
            table.add(
                LongOption(
                    name=raw.name,
                    has_argument=raw.has_argument,
                    flag=flag,
                    code=raw.code,
                )
            )
        return OptionSpec(
            short=ShortOptionSpec.parse(self.short),
            long=table,
            flags=flags,
            program=self.program,
            print_errors=self.print_errors,
        )


@dataclass
class OptionSpec:
    """A loaded option table ready to hand to `OptionScanner`."""

    short: ShortOptionSpec
    long: LongOptionTable
    flags: dict[str, FlagTarget] = field(default_factory=dict)
    program: str | None = None
    print_errors: bool = True


def loader(file_path: Path | str) -> OptionSpec:
    """
    Load an option table from a YAML or TOML file.

    The file should contain a dictionary with an optional `short` spec string and
    an optional `long` list. Each long entry needs at least a `name`:

        short: "ab:c"
        long:
          - name: output
            has_argument: required
            code: o
          - name: verbose
            flag: verbose
            code: 1

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        OptionSpec: The short spec, long table and flag targets.

    Raises:
        FileNotFoundError: If the file does not exist.
        OptionSpecError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise OptionSpecError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise OptionSpecError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise OptionSpecError(
            "Configuration file must contain a dictionary.\n"
            "Example:\n"
            "short: 'ab:c'\n"
            "long:\n"
            "  - name: 'output'\n"
            "    has_argument: 'required'"
        )

    try:
        config = OptionSpecConfig(**raw_config)
    except ValidationError as error:
        raise OptionSpecError(f"Invalid option config {path}:\n{error}") from error

    spec = config.to_spec()
    logger.debug(
        "Loaded option config %s: short='%s', long=%s", path, spec.short, spec.long.names()
    )
    return spec
