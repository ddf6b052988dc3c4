# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Flag definition loader for flagslot.

Flag sets can be declared in YAML or TOML instead of code:

    delimiter: "-"
    dialect: strict
    numeric_policy: raise
    flags:
      - aliases: "-v,--verbose"
        kind: bool
        help: Verbose output
      - aliases: ["-n", "--count"]
        kind: int
        default: 3

Raw data is validated with pydantic models and turned into a ready `FlagSet`.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from flagslot.exceptions import ConfigError, FlagslotError
from flagslot.flagset import FlagSet
from flagslot.logger import logger
from flagslot.parser.dialect import Dialect, NumericPolicy
from flagslot.parser.registry import DEFAULT_DELIMITER, split_aliases
from flagslot.parser.value_kind import ValueKind


class RawFlag(BaseModel):
    """Raw flag model for flagslot configuration."""

    aliases: tuple[str, ...]
    kind: ValueKind = ValueKind.STRING
    default: Any = None
    help: str = ""

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, value: Any) -> tuple[str, ...]:
        try:
            aliases = split_aliases(value)
        except (FlagslotError, TypeError) as error:
            raise ValueError(str(error)) from error
        if not aliases:
            raise ValueError("A flag needs at least one alias.")
        return aliases

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ValueKind:
        return ValueKind(value)

    @model_validator(mode="after")
    def validate_default(self) -> RawFlag:
        if self.default is not None and not self.kind.accepts(self.default):
            raise ValueError(
                f"Default {self.default!r} does not match kind '{self.kind}' "
                f"for flag {', '.join(self.aliases)}"
            )
        return self


class RawFlagConfig(BaseModel):
    """Top-level flag definition file model."""

    delimiter: str | None = DEFAULT_DELIMITER
    dialect: Dialect = Dialect.STRICT
    numeric_policy: NumericPolicy = NumericPolicy.RAISE
    flags: list[RawFlag] = Field(default_factory=list)

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("delimiter must be a single character.")
        return value

    @field_validator("dialect", mode="before")
    @classmethod
    def validate_dialect(cls, value: Any) -> Dialect:
        return Dialect(value)

    @field_validator("numeric_policy", mode="before")
    @classmethod
    def validate_numeric_policy(cls, value: Any) -> NumericPolicy:
        return NumericPolicy(value)


def build_flagset(config: RawFlagConfig) -> FlagSet:
    """Create a `FlagSet` and register every flag of `config`."""
    flagset = FlagSet(
        delimiter=config.delimiter,
        dialect=config.dialect,
        numeric_policy=config.numeric_policy,
    )
    for raw_flag in config.flags:
        try:
            flagset.flag(
                raw_flag.aliases, raw_flag.kind, raw_flag.default, raw_flag.help
            )
        except FlagslotError as error:
            raise ConfigError(str(error)) from error
    return flagset


def read_config(path: str | Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file) or {}
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got {type(raw_config).__name__}"
        )
    return raw_config


def load_config(path: str | Path) -> FlagSet:
    """
    Load a flag definition file and return the configured `FlagSet`.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    raw_config = read_config(path)
    try:
        config = RawFlagConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid flag configuration in {path}:\n{error}") from error
    logger.debug("Loaded %d flag definitions from %s", len(config.flags), path)
    return build_flagset(config)


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "flagslot.yaml",
        Path.cwd() / "flagslot.toml",
        Path.cwd() / ".flagslot.yaml",
        Path.cwd() / ".flagslot.toml",
        Path(os.environ.get("FLAGSLOT_CONFIG", "flagslot.yaml")),
        Path.home() / ".config" / "flagslot" / "flagslot.yaml",
        Path.home() / ".config" / "flagslot" / "flagslot.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)
