# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Catalog loader for Flagscan argument definitions declared in YAML or TOML."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from flagscan.exceptions import CatalogConfigError, CatalogError
from flagscan.logger import logger
from flagscan.parser.argument import ArgumentDefinition
from flagscan.parser.argument_action import ArgumentAction
from flagscan.parser.catalog import ArgumentCatalog
from flagscan.version import __version__


class RawArgumentDefinition(BaseModel):
    """Raw argument definition model for Flagscan catalog configuration."""

    name: str
    shorthand: str | None = None
    syntax: str = ""
    description: str = ""
    arity: int = Field(default=0, ge=0)
    required: bool = False
    action: ArgumentAction = ArgumentAction.STORE
    dest: str = ""

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: Any) -> ArgumentAction:
        if isinstance(value, ArgumentAction):
            return value
        return ArgumentAction(value)

    def to_definition(self) -> ArgumentDefinition:
        return ArgumentDefinition(
            name=self.name,
            shorthand=self.shorthand,
            syntax=self.syntax,
            description=self.description,
            arity=self.arity,
            required=self.required,
            action=self.action,
            dest=self.dest,
        )


class CatalogConfig(BaseModel):
    """Flagscan catalog configuration model."""

    program: str = "flagscan"
    example: str | None = None
    version: str = __version__
    require_arguments: bool = False
    arguments: list[RawArgumentDefinition] = Field(min_length=1)

    def to_catalog(self) -> ArgumentCatalog:
        return ArgumentCatalog(
            [argument.to_definition() for argument in self.arguments],
            program=self.program,
            example=self.example,
            version=self.version,
            require_arguments=self.require_arguments,
        )


def loader(file_path: Path | str) -> ArgumentCatalog:
    """
    Load a Flagscan argument catalog from a YAML or TOML file.

    The file should contain a dictionary with a list of arguments.

    Each argument should be defined as a dictionary with at least:
    - name: the long-form flag, e.g. `--config`

    Optional keys are `shorthand`, `syntax`, `description`, `arity`,
    `required`, `action` (`store`, `help` or `version`) and `dest`.

    Args:
        file_path (str): Path to the config file (YAML or TOML).

    Returns:
        ArgumentCatalog: The validated catalog.

    Raises:
        CatalogConfigError: If the file is missing, has an unsupported format,
            cannot be parsed, or does not describe a valid catalog.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise CatalogConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise CatalogConfigError(f"Unsupported config format: {suffix}")
    except (
        yaml.YAMLError,
        toml.TomlDecodeError,
        UnicodeDecodeError,
        OSError,
    ) as error:
        raise CatalogConfigError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise CatalogConfigError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "program: 'recoder'\n"
            "arguments:\n"
            "  - name: '--config'\n"
            "    syntax: '--config <path>'\n"
            "    description: 'Set custom path to the config file'\n"
            "    arity: 1"
        )

    try:
        catalog = CatalogConfig.model_validate(raw_config).to_catalog()
    except (ValidationError, CatalogError) as error:
        raise CatalogConfigError(f"Invalid catalog in '{path}': {error}") from error

    logger.debug("Loaded %s from '%s'.", catalog, path)
    return catalog
