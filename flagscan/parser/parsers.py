# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the built-in argument catalogs and scanners shipped with Flagscan.

Both are instances of the same generic engine, differing only in their
catalog and in the field mapping that builds the typed configuration.

Key Components:
- `ConfigArguments` / `get_config_scanner()`: `--help`, `--version` and an
  optional `--config <path>`. An empty invocation is rejected.
- `TemplateArguments` / `get_templates_scanner()`: `--help`/`-h`,
  `--version`/`-v`, required `--templates-path`/`-t <path>` and
  `--definitions-path`/`-d <path>`, optional `--results-root-path`/`-r <path>`.
- `FlagscanScanners` / `get_scanners()`: Container for both scanners.
"""
from __future__ import annotations

from dataclasses import dataclass

from flagscan.parser.argument import ArgumentDefinition
from flagscan.parser.argument_action import ArgumentAction
from flagscan.parser.catalog import ArgumentCatalog
from flagscan.parser.parser_types import FieldValue
from flagscan.parser.scanner import ArgumentScanner
from flagscan.version import __version__


@dataclass(frozen=True)
class ConfigArguments:
    """Configuration produced by the `config` scanner."""

    path_to_config: str | None = None


@dataclass(frozen=True)
class TemplateArguments:
    """Configuration produced by the `templates` scanner."""

    templates_path: str
    definitions_path: str
    results_root_path: str | None = None


def _optional_str(value: FieldValue) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"Expected a single string value, got {value!r}")


def _required_str(value: FieldValue) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a single string value, got {value!r}")
    return value


def to_config_arguments(fields: dict[str, FieldValue]) -> ConfigArguments:
    return ConfigArguments(path_to_config=_optional_str(fields.get("config")))


def to_template_arguments(fields: dict[str, FieldValue]) -> TemplateArguments:
    return TemplateArguments(
        templates_path=_required_str(fields.get("templates_path")),
        definitions_path=_required_str(fields.get("definitions_path")),
        results_root_path=_optional_str(fields.get("results_root_path")),
    )


def get_config_catalog(
    program: str = "recoder",
    version: str = __version__,
) -> ArgumentCatalog:
    """Return the catalog for `--help`, `--version` and `--config <path>`."""
    return ArgumentCatalog(
        [
            ArgumentDefinition(
                "--help",
                description="Show this help",
                action=ArgumentAction.HELP,
            ),
            ArgumentDefinition(
                "--version",
                description="Show the application version",
                action=ArgumentAction.VERSION,
            ),
            ArgumentDefinition(
                "--config",
                syntax="--config <path>",
                description="Set custom path to the config file",
                arity=1,
            ),
        ],
        program=program,
        example=f"{program} --config ./config.json",
        version=version,
        require_arguments=True,
    )


def get_templates_catalog(
    program: str = "flagscan",
    version: str = __version__,
) -> ArgumentCatalog:
    """Return the catalog for the template generation flags."""
    return ArgumentCatalog(
        [
            ArgumentDefinition(
                "--help",
                shorthand="-h",
                syntax="--help, -h",
                description="Show this help",
                action=ArgumentAction.HELP,
            ),
            ArgumentDefinition(
                "--version",
                shorthand="-v",
                syntax="--version, -v",
                description="Show the application version",
                action=ArgumentAction.VERSION,
            ),
            ArgumentDefinition(
                "--templates-path",
                shorthand="-t",
                syntax="--templates-path, -t <path>",
                description="Path to the templates directory",
                arity=1,
                required=True,
            ),
            ArgumentDefinition(
                "--definitions-path",
                shorthand="-d",
                syntax="--definitions-path, -d <path>",
                description="Path to the definitions file",
                arity=1,
                required=True,
            ),
            ArgumentDefinition(
                "--results-root-path",
                shorthand="-r",
                syntax="--results-root-path, -r <path>",
                description="Root directory for generated results",
                arity=1,
            ),
        ],
        program=program,
        example=f"{program} -t ./templates -d ./definitions.json -r ./results",
        version=version,
    )


def get_config_scanner(
    program: str = "recoder",
    version: str = __version__,
) -> ArgumentScanner:
    return ArgumentScanner(get_config_catalog(program, version), to_config_arguments)


def get_templates_scanner(
    program: str = "flagscan",
    version: str = __version__,
) -> ArgumentScanner:
    return ArgumentScanner(
        get_templates_catalog(program, version), to_template_arguments
    )


@dataclass
class FlagscanScanners:
    """Defines the built-in scanners shipped with Flagscan."""

    config: ArgumentScanner
    templates: ArgumentScanner

    def as_dict(self) -> dict[str, ArgumentScanner]:
        """Convert the FlagscanScanners instance to a dictionary."""
        return {"config": self.config, "templates": self.templates}

    def get_scanner(self, name: str) -> ArgumentScanner | None:
        """Get the scanner by name."""
        return self.as_dict().get(name)


def get_scanners(program: str | None = None) -> FlagscanScanners:
    """Build every built-in scanner, optionally overriding the program name."""
    if program:
        return FlagscanScanners(
            config=get_config_scanner(program),
            templates=get_templates_scanner(program),
        )
    return FlagscanScanners(
        config=get_config_scanner(),
        templates=get_templates_scanner(),
    )
