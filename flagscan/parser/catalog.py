# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentCatalog`, the fixed and ordered table of every
flag a program accepts.

The catalog is the single source of truth for which tokens are recognized, how
many values follow each one, whether omitting one is an error, and what text
appears in help output. It is validated once at construction and is read-only
afterwards, so a single instance can be shared by every scan in the process.

Adding a flag means adding one `ArgumentDefinition`; neither the scanner nor
the help renderer needs to change. Definition order is help order.

Example Usage:
    catalog = ArgumentCatalog(
        [
            ArgumentDefinition("--help", description="Show this help", action="help"),
            ArgumentDefinition(
                "--config",
                syntax="--config <path>",
                description="Set custom path to the config file",
                arity=1,
            ),
        ],
        program="recoder",
        require_arguments=True,
    )

    catalog.lookup("--config")  # ArgumentDefinition(name='--config', ...)
    catalog.lookup("config")    # None, no prefix
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Iterable, Iterator

from flagscan.exceptions import CatalogError
from flagscan.parser.argument import ArgumentDefinition
from flagscan.parser.argument_action import ArgumentAction
from flagscan.parser.help_text import render_help_text
from flagscan.version import __version__

LONG_PREFIX = "--"
SHORT_PREFIX = "-"


class ArgumentCatalog:
    """
    Immutable, ordered collection of `ArgumentDefinition` entries.

    Args:
        definitions (Iterable[ArgumentDefinition]): Supported flags in help order.
        program (str): Program name used in the default help example.
        example (str | None): Usage example shown at the end of the help text.
        version (str): Text returned when the version flag is matched.
        require_arguments (bool): If True, an invocation with no tokens is an error
            even when no flag is required.
    """

    def __init__(
        self,
        definitions: Iterable[ArgumentDefinition],
        program: str = "flagscan",
        example: str | None = None,
        version: str = __version__,
        require_arguments: bool = False,
    ) -> None:
        self._definitions: tuple[ArgumentDefinition, ...] = tuple(definitions)
        self._program: str = program
        self._example: str | None = example
        self._version: str = version
        self._require_arguments: bool = require_arguments
        self._by_name: dict[str, ArgumentDefinition] = {}
        self._by_shorthand: dict[str, ArgumentDefinition] = {}
        self._by_dest: dict[str, ArgumentDefinition] = {}
        self._validate()

    def _validate_definition(self, definition: ArgumentDefinition) -> None:
        if not isinstance(definition, ArgumentDefinition):
            raise CatalogError(
                f"Catalog entries must be ArgumentDefinition, got {type(definition).__name__}"
            )
        name = definition.name
        if not isinstance(name, str) or not name.startswith(LONG_PREFIX) or len(name) < 3:
            raise CatalogError(
                f"Name '{name}' must start with '{LONG_PREFIX}' and be at least 3 characters long"
            )
        shorthand = definition.shorthand
        if shorthand is not None:
            if (
                not isinstance(shorthand, str)
                or not shorthand.startswith(SHORT_PREFIX)
                or shorthand.startswith(LONG_PREFIX)
                or len(shorthand) != 2
            ):
                raise CatalogError(
                    f"Shorthand '{shorthand}' for '{name}' must be '{SHORT_PREFIX}' "
                    "followed by a single character"
                )
        arity = definition.arity
        if not isinstance(arity, int) or isinstance(arity, bool) or arity < 0:
            raise CatalogError(f"Arity for '{name}' must be a non-negative integer")
        if not definition.dest.replace("_", "").isalnum():
            raise CatalogError(
                f"dest '{definition.dest}' for '{name}' must be a valid identifier "
                "(letters, digits, and underscores only)"
            )
        if definition.dest[0].isdigit():
            raise CatalogError(f"dest '{definition.dest}' must not start with a digit")
        if definition.action.is_informational:
            if arity != 0:
                raise CatalogError(
                    f"Argument with action {definition.action} cannot take values"
                )
            if definition.required:
                raise CatalogError(
                    f"Argument with action {definition.action} cannot be required"
                )

    def _register(self, definition: ArgumentDefinition) -> None:
        if definition.name in self._by_name:
            raise CatalogError(f"Name '{definition.name}' is already defined")
        if definition.shorthand and definition.shorthand in self._by_shorthand:
            existing = self._by_shorthand[definition.shorthand]
            raise CatalogError(
                f"Shorthand '{definition.shorthand}' is already used by '{existing.name}'"
            )
        if definition.dest in self._by_dest:
            existing = self._by_dest[definition.dest]
            raise CatalogError(
                f"Destination '{definition.dest}' is already used by '{existing.name}'"
            )
        self._by_name[definition.name] = definition
        if definition.shorthand:
            self._by_shorthand[definition.shorthand] = definition
        self._by_dest[definition.dest] = definition

    def _validate(self) -> None:
        if not self._definitions:
            raise CatalogError("No argument definitions provided")
        for definition in self._definitions:
            self._validate_definition(definition)
            self._register(definition)
        for action in (ArgumentAction.HELP, ArgumentAction.VERSION):
            matching = [d.name for d in self._definitions if d.action == action]
            if len(matching) > 1:
                raise CatalogError(
                    f"Only one {action} argument is allowed, got: {', '.join(matching)}"
                )

    @property
    def program(self) -> str:
        return self._program

    @property
    def example(self) -> str | None:
        return self._example

    @property
    def version(self) -> str:
        return self._version

    @property
    def require_arguments(self) -> bool:
        return self._require_arguments

    @property
    def definitions(self) -> tuple[ArgumentDefinition, ...]:
        return self._definitions

    @property
    def help_definition(self) -> ArgumentDefinition | None:
        return next(
            (d for d in self._definitions if d.action == ArgumentAction.HELP), None
        )

    @property
    def version_definition(self) -> ArgumentDefinition | None:
        return next(
            (d for d in self._definitions if d.action == ArgumentAction.VERSION), None
        )

    @property
    def field_definitions(self) -> tuple[ArgumentDefinition, ...]:
        """Definitions that record values, i.e. everything but help and version."""
        return tuple(d for d in self._definitions if d.action == ArgumentAction.STORE)

    @property
    def required_definitions(self) -> tuple[ArgumentDefinition, ...]:
        return tuple(d for d in self._definitions if d.required)

    @cached_property
    def help_text(self) -> str:
        return render_help_text(self)

    def lookup(self, token: str) -> ArgumentDefinition | None:
        """
        Find the definition selected by a raw token.

        Long names are only looked up for `--` tokens and shorthands only for
        single-dash tokens. Matching is exact and case-sensitive.
        """
        if token.startswith(LONG_PREFIX):
            return self._by_name.get(token)
        if token.startswith(SHORT_PREFIX):
            return self._by_shorthand.get(token)
        return None

    def get_definition(self, dest: str) -> ArgumentDefinition | None:
        """Return the definition recorded under a destination name, if any."""
        return self._by_dest.get(dest)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert definition metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in config introspection, documentation, or export.
        """
        return [
            {
                "name": definition.name,
                "shorthand": definition.shorthand,
                "syntax": definition.syntax,
                "description": definition.description,
                "arity": definition.arity,
                "required": definition.required,
                "action": definition.action.value,
                "dest": definition.dest,
            }
            for definition in self._definitions
        ]

    def __iter__(self) -> Iterator[ArgumentDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentCatalog):
            return False
        return (
            self._definitions == other._definitions
            and self.program == other.program
            and self.example == other.example
            and self.version == other.version
            and self.require_arguments == other.require_arguments
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._definitions,
                self.program,
                self.example,
                self.version,
                self.require_arguments,
            )
        )

    def __str__(self) -> str:
        """Return a human-readable summary of the catalog."""
        return (
            f"ArgumentCatalog(program={self.program!r}, args={len(self._definitions)}, "
            f"shorthands={len(self._by_shorthand)}, "
            f"required={len(self.required_definitions)})"
        )

    def __repr__(self) -> str:
        return str(self)
