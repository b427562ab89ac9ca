# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentScanner`, the single-pass engine that checks a
raw argument vector against an `ArgumentCatalog`.

The scanner walks the tokens left to right without backtracking. Each token
must be a known long name (`--name`) or shorthand (`-n`); the matched
definition then consumes exactly `arity` following tokens as its value. Help
and version flags stop the scan immediately, even if later tokens are
malformed. Once every token is consumed, every required definition must have
been seen.

Internally failures are raised as `ArgumentParsingError` subclasses and
informational flags as `FlowSignal`s; `scan()` is the only boundary, and it
always returns a `ParsingOutcome` instead of raising for user input.

Example Usage:
    scanner = ArgumentScanner(catalog, field_mapping=lambda fields: fields)

    scanner.scan(["prog", "--config", "x.json"])
    # Parsed(configuration={'config': 'x.json'})

    scanner.scan(["prog", "--config"])
    # Error(text='Not enough arguments for --config\\nUse --help to ...')

The scanner holds no state between calls, so re-scanning the same tokens
always yields an equal outcome.
"""
from __future__ import annotations

from typing import Sequence

from flagscan.exceptions import (
    ArgumentParsingError,
    InsufficientValuesError,
    MissingRequiredArgumentsError,
    NoArgumentsError,
    UnsupportedArgumentError,
)
from flagscan.logger import logger
from flagscan.parser.argument import ArgumentDefinition
from flagscan.parser.argument_action import ArgumentAction
from flagscan.parser.catalog import ArgumentCatalog
from flagscan.parser.help_text import get_help_pointer
from flagscan.parser.outcome import Error, Message, Parsed, ParsingOutcome
from flagscan.parser.parser_types import ArgumentState, FieldMapping, FieldValue
from flagscan.signals import FlowSignal, HelpSignal, VersionSignal


class ArgumentScanner:
    """
    Scans process arguments against a catalog and builds the host configuration.

    Args:
        catalog (ArgumentCatalog): The supported flags.
        field_mapping (FieldMapping | None): Builds the configuration value from
            the recorded fields. Defaults to returning the field dict itself.
    """

    def __init__(
        self,
        catalog: ArgumentCatalog,
        field_mapping: FieldMapping | None = None,
    ) -> None:
        if not isinstance(catalog, ArgumentCatalog):
            raise TypeError(
                f"catalog must be an ArgumentCatalog, got {type(catalog).__name__}"
            )
        self.catalog: ArgumentCatalog = catalog
        self.field_mapping: FieldMapping = field_mapping or dict

    def _with_pointer(self, message: str) -> str:
        pointer = get_help_pointer(self.catalog)
        if pointer:
            return f"{message}\n{pointer}"
        return message

    def _field_value(
        self, definition: ArgumentDefinition, values: Sequence[str]
    ) -> FieldValue:
        if definition.arity == 0:
            return ""
        if definition.arity == 1:
            return values[0]
        return tuple(values)

    def _handle_token(
        self,
        argv: Sequence[str],
        i: int,
        fields: dict[str, FieldValue],
        arg_states: dict[str, ArgumentState],
    ) -> int:
        token = argv[i]
        definition = self.catalog.lookup(token)
        if definition is None:
            raise UnsupportedArgumentError(
                self._with_pointer(f"Unsupported argument: {token}"), token
            )

        if definition.arity > 0 and i + definition.arity >= len(argv):
            raise InsufficientValuesError(
                self._with_pointer(f"Not enough arguments for {token}"), token
            )

        logger.debug("Matched '%s' at position %d as '%s'.", token, i, definition.name)
        arg_states[definition.dest].set_consumed(i)

        if definition.action == ArgumentAction.HELP:
            raise HelpSignal(self.catalog.help_text)
        if definition.action == ArgumentAction.VERSION:
            raise VersionSignal(self.catalog.version)

        new_i = i + 1 + definition.arity
        fields[definition.dest] = self._field_value(definition, argv[i + 1 : new_i])
        return new_i

    def _check_required(self, arg_states: dict[str, ArgumentState]) -> None:
        missing = [
            definition.name
            for definition in self.catalog.required_definitions
            if not arg_states[definition.dest].consumed
        ]
        if missing:
            raise MissingRequiredArgumentsError(
                self._with_pointer(f"Missing required arguments: {', '.join(missing)}"),
                missing,
            )

    def scan_fields(self, argv: Sequence[str]) -> dict[str, FieldValue]:
        """
        Scan the tokens and return the recorded fields.

        Token 0 is the program name and is always skipped.

        Raises:
            ArgumentParsingError: If the tokens do not satisfy the catalog.
            FlowSignal: If a help or version flag was matched.
        """
        if len(argv) <= 1 and self.catalog.require_arguments:
            raise NoArgumentsError(f"No arguments provided\n{self.catalog.help_text}")

        arg_states = {
            definition.dest: ArgumentState(definition) for definition in self.catalog
        }
        fields: dict[str, FieldValue] = {
            definition.dest: None for definition in self.catalog.field_definitions
        }

        i = 1
        while i < len(argv):
            i = self._handle_token(argv, i, fields, arg_states)

        self._check_required(arg_states)
        return fields

    def scan(self, argv: Sequence[str]) -> ParsingOutcome:
        """
        Scan the full argument vector and return exactly one outcome.

        Args:
            argv (Sequence[str]): Raw process arguments, program name first.

        Returns:
            ParsingOutcome: `Parsed`, `Message` or `Error`.
        """
        argv = list(argv)
        logger.debug(
            "Scanning %d argument(s) against %s.", max(len(argv) - 1, 0), self.catalog
        )
        try:
            fields = self.scan_fields(argv)
        except FlowSignal as signal:
            logger.debug("Scan stopped by %s.", type(signal).__name__)
            return Message(signal.message)
        except ArgumentParsingError as error:
            logger.debug("Scan rejected: %s", type(error).__name__)
            return Error(str(error))
        return Parsed(self.field_mapping(fields))

    def __str__(self) -> str:
        return f"ArgumentScanner(catalog={self.catalog})"

    def __repr__(self) -> str:
        return str(self)


def scan_arguments(
    argv: Sequence[str],
    catalog: ArgumentCatalog,
    field_mapping: FieldMapping | None = None,
) -> ParsingOutcome:
    """Scan `argv` against `catalog` with a one-off `ArgumentScanner`."""
    return ArgumentScanner(catalog, field_mapping).scan(argv)
