# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Type aliases and per-scan state models for the Flagscan scanner.

Contents:
- `FieldValue`: What the scanner records for a field. A string for arity 1,
  a tuple of strings for larger arities, an empty string for value-less flags,
  and `None` when the flag never appeared.
- `FieldMapping`: Callback turning the recorded fields into the host's
  configuration value.
- `ArgumentState`: Tracks whether a definition has been seen during a scan.
"""
from dataclasses import dataclass
from typing import Any, Callable, Union

from flagscan.parser.argument import ArgumentDefinition

FieldValue = Union[str, tuple[str, ...], None]
FieldMapping = Callable[[dict[str, FieldValue]], Any]


@dataclass
class ArgumentState:
    """Tracks an argument definition and whether it has been consumed."""

    definition: ArgumentDefinition
    consumed: bool = False
    consumed_position: int | None = None

    def set_consumed(self, position: int | None = None) -> None:
        """Mark this argument as consumed, optionally setting the position."""
        self.consumed = True
        self.consumed_position = position
