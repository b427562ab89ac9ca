# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction`, an enum describing what the scanner does when an
argument definition is matched.

Supports alias coercion for shorthand or config-friendly values so catalog
files can write `action: h` or `action: v`.

Example:
    ArgumentAction("store") → ArgumentAction.STORE
    ArgumentAction("?")     → ArgumentAction.HELP (via alias)
    ArgumentAction("v")     → ArgumentAction.VERSION (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        STORE: Record the trailing value tokens under the argument's field (default).
        HELP: Stop scanning and return the help text.
        VERSION: Stop scanning and return the version string.

    Aliases:
        - "h", "?" → "help"
        - "v" → "version"
    """

    STORE = "store"
    HELP = "help"
    VERSION = "version"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "h": "help",
            "?": "help",
            "v": "version",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_informational(self) -> bool:
        """True for actions that short-circuit the scan with a message."""
        return self in (ArgumentAction.HELP, ArgumentAction.VERSION)

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
