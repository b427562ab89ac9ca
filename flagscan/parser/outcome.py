# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome types returned by `ArgumentScanner.scan()`.

Every scan produces exactly one of:
- `Parsed`: scanning succeeded and `configuration` holds the typed value.
- `Message`: an informational flag (help or version) was matched; print
  `text` and exit successfully.
- `Error`: the tokens were rejected; print `text` and exit with status 1.

`Error` never carries a configuration, so a failed scan cannot be partially
applied by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class Parsed:
    """Successful scan holding the host's configuration value."""

    configuration: Any

    is_error = False
    exit_code = EXIT_SUCCESS

    @property
    def text(self) -> None:
        return None


@dataclass(frozen=True)
class Message:
    """Informational result such as help text or the version string."""

    text: str

    is_error = False
    exit_code = EXIT_SUCCESS


@dataclass(frozen=True)
class Error:
    """Rejected invocation with a message meant for direct display."""

    text: str

    is_error = True
    exit_code = EXIT_FAILURE


ParsingOutcome = Union[Parsed, Message, Error]
