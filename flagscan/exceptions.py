# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagscan.

Catalog errors are developer-facing and raised while a catalog is built.
Argument parsing errors are user-facing: the scanner raises them internally
and converts them into an `Error` outcome, so they never escape `scan()`.

All exceptions inherit from `FlagscanError`, the base exception for the package.

Exception Hierarchy:
- FlagscanError
    ├── CatalogError
    ├── CatalogConfigError
    └── ArgumentParsingError
          ├── NoArgumentsError
          ├── UnsupportedArgumentError
          ├── InsufficientValuesError
          └── MissingRequiredArgumentsError
"""


class FlagscanError(Exception):
    """Base exception for Flagscan."""


class CatalogError(FlagscanError):
    """Exception raised when an argument catalog is not well formed."""


class CatalogConfigError(FlagscanError):
    """Exception raised when a catalog config file cannot be loaded."""


class ArgumentParsingError(FlagscanError):
    """Exception raised when the given tokens do not satisfy the catalog."""


class NoArgumentsError(ArgumentParsingError):
    """Exception raised when nothing was supplied but arguments are expected."""


class UnsupportedArgumentError(ArgumentParsingError):
    """Exception raised when a token matches no known name or shorthand."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class InsufficientValuesError(ArgumentParsingError):
    """Exception raised when a flag is missing its trailing value tokens."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class MissingRequiredArgumentsError(ArgumentParsingError):
    """Exception raised when one or more required flags never appeared."""

    def __init__(self, message: str, names: list[str]):
        super().__init__(message)
        self.names = names
