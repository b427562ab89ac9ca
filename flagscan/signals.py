# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Flagscan scanner.

These signals are raised to interrupt a scan when an informational flag
(help or version) is matched, without being treated as traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Stop scanning and show the help text.
- VersionSignal: Stop scanning and show the version string.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Flagscan.

    These are not errors. They carry the text that the caller should print
    before exiting successfully.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HelpSignal(FlowSignal):
    """Raised to display help information."""


class VersionSignal(FlowSignal):
    """Raised to display the version string."""
