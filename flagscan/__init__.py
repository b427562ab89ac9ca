"""
Flagscan CLI Argument Gate

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser import (
    ArgumentCatalog,
    ArgumentDefinition,
    ArgumentScanner,
    Error,
    Message,
    Parsed,
    scan_arguments,
)
from .version import __version__

__all__ = [
    "ArgumentCatalog",
    "ArgumentDefinition",
    "ArgumentScanner",
    "Error",
    "Message",
    "Parsed",
    "scan_arguments",
    "__version__",
]
