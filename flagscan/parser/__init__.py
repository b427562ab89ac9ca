"""
Flagscan CLI Argument Gate

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition
from .argument_action import ArgumentAction
from .catalog import ArgumentCatalog
from .outcome import Error, Message, Parsed, ParsingOutcome
from .parsers import (
    ConfigArguments,
    FlagscanScanners,
    TemplateArguments,
    get_config_catalog,
    get_config_scanner,
    get_scanners,
    get_templates_catalog,
    get_templates_scanner,
)
from .scanner import ArgumentScanner, scan_arguments

__all__ = [
    "ArgumentDefinition",
    "ArgumentAction",
    "ArgumentCatalog",
    "ArgumentScanner",
    "scan_arguments",
    "Parsed",
    "Message",
    "Error",
    "ParsingOutcome",
    "ConfigArguments",
    "TemplateArguments",
    "FlagscanScanners",
    "get_config_catalog",
    "get_config_scanner",
    "get_templates_catalog",
    "get_templates_scanner",
    "get_scanners",
]
