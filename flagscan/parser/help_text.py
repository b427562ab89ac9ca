# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text help rendering for an `ArgumentCatalog`.

The output is a pure function of the catalog: one line per definition, in
catalog order, with every syntax fragment padded to the longest one plus a
single space, followed by a trailing usage example.

    Supported arguments:
    --help          Show this help
    --version       Show the application version
    --config <path> Set custom path to the config file

    Example: recoder --config C:\\config.json
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flagscan.parser.catalog import ArgumentCatalog

HELP_HEADER = "Supported arguments:"


def get_example_text(catalog: ArgumentCatalog) -> str:
    """
    Return the usage example shown at the end of the help text.

    Falls back to the program name followed by the syntax of every required
    definition, or of every value-taking definition when none are required.
    """
    if catalog.example:
        return catalog.example
    shown = catalog.required_definitions or tuple(
        definition for definition in catalog.field_definitions if definition.arity
    )
    return " ".join([catalog.program, *(definition.syntax for definition in shown)])


def get_help_pointer(catalog: ArgumentCatalog) -> str:
    """Return the line telling the user how to list supported arguments."""
    help_definition = catalog.help_definition
    if help_definition is None:
        return ""
    return f"Use {help_definition.name} to see the list of supported arguments"


def render_help_text(catalog: ArgumentCatalog) -> str:
    width = max(len(definition.syntax) for definition in catalog)
    lines = [HELP_HEADER]
    for definition in catalog:
        lines.append(f"{definition.syntax:<{width}} {definition.description}")
    lines.append("")
    lines.append(f"Example: {get_example_text(catalog)}")
    return "\n".join(lines)
