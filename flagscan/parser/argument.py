# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass, one immutable entry of an
`ArgumentCatalog`.

Each definition describes one accepted flag: its long name, optional shorthand,
the syntax fragment and description shown in help, how many value tokens it
consumes, and whether omitting it is an error.

Key Attributes:
- `name`: Canonical long-form token (e.g. `--config`)
- `shorthand`: Optional single-dash alias (e.g. `-c`)
- `syntax`: Usage fragment for help rendering (e.g. `--config <path>`)
- `description`: One-line explanation for help rendering
- `arity`: Number of value tokens consumed right after the flag
- `required`: Whether omitting the flag is a parse error
- `action`: `ArgumentAction` describing store/help/version behavior
- `dest`: Field name the values are recorded under
"""
from __future__ import annotations

from dataclasses import dataclass, field

from flagscan.parser.argument_action import ArgumentAction
from flagscan.utils import dest_from_name


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    Represents one supported command-line flag.

    Attributes:
        name (str): Long-form flag, unique across the catalog.
        syntax (str): Usage fragment for help. Defaults to `name`.
        description (str): Help text for the flag.
        arity (int): Number of value tokens consumed after the flag.
        required (bool): True if omitting the flag is an error.
        shorthand (str | None): Optional short alias, unique across the catalog.
        action (ArgumentAction): What the scanner does on a match.
        dest (str): Field name for recorded values. Derived from `name` when empty.
    """

    name: str
    syntax: str = ""
    description: str = ""
    arity: int = 0
    required: bool = False
    shorthand: str | None = None
    action: ArgumentAction = ArgumentAction.STORE
    dest: str = field(default="")

    def __post_init__(self) -> None:
        if not isinstance(self.action, ArgumentAction):
            object.__setattr__(self, "action", ArgumentAction(self.action))
        if not self.syntax:
            object.__setattr__(self, "syntax", self.name)
        if not self.dest:
            object.__setattr__(self, "dest", dest_from_name(self.name))

    @property
    def flags(self) -> tuple[str, ...]:
        """All tokens that select this definition, long name first."""
        if self.shorthand:
            return (self.name, self.shorthand)
        return (self.name,)

    def matches(self, token: str) -> bool:
        """Return True if the token is this definition's name or shorthand."""
        return token in self.flags
