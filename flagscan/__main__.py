"""
Flagscan CLI Argument Gate

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from flagscan.config import loader
from flagscan.console import console, error_console
from flagscan.exceptions import CatalogConfigError
from flagscan.logger import logger
from flagscan.parser import ArgumentScanner, Parsed, ParsingOutcome, get_config_scanner
from flagscan.parser.outcome import EXIT_FAILURE
from flagscan.utils import setup_logging


def find_flagscan_config() -> Path | None:
    candidates = [
        Path.cwd() / "flagscan.yaml",
        Path.cwd() / "flagscan.toml",
        Path.cwd() / ".flagscan.yaml",
        Path.cwd() / ".flagscan.toml",
        Path(os.environ.get("FLAGSCAN_CONFIG", "flagscan.yaml")),
        Path.home() / ".config" / "flagscan" / "flagscan.yaml",
        Path.home() / ".config" / "flagscan" / "flagscan.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def get_scanner(config_path: Path | None = None) -> ArgumentScanner:
    """Build a scanner from a catalog file, or the built-in config scanner."""
    if config_path:
        logger.debug("Using catalog from '%s'.", config_path)
        return ArgumentScanner(loader(config_path))
    return get_config_scanner()


def run(outcome: ParsingOutcome) -> int:
    """Print the outcome's message, if any, and return the exit code."""
    if isinstance(outcome, Parsed):
        logger.info("Parsed configuration: %s", outcome.configuration)
    elif outcome.is_error:
        error_console.print(
            outcome.text,
            style="flagscan.error",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(
            outcome.text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
    return outcome.exit_code


def main(
    argv: Sequence[str] | None = None,
    scanner: ArgumentScanner | None = None,
) -> int:
    if argv is None:
        argv = sys.argv
    if scanner is None:
        try:
            scanner = get_scanner(find_flagscan_config())
        except CatalogConfigError as error:
            logger.error("Failed to load catalog: %s", error)
            error_console.print(
                str(error),
                style="flagscan.error",
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
            return EXIT_FAILURE
    return run(scanner.scan(argv))


def cli() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    cli()
