# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Flagscan output."""
from rich.console import Console

from flagscan.themes import get_flagscan_theme

console = Console(color_system="truecolor", theme=get_flagscan_theme())
error_console = Console(
    color_system="truecolor", theme=get_flagscan_theme(), stderr=True
)
