# Flagscan CLI Argument Gate — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used for Flagscan console output.

`OneColors` holds hex values from the One Dark palette so they can be used
directly inside Rich markup, e.g. `f"[{OneColors.DARK_RED}]error[/]"`.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark palette as Rich-compatible hex strings."""

    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    RED = "#E06C75"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"


def get_flagscan_theme() -> Theme:
    """Return the Rich theme used by the Flagscan consoles."""
    return Theme(
        {
            "flagscan.error": Style(color=OneColors.DARK_RED, bold=True),
            "logging.level.debug": Style(color=OneColors.COMMENT_GREY),
            "logging.level.info": Style(color=OneColors.BLUE),
            "logging.level.warning": Style(color=OneColors.LIGHT_YELLOW),
            "logging.level.error": Style(color=OneColors.RED, bold=True),
        }
    )
