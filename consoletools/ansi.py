"""ANSI escape codes and style helpers for console output.

Colors and text modifiers are closed enums so renderers never deal with bare
escape strings. ``strip_ansi`` recovers the visible text of a styled string.
"""

from __future__ import annotations

import re
from enum import Enum

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Color(Enum):
    """Foreground and background colors."""

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    PURPLE = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BACK_BLACK = "\x1b[40m"
    BACK_RED = "\x1b[41m"
    BACK_GREEN = "\x1b[42m"
    BACK_YELLOW = "\x1b[43m"
    BACK_BLUE = "\x1b[44m"
    BACK_PURPLE = "\x1b[45m"
    BACK_CYAN = "\x1b[46m"
    BACK_WHITE = "\x1b[47m"


class Modifier(Enum):
    """Text attributes applied before the color code."""

    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALICS = "\x1b[3m"
    UNDERLINE = "\x1b[4m"
    BLINK = "\x1b[5m"
    REVERSE = "\x1b[7m"
    HIDDEN = "\x1b[8m"


def style_text(
    text: str,
    color: Color | None = None,
    modifier: Modifier | None = None,
    end: str = "",
) -> str:
    """Wrap ``text`` (plus ``end``) in ``modifier`` and ``color`` codes.

    The reset code is appended only when a style was applied, so unstyled
    text passes through unchanged.
    """
    prefix = (modifier.value if modifier is not None else "") + (color.value if color is not None else "")
    if not prefix:
        return f"{text}{end}"
    return f"{prefix}{text}{end}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)
