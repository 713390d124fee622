"""Terminal styling helpers shared by the command-line tools."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Style(Enum):
    """ANSI escape sequences for colours and text attributes."""

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    NORMAL = "\x1b[m"
    BOLD = "\x1b[1m"
    ITALIC = "\x1b[3m"


def colorize(text: str, *args: Style) -> str:
    """Wrap ``text`` in the given styles, followed by a reset sequence."""
    prefix = "".join(style.value for style in args)
    return f"{prefix}{text}{Style.NORMAL.value}"


def print_error(message: str, file: TextIO | None = None) -> None:
    """Write ``message`` in red to ``file`` (standard error by default)."""
    print(colorize(message, Style.RED), file=file if file is not None else sys.stderr)


def format_heading(title: str) -> str:
    """Return ``title`` as a bold, italic bracketed heading."""
    return colorize(f"[ {title} ]", Style.BOLD, Style.ITALIC)