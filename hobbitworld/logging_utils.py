"""Console logging helpers for the Hobbit World renderer.

Messages are printed with a bracketed marker so they stay readable when
colour is unavailable; colour is only applied when stdout is a terminal.
"""

from __future__ import annotations

import sys
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    RED = "\033[91m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"

    BOLD = "\033[1m"
    RESET = "\033[0m"


MARKER_ERROR = "[error]"
MARKER_WARNING = "[warning]"
MARKER_INFO = "[info]"


def _colour_enabled() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI codes when writing to a terminal."""

    if not _colour_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix
    return f"{prefix}{text}{Color.RESET.value}"


def log_error(message: str) -> None:
    print(colored(f"{MARKER_ERROR} {message}", Color.RED, bold=True))


def log_warning(message: str) -> None:
    print(colored(f"{MARKER_WARNING} {message}", Color.YELLOW))


def log_info(message: str) -> None:
    print(colored(f"{MARKER_INFO} {message}", Color.CYAN))


__all__ = ["Color", "colored", "log_error", "log_info", "log_warning"]
