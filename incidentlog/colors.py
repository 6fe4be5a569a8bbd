"""ANSI colour codes used for terminal output."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Bold ANSI foreground colours and the reset sequence."""

    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    BLUE = "\033[1;34m"
    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value


def paint(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape code of ``color``, followed by a reset."""
    return f"{Color(color).value}{text}{Color.RESET.value}"