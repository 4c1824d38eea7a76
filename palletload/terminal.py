"""Terminal helpers: screen control, colours and line input."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO

CLEAR_SCREEN = "\033[2J\033[1;1H"


class Algorithm(Enum):
    """The loading algorithms on offer."""

    BRUTE_FORCE = 0
    GREEDY = 1
    DYNAMIC_PROGRAMMING = 2
    BACKTRACKING = 3
    GENETIC_PROGRAMMING = 4


class Color(Enum):
    """Terminal colours, each holding its escape sequence."""

    CLEAR = "\033[0m"
    RED = "\033[31m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    GREY = "\033[90m"
    YELLOW = "\033[33m"


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and move the cursor to the top left."""
    (stream or sys.stdout).write(CLEAR_SCREEN)


def set_screen_color(color: Color, stream: Optional[TextIO] = None) -> None:
    """Switch the terminal's text colour."""
    (stream or sys.stdout).write(color.value)


def read_line(stream: Optional[TextIO] = None) -> str:
    """Read one line without its newline; end of input exits the program successfully."""
    line = (stream or sys.stdin).readline()
    if not line:
        raise SystemExit(0)
    return line[:-1] if line.endswith("\n") else line