"""Theme definitions for the chain viewer.

Central place for color pair ids and default color assignments.
"""

import curses
from typing import Dict, Tuple

# Named color-pair ids
REGULAR_ROW: int = 1
HIGHLIGHTED_ROW: int = 2
SYMBOL: int = 3
BID: int = 4
ASK: int = 5
VOLUME: int = 6
GREEK: int = 7
STRIKE_BELOW: int = 8
STRIKE_ABOVE: int = 9
STRIKE_AT: int = 10
COLLAPSED_TITLE: int = 11

# Default theme: mapping of curses color pair id -> (fg_color, bg_color)
DEFAULT_THEME: Dict[int, Tuple[int, int]] = {
    REGULAR_ROW: (curses.COLOR_WHITE, curses.COLOR_BLACK),
    HIGHLIGHTED_ROW: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    SYMBOL: (curses.COLOR_CYAN, curses.COLOR_BLACK),
    BID: (curses.COLOR_GREEN, curses.COLOR_BLACK),
    ASK: (curses.COLOR_RED, curses.COLOR_BLACK),
    VOLUME: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    GREEK: (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    STRIKE_BELOW: (curses.COLOR_GREEN, curses.COLOR_BLACK),
    STRIKE_ABOVE: (curses.COLOR_RED, curses.COLOR_BLACK),
    STRIKE_AT: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    COLLAPSED_TITLE: (curses.COLOR_GREEN, curses.COLOR_BLACK),
}

__all__ = [
    "REGULAR_ROW",
    "HIGHLIGHTED_ROW",
    "SYMBOL",
    "BID",
    "ASK",
    "VOLUME",
    "GREEK",
    "STRIKE_BELOW",
    "STRIKE_ABOVE",
    "STRIKE_AT",
    "COLLAPSED_TITLE",
    "DEFAULT_THEME",
]

# Box-drawing characters for borders (exported so callers can reuse)
TL = "┌"  # top-left
TR = "┐"  # top-right
BL = "└"  # bottom-left
BR = "┘"  # bottom-right
HOR = "─"
VERT = "│"

__all__.extend(["TL", "TR", "BL", "BR", "HOR", "VERT"])
