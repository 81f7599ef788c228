"""
Shared curses drawing helpers for the chain viewer.

Every write goes through a guard that swallows ``curses.error``: writing to the
last cell of the screen, or past an edge after a resize, is expected and the
text is simply clipped.
"""

import curses
from typing import Tuple

from chainview.constants import MIN_TERMINAL_HEIGHT, MIN_TERMINAL_WIDTH
from chainview.viewport import Rect

from . import theme as THEME


class CursesUIHelper:
    """Helper class for common curses UI operations."""

    @staticmethod
    def draw_text(
        stdscr,
        y: int,
        x: int,
        text: str,
        max_width: int | None = None,
        color_pair: int = THEME.REGULAR_ROW,
        attrs: int = 0,
    ) -> None:
        """Draw text safely with optional truncation and attributes."""
        try:
            h, w = stdscr.getmaxyx()
            if y < 0 or y >= h or x < 0 or x >= w:
                return

            width_to_use: int = max_width if max_width is not None else (w - x)
            width_to_use = max(0, min(width_to_use, w - x))
            display_text = text[:width_to_use]
            if display_text:
                stdscr.addstr(y, x, display_text, curses.color_pair(color_pair) | attrs)
        except curses.error:
            pass

    @staticmethod
    def draw_block(stdscr, rect: Rect, title: str = "", color_pair: int = THEME.REGULAR_ROW, title_attrs: int = 0,
                   title_color_pair: int | None = None) -> None:
        """
        Draw a bordered block with a title embedded in the top border.

        A block clipped by the bottom of its area loses its lower border rows
        instead of being skipped.
        """
        if rect.is_empty() or rect.width < 2:
            return

        inner_width = rect.width - 2
        CursesUIHelper.draw_text(stdscr, rect.y, rect.x, THEME.TL + THEME.HOR * inner_width + THEME.TR,
                                 rect.width, color_pair)
        for y in range(rect.y + 1, rect.bottom - 1):
            CursesUIHelper.draw_text(stdscr, y, rect.x, THEME.VERT, 1, color_pair)
            CursesUIHelper.draw_text(stdscr, y, rect.right - 1, THEME.VERT, 1, color_pair)
        if rect.height >= 2:
            CursesUIHelper.draw_text(stdscr, rect.bottom - 1, rect.x, THEME.BL + THEME.HOR * inner_width + THEME.BR,
                                     rect.width, color_pair)

        if title:
            CursesUIHelper.draw_text(
                stdscr,
                rect.y,
                rect.x + 1,
                title,
                inner_width,
                color_pair if title_color_pair is None else title_color_pair,
                title_attrs,
            )

    @staticmethod
    def draw_terminal_too_small(stdscr, first_line: str, second_line: str) -> None:
        h, w = stdscr.getmaxyx()
        CursesUIHelper.draw_text(stdscr, h // 2, max(0, (w - len(first_line)) // 2), first_line)
        CursesUIHelper.draw_text(stdscr, h // 2 + 1, max(0, (w - len(second_line)) // 2), second_line)

    @staticmethod
    def init_colors(color_theme: dict | None = None) -> None:
        """Initialize color pairs from a theme dictionary or use DEFAULT_THEME."""
        if color_theme is None:
            color_theme = THEME.DEFAULT_THEME

        if not curses.has_colors():
            return
        curses.start_color()
        for pair_id, (fg, bg) in color_theme.items():
            try:
                curses.init_pair(pair_id, fg, bg)
            except curses.error:
                pass  # Ignore if pair already initialized

    @staticmethod
    def validate_terminal_size(
        h: int, w: int, min_height: int = MIN_TERMINAL_HEIGHT, min_width: int = MIN_TERMINAL_WIDTH
    ) -> Tuple[bool, str]:
        """
        Validate terminal size.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if h < min_height or w < min_width:
            return False, f"Terminal too small! Requires at least {min_height}x{min_width}, got {h}x{w}"
        return True, ""
