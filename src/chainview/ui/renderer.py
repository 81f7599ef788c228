"""
Draws one frame of the viewer.

The renderer is a pure consumer: it reads the chain, the view state and the
navigator's allocation for the current terminal size, and writes to the curses
screen. Layout is recomputed on every call so a resized terminal is picked up
on the next frame.
"""

import curses

from chainview import labels
from chainview.chain import Expiration, OptionsChain
from chainview.constants import OUTER_MARGIN, TAB_STRIP_HEIGHT, TITLE_HEIGHT
from chainview.navigation import BaseNavigator, NavigatorName, ViewState
from chainview.viewport import Rect, first_visible_tab, needs_scroll_indicator

from . import theme as THEME
from .table import build_table, column_offsets
from .ui_utils import CursesUIHelper


class ChainRenderer:

    def __init__(self, chain: OptionsChain, navigator: BaseNavigator):
        self.chain = chain
        self.navigator = navigator

    def draw(self, stdscr, state: ViewState) -> None:
        h, w = stdscr.getmaxyx()
        stdscr.erase()

        is_valid, _ = CursesUIHelper.validate_terminal_size(h, w)
        if not is_valid:
            CursesUIHelper.draw_terminal_too_small(stdscr, labels.MSG_TERMINAL_TOO_SMALL, labels.MSG_RESIZE_CONTINUE)
            stdscr.refresh()
            return

        screen = Rect(0, 0, w, h).inner(OUTER_MARGIN)
        title_area, body = screen.split_top(TITLE_HEIGHT)
        self._draw_title(stdscr, title_area)

        if self.navigator.name == NavigatorName.TABS:
            tab_area, body = body.split_top(TAB_STRIP_HEIGHT)
            self._draw_tab_strip(stdscr, tab_area, state)

        if self.chain.expiration_count == 0:
            CursesUIHelper.draw_text(stdscr, body.y, body.x, labels.NO_EXPIRATIONS, body.width)
        else:
            self._draw_expirations(stdscr, body, state)

        stdscr.refresh()

    def _draw_title(self, stdscr, area: Rect) -> None:
        help_text = labels.HELP_TABS if self.navigator.name == NavigatorName.TABS else labels.HELP_SCROLL
        title = labels.TITLE_FORMAT.format(
            self.chain.symbol, self.chain.last_price, self.chain.last_update, help_text
        )
        CursesUIHelper.draw_block(stdscr, area, title)

    def _draw_tab_strip(self, stdscr, area: Rect, state: ViewState) -> None:
        tabs = [f" {expiration.date} " for expiration in self.chain.expirations]
        # one column of gap after each tab
        start = first_visible_tab([len(tab) + 1 for tab in tabs], state.cursor, area.width + 1)

        x = area.x
        for index, tab in enumerate(tabs[start:], start):
            if x >= area.right:
                break
            if index == state.cursor:
                CursesUIHelper.draw_text(stdscr, area.y, x, tab, area.right - x, THEME.HIGHLIGHTED_ROW,
                                         curses.A_BOLD | curses.A_REVERSE)
            else:
                CursesUIHelper.draw_text(stdscr, area.y, x, tab, area.right - x, THEME.COLLAPSED_TITLE)
            x += len(tab) + 1

    def _draw_expirations(self, stdscr, area: Rect, state: ViewState) -> None:
        allocation = self.navigator.allocate(state, self.chain, area)

        for index, region in zip(allocation.indices, allocation.regions):
            if region.is_empty():
                continue
            self._draw_expiration(stdscr, region, state, index)

        if self.navigator.name == NavigatorName.SCROLL:
            start, end = self.navigator.visible_range(state, area.height)
            if needs_scroll_indicator(start, end, self.chain.expiration_count):
                text = labels.SCROLL_INDICATOR.format(state.cursor + 1, self.chain.expiration_count)
                CursesUIHelper.draw_text(stdscr, area.y, max(area.x, area.right - len(text) - 2), text,
                                         len(text), THEME.REGULAR_ROW)

    def _draw_expiration(self, stdscr, region: Rect, state: ViewState, index: int) -> None:
        expiration = self.chain.expirations[index]
        expanded = state.is_expanded(index)
        prefix = labels.EXPANDED_PREFIX if expanded else labels.COLLAPSED_PREFIX
        selected = index == state.cursor

        CursesUIHelper.draw_block(
            stdscr,
            region,
            prefix + expiration.date,
            color_pair=THEME.HIGHLIGHTED_ROW if selected else THEME.REGULAR_ROW,
            title_attrs=curses.A_BOLD if selected else 0,
            title_color_pair=THEME.HIGHLIGHTED_ROW if selected else THEME.COLLAPSED_TITLE,
        )

        if expanded:
            self._draw_table(stdscr, region.inner(), expiration, state.show_greeks)

    def _draw_table(self, stdscr, area: Rect, expiration: Expiration, show_greeks: bool) -> None:
        if area.is_empty():
            return

        columns, rows = build_table(expiration, self.chain.last_price, show_greeks)
        offsets = column_offsets(columns)

        for column, offset in zip(columns, offsets):
            if offset >= area.width:
                break
            width = min(column.width, area.width - offset)
            attrs = curses.A_BOLD if column.bold else 0
            CursesUIHelper.draw_text(stdscr, area.y, area.x + offset, column.title, width, column.color_pair, attrs)

        for row_number, cells in enumerate(rows, start=1):
            y = area.y + row_number
            if y >= area.bottom:
                break
            for cell, column, offset in zip(cells, columns, offsets):
                if offset >= area.width:
                    break
                width = min(column.width, area.width - offset)
                attrs = curses.A_BOLD if cell.bold else 0
                CursesUIHelper.draw_text(stdscr, y, area.x + offset, cell.text, width, cell.color_pair, attrs)
