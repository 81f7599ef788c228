#!/usr/bin/env python3
"""
ChainViewApp - curses event loop for the options chain viewer.

Each cycle draws a frame, blocks on ``getch`` for one key, and hands it to the
input dispatcher, which mutates the view state. Drawing and mutation strictly
alternate on a single thread.
"""

import curses

from chainview import labels
from chainview.chain import OptionsChain
from chainview.input_dispatcher import InputDispatcher, KeyBindings
from chainview.logger import LOGGER
from chainview.navigation import BaseNavigator, ViewState
from chainview.ui import ChainRenderer
from chainview.ui.ui_utils import CursesUIHelper

log = LOGGER.setup_logger('ChainViewApp')


class ChainViewApp:
    """
    Core curses-based viewer.

    Attributes:
        chain (OptionsChain): The loaded snapshot, never modified.
        navigator (BaseNavigator): Scrolling list or tab strip strategy.
        state (ViewState): Selection, expand flags, scroll offset and greeks flag.
    """

    def __init__(
        self,
        chain: OptionsChain,
        navigator: BaseNavigator,
        show_greeks: bool = True,
        bindings: KeyBindings | None = None,
    ) -> None:
        self.chain = chain
        self.navigator = navigator
        self.state: ViewState = navigator.initial_state(chain, show_greeks)
        self.dispatcher = InputDispatcher(bindings or KeyBindings.for_navigator(navigator.name))
        self.renderer = ChainRenderer(chain, navigator)

    # -------------------------------------------------------------------------
    # Main Execution Loop
    # -------------------------------------------------------------------------
    def run(self) -> None:
        """Start the curses rendering loop."""
        log.info(labels.LOG_VIEWER_STARTING.format(self.navigator.name.value))
        curses.wrapper(self._main_loop)
        log.info(labels.LOG_VIEWER_STOPPED)

    def _main_loop(self, stdscr) -> None:
        """Render and handle input until the quit key is pressed."""
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            pass
        stdscr.keypad(True)  # Arrow and page keys as single codes

        CursesUIHelper.init_colors()

        while True:
            self.renderer.draw(stdscr, self.state)
            if not self.handle_key(stdscr.getch()):
                break

    def handle_key(self, key: int) -> bool:
        """Apply one key press; returns False when the viewer should exit."""
        return self.dispatcher.dispatch(key, self.navigator, self.state)
