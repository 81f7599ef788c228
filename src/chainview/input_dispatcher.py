"""
Maps curses key codes to navigation transitions.

Keys are the integers returned by ``stdscr.getch()``. Unknown keys are ignored
so new bindings can be added without touching the navigators.
"""

import curses
from enum import Enum
from typing import Dict, Iterable, Mapping

from chainview.logger import LOGGER
from chainview.navigation import BaseNavigator, NavigatorName, ViewState

log = LOGGER.setup_logger('InputDispatcher')


class KeyAction(str, Enum):
    QUIT = 'quit'
    TOGGLE_EXPAND = 'toggle_expand'
    TOGGLE_GREEKS = 'toggle_greeks'
    NEXT = 'next'
    PREVIOUS = 'previous'
    PAGE_DOWN = 'page_down'
    PAGE_UP = 'page_up'


DEFAULT_BINDINGS: Dict[int, KeyAction] = {
    ord('q'): KeyAction.QUIT,
    ord('Q'): KeyAction.QUIT,
    ord('e'): KeyAction.TOGGLE_EXPAND,
    ord('\n'): KeyAction.TOGGLE_EXPAND,
    ord('\r'): KeyAction.TOGGLE_EXPAND,
    curses.KEY_ENTER: KeyAction.TOGGLE_EXPAND,
    ord('g'): KeyAction.TOGGLE_GREEKS,
    curses.KEY_DOWN: KeyAction.NEXT,
    ord('j'): KeyAction.NEXT,
    curses.KEY_UP: KeyAction.PREVIOUS,
    ord('k'): KeyAction.PREVIOUS,
    curses.KEY_NPAGE: KeyAction.PAGE_DOWN,
    curses.KEY_PPAGE: KeyAction.PAGE_UP,
}

# Extra keys for the tab strip, where left/right reads more naturally
TAB_BINDINGS: Dict[int, KeyAction] = {
    curses.KEY_RIGHT: KeyAction.NEXT,
    ord('\t'): KeyAction.NEXT,
    curses.KEY_LEFT: KeyAction.PREVIOUS,
    curses.KEY_BTAB: KeyAction.PREVIOUS,
}


class KeyBindings:
    """Lookup table from key code to ``KeyAction``."""

    def __init__(self, bindings: Mapping[int, KeyAction] | None = None):
        self._bindings: Dict[int, KeyAction] = dict(DEFAULT_BINDINGS if bindings is None else bindings)

    @classmethod
    def for_navigator(
        cls, name: NavigatorName | str, extra_keys: Mapping[str, Iterable[str]] | None = None
    ) -> 'KeyBindings':
        """
        Default bindings for a layout, plus optional extra character keys.

        Args:
            name: Layout the bindings are for.
            extra_keys: Action name -> single-character keys, e.g. ``{"quit": ["x"]}``.
        """
        bindings = cls()
        if NavigatorName(name) == NavigatorName.TABS:
            bindings._bindings.update(TAB_BINDINGS)
        for action_name, keys in (extra_keys or {}).items():
            try:
                action = KeyAction(action_name)
            except ValueError:
                log.warning(f"Ignoring binding for unknown action '{action_name}'")
                continue
            for key in keys:
                if isinstance(key, str) and len(key) == 1:
                    bindings.bind(ord(key), action)
                else:
                    log.warning(f"Ignoring binding {key!r} for '{action_name}': expected a single character")
        return bindings

    def bind(self, key: int, action: KeyAction) -> None:
        self._bindings[key] = action

    def action_for(self, key: int) -> KeyAction | None:
        return self._bindings.get(key)


class InputDispatcher:
    """Applies the transition bound to a key; never raises on unknown input."""

    def __init__(self, bindings: KeyBindings | None = None):
        self.bindings = bindings or KeyBindings()

    def dispatch(self, key: int, navigator: BaseNavigator, state: ViewState) -> bool:
        """
        Handle one key press.

        Returns:
            bool: False when the viewer should exit, True otherwise.
        """
        action = self.bindings.action_for(key)
        if action is None:
            return True

        if action == KeyAction.QUIT:
            return False
        if action == KeyAction.TOGGLE_EXPAND:
            navigator.toggle_expand(state)
        elif action == KeyAction.TOGGLE_GREEKS:
            navigator.toggle_greeks(state)
        elif action == KeyAction.NEXT:
            navigator.next(state)
        elif action == KeyAction.PREVIOUS:
            navigator.prev(state)
        elif action == KeyAction.PAGE_DOWN:
            navigator.page_down(state)
        elif action == KeyAction.PAGE_UP:
            navigator.page_up(state)
        return True
