from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from chainview.chain import Expiration, OptionsChain
from chainview.constants import PAGE_SIZE
from chainview.logger import LOGGER
from chainview.navigation._view_state import ViewState
from chainview.viewport import Allocation, Rect, item_min_height


class NavigatorName(str, Enum):
    SCROLL = 'scroll'
    TABS = 'tabs'


class BaseNavigator(ABC):
    """
    Navigation strategy shared by the scrolling list and the tab strip.

    Strategies hold no view state of their own: every transition takes the
    session's ``ViewState`` and mutates it in place. Transitions on an empty
    chain leave the state untouched.
    """

    _log = LOGGER.setup_logger('Navigator')

    name: NavigatorName
    expanded_by_default: bool
    page_size: int = PAGE_SIZE

    def initial_state(self, chain: OptionsChain, show_greeks: bool = True) -> ViewState:
        return ViewState.for_chain(chain.expiration_count, self.expanded_by_default, show_greeks)

    @abstractmethod
    def move(self, state: ViewState, delta: int) -> None:
        """Move the cursor by ``delta`` items, wrapping around both ends."""

    @abstractmethod
    def page(self, state: ViewState, delta: int) -> None:
        pass

    @abstractmethod
    def visible_range(self, state: ViewState, area_height: int) -> tuple[int, int]:
        pass

    @abstractmethod
    def allocate(self, state: ViewState, chain: OptionsChain, area: Rect) -> Allocation:
        """Compute the screen region of every visible expiration for this frame."""

    def next(self, state: ViewState) -> None:
        self.move(state, 1)

    def prev(self, state: ViewState) -> None:
        self.move(state, -1)

    def page_down(self, state: ViewState) -> None:
        self.page(state, self.page_size)

    def page_up(self, state: ViewState) -> None:
        self.page(state, -self.page_size)

    def toggle_expand(self, state: ViewState) -> None:
        if 0 <= state.cursor < state.count:
            state.expanded[state.cursor] = not state.expanded[state.cursor]
            self._log.debug(f"expiration {state.cursor} expanded={state.expanded[state.cursor]}")

    def toggle_greeks(self, state: ViewState) -> None:
        state.show_greeks = not state.show_greeks
        self._log.debug(f"show_greeks={state.show_greeks}")

    @staticmethod
    def selected_expiration(state: ViewState, chain: OptionsChain) -> Expiration | None:
        if 0 <= state.cursor < chain.expiration_count:
            return chain.expirations[state.cursor]
        return None

    @staticmethod
    def min_heights(state: ViewState, chain: OptionsChain, start: int, end: int) -> List[int]:
        return [item_min_height(state.is_expanded(i), chain.expirations[i].row_count) for i in range(start, end)]
