from chainview.chain import OptionsChain
from chainview.constants import PAGE_SIZE, VISIBLE_WINDOW
from chainview.navigation._base_navigator import BaseNavigator, NavigatorName
from chainview.navigation._view_state import ViewState
from chainview.viewport import Allocation, Rect, allocate, reconcile_scroll, visible_range


class ScrollingNavigator(BaseNavigator):
    """
    All expirations in one scrolling list, collapsed by default.

    Single steps wrap around the ends of the list; page steps stop at them.
    """

    name = NavigatorName.SCROLL
    expanded_by_default = False

    def __init__(self, visible_window: int = VISIBLE_WINDOW, page_size: int = PAGE_SIZE):
        self.visible_window = max(1, visible_window)
        self.page_size = max(1, page_size)

    def move(self, state: ViewState, delta: int) -> None:
        count = state.count
        if count == 0:
            return
        state.cursor = (state.cursor + delta) % count
        self._reconcile(state)

    def page(self, state: ViewState, delta: int) -> None:
        count = state.count
        if count == 0:
            return
        state.cursor = max(0, min(state.cursor + delta, count - 1))
        self._reconcile(state)

    def visible_range(self, state: ViewState, area_height: int) -> tuple[int, int]:
        return visible_range(state.scroll_offset, state.count, area_height)

    def allocate(self, state: ViewState, chain: OptionsChain, area: Rect) -> Allocation:
        start, end = self.visible_range(state, area.height)
        return allocate(self.min_heights(state, chain, start, end), area, start=start)

    def _reconcile(self, state: ViewState) -> None:
        state.scroll_offset = reconcile_scroll(state.scroll_offset, state.cursor, self.visible_window)
        self._log.debug(f"cursor={state.cursor} scroll_offset={state.scroll_offset}")
