from chainview.chain import OptionsChain
from chainview.navigation._base_navigator import BaseNavigator, NavigatorName
from chainview.navigation._view_state import ViewState
from chainview.viewport import Allocation, Rect


class TabNavigator(BaseNavigator):
    """
    One expiration at a time behind a tab strip, expanded by default.

    There is no scrolling: the selected expiration gets the whole area.
    """

    name = NavigatorName.TABS
    expanded_by_default = True

    def move(self, state: ViewState, delta: int) -> None:
        count = state.count
        if count == 0:
            return
        state.cursor = (state.cursor + delta) % count
        self._log.debug(f"tab={state.cursor}")

    def page(self, state: ViewState, delta: int) -> None:
        # no paging between tabs
        return None

    def visible_range(self, state: ViewState, area_height: int) -> tuple[int, int]:
        if state.count == 0 or area_height <= 0:
            return state.cursor, state.cursor
        return state.cursor, state.cursor + 1

    def allocate(self, state: ViewState, chain: OptionsChain, area: Rect) -> Allocation:
        start, end = self.visible_range(state, area.height)
        if start == end:
            return Allocation(start=start)
        return Allocation(start=start, heights=(area.height,), regions=(area,))
