from chainview.constants import PAGE_SIZE, VISIBLE_WINDOW

from ._base_navigator import BaseNavigator, NavigatorName
from ._scrolling_navigator import ScrollingNavigator
from ._tab_navigator import TabNavigator
from ._view_state import ViewState


def create_navigator(
    name: NavigatorName | str,
    visible_window: int = VISIBLE_WINDOW,
    page_size: int = PAGE_SIZE,
) -> BaseNavigator:
    """Build the navigation strategy for a layout name ('scroll' or 'tabs')."""
    name = NavigatorName(name)
    if name == NavigatorName.TABS:
        return TabNavigator()
    return ScrollingNavigator(visible_window=visible_window, page_size=page_size)


__all__ = [
    "BaseNavigator",
    "NavigatorName",
    "ScrollingNavigator",
    "TabNavigator",
    "ViewState",
    "create_navigator",
]
