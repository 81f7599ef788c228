from ._allocator import (
    Allocation,
    allocate,
    first_visible_tab,
    item_min_height,
    needs_scroll_indicator,
    reconcile_scroll,
    visible_range,
)
from ._rect import Rect

__all__ = [
    "Allocation",
    "Rect",
    "allocate",
    "first_visible_tab",
    "item_min_height",
    "needs_scroll_indicator",
    "reconcile_scroll",
    "visible_range",
]
