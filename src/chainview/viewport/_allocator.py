"""
Viewport allocation for a list of collapsible expiration blocks.

Two independent notions of "visible" live here:

* ``reconcile_scroll`` keeps the cursor inside a fixed window of
  ``VISIBLE_WINDOW`` items, whatever their heights.
* ``visible_range`` and ``allocate`` work in terminal rows: the list shows
  items from the scroll offset onward and stacks their minimum heights, handing
  any leftover rows to the last visible item.

For chains with many expanded items the two can disagree, in which case the
cursor's block may be drawn below the bottom edge.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from chainview.constants import COLLAPSED_HEIGHT, EXPANDED_EXTRA_ROWS, VISIBLE_WINDOW
from chainview.viewport._rect import Rect


@dataclass(frozen=True)
class Allocation:
    """
    Output of ``allocate``.

    Attributes:
        start: Index of the first visible item.
        heights: Assigned height of each visible item, surplus included.
        regions: Screen region of each visible item, clipped to the area.
        surplus: Rows added to the last item (0 on overflow).
        overflow: True when the minimum heights exceed the area height.
    """

    start: int = 0
    heights: Tuple[int, ...] = ()
    regions: Tuple[Rect, ...] = ()
    surplus: int = 0
    overflow: bool = False

    @property
    def indices(self) -> range:
        return range(self.start, self.start + len(self.heights))


def item_min_height(expanded: bool, row_count: int) -> int:
    """Minimum rows for an expiration block: border and header, plus the table when expanded."""
    height = COLLAPSED_HEIGHT
    if expanded:
        height += row_count + EXPANDED_EXTRA_ROWS
    return height


def reconcile_scroll(scroll_offset: int, cursor: int, window: int = VISIBLE_WINDOW) -> int:
    """Return the scroll offset that keeps ``cursor`` within ``window`` items of it."""
    if cursor < scroll_offset:
        return cursor
    if cursor >= scroll_offset + window:
        return cursor - window + 1
    return scroll_offset


def visible_range(scroll_offset: int, count: int, area_height: int) -> Tuple[int, int]:
    """Half-open index range ``[start, end)`` of items considered for drawing."""
    start = max(0, min(scroll_offset, count))
    end = min(count, start + max(0, area_height))
    return start, end


def allocate(min_heights: Sequence[int], area: Rect, start: int = 0) -> Allocation:
    """
    Assign a height and a region to each visible item.

    Items are stacked top to bottom starting at ``area.y``. When the minimum
    heights leave rows unused, all of them go to the last item. When they do
    not fit, heights are left as they are and regions past the bottom edge are
    clipped, possibly to zero rows.
    """
    heights: List[int] = list(min_heights)
    if not heights:
        return Allocation(start=start)

    total_min = sum(heights)
    surplus = 0
    if total_min < area.height:
        surplus = area.height - total_min
        heights[-1] += surplus

    regions = []
    y = area.y
    for height in heights:
        visible = max(0, min(height, area.bottom - y))
        regions.append(Rect(area.x, min(y, area.bottom), area.width, visible))
        y += height

    return Allocation(
        start=start,
        heights=tuple(heights),
        regions=tuple(regions),
        surplus=surplus,
        overflow=total_min > area.height,
    )


def first_visible_tab(widths: Sequence[int], cursor: int, available: int) -> int:
    """
    Index of the first tab to draw on a strip ``available`` columns wide.

    Tabs are laid out left to right from the returned index. Leading tabs are
    dropped until the one at ``cursor`` ends within the strip, or until it is
    the first one drawn.
    """
    if not widths:
        return 0
    cursor = max(0, min(cursor, len(widths) - 1))
    start = 0
    while start < cursor and sum(widths[start:cursor + 1]) > available:
        start += 1
    return start


def needs_scroll_indicator(start: int, end: int, count: int) -> bool:
    """True when some items sit above or below the visible range."""
    return start > 0 or end < count
