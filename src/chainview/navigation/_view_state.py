from dataclasses import dataclass, field
from typing import List


@dataclass
class ViewState:
    """
    The single mutable state of a viewer session.

    Owned by the app and passed explicitly to the navigator, the dispatcher and
    the renderer. ``cursor`` and ``scroll_offset`` are only meaningful while
    there is at least one expiration.
    """

    expanded: List[bool] = field(default_factory=list)
    cursor: int = 0
    scroll_offset: int = 0
    show_greeks: bool = True

    @classmethod
    def for_chain(cls, expiration_count: int, expanded: bool, show_greeks: bool = True) -> 'ViewState':
        return cls(expanded=[expanded] * expiration_count, show_greeks=show_greeks)

    @property
    def count(self) -> int:
        return len(self.expanded)

    def is_expanded(self, index: int) -> bool:
        return 0 <= index < len(self.expanded) and self.expanded[index]
