from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangular screen region in terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int = 1) -> 'Rect':
        """Region left after removing ``margin`` cells on every side."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def split_top(self, height: int) -> tuple['Rect', 'Rect']:
        """Cut ``height`` rows off the top; returns (top, rest)."""
        height = max(0, min(height, self.height))
        top = Rect(self.x, self.y, self.width, height)
        rest = Rect(self.x, self.y + height, self.width, self.height - height)
        return top, rest
