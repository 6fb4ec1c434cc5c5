"""Rect class."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Rect:
    """a rectangle on the map. used to characterize a room."""

    x1: int
    y1: int
    w: int
    h: int
    x2: int = field(init=False)
    y2: int = field(init=False)

    def __post_init__(self):
        """Set properties after initializaion."""
        self.x2 = self.x1 + self.w
        self.y2 = self.y1 + self.h

    def center(self) -> tuple[int, int]:
        """Return center coordinates of the room."""
        center_x = (self.x1 + self.x2) // 2
        center_y = (self.y1 + self.y2) // 2
        return (center_x, center_y)

    def intersect(self, other: "Rect") -> bool:
        """Returns true if this rectangle intersects with another one.

        Both rectangles are half-open, so two rooms sharing only an edge
        coordinate do not intersect: the wall ring keeps them apart.
        """
        return self.x1 < other.x2 and self.x2 > other.x1 and self.y1 < other.y2 and self.y2 > other.y1

    def interior(self) -> Iterator[tuple[int, int]]:
        """Yield the cells a room carved from this rectangle opens up."""
        for x in range(self.x1 + 1, self.x2):
            for y in range(self.y1 + 1, self.y2):
                yield x, y
