"""GameMap class."""

import logging
from collections.abc import Iterable

from ..support.errors import OutOfBounds
from .rect import Rect
from .tile import Tile

logger = logging.getLogger(__name__)


class GameMap:
    """A fixed-size grid of tiles, indexed as tiles[x][y].

    Every read goes through a bounds-checked accessor that raises OutOfBounds
    instead of wrapping around on negative indices.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"map dimensions must be positive, got {width}x{height}")
        self.width: int = width
        self.height: int = height
        # fill map with "blocked" tiles
        self.tiles: list[list[Tile]] = [[Tile.wall() for y in range(height)] for x in range(width)]

    @classmethod
    def new_blocked(cls, width: int, height: int) -> "GameMap":
        """Return a map where every tile blocks movement and sight."""
        return cls(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) is inside the map. Never raises."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y)."""
        self._check(x, y)
        return self.tiles[x][y]

    def is_blocked(self, x: int, y: int) -> bool:
        return self.tile(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.tile(x, y).block_sight

    def set_blocked(self, x: int, y: int, blocked: bool, block_sight: bool | None = None) -> None:
        """Override a single tile, e.g. to hardcode an obstacle after generation."""
        self._check(x, y)
        self.tiles[x][y] = Tile(blocked, block_sight)

    def carve(self, x: int, y: int) -> None:
        """Make a single tile passable."""
        self.set_blocked(x, y, False, False)

    def carve_room(self, room: Rect) -> None:
        """Go through the tiles in the rectangle and make them passable."""
        if room.x1 + 1 < room.x2 and room.y1 + 1 < room.y2:
            # both corners of the interior must be on the map before anything changes
            self._check(room.x1 + 1, room.y1 + 1)
            self._check(room.x2 - 1, room.y2 - 1)
        for x, y in room.interior():
            self.tiles[x][y] = Tile.floor()
        logger.debug("Carved room %s", room)

    def carve_h_tunnel(self, x1: int, x2: int, y: int) -> None:
        """Create horizontal tunnel over [min(x1, x2), max(x1, x2))."""
        # min() and max() are used in case x1>x2
        start, stop = min(x1, x2), max(x1, x2)
        if start < stop:
            self._check(start, y)
            self._check(stop - 1, y)
        for x in range(start, stop):
            self.tiles[x][y] = Tile.floor()

    def carve_v_tunnel(self, y1: int, y2: int, x: int) -> None:
        """Create vertical tunnel over [min(y1, y2), max(y1, y2))."""
        start, stop = min(y1, y2), max(y1, y2)
        if start < stop:
            self._check(x, start)
            self._check(x, stop - 1)
        for y in range(start, stop):
            self.tiles[x][y] = Tile.floor()

    def seal(self, cells: Iterable[tuple[int, int]]) -> None:
        """Block every listed cell for movement and sight."""
        for x, y in cells:
            self.set_blocked(x, y, True)

    def seal_border(self) -> None:
        """Block the outermost ring so nothing can walk off the map."""
        for x in range(self.width):
            self.tiles[x][0] = Tile.wall()
            self.tiles[x][self.height - 1] = Tile.wall()
        for y in range(self.height):
            self.tiles[0][y] = Tile.wall()
            self.tiles[self.width - 1][y] = Tile.wall()

    def open_neighbors(self, x: int, y: int) -> Iterable[tuple[int, int]]:
        """Yield the orthogonal neighbors of (x, y) that are on the map and not blocked."""
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny) and not self.tiles[nx][ny].blocked:
                yield nx, ny
