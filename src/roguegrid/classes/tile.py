"""Tile class"""

from dataclasses import dataclass


@dataclass
class Tile:
    """A tile of the map and its properties"""

    blocked: bool
    block_sight: bool | None = None

    def __post_init__(self):
        # by default, if a tile is blocked, it also blocks sight
        self.block_sight = self.blocked if self.block_sight is None else self.block_sight

    @classmethod
    def wall(cls) -> "Tile":
        """Return a tile that blocks both movement and sight."""
        return cls(True, True)

    @classmethod
    def floor(cls) -> "Tile":
        """Return an open tile."""
        return cls(False, False)
