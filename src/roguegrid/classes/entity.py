"""Entity class."""

import logging
from dataclasses import dataclass

import tcod.console

from .game_map import GameMap

logger = logging.getLogger(__name__)


@dataclass
class Entity:
    """This is generic object: the player, an NPC... It's always represented by a character on screen."""

    x: int
    y: int
    char: str
    color: tuple[int, int, int]
    name: str = "entity"

    def move_by(self, dx: int, dy: int, game_map: GameMap) -> bool:
        """Move by the given amount, if the destination is not blocked.

        Bumping into a wall is a normal outcome: the position stays put and
        False is returned. Coordinates are not clamped; the map accessor
        raises OutOfBounds for a target off the grid.
        """
        if game_map.is_blocked(self.x + dx, self.y + dy):
            logger.debug("%s at (%d,%d) bumped into (%d,%d)", self.name, self.x, self.y, self.x + dx, self.y + dy)
            return False
        self.x += dx
        self.y += dy
        return True

    def draw(self, console: tcod.console.Console) -> None:
        """Set the color and then draw the character that represents this object at its position."""
        console.print(self.x, self.y, self.char, fg=self.color)
