"""Draw the map and the entities onto a tcod console."""

from collections.abc import Iterable

import tcod.console

from ..classes.entity import Entity
from ..classes.game_map import GameMap
from .config import Palette


def render_all(
    console: tcod.console.Console, game_map: GameMap, entities: Iterable[Entity], palette: Palette
) -> None:
    """Set the background of every tile, then draw all objects in the list."""
    # go through all tiles, and set their background color
    for y in range(game_map.height):
        for x in range(game_map.width):
            wall = game_map.blocks_sight(x, y)
            color = palette.dark_wall if wall else palette.dark_ground
            console.draw_rect(x, y, 1, 1, 0, bg=color)

    # later entities are drawn over earlier ones, so the player goes last
    for entity in entities:
        entity.draw(console)
