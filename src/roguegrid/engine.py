"""Game state and the main loop."""

import logging
from dataclasses import dataclass, field

import tcod.console
import tcod.context
import tcod.event
import tcod.tileset

from .classes.entity import Entity
from .classes.game_map import GameMap
from .support.colors import Colors
from .support.config import GameConfig, ScreenConfig
from .support.input import MOVE_DELTAS, Action, action_for_event
from .support.mapgen import GeneratedMap, make_fixed_map, make_map
from .support.render import render_all

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Everything that changes during one run: the map, the player and the other entities."""

    game_map: GameMap
    player: Entity
    npcs: list[Entity] = field(default_factory=list)

    @property
    def render_order(self) -> list[Entity]:
        """Entities in drawing order. The player always appears above the others."""
        return [*self.npcs, self.player]

    def handle_action(self, action: Action) -> bool:
        """Apply one action. Returns True when the game should exit."""
        if action is Action.EXIT:
            return True
        if action in MOVE_DELTAS:
            dx, dy = MOVE_DELTAS[action]
            self.player.move_by(dx, dy, self.game_map)
        return False


def build_map(config: GameConfig) -> GeneratedMap:
    if config.layout == "random":
        return make_map(config.map)
    return make_fixed_map(config.map)


def new_game(config: GameConfig) -> GameState:
    """Generate a map and place the player in it."""
    generated = build_map(config)
    player = Entity(*generated.start, "@", Colors.WHITE, name="player")

    npcs = []
    if len(generated.rooms) > 1:
        # a second character waits in the last room
        npc_x, npc_y = generated.rooms[-1].center()
        if not generated.game_map.is_blocked(npc_x, npc_y):
            npcs.append(Entity(npc_x, npc_y, "@", Colors.YELLOW, name="npc"))

    logger.info("New %s game: %d rooms, player at (%d,%d)", config.layout, len(generated.rooms), player.x, player.y)
    return GameState(generated.game_map, player, npcs)


def load_tileset(screen: ScreenConfig) -> tcod.tileset.Tileset | None:
    """Load the font sheet, or None to let tcod use its default font."""
    if screen.font is None:
        return None
    return tcod.tileset.load_tilesheet(screen.font, screen.font_columns, screen.font_rows, tcod.tileset.CHARMAP_TCOD)


def wait_for_action() -> Action:
    """Block until the player does something the game understands."""
    while True:
        for event in tcod.event.wait():
            action = action_for_event(event)
            if action is not Action.NONE:
                return action


def run(config: GameConfig) -> None:
    """Open the window and play until the player exits."""
    state = new_game(config)
    console = tcod.console.Console(config.screen.width, config.screen.height, order="F")

    with tcod.context.new(
        columns=config.screen.width,
        rows=config.screen.height,
        tileset=load_tileset(config.screen),
        title=config.screen.title,
        vsync=True,
    ) as context:
        while True:
            console.clear()
            render_all(console, state.game_map, state.render_order, config.palette)
            context.present(console)

            if state.handle_action(wait_for_action()):
                break

    logger.info("Game over, player left at (%d,%d)", state.player.x, state.player.y)
