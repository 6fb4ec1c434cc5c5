"""Translate tcod events into game actions."""

from enum import Enum, auto

import tcod.event


class Action(Enum):
    """What the player asked for this turn."""

    NONE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    EXIT = auto()


MOVE_DELTAS: dict[Action, tuple[int, int]] = {
    Action.MOVE_UP: (0, -1),
    Action.MOVE_DOWN: (0, 1),
    Action.MOVE_LEFT: (-1, 0),
    Action.MOVE_RIGHT: (1, 0),
}

KEY_ACTIONS: dict[tcod.event.KeySym, Action] = {
    # movement keys
    tcod.event.KeySym.UP: Action.MOVE_UP,
    tcod.event.KeySym.DOWN: Action.MOVE_DOWN,
    tcod.event.KeySym.LEFT: Action.MOVE_LEFT,
    tcod.event.KeySym.RIGHT: Action.MOVE_RIGHT,
    tcod.event.KeySym.ESCAPE: Action.EXIT,
}


def action_for_event(event: tcod.event.Event) -> Action:
    """Classify one event. Anything that is not a known key press or a window close is ignored."""
    if isinstance(event, tcod.event.Quit):
        return Action.EXIT
    if isinstance(event, tcod.event.KeyDown):
        return KEY_ACTIONS.get(event.sym, Action.NONE)
    return Action.NONE
