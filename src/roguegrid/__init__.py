"""Roguegrid package."""

# ruff: noqa: F401
from .classes.entity import Entity
from .classes.game_map import GameMap
from .classes.rect import Rect
from .classes.tile import Tile
from .support import common, mapgen
from .support.colors import Colors
from .support.config import GameConfig, MapConfig, Palette, ScreenConfig
from .support.errors import InvalidRoomPlacement, MapError, OutOfBounds
