"""Configuration values for the screen, the map builder and the renderer."""

from dataclasses import dataclass, field

from .colors import Colors

LAYOUTS = ("fixed", "random")


@dataclass(frozen=True)
class MapConfig:
    """Size of the map and parameters of the room placement loop."""

    width: int = 80
    height: int = 45
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    # total number of room candidates the random builder may try
    max_placement_attempts: int = 200
    seed: int | None = None
    seal_border: bool = True
    sealed_cells: tuple[tuple[int, int], ...] = ()

    def __post_init__(self):
        if self.width < 3 or self.height < 3:
            raise ValueError(f"map must be at least 3x3, got {self.width}x{self.height}")
        if self.room_min_size < 2:
            raise ValueError(f"room_min_size must be at least 2 so rooms have an interior, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ValueError(f"room_min_size {self.room_min_size} exceeds room_max_size {self.room_max_size}")
        if self.max_rooms < 0 or self.max_placement_attempts < 0:
            raise ValueError("max_rooms and max_placement_attempts must not be negative")
        for x, y in self.sealed_cells:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"sealed cell ({x}, {y}) is outside the {self.width}x{self.height} map")


@dataclass(frozen=True)
class ScreenConfig:
    """Size and look of the game window."""

    width: int = 80
    height: int = 50
    title: str = "roguegrid"
    font: str | None = None
    # layout of the font sheet, arial10x10.png style by default
    font_columns: int = 32
    font_rows: int = 8


@dataclass(frozen=True)
class Palette:
    """Background colors used when drawing the map."""

    dark_wall: tuple[int, int, int] = Colors.DARK_WALL
    dark_ground: tuple[int, int, int] = Colors.DARK_GROUND


@dataclass(frozen=True)
class GameConfig:
    """Everything one run of the game needs."""

    screen: ScreenConfig = field(default_factory=ScreenConfig)
    map: MapConfig = field(default_factory=MapConfig)
    palette: Palette = field(default_factory=Palette)
    layout: str = "fixed"

    def __post_init__(self):
        if self.layout not in LAYOUTS:
            raise ValueError(f"unknown layout {self.layout!r}, expected one of {', '.join(LAYOUTS)}")
