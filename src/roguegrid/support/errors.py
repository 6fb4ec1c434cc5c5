"""Errors raised by the map and its builders."""


class MapError(Exception):
    """Base class for map errors."""


class OutOfBounds(MapError, IndexError):
    """A grid access outside of the map."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinates out of bounds: ({x}, {y}) for map {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidRoomPlacement(MapError):
    """A room that cannot be placed on the map. The builders recover from it."""
