"""Map builders: the fixed two-room layout and the random rooms-and-tunnels layout."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import tcod.random

from ..classes.game_map import GameMap
from ..classes.rect import Rect
from .config import MapConfig
from .errors import InvalidRoomPlacement, OutOfBounds

logger = logging.getLogger(__name__)

FIXED_ROOMS = (Rect(20, 15, 10, 15), Rect(50, 15, 10, 15))
# (x1, x2, y): row 23 lies inside the vertical span of both rooms
FIXED_H_TUNNELS = ((25, 55, 23),)
FIXED_START = (25, 23)
# cells the fixed layout blocks again after carving
FIXED_SEALED_CELLS = ((30, 22), (50, 22))


class RandomSource(Protocol):
    """Anything with an inclusive randint, e.g. tcod.random.Random or random.Random."""

    def randint(self, low: int, high: int) -> int: ...


@dataclass
class GeneratedMap:
    """A built map together with the rooms it was carved from."""

    game_map: GameMap
    rooms: list[Rect] = field(default_factory=list)
    start: tuple[int, int] = (0, 0)


def _place_room(game_map: GameMap, room: Rect) -> None:
    if room.w < 2 or room.h < 2:
        raise InvalidRoomPlacement(f"room {room} has no interior")
    try:
        game_map.carve_room(room)
    except OutOfBounds as exc:
        raise InvalidRoomPlacement(f"room {room} does not fit a {game_map.width}x{game_map.height} map") from exc


def _finish(game_map: GameMap, config: MapConfig, extra_sealed: Sequence[tuple[int, int]] = ()) -> None:
    game_map.seal(extra_sealed)
    game_map.seal(config.sealed_cells)
    if config.seal_border:
        game_map.seal_border()


def _fallback_room(game_map: GameMap) -> Rect:
    """Carve the largest room the map can hold so the game always has somewhere to stand."""
    room = Rect(0, 0, game_map.width - 1, game_map.height - 1)
    game_map.carve_room(room)
    logger.warning("No room could be placed, carved fallback room %s", room)
    return room


def _pick_start(game_map: GameMap, rooms: list[Rect], preferred: tuple[int, int] | None) -> tuple[int, int]:
    """Return the preferred start cell if it is open, else the first open cell of any room.

    When every room is blocked, a fallback room is carved and appended to rooms.
    """
    if preferred is not None and game_map.in_bounds(*preferred) and not game_map.is_blocked(*preferred):
        return preferred
    for room in rooms:
        for x, y in room.interior():
            if game_map.in_bounds(x, y) and not game_map.is_blocked(x, y):
                return (x, y)
    fallback = _fallback_room(game_map)
    rooms.append(fallback)
    return fallback.center()


def make_fixed_map(
    config: MapConfig,
    rooms: Sequence[Rect] = FIXED_ROOMS,
    h_tunnels: Sequence[tuple[int, int, int]] = FIXED_H_TUNNELS,
    v_tunnels: Sequence[tuple[int, int, int]] = (),
    start: tuple[int, int] | None = FIXED_START,
    sealed_cells: Sequence[tuple[int, int]] = FIXED_SEALED_CELLS,
) -> GeneratedMap:
    """Carve a hand-placed list of rooms and tunnels.

    Rooms and tunnels that fall outside the map are skipped with a warning.
    """
    game_map = GameMap.new_blocked(config.width, config.height)

    placed = []
    for room in rooms:
        try:
            _place_room(game_map, room)
        except InvalidRoomPlacement as exc:
            logger.warning("Skipping room: %s", exc)
            continue
        placed.append(room)

    for x1, x2, y in h_tunnels:
        try:
            game_map.carve_h_tunnel(x1, x2, y)
        except OutOfBounds as exc:
            logger.warning("Skipping horizontal tunnel (%d, %d, %d): %s", x1, x2, y, exc)

    for y1, y2, x in v_tunnels:
        try:
            game_map.carve_v_tunnel(y1, y2, x)
        except OutOfBounds as exc:
            logger.warning("Skipping vertical tunnel (%d, %d, %d): %s", y1, y2, x, exc)

    if not placed:
        placed.append(_fallback_room(game_map))

    _finish(game_map, config, [cell for cell in sealed_cells if game_map.in_bounds(*cell)])

    start = _pick_start(game_map, placed, start)
    logger.debug("Built fixed map with %d rooms, start at %s", len(placed), start)
    return GeneratedMap(game_map, placed, start)


def connect_rooms(game_map: GameMap, prev: Rect, new: Rect, horizontal_first: bool) -> None:
    """Connect the centers of two rooms with an L-shaped tunnel."""
    (prev_x, prev_y) = prev.center()
    (new_x, new_y) = new.center()

    if horizontal_first:
        # first move horizontally, then vertically
        game_map.carve_h_tunnel(prev_x, new_x, prev_y)
        game_map.carve_v_tunnel(prev_y, new_y, new_x)
        corner = (new_x, prev_y)
    else:
        # first move vertically, then horizontally
        game_map.carve_v_tunnel(prev_y, new_y, prev_x)
        game_map.carve_h_tunnel(prev_x, new_x, new_y)
        corner = (prev_x, new_y)
    # the tunnel ranges are half-open, so the bend itself may be left out
    game_map.carve(*corner)


def _random_rect(config: MapConfig, rng: RandomSource) -> Rect:
    # the footprint must stay inside the map with its far edge on the map too
    max_size_x = min(config.room_max_size, config.width - 1)
    max_size_y = min(config.room_max_size, config.height - 1)
    if config.room_min_size > max_size_x or config.room_min_size > max_size_y:
        raise InvalidRoomPlacement(
            f"rooms of at least {config.room_min_size} cells do not fit a {config.width}x{config.height} map"
        )

    # random width and height
    w = rng.randint(config.room_min_size, max_size_x)
    h = rng.randint(config.room_min_size, max_size_y)

    # random position without going out of the boundaries of the map
    x = rng.randint(0, config.width - w - 1)
    y = rng.randint(0, config.height - h - 1)
    return Rect(x, y, w, h)


def make_map(config: MapConfig, rng: RandomSource | None = None) -> GeneratedMap:
    """Place up to max_rooms non-overlapping rooms and connect each to the previous one.

    At most max_placement_attempts candidates are tried; when the budget runs
    out the map is returned with the rooms placed so far.
    """
    if rng is None:
        rng = tcod.random.Random(algorithm=tcod.random.MERSENNE_TWISTER, seed=config.seed)

    game_map = GameMap.new_blocked(config.width, config.height)
    rooms: list[Rect] = []
    attempts = 0

    while len(rooms) < config.max_rooms and attempts < config.max_placement_attempts:
        attempts += 1
        try:
            new_room = _random_rect(config, rng)
        except InvalidRoomPlacement as exc:
            logger.warning("Giving up on room placement: %s", exc)
            break

        # run through the other rooms and see if they intersect with this one
        if any(new_room.intersect(other_room) for other_room in rooms):
            continue

        # this means there are no intersections, so this room is valid
        try:
            _place_room(game_map, new_room)
        except InvalidRoomPlacement as exc:
            logger.debug("Rejected candidate: %s", exc)
            continue

        if rooms:
            # all rooms after the first: connect it to the previous room with a tunnel
            # draw a coin (random number that is either 0 or 1)
            connect_rooms(game_map, rooms[-1], new_room, rng.randint(0, 1) == 1)
        rooms.append(new_room)

    if len(rooms) < config.max_rooms:
        logger.info("Placed %d of %d rooms after %d attempts", len(rooms), config.max_rooms, attempts)

    if not rooms:
        rooms.append(_fallback_room(game_map))

    _finish(game_map, config)
    start = _pick_start(game_map, rooms, rooms[0].center())
    logger.debug("Built random map with %d rooms, start at %s", len(rooms), start)
    return GeneratedMap(game_map, rooms, start)
