"""Support file with common help functions"""

from collections import deque

from ..classes.game_map import GameMap


def flood_fill(game_map: GameMap, start: tuple[int, int]) -> set[tuple[int, int]]:
    """Returns every open cell reachable from start with orthogonal steps"""
    if game_map.is_blocked(*start):
        return set()

    visited = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for cell in game_map.open_neighbors(x, y):
            if cell not in visited:
                visited.add(cell)
                queue.append(cell)
    return visited


def is_reachable(game_map: GameMap, start: tuple[int, int], goal: tuple[int, int]) -> bool:
    """First test the goal tile, then walk the open cells from start"""
    if game_map.is_blocked(*goal):
        return False
    return goal in flood_fill(game_map, start)
