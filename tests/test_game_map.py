import copy

import pytest

from roguegrid import GameMap, OutOfBounds, Rect, Tile


def open_cells(game_map):
    return {(x, y) for x in range(game_map.width) for y in range(game_map.height) if not game_map.is_blocked(x, y)}


def test_new_blocked_map_is_all_walls():
    game_map = GameMap.new_blocked(8, 5)
    assert (game_map.width, game_map.height) == (8, 5)
    for x in range(8):
        for y in range(5):
            assert game_map.tile(x, y) == Tile.wall()


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_size_is_rejected(width, height):
    with pytest.raises(ValueError):
        GameMap(width, height)


def test_carve_room_opens_exactly_the_interior():
    game_map = GameMap.new_blocked(20, 20)
    room = Rect(2, 3, 5, 4)
    game_map.carve_room(room)

    assert open_cells(game_map) == set(room.interior())
    for x, y in room.interior():
        assert not game_map.blocks_sight(x, y)
    # the wall ring stays
    assert game_map.is_blocked(2, 3)
    assert game_map.is_blocked(7, 7)


def test_carving_is_idempotent():
    once = GameMap.new_blocked(30, 20)
    once.carve_room(Rect(1, 1, 6, 6))
    once.carve_h_tunnel(4, 20, 4)
    once.carve_v_tunnel(2, 15, 18)

    twice = copy.deepcopy(once)
    twice.carve_room(Rect(1, 1, 6, 6))
    twice.carve_h_tunnel(4, 20, 4)
    twice.carve_v_tunnel(2, 15, 18)

    assert twice.tiles == once.tiles


def test_h_tunnel_is_half_open_and_order_independent():
    forward = GameMap.new_blocked(20, 10)
    forward.carve_h_tunnel(3, 8, 5)
    backward = GameMap.new_blocked(20, 10)
    backward.carve_h_tunnel(8, 3, 5)

    assert forward.tiles == backward.tiles
    assert open_cells(forward) == {(x, 5) for x in range(3, 8)}
    assert forward.is_blocked(8, 5)


def test_v_tunnel_is_half_open_and_order_independent():
    forward = GameMap.new_blocked(10, 20)
    forward.carve_v_tunnel(2, 9, 4)
    backward = GameMap.new_blocked(10, 20)
    backward.carve_v_tunnel(9, 2, 4)

    assert forward.tiles == backward.tiles
    assert open_cells(forward) == {(4, y) for y in range(2, 9)}


def test_zero_length_tunnel_carves_nothing():
    game_map = GameMap.new_blocked(10, 10)
    game_map.carve_h_tunnel(4, 4, 4)
    game_map.carve_v_tunnel(4, 4, 4)
    assert open_cells(game_map) == set()


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 6), (10, 6), (-3, -3)])
def test_accessors_reject_out_of_bounds(x, y):
    game_map = GameMap.new_blocked(10, 6)
    with pytest.raises(OutOfBounds) as excinfo:
        game_map.is_blocked(x, y)
    assert (excinfo.value.x, excinfo.value.y) == (x, y)
    with pytest.raises(OutOfBounds):
        game_map.blocks_sight(x, y)
    with pytest.raises(OutOfBounds):
        game_map.set_blocked(x, y, True)
    assert not game_map.in_bounds(x, y)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        GameMap.new_blocked(3, 3).tile(3, 0)


def test_out_of_bounds_carving_leaves_map_untouched():
    game_map = GameMap.new_blocked(10, 10)
    before = copy.deepcopy(game_map.tiles)

    with pytest.raises(OutOfBounds):
        game_map.carve_room(Rect(5, 5, 10, 3))
    with pytest.raises(OutOfBounds):
        game_map.carve_h_tunnel(-2, 5, 3)
    with pytest.raises(OutOfBounds):
        game_map.carve_v_tunnel(3, 12, 2)

    assert game_map.tiles == before


def test_set_blocked_overrides_a_single_tile():
    game_map = GameMap.new_blocked(10, 10)
    game_map.carve_room(Rect(0, 0, 9, 9))

    game_map.set_blocked(4, 4, True)
    assert game_map.is_blocked(4, 4)
    assert game_map.blocks_sight(4, 4)

    game_map.set_blocked(5, 5, True, block_sight=False)
    assert game_map.is_blocked(5, 5)
    assert not game_map.blocks_sight(5, 5)

    game_map.set_blocked(4, 4, False)
    assert not game_map.is_blocked(4, 4)


def test_seal_blocks_listed_cells():
    game_map = GameMap.new_blocked(10, 10)
    game_map.carve_room(Rect(0, 0, 9, 9))
    game_map.seal([(2, 2), (3, 4)])
    assert game_map.is_blocked(2, 2)
    assert game_map.is_blocked(3, 4)
    assert not game_map.is_blocked(2, 3)


def test_seal_border_blocks_outer_ring():
    game_map = GameMap.new_blocked(6, 5)
    for x in range(6):
        for y in range(5):
            game_map.carve(x, y)

    game_map.seal_border()

    for x in range(6):
        for y in range(5):
            on_edge = x in (0, 5) or y in (0, 4)
            assert game_map.is_blocked(x, y) is on_edge


def test_open_neighbors_skips_walls_and_edges():
    game_map = GameMap.new_blocked(5, 5)
    game_map.carve(0, 0)
    game_map.carve(1, 0)
    game_map.carve(2, 2)
    assert set(game_map.open_neighbors(0, 0)) == {(1, 0)}
    assert set(game_map.open_neighbors(1, 1)) == {(1, 0)}
    assert set(game_map.open_neighbors(2, 1)) == {(2, 2)}
