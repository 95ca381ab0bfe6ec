import pytest

from cycleofvalor.pathfinding import (
    distance_map,
    find_all,
    find_all_within_distance,
    find_all_within_distance_unweighted,
    is_any_path,
)
from cycleofvalor.tiles import Tile


def restricted(tiles):
    allowed = set(tiles)
    return lambda tile: [t for t in tile.edge_adjacent() if t in allowed]


def open_grid(tile):
    return tile.edge_adjacent()


FIVE = [Tile.ZERO, Tile(0, 1), Tile(1, 0), Tile(1, 1), Tile(1, 2)]


def test_distance_map_trivial():
    d = distance_map([Tile.ZERO], restricted([Tile.ZERO, Tile(0, 1)]))
    assert d[Tile.ZERO] == 0
    assert d[Tile(0, 1)] == 1


def test_distance_map_five_tiles():
    d = distance_map([Tile.ZERO], restricted(FIVE))
    assert d[Tile.ZERO] == 0
    assert d[Tile(0, 1)] == 1
    assert d[Tile(1, 0)] == 1
    assert d[Tile(1, 1)] == 2
    assert d[Tile(1, 2)] == 3


def test_distance_map_two_sources():
    d = distance_map(iter([Tile.ZERO, Tile(0, 1)]), restricted(FIVE))
    assert d[Tile.ZERO] == 0
    assert d[Tile(0, 1)] == 0
    assert d[Tile(1, 0)] == 1
    assert d[Tile(1, 1)] == 1
    assert d[Tile(1, 2)] == 2


def test_distance_map_covers_only_reachable():
    d = distance_map([Tile.ZERO], restricted(FIVE + [Tile(5, 5)]))
    assert set(d) == set(FIVE)


@pytest.mark.parametrize("radius", [0, 1, 2, 3])
def test_unweighted_within_distance_is_rook_ball(radius):
    found = find_all_within_distance_unweighted(Tile.ZERO, radius, open_grid)
    assert Tile.ZERO in found
    assert all(Tile.ZERO.distance_rook(t) <= radius for t in found)
    expected = {
        Tile(x, y)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
        if abs(x) + abs(y) <= radius
    }
    assert found == expected


def test_unweighted_within_distance_one():
    found = find_all_within_distance_unweighted(Tile.ZERO, 1, open_grid)
    assert found == {Tile.ZERO, *Tile.ZERO.edge_adjacent()}


def test_weighted_cost_too_high_keeps_only_start():
    found = find_all_within_distance(
        Tile.ZERO, 1, lambda t: [(n, 2) for n in t.edge_adjacent()]
    )
    assert found == {Tile.ZERO}


def test_weighted_cost_reaches_neighbours():
    found = find_all_within_distance(
        Tile.ZERO, 2, lambda t: [(n, 2) for n in t.edge_adjacent()]
    )
    assert found == {Tile.ZERO, *Tile.ZERO.edge_adjacent()}


def test_is_any_path_same_tile():
    assert is_any_path(Tile(3, 3), Tile(3, 3), lambda t: [])


def test_is_any_path_connected():
    assert is_any_path(Tile.ZERO, Tile(1, 2), restricted(FIVE))


def test_is_any_path_disconnected():
    assert not is_any_path(Tile.ZERO, Tile(5, 5), restricted(FIVE + [Tile(5, 5)]))


def test_find_all_component():
    assert find_all(Tile.ZERO, restricted(FIVE + [Tile(7, 7)])) == set(FIVE)


def test_find_all_isolated():
    assert find_all(Tile(4, 4), lambda t: []) == {Tile(4, 4)}