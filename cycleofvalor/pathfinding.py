"""Reachability and distance searches over the tile grid."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Callable, Iterable

from .tiles import Tile

WeightedNavigator = Callable[[Tile], Iterable[tuple[Tile, int]]]
Navigator = Callable[[Tile], Iterable[Tile]]


def find_all_within_distance(
    start: Tile, max_distance: int, navigator: WeightedNavigator
) -> set[Tile]:
    """All tiles reachable from ``start`` at a total cost of at most ``max_distance``.

    ``navigator`` yields ``(neighbour, cost)`` pairs for a tile. A tile counts as
    visited as soon as it is first reached.
    """
    order = count()
    open_set: list[tuple[int, int, Tile]] = [(0, next(order), start)]
    visited = {start}
    while open_set:
        current_weight, _, current = heapq.heappop(open_set)
        for neighbour, weight in navigator(current):
            if neighbour in visited:
                continue
            tentative = current_weight + weight
            if tentative <= max_distance:
                heapq.heappush(open_set, (tentative, next(order), neighbour))
                visited.add(neighbour)
    return visited


def find_all_within_distance_unweighted(
    start: Tile, max_distance: int, navigator: Navigator
) -> set[Tile]:
    """Like :func:`find_all_within_distance` with every move costing one."""
    return find_all_within_distance(
        start,
        max_distance,
        lambda position: ((target, 1) for target in navigator(position)),
    )


def is_any_path(start: Tile, dest: Tile, navigator: Navigator) -> bool:
    """Whether at least one path leads from ``start`` to ``dest``."""
    if start == dest:
        return True
    open_stack = [start]
    visited: set[Tile] = set()
    while open_stack:
        current = open_stack.pop()
        visited.add(current)
        for neighbour in navigator(current):
            if neighbour == dest:
                return True
            if neighbour not in visited:
                open_stack.append(neighbour)
    return False


def find_all(start: Tile, navigator: Navigator) -> set[Tile]:
    """Every tile reachable from ``start``, including ``start`` itself."""
    open_stack = [start]
    visited: set[Tile] = set()
    while open_stack:
        current = open_stack.pop()
        visited.add(current)
        for neighbour in navigator(current):
            if neighbour not in visited:
                open_stack.append(neighbour)
    return visited


def distance_map(sources: Iterable[Tile], navigator: Navigator) -> dict[Tile, int]:
    """Step count from the nearest source to every reachable tile."""
    visited: dict[Tile, int] = {tile: 0 for tile in sources}
    order = count()
    open_set = [(0, next(order), tile) for tile in visited]
    heapq.heapify(open_set)
    while open_set:
        current_weight, _, current = heapq.heappop(open_set)
        for neighbour in navigator(current):
            if neighbour not in visited:
                distance = current_weight + 1
                heapq.heappush(open_set, (distance, next(order), neighbour))
                visited[neighbour] = distance
    return visited