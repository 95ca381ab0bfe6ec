"""Tile coordinates, compass directions, paths and rectangles on the village grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class TileDir(Enum):
    """One of the eight compass directions; the value is its clockwise index."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    def index(self) -> int:
        return self.value

    def meridean(self) -> int:
        """Change in y when stepping in this direction."""
        return _MERIDEAN[self]

    def parallel(self) -> int:
        """Change in x when stepping in this direction."""
        return _PARALLEL[self]

    def opposite(self) -> TileDir:
        return _OPPOSITE[self]

    @staticmethod
    def from_index(index: int) -> TileDir:
        return TileDir(index % 8)

    def turn_left_45(self) -> TileDir:
        return TileDir.from_index(self.value + 7)

    def turn_right_45(self) -> TileDir:
        return TileDir.from_index(self.value + 1)

    def turn_left_90(self) -> TileDir:
        return TileDir.from_index(self.value + 6)

    def turn_right_90(self) -> TileDir:
        return TileDir.from_index(self.value + 2)

    def repeat(self, steps: int) -> Path:
        """A path taking ``steps`` steps in this direction."""
        return Path([self] * steps)

    def is_edge(self) -> bool:
        return self in EDGES

    def is_diagonal(self) -> bool:
        return self in CORNERS

    def is_parallel(self) -> bool:
        return self in (TileDir.EAST, TileDir.WEST)

    def is_meridean(self) -> bool:
        return self in (TileDir.NORTH, TileDir.SOUTH)


_MERIDEAN = {
    TileDir.NORTH: -1,
    TileDir.NORTH_EAST: -1,
    TileDir.EAST: 0,
    TileDir.SOUTH_EAST: 1,
    TileDir.SOUTH: 1,
    TileDir.SOUTH_WEST: 1,
    TileDir.WEST: 0,
    TileDir.NORTH_WEST: -1,
}

_PARALLEL = {
    TileDir.NORTH: 0,
    TileDir.NORTH_EAST: -1,
    TileDir.EAST: -1,
    TileDir.SOUTH_EAST: -1,
    TileDir.SOUTH: 0,
    TileDir.SOUTH_WEST: 1,
    TileDir.WEST: 1,
    TileDir.NORTH_WEST: 1,
}

_OPPOSITE = {
    TileDir.NORTH: TileDir.SOUTH,
    TileDir.NORTH_EAST: TileDir.SOUTH_WEST,
    TileDir.EAST: TileDir.WEST,
    TileDir.SOUTH_EAST: TileDir.SOUTH_WEST,
    TileDir.SOUTH: TileDir.NORTH,
    TileDir.SOUTH_WEST: TileDir.NORTH_EAST,
    TileDir.WEST: TileDir.EAST,
    TileDir.NORTH_WEST: TileDir.SOUTH_EAST,
}

ALL_DIRS: tuple[TileDir, ...] = tuple(TileDir)
EDGES: tuple[TileDir, ...] = (TileDir.NORTH, TileDir.EAST, TileDir.SOUTH, TileDir.WEST)
CORNERS: tuple[TileDir, ...] = (
    TileDir.NORTH_EAST,
    TileDir.SOUTH_EAST,
    TileDir.SOUTH_WEST,
    TileDir.NORTH_WEST,
)


class TileEdge(Enum):
    """One of the four sides of a tile."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def direction(self) -> TileDir:
        return TileDir[self.name]


class TileCorner(Enum):
    """One of the four corners of a tile."""

    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"

    def direction(self) -> TileDir:
        return TileDir[self.name]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class TileDim:
    """An offset or size between tiles."""

    x: int = 0
    y: int = 0

    def abs(self) -> TileDim:
        return TileDim(abs(self.x), abs(self.y))

    @staticmethod
    def splat(value: int) -> TileDim:
        return TileDim(value, value)

    def easterly(self) -> bool:
        return self.x < 0

    def westerly(self) -> bool:
        return 0 < self.x

    def northerly(self) -> bool:
        return self.y < 0

    def southerly(self) -> bool:
        return 0 < self.y


TileDim.ZERO = TileDim(0, 0)  # type: ignore[attr-defined]
TileDim.ONE = TileDim(1, 1)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Tile:
    """A grid coordinate."""

    x: int = 0
    y: int = 0

    def step(self, direction: TileDir) -> Tile:
        return Tile(self.x + direction.parallel(), self.y + direction.meridean())

    @staticmethod
    def splat(value: int) -> Tile:
        return Tile(value, value)

    @staticmethod
    def from_vec2(x: float, y: float) -> Tile:
        """The tile nearest to a point, rounding halves away from zero."""
        return Tile(_round_half_away(x), _round_half_away(y))

    def min(self, other: Tile) -> Tile:
        return Tile(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Tile) -> Tile:
        return Tile(max(self.x, other.x), max(self.y, other.y))

    def difference(self, other: Tile) -> TileDim:
        return TileDim(other.x - self.x, other.y - self.y)

    def distance_rook(self, other: Tile) -> int:
        d = self.difference(other).abs()
        return d.x + d.y

    def distance_squared(self, other: Tile) -> int:
        d = self.difference(other)
        return d.x**2 + d.y**2

    def distance_straight(self, other: Tile) -> float:
        return math.sqrt(self.distance_squared(other))

    def find_direction_edge(self, other: Tile) -> Optional[TileEdge]:
        """The edge facing ``other`` when both lie on one row or column."""
        if self == other:
            return None
        if self.x != other.x and self.y != other.y:
            return None
        if self.x == other.x:
            return TileEdge.NORTH if other.y < self.y else TileEdge.SOUTH
        return TileEdge.EAST if other.x < self.x else TileEdge.WEST

    def get_line_between(self, other: Tile) -> Optional[Iterator[Tile]]:
        """Step towards ``other``, yielding only while each step lands on it."""
        edge = self.find_direction_edge(other)
        if edge is None:
            return None
        direction = edge.direction()

        def line() -> Iterator[Tile]:
            cursor = self
            while True:
                cursor = cursor.step(direction)
                if cursor != other:
                    return
                yield cursor

        return line()

    def get_line_through(self, other: Tile) -> Optional[Iterator[Tile]]:
        """An endless line of tiles from here through ``other`` and beyond."""
        edge = self.find_direction_edge(other)
        if edge is None:
            return None
        direction = edge.direction()

        def line() -> Iterator[Tile]:
            cursor = self
            while True:
                cursor = cursor.step(direction)
                yield cursor

        return line()

    def right_angle_path_x(self, dest: Tile) -> Iterator[Tile]:
        diff = self.difference(dest)
        if diff.x <= 0 <= diff.y:
            dirs = (TileDir.EAST, TileDir.SOUTH)
        elif 0 <= diff.x and diff.y <= 0:
            dirs = (TileDir.SOUTH, TileDir.WEST)
        elif 0 <= diff.x and 0 <= diff.y:
            dirs = (TileDir.WEST, TileDir.SOUTH)
        else:
            dirs = (TileDir.SOUTH, TileDir.EAST)

        current = self
        primary = True
        while current != dest:
            next_step = current.step(dirs[0] if primary else dirs[1])
            if (
                next_step == dest
                or next_step.step(dirs[1]) == dest
                or next_step.step(dirs[0]) == dest
            ):
                primary = not primary
                current = next_step
                yield current
            elif (
                primary
                and next_step.distance_straight(dest) < current.distance_straight(dest)
            ) or (
                not primary
                and current.step(dirs[1]).distance_straight(dest)
                < current.distance_straight(dest)
            ):
                current = next_step
                yield current
            else:
                return

    def right_angle_path(self, dest: Tile, right_turn: bool) -> Iterator[Tile]:
        """Tiles on an L-shaped walk to ``dest``, turning right or left."""
        diff = self.difference(dest)
        if diff.x <= 0 <= diff.y:
            dirs = [TileDir.EAST, TileDir.SOUTH]
        elif 0 <= diff.x and 0 <= diff.y:
            dirs = [TileDir.SOUTH, TileDir.WEST]
        elif 0 <= diff.x and diff.y <= 0:
            dirs = [TileDir.WEST, TileDir.NORTH]
        else:
            dirs = [TileDir.NORTH, TileDir.EAST]
        if not right_turn:
            dirs.reverse()

        current = self
        while current != dest:
            next_primary = current.step(dirs[0])
            next_secondary = current.step(dirs[1])
            here = current.distance_straight(dest)
            if next_primary == dest or next_primary.distance_straight(dest) < here:
                current = next_primary
            elif next_secondary == dest or next_secondary.distance_straight(dest) < here:
                current = next_secondary
            else:
                current = next_primary
            yield current

    def cycle(self, other: Tile, clockwise: bool) -> Iterator[Tile]:
        """A loop out to ``other`` and back again."""
        yield from self.right_angle_path(other, clockwise)
        yield from other.right_angle_path(self, not clockwise)

    def edge_adjacent(self) -> tuple[Tile, ...]:
        return tuple(self.step(d) for d in EDGES)

    def corner_adjacent(self) -> tuple[Tile, ...]:
        return tuple(self.step(d) for d in CORNERS)

    def all_adjacent(self) -> tuple[Tile, ...]:
        return tuple(self.step(d) for d in ALL_DIRS)

    def __add__(self, other: object) -> Tile:
        if not isinstance(other, TileDim):
            return NotImplemented
        return Tile(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Tile:
        if not isinstance(other, TileDim):
            return NotImplemented
        return Tile(self.x - other.x, self.y - other.y)


Tile.ZERO = Tile(0, 0)  # type: ignore[attr-defined]
Tile.MIN = Tile.splat(_I32_MIN)  # type: ignore[attr-defined]
Tile.MAX = Tile.splat(_I32_MAX)  # type: ignore[attr-defined]


@dataclass
class Path:
    """A sequence of direction steps."""

    steps: list[TileDir] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[TileDir]:
        return iter(self.steps)

    def follow(self, start: Tile) -> Iterator[Tile]:
        """The tiles visited when walking the path from ``start``."""
        for direction in self.steps:
            start = start.step(direction)
            yield start

    def step(self, direction: TileDir) -> None:
        self.steps.append(direction)

    def reverse(self) -> Path:
        return Path([d.opposite() for d in reversed(self.steps)])

    def extend(self, other: Path) -> None:
        self.steps.extend(other.steps)

    def join(self, other: Path) -> Path:
        return Path([*self.steps, *other.steps])


def find_perimeter(tiles: Iterable[Tile], directions: Iterable[TileDir]) -> Iterator[Tile]:
    """Tiles of a set whose neighbours in every given direction are also in the set."""
    tile_set = set(tiles)
    dirs = tuple(directions)
    return (t for t in tile_set if all(t.step(d) in tile_set for d in dirs))


@dataclass(frozen=True)
class TileRect:
    """An inclusive rectangle spanned by two corner tiles."""

    a: Tile
    b: Tile

    def min(self) -> Tile:
        return self.a.min(self.b)

    def max(self) -> Tile:
        return self.a.max(self.b)

    def size(self) -> TileDim:
        lo, hi = self.min(), self.max()
        return TileDim(hi.x - lo.x + 1, hi.y - lo.y + 1)

    def area(self) -> int:
        size = self.size()
        return size.x * size.y

    def contains(self, tile: Tile) -> bool:
        lo, hi = self.min(), self.max()
        return lo.x <= tile.x <= hi.x and lo.y <= tile.y <= hi.y

    def __iter__(self) -> Iterator[Tile]:
        lo, hi = self.min(), self.max()
        for y in range(lo.y, hi.y + 1):
            for x in range(lo.x, hi.x + 1):
                yield Tile(x, y)

    def contains_tile(self, tile: Tile) -> bool:
        return self.contains(tile)

    def find_perimeter(self, directions: Iterable[TileDir]) -> Iterator[Tile]:
        """Tiles whose neighbours in every given direction lie inside the rectangle."""
        dirs = tuple(directions)
        return (t for t in self if all(self.contains(t.step(d)) for d in dirs))