"""Isometric tile geometry and the named tile images."""

from __future__ import annotations

from typing import Optional

TILE_WIDTH = 256.0
"""Width of a tile."""
TILE_HALF_HEIGHT = TILE_WIDTH / 4.0 + 26.0
"""Half height of a tile surface."""
RIGHT_DIR = (-TILE_WIDTH / 2.0, -TILE_HALF_HEIGHT)
"""A single right step in the isometric world."""
DOWN_DIR = (TILE_WIDTH / 2.0, -TILE_HALF_HEIGHT)
"""A single down step in the isometric world."""
LAYER_DEPTH = 10.0
"""Z-depth of a single layer."""
TILE_ANCHOR = (0.0, 0.5 - 293.0 / 512.0)

TILE_NAMES: tuple[str, ...] = (
    "edge",
    "grassblock",
    "gravelblock",
    "waterblock",
    "house1",
    "blacksmith",
    "human",
    "werewolf",
    "slime",
    "bat",
    "border_thick",
    "border",
    "tower",
    "tavern",
    "ne_corner",
    "se_corner",
    "block_blue",
    "block_grey",
    "block_orange",
)


def tile_coord_translation(x: float, y: float, layer: float) -> tuple[float, float, float]:
    """World translation of a tile coordinate on a given layer."""
    tx = RIGHT_DIR[0] * x + DOWN_DIR[0] * y
    ty = RIGHT_DIR[1] * x + DOWN_DIR[1] * y
    tz = RIGHT_DIR[1] * x + DOWN_DIR[1] * y
    z_rank = x * 15.0 + y * 10.0
    tz = tz * -0.001 + layer * LAYER_DEPTH + z_rank
    return (tx, ty, tz)


class TileSet:
    """Image handles for tiles, looked up by name."""

    def __init__(self) -> None:
        self._handles: dict[str, str] = {}

    def insert(self, name: str, handle: str) -> Optional[str]:
        """Store a handle, returning the one it replaces, if any."""
        previous = self._handles.get(name)
        self._handles[name] = handle
        return previous

    def get(self, name: str) -> str:
        """The handle for ``name``; raises KeyError if it was never loaded."""
        try:
            return self._handles[name]
        except KeyError:
            raise KeyError(f"Unable to get tile: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __len__(self) -> int:
        return len(self._handles)


def default_tile_set() -> TileSet:
    """A tile set with every game tile pointing at its image path."""
    tile_set = TileSet()
    for name in TILE_NAMES:
        tile_set.insert(name, f"tiles/{name}.png")
    return tile_set