# cycleofvalor

The game logic behind a turn-based village defence game played on an
isometric tile map. It has no dependencies beyond the standard library.

## Modules

- `cycleofvalor.tiles`: grid geometry. It holds `Tile`, `TileDim` and
  `TileRect`. `TileDir` gives the eight directions, with `TileEdge` and
  `TileCorner` for the sides and corners of a tile. `Path` is a list of
  steps. The module covers stepping, rook, squared and straight-line
  distances, straight lines (`get_line_between`, `get_line_through`),
  right-angle walks (`right_angle_path`, `right_angle_path_x`, `cycle`),
  rectangle iteration in row order and perimeter search
  (`TileRect.find_perimeter` and `find_perimeter` for any set of tiles).
  In this grid, north is negative y and east is negative x.
- `cycleofvalor.pathfinding`: searches over any neighbour function.
  - `find_all_within_distance` takes a neighbour function that gives
    `(tile, cost)` pairs.
  - `find_all_within_distance_unweighted` does the same search with every
    move costing one.
  - `is_any_path` tells whether any path joins two tiles.
  - `find_all` finds every tile that can be reached from a start.
  - `distance_map` gives the number of steps from the nearest of several
    sources to each tile.
- `cycleofvalor.tileset`: `tile_coord_translation` maps a tile coordinate
  and a layer to an `(x, y, z)` isometric world translation. `TileSet` maps
  tile names to image paths, and `default_tile_set` fills it with every
  game tile as `tiles/<name>.png`. `TileSet.get` raises `KeyError` for an
  unknown name.
- `cycleofvalor.camera`: `camera_scale` gives the camera scale for a window
  height. It returns `None` for a height of zero.
- `cycleofvalor.splash`: `FadeInOut` is the trapezoid fade of the splash
  image. `SplashTimer` is a one-shot timer whose `just_finished()` is true
  only on the tick that completes it.
- `cycleofvalor.ui`: covers colours and button feedback.
  - `Color` is a colour type with `Color.srgb` and `with_alpha`.
  - The module holds the palette constants.
  - `Interaction` gives the pointer states.
  - `InteractionPalette.color_for` picks the background for a state.
  - `target_scale` and `animate_scale` drive the hover and press scaling.
- `cycleofvalor.icons`: `IconSet` maps icon names to image paths.
  `default_icon_set` fills it with `icons/<name>.png` for every pixel icon
  and regular icon.
- `cycleofvalor.screens`: holds the screen and menu states and widget
  visibility.
  - `Screen` is the set of screens; the default is `DEFAULT_SCREEN`,
    the splash screen.
  - `GameState` is the set of phases of play; the default is
    `DEFAULT_GAME_STATE`, the building turn.
  - `TitleAction.target()` names the screen each title button leads to.
    `None` means the application exits.
  - `CreditsAction.target()` names the screen the credits button leads to.
  - `DisplayCache` hides and shows widgets. A widget is any object with
    `visible` and `display` attributes. The cache remembers each widget's
    layout mode while it is hidden.

## Example

```python
from cycleofvalor.tiles import Tile, TileDir, TileRect
from cycleofvalor.pathfinding import distance_map

walkable = {Tile(0, 0), Tile(0, 1), Tile(1, 0), Tile(1, 1), Tile(1, 2)}

def neighbours(tile):
    return (t for t in tile.edge_adjacent() if t in walkable)

distances = distance_map([Tile(0, 0)], neighbours)
assert distances[Tile(1, 2)] == 3

assert Tile(1, 2).step(TileDir.WEST) == Tile(2, 2)
assert list(TileRect(Tile(1, 2), Tile(2, 3))) == [
    Tile(1, 2), Tile(2, 2), Tile(1, 3), Tile(2, 3)
]
```

## What it does not do

This package is a library of game rules and state. It does not provide:

- a window, rendering, audio or input handling;
- a game loop;
- a command to start the game;
- village maps, units, buildings, combat, the merchant or the tavern.

Image "handles" in `TileSet` and `IconSet` are asset paths. Nothing is
loaded from disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```