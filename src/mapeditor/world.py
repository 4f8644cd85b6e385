from __future__ import annotations

from typing import Callable, Iterable, Optional

from esper import World

from mapeditor.components.grid_position import GridPosition
from mapeditor.components.tile import Tile
from mapeditor.constants import SECTOR_SIZE, TILE_SIZE

TileFactory = Callable[[int, int], Tile]


def blank_tile(row: int, col: int) -> Tile:
    return Tile(x=col * TILE_SIZE, y=row * TILE_SIZE)


def create_world(
    rows: int = SECTOR_SIZE,
    cols: int = SECTOR_SIZE,
    *,
    tile_factory: Optional[TileFactory] = None,
    locations: Iterable[object] = (),
) -> World:
    """Build an esper world holding one tile entity per grid cell.

    ``locations`` are location components (scenery, items, ...) each placed on
    its own entity.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
    factory = tile_factory or blank_tile
    world = World()
    for r in range(rows):
        for c in range(cols):
            world.create_entity(GridPosition(row=r, col=c), factory(r, c))
    for location in locations:
        world.create_entity(location)
    return world
