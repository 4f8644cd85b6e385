from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Tuple

from esper import World

from mapeditor.components.grid_position import GridPosition
from mapeditor.components.tile import Tile

if TYPE_CHECKING:
    from mapeditor.rendering.surface import DrawingSurface
    from mapeditor.rendering.tile_renderer import TileRenderer
    from mapeditor.systems.terrain_preset_system import TerrainPresetSystem


class MapRenderSystem:
    """Renders every tile entity of the world through a TileRenderer."""

    def __init__(self, world: World, tile_renderer: "TileRenderer"):
        self.world = world
        self.tile_renderer = tile_renderer
        self._entity_by_pos: Dict[Tuple[int, int], int] = {}
        self._refresh_positions()

    def _refresh_positions(self) -> None:
        self._entity_by_pos = {
            (pos.row, pos.col): ent for ent, (pos, _) in self.world.get_components(GridPosition, Tile)
        }

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        ent = self._entity_by_pos.get((row, col))
        if ent is None:
            return None
        try:
            return self.world.component_for_entity(ent, Tile)
        except KeyError:
            return None

    def replace_tile(self, row: int, col: int, tile: Tile) -> None:
        ent = self._entity_by_pos.get((row, col))
        if ent is None:
            raise KeyError(f"No tile entity at ({row}, {col})")
        # Tiles are immutable; swapping the component is how edits land.
        self.world.add_component(ent, tile)

    def paint_tile(self, row: int, col: int, presets: "TerrainPresetSystem") -> Optional[Tile]:
        tile = self.tile_at(row, col)
        if tile is None:
            return None
        painted = presets.paint(tile)
        if painted is not tile:
            self.replace_tile(row, col, painted)
        return painted

    def process(self, surface: "DrawingSurface") -> int:
        """Draw all tiles in row-major order and return how many were drawn."""
        ordered = sorted(
            self.world.get_components(GridPosition, Tile),
            key=lambda item: (item[1][0].row, item[1][0].col),
        )
        for _, (_, tile) in ordered:
            self.tile_renderer.render_tile(tile, surface)
        return len(ordered)
