from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from mapeditor.components.tile import Tile


@dataclass(frozen=True, slots=True)
class TerrainTemplate:
    """Named terrain preset the user paints onto tiles.

    ``None`` fields leave the corresponding tile attribute untouched.
    """

    name: str
    ground_texture: Optional[int] = None
    ground_overlay: Optional[int] = None
    roof_texture: Optional[int] = None

    def apply_to(self, tile: Tile) -> Tile:
        changes = {}
        if self.ground_texture is not None:
            changes["ground_texture"] = self.ground_texture
        if self.ground_overlay is not None:
            changes["ground_overlay"] = self.ground_overlay
        if self.roof_texture is not None:
            changes["roof_texture"] = self.roof_texture
        if not changes:
            return tile
        return replace(tile, **changes)


DEFAULT_TERRAIN_TEMPLATES: Tuple[TerrainTemplate, ...] = (
    TerrainTemplate("Grass", ground_texture=70, ground_overlay=0),
    TerrainTemplate("Dirt", ground_texture=120, ground_overlay=0),
    TerrainTemplate("Road", ground_overlay=1),
    TerrainTemplate("Water", ground_overlay=2),
    TerrainTemplate("Wooden Floor", ground_overlay=3),
    TerrainTemplate("Swamp", ground_overlay=7),
    TerrainTemplate("Lava", ground_overlay=11),
    TerrainTemplate("Slate Roof", roof_texture=1),
    TerrainTemplate("Clear Roof", roof_texture=0),
)
