from __future__ import annotations

from dataclasses import dataclass

from mapeditor.constants import TILE_SIZE
from mapeditor.rendering.surface import Rect


@dataclass(frozen=True, slots=True)
class Tile:
    """Visual attributes of one landscape cell positioned on the canvas.

    ``x``/``y`` are canvas pixels of the tile's top-left corner. Texture and wall
    fields hold the raw landscape codes; ``0`` means "nothing" for walls and
    roofs, and a negative ground texture means the ground is not painted.
    """

    x: int
    y: int
    ground_texture: int = 0
    ground_overlay: int = 0
    top_border_wall: int = 0
    right_border_wall: int = 0
    diagonal_walls: int = 0
    roof_texture: int = 0

    @property
    def shape(self) -> Rect:
        return Rect(self.x, self.y, TILE_SIZE, TILE_SIZE)
