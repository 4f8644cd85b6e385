from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from mapeditor.constants import DEFAULT_ORIGIN_X, DEFAULT_ORIGIN_Y, TILE_SIZE

if TYPE_CHECKING:
    from mapeditor.components.tile import Tile

WorldCoord = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class CoordinateTransform:
    """Maps canvas pixels to world tile coordinates for the sector on screen."""

    origin_x: int = DEFAULT_ORIGIN_X
    origin_y: int = DEFAULT_ORIGIN_Y
    tile_size: int = TILE_SIZE

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")

    def to_world(self, tile: "Tile") -> WorldCoord:
        return (
            self.origin_x + tile.x // self.tile_size,
            self.origin_y + tile.y // self.tile_size,
        )

    def to_canvas(self, world_x: int, world_y: int) -> Tuple[int, int]:
        """Canvas position of the top-left corner of the tile at a world coordinate."""
        return (
            (world_x - self.origin_x) * self.tile_size,
            (world_y - self.origin_y) * self.tile_size,
        )
