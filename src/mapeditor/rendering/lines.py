from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from mapeditor.constants import TILE_SIZE
from mapeditor.rendering.surface import Color, Line

if TYPE_CHECKING:
    from mapeditor.components.tile import Tile
    from mapeditor.rendering.surface import DrawingSurface


class LineLocation(Enum):
    """Edge or diagonal of a tile a wall line is drawn along."""
    BORDER_TOP = auto()
    BORDER_RIGHT = auto()
    DIAGONAL_FROM_TOP_RIGHT = auto()
    DIAGONAL_FROM_TOP_LEFT = auto()


def line_for(tile: "Tile", location: LineLocation) -> Line:
    left = tile.x
    top = tile.y
    right = tile.x + TILE_SIZE
    bottom = tile.y + TILE_SIZE
    if location is LineLocation.BORDER_TOP:
        return Line(left, top, right, top)
    if location is LineLocation.BORDER_RIGHT:
        return Line(right, top, right, bottom)
    if location is LineLocation.DIAGONAL_FROM_TOP_RIGHT:
        return Line(right, top, left, bottom)
    if location is LineLocation.DIAGONAL_FROM_TOP_LEFT:
        return Line(left, top, right, bottom)
    raise ValueError(f"Unsupported line location: {location!r}")


def draw_tile_line(surface: "DrawingSurface", tile: "Tile", location: LineLocation, color: Color) -> None:
    surface.set_color(color)
    surface.draw_line(line_for(tile, location))
