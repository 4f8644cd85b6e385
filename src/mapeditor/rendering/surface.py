"""Immediate-mode 2D drawing surface used by the tile renderer.

Coordinates are canvas pixels with the origin at the top-left corner and y
growing downwards. ``ArcadeSurface`` converts them to arcade's bottom-left
origin when drawing for real.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True, slots=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float




class DrawingSurface(Protocol):
    def set_color(self, color: Color) -> None: ...

    def set_stroke_width(self, width: float) -> None: ...

    def fill(self, shape: Rect) -> None: ...

    def draw_outline(self, shape: Rect) -> None: ...

    def draw_line(self, line: Line) -> None: ...


class ArcadeSurface:
    """DrawingSurface backed by arcade's module-level draw functions.

    The arcade module is passed in so headless callers can supply a stand-in.
    """

    def __init__(self, arcade, canvas_height: float, *, offset_x: float = 0.0, offset_y: float = 0.0):
        self._arcade = arcade
        self._canvas_height = canvas_height
        self._offset_x = offset_x
        self._offset_y = offset_y
        self._color: Color = (255, 255, 255)
        self._stroke_width: float = 1.0

    @property
    def color(self) -> Color:
        return self._color

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    def set_color(self, color: Color) -> None:
        self._color = tuple(color)

    def set_stroke_width(self, width: float) -> None:
        self._stroke_width = float(width)

    def _flip_y(self, y: float) -> float:
        return self._offset_y + self._canvas_height - y

    def fill(self, shape: Rect) -> None:
        self._arcade.draw_lbwh_rectangle_filled(
            self._offset_x + shape.left,
            self._flip_y(shape.bottom),
            shape.width,
            shape.height,
            self._color,
        )

    def draw_outline(self, shape: Rect) -> None:
        self._arcade.draw_lbwh_rectangle_outline(
            self._offset_x + shape.left,
            self._flip_y(shape.bottom),
            shape.width,
            shape.height,
            self._color,
            self._stroke_width,
        )

    def draw_line(self, line: Line) -> None:
        self._arcade.draw_line(
            self._offset_x + line.x1,
            self._flip_y(line.y1),
            self._offset_x + line.x2,
            self._flip_y(line.y2),
            self._color,
            self._stroke_width,
        )
