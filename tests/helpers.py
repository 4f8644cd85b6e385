from __future__ import annotations

from typing import Any, List, Optional, Tuple

from mapeditor.definitions.tables import DefinitionTables, default_definition_tables
from mapeditor.events.bus import EventBus
from mapeditor.rendering.tile_renderer import TileRenderer
from mapeditor.utils.coords import CoordinateTransform
from mapeditor.utils.location_index import EMPTY_LOCATION_INDEXES, LocationIndexes


class RecordingSurface:
    """Headless DrawingSurface that records every call as (op, color, shape)."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self.color: Optional[Tuple[int, int, int]] = None
        self.stroke_width: Optional[float] = None

    def set_color(self, color) -> None:
        self.color = color
        self.calls.append(("set_color", color))

    def set_stroke_width(self, width) -> None:
        self.stroke_width = width
        self.calls.append(("set_stroke_width", width))

    def fill(self, shape) -> None:
        self.calls.append(("fill", (self.color, shape)))

    def draw_outline(self, shape) -> None:
        self.calls.append(("draw_outline", (self.color, shape)))

    def draw_line(self, line) -> None:
        self.calls.append(("draw_line", (self.color, line)))

    def draws(self, op: Optional[str] = None) -> List[Tuple[str, Any]]:
        """Drawing operations only (colour/stroke changes excluded)."""
        ops = {"fill", "draw_outline", "draw_line"} if op is None else {op}
        return [call for call in self.calls if call[0] in ops]

    def draws_in(self, color) -> List[Tuple[str, Any]]:
        return [call for call in self.draws() if call[1][0] == color]


def make_renderer(
    *,
    bus: EventBus | None = None,
    tables: DefinitionTables | None = None,
    locations: LocationIndexes | None = None,
    transform: CoordinateTransform | None = None,
    **kwargs,
) -> TileRenderer:
    return TileRenderer(
        bus or EventBus(),
        tables or default_definition_tables(),
        locations or EMPTY_LOCATION_INDEXES,
        transform or CoordinateTransform(origin_x=0, origin_y=0),
        **kwargs,
    )
