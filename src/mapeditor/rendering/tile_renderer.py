from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from mapeditor.components.display_configuration import (
    DEFAULT_DISPLAY_CONFIGURATION,
    DisplayConfiguration,
    DisplayConfigurationProperty,
)
from mapeditor.constants import (
    DEFAULT_MAP_BRIGHTNESS_LIGHT,
    IMPASSIBLE_TERRAIN_OUTLINE,
    ITEM_MARKER_COLOR,
    MARKER_INSET,
    NPC_MARKER_COLOR,
    ROOF_KNOWN_COLOR,
    ROOF_UNKNOWN_COLOR,
    SCENERY_MARKER_COLOR,
    TILE_SIZE,
    TILE_STROKE_WIDTH,
    WALL_OUTLINE_COLOR,
)
from mapeditor.definitions.palette import ground_color, ground_palette
from mapeditor.events.bus import (
    EVENT_DISPLAY_CONFIGURATION_UPDATE,
    EVENT_MAP_BRIGHTNESS_CHANGED,
    EventBus,
)
from mapeditor.rendering.lines import LineLocation, draw_tile_line
from mapeditor.rendering.surface import Color, Rect

if TYPE_CHECKING:
    from mapeditor.components.tile import Tile
    from mapeditor.definitions.tables import DefinitionTables
    from mapeditor.rendering.surface import DrawingSurface
    from mapeditor.utils.coords import CoordinateTransform
    from mapeditor.utils.location_index import LocationIndexes

logger = logging.getLogger(__name__)


class TileRenderer:
    """Paints a single tile: ground, overlay, walls, roof outline and entity markers.

    The renderer owns the current display configuration snapshot and replaces
    it wholesale whenever a configuration update arrives on the event bus.
    """

    def __init__(
        self,
        event_bus: EventBus,
        tables: "DefinitionTables",
        locations: "LocationIndexes",
        transform: "CoordinateTransform",
        *,
        palette: Optional[Sequence[Color]] = None,
        map_brightness_light: bool = DEFAULT_MAP_BRIGHTNESS_LIGHT,
        configuration: DisplayConfiguration = DEFAULT_DISPLAY_CONFIGURATION,
    ) -> None:
        self.event_bus = event_bus
        self.tables = tables
        self.locations = locations
        self.transform = transform
        self.palette = tuple(palette) if palette is not None else ground_palette()
        self.map_brightness_light = map_brightness_light
        self._configuration = configuration
        self.event_bus.subscribe(EVENT_DISPLAY_CONFIGURATION_UPDATE, self.on_display_configuration_updated)
        self.event_bus.subscribe(EVENT_MAP_BRIGHTNESS_CHANGED, self.on_map_brightness_changed)

    @property
    def configuration(self) -> DisplayConfiguration:
        return self._configuration

    def render_tile(self, tile: Optional["Tile"], surface: "DrawingSurface") -> None:
        if tile is None:
            return

        surface.set_stroke_width(TILE_STROKE_WIDTH)
        shape = tile.shape

        # Base ground colour.
        if tile.ground_texture >= 0:
            surface.set_color(ground_color(self.palette, tile.ground_texture, light=self.map_brightness_light))
            surface.fill(shape)
            surface.draw_outline(shape)

        # Paths, water, floors etc. drawn over the ground.
        overlay = self.tables.overlay_for(tile.ground_overlay)
        if overlay is not None:
            surface.set_color(overlay.color)
            surface.fill(shape)
            surface.draw_outline(shape)
            if not overlay.passable:
                draw_tile_line(surface, tile, LineLocation.DIAGONAL_FROM_TOP_RIGHT, IMPASSIBLE_TERRAIN_OUTLINE)
                draw_tile_line(surface, tile, LineLocation.DIAGONAL_FROM_TOP_LEFT, IMPASSIBLE_TERRAIN_OUTLINE)

        walls_normal = self.tables.walls_normal
        if tile.top_border_wall in walls_normal:
            draw_tile_line(surface, tile, LineLocation.BORDER_TOP, WALL_OUTLINE_COLOR)
        if tile.right_border_wall in walls_normal:
            draw_tile_line(surface, tile, LineLocation.BORDER_RIGHT, WALL_OUTLINE_COLOR)
        if tile.diagonal_walls in walls_normal:
            draw_tile_line(surface, tile, LineLocation.DIAGONAL_FROM_TOP_RIGHT, WALL_OUTLINE_COLOR)
        if tile.diagonal_walls in self.tables.walls_diagonal_backwards:
            draw_tile_line(surface, tile, LineLocation.DIAGONAL_FROM_TOP_LEFT, WALL_OUTLINE_COLOR)

        if self._configuration.show_roofs and tile.roof_texture != 0:
            outer = Rect(tile.x + 1, tile.y, TILE_SIZE - 1, TILE_SIZE - 1)
            if self.tables.is_known_roof(tile.roof_texture):
                surface.set_color(ROOF_KNOWN_COLOR)
            else:
                logger.debug("Unrecognised roof code %s at (%s, %s)", tile.roof_texture, tile.x, tile.y)
                surface.set_color(ROOF_UNKNOWN_COLOR)
            surface.draw_outline(outer)

        self.render_peripherals(tile, surface)

    def render_peripherals(self, tile: "Tile", surface: "DrawingSurface") -> None:
        coord = self.transform.to_world(tile)
        config = self._configuration
        locations = self.locations

        if config.show_objects and locations.has_scenery(coord):
            self._fill_inner_tile(tile, surface, SCENERY_MARKER_COLOR)
        if config.show_objects and locations.has_boundary(coord):
            self._fill_inner_tile(tile, surface, SCENERY_MARKER_COLOR)
        if config.show_items and locations.has_item(coord):
            self._fill_inner_tile(tile, surface, ITEM_MARKER_COLOR)
        if config.show_npcs and locations.has_npc(coord):
            self._fill_inner_tile(tile, surface, NPC_MARKER_COLOR)

    @staticmethod
    def _fill_inner_tile(tile: "Tile", surface: "DrawingSurface", color: Color) -> None:
        half = MARKER_INSET // 2
        inner = Rect(
            tile.x + 1 + half,
            tile.y + half,
            TILE_SIZE - 1 - MARKER_INSET,
            TILE_SIZE - 1 - MARKER_INSET,
        )
        surface.set_color(color)
        surface.fill(inner)
        surface.draw_outline(inner)

    def on_display_configuration_updated(self, sender: Any, **payload: Any) -> None:
        updates = payload.get("updated_properties")
        if not updates:
            return
        accepted = {}
        for key, value in updates.items():
            try:
                accepted[DisplayConfigurationProperty.coerce(key)] = value
            except ValueError:
                logger.warning("Ignoring unknown display configuration property %r", key)
        if not accepted:
            return
        self._configuration = self._configuration.with_overrides(accepted)
        logger.debug("Display configuration updated: %s", accepted)

    def on_map_brightness_changed(self, sender: Any, **payload: Any) -> None:
        light = payload.get("light")
        if light is None:
            return
        self.map_brightness_light = bool(light)
