from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Mapping, Sequence, Tuple

from mapeditor.components.display_configuration import DisplayConfigurationProperty
from mapeditor.components.terrain_template import DEFAULT_TERRAIN_TEMPLATES, TerrainTemplate
from mapeditor.constants import CURSOR_COLOR, TILE_SIZE
from mapeditor.events.bus import (
    EVENT_DISPLAY_CONFIGURATION_UPDATE,
    EVENT_MAP_BRIGHTNESS_CHANGED,
    EVENT_TERRAIN_PRESET_SELECTED,
    EventBus,
)
from mapeditor.rendering.surface import Rect

if TYPE_CHECKING:
    from mapeditor.rendering.surface import DrawingSurface
    from mapeditor.rendering.tile_renderer import TileRenderer
    from mapeditor.systems.map_render_system import MapRenderSystem
    from mapeditor.systems.terrain_preset_system import TerrainPresetSystem

logger = logging.getLogger(__name__)


class EditorAction(Enum):
    TOGGLE_ROOFS = auto()
    TOGGLE_OBJECTS = auto()
    TOGGLE_ITEMS = auto()
    TOGGLE_NPCS = auto()
    TOGGLE_BRIGHTNESS = auto()
    NEXT_PRESET = auto()
    PAINT = auto()
    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()


LAYER_TOGGLES = {
    EditorAction.TOGGLE_ROOFS: DisplayConfigurationProperty.SHOW_ROOFS,
    EditorAction.TOGGLE_OBJECTS: DisplayConfigurationProperty.SHOW_OBJECTS,
    EditorAction.TOGGLE_ITEMS: DisplayConfigurationProperty.SHOW_ITEMS,
    EditorAction.TOGGLE_NPCS: DisplayConfigurationProperty.SHOW_NPCS,
}

CURSOR_MOVES = {
    EditorAction.CURSOR_UP: (-1, 0),
    EditorAction.CURSOR_DOWN: (1, 0),
    EditorAction.CURSOR_LEFT: (0, -1),
    EditorAction.CURSOR_RIGHT: (0, 1),
}


class KeyboardSystem:
    """Translates key presses into editor events and cursor painting.

    Key symbols come from the window backend; ``key_bindings`` maps them to
    actions so the system itself never imports arcade.
    """

    def __init__(
        self,
        event_bus: EventBus,
        tile_renderer: "TileRenderer",
        render_system: "MapRenderSystem",
        preset_system: "TerrainPresetSystem",
        key_bindings: Mapping[int, EditorAction],
        *,
        rows: int,
        cols: int,
        templates: Sequence[TerrainTemplate] = DEFAULT_TERRAIN_TEMPLATES,
    ) -> None:
        self.event_bus = event_bus
        self.tile_renderer = tile_renderer
        self.render_system = render_system
        self.preset_system = preset_system
        self.key_bindings = dict(key_bindings)
        self.rows = rows
        self.cols = cols
        self.templates = tuple(templates)
        self.cursor: Tuple[int, int] = (0, 0)
        self._preset_index = 0

    def on_key_press(self, symbol: int) -> bool:
        """Handle one key press; returns False for unbound keys."""
        action = self.key_bindings.get(symbol)
        if action is None:
            return False
        prop = LAYER_TOGGLES.get(action)
        if prop is not None:
            current = self.tile_renderer.configuration.get(prop)
            self.event_bus.emit(EVENT_DISPLAY_CONFIGURATION_UPDATE, updated_properties={prop: not current})
        elif action is EditorAction.TOGGLE_BRIGHTNESS:
            self.event_bus.emit(EVENT_MAP_BRIGHTNESS_CHANGED, light=not self.tile_renderer.map_brightness_light)
        elif action is EditorAction.NEXT_PRESET:
            if self.templates:
                template = self.templates[self._preset_index % len(self.templates)]
                self._preset_index += 1
                self.event_bus.emit(EVENT_TERRAIN_PRESET_SELECTED, template=template)
        elif action is EditorAction.PAINT:
            row, col = self.cursor
            self.render_system.paint_tile(row, col, self.preset_system)
        else:
            d_row, d_col = CURSOR_MOVES[action]
            row = min(max(self.cursor[0] + d_row, 0), self.rows - 1)
            col = min(max(self.cursor[1] + d_col, 0), self.cols - 1)
            self.cursor = (row, col)
        logger.debug("Handled %s (cursor=%s)", action.name, self.cursor)
        return True

    def render_cursor(self, surface: "DrawingSurface") -> None:
        row, col = self.cursor
        surface.set_color(CURSOR_COLOR)
        surface.draw_outline(Rect(col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE))
