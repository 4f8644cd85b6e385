"""Entry point for the landscape editor viewer.

Sets up the event bus, the esper world holding the sector's tiles, the tile
renderer, and an Arcade window that draws them.
"""
import logging

import arcade
from arcade import Window, run, set_background_color

from mapeditor.constants import BACKGROUND_COLOR, CANVAS_HEIGHT, CANVAS_WIDTH, SECTOR_SIZE, WINDOW_TITLE
from mapeditor.definitions.tables import default_definition_tables
from mapeditor.events.bus import EventBus
from mapeditor.rendering.surface import ArcadeSurface
from mapeditor.rendering.tile_renderer import TileRenderer
from mapeditor.systems.keyboard_system import EditorAction, KeyboardSystem
from mapeditor.systems.map_render_system import MapRenderSystem
from mapeditor.systems.terrain_preset_system import TerrainPresetSystem
from mapeditor.utils.coords import CoordinateTransform
from mapeditor.utils.location_index import build_location_indexes
from mapeditor.world import create_world

# Number keys toggle one display layer each; arrows move the paint cursor.
KEY_BINDINGS = {
    arcade.key.KEY_1: EditorAction.TOGGLE_ROOFS,
    arcade.key.KEY_2: EditorAction.TOGGLE_OBJECTS,
    arcade.key.KEY_3: EditorAction.TOGGLE_ITEMS,
    arcade.key.KEY_4: EditorAction.TOGGLE_NPCS,
    arcade.key.B: EditorAction.TOGGLE_BRIGHTNESS,
    arcade.key.P: EditorAction.NEXT_PRESET,
    arcade.key.SPACE: EditorAction.PAINT,
    arcade.key.UP: EditorAction.CURSOR_UP,
    arcade.key.DOWN: EditorAction.CURSOR_DOWN,
    arcade.key.LEFT: EditorAction.CURSOR_LEFT,
    arcade.key.RIGHT: EditorAction.CURSOR_RIGHT,
}


class EditorWindow(Window):
    def __init__(self):
        super().__init__(CANVAS_WIDTH, CANVAS_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world()
        self.transform = CoordinateTransform()
        self.tile_renderer = TileRenderer(
            self.event_bus,
            default_definition_tables(),
            build_location_indexes(self.world),
            self.transform,
        )
        self.render_system = MapRenderSystem(self.world, self.tile_renderer)
        self.preset_system = TerrainPresetSystem(self.event_bus)
        self.keyboard_system = KeyboardSystem(
            self.event_bus,
            self.tile_renderer,
            self.render_system,
            self.preset_system,
            KEY_BINDINGS,
            rows=SECTOR_SIZE,
            cols=SECTOR_SIZE,
        )
        self.surface = ArcadeSurface(arcade, CANVAS_HEIGHT)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process(self.surface)
        self.keyboard_system.render_cursor(self.surface)

    def on_key_press(self, symbol: int, modifiers: int):
        self.keyboard_system.on_key_press(symbol)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    EditorWindow()
    run()


if __name__ == "__main__":
    main()
