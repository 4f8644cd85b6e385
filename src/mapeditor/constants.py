# Sector geometry. One editor canvas shows a single 48x48 landscape sector.
SECTOR_SIZE = 48
TILE_SIZE = 16

# Canvas footprint (square sector plus a small margin for the window chrome).
CANVAS_WIDTH = SECTOR_SIZE * TILE_SIZE
CANVAS_HEIGHT = SECTOR_SIZE * TILE_SIZE
WINDOW_TITLE = "Landscape Editor"

# World coordinate of the canvas' top-left tile for the default sector.
DEFAULT_ORIGIN_X = 144
DEFAULT_ORIGIN_Y = 624

# Tile stroke width used for ground / overlay outlines and wall lines.
TILE_STROKE_WIDTH = 2

# Inset (in pixels) of entity markers inside a tile; split evenly on each side.
MARKER_INSET = 8

# Start the map in the light palette; dark mode darkens ground colours twice.
DEFAULT_MAP_BRIGHTNESS_LIGHT = True

# Fixed outline colours (RGB).
WALL_OUTLINE_COLOR = (255, 255, 255)
IMPASSIBLE_TERRAIN_OUTLINE = (255, 0, 255)
ROOF_KNOWN_COLOR = (255, 200, 0)        # java.awt.Color.ORANGE
ROOF_UNKNOWN_COLOR = (0, 255, 0)        # flags roof codes missing from the roof table
SCENERY_MARKER_COLOR = (0, 255, 255)
ITEM_MARKER_COLOR = (255, 0, 0)
NPC_MARKER_COLOR = (255, 255, 0)
BACKGROUND_COLOR = (0, 0, 0)
CURSOR_COLOR = (255, 255, 255)
