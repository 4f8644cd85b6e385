from esper import World

from mapeditor.components.locations import BoundaryLocation, ItemLocation, NpcLocation, SceneryLocation
from mapeditor.components.tile import Tile
from mapeditor.constants import TILE_SIZE
from mapeditor.utils.coords import CoordinateTransform
from mapeditor.utils.location_index import EMPTY_LOCATION_INDEXES, LocationIndexes, build_location_indexes


def test_build_location_indexes_groups_by_category():
    world = World()
    world.create_entity(SceneryLocation(x=150, y=630, definition_id=1))
    world.create_entity(BoundaryLocation(x=151, y=630, definition_id=2))
    world.create_entity(ItemLocation(x=152, y=630, definition_id=10, amount=3))
    world.create_entity(NpcLocation(x=153, y=630, definition_id=11))

    indexes = build_location_indexes(world)

    assert indexes.has_scenery((150, 630))
    assert not indexes.has_scenery((151, 630))
    assert indexes.has_boundary((151, 630))
    assert indexes.has_item((152, 630))
    assert indexes.items[(152, 630)].amount == 3
    assert indexes.has_npc((153, 630))
    assert not indexes.has_npc((150, 630))


def test_empty_world_yields_empty_indexes():
    indexes = build_location_indexes(World())
    assert not indexes.scenery and not indexes.boundaries and not indexes.items and not indexes.npcs
    assert not EMPTY_LOCATION_INDEXES.has_item((0, 0))


def test_transform_maps_canvas_to_world_and_back():
    transform = CoordinateTransform(origin_x=144, origin_y=624)
    tile = Tile(x=5 * TILE_SIZE, y=7 * TILE_SIZE)

    assert transform.to_world(tile) == (149, 631)
    assert transform.to_canvas(149, 631) == (tile.x, tile.y)


def test_location_indexes_are_hashable():
    scenery = {(1, 2): SceneryLocation(x=1, y=2, definition_id=1)}
    first = LocationIndexes(scenery=scenery)
    second = LocationIndexes(scenery=dict(scenery))

    assert first == second
    assert hash(first) == hash(second)
    assert hash(EMPTY_LOCATION_INDEXES) == hash(LocationIndexes())
