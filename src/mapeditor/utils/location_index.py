"""Coordinate lookups for entities placed on the map.

The indexes are built once from the esper world and handed to the renderer;
they are read-only afterwards.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Type, TypeVar

from esper import World

from mapeditor.components.locations import (
    BoundaryLocation,
    ItemLocation,
    NpcLocation,
    SceneryLocation,
)
from mapeditor.utils.coords import WorldCoord

logger = logging.getLogger(__name__)

L = TypeVar("L")


@dataclass(frozen=True)
class LocationIndexes:
    scenery: Mapping[WorldCoord, SceneryLocation] = field(default_factory=dict)
    boundaries: Mapping[WorldCoord, BoundaryLocation] = field(default_factory=dict)
    items: Mapping[WorldCoord, ItemLocation] = field(default_factory=dict)
    npcs: Mapping[WorldCoord, NpcLocation] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("scenery", "boundaries", "items", "npcs"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def __hash__(self) -> int:
        # Location components are mutable; equal indexes always share their coordinates.
        return hash(tuple(
            frozenset(mapping.keys()) for mapping in (self.scenery, self.boundaries, self.items, self.npcs)
        ))

    def has_scenery(self, coord: WorldCoord) -> bool:
        return self.scenery.get(coord) is not None

    def has_boundary(self, coord: WorldCoord) -> bool:
        return self.boundaries.get(coord) is not None

    def has_item(self, coord: WorldCoord) -> bool:
        return self.items.get(coord) is not None

    def has_npc(self, coord: WorldCoord) -> bool:
        return self.npcs.get(coord) is not None


EMPTY_LOCATION_INDEXES = LocationIndexes()


def _index_component(world: World, component_type: Type[L]) -> Dict[WorldCoord, L]:
    index: Dict[WorldCoord, L] = {}
    for _, location in world.get_component(component_type):
        coord = (location.x, location.y)
        # Later spawns on the same coordinate shadow earlier ones; the marker is identical either way.
        index[coord] = location
    return index


def build_location_indexes(world: World) -> LocationIndexes:
    indexes = LocationIndexes(
        scenery=_index_component(world, SceneryLocation),
        boundaries=_index_component(world, BoundaryLocation),
        items=_index_component(world, ItemLocation),
        npcs=_index_component(world, NpcLocation),
    )
    logger.debug(
        "Indexed %d scenery, %d boundaries, %d items, %d npcs",
        len(indexes.scenery),
        len(indexes.boundaries),
        len(indexes.items),
        len(indexes.npcs),
    )
    return indexes
