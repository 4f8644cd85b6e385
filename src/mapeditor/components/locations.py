from dataclasses import dataclass


@dataclass(slots=True)
class SceneryLocation:
    """Scenery object (tree, rock, furniture) anchored at a world coordinate."""
    x: int
    y: int
    definition_id: int
    direction: int = 0


@dataclass(slots=True)
class BoundaryLocation:
    """Boundary object (door, fence segment) anchored at a world coordinate."""
    x: int
    y: int
    definition_id: int
    direction: int = 0


@dataclass(slots=True)
class ItemLocation:
    x: int
    y: int
    definition_id: int
    amount: int = 1


@dataclass(slots=True)
class NpcLocation:
    x: int
    y: int
    definition_id: int
