from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

# Diagonal wall codes above this offset run from the top-left corner.
DIAGONAL_BACKWARDS_OFFSET = 12000


@dataclass(frozen=True, slots=True)
class OverlayDefinition:
    name: str
    color: Tuple[int, int, int]
    passable: bool = True


@dataclass(frozen=True, slots=True)
class WallDefinition:
    name: str


@dataclass(frozen=True, slots=True)
class RoofDefinition:
    name: str


@dataclass(frozen=True)
class DefinitionTables:
    """Read-only lookup tables handed to the renderer at construction.

    Every mapping is keyed by the raw landscape code. Missing keys mean the
    layer has nothing to draw.
    """

    overlays: Mapping[int, OverlayDefinition] = field(default_factory=dict)
    walls_normal: Mapping[int, WallDefinition] = field(default_factory=dict)
    walls_diagonal_backwards: Mapping[int, WallDefinition] = field(default_factory=dict)
    roofs: Mapping[int, RoofDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("overlays", "walls_normal", "walls_diagonal_backwards", "roofs"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def __hash__(self) -> int:
        return hash(tuple(
            frozenset(mapping.items())
            for mapping in (self.overlays, self.walls_normal, self.walls_diagonal_backwards, self.roofs)
        ))

    def overlay_for(self, code: int) -> OverlayDefinition | None:
        return self.overlays.get(code)

    def is_known_roof(self, code: int) -> bool:
        return code in self.roofs


OVERLAY_SPECS: Tuple[Tuple[int, str, Tuple[int, int, int], bool], ...] = (
    (1, "Road", (96, 96, 96), True),
    (2, "Water", (36, 64, 127), False),
    (3, "Wooden Floor", (138, 96, 52), True),
    (4, "Bridge", (138, 96, 52), True),
    (5, "Stone Floor", (112, 112, 112), True),
    (6, "Red Carpet", (150, 24, 24), True),
    (7, "Swamp", (48, 72, 36), False),
    (8, "Void", (0, 0, 0), False),
    (9, "Mountain", (96, 80, 64), False),
    (10, "Dark Stone", (64, 64, 64), True),
    (11, "Lava", (255, 96, 0), False),
    (12, "Tiles", (188, 188, 160), True),
    (13, "Sand", (212, 190, 120), True),
    (14, "Marble", (224, 224, 224), True),
    (23, "Cave Floor", (80, 68, 56), True),
    (24, "Underground Water", (24, 48, 96), False),
)

WALL_NAMES: Tuple[str, ...] = (
    "Stone Wall",
    "Wooden Wall",
    "Fence",
    "Railing",
    "Brick Wall",
    "Window",
    "Doorframe",
    "Hedge",
    "Cave Wall",
    "Palisade",
    "Timber Frame",
    "Crumbling Wall",
    "Dungeon Wall",
    "Plaster Wall",
    "Marble Wall",
    "Rock Face",
)

ROOF_NAMES: Tuple[str, ...] = (
    "Slate",
    "Thatch",
    "Red Tile",
    "Wooden",
    "Sandstone",
    "Dark Slate",
)

_DEFAULT_TABLES: DefinitionTables | None = None


def default_definition_tables() -> DefinitionTables:
    """Build (once) the stock overlay, wall and roof tables."""
    global _DEFAULT_TABLES
    if _DEFAULT_TABLES is not None:
        return _DEFAULT_TABLES
    overlays = {code: OverlayDefinition(name, color, passable) for code, name, color, passable in OVERLAY_SPECS}
    walls_normal = {idx + 1: WallDefinition(name) for idx, name in enumerate(WALL_NAMES)}
    walls_backwards = {
        DIAGONAL_BACKWARDS_OFFSET + idx + 1: WallDefinition(name) for idx, name in enumerate(WALL_NAMES)
    }
    roofs = {idx + 1: RoofDefinition(name) for idx, name in enumerate(ROOF_NAMES)}
    _DEFAULT_TABLES = DefinitionTables(
        overlays=overlays,
        walls_normal=walls_normal,
        walls_diagonal_backwards=walls_backwards,
        roofs=roofs,
    )
    return _DEFAULT_TABLES
