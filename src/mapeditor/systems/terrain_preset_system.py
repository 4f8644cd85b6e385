from __future__ import annotations

import logging
from typing import Any, Optional

from mapeditor.components.terrain_template import TerrainTemplate
from mapeditor.components.tile import Tile
from mapeditor.events.bus import EVENT_TERRAIN_PRESET_SELECTED, EventBus

logger = logging.getLogger(__name__)


class TerrainPresetSystem:
    """Tracks the terrain preset chosen by the user and paints tiles with it."""

    def __init__(self, event_bus: EventBus, *, initial: Optional[TerrainTemplate] = None) -> None:
        self.event_bus = event_bus
        self._selected = initial
        self.event_bus.subscribe(EVENT_TERRAIN_PRESET_SELECTED, self._on_preset_selected)

    @property
    def selected(self) -> Optional[TerrainTemplate]:
        return self._selected

    def paint(self, tile: Tile) -> Tile:
        if self._selected is None:
            return tile
        return self._selected.apply_to(tile)

    def _on_preset_selected(self, sender: Any, **payload: Any) -> None:
        template = payload.get("template")
        if not isinstance(template, TerrainTemplate):
            return
        self._selected = template
        logger.debug("Terrain preset selected: %s", template.name)
