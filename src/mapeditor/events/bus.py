import logging
from typing import Dict

from blinker import Signal

logger = logging.getLogger(__name__)


class EventBus:
    """Named blinker signals shared by the editor's renderers and systems.

    Receivers are called with the bus as sender and the payload as keyword
    arguments, in subscription order.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        signal = self._signals.get(name)
        if signal is None:
            signal = self._signals[name] = Signal(name)
        # Renderers are often only referenced by their own bound handlers.
        signal.connect(fn, weak=False)

    def emit(self, name: str, **payload) -> int:
        """Deliver an event; returns how many receivers were notified."""
        signal = self._signals.get(name)
        if signal is None or not signal.receivers:
            logger.debug("Event %s emitted with no receivers", name)
            return 0
        delivered = len(signal.send(self, **payload))
        logger.debug("Event %s delivered to %d receivers", name, delivered)
        return delivered


# ============================================================================
# DISPLAY
# ============================================================================
EVENT_DISPLAY_CONFIGURATION_UPDATE = "display_configuration_update"  # payload: updated_properties=dict[DisplayConfigurationProperty|str, bool]
EVENT_MAP_BRIGHTNESS_CHANGED = "map_brightness_changed"              # payload: light=bool


# ============================================================================
# TERRAIN
# ============================================================================
EVENT_TERRAIN_PRESET_SELECTED = "terrain_preset_selected"            # payload: template=TerrainTemplate
