"""Immutable snapshot of the user-toggleable map layers."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class DisplayConfigurationProperty(Enum):
    SHOW_ROOFS = "SHOW_ROOFS"
    SHOW_OBJECTS = "SHOW_OBJECTS"
    SHOW_ITEMS = "SHOW_ITEMS"
    SHOW_NPCS = "SHOW_NPCS"

    @classmethod
    def coerce(cls, key: Union["DisplayConfigurationProperty", str]) -> "DisplayConfigurationProperty":
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).upper())
        except ValueError:
            raise ValueError(f"Unknown display configuration property: {key!r}") from None


PropertyKey = Union[DisplayConfigurationProperty, str]


@dataclass(frozen=True)
class DisplayConfiguration:
    """Complete mapping of every display property to its current value.

    Instances are never mutated; ``with_overrides`` derives a new snapshot so
    readers always see either the old or the new configuration in full.
    """

    properties: Mapping[DisplayConfigurationProperty, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {
            DisplayConfigurationProperty.coerce(key): bool(value)
            for key, value in dict(self.properties).items()
        }
        missing = [prop.name for prop in DisplayConfigurationProperty if prop not in normalized]
        if missing:
            raise ValueError(f"Display configuration is missing properties: {', '.join(missing)}")
        ordered = {prop: normalized[prop] for prop in DisplayConfigurationProperty}
        object.__setattr__(self, "properties", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash(tuple(self.properties.items()))

    def get(self, prop: PropertyKey) -> bool:
        return self.properties[DisplayConfigurationProperty.coerce(prop)]

    def with_overrides(self, updates: Mapping[PropertyKey, bool]) -> "DisplayConfiguration":
        merged = dict(self.properties)
        for key, value in updates.items():
            merged[DisplayConfigurationProperty.coerce(key)] = bool(value)
        return DisplayConfiguration(properties=merged)

    @property
    def show_roofs(self) -> bool:
        return self.properties[DisplayConfigurationProperty.SHOW_ROOFS]

    @property
    def show_objects(self) -> bool:
        return self.properties[DisplayConfigurationProperty.SHOW_OBJECTS]

    @property
    def show_items(self) -> bool:
        return self.properties[DisplayConfigurationProperty.SHOW_ITEMS]

    @property
    def show_npcs(self) -> bool:
        return self.properties[DisplayConfigurationProperty.SHOW_NPCS]


DEFAULT_DISPLAY_CONFIGURATION = DisplayConfiguration(
    properties={prop: True for prop in DisplayConfigurationProperty}
)
