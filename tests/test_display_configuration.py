import pytest

from mapeditor.components.display_configuration import (
    DEFAULT_DISPLAY_CONFIGURATION,
    DisplayConfiguration,
    DisplayConfigurationProperty,
)


def test_default_configuration_enables_every_layer():
    for prop in DisplayConfigurationProperty:
        assert DEFAULT_DISPLAY_CONFIGURATION.get(prop) is True


def test_with_overrides_returns_new_instance_and_leaves_original():
    updated = DEFAULT_DISPLAY_CONFIGURATION.with_overrides({DisplayConfigurationProperty.SHOW_NPCS: False})

    assert updated is not DEFAULT_DISPLAY_CONFIGURATION
    assert updated.show_npcs is False
    assert DEFAULT_DISPLAY_CONFIGURATION.show_npcs is True
    assert updated.show_roofs and updated.show_objects and updated.show_items


def test_with_overrides_accepts_property_names():
    updated = DEFAULT_DISPLAY_CONFIGURATION.with_overrides({"show_items": False, "SHOW_ROOFS": False})

    assert updated.show_items is False
    assert updated.show_roofs is False
    assert updated.get("SHOW_OBJECTS") is True


def test_empty_overrides_produce_equal_configuration():
    assert DEFAULT_DISPLAY_CONFIGURATION.with_overrides({}) == DEFAULT_DISPLAY_CONFIGURATION


def test_missing_property_is_rejected():
    with pytest.raises(ValueError, match="SHOW_NPCS"):
        DisplayConfiguration(
            properties={
                DisplayConfigurationProperty.SHOW_ROOFS: True,
                DisplayConfigurationProperty.SHOW_OBJECTS: True,
                DisplayConfigurationProperty.SHOW_ITEMS: True,
            }
        )


def test_unknown_property_is_rejected():
    with pytest.raises(ValueError, match="SHOW_GHOSTS"):
        DEFAULT_DISPLAY_CONFIGURATION.with_overrides({"SHOW_GHOSTS": True})


def test_properties_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_DISPLAY_CONFIGURATION.properties[DisplayConfigurationProperty.SHOW_ROOFS] = False


def test_configurations_are_hashable_by_value():
    same = DEFAULT_DISPLAY_CONFIGURATION.with_overrides({})
    hidden = DEFAULT_DISPLAY_CONFIGURATION.with_overrides({"SHOW_NPCS": False})

    assert hash(same) == hash(DEFAULT_DISPLAY_CONFIGURATION)
    assert len({DEFAULT_DISPLAY_CONFIGURATION, same, hidden}) == 2
