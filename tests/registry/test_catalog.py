"""Tests for the YAML widget catalog."""

import pytest

from kvlens.errors import RegistryError
from kvlens.registry import CatalogRegistry, KivyRegistry


class TestLookups:
    def test_protocol(self, registry):
        assert isinstance(registry, KivyRegistry)

    def test_widget_types(self, registry):
        assert set(registry.widget_types()) == {
            "Widget", "ButtonBehavior", "Label", "Button", "BoxLayout",
        }

    def test_base_classes(self, registry):
        assert registry.base_classes("Button") == ["ButtonBehavior", "Label"]
        assert registry.base_classes("Widget") == []
        assert registry.base_classes("Nope") == []

    def test_direct_properties(self, registry):
        assert registry.direct_properties("Label")["text"] == "StringProperty"
        assert registry.direct_properties("Button") == {}
        assert registry.direct_properties("Nope") == {}

    def test_property_type_direct(self, registry):
        assert registry.property_type("orientation", "BoxLayout") == "OptionProperty"

    def test_property_type_inherited(self, registry):
        assert registry.property_type("text", "Button") == "StringProperty"
        assert registry.property_type("state", "Button") == "OptionProperty"
        assert registry.property_type("opacity", "Button") == "NumericProperty"

    def test_property_type_unknown(self, registry):
        assert registry.property_type("nope", "Button") is None
        assert registry.property_type("text", "MyLabel@Label") is None

    def test_property_type_cyclic_bases(self):
        registry = CatalogRegistry.from_mapping({
            "widgets": {
                "A": {"bases": ["B"], "properties": {}},
                "B": {"bases": ["A"], "properties": {"x": "NumericProperty"}},
            }
        })

        assert registry.property_type("x", "A") == "NumericProperty"
        assert registry.property_type("y", "A") is None

    def test_instruction_parameter_type(self, registry):
        assert registry.instruction_parameter_type("rgba", "Color") == "color"
        assert registry.instruction_parameter_type("width", "Color") is None
        assert registry.instruction_parameter_type("points", "Line") is None


class TestLoading:
    def test_default_catalog(self):
        registry = CatalogRegistry.default()

        assert "BoxLayout" in registry.widget_types()
        assert registry.property_type("text", "Button") == "StringProperty"
        assert registry.property_type("orientation", "BoxLayout") == "OptionProperty"
        assert registry.instruction_parameter_type("rgba", "Color") == "color"

    def test_from_path(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "widgets:\n"
            "  Dial:\n"
            "    bases: []\n"
            "    properties:\n"
            "      angle: NumericProperty\n"
        )

        registry = CatalogRegistry.from_path(path)

        assert registry.widget_types() == ["Dial"]
        assert registry.property_type("angle", "Dial") == "NumericProperty"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert CatalogRegistry.from_path(path).widget_types() == []

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("widgets: [unclosed\n")

        with pytest.raises(RegistryError, match="Invalid YAML"):
            CatalogRegistry.from_path(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryError, match="Cannot read"):
            CatalogRegistry.from_path(tmp_path / "missing.yaml")

    def test_non_mapping(self):
        with pytest.raises(RegistryError):
            CatalogRegistry.from_mapping(["Label"])

    def test_bad_widget_entry(self):
        with pytest.raises(RegistryError, match="Label"):
            CatalogRegistry.from_mapping({"widgets": {"Label": ["text"]}})
