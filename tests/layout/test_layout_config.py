"""
Tests for layout.config

Test Coverage:
- LayoutConfig defaults and derived capacity
- Validation errors
- Presets and overrides
"""

import pytest

from worksheet_toolkit.layout.config import PAGE_PRESETS, LayoutConfig


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults_are_a4(self):
        config = LayoutConfig()

        assert config.available_width == 714
        assert config.available_height == 1043
        assert config.element_spacing == 20

    @pytest.mark.parametrize("kwargs,message", [
        ({"page_width": 0}, "page_width"),
        ({"page_height": -10}, "page_height"),
        ({"padding_left": 400, "padding_right": 400}, "Padding exceeds page width"),
        ({"padding_top": 600, "padding_bottom": 600}, "Padding exceeds page height"),
        ({"padding_top": -1}, "non-negative"),
        ({"element_spacing": -2}, "element_spacing"),
    ])
    def test_invalid_config_raises(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            LayoutConfig(**kwargs)

    def test_with_spacing_returns_copy(self):
        config = LayoutConfig()

        changed = config.with_spacing(0)

        assert changed.element_spacing == 0
        assert config.element_spacing == 20


class TestPresets:
    """Tests for LayoutConfig.from_preset()."""

    def test_from_preset_is_case_insensitive(self):
        assert LayoutConfig.from_preset("letter") == PAGE_PRESETS["LETTER"]

    def test_slide_preset_capacity(self):
        slide = LayoutConfig.from_preset("SLIDE")

        assert slide.available_width == 1800
        assert slide.available_height == 960

    def test_from_preset_with_overrides(self):
        config = LayoutConfig.from_preset("A4", element_spacing=5)

        assert config.element_spacing == 5
        assert config.page_height == 1123

    def test_from_preset_when_unknown_then_raises(self):
        with pytest.raises(ValueError, match="Unknown page preset"):
            LayoutConfig.from_preset("POSTCARD")
