"""
Tests for layout.estimator

Test Coverage:
- estimate(): Table lookup, default, age multiplier
- estimate_element(): Payload-driven growth
- content_length()
"""

import pytest

from worksheet_toolkit.core.models import Element
from worksheet_toolkit.layout.estimator import HeightEstimator, content_length


class TestEstimate:
    """Tests for HeightEstimator.estimate()."""

    def test_estimate_when_known_type_then_table_value(self):
        estimator = HeightEstimator()

        assert estimator.estimate("title-block") == 80.0
        assert estimator.estimate("image-with-caption") == 220.0

    def test_estimate_when_unknown_type_then_default(self):
        assert HeightEstimator().estimate("hologram") == 100.0
        assert HeightEstimator().estimate(None) == 100.0

    @pytest.mark.parametrize("age_range,expected", [
        ("3-5", 30.0),
        ("16-18", 16.0),
        ("10-12", 20.0),
        ("unknown", 20.0),
        (None, 20.0),
    ])
    def test_estimate_scaled_by_age_range(self, age_range, expected):
        assert HeightEstimator(age_range=age_range).estimate("divider") == pytest.approx(expected)


class TestEstimateElement:
    """Tests for HeightEstimator.estimate_element()."""

    def test_fill_blank_grows_with_items_and_word_bank(self):
        element = Element("fill-blank", {
            "items": [{"text": "a"}, {"text": "b"}],
            "wordBank": ["one", "two", "three", "four", "five"],
        })

        # 80 + 2*50 + 40 + 2 rows * 40
        assert HeightEstimator().estimate_element(element) == 300.0

    def test_multiple_choice_grows_with_items(self):
        element = Element("multiple-choice", {"items": [{}, {}, {}]})

        assert HeightEstimator().estimate_element(element) == 300.0

    def test_long_text_adds_height_steps(self):
        element = Element("body-text", {"text": "x" * 450})

        assert HeightEstimator().estimate_element(element) == 240.0

    def test_short_text_uses_base(self):
        assert HeightEstimator().estimate_element(Element("body-text", {"text": "hi"})) == 80.0

    def test_age_range_scales_payload_estimate(self):
        element = Element("multiple-choice", {"items": [{}]})

        assert HeightEstimator(age_range="6-7").estimate_element(element) == pytest.approx(182.0)


class TestContentLength:
    """Tests for content_length()."""

    def test_counts_text_options_and_items(self):
        props = {
            "text": "abcd",
            "options": ["yes", {"label": "no"}, None],
            "items": ["xy", {"question": "why"}],
        }

        assert content_length(props) == 4 + 3 + 2 + 2 + 3

    def test_ignores_non_list_collections(self):
        assert content_length({"items": "not a list", "options": 5}) == 0
