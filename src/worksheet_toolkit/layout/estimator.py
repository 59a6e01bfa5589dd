"""
Module: layout.estimator

Purpose:
    Static height estimates per element type. Estimates are a calibration
    signal (estimated vs measured, in the measurement log) and the fallback
    when a measurement fails. The paginator never places elements by them.

Key Classes:
    - HeightEstimator: Lookup table scaled by an age-range multiplier

Dependencies:
    - common.thresholds: Base heights and age multipliers

Used By:
    - measurement.provider: Fallback heights and measurement log
    - controller: Measurement log for pre-measured input
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, Optional

from worksheet_toolkit.common.thresholds import (
    ESTIMATION_THRESHOLDS,
    EstimationThresholds,
    size_multiplier,
)
from worksheet_toolkit.core.models import Element

_TEXT_FIELDS = ("text", "content", "question", "instruction", "description")
_ITEM_TEXT_FIELDS = ("text", "question", "answer")
_OPTION_TEXT_FIELDS = ("text", "label", "value", "content")


class HeightEstimator:
    """
    Estimate element heights from their type.

    Attributes:
        age_range: Optional audience age range ("6-7", "13-15", ...);
            scales every estimate by its size multiplier

    Example:
        >>> HeightEstimator().estimate("divider")
        20.0
        >>> HeightEstimator(age_range="3-5").estimate("divider")
        30.0
    """

    def __init__(
        self,
        age_range: Optional[str] = None,
        thresholds: EstimationThresholds = ESTIMATION_THRESHOLDS,
    ) -> None:
        self.age_range = age_range
        self._thresholds = thresholds

    @property
    def multiplier(self) -> float:
        return size_multiplier(self.age_range)

    def estimate(self, element_type: Optional[str]) -> float:
        """Table lookup for a type tag; unknown types get the default."""
        t = self._thresholds
        base = t.base_heights.get(element_type or "", t.default_height)
        return float(base) * self.multiplier

    def estimate_element(self, element: Element) -> float:
        """
        Estimate using the payload as well as the type.

        fill-blank and multiple-choice grow with their item count; other
        types grow by one base height per ``chars_per_height_step``
        characters of text.
        """
        t = self._thresholds
        props = element.properties or {}

        if element.type == "fill-blank":
            items = _as_list(props.get("items"))
            height = t.fill_blank_base + len(items) * t.fill_blank_per_item
            word_bank = _as_list(props.get("wordBank"))
            if word_bank:
                rows = math.ceil(len(word_bank) / t.word_bank_words_per_row)
                height += t.word_bank_header + rows * t.word_bank_row
            return float(height) * self.multiplier

        if element.type == "multiple-choice":
            items = _as_list(props.get("items"))
            height = t.multiple_choice_base + len(items) * t.multiple_choice_per_item
            return float(height) * self.multiplier

        steps = max(1, math.ceil(content_length(props) / t.chars_per_height_step))
        return self.estimate(element.type) * steps


def content_length(props: Mapping[str, Any]) -> int:
    """Total characters of readable text in a payload."""
    length = sum(_safe_length(props.get(name)) for name in _TEXT_FIELDS)

    for option in _as_list(props.get("options")):
        length += _safe_length(_option_text(option))

    for item in _as_list(props.get("items")):
        if isinstance(item, Mapping):
            length += sum(_safe_length(item.get(name)) for name in _ITEM_TEXT_FIELDS)
        else:
            length += _safe_length(item)

    return length


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _option_text(option: Any) -> str:
    if option is None:
        return ""
    if isinstance(option, (str, int, float)):
        return str(option)
    if isinstance(option, Mapping):
        for name in _OPTION_TEXT_FIELDS:
            if option.get(name):
                return str(option[name])
    return ""


def _safe_length(value: Any) -> int:
    """Length of a value's text form; 0 for None or unserializable objects."""
    if value is None:
        return 0
    if isinstance(value, str):
        return len(value)
    if isinstance(value, (list, dict)):
        try:
            return len(json.dumps(value))
        except (TypeError, ValueError):
            return 0
    return len(str(value))
