"""Centralized height and sizing tables.

This module contains the static numbers used to estimate element heights
and to scale them for an audience age range. Estimates only feed the
measurement log and the measurement fallback; layout decisions always use
measured heights.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


DEFAULT_ESTIMATED_HEIGHT = 100.0


def _default_base_heights() -> Dict[str, float]:
    return {
        # Text components
        "title-block": 80,
        "subtitle-block": 60,
        "paragraph-block": 100,
        "text-block": 80,
        "body-text": 80,
        # Exercise components
        "fill-blank": 120,
        "multiple-choice": 150,
        "match-pairs": 180,
        "true-false": 100,
        "short-answer": 120,
        "word-bank": 140,
        # Box components
        "instructions-box": 100,
        "tip-box": 80,
        "warning-box": 80,
        # Media components
        "image-block": 200,
        "image-with-caption": 220,
        "image-placeholder": 200,
        # Layout components
        "box": 150,
        "divider": 20,
        "spacer": 40,
    }


@dataclass
class EstimationThresholds:
    """Base heights and payload-driven adjustments for height estimates."""

    base_heights: Dict[str, float] = field(default_factory=_default_base_heights)
    default_height: float = DEFAULT_ESTIMATED_HEIGHT

    # fill-blank: base + per item, plus a word bank laid out in rows of chips
    fill_blank_base: float = 80
    fill_blank_per_item: float = 50
    word_bank_header: float = 40
    word_bank_row: float = 40
    word_bank_words_per_row: int = 4

    # multiple-choice: base + per question with its options
    multiple_choice_base: float = 60
    multiple_choice_per_item: float = 80

    # Other types grow by one base height per this many characters of text
    chars_per_height_step: int = 200


@dataclass
class AgeSizing:
    """Size multipliers per audience age range (younger = larger components)."""

    multipliers: Dict[str, float] = field(default_factory=lambda: {
        "3-5": 1.5,
        "6-7": 1.3,
        "8-9": 1.1,
        "10-12": 1.0,
        "13-15": 0.9,
        "16-18": 0.8,
        "19-25": 0.75,
        "26-35": 0.7,
        "36-50": 0.75,
        "50+": 0.85,
    })
    default_multiplier: float = 1.0


ESTIMATION_THRESHOLDS = EstimationThresholds()
AGE_SIZING = AgeSizing()


def size_multiplier(age_range: str | None) -> float:
    """
    Size multiplier for an age range; 1.0 when unset or unknown.

    Example:
        >>> size_multiplier("3-5")
        1.5
        >>> size_multiplier(None)
        1.0
    """
    if not age_range:
        return AGE_SIZING.default_multiplier
    return AGE_SIZING.multipliers.get(age_range, AGE_SIZING.default_multiplier)


def known_age_ranges() -> list[str]:
    return list(AGE_SIZING.multipliers)


@dataclass
class TextRenderThresholds:
    """Thresholds for the reference Pillow text renderer."""

    font_size: int = 16
    title_font_size: int = 28
    line_spacing_px: int = 6
    block_padding_px: int = 12
    item_gap_px: int = 8
    divider_thickness_px: int = 2
    image_placeholder_ratio: float = 0.5  # Placeholder height as a share of width
    min_chars_per_line: int = 10


TEXT_RENDER_THRESHOLDS = TextRenderThresholds()
