"""Common tables shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    ESTIMATION_THRESHOLDS,
    AGE_SIZING,
    TEXT_RENDER_THRESHOLDS,
    DEFAULT_ESTIMATED_HEIGHT,
    size_multiplier,
    known_age_ranges,
)

__all__ = [
    "ESTIMATION_THRESHOLDS",
    "AGE_SIZING",
    "TEXT_RENDER_THRESHOLDS",
    "DEFAULT_ESTIMATED_HEIGHT",
    "size_multiplier",
    "known_age_ranges",
]
