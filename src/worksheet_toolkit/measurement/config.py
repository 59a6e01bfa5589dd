"""
Module: measurement.config

Purpose:
    Configuration for the measurement pass.

Key Classes:
    - MeasurementConfig: Immutable measurement settings

Dependencies:
    - dataclasses (std)

Used By:
    - measurement.provider: Settle cycles, timeout, surface sizing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_SETTLE_CYCLES = 2
DEFAULT_RENDER_TIMEOUT_S = 5.0
DEFAULT_MAX_REGION_HEIGHT_PX = 4000
DEFAULT_BACKGROUND = 255  # White on a grayscale ("L") surface


@dataclass(frozen=True)
class MeasurementConfig:
    """
    Configuration for measuring elements (immutable).

    Attributes:
        settle_cycles: Event-loop cycles to wait after rendering before
            reading the height (two are enough for layout to settle)
        render_timeout: Seconds to wait for an async render callback;
            None waits forever. On timeout the estimate is used.
        max_region_height: Height of each scoped region's canvas (px);
            content painted below it is not measured
        background: Grayscale background value of the surface
    """

    settle_cycles: int = DEFAULT_SETTLE_CYCLES
    render_timeout: Optional[float] = DEFAULT_RENDER_TIMEOUT_S
    max_region_height: int = DEFAULT_MAX_REGION_HEIGHT_PX
    background: int = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.settle_cycles < 0:
            raise ValueError(f"settle_cycles must be non-negative: {self.settle_cycles}")
        if self.render_timeout is not None and self.render_timeout <= 0:
            raise ValueError(f"render_timeout must be positive: {self.render_timeout}")
        if self.max_region_height <= 0:
            raise ValueError(f"max_region_height must be positive: {self.max_region_height}")
        if not 0 <= self.background <= 255:
            raise ValueError(f"background must be 0-255: {self.background}")
