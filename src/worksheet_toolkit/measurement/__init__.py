"""
Module: measurement

Purpose:
    Real height measurement of worksheet elements.
    Renders each element off-screen and reads its height, so pagination
    works from measured sizes instead of guesses.

Key Classes:
    - MeasurementProvider: Sequential render-and-measure pass
    - MeasurementBatch: Measured elements plus calibration log
    - MeasurementConfig: Settle cycles, timeout, surface sizing
    - RenderSurface / MeasurementRegion: Off-screen Pillow canvas

Key Functions:
    - estimate_all(): Batch from known heights or estimates, no rendering
    - render_text_block(): Reference Pillow renderer

Dependencies:
    - PIL, numpy

Used By:
    - controller: WorksheetPaginator
    - cli
"""

from .config import MeasurementConfig
from .surface import RenderSurface, MeasurementRegion, SurfaceReleasedError
from .provider import MeasurementProvider, MeasurementBatch, RenderCallback, estimate_all
from .renderers import render_text_block

__all__ = [
    # Config
    "MeasurementConfig",
    # Surface
    "RenderSurface",
    "MeasurementRegion",
    "SurfaceReleasedError",
    # Provider
    "MeasurementProvider",
    "MeasurementBatch",
    "RenderCallback",
    "estimate_all",
    # Renderers
    "render_text_block",
]
