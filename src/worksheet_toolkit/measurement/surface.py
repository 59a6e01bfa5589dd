"""
Module: measurement.surface

Purpose:
    Off-screen rendering surface used to measure element heights.
    The surface is one scoped resource per pagination run; every element
    is rendered into its own child region, measured, then released.

Key Classes:
    - RenderSurface: Owns the regions; released on every exit path
    - MeasurementRegion: Grayscale Pillow canvas a renderer draws into
    - SurfaceReleasedError: Surface used after release

Height reading:
    A region's rendered height is the larger of
    - the extent a renderer reserved explicitly (``region.reserve()``)
    - the lowest painted (non-background) row + 1

Dependencies:
    - PIL: Canvas and drawing
    - numpy: Painted-row detection

Used By:
    - measurement.provider
    - measurement.renderers
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Dict, Iterator

import numpy as np
from PIL import Image, ImageDraw

from .config import DEFAULT_BACKGROUND, DEFAULT_MAX_REGION_HEIGHT_PX

logger = logging.getLogger(__name__)


class SurfaceReleasedError(Exception):
    """Surface or region used after it was released."""
    pass


class MeasurementRegion:
    """
    Scoped child region of a RenderSurface.

    Renderers draw onto ``draw`` (fill=0 for ink) and may call
    ``reserve()`` for space that carries no ink (padding, spacers).

    Example:
        >>> region.draw.rectangle((0, 0, 10, 49), fill=0)
        >>> region.rendered_height()
        50
    """

    def __init__(
        self,
        region_id: str,
        width: int,
        max_height: int = DEFAULT_MAX_REGION_HEIGHT_PX,
        background: int = DEFAULT_BACKGROUND,
    ) -> None:
        self.region_id = region_id
        self.background = background
        self._image = Image.new("L", (width, max_height), color=background)
        self._draw = ImageDraw.Draw(self._image)
        self._extent = 0
        self._closed = False

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def max_height(self) -> int:
        return self._image.height

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def image(self) -> Image.Image:
        self._ensure_open()
        return self._image

    @property
    def draw(self) -> ImageDraw.ImageDraw:
        self._ensure_open()
        return self._draw

    def reserve(self, height: float) -> None:
        """Declare that content extends at least ``height`` px down."""
        self._ensure_open()
        if height < 0:
            raise ValueError(f"reserved height must be non-negative: {height}")
        self._extent = max(self._extent, int(math.ceil(height)))

    def painted_height(self) -> int:
        """Lowest non-background row + 1 (0 for an empty region)."""
        self._ensure_open()
        arr = np.asarray(self._image)
        rows = np.where((arr != self.background).any(axis=1))[0]
        if rows.size == 0:
            return 0
        last = int(rows[-1])
        if last == self._image.height - 1:
            logger.warning(
                f"Region {self.region_id} painted to its last row ({self._image.height}px); "
                f"height may be truncated"
            )
        return last + 1

    def rendered_height(self) -> int:
        return max(self._extent, self.painted_height())

    def close(self) -> None:
        if self._closed:
            return
        self._image.close()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise SurfaceReleasedError(f"Region {self.region_id} already released")


class RenderSurface:
    """
    Invisible rendering surface sized to the page content width.

    Use as a context manager so the surface is released on success,
    error and cancellation alike.

    Example:
        >>> with RenderSurface(714) as surface:
        ...     with surface.region("measure-0") as region:
        ...         region.reserve(40)
        ...         region.rendered_height()
        40
    """

    def __init__(
        self,
        width: int,
        *,
        max_region_height: int = DEFAULT_MAX_REGION_HEIGHT_PX,
        background: int = DEFAULT_BACKGROUND,
    ) -> None:
        if width <= 0:
            raise ValueError(f"surface width must be positive: {width}")
        self.width = width
        self.max_region_height = max_region_height
        self.background = background
        self._regions: Dict[str, MeasurementRegion] = {}
        self._released = False
        logger.debug(f"Created measurement surface ({width}px wide)")

    @property
    def released(self) -> bool:
        return self._released

    @property
    def active_regions(self) -> int:
        return len(self._regions)

    def open_region(self, region_id: str) -> MeasurementRegion:
        """
        Create a scoped child region.

        Raises:
            SurfaceReleasedError: If the surface was released
            ValueError: If a region with this id is already open
        """
        if self._released:
            raise SurfaceReleasedError("Measurement surface already released")
        if region_id in self._regions:
            raise ValueError(f"Region already open: {region_id}")
        region = MeasurementRegion(
            region_id,
            self.width,
            max_height=self.max_region_height,
            background=self.background,
        )
        self._regions[region_id] = region
        return region

    def close_region(self, region: MeasurementRegion) -> None:
        self._regions.pop(region.region_id, None)
        region.close()

    @contextmanager
    def region(self, region_id: str) -> Iterator[MeasurementRegion]:
        region = self.open_region(region_id)
        try:
            yield region
        finally:
            self.close_region(region)

    def release(self) -> None:
        """Release every open region and the surface itself (idempotent)."""
        if self._released:
            return
        for region in list(self._regions.values()):
            region.close()
        if self._regions:
            logger.debug(f"Released {len(self._regions)} in-flight region(s)")
        self._regions.clear()
        self._released = True
        logger.debug("Measurement surface released")

    def __enter__(self) -> RenderSurface:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
