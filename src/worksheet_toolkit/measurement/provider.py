"""
Module: measurement.provider

Purpose:
    Measure real element heights by rendering each element into an
    off-screen surface. Measure first, paginate second.

Key Classes:
    - MeasurementProvider: Sequential render-and-measure pass
    - MeasurementBatch: Measured elements plus calibration log

Algorithm:
    1. Acquire one RenderSurface sized to the page content width
    2. For each element, in order:
       a. open a scoped region and call the caller's ``render_into``
       b. await an async render (bounded by ``render_timeout``)
       c. wait ``settle_cycles`` event-loop cycles
       d. read the region's rendered height, close the region
    3. A failed or timed-out element gets its estimated height and a
       warning; later elements are still measured
    4. Release the surface on every exit path, cancellation included

    Elements are measured strictly one at a time: they share the surface,
    and concurrent renders into it would corrupt the readings.

Dependencies:
    - asyncio (std)
    - measurement.surface: RenderSurface, MeasurementRegion
    - layout.estimator: HeightEstimator

Used By:
    - controller: WorksheetPaginator.paginate_with_measurements()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from worksheet_toolkit.core.models import Element, MeasuredElement, MeasurementRecord
from worksheet_toolkit.layout.config import LayoutConfig
from worksheet_toolkit.layout.estimator import HeightEstimator

from .config import MeasurementConfig
from .surface import MeasurementRegion, RenderSurface

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Element, MeasurementRegion], Union[None, Awaitable[Any]]]
SurfaceFactory = Callable[[int, MeasurementConfig], RenderSurface]


def _default_surface(width: int, config: MeasurementConfig) -> RenderSurface:
    return RenderSurface(
        width,
        max_region_height=config.max_region_height,
        background=config.background,
    )


@dataclass(frozen=True)
class MeasurementBatch:
    """
    Output of one measurement pass.

    Attributes:
        measured: MeasuredElements in input order
        log: One MeasurementRecord per element
        warnings: Messages for elements that fell back to estimates
    """
    measured: Tuple[MeasuredElement, ...]
    log: Tuple[MeasurementRecord, ...]
    warnings: List[str] = field(default_factory=list)

    @property
    def fallback_count(self) -> int:
        return sum(1 for record in self.log if record.fallback)


class MeasurementProvider:
    """
    Render-and-measure pass over an element list.

    Example:
        >>> provider = MeasurementProvider(LayoutConfig())
        >>> batch = await provider.measure_all(elements, render_text_block)
        >>> [m.measured_height for m in batch.measured]
        [62.0, 118.0, ...]
    """

    def __init__(
        self,
        layout: LayoutConfig,
        estimator: Optional[HeightEstimator] = None,
        config: Optional[MeasurementConfig] = None,
        surface_factory: SurfaceFactory = _default_surface,
    ) -> None:
        self.layout = layout
        self.estimator = estimator or HeightEstimator()
        self.config = config or MeasurementConfig()
        self._surface_factory = surface_factory

    async def measure_all(
        self,
        elements: Sequence[Element],
        render_into: RenderCallback,
    ) -> MeasurementBatch:
        """
        Measure every element, in order.

        Args:
            elements: Elements in reading order
            render_into: Host callback drawing one element into a region;
                may return an awaitable

        Returns:
            MeasurementBatch aligned with ``elements``
        """
        measured: List[MeasuredElement] = []
        log: List[MeasurementRecord] = []
        warnings: List[str] = []
        run_token = uuid.uuid4().hex[:8]

        logger.info(f"Measuring {len(elements)} elements")

        surface = self._surface_factory(self.layout.available_width, self.config)
        try:
            for index, element in enumerate(elements):
                element_id = f"measure-{index}-{run_token}"
                item, record, warning = await self._measure_one(
                    surface, index, element, element_id, render_into
                )
                measured.append(item)
                log.append(record)
                if warning:
                    warnings.append(warning)
        finally:
            surface.release()

        logger.info(
            f"Measured {len(measured)} elements "
            f"({sum(1 for r in log if r.fallback)} estimated)"
        )
        return MeasurementBatch(measured=tuple(measured), log=tuple(log), warnings=warnings)

    async def _measure_one(
        self,
        surface: RenderSurface,
        index: int,
        element: Element,
        element_id: str,
        render_into: RenderCallback,
    ) -> Tuple[MeasuredElement, MeasurementRecord, Optional[str]]:
        estimated = self.estimator.estimate_element(element)
        warning: Optional[str] = None

        region = surface.open_region(element_id)
        try:
            outcome = render_into(element, region)
            if inspect.isawaitable(outcome):
                await asyncio.wait_for(outcome, timeout=self.config.render_timeout)
            await self._wait_for_settle()
            height = float(region.rendered_height())
            fallback = False
            logger.debug(f"Element {index} ({element.type}): {height:g}px")
        except asyncio.TimeoutError:
            height, fallback = estimated, True
            warning = (
                f"Render of element {index} ({element.type}) timed out after "
                f"{self.config.render_timeout}s, using estimate {estimated:g}px"
            )
            logger.warning(warning)
        except Exception as e:
            height, fallback = estimated, True
            warning = (
                f"Failed to measure element {index} ({element.type}): {e}; "
                f"using estimate {estimated:g}px"
            )
            logger.warning(warning)
        finally:
            surface.close_region(region)

        item = MeasuredElement(element=element, measured_height=height, element_id=element_id)
        record = MeasurementRecord(
            index=index,
            element_type=element.type,
            estimated_height=estimated,
            measured_height=height,
            fallback=fallback,
        )
        return item, record, warning

    async def _wait_for_settle(self) -> None:
        for _ in range(self.config.settle_cycles):
            await asyncio.sleep(0)


def estimate_all(
    elements: Sequence[Element],
    estimator: Optional[HeightEstimator] = None,
    heights: Optional[Sequence[Optional[float]]] = None,
) -> MeasurementBatch:
    """
    Build a MeasurementBatch without rendering.

    ``heights`` supplies already-known measurements (None entries fall
    back to the estimate and are flagged in the log).
    """
    estimator = estimator or HeightEstimator()
    if heights is not None and len(heights) != len(elements):
        raise ValueError(
            f"heights has {len(heights)} entries for {len(elements)} elements"
        )

    measured: List[MeasuredElement] = []
    log: List[MeasurementRecord] = []
    for index, element in enumerate(elements):
        estimated = estimator.estimate_element(element)
        known = heights[index] if heights is not None else None
        height = float(known) if known is not None else estimated
        measured.append(MeasuredElement(element=element, measured_height=height))
        log.append(MeasurementRecord(
            index=index,
            element_type=element.type,
            estimated_height=estimated,
            measured_height=height,
            fallback=known is None,
        ))
    return MeasurementBatch(measured=tuple(measured), log=tuple(log))
