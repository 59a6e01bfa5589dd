"""
Module: controller

Purpose:
    Orchestrate a complete pagination run.
    Measure → Paginate → Assemble

Key Functions:
    - paginate_file(): Load a JSON element list and paginate it

Key Classes:
    - WorksheetPaginator: Holds the capacity model, age range and content
      mode; runs measurement and pagination
    - PaginationError: Exception for pipeline failures

Dependencies:
    - measurement: MeasurementProvider, estimate_all
    - layout: paginate, paginate_fixed, build_result
    - core.utils.serialization: load_elements

Used By:
    - cli: worksheet-paginate
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from worksheet_toolkit.common.thresholds import known_age_ranges
from worksheet_toolkit.core.models import (
    ContentMode,
    Element,
    MeasuredElement,
    MeasurementRecord,
    PaginationResult,
)
from worksheet_toolkit.core.schemas import ValidationError
from worksheet_toolkit.core.utils import load_elements

from .layout import (
    MOVE_RULES,
    HeightEstimator,
    LayoutConfig,
    MoveRule,
    build_result,
    paginate,
    paginate_fixed,
)
from .measurement import (
    MeasurementBatch,
    MeasurementConfig,
    MeasurementProvider,
    RenderCallback,
    estimate_all,
)

logger = logging.getLogger(__name__)


class PaginationError(Exception):
    """Error during the pagination pipeline."""
    pass


class WorksheetPaginator:
    """
    Measurement-based worksheet paginator.

    The page configuration, age range and content mode are set before a
    run; each run measures (or takes known heights), paginates and
    assembles pages.

    Example:
        >>> paginator = WorksheetPaginator(LayoutConfig.from_preset("A4"))
        >>> paginator.set_age_range("6-7")
        >>> result = await paginator.paginate_with_measurements(elements, render_into)
        >>> result.elements_per_page
        [6, 4]
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        *,
        measurement: Optional[MeasurementConfig] = None,
        rules: Sequence[MoveRule] = MOVE_RULES,
    ) -> None:
        self._config = config or LayoutConfig()
        self._measurement = measurement or MeasurementConfig()
        self._rules = tuple(rules)
        self._age_range: Optional[str] = None
        self._content_mode = ContentMode.PDF

    # ─────────────────────────────────────────────────────────────────────
    # Configuration
    # ─────────────────────────────────────────────────────────────────────

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def age_range(self) -> Optional[str]:
        return self._age_range

    @property
    def content_mode(self) -> ContentMode:
        return self._content_mode

    def set_page_config(self, config: LayoutConfig) -> None:
        self._config = config

    def set_age_range(self, age_range: Optional[str]) -> None:
        """Set the audience age range used to scale height estimates."""
        if age_range and age_range not in known_age_ranges():
            logger.warning(f"Unknown age range {age_range!r}, estimates will not be scaled")
        self._age_range = age_range or None

    def set_content_mode(self, mode: Union[ContentMode, str]) -> None:
        """
        Set the page type stamped on assembled pages.

        Raises:
            ValueError: If mode is not "pdf" or "interactive"
        """
        self._content_mode = ContentMode(mode)

    @property
    def estimator(self) -> HeightEstimator:
        return HeightEstimator(age_range=self._age_range)

    # ─────────────────────────────────────────────────────────────────────
    # Runs
    # ─────────────────────────────────────────────────────────────────────

    async def paginate_with_measurements(
        self,
        elements: Sequence[Element],
        render_into: RenderCallback,
        page_title: Optional[str] = None,
    ) -> PaginationResult:
        """
        Measure every element with ``render_into``, then paginate.

        Args:
            elements: Elements in reading order
            render_into: Host callback drawing one element into a region
            page_title: Title for every page ("Page N" when omitted)

        Returns:
            PaginationResult with the measurement log
        """
        start_time = time.perf_counter()
        provider = MeasurementProvider(self._config, self.estimator, self._measurement)
        batch = await provider.measure_all(elements, render_into)
        result = self._finish(batch, page_title)
        logger.info(
            f"Paginated {len(elements)} elements onto {result.total_pages} pages "
            f"in {time.perf_counter() - start_time:.2f}s"
        )
        return result

    def paginate_measured(
        self,
        measured: Sequence[MeasuredElement],
        page_title: Optional[str] = None,
        measurement_log: Optional[Sequence[MeasurementRecord]] = None,
    ) -> PaginationResult:
        """
        Paginate elements whose heights are already measured.

        When no log is supplied, one is built from the estimator.
        """
        if measurement_log is None:
            estimator = self.estimator
            measurement_log = [
                MeasurementRecord(
                    index=index,
                    element_type=item.type,
                    estimated_height=estimator.estimate_element(item.element),
                    measured_height=item.measured_height,
                )
                for index, item in enumerate(measured)
            ]
        batch = MeasurementBatch(measured=tuple(measured), log=tuple(measurement_log))
        return self._finish(batch, page_title)

    def paginate_heights(
        self,
        elements: Sequence[Element],
        heights: Optional[Sequence[Optional[float]]] = None,
        page_title: Optional[str] = None,
    ) -> PaginationResult:
        """Paginate with known heights; missing heights use estimates."""
        batch = estimate_all(elements, self.estimator, heights)
        fallbacks = batch.fallback_count
        if fallbacks:
            logger.warning(f"{fallbacks} of {len(elements)} elements have no measured height, using estimates")
        return self._finish(batch, page_title)

    def paginate_fixed(
        self,
        elements: Sequence[Element],
        per_page: int,
        page_title: Optional[str] = None,
        heights: Optional[Sequence[Optional[float]]] = None,
    ) -> PaginationResult:
        """Fixed ``per_page`` elements per page, heights only reported."""
        batch = estimate_all(elements, self.estimator, heights)
        grouping = paginate_fixed(batch.measured, per_page, self._config)
        return build_result(
            grouping,
            batch.log,
            title=page_title,
            page_type=self._content_mode,
        )

    def _finish(self, batch: MeasurementBatch, page_title: Optional[str]) -> PaginationResult:
        grouping = paginate(batch.measured, self._config, rules=self._rules)
        return build_result(
            grouping,
            batch.log,
            title=page_title,
            page_type=self._content_mode,
            warnings=batch.warnings,
        )


def paginate_file(
    path: Path,
    paginator: Optional[WorksheetPaginator] = None,
    *,
    render_into: Optional[RenderCallback] = None,
    page_title: Optional[str] = None,
    strict: bool = False,
    per_page: Optional[int] = None,
) -> PaginationResult:
    """
    Load a JSON element list and paginate it.

    With ``render_into`` every element is measured; otherwise the
    ``measuredHeight`` values in the file are used (estimates fill gaps).
    ``per_page`` switches to the fixed elements-per-page strategy.

    Raises:
        PaginationError: If the file cannot be read or fails validation
    """
    paginator = paginator or WorksheetPaginator()

    try:
        payload = load_elements(path, strict=strict)
    except (ValidationError, OSError) as e:
        raise PaginationError(f"Failed to load elements: {e}") from e

    logger.info(f"Loaded {len(payload.elements)} elements from {path}")

    if per_page is not None:
        return paginator.paginate_fixed(
            payload.elements, per_page, page_title, payload.heights
        )
    if render_into is not None:
        return asyncio.run(
            paginator.paginate_with_measurements(payload.elements, render_into, page_title)
        )
    return paginator.paginate_heights(payload.elements, payload.heights, page_title)
