"""
Module: pages

Purpose:
    Output models of a pagination run: Page, MeasurementRecord and
    PaginationResult. All are frozen; PaginationResult.to_dict() emits the
    camelCase contract consumed by the presentation layer.

Key Classes:
    - ContentMode: pdf (fixed pages) or interactive (scrollable)
    - Page: One page of elements
    - MeasurementRecord: Estimated vs measured height for one element
    - PaginationResult: Pages plus diagnostics

Dependencies:
    - dataclasses (std)
    - .elements.Element

Used By:
    - layout.assembler: Creates Pages and PaginationResults
    - measurement.provider: Creates MeasurementRecords
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from .elements import Element


class ContentMode(str, Enum):
    """Page type stamped on assembled pages."""
    PDF = "pdf"                  # Fixed-size printable page
    INTERACTIVE = "interactive"  # Scrollable on-screen page

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Page:
    """
    A single assembled page (immutable).

    Attributes:
        page_number: 1-based page number
        title: Explicit run title or "Page N"
        elements: Elements in reading order
        page_type: Content mode the page was assembled for
        height_used: Sum of effective heights placed on the page

    Example:
        >>> page = Page(1, "Page 1", (Element("divider"),))
        >>> page.element_count
        1
    """

    page_number: int
    title: str
    elements: tuple[Element, ...]
    page_type: ContentMode = ContentMode.PDF
    height_used: float = 0.0

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError(f"page_number must be positive: {self.page_number}")

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return len(self.elements) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "pageNumber": self.page_number,
            "title": self.title,
            "elements": [el.to_dict() for el in self.elements],
            "pageType": self.page_type.value,
            "heightUsed": self.height_used,
        }


@dataclass(frozen=True)
class MeasurementRecord:
    """
    Calibration record comparing the estimate with the real height.

    Attributes:
        index: Position of the element in the input list
        element_type: Type tag of the element
        estimated_height: Value from the height estimator
        measured_height: Height used for layout
        fallback: True when measurement failed and the estimate was used
    """

    index: int
    element_type: str
    estimated_height: float
    measured_height: float
    fallback: bool = False

    @property
    def difference(self) -> float:
        """measured - estimated (positive when the estimate was too small)."""
        return self.measured_height - self.estimated_height

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "elementType": self.element_type,
            "estimatedHeight": self.estimated_height,
            "measuredHeight": self.measured_height,
            "difference": self.difference,
            "fallback": self.fallback,
        }


@dataclass(frozen=True)
class PaginationResult:
    """
    Final pagination output with diagnostics.

    Attributes:
        pages: Tuple of Pages in order
        measurement_log: One MeasurementRecord per input element
        warnings: Human-readable warnings (oversized elements, fallbacks)

    Example:
        >>> result = PaginationResult(pages=())
        >>> result.total_pages
        0
    """

    pages: tuple[Page, ...]
    measurement_log: tuple[MeasurementRecord, ...] = ()
    warnings: list[str] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def elements_per_page(self) -> list[int]:
        return [page.element_count for page in self.pages]

    @property
    def total_elements(self) -> int:
        return sum(self.elements_per_page)

    def iter_elements(self) -> Iterator[Element]:
        """Iterate over every element across all pages in reading order."""
        for page in self.pages:
            yield from page.elements

    def page_of(self, index: int) -> Optional[Page]:
        """Return the page holding the element at input position ``index``."""
        if index < 0:
            return None
        seen = 0
        for page in self.pages:
            seen += page.element_count
            if index < seen:
                return page
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the plain consumer contract."""
        return {
            "pages": [page.to_dict() for page in self.pages],
            "totalPages": self.total_pages,
            "elementsPerPage": self.elements_per_page,
            "measurementLog": [record.to_dict() for record in self.measurement_log],
            "warnings": list(self.warnings),
        }
