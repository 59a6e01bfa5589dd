"""
Module: layout.config

Purpose:
    Capacity model for the page layout engine.
    Defines page dimensions, padding and inter-element spacing.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Key Constants:
    - PAGE_PRESETS: Named page sizes (A4, LETTER, SLIDE) at 96 DPI

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Page capacity
    - measurement.provider: Surface width
    - controller: WorksheetPaginator
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict


# A4 at 96 DPI
DEFAULT_PAGE_WIDTH_PX = 794
DEFAULT_PAGE_HEIGHT_PX = 1123
DEFAULT_PADDING_PX = 40
DEFAULT_ELEMENT_SPACING_PX = 20


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        page_width: Page width in pixels
        page_height: Page height in pixels
        padding_top: Top padding in pixels
        padding_right: Right padding in pixels
        padding_bottom: Bottom padding in pixels
        padding_left: Left padding in pixels
        element_spacing: Margin added to every element's height (px)

    Example:
        >>> config = LayoutConfig()
        >>> config.available_height
        1043  # page_height - padding
    """

    # Page dimensions
    page_width: int = DEFAULT_PAGE_WIDTH_PX
    page_height: int = DEFAULT_PAGE_HEIGHT_PX

    # Padding
    padding_top: int = DEFAULT_PADDING_PX
    padding_right: int = DEFAULT_PADDING_PX
    padding_bottom: int = DEFAULT_PADDING_PX
    padding_left: int = DEFAULT_PADDING_PX

    # Spacing
    element_spacing: float = DEFAULT_ELEMENT_SPACING_PX

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if min(self.padding_top, self.padding_right, self.padding_bottom, self.padding_left) < 0:
            raise ValueError("Padding must be non-negative")
        if self.element_spacing < 0:
            raise ValueError(f"element_spacing must be non-negative: {self.element_spacing}")
        if self.available_width <= 0:
            raise ValueError("Padding exceeds page width")
        if self.available_height <= 0:
            raise ValueError("Padding exceeds page height")

    @property
    def available_width(self) -> int:
        """Width available for content (excluding padding)."""
        return self.page_width - self.padding_left - self.padding_right

    @property
    def available_height(self) -> int:
        """Height available for content (excluding padding)."""
        return self.page_height - self.padding_top - self.padding_bottom

    @classmethod
    def from_preset(cls, name: str, **overrides) -> LayoutConfig:
        """
        Build a config from a named preset.

        Raises:
            ValueError: If the preset is unknown
        """
        key = name.upper()
        if key not in PAGE_PRESETS:
            raise ValueError(
                f"Unknown page preset {name!r} (expected one of {sorted(PAGE_PRESETS)})"
            )
        return replace(PAGE_PRESETS[key], **overrides)

    def with_spacing(self, element_spacing: float) -> LayoutConfig:
        return replace(self, element_spacing=element_spacing)


PAGE_PRESETS: Dict[str, LayoutConfig] = {
    "A4": LayoutConfig(),
    "LETTER": LayoutConfig(page_width=816, page_height=1056),
    "SLIDE": LayoutConfig(
        page_width=1920,
        page_height=1080,
        padding_top=60,
        padding_right=60,
        padding_bottom=60,
        padding_left=60,
    ),
}
