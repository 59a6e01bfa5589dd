"""
Module: layout.models

Purpose:
    Intermediate models produced by the paginator before pages are
    assembled. A PageGroup is an ordered run of measured elements that
    will become one Page.

Key Classes:
    - PageGroup: Elements grouped onto one page with their used height
    - GroupingResult: All groups plus warnings

Dependencies:
    - dataclasses (std)
    - core.models: MeasuredElement

Used By:
    - layout.paginator: Creates PageGroups
    - layout.assembler: Turns PageGroups into Pages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from worksheet_toolkit.core.models import Element, MeasuredElement


@dataclass(frozen=True)
class PageGroup:
    """
    Measured elements destined for a single page.

    Attributes:
        members: MeasuredElements in reading order
        height_used: Sum of effective heights (measured + spacing)
        oversized: True when height_used exceeds the page capacity

    Example:
        >>> group = PageGroup(members=(m1, m2), height_used=180)
        >>> group.size
        2
    """

    members: tuple[MeasuredElement, ...]
    height_used: float
    oversized: bool = False

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def elements(self) -> tuple[Element, ...]:
        """Plain elements with the measurement data dropped."""
        return tuple(m.element for m in self.members)


@dataclass(frozen=True)
class GroupingResult:
    """
    Paginator output with diagnostics.

    Attributes:
        groups: Tuple of PageGroups in page order
        warnings: Warning messages (oversized elements, unknown types)
    """

    groups: tuple[PageGroup, ...]
    warnings: list[str] = field(default_factory=list)

    @property
    def group_count(self) -> int:
        return len(self.groups)

    def iter_members(self) -> Iterator[MeasuredElement]:
        for group in self.groups:
            yield from group.members
