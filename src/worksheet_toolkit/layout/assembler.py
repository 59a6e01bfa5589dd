"""
Module: layout.assembler

Purpose:
    Wrap paginator groups into numbered Page records and build the final
    PaginationResult.

Key Functions:
    - assemble_pages(): PageGroups -> Pages (1-based, titled)
    - build_result(): Pages + measurement log + warnings -> PaginationResult

Dependencies:
    - core.models: Page, PaginationResult, MeasurementRecord, ContentMode
    - layout.models: PageGroup, GroupingResult

Used By:
    - controller: WorksheetPaginator
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from worksheet_toolkit.core.models import (
    ContentMode,
    MeasurementRecord,
    Page,
    PaginationResult,
)

from .models import GroupingResult, PageGroup


def page_title(page_number: int, title: Optional[str] = None) -> str:
    """Explicit run title, or "Page N"."""
    return title if title else f"Page {page_number}"


def assemble_pages(
    groups: Sequence[PageGroup],
    title: Optional[str] = None,
    page_type: ContentMode = ContentMode.PDF,
) -> tuple[Page, ...]:
    """
    Create one Page per group, numbered from 1.

    Args:
        groups: Paginator groups in order
        title: Title for every page; "Page N" when omitted
        page_type: Content mode stamped on each page

    Returns:
        Tuple of Pages
    """
    pages: List[Page] = []
    for number, group in enumerate(groups, start=1):
        pages.append(Page(
            page_number=number,
            title=page_title(number, title),
            elements=group.elements,
            page_type=page_type,
            height_used=group.height_used,
        ))
    return tuple(pages)


def build_result(
    grouping: GroupingResult,
    measurement_log: Sequence[MeasurementRecord] = (),
    *,
    title: Optional[str] = None,
    page_type: ContentMode = ContentMode.PDF,
    warnings: Sequence[str] = (),
) -> PaginationResult:
    """
    Assemble the final PaginationResult.

    The measurement log is forwarded unchanged; ``warnings`` (e.g. from the
    measurement pass) are placed before the paginator's own warnings.
    """
    return PaginationResult(
        pages=assemble_pages(grouping.groups, title, page_type),
        measurement_log=tuple(measurement_log),
        warnings=[*warnings, *grouping.warnings],
    )
