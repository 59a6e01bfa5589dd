"""
Module: layout.paginator

Purpose:
    Arrange measured elements onto pages using real heights.
    Elements are atomic: they are never split, only moved whole.

Key Functions:
    - paginate(): Greedy accumulation with move-back rules
    - paginate_fixed(): Fixed number of elements per page

Algorithm:
    1. Walk elements in order, adding each to the current page while
       ``height + measured + spacing <= available_height``
    2. On overflow, ask layout.rules whether a trailing run of the page
       (title, divider + title, instructions, ...) should move with the
       overflowing element
    3. If so, take the proposed run, or its longest suffix, that fits on
       a fresh page together with the element; close the page without it
       and start the next page with run + element
    4. Otherwise close the page and start the next one with the element
    5. An element taller than a page still gets its own page (warned)

Dependencies:
    - layout.config: LayoutConfig
    - layout.rules: decide_move, MOVE_RULES
    - layout.models: PageGroup, GroupingResult

Used By:
    - controller: WorksheetPaginator
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from worksheet_toolkit.core.models import MeasuredElement
from worksheet_toolkit.core.models.roles import is_known_type

from .config import LayoutConfig
from .models import GroupingResult, PageGroup
from .rules import MOVE_RULES, MoveRule, decide_move

logger = logging.getLogger(__name__)


def paginate(
    measured: Sequence[MeasuredElement],
    config: LayoutConfig,
    *,
    rules: Sequence[MoveRule] = MOVE_RULES,
) -> GroupingResult:
    """
    Group measured elements into pages.

    Args:
        measured: MeasuredElements in reading order
        config: Layout configuration (capacity and spacing)
        rules: Move-back rules in priority order

    Returns:
        GroupingResult; concatenating its groups reproduces ``measured``

    Example:
        >>> result = paginate(measured, LayoutConfig())
        >>> [g.size for g in result.groups]
        [5, 3]
    """
    if not measured:
        return GroupingResult(groups=(), warnings=[])

    available = config.available_height
    spacing = config.element_spacing
    groups: List[PageGroup] = []
    warnings: List[str] = _unknown_type_warnings(measured)

    current: List[MeasuredElement] = []
    current_height = 0.0

    for index, item in enumerate(measured):
        height = item.effective_height(spacing)

        if height > available:
            message = (
                f"Element {index} ({item.type or '<untyped>'}) overflows page: "
                f"{height:g}px needed, {available}px available"
            )
            logger.warning(message)
            warnings.append(message)

        if current_height + height <= available:
            current.append(item)
            current_height += height
            logger.debug(
                f"Element {index} ({item.type}) fits on page {len(groups) + 1}: "
                f"{current_height:g}/{available}px"
            )
            continue

        moved = _run_to_move(current, item, height, available, spacing, rules)

        if moved:
            remainder = current[:-len(moved)]
            if remainder:
                groups.append(_close_group(remainder, available, spacing))
            current = moved + [item]
            logger.debug(
                f"Moved {len(moved)} element(s) to page {len(groups) + 1} "
                f"with element {index} ({item.type})"
            )
        else:
            if current:
                groups.append(_close_group(current, available, spacing))
            current = [item]

        current_height = sum(m.effective_height(spacing) for m in current)

    # Add final page
    if current:
        groups.append(_close_group(current, available, spacing))

    logger.info(f"Paginated {len(measured)} elements onto {len(groups)} pages")

    return GroupingResult(groups=tuple(groups), warnings=warnings)


def paginate_fixed(
    measured: Sequence[MeasuredElement],
    per_page: int,
    config: Optional[LayoutConfig] = None,
) -> GroupingResult:
    """
    Put a fixed number of elements on every page, ignoring heights.

    Args:
        measured: MeasuredElements in reading order
        per_page: Elements per page (the last page may hold fewer)
        config: Used only to report height_used and oversize flags

    Raises:
        ValueError: If per_page is not positive
    """
    if per_page <= 0:
        raise ValueError(f"per_page must be positive: {per_page}")

    config = config or LayoutConfig()
    groups = [
        _close_group(list(measured[i:i + per_page]), config.available_height, config.element_spacing)
        for i in range(0, len(measured), per_page)
    ]
    warnings = [
        f"Page {n} overflows: {g.height_used:g}px used, {config.available_height}px available"
        for n, g in enumerate(groups, start=1)
        if g.height_used > config.available_height
    ]
    return GroupingResult(groups=tuple(groups), warnings=warnings)


def _run_to_move(
    current: List[MeasuredElement],
    item: MeasuredElement,
    height: float,
    available: float,
    spacing: float,
    rules: Sequence[MoveRule],
) -> List[MeasuredElement]:
    """Trailing run of ``current`` to carry to the next page, or []."""
    decision = decide_move([m.role for m in current], item.role, rules)
    if decision is None:
        return []

    for count in range(decision.count, 0, -1):
        run = current[-count:]
        run_height = sum(m.effective_height(spacing) for m in run)
        if run_height + height <= available:
            logger.debug(f"Rule {decision.rule} keeps {len(run)} element(s) with {item.type}")
            return run

    logger.debug(
        f"Rule {decision.rule} matched but no run fits with {item.type} "
        f"on a fresh page; breaking normally"
    )
    return []


def _close_group(
    members: List[MeasuredElement],
    available: float,
    spacing: float,
) -> PageGroup:
    height_used = sum(m.effective_height(spacing) for m in members)
    return PageGroup(
        members=tuple(members),
        height_used=height_used,
        oversized=height_used > available,
    )


def _unknown_type_warnings(measured: Sequence[MeasuredElement]) -> List[str]:
    """One warning per unknown type tag; they are laid out as content."""
    warnings: List[str] = []
    seen = set()
    for item in measured:
        if is_known_type(item.type) or item.type in seen:
            continue
        seen.add(item.type)
        message = f"Unknown element type {item.type or '<untyped>'!r}, treating as content"
        logger.warning(message)
        warnings.append(message)
    return warnings
