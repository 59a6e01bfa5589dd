"""
Module: roles

Purpose:
    Provides the Role enum and the classifier mapping an element type tag
    onto a structural role. Roles drive the move-back heuristics of the
    paginator and are never stored on elements.

Key Functions:
    - classify(element_type): Map a type tag to a Role (total, pure)
    - is_content_like(role): True for CONTENT and OTHER
    - is_structural(role): True for TITLE, DIVIDER and INSTRUCTIONS

Dependencies:
    - enum (std)

Used By:
    - layout.rules: Move-back predicates
    - layout.paginator: Unknown-type warnings
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Structural role of a worksheet element."""
    TITLE = "title"
    DIVIDER = "divider"
    INSTRUCTIONS = "instructions"
    CONTENT = "content"        # Body text, tips, warnings, lists, images
    EXERCISE = "exercise"      # Fill-blank, multiple-choice, tables, ...
    OTHER = "other"            # Unclassified, grouped like CONTENT

    def __str__(self) -> str:
        return self.value


TITLE_TYPES = frozenset({"title-block"})
DIVIDER_TYPES = frozenset({"divider"})
INSTRUCTION_TYPES = frozenset({"instructions-box"})
CONTENT_TYPES = frozenset({
    "body-text",
    "paragraph-block",
    "text-block",
    "tip-box",
    "warning-box",
    "bullet-list",
    "numbered-list",
    "image-placeholder",
    "image-block",
    "image-with-caption",
})
EXERCISE_TYPES = frozenset({
    "fill-blank",
    "multiple-choice",
    "true-false",
    "short-answer",
    "match-pairs",
    "word-bank",
    "table",
})

_ROLE_BY_TYPE: dict[str, Role] = {}
for _types, _role in (
    (TITLE_TYPES, Role.TITLE),
    (DIVIDER_TYPES, Role.DIVIDER),
    (INSTRUCTION_TYPES, Role.INSTRUCTIONS),
    (CONTENT_TYPES, Role.CONTENT),
    (EXERCISE_TYPES, Role.EXERCISE),
):
    for _type in _types:
        _ROLE_BY_TYPE[_type] = _role

STRUCTURAL_ROLES = frozenset({Role.TITLE, Role.DIVIDER, Role.INSTRUCTIONS})


def classify(element_type: Optional[str]) -> Role:
    """
    Map an element type tag to its structural role.

    Unknown, empty or missing types map to Role.OTHER.

    Example:
        >>> classify("title-block")
        <Role.TITLE: 'title'>
        >>> classify("hologram")
        <Role.OTHER: 'other'>
    """
    if not element_type:
        return Role.OTHER
    return _ROLE_BY_TYPE.get(element_type, Role.OTHER)


def is_known_type(element_type: Optional[str]) -> bool:
    """Check whether the type tag has an explicit role."""
    return bool(element_type) and element_type in _ROLE_BY_TYPE


def is_content_like(role: Role) -> bool:
    """CONTENT, or OTHER which is grouped like content."""
    return role in (Role.CONTENT, Role.OTHER)


def is_structural(role: Role) -> bool:
    return role in STRUCTURAL_ROLES
