"""
Module: layout.rules

Purpose:
    Move-back heuristics for the paginator. When an element overflows the
    current page, these rules decide whether a trailing run of the page
    (a title, a divider + title, instructions, ...) should travel to the
    next page together with it so that structural elements are never left
    stranded at the bottom of a page.

Key Classes:
    - MoveRule: Named predicate over (tail roles, next role)
    - MoveDecision: Which rule fired and how many trailing elements move

Key Functions:
    - decide_move(): Evaluate MOVE_RULES against a page tail

Design:
    Each rule is a small pure function returning the number of trailing
    elements to move (0 = no match). Rules are tried in priority order; the
    first match owns the decision, and the run moved is the longest run
    identified by any matching rule (so "divider + title" wins over
    "title" alone). Every rule proposes a run of structural elements; when
    the whole run would not fit on a fresh page, the paginator tries its
    shorter suffixes.

Dependencies:
    - core.models.roles: Role, is_content_like, is_structural

Used By:
    - layout.paginator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from worksheet_toolkit.core.models.roles import Role, is_content_like, is_structural

# (tail roles of the current page, role of the overflowing element) -> run length
RulePredicate = Callable[[Sequence[Role], Role], int]

STRUCTURAL_TAIL_WINDOW = 3


@dataclass(frozen=True)
class MoveRule:
    """A single move-back rule."""
    name: str
    predicate: RulePredicate
    description: str = ""


@dataclass(frozen=True)
class MoveDecision:
    """
    Result of evaluating the move-back rules.

    Attributes:
        rule: Name of the highest-priority rule that matched
        count: Number of trailing elements to carry to the next page
        matched: Names of every rule that matched, in priority order
    """
    rule: str
    count: int
    matched: Tuple[str, ...] = ()


def _is_body(role: Role) -> bool:
    """Content or exercise - anything a heading can introduce."""
    return is_content_like(role) or role == Role.EXERCISE


def orphan_title(tail: Sequence[Role], next_role: Role) -> int:
    if tail and tail[-1] == Role.TITLE and is_content_like(next_role):
        return 1
    return 0


def orphan_divider_title(tail: Sequence[Role], next_role: Role) -> int:
    if (
        len(tail) >= 2
        and tail[-2] == Role.DIVIDER
        and tail[-1] == Role.TITLE
        and is_content_like(next_role)
    ):
        return 2
    return 0


def orphan_divider(tail: Sequence[Role], next_role: Role) -> int:
    if tail and tail[-1] == Role.DIVIDER and (next_role == Role.TITLE or is_content_like(next_role)):
        return 1
    return 0


def instructions_with_exercise(tail: Sequence[Role], next_role: Role) -> int:
    if tail and tail[-1] == Role.INSTRUCTIONS and next_role == Role.EXERCISE:
        return 1
    return 0


def title_with_instructions(tail: Sequence[Role], next_role: Role) -> int:
    """A title introduces the instructions that follow it."""
    if tail and tail[-1] == Role.TITLE and next_role == Role.INSTRUCTIONS:
        return 1
    return 0


def lookahead_title_group(tail: Sequence[Role], next_role: Role) -> int:
    """Last title on the page has only dividers/instructions after it."""
    if not _is_body(next_role):
        return 0
    title_index = last_index_of(tail, Role.TITLE)
    if title_index is None:
        return 0
    after = tail[title_index + 1:]
    if all(role in (Role.DIVIDER, Role.INSTRUCTIONS) for role in after):
        return len(tail) - title_index
    return 0


def structural_tail_group(tail: Sequence[Role], next_role: Role) -> int:
    if next_role != Role.EXERCISE or not tail:
        return 0
    window = tail[-STRUCTURAL_TAIL_WINDOW:]
    structural = (Role.TITLE, Role.DIVIDER, Role.INSTRUCTIONS)
    if Role.TITLE in window and all(role in structural for role in window):
        return len(window)
    return 0


def trailing_structural_run(tail: Sequence[Role], next_role: Role) -> int:
    """Last resort: headings, dividers and instructions never end a page."""
    count = 0
    for role in reversed(tail):
        if not is_structural(role):
            break
        count += 1
    return count


MOVE_RULES: Tuple[MoveRule, ...] = (
    MoveRule("orphan_title", orphan_title,
             "Title at page end, content follows"),
    MoveRule("orphan_divider_title", orphan_divider_title,
             "Divider + title at page end, content follows"),
    MoveRule("orphan_divider", orphan_divider,
             "Divider at page end, title or content follows"),
    MoveRule("instructions_with_exercise", instructions_with_exercise,
             "Instructions must stay with their exercise"),
    MoveRule("title_with_instructions", title_with_instructions,
             "Title at page end, its instructions follow"),
    MoveRule("lookahead_title_group", lookahead_title_group,
             "Title followed only by structural elements"),
    MoveRule("structural_tail_group", structural_tail_group,
             "Title group without content, exercise follows"),
    MoveRule("trailing_structural_run", trailing_structural_run,
             "Structural elements at page end move with whatever follows"),
)


def decide_move(
    tail: Sequence[Role],
    next_role: Role,
    rules: Sequence[MoveRule] = MOVE_RULES,
) -> Optional[MoveDecision]:
    """
    Decide whether a trailing run should move with the overflowing element.

    Args:
        tail: Roles of the elements on the current page, in order
        next_role: Role of the element that does not fit
        rules: Rules in priority order

    Returns:
        MoveDecision, or None when no rule matches

    Example:
        >>> decide_move([Role.CONTENT, Role.DIVIDER, Role.TITLE], Role.CONTENT).count
        2
        >>> decide_move([Role.CONTENT], Role.EXERCISE) is None
        True
    """
    if not tail:
        return None

    matched = []
    longest = 0
    for rule in rules:
        count = rule.predicate(tail, next_role)
        if count > 0:
            matched.append(rule.name)
            longest = max(longest, count)

    if not matched:
        return None
    return MoveDecision(rule=matched[0], count=min(longest, len(tail)), matched=tuple(matched))


def last_index_of(roles: Sequence[Role], target: Role) -> Optional[int]:
    for i in range(len(roles) - 1, -1, -1):
        if roles[i] == target:
            return i
    return None
