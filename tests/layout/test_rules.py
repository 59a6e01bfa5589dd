"""
Tests for layout.rules

Test Coverage:
- Each move-back predicate in isolation
- decide_move(): priority, longest run, no match
"""

from worksheet_toolkit.core.models import Role
from worksheet_toolkit.layout.rules import (
    MOVE_RULES,
    MoveRule,
    decide_move,
    instructions_with_exercise,
    last_index_of,
    lookahead_title_group,
    orphan_divider,
    orphan_divider_title,
    orphan_title,
    structural_tail_group,
    title_with_instructions,
    trailing_structural_run,
)

T, D, I, C, E, O = (
    Role.TITLE, Role.DIVIDER, Role.INSTRUCTIONS, Role.CONTENT, Role.EXERCISE, Role.OTHER,
)


class TestPredicates:
    """Tests for individual rule predicates."""

    def test_orphan_title(self):
        assert orphan_title([C, T], C) == 1
        assert orphan_title([C, T], O) == 1
        assert orphan_title([C, T], E) == 0
        assert orphan_title([T, C], C) == 0

    def test_orphan_divider_title(self):
        assert orphan_divider_title([C, D, T], C) == 2
        assert orphan_divider_title([T], C) == 0
        assert orphan_divider_title([D, T], T) == 0

    def test_orphan_divider(self):
        assert orphan_divider([C, D], C) == 1
        assert orphan_divider([C, D], T) == 1
        assert orphan_divider([C, D], O) == 1
        assert orphan_divider([C, D], E) == 0
        assert orphan_divider([D, C], C) == 0

    def test_instructions_with_exercise(self):
        assert instructions_with_exercise([C, I], E) == 1
        assert instructions_with_exercise([C, I], C) == 0

    def test_title_with_instructions(self):
        assert title_with_instructions([C, T], I) == 1
        assert title_with_instructions([C, T], E) == 0
        assert title_with_instructions([T, C], I) == 0

    def test_trailing_structural_run_counts_structural_suffix(self):
        assert trailing_structural_run([C, D, T, I], E) == 3
        assert trailing_structural_run([T, D], D) == 2
        assert trailing_structural_run([T, C], T) == 0
        assert trailing_structural_run([], C) == 0

    def test_lookahead_title_group_counts_from_last_title(self):
        assert lookahead_title_group([C, T, D, I], E) == 3
        assert lookahead_title_group([T, C], E) == 0
        assert lookahead_title_group([C, D], E) == 0

    def test_lookahead_title_group_when_title_last_then_matches(self):
        assert lookahead_title_group([C, T], E) == 1

    def test_lookahead_title_group_when_next_structural_then_no_match(self):
        assert lookahead_title_group([C, T], T) == 0

    def test_structural_tail_group_window(self):
        assert structural_tail_group([C, D, T, I], E) == 3
        assert structural_tail_group([C, D, I], E) == 0
        assert structural_tail_group([T, I], C) == 0


class TestDecideMove:
    """Tests for decide_move()."""

    def test_decide_when_empty_tail_then_none(self):
        assert decide_move([], C) is None

    def test_decide_when_no_rule_matches_then_none(self):
        assert decide_move([C], E) is None

    def test_decide_when_several_match_then_first_names_longest_run(self):
        decision = decide_move([C, D, T], C)

        assert decision.rule == "orphan_title"
        assert decision.count == 2
        assert decision.matched[:2] == ("orphan_title", "orphan_divider_title")

    def test_decide_when_instructions_before_exercise(self):
        decision = decide_move([C, T, I], E)

        assert decision.rule == "instructions_with_exercise"
        assert decision.count == 2

    def test_decide_when_title_before_instructions_then_title_moves(self):
        decision = decide_move([C, T], I)

        assert decision.rule == "title_with_instructions"
        assert decision.count == 1

    def test_decide_when_divider_before_title_then_divider_moves(self):
        decision = decide_move([C, D], T)

        assert decision.rule == "orphan_divider"
        assert decision.count == 1

    def test_decide_with_custom_rules(self):
        always_one = MoveRule("always", lambda tail, next_role: 1)

        decision = decide_move([C, C], C, rules=(always_one,))

        assert decision.rule == "always"
        assert decision.count == 1

    def test_decide_count_capped_by_tail_length(self):
        greedy = MoveRule("greedy", lambda tail, next_role: 10)

        assert decide_move([T], C, rules=(greedy,)).count == 1

    def test_rules_are_in_priority_order(self):
        assert [r.name for r in MOVE_RULES] == [
            "orphan_title",
            "orphan_divider_title",
            "orphan_divider",
            "instructions_with_exercise",
            "title_with_instructions",
            "lookahead_title_group",
            "structural_tail_group",
            "trailing_structural_run",
        ]


def test_last_index_of():
    assert last_index_of([T, C, T, C], T) == 2
    assert last_index_of([C], T) is None
