"""Tests for ParentEngine - composite status of parent habits."""

from __future__ import annotations

import pytest

from habitarcade import const
from habitarcade.engines.parent_engine import ParentEngine
from habitarcade.engines.scoring_engine import ScoringEngine
from tests.factories import TODAY, child, make_habit, make_parent

C = const.HABIT_STATUS_COMPLETE
X = const.HABIT_STATUS_EXTRA
M = const.HABIT_STATUS_MISSED
P = const.HABIT_STATUS_PARTIAL
E = const.HABIT_STATUS_EMPTY
NA = const.HABIT_STATUS_NA
EX = const.HABIT_STATUS_EXEMPT


class TestAggregateStatuses:
    """Tests for aggregate_statuses() precedence."""

    @pytest.mark.parametrize(
        ("statuses", "expected"),
        [
            ([], E),
            ([C, M], C),
            ([M, X], C),
            ([C, NA], C),
            ([NA, EX], NA),
            ([NA], NA),
            ([P, M], P),
            ([P, NA], P),
            ([E, E], E),
            ([E, NA], M),
            ([E, EX, E], M),
            ([M, E], M),
            ([M, EX], M),
        ],
    )
    def test_precedence(self, statuses: list[str], expected: str) -> None:
        """Success wins, then all-excluded, partial, empty, missed."""
        assert ParentEngine.aggregate_statuses(statuses) == expected


class TestComputedStatus:
    """Tests for computed_status() and friends."""

    def test_or_semantics(self) -> None:
        """Any one child complete satisfies the parent."""
        parent = make_parent(
            children=[
                child("yoga", {"2024-01-04": M}),
                child("walk", {"2024-01-04": C}),
                child("gym"),
            ]
        )
        assert ParentEngine.computed_status(parent, "2024-01-04") == C
        assert ParentEngine.satisfying_children(parent, "2024-01-04") == ["walk"]

    def test_no_child_entries(self) -> None:
        """No child logged anything: empty."""
        parent = make_parent(children=[child("yoga"), child("walk")])
        assert ParentEngine.computed_status(parent, "2024-01-04") == E

    def test_status_map(self) -> None:
        """Map has one status per requested date."""
        parent = make_parent(
            children=[child("yoga", {"2024-01-01": C, "2024-01-02": M})]
        )
        assert ParentEngine.computed_status_map(
            parent, ["2024-01-01", "2024-01-02", "2024-01-03"]
        ) == {"2024-01-01": C, "2024-01-02": M, "2024-01-03": E}

    def test_is_parent(self) -> None:
        """Only habits with children are parents."""
        parent = make_parent(children=[child("yoga")])
        assert ParentEngine.is_parent(parent) is True
        assert ParentEngine.is_parent(make_habit()) is False
        assert [c["id"] for c in ParentEngine.get_children(parent)] == ["yoga"]
        assert ParentEngine.get_children(make_habit()) == []

    def test_unlogged_child_with_excluded_sibling_is_missed(self) -> None:
        """Empty only when no child has any entry; na siblings still count."""
        parent = make_parent(
            children=[child("yoga"), child("walk", {"2024-01-05": NA})]
        )
        assert ParentEngine.computed_status(parent, TODAY) == M

        result = ScoringEngine.score_habit(parent, [TODAY], TODAY)
        assert result.total_count == 1
        assert result.excluded_count == 0
        assert result.percentage == 0


class TestDeletedChildren:
    """Deleted children never contribute to the parent."""

    def test_deleted_child_ignored(self) -> None:
        """A deleted child's completion does not satisfy the parent."""
        parent = make_parent(
            children=[
                child("live"),
                {**child("gone", {"2024-01-04": C}), "is_deleted": True},
            ]
        )
        assert [c["id"] for c in ParentEngine.get_children(parent)] == ["live"]
        assert ParentEngine.computed_status(parent, "2024-01-04") == E
        assert ParentEngine.satisfying_children(parent, "2024-01-04") == []

    def test_all_children_deleted(self) -> None:
        """A parent whose children are all deleted is no longer a parent."""
        parent = make_parent(
            children=[{**child("gone", {"2024-01-04": C}), "is_deleted": True}]
        )
        assert ParentEngine.is_parent(parent) is False
        assert ParentEngine.computed_status(parent, "2024-01-04") == E
