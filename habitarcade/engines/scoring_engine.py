"""Scoring Engine - Completion percentages over dates and habit sets.

Scoring rules for every (habit, date) pair:
- na / exempt are excluded from the denominator
- An empty cell on the effective today is excluded (not logged yet)
- Dates after the effective today are excluded
- complete / extra score 1 point, partial scores 0.5, anything else 0
- percentage = points / counted cells × 100, rounded half up (0 if nothing counted)

Category header dials score one date across a set of habits. Low-frequency
habits that are on track and empty go to a separate "not expected" bucket
and are reported as a second percentage; every other non-excluded habit is
expected, including habits not yet logged today.

ARCHITECTURE: Stateless engine, all methods are static. Results are returned
as dataclasses; nothing is cached here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import (
    dt_as_date,
    dt_date_range,
    dt_iso,
    dt_month_start,
    dt_parse_date,
    dt_year_start,
)
from ..utils.math_utils import calculate_percentage
from .on_track_engine import OnTrackEngine
from .parent_engine import ParentEngine
from .status_engine import StatusEngine

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from ..type_defs import HabitData, ISODate


# =============================================================================
# RESULT DATA STRUCTURES
# =============================================================================


def total_points(completed: int, partial: int) -> float:
    """Return the score points for complete/extra and partial cell counts."""
    return (
        completed * const.STATUS_POINTS[const.HABIT_STATUS_COMPLETE]
        + partial * const.STATUS_POINTS[const.HABIT_STATUS_PARTIAL]
    )


@dataclass(frozen=True)
class CompletionScore:
    """Aggregate completion score.

    Attributes:
        percentage: Whole-number percentage (0-100)
        completed_count: Cells scored complete or extra
        partial_count: Cells scored partial
        total_count: Counted cells (the denominator)
        excluded_count: Cells skipped (na, exempt, empty today, future)
    """

    percentage: int = 0
    completed_count: int = 0
    partial_count: int = 0
    total_count: int = 0
    excluded_count: int = 0

    @property
    def points(self) -> float:
        """Return the points behind the percentage."""
        return total_points(self.completed_count, self.partial_count)


@dataclass(frozen=True)
class DialScore:
    """Category dial score for a single date.

    Attributes:
        date: ISO date of the column
        percentage: Score over expected habits only
        not_expected_percentage: Share of counted habits not expected yet
        completed_count: Expected habits complete or extra
        partial_count: Expected habits partial
        expected_count: Habits expected on this date
        not_expected_count: Low-frequency habits on track and empty
        is_today: Whether the column is the effective today
    """

    date: ISODate
    percentage: int = 0
    not_expected_percentage: int = 0
    completed_count: int = 0
    partial_count: int = 0
    expected_count: int = 0
    not_expected_count: int = 0
    is_today: bool = False


# =============================================================================
# SCORING ENGINE
# =============================================================================


class ScoringEngine:
    """Pure logic engine for completion scoring."""

    @staticmethod
    def score(
        habits: Iterable[HabitData],
        dates: Iterable[date | str],
        effective_today: date | str,
    ) -> CompletionScore:
        """Score a set of habits over a list of dates.

        Args:
            habits: Habits (regular or parent) to score
            dates: Date columns to score
            effective_today: Effective today (day boundary applied)

        Returns:
            CompletionScore with counts and the rounded percentage.
        """
        today = dt_as_date(effective_today)
        days = [dt_as_date(day) for day in dates]

        completed = 0
        partial = 0
        total = 0
        excluded = 0

        for habit in habits:
            for day in days:
                if day > today:
                    excluded += 1
                    continue

                status = StatusEngine.raw_status(habit, day)
                if status in const.EXCLUDED_STATUSES:
                    excluded += 1
                    continue
                if day == today and status == const.HABIT_STATUS_EMPTY:
                    excluded += 1
                    continue

                total += 1
                if status in const.SUCCESS_STATUSES:
                    completed += 1
                elif status == const.HABIT_STATUS_PARTIAL:
                    partial += 1

        return CompletionScore(
            percentage=calculate_percentage(total_points(completed, partial), total),
            completed_count=completed,
            partial_count=partial,
            total_count=total,
            excluded_count=excluded,
        )

    @staticmethod
    def score_habit(
        habit: HabitData,
        dates: Iterable[date | str],
        effective_today: date | str,
    ) -> CompletionScore:
        """Score a single habit over a list of dates."""
        return ScoringEngine.score([habit], dates, effective_today)

    # =========================================================================
    # CATEGORY DIALS
    # =========================================================================

    @staticmethod
    def score_dial(
        habits: Iterable[HabitData],
        day: date | str,
        effective_today: date | str,
        *,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> DialScore:
        """Score one date column across a set of habits for a category dial.

        Pacing is evaluated as of the column date itself, so a past column
        reflects whether the habit was on track at that time.
        """
        target_day = dt_as_date(day)
        today = dt_as_date(effective_today)
        iso_day = dt_iso(target_day)

        if target_day > today:
            return DialScore(date=iso_day)

        completed = 0
        partial = 0
        expected = 0
        not_expected = 0

        for habit in habits:
            if OnTrackEngine.is_not_expected(
                habit, target_day, target_day, week_start_day
            ):
                not_expected += 1
                continue

            status = StatusEngine.raw_status(habit, target_day)
            if status in const.EXCLUDED_STATUSES:
                continue

            expected += 1
            if status in const.SUCCESS_STATUSES:
                completed += 1
            elif status == const.HABIT_STATUS_PARTIAL:
                partial += 1

        return DialScore(
            date=iso_day,
            percentage=calculate_percentage(
                total_points(completed, partial), expected
            ),
            not_expected_percentage=calculate_percentage(
                not_expected, expected + not_expected
            ),
            completed_count=completed,
            partial_count=partial,
            expected_count=expected,
            not_expected_count=not_expected,
            is_today=target_day == today,
        )

    @staticmethod
    def score_dials(
        habits: Iterable[HabitData],
        dates: Iterable[date | str],
        effective_today: date | str,
        *,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> list[DialScore]:
        """Score every date column for a category header."""
        habit_list = list(habits)
        return [
            ScoringEngine.score_dial(
                habit_list, day, effective_today, week_start_day=week_start_day
            )
            for day in dates
        ]

    # =========================================================================
    # SUMMARY RANGES
    # =========================================================================

    @staticmethod
    def get_all_time_start(habit: HabitData, effective_today: date) -> date:
        """Return the all-time range start for a habit.

        The earlier of the creation date and the earliest entry; January 1st
        of the current year when neither is known.
        """
        candidates: list[date] = []
        created_at = dt_parse_date(habit.get(const.DATA_HABIT_CREATED_AT))
        if created_at is not None:
            candidates.append(created_at)

        sources = [habit, *ParentEngine.get_children(habit)]
        for source in sources:
            for iso_day in source.get(const.DATA_HABIT_ENTRIES) or {}:
                entry_day = dt_parse_date(iso_day)
                if entry_day is not None:
                    candidates.append(entry_day)

        if not candidates:
            return dt_year_start(effective_today)
        return min(candidates)

    @staticmethod
    def score_summary(
        habit: HabitData, effective_today: date | str
    ) -> dict[str, CompletionScore]:
        """Score a habit for today, month-to-date, year-to-date and all time."""
        today = dt_as_date(effective_today)
        ranges = {
            const.SCORE_RANGE_TODAY: [today],
            const.SCORE_RANGE_THIS_MONTH: dt_date_range(dt_month_start(today), today),
            const.SCORE_RANGE_THIS_YEAR: dt_date_range(dt_year_start(today), today),
            const.SCORE_RANGE_ALL_TIME: dt_date_range(
                ScoringEngine.get_all_time_start(habit, today), today
            ),
        }
        return {
            range_key: ScoringEngine.score_habit(habit, days, today)
            for range_key, days in ranges.items()
        }

    # =========================================================================
    # SCORE TIERS
    # =========================================================================

    @staticmethod
    def score_tier(
        percentage: int,
        target: int = const.DEFAULT_SCORE_TARGET_PERCENTAGE,
        warning: int = const.DEFAULT_SCORE_WARNING_PERCENTAGE,
    ) -> str:
        """Classify a percentage as good, warning or poor."""
        if percentage >= target:
            return const.SCORE_TIER_GOOD
        if percentage >= warning:
            return const.SCORE_TIER_WARNING
        return const.SCORE_TIER_POOR

    @staticmethod
    def habit_score_tier(habit: HabitData, percentage: int) -> str:
        """Classify a percentage against the habit's own thresholds."""
        target = habit.get(const.DATA_HABIT_TARGET_PERCENTAGE)
        warning = habit.get(const.DATA_HABIT_WARNING_PERCENTAGE)
        return ScoringEngine.score_tier(
            percentage,
            const.DEFAULT_HABIT_TARGET_PERCENTAGE if target is None else target,
            const.DEFAULT_HABIT_WARNING_PERCENTAGE if warning is None else warning,
        )
