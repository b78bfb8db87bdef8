"""On-Track Engine - Pace evaluation for low-frequency habits.

A low-frequency habit only needs `times` completions per period (a week, a
calendar month, or a block of N days). While the target can still be reached
in the days left, an empty today is "not expected yet" rather than missed.

The period is split at `as_of`:
    [period_start .. as_of - 1]   elapsed, completions are counted here
    [as_of .. period_end]         remaining days, including as_of itself

A habit is on track when the elapsed completions already meet the target or
the remaining days are enough to close the gap. Daily habits (no target
frequency) are never on track.

ARCHITECTURE: Stateless engine, all methods are static.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import (
    dt_as_date,
    dt_date_range,
    dt_iso,
    dt_parse_date,
    dt_period_bounds,
)
from .status_engine import StatusEngine

if TYPE_CHECKING:
    from datetime import date

    from ..type_defs import HabitData, PeriodProgress


class OnTrackEngine:
    """Pure logic engine for target-frequency pacing."""

    @staticmethod
    def get_target(habit: HabitData) -> tuple[int, str, int] | None:
        """Return (times, period, period_days) or None for daily habits."""
        target = habit.get(const.DATA_HABIT_TARGET_FREQUENCY)
        if not target:
            return None
        times = int(target.get(const.DATA_TARGET_TIMES) or 0)
        if times <= 0:
            return None
        period = target.get(const.DATA_TARGET_PERIOD) or const.DEFAULT_TARGET_PERIOD
        period_days = int(
            target.get(const.DATA_TARGET_PERIOD_DAYS)
            or const.DEFAULT_TARGET_PERIOD_DAYS
        )
        return times, period, period_days

    @staticmethod
    def is_low_frequency(habit: HabitData) -> bool:
        """Return True if the habit is flagged low-frequency and has a target."""
        return bool(
            habit.get(const.DATA_HABIT_ON_TRACK_WHEN_GRAY)
        ) and OnTrackEngine.get_target(habit) is not None

    @staticmethod
    def get_period_bounds(
        habit: HabitData,
        as_of: date | str,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> tuple[date, date] | None:
        """Return the (start, end) of the target period containing `as_of`.

        N-day periods are anchored on the habit's creation date when known.
        """
        target = OnTrackEngine.get_target(habit)
        if target is None:
            return None
        _, period, period_days = target
        return dt_period_bounds(
            dt_as_date(as_of),
            period,
            period_days=period_days,
            anchor=dt_parse_date(habit.get(const.DATA_HABIT_CREATED_AT)),
            week_start_day=week_start_day,
        )

    @staticmethod
    def count_completions(habit: HabitData, start: date, end: date) -> int:
        """Count complete/extra days between start and end (inclusive)."""
        return sum(
            1
            for day in dt_date_range(start, end)
            if StatusEngine.raw_status(habit, day) in const.SUCCESS_STATUSES
        )

    @staticmethod
    def period_progress(
        habit: HabitData,
        as_of: date | str,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> PeriodProgress | None:
        """Return progress within the current period, or None for daily habits."""
        target = OnTrackEngine.get_target(habit)
        bounds = OnTrackEngine.get_period_bounds(habit, as_of, week_start_day)
        if target is None or bounds is None:
            return None

        times = target[0]
        start, end = bounds
        day = dt_as_date(as_of)
        completed = OnTrackEngine.count_completions(
            habit, start, day - timedelta(days=1)
        )
        return {
            "period_start": dt_iso(start),
            "period_end": dt_iso(end),
            "completed": completed,
            "target": times,
            "remaining_days": (end - day).days + 1,
        }

    @staticmethod
    def is_on_track(
        habit: HabitData,
        as_of: date | str,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> bool:
        """Return True if the habit can still meet its period target.

        Args:
            habit: Habit data (daily habits always return False)
            as_of: Evaluation date, usually the effective today
            week_start_day: First weekday of "week" periods (0=Monday)
        """
        progress = OnTrackEngine.period_progress(habit, as_of, week_start_day)
        if progress is None:
            return False

        if progress["completed"] >= progress["target"]:
            return True
        return progress["remaining_days"] >= progress["target"] - progress["completed"]

    @staticmethod
    def is_not_expected(
        habit: HabitData,
        day: date | str,
        as_of: date | str,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> bool:
        """Return True if an empty cell on `day` is "not expected yet".

        Only low-frequency habits that are on track as of `as_of` qualify.
        """
        if not OnTrackEngine.is_low_frequency(habit):
            return False
        if StatusEngine.raw_status(habit, day) != const.HABIT_STATUS_EMPTY:
            return False
        return OnTrackEngine.is_on_track(habit, as_of, week_start_day)
