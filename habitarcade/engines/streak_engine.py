"""Streak Engine - Current and best streaks over consecutive calendar days.

Streaks walk every calendar day from the habit start (creation date, or the
earliest entry when the creation date is unknown) through the effective today.
Gaps without entries are real days with status `empty`.

Run rules:
- complete / extra extend the run
- na / exempt are invisible: they neither extend nor break the run
- every other status breaks the run, except an `empty` effective today,
  which the current streak tolerates because the day is not over yet

ARCHITECTURE: Stateless engine, all methods are static.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_as_date, dt_date_range, dt_parse_date
from .parent_engine import ParentEngine
from .status_engine import StatusEngine

if TYPE_CHECKING:
    from datetime import date

    from ..type_defs import HabitData


@dataclass(frozen=True)
class StreakResult:
    """Streak lengths in days (both >= 0)."""

    current: int = 0
    best: int = 0


class StreakEngine:
    """Pure logic engine for habit streaks."""

    @staticmethod
    def get_start_date(habit: HabitData) -> date | None:
        """Return the first day a streak walk should consider.

        Uses the creation date when known, otherwise the earliest entry
        (across children for a parent habit). None when neither exists.
        """
        created_at = dt_parse_date(habit.get(const.DATA_HABIT_CREATED_AT))
        if created_at is not None:
            return created_at

        sources = [habit, *ParentEngine.get_children(habit)]
        entry_days = [
            parsed
            for source in sources
            for iso_day in (source.get(const.DATA_HABIT_ENTRIES) or {})
            if (parsed := dt_parse_date(iso_day)) is not None
        ]
        if not entry_days:
            return None
        return min(entry_days)

    @staticmethod
    def calculate_best_streak(
        habit: HabitData, effective_today: date | str
    ) -> int:
        """Return the longest run of complete/extra days ever recorded."""
        start = StreakEngine.get_start_date(habit)
        if start is None:
            return 0

        best = 0
        run = 0
        for day in dt_date_range(start, effective_today):
            status = StatusEngine.raw_status(habit, day)
            if status in const.SUCCESS_STATUSES:
                run += 1
                best = max(best, run)
            elif status in const.EXCLUDED_STATUSES:
                continue
            else:
                run = 0
        return best

    @staticmethod
    def calculate_current_streak(
        habit: HabitData, effective_today: date | str
    ) -> int:
        """Return the run of complete/extra days ending on the effective today.

        Walks backward from the effective today. An empty today does not
        break the streak; an empty earlier day does.
        """
        start = StreakEngine.get_start_date(habit)
        today = dt_as_date(effective_today)
        if start is None or start > today:
            return 0

        current = 0
        day = today
        while day >= start:
            status = StatusEngine.raw_status(habit, day)
            if status in const.SUCCESS_STATUSES:
                current += 1
            elif status in const.EXCLUDED_STATUSES:
                pass
            elif day == today and status == const.HABIT_STATUS_EMPTY:
                pass
            else:
                break
            day -= timedelta(days=1)
        return current

    @staticmethod
    def calculate_streaks(
        habit: HabitData, effective_today: date | str
    ) -> StreakResult:
        """Return both the current and the best streak for a habit."""
        today = dt_as_date(effective_today)
        result = StreakResult(
            current=StreakEngine.calculate_current_streak(habit, today),
            best=StreakEngine.calculate_best_streak(habit, today),
        )
        const.LOGGER.debug(
            "Streaks for habit %s as of %s: current=%s best=%s",
            habit.get(const.DATA_HABIT_ID),
            today,
            result.current,
            result.best,
        )
        return result
