"""Status Engine - Pure logic for raw and display status of habit cells.

This engine provides stateless functions for:
- Entry lookup with `empty` as the default for missing entries
- Parent habit delegation (parents never have entries of their own)
- Display status inference (pink "likely missed", gray "not expected yet")
- Count-based status derivation for habits with a daily numeric goal

Display rule order (first match wins):
    1. Future date                                       → empty
    2. Empty past day with auto_mark_pink enabled        → pink
    3. Empty today, habit low-frequency and on track     → gray_missed
    4. Otherwise                                         → raw status

ARCHITECTURE: Stateless engine, all methods are static.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_as_date, dt_iso
from .parent_engine import ParentEngine

if TYPE_CHECKING:
    from datetime import date

    from ..type_defs import HabitData, HabitEntryData, HabitStatus


class StatusEngine:
    """Pure logic engine for per-cell habit status."""

    # =========================================================================
    # RAW STATUS
    # =========================================================================

    @staticmethod
    def get_entry(habit: HabitData, day: date | str) -> HabitEntryData | None:
        """Return the entry stored for `day`, or None."""
        entries = habit.get(const.DATA_HABIT_ENTRIES) or {}
        return entries.get(dt_iso(dt_as_date(day)))

    @staticmethod
    def status_from_count(count: int | None, daily_target: int | None) -> HabitStatus:
        """Derive a status from a count-based entry.

        Returns:
            complete when the count reaches the daily target, partial for any
            progress below it, empty when nothing was logged (or no target).
        """
        if not daily_target or not count or count <= 0:
            return const.HABIT_STATUS_EMPTY
        if count >= daily_target:
            return const.HABIT_STATUS_COMPLETE
        return const.HABIT_STATUS_PARTIAL

    @staticmethod
    def entry_status(habit: HabitData, day: date | str) -> HabitStatus:
        """Return the status stored in the habit's own entry for `day`.

        Missing entries are `empty`. A count-based habit whose entry has no
        explicit status takes its status from the logged count.
        """
        entry = StatusEngine.get_entry(habit, day)
        if not entry:
            return const.HABIT_STATUS_EMPTY

        status = entry.get(const.DATA_ENTRY_STATUS) or const.HABIT_STATUS_EMPTY
        if status == const.HABIT_STATUS_EMPTY and habit.get(
            const.DATA_HABIT_DAILY_TARGET
        ):
            return StatusEngine.status_from_count(
                entry.get(const.DATA_ENTRY_COUNT),
                habit.get(const.DATA_HABIT_DAILY_TARGET),
            )
        return status

    @staticmethod
    def raw_status(habit: HabitData, day: date | str) -> HabitStatus:
        """Return the stored (or, for parents, derived) status for `day`."""
        if ParentEngine.is_parent(habit):
            return ParentEngine.computed_status(habit, day)
        return StatusEngine.entry_status(habit, day)

    @staticmethod
    def count_progress(habit: HabitData, day: date | str) -> tuple[int, int] | None:
        """Return (count, daily_target) for count-based habits, else None."""
        daily_target = habit.get(const.DATA_HABIT_DAILY_TARGET)
        if not daily_target:
            return None
        entry = StatusEngine.get_entry(habit, day)
        count = (entry or {}).get(const.DATA_ENTRY_COUNT) or 0
        return int(count), int(daily_target)

    # =========================================================================
    # DISPLAY STATUS
    # =========================================================================

    @staticmethod
    def display_status(
        habit: HabitData,
        day: date | str,
        is_today: bool,
        is_future: bool,
        auto_mark_pink: bool,
        effective_today: date | str,
        *,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> HabitStatus:
        """Return the status a consumer should show for a cell.

        Args:
            habit: Habit (or parent habit) data
            day: Cell date
            is_today: Whether `day` is the effective today
            is_future: Whether `day` is after the effective today
            auto_mark_pink: Show empty past days as inferred-missed
            effective_today: Effective today (day boundary applied)
            week_start_day: First weekday of "week" target periods

        Returns:
            Display status from const.HABIT_STATUSES.
        """
        if is_future:
            return const.HABIT_STATUS_EMPTY

        target_day = dt_as_date(day)
        today = dt_as_date(effective_today)
        status = StatusEngine.raw_status(habit, target_day)

        if status != const.HABIT_STATUS_EMPTY:
            return status

        if auto_mark_pink and target_day < today:
            return const.HABIT_STATUS_PINK

        if is_today:
            from .on_track_engine import OnTrackEngine

            if OnTrackEngine.is_low_frequency(habit) and OnTrackEngine.is_on_track(
                habit, today, week_start_day=week_start_day
            ):
                return const.HABIT_STATUS_GRAY_MISSED

        return status

    @staticmethod
    def resolve_cell(
        habit: HabitData,
        day: date | str,
        effective_today: date | str,
        auto_mark_pink: bool = const.DEFAULT_AUTO_MARK_PINK,
        *,
        week_start_day: int = const.DEFAULT_WEEK_START_DAY,
    ) -> HabitStatus:
        """Return the display status, deriving today/future flags from the dates."""
        target_day = dt_as_date(day)
        today = dt_as_date(effective_today)
        return StatusEngine.display_status(
            habit,
            target_day,
            is_today=target_day == today,
            is_future=target_day > today,
            auto_mark_pink=auto_mark_pink,
            effective_today=today,
            week_start_day=week_start_day,
        )
