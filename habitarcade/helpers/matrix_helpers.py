"""Matrix helper functions for HabitArcade consumers.

This module provides read-only data shaping for the habit matrix (category
groups of habit rows with one display cell per date) and per-habit stats.
Callers pass validated data from data_builders; all status, scoring and
streak logic is delegated to the engines.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import TYPE_CHECKING

from .. import const
from ..engines import ParentEngine, ScoringEngine, StatusEngine, StreakEngine
from ..utils.dt_utils import (
    dt_as_date,
    dt_effective_date,
    dt_generate_date_columns,
    dt_iso,
)
from ..utils.math_utils import clamp

if TYPE_CHECKING:
    from datetime import date

    from ..type_defs import (
        CategoryData,
        HabitData,
        HabitMatrix,
        HabitStats,
        MatrixCell,
        MatrixGroup,
        MatrixRow,
        SettingsData,
    )

# Widest matrix the helpers will build (one year of columns)
MAX_MATRIX_DAYS = 366


def get_responsive_days(width: int) -> int:
    """Return the number of matrix columns for a viewport width in pixels."""
    if width >= 1024:
        return const.MATRIX_DAYS_DESKTOP
    if width >= 768:
        return const.MATRIX_DAYS_TABLET
    return const.MATRIX_DAYS_MOBILE


def build_matrix_cell(
    habit: HabitData,
    day: date,
    effective_today: date,
    settings: SettingsData,
) -> MatrixCell:
    """Build one display cell for a habit on a date."""
    progress = StatusEngine.count_progress(habit, day)
    return {
        "date": dt_iso(day),
        "status": StatusEngine.resolve_cell(
            habit,
            day,
            effective_today,
            settings["auto_mark_pink"],
            week_start_day=settings["week_start_day"],
        ),
        "raw_status": StatusEngine.raw_status(habit, day),
        "count": progress[0] if progress else None,
        "daily_target": progress[1] if progress else None,
    }


def build_matrix_row(
    habit: HabitData,
    days: list[date],
    effective_today: date,
    settings: SettingsData,
) -> MatrixRow:
    """Build a matrix row (with nested child rows for a parent habit).

    The row percentage scores the visible columns; streaks cover the whole
    history up to the effective today.
    """
    score = ScoringEngine.score_habit(habit, days, effective_today)
    streaks = StreakEngine.calculate_streaks(habit, effective_today)
    children = [
        build_matrix_row(child, days, effective_today, settings)
        for child in sorted(
            ParentEngine.get_children(habit),
            key=lambda child: child.get(const.DATA_HABIT_SORT_ORDER, 0),
        )
    ]
    return {
        "habit_id": habit[const.DATA_HABIT_ID],
        "name": habit.get(const.DATA_HABIT_NAME, ""),
        "is_parent": ParentEngine.is_parent(habit),
        "cells": [
            build_matrix_cell(habit, day, effective_today, settings) for day in days
        ],
        "percentage": score.percentage,
        "score_tier": ScoringEngine.habit_score_tier(habit, score.percentage),
        "current_streak": streaks.current,
        "best_streak": streaks.best,
        "show_streak_badge": streaks.current >= const.MATRIX_STREAK_BADGE_MINIMUM,
        "children": children,
    }


def _group_habits(
    habits: list[HabitData], categories: list[CategoryData]
) -> list[tuple[str | None, str, list[HabitData]]]:
    """Group visible habits by category in display order.

    Categories follow their sort order; habits whose category is missing or
    deleted land in a trailing "Uncategorized" group. Empty groups are dropped.
    """
    visible_categories = sorted(
        (cat for cat in categories if not cat.get(const.DATA_CATEGORY_IS_DELETED)),
        key=lambda cat: cat.get(const.DATA_CATEGORY_SORT_ORDER, 0),
    )
    known_ids = {cat[const.DATA_CATEGORY_ID] for cat in visible_categories}

    by_category: dict[str | None, list[HabitData]] = defaultdict(list)
    for habit in sorted(habits, key=lambda h: h.get(const.DATA_HABIT_SORT_ORDER, 0)):
        if habit.get(const.DATA_HABIT_IS_DELETED):
            continue
        category_id = habit.get(const.DATA_HABIT_CATEGORY_ID)
        by_category[category_id if category_id in known_ids else None].append(habit)

    groups: list[tuple[str | None, str, list[HabitData]]] = [
        (
            cat[const.DATA_CATEGORY_ID],
            cat[const.DATA_CATEGORY_NAME],
            by_category[cat[const.DATA_CATEGORY_ID]],
        )
        for cat in visible_categories
        if by_category.get(cat[const.DATA_CATEGORY_ID])
    ]
    if by_category.get(None):
        groups.append((None, const.UNCATEGORIZED_NAME, by_category[None]))
    return groups


def build_habit_matrix(
    habits: list[HabitData],
    categories: list[CategoryData],
    settings: SettingsData,
    now: datetime,
    days_to_show: int = const.MATRIX_DAYS_DESKTOP,
    future_days: int = 0,
) -> HabitMatrix:
    """Build the full habit matrix for a wall-clock instant.

    Args:
        habits: Validated habits (deleted habits are skipped)
        categories: Categories for grouping and ordering
        settings: Validated settings (see data_builders.build_settings)
        now: Wall-clock instant, resolved with the day boundary
        days_to_show: Columns up to and including the effective today
        future_days: Extra columns after the effective today

    Returns:
        HabitMatrix with date columns and one group per category.
    """
    days_to_show = int(clamp(days_to_show, 1, MAX_MATRIX_DAYS))
    boundary = settings["day_boundary_hour"]
    effective_today = dt_effective_date(now, boundary)
    columns = dt_generate_date_columns(days_to_show, now, boundary, future_days)
    days = [dt_as_date(column["date"]) for column in columns]

    groups: list[MatrixGroup] = []
    for category_id, category_name, group_habits in _group_habits(habits, categories):
        dials = ScoringEngine.score_dials(
            group_habits,
            days,
            effective_today,
            week_start_day=settings["week_start_day"],
        )
        groups.append(
            {
                "category_id": category_id,
                "category_name": category_name,
                "rows": [
                    build_matrix_row(habit, days, effective_today, settings)
                    for habit in group_habits
                ],
                "dials": [
                    {
                        "date": dial.date,
                        "percentage": dial.percentage,
                        "not_expected_percentage": dial.not_expected_percentage,
                        "is_today": dial.is_today,
                    }
                    for dial in dials
                ],
            }
        )

    const.LOGGER.debug(
        "Built habit matrix for %s: %s columns, %s groups",
        effective_today,
        len(columns),
        len(groups),
    )
    return {
        "effective_today": dt_iso(effective_today),
        "date_columns": columns,
        "groups": groups,
    }


def build_habit_stats(habit: HabitData, effective_today: date | str) -> HabitStats:
    """Build the stats panel data for one habit."""
    today = dt_as_date(effective_today)
    summary = ScoringEngine.score_summary(habit, today)
    streaks = StreakEngine.calculate_streaks(habit, today)
    return {
        "habit_id": habit[const.DATA_HABIT_ID],
        "created_at": habit.get(const.DATA_HABIT_CREATED_AT),
        "current_streak": streaks.current,
        "best_streak": streaks.best,
        "today": summary[const.SCORE_RANGE_TODAY].percentage,
        "this_month": summary[const.SCORE_RANGE_THIS_MONTH].percentage,
        "this_year": summary[const.SCORE_RANGE_THIS_YEAR].percentage,
        "all_time": summary[const.SCORE_RANGE_ALL_TIME].percentage,
    }

