"""Factories for building validated HabitArcade test data."""

from __future__ import annotations

from datetime import date
from typing import Any


from habitarcade import const
from habitarcade.data_builders import build_habit
from habitarcade.type_defs import HabitData

# Effective today used by most scenarios (a Friday)
TODAY = date(2024, 1, 5)


def make_habit(
    habit_id: str = "habit-1",
    entries: dict[str, Any] | None = None,
    **fields: Any,
) -> HabitData:
    """Create a validated habit.

    Args:
        habit_id: Habit id
        entries: Mapping of ISO date → status string or entry dict
        **fields: Any other DATA_HABIT_* field

    Returns:
        HabitData ready for the engines
    """
    data: dict[str, Any] = {
        const.DATA_HABIT_ID: habit_id,
        const.DATA_HABIT_NAME: fields.pop("name", habit_id.replace("-", " ").title()),
        const.DATA_HABIT_ENTRIES: entries or {},
    }
    data.update(fields)
    return build_habit(data)


def make_parent(
    habit_id: str = "parent-1",
    children: list[dict[str, Any]] | None = None,
    **fields: Any,
) -> HabitData:
    """Create a validated parent habit from raw child dicts."""
    data: dict[str, Any] = {
        const.DATA_HABIT_ID: habit_id,
        const.DATA_HABIT_NAME: fields.pop("name", "Parent"),
        const.DATA_HABIT_CHILDREN: children or [],
    }
    data.update(fields)
    return build_habit(data)


def child(habit_id: str, entries: dict[str, Any] | None = None) -> dict[str, Any]:
    """Raw child habit dict for make_parent()."""
    return {const.DATA_HABIT_ID: habit_id, const.DATA_HABIT_ENTRIES: entries or {}}


