"""Shared fixtures for HabitArcade tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from habitarcade import const
from habitarcade.data_builders import build_settings
from habitarcade.type_defs import HabitData, SettingsData
from tests.factories import make_habit, make_parent


@pytest.fixture
def habit_factory() -> Callable[..., HabitData]:
    """Return the make_habit() factory."""
    return make_habit


@pytest.fixture
def parent_factory() -> Callable[..., HabitData]:
    """Return the make_parent() factory."""
    return make_parent


@pytest.fixture
def default_settings() -> SettingsData:
    """Settings with every default applied."""
    return build_settings()


@pytest.fixture
def streak_habit() -> HabitData:
    """Habit created 2024-01-01 with a missed day on 01-03."""
    return make_habit(
        "streak",
        created_at="2024-01-01",
        entries={
            "2024-01-01": const.HABIT_STATUS_COMPLETE,
            "2024-01-02": const.HABIT_STATUS_COMPLETE,
            "2024-01-03": const.HABIT_STATUS_MISSED,
            "2024-01-04": const.HABIT_STATUS_COMPLETE,
        },
    )


@pytest.fixture
def weekly_habit() -> HabitData:
    """Low-frequency habit: 2 times per Monday-based week."""
    return make_habit(
        "weekly",
        created_at="2024-01-01",
        target_frequency={
            const.DATA_TARGET_TIMES: 2,
            const.DATA_TARGET_PERIOD: const.TARGET_PERIOD_WEEK,
        },
        on_track_when_gray=True,
    )


@pytest.fixture
def morning_now() -> datetime:
    """Wall clock at 2024-01-06 03:00, before the default 06:00 boundary."""
    return datetime(2024, 1, 6, 3, 0)
