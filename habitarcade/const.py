# File: const.py
"""Constants for the HabitArcade scoring engine.

This file centralizes data keys, status values, defaults and thresholds so that
engines, builders and helpers read habit data consistently.
"""

import logging
from typing import Final

# ------------------------------------------------------------------------------------------------
# General Information
# ------------------------------------------------------------------------------------------------
HABITARCADE_TITLE = "HabitArcade"

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Habit Statuses
# ------------------------------------------------------------------------------------------------
HABIT_STATUS_EMPTY = "empty"
HABIT_STATUS_COMPLETE = "complete"
HABIT_STATUS_MISSED = "missed"
HABIT_STATUS_PARTIAL = "partial"
HABIT_STATUS_NA = "na"
HABIT_STATUS_EXEMPT = "exempt"
HABIT_STATUS_EXTRA = "extra"
HABIT_STATUS_PINK = "pink"
HABIT_STATUS_GRAY_MISSED = "gray_missed"

HABIT_STATUSES: Final[tuple[str, ...]] = (
    HABIT_STATUS_EMPTY,
    HABIT_STATUS_COMPLETE,
    HABIT_STATUS_MISSED,
    HABIT_STATUS_PARTIAL,
    HABIT_STATUS_NA,
    HABIT_STATUS_EXEMPT,
    HABIT_STATUS_EXTRA,
    HABIT_STATUS_PINK,
    HABIT_STATUS_GRAY_MISSED,
)

# Statuses that count as a full success (score point, streak day)
SUCCESS_STATUSES: Final[frozenset[str]] = frozenset(
    {HABIT_STATUS_COMPLETE, HABIT_STATUS_EXTRA}
)

# Statuses removed from score denominators and invisible to streak runs
EXCLUDED_STATUSES: Final[frozenset[str]] = frozenset(
    {HABIT_STATUS_NA, HABIT_STATUS_EXEMPT}
)

# Points awarded per status when scoring (anything absent scores 0)
STATUS_POINTS: Final[dict[str, float]] = {
    HABIT_STATUS_COMPLETE: 1.0,
    HABIT_STATUS_EXTRA: 1.0,
    HABIT_STATUS_PARTIAL: 0.5,
}

# ------------------------------------------------------------------------------------------------
# Habit Data Keys
# ------------------------------------------------------------------------------------------------
DATA_HABIT_ID = "id"
DATA_HABIT_NAME = "name"
DATA_HABIT_CATEGORY_ID = "category_id"
DATA_HABIT_CREATED_AT = "created_at"
DATA_HABIT_TARGET_FREQUENCY = "target_frequency"
DATA_HABIT_ON_TRACK_WHEN_GRAY = "on_track_when_gray"
DATA_HABIT_DAILY_TARGET = "daily_target"
DATA_HABIT_TARGET_PERCENTAGE = "target_percentage"
DATA_HABIT_WARNING_PERCENTAGE = "warning_percentage"
DATA_HABIT_SORT_ORDER = "sort_order"
DATA_HABIT_IS_DELETED = "is_deleted"
DATA_HABIT_CHILDREN = "children"
DATA_HABIT_ENTRIES = "entries"

# Habit Entry Data Keys
DATA_ENTRY_HABIT_ID = "habit_id"
DATA_ENTRY_DATE = "date"
DATA_ENTRY_STATUS = "status"
DATA_ENTRY_COUNT = "count"
DATA_ENTRY_NOTES = "notes"

# Target Frequency Keys
DATA_TARGET_TIMES = "times"
DATA_TARGET_PERIOD = "period"
DATA_TARGET_PERIOD_DAYS = "period_days"

# Category Data Keys (pass-through only)
DATA_CATEGORY_ID = "id"
DATA_CATEGORY_NAME = "name"
DATA_CATEGORY_SORT_ORDER = "sort_order"
DATA_CATEGORY_IS_DELETED = "is_deleted"

# ------------------------------------------------------------------------------------------------
# Target Frequency Periods
# ------------------------------------------------------------------------------------------------
TARGET_PERIOD_WEEK = "week"
TARGET_PERIOD_MONTH = "month"
TARGET_PERIOD_DAYS = "days"

TARGET_PERIODS: Final[tuple[str, ...]] = (
    TARGET_PERIOD_WEEK,
    TARGET_PERIOD_MONTH,
    TARGET_PERIOD_DAYS,
)

DEFAULT_TARGET_PERIOD = TARGET_PERIOD_WEEK
DEFAULT_TARGET_PERIOD_DAYS = 7

# ------------------------------------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------------------------------------
DATA_SETTINGS_DAY_BOUNDARY_HOUR = "day_boundary_hour"
DATA_SETTINGS_AUTO_MARK_PINK = "auto_mark_pink"
DATA_SETTINGS_WEEK_START_DAY = "week_start_day"

DEFAULT_DAY_BOUNDARY_HOUR = 6
DEFAULT_AUTO_MARK_PINK = False
DEFAULT_WEEK_START_DAY = 0  # Monday, matches date.weekday()

MIN_DAY_BOUNDARY_HOUR = 0
MAX_DAY_BOUNDARY_HOUR = 23
MIN_WEEK_START_DAY = 0
MAX_WEEK_START_DAY = 6

# ------------------------------------------------------------------------------------------------
# Scoring
# ------------------------------------------------------------------------------------------------
SCORE_TIER_GOOD = "good"
SCORE_TIER_WARNING = "warning"
SCORE_TIER_POOR = "poor"

# Generic thresholds (detail view, row percentage)
DEFAULT_SCORE_TARGET_PERCENTAGE = 80
DEFAULT_SCORE_WARNING_PERCENTAGE = 50

# Per-habit thresholds when the habit does not define its own
DEFAULT_HABIT_TARGET_PERCENTAGE = 90
DEFAULT_HABIT_WARNING_PERCENTAGE = 75

# Summary range keys (score_summary)
SCORE_RANGE_TODAY = "today"
SCORE_RANGE_THIS_MONTH = "this_month"
SCORE_RANGE_THIS_YEAR = "this_year"
SCORE_RANGE_ALL_TIME = "all_time"

# ------------------------------------------------------------------------------------------------
# Matrix
# ------------------------------------------------------------------------------------------------
MATRIX_DAYS_DESKTOP = 31
MATRIX_DAYS_TABLET = 7
MATRIX_DAYS_MOBILE = 3

# Current streak needed before a row shows its streak badge
MATRIX_STREAK_BADGE_MINIMUM = 3

UNCATEGORIZED_NAME = "Uncategorized"

# ------------------------------------------------------------------------------------------------
# Validation Fields (EntityValidationError.field)
# ------------------------------------------------------------------------------------------------
ERROR_FIELD_HABIT_ID = DATA_HABIT_ID
ERROR_FIELD_CHILDREN = DATA_HABIT_CHILDREN
ERROR_FIELD_ON_TRACK_WHEN_GRAY = DATA_HABIT_ON_TRACK_WHEN_GRAY
ERROR_FIELD_IS_DELETED = DATA_HABIT_IS_DELETED
ERROR_FIELD_ENTRIES = DATA_HABIT_ENTRIES
ERROR_FIELD_CREATED_AT = DATA_HABIT_CREATED_AT
ERROR_FIELD_TARGET_FREQUENCY = DATA_HABIT_TARGET_FREQUENCY
ERROR_FIELD_DAILY_TARGET = DATA_HABIT_DAILY_TARGET
ERROR_FIELD_ENTRY_DATE = DATA_ENTRY_DATE
ERROR_FIELD_ENTRY_STATUS = DATA_ENTRY_STATUS
ERROR_FIELD_ENTRY_COUNT = DATA_ENTRY_COUNT
ERROR_FIELD_SETTINGS = "settings"
