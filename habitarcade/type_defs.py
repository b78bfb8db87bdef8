"""Type definitions for HabitArcade data structures.

Inputs handed to the engines are plain dicts supplied by the storage layer.
TypedDicts document the fixed keys; they are static analysis only and do not
validate anything at runtime (see data_builders.py for that).

IMPORTANT: This file must NOT import from engines or helpers to avoid
circular dependencies. Only typing machinery is imported here.
"""

from typing import NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

HabitId = str  # UUID string
CategoryId = str  # UUID string
ISODate = str  # ISO 8601 date string (no time) "2024-01-18"
HabitStatus = str  # One of const.HABIT_STATUSES


# =============================================================================
# Habit Inputs
# =============================================================================


class TargetFrequency(TypedDict):
    """How often a low-frequency habit should be done.

    `period_days` is only read when `period` is "days".
    """

    times: int
    period: NotRequired[str]  # "week" | "month" | "days"
    period_days: NotRequired[int]


class HabitEntryData(TypedDict):
    """A single per-day status entry. Unique per (habit_id, date)."""

    habit_id: NotRequired[HabitId]
    date: ISODate
    status: HabitStatus
    count: NotRequired[int | None]  # Count-based habits only
    notes: NotRequired[str | None]


class HabitData(TypedDict):
    """A habit with its date-keyed entries.

    Parent habits carry `children` and never have entries of their own.
    Children are one level deep (a child never has children).
    """

    id: HabitId
    name: str
    category_id: NotRequired[CategoryId | None]
    created_at: NotRequired[ISODate | None]
    target_frequency: NotRequired[TargetFrequency | None]
    on_track_when_gray: NotRequired[bool]
    daily_target: NotRequired[int | None]
    target_percentage: NotRequired[int | None]
    warning_percentage: NotRequired[int | None]
    sort_order: NotRequired[int]
    is_deleted: NotRequired[bool]
    children: NotRequired[list["HabitData"]]
    entries: dict[ISODate, HabitEntryData]


class CategoryData(TypedDict):
    """Category metadata, passed through to matrix groups."""

    id: CategoryId
    name: str
    sort_order: NotRequired[int]
    is_deleted: NotRequired[bool]


class SettingsData(TypedDict):
    """Validated engine settings (see data_builders.build_settings)."""

    day_boundary_hour: int
    auto_mark_pink: bool
    week_start_day: int


# =============================================================================
# Helper Outputs
# =============================================================================


class DateColumn(TypedDict):
    """A single date column of the habit matrix."""

    date: ISODate
    day_of_week: str  # "Mon", "Tue", ...
    day_of_month: str  # "1" - "31"
    is_today: bool
    is_weekend: bool
    is_past: bool
    is_future: bool


class PeriodProgress(TypedDict):
    """Progress of a low-frequency habit within its current period."""

    period_start: ISODate
    period_end: ISODate
    completed: int
    target: int
    remaining_days: int


class MatrixCell(TypedDict):
    """One rendered cell of a habit row."""

    date: ISODate
    status: HabitStatus
    raw_status: HabitStatus
    count: int | None
    daily_target: int | None


class MatrixRow(TypedDict):
    """A habit row of the matrix, children nested one level."""

    habit_id: HabitId
    name: str
    is_parent: bool
    cells: list[MatrixCell]
    percentage: int
    score_tier: str
    current_streak: int
    best_streak: int
    show_streak_badge: bool
    children: list["MatrixRow"]


class MatrixDial(TypedDict):
    """Category header dial for one date column."""

    date: ISODate
    percentage: int
    not_expected_percentage: int
    is_today: bool


class MatrixGroup(TypedDict):
    """Habits grouped under one category (None = uncategorized)."""

    category_id: CategoryId | None
    category_name: str
    rows: list[MatrixRow]
    dials: list[MatrixDial]


class HabitMatrix(TypedDict):
    """Complete read-only habit matrix projection."""

    effective_today: ISODate
    date_columns: list[DateColumn]
    groups: list[MatrixGroup]


class HabitStats(TypedDict):
    """Detail statistics for a single habit."""

    habit_id: HabitId
    created_at: ISODate | None
    current_streak: int
    best_streak: int
    today: int
    this_month: int
    this_year: int
    all_time: int
