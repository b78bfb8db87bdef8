# File: utils/dt_utils.py
"""Date utilities for HabitArcade.

Pure Python date functions. Nothing here reads the system clock: every
function that needs "now" takes it as an argument so results are
deterministic and testable.

Functions:
    - dt_parse_date: Leniently parse date input (returns None on failure)
    - dt_as_date: Strictly coerce date input (raises ValueError)
    - dt_iso: Format a date as YYYY-MM-DD
    - dt_effective_date: Apply the day-boundary hour to a wall-clock instant
    - dt_is_effective_today: Compare a date to the effective today
    - dt_is_past / dt_is_future: Compare a date to an effective today
    - dt_date_range: Inclusive list of consecutive calendar days
    - dt_month_start / dt_year_start: Start of month/year containing a date
    - dt_period_bounds: Week/month/N-day period containing a date
    - dt_generate_date_columns: Matrix date columns ending on effective today
    - dt_display_range: Start/end ISO dates for a matrix window
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
import logging
from typing import TYPE_CHECKING

# Third-party date utilities
from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from ..type_defs import DateColumn

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

DEFAULT_DAY_BOUNDARY_HOUR = 6

PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIOD_DAYS = "days"

# Anchor for N-day periods when the habit has no creation date
PERIOD_EPOCH = date(1970, 1, 1)

# Saturday and Sunday in date.weekday() numbering
WEEKEND_DAYS = frozenset({5, 6})


# ==============================================================================
# Parsing / Formatting
# ==============================================================================


def dt_parse_date(value: date | datetime | str | None) -> date | None:
    """Safely parse date input into a `datetime.date`.

    Accepts:
    - `date` objects (returned as-is)
    - `datetime` objects (calendar date is taken, no timezone conversion)
    - "2025-04-07" (ISO format)
    - "2025-04-07T10:00:00" (ISO datetime, date part is used)
    - "2025/04/07"

    Args:
        value: Date input to parse, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass

    try:
        return datetime.strptime(text, "%Y/%m/%d").date()
    except ValueError:
        _LOGGER.debug("Unparseable date value: %s", value)
        return None


def dt_as_date(value: date | datetime | str) -> date:
    """Coerce date input to a `datetime.date`, rejecting bad values.

    Use at the boundary where the caller must hand over a well-formed date.

    Raises:
        ValueError: If the value cannot be parsed as a calendar date.
    """
    parsed = dt_parse_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed


def dt_iso(day: date) -> str:
    """Return a date as a YYYY-MM-DD string."""
    return day.isoformat()


# ==============================================================================
# Day Boundary
# ==============================================================================


def dt_effective_date(
    now: datetime, day_boundary_hour: int = DEFAULT_DAY_BOUNDARY_HOUR
) -> date:
    """Return the effective calendar date for a wall-clock instant.

    If the local hour of `now` is before the boundary hour the instant still
    belongs to the previous day. With a boundary of 0 this is the ordinary
    midnight rollover.

    Args:
        now: Wall-clock instant (local time, aware or naive)
        day_boundary_hour: Hour (0-23) at which a new day starts

    Returns:
        The effective date.

    Example:
        dt_effective_date(datetime(2024, 1, 2, 3, 0), 6) → date(2024, 1, 1)
        dt_effective_date(datetime(2024, 1, 2, 7, 0), 6) → date(2024, 1, 2)
    """
    if now.hour < day_boundary_hour:
        return now.date() - timedelta(days=1)
    return now.date()


def dt_is_effective_today(
    day: date | str,
    now: datetime,
    day_boundary_hour: int = DEFAULT_DAY_BOUNDARY_HOUR,
) -> bool:
    """Return True if `day` is the effective today for `now`."""
    return dt_as_date(day) == dt_effective_date(now, day_boundary_hour)


def dt_is_past(day: date | str, effective_today: date | str) -> bool:
    """Return True if `day` is strictly before the effective today."""
    return dt_as_date(day) < dt_as_date(effective_today)


def dt_is_future(day: date | str, effective_today: date | str) -> bool:
    """Return True if `day` is strictly after the effective today."""
    return dt_as_date(day) > dt_as_date(effective_today)


# ==============================================================================
# Ranges and Periods
# ==============================================================================


def dt_date_range(start: date | str, end: date | str) -> list[date]:
    """Return every calendar day from start to end, both inclusive.

    An inverted range (start after end) returns an empty list.
    """
    start_day = dt_as_date(start)
    end_day = dt_as_date(end)
    if start_day > end_day:
        return []
    return [
        start_day + timedelta(days=offset)
        for offset in range((end_day - start_day).days + 1)
    ]


def dt_month_start(day: date) -> date:
    """Return the first day of the month containing `day`."""
    return day.replace(day=1)


def dt_year_start(day: date) -> date:
    """Return January 1st of the year containing `day`."""
    return day.replace(month=1, day=1)


def dt_period_bounds(
    day: date,
    period: str,
    *,
    period_days: int = 7,
    anchor: date | None = None,
    week_start_day: int = 0,
) -> tuple[date, date]:
    """Return the (start, end) dates of the period containing `day`.

    Periods:
    - "week": seven days starting on `week_start_day` (0=Monday ... 6=Sunday)
    - "month": the calendar month
    - "days": consecutive blocks of `period_days` days counted from `anchor`
      (defaults to 1970-01-01 when the habit has no creation date)

    Raises:
        ValueError: Unknown period or non-positive period_days.
    """
    if period == PERIOD_WEEK:
        start = day - timedelta(days=(day.weekday() - week_start_day) % 7)
        return start, start + timedelta(days=6)

    if period == PERIOD_MONTH:
        start = dt_month_start(day)
        return start, start + relativedelta(months=1, days=-1)

    if period == PERIOD_DAYS:
        if period_days < 1:
            raise ValueError(f"period_days must be positive, got {period_days}")
        origin = anchor or PERIOD_EPOCH
        blocks = (day - origin).days // period_days
        start = origin + timedelta(days=blocks * period_days)
        return start, start + timedelta(days=period_days - 1)

    raise ValueError(f"Unknown period: {period}")


# ==============================================================================
# Matrix Columns
# ==============================================================================


def dt_generate_date_columns(
    days_to_show: int,
    now: datetime,
    day_boundary_hour: int = DEFAULT_DAY_BOUNDARY_HOUR,
    future_days: int = 0,
) -> list[DateColumn]:
    """Generate date columns for the habit matrix.

    The last non-future column is the effective today; `future_days` extra
    columns may follow it.

    Args:
        days_to_show: Number of columns up to and including effective today
        now: Wall-clock instant used to resolve effective today
        day_boundary_hour: Hour when the day starts
        future_days: Columns to append after effective today

    Returns:
        List of DateColumn dicts, oldest first.
    """
    effective_today = dt_effective_date(now, day_boundary_hour)
    first = effective_today - timedelta(days=days_to_show - 1)
    last = effective_today + timedelta(days=future_days)

    columns: list[DateColumn] = []
    for day in dt_date_range(first, last):
        columns.append(
            {
                "date": dt_iso(day),
                "day_of_week": day.strftime("%a"),
                "day_of_month": str(day.day),
                "is_today": day == effective_today,
                "is_weekend": day.weekday() in WEEKEND_DAYS,
                "is_past": day < effective_today,
                "is_future": day > effective_today,
            }
        )
    return columns


def dt_display_range(
    days_to_show: int,
    now: datetime,
    day_boundary_hour: int = DEFAULT_DAY_BOUNDARY_HOUR,
) -> tuple[str, str]:
    """Return (start, end) ISO dates for a matrix window ending on effective today."""
    effective_today = dt_effective_date(now, day_boundary_hour)
    start = effective_today - timedelta(days=days_to_show - 1)
    return dt_iso(start), dt_iso(effective_today)
