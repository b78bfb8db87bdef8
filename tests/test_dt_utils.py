"""Tests for dt_utils - day boundary, ranges, periods and matrix columns.

Pure Python, no fixtures beyond plain datetimes.
"""

from datetime import date, datetime

import pytest

from habitarcade.utils.dt_utils import (
    dt_as_date,
    dt_date_range,
    dt_display_range,
    dt_effective_date,
    dt_generate_date_columns,
    dt_is_effective_today,
    dt_is_future,
    dt_is_past,
    dt_parse_date,
    dt_period_bounds,
)

# =============================================================================
# Day Boundary
# =============================================================================


class TestEffectiveDate:
    """Tests for dt_effective_date() and dt_is_effective_today()."""

    @pytest.mark.parametrize(
        ("now", "boundary", "expected"),
        [
            (datetime(2024, 1, 2, 3, 0), 6, date(2024, 1, 1)),
            (datetime(2024, 1, 2, 5, 59), 6, date(2024, 1, 1)),
            (datetime(2024, 1, 2, 6, 0), 6, date(2024, 1, 2)),
            (datetime(2024, 1, 2, 23, 59), 6, date(2024, 1, 2)),
            (datetime(2024, 1, 2, 0, 30), 0, date(2024, 1, 2)),
            (datetime(2024, 3, 1, 1, 0), 4, date(2024, 2, 29)),
        ],
    )
    def test_effective_date(self, now: datetime, boundary: int, expected: date) -> None:
        """Hours before the boundary belong to the previous day."""
        assert dt_effective_date(now, boundary) == expected

    def test_default_boundary_is_six(self) -> None:
        """Default boundary hour is 06:00."""
        assert dt_effective_date(datetime(2024, 1, 2, 5, 0)) == date(2024, 1, 1)

    def test_is_effective_today(self) -> None:
        """Compares a date against the effective date of now."""
        now = datetime(2024, 1, 6, 3, 0)
        assert dt_is_effective_today("2024-01-05", now, 6) is True
        assert dt_is_effective_today(date(2024, 1, 6), now, 6) is False
        assert dt_is_effective_today(date(2024, 1, 6), now, 0) is True

    def test_past_and_future(self) -> None:
        """Past and future are strict comparisons."""
        today = date(2024, 1, 5)
        assert dt_is_past("2024-01-04", today) is True
        assert dt_is_past(today, today) is False
        assert dt_is_future("2024-01-06", today) is True
        assert dt_is_future(today, today) is False


# =============================================================================
# Parsing
# =============================================================================


class TestParseDate:
    """Tests for dt_parse_date() and dt_as_date()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-01-05", date(2024, 1, 5)),
            ("2024-01-05T10:00:00+00:00", date(2024, 1, 5)),
            ("2024/01/05", date(2024, 1, 5)),
            (date(2024, 1, 5), date(2024, 1, 5)),
            (datetime(2024, 1, 5, 23, 0), date(2024, 1, 5)),
            ("not-a-date", None),
            ("", None),
            (None, None),
            (20240105, None),
        ],
    )
    def test_parse(self, value: object, expected: date | None) -> None:
        """Accepted formats parse, everything else returns None."""
        assert dt_parse_date(value) == expected  # type: ignore[arg-type]

    def test_as_date_rejects_invalid(self) -> None:
        """dt_as_date raises on unparseable input."""
        with pytest.raises(ValueError, match="Invalid date"):
            dt_as_date("2024-13-45")


# =============================================================================
# Ranges and Periods
# =============================================================================


class TestDateRange:
    """Tests for dt_date_range()."""

    def test_inclusive(self) -> None:
        """Both ends are included."""
        days = dt_date_range("2024-01-30", "2024-02-02")
        assert days == [
            date(2024, 1, 30),
            date(2024, 1, 31),
            date(2024, 2, 1),
            date(2024, 2, 2),
        ]

    def test_single_day(self) -> None:
        """Start equal to end yields one day."""
        assert dt_date_range("2024-01-05", "2024-01-05") == [date(2024, 1, 5)]

    def test_inverted_is_empty(self) -> None:
        """Start after end yields nothing."""
        assert dt_date_range("2024-01-05", "2024-01-01") == []


class TestPeriodBounds:
    """Tests for dt_period_bounds()."""

    def test_week_monday_start(self) -> None:
        """Friday 2024-01-05 sits in the Monday 01-01 week."""
        assert dt_period_bounds(date(2024, 1, 5), "week") == (
            date(2024, 1, 1),
            date(2024, 1, 7),
        )

    def test_week_sunday_start(self) -> None:
        """Sunday-based weeks start on the previous Sunday."""
        assert dt_period_bounds(date(2024, 1, 5), "week", week_start_day=6) == (
            date(2023, 12, 31),
            date(2024, 1, 6),
        )

    def test_week_on_start_day(self) -> None:
        """The start weekday itself opens a new week."""
        start, end = dt_period_bounds(date(2024, 1, 8), "week")
        assert (start, end) == (date(2024, 1, 8), date(2024, 1, 14))

    def test_month_leap_year(self) -> None:
        """Calendar month bounds handle February in a leap year."""
        assert dt_period_bounds(date(2024, 2, 10), "month") == (
            date(2024, 2, 1),
            date(2024, 2, 29),
        )

    def test_days_anchored(self) -> None:
        """N-day blocks count from the anchor."""
        assert dt_period_bounds(
            date(2024, 1, 5), "days", period_days=3, anchor=date(2024, 1, 1)
        ) == (date(2024, 1, 4), date(2024, 1, 6))

    def test_days_before_anchor(self) -> None:
        """Days before the anchor fall into earlier blocks."""
        assert dt_period_bounds(
            date(2023, 12, 31), "days", period_days=3, anchor=date(2024, 1, 1)
        ) == (date(2023, 12, 29), date(2023, 12, 31))

    def test_unknown_period(self) -> None:
        """Unknown periods raise ValueError."""
        with pytest.raises(ValueError, match="Unknown period"):
            dt_period_bounds(date(2024, 1, 5), "fortnight")

    def test_non_positive_period_days(self) -> None:
        """A zero-day block is rejected."""
        with pytest.raises(ValueError, match="period_days"):
            dt_period_bounds(date(2024, 1, 5), "days", period_days=0)


# =============================================================================
# Matrix Columns
# =============================================================================


class TestDateColumns:
    """Tests for dt_generate_date_columns() and dt_display_range()."""

    def test_columns_end_on_effective_today(self) -> None:
        """03:00 on the 6th still shows the 5th as today."""
        columns = dt_generate_date_columns(3, datetime(2024, 1, 6, 3, 0), 6)

        assert [col["date"] for col in columns] == [
            "2024-01-03",
            "2024-01-04",
            "2024-01-05",
        ]
        assert [col["is_today"] for col in columns] == [False, False, True]
        assert all(col["is_past"] for col in columns[:2])
        assert columns[-1]["day_of_week"] == "Fri"
        assert columns[-1]["day_of_month"] == "5"

    def test_future_columns(self) -> None:
        """future_days appends columns after today."""
        columns = dt_generate_date_columns(
            2, datetime(2024, 1, 5, 12, 0), 6, future_days=2
        )

        assert len(columns) == 4
        assert [col["is_future"] for col in columns] == [False, False, True, True]
        assert columns[2]["is_weekend"] is True  # Saturday 01-06

    def test_display_range(self) -> None:
        """Range covers days_to_show days ending on effective today."""
        assert dt_display_range(7, datetime(2024, 1, 5, 12, 0)) == (
            "2023-12-30",
            "2024-01-05",
        )
