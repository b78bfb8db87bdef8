"""Tests for math_utils - exact half-up rounding and percentages."""

import pytest

from habitarcade.utils.math_utils import calculate_percentage, clamp, round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.5, 13), (0.5, 1), (33.33, 33), (66.67, 67), (2.5, 3), (0, 0)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        """Halves round up, unlike banker's rounding."""
        assert round_half_up(value) == expected


class TestCalculatePercentage:
    """Tests for calculate_percentage()."""

    @pytest.mark.parametrize(
        ("current", "total", "expected"),
        [
            (1, 3, 33),
            (2, 3, 67),
            (3, 4, 75),
            (0.5, 4, 13),
            (1.5, 3, 50),
            (4, 4, 100),
            (0, 4, 0),
        ],
    )
    def test_percentage(self, current: float, total: int, expected: int) -> None:
        """Percentages are whole numbers rounded half up."""
        assert calculate_percentage(current, total) == expected

    def test_zero_total(self) -> None:
        """Nothing counted scores 0 instead of dividing by zero."""
        assert calculate_percentage(5, 0) == 0


def test_clamp() -> None:
    """Values are bounded on both sides."""
    assert clamp(150, 0, 100) == 100
    assert clamp(-10, 0, 100) == 0
    assert clamp(50, 0, 100) == 50
