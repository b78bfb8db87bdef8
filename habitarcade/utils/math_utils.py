# File: utils/math_utils.py
"""Math and calculation utilities for HabitArcade.

Pure Python math functions shared by the scoring engine and helpers.

Functions:
    - round_half_up: Round to the nearest integer, halves rounding up
    - calculate_percentage: Whole-number percentage with zero protection
    - clamp: Bound a value to a range
"""

from __future__ import annotations

from fractions import Fraction
import math


def round_half_up(value: float | Fraction) -> int:
    """Round to the nearest integer, with exact halves rounding up.

    Python's built-in round() uses banker's rounding (round(12.5) == 12),
    which would make percentages drift downwards on exact halves.

    Examples:
        round_half_up(12.5) → 13
        round_half_up(33.33) → 33
        round_half_up(66.67) → 67
    """
    return math.floor(Fraction(value) + Fraction(1, 2))


def calculate_percentage(current: float, total: float) -> int:
    """Calculate a whole-number percentage, rounding halves up.

    The computation is exact: scoring points are multiples of 0.5, so the
    inputs are converted to fractions before dividing.

    Args:
        current: Points earned (may include half points)
        total: Number of counted cells

    Returns:
        Percentage 0-100 as int, or 0 if total is 0

    Examples:
        calculate_percentage(1, 3) → 33
        calculate_percentage(2, 3) → 67
        calculate_percentage(0.5, 4) → 13
        calculate_percentage(5, 0) → 0  # Division by zero protection
    """
    if total <= 0:
        return 0
    return round_half_up(Fraction(current) * 100 / Fraction(total))


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
        clamp(50, 0, 100) → 50
    """
    return max(min_val, min(value, max_val))
