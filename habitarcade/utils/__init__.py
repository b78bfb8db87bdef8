# File: utils/__init__.py
"""Pure Python utilities for HabitArcade.

Submodules:
    - dt_utils: Date parsing, day-boundary resolution, ranges and periods
    - math_utils: Half-up rounding and percentage calculations

Usage:
    from . import dt_utils
    from .math_utils import calculate_percentage
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
