"""HabitArcade - habit completion and streak scoring engine.

Pure computation over caller-supplied habit snapshots:
- Effective "today" resolution with a configurable day boundary
- Display status inference (pink "likely missed", gray "not expected yet")
- Completion percentages, category dials, streaks and parent habits

Validate raw data with `data_builders`, then call the engines or the
matrix helpers.
"""

from .data_builders import (
    EntityValidationError,
    build_entry,
    build_habit,
    build_settings,
)
from .engines import (
    CompletionScore,
    DialScore,
    OnTrackEngine,
    ParentEngine,
    ScoringEngine,
    StatusEngine,
    StreakEngine,
    StreakResult,
)
from .helpers.matrix_helpers import build_habit_matrix, build_habit_stats
from .utils.dt_utils import dt_effective_date

__all__ = [
    "CompletionScore",
    "DialScore",
    "EntityValidationError",
    "OnTrackEngine",
    "ParentEngine",
    "ScoringEngine",
    "StatusEngine",
    "StreakEngine",
    "StreakResult",
    "build_entry",
    "build_habit",
    "build_habit_matrix",
    "build_habit_stats",
    "build_settings",
    "dt_effective_date",
]
