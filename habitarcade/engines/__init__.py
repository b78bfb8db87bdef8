"""Engine modules for HabitArcade.

Contains stateless computation engines:
- status_engine: Raw and display status per habit cell
- on_track_engine: Pacing of low-frequency habits against their target
- scoring_engine: Completion percentages and category dials
- streak_engine: Current and best streaks
- parent_engine: Composite status of parent habits
"""

# Use relative imports within package to avoid mypy module resolution issues
from .on_track_engine import OnTrackEngine
from .parent_engine import ParentEngine
from .scoring_engine import CompletionScore, DialScore, ScoringEngine
from .status_engine import StatusEngine
from .streak_engine import StreakEngine, StreakResult

__all__ = [
    "CompletionScore",
    "DialScore",
    "OnTrackEngine",
    "ParentEngine",
    "ScoringEngine",
    "StatusEngine",
    "StreakEngine",
    "StreakResult",
]
