# File: helpers/__init__.py
"""Consumer-facing helper functions for HabitArcade.

Helpers compose the stateless engines into ready-to-render structures.
They never mutate their inputs.

Submodules:
    - matrix_helpers: Habit matrix groups, rows, cells, dials and stats

Usage:
    from .helpers import matrix_helpers
    from .helpers.matrix_helpers import build_habit_matrix
"""

from . import matrix_helpers

__all__ = ["matrix_helpers"]
