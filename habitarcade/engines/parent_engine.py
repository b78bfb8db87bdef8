"""Parent Engine - Pure logic for composite (parent) habit status.

A parent habit has no entries of its own. Its status on a date is derived from
its children's raw statuses with "pick one of several alternatives" semantics:
one successful child satisfies the parent.

Precedence (first match wins):
    1. Any child complete/extra        → complete
    2. All children na/exempt          → na
    3. Any child partial               → partial
    4. No child has an entry at all    → empty
    5. Otherwise                       → missed

ARCHITECTURE: Stateless engine, all methods are static and operate on the
habit dicts passed in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_as_date, dt_iso

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from ..type_defs import HabitData, HabitStatus, ISODate


class ParentEngine:
    """Pure logic engine for parent habit aggregation."""

    @staticmethod
    def is_parent(habit: HabitData) -> bool:
        """Return True if the habit has at least one live child habit."""
        return bool(ParentEngine.get_children(habit))

    @staticmethod
    def get_children(habit: HabitData) -> list[HabitData]:
        """Return the live (not deleted) child habits.

        Deleted children are hidden from consumers and never count toward
        the parent. Empty list for a regular habit.
        """
        return [
            child
            for child in habit.get(const.DATA_HABIT_CHILDREN) or []
            if not child.get(const.DATA_HABIT_IS_DELETED)
        ]

    @staticmethod
    def child_statuses(parent: HabitData, day: date | str) -> list[HabitStatus]:
        """Return the raw status of every child on `day`, in child order."""
        from .status_engine import StatusEngine

        target_day = dt_as_date(day)
        return [
            StatusEngine.entry_status(child, target_day)
            for child in ParentEngine.get_children(parent)
        ]

    @staticmethod
    def aggregate_statuses(statuses: Iterable[HabitStatus]) -> HabitStatus:
        """Reduce a set of child statuses to the parent status.

        An empty collection (parent without children) yields `empty`.
        """
        statuses = list(statuses)
        if not statuses:
            return const.HABIT_STATUS_EMPTY

        if any(status in const.SUCCESS_STATUSES for status in statuses):
            return const.HABIT_STATUS_COMPLETE

        if all(status in const.EXCLUDED_STATUSES for status in statuses):
            return const.HABIT_STATUS_NA

        if const.HABIT_STATUS_PARTIAL in statuses:
            return const.HABIT_STATUS_PARTIAL

        if all(status == const.HABIT_STATUS_EMPTY for status in statuses):
            return const.HABIT_STATUS_EMPTY

        return const.HABIT_STATUS_MISSED

    @staticmethod
    def computed_status(parent: HabitData, day: date | str) -> HabitStatus:
        """Return the derived status of a parent habit on `day`."""
        statuses = ParentEngine.child_statuses(parent, day)
        result = ParentEngine.aggregate_statuses(statuses)
        const.LOGGER.debug(
            "Parent %s on %s: children=%s → %s",
            parent.get(const.DATA_HABIT_ID),
            day,
            statuses,
            result,
        )
        return result

    @staticmethod
    def computed_status_map(
        parent: HabitData, dates: Iterable[date | str]
    ) -> dict[ISODate, HabitStatus]:
        """Return {ISO date: derived status} for every requested date."""
        status_map: dict[ISODate, HabitStatus] = {}
        for day in dates:
            target_day = dt_as_date(day)
            status_map[dt_iso(target_day)] = ParentEngine.computed_status(
                parent, target_day
            )
        return status_map

    @staticmethod
    def satisfying_children(parent: HabitData, day: date | str) -> list[str]:
        """Return ids of children whose complete/extra status satisfies the parent.

        Consumers use this to de-emphasise the remaining siblings.
        """
        from .status_engine import StatusEngine

        target_day = dt_as_date(day)
        return [
            str(child.get(const.DATA_HABIT_ID))
            for child in ParentEngine.get_children(parent)
            if StatusEngine.entry_status(child, target_day) in const.SUCCESS_STATUSES
        ]
