"""Boundary normalisation and validation for engine inputs.

This module is the SINGLE SOURCE OF TRUTH for:
- Field defaults of habits, entries and settings
- Validation of caller-supplied data before it reaches the engines
- Building the date-keyed entry lookup the engines read from

The engines assume well-formed input and never validate. Storage adapters and
API handlers call the `build_*()` functions here once per snapshot.

### Build Functions
Each input type has a `build_<type>()` function that:
- Takes raw data (DATA_* keys)
- Applies field defaults and coerces types
- Raises EntityValidationError on invalid data

### Validation Functions
`validate_<type>_data()` returns a dict of errors {field: message}, empty if
valid, for callers that want to report problems without raising.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import voluptuous as vol

from . import const
from .type_defs import HabitData, HabitEntryData, SettingsData, TargetFrequency
from .utils.dt_utils import dt_iso, dt_parse_date

# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class EntityValidationError(Exception):
    """Validation error with field-specific information.

    Attributes:
        field: The DATA_* key (or ERROR_FIELD_* constant) that failed
        message: Human readable description of the problem
        placeholders: Optional values describing the rejected input

    Example:
        raise EntityValidationError(
            field=const.ERROR_FIELD_ENTRY_STATUS,
            message="Unknown status",
            placeholders={"value": "done"},
        )
    """

    def __init__(
        self,
        field: str,
        message: str,
        placeholders: dict[str, str] | None = None,
    ) -> None:
        """Initialize EntityValidationError.

        Args:
            field: The key of the field that failed validation
            message: Description of the failure
            placeholders: Optional dict describing the rejected value
        """
        self.field = field
        self.message = message
        self.placeholders = placeholders or {}
        super().__init__(f"{field}: {message}")


# ==============================================================================
# VALIDATORS
# ==============================================================================


def parse_boundary_date(value: Any) -> date | None:
    """Strictly parse a caller-supplied date, rejecting trailing text.

    Accepts date/datetime objects, "YYYY-MM-DD", "YYYY/MM/DD" and full ISO
    datetimes. Unlike dt_parse_date, the whole string must be a date.
    """
    if not isinstance(value, str):
        return dt_parse_date(value)

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(text, "%Y/%m/%d").date()
    except ValueError:
        return None


def validate_iso_date(value: Any) -> str:
    """Voluptuous validator normalising a date to YYYY-MM-DD.

    Raises:
        vol.Invalid: If the value is not a calendar date
    """
    parsed = parse_boundary_date(value)
    if parsed is None:
        raise vol.Invalid(f"Invalid date: {value!r}")
    return dt_iso(parsed)


def _optional_positive_int(minimum: int) -> vol.Any:
    return vol.Any(None, vol.All(vol.Coerce(int), vol.Range(min=minimum)))


def _validate_flag(data: dict[str, Any], key: str, field: str) -> bool:
    """Validate an optional boolean flag the same way settings flags are."""
    try:
        return vol.Boolean()(data.get(key, False))
    except vol.Invalid as err:
        raise EntityValidationError(
            field=field,
            message="Expected a boolean",
            placeholders={"value": str(data.get(key))},
        ) from err


def _invalid_to_errors(err: vol.MultipleInvalid, default_field: str) -> dict[str, str]:
    """Flatten voluptuous errors into {field: message}."""
    errors: dict[str, str] = {}
    for error in err.errors:
        field = str(error.path[0]) if error.path else default_field
        errors[field] = error.msg
    return errors


# ==============================================================================
# SCHEMAS
# ==============================================================================


def build_settings_schema() -> vol.Schema:
    """Return the voluptuous schema for engine settings."""
    return vol.Schema(
        {
            vol.Optional(
                const.DATA_SETTINGS_DAY_BOUNDARY_HOUR,
                default=const.DEFAULT_DAY_BOUNDARY_HOUR,
            ): vol.All(
                vol.Coerce(int),
                vol.Range(
                    min=const.MIN_DAY_BOUNDARY_HOUR, max=const.MAX_DAY_BOUNDARY_HOUR
                ),
            ),
            vol.Optional(
                const.DATA_SETTINGS_AUTO_MARK_PINK,
                default=const.DEFAULT_AUTO_MARK_PINK,
            ): vol.Boolean(),
            vol.Optional(
                const.DATA_SETTINGS_WEEK_START_DAY,
                default=const.DEFAULT_WEEK_START_DAY,
            ): vol.All(
                vol.Coerce(int),
                vol.Range(min=const.MIN_WEEK_START_DAY, max=const.MAX_WEEK_START_DAY),
            ),
        },
        extra=vol.REMOVE_EXTRA,
    )


def build_target_frequency_schema() -> vol.Schema:
    """Return the voluptuous schema for a habit target frequency."""
    return vol.Schema(
        {
            vol.Required(const.DATA_TARGET_TIMES): vol.All(
                vol.Coerce(int), vol.Range(min=1)
            ),
            vol.Optional(
                const.DATA_TARGET_PERIOD, default=const.DEFAULT_TARGET_PERIOD
            ): vol.In(const.TARGET_PERIODS),
            vol.Optional(
                const.DATA_TARGET_PERIOD_DAYS,
                default=const.DEFAULT_TARGET_PERIOD_DAYS,
            ): vol.All(vol.Coerce(int), vol.Range(min=1)),
        },
        extra=vol.REMOVE_EXTRA,
    )


def build_entry_schema() -> vol.Schema:
    """Return the voluptuous schema for a single habit entry."""
    return vol.Schema(
        {
            vol.Required(const.DATA_ENTRY_DATE): validate_iso_date,
            vol.Optional(
                const.DATA_ENTRY_STATUS, default=const.HABIT_STATUS_EMPTY
            ): vol.In(const.HABIT_STATUSES),
            vol.Optional(const.DATA_ENTRY_COUNT, default=None): _optional_positive_int(0),
            vol.Optional(const.DATA_ENTRY_NOTES, default=None): vol.Any(None, str),
            vol.Optional(const.DATA_ENTRY_HABIT_ID): vol.Any(None, str),
        },
        extra=vol.REMOVE_EXTRA,
    )


# ==============================================================================
# SETTINGS
# ==============================================================================


def validate_settings_data(data: dict[str, Any] | None) -> dict[str, str]:
    """Validate settings - returns {field: message}, empty when valid."""
    try:
        build_settings_schema()(dict(data or {}))
    except vol.MultipleInvalid as err:
        return _invalid_to_errors(err, const.ERROR_FIELD_SETTINGS)
    return {}


def build_settings(data: dict[str, Any] | None = None) -> SettingsData:
    """Build validated settings with defaults applied.

    Raises:
        EntityValidationError: If a setting is out of range or mistyped
    """
    try:
        validated = build_settings_schema()(dict(data or {}))
    except vol.MultipleInvalid as err:
        field, message = next(
            iter(_invalid_to_errors(err, const.ERROR_FIELD_SETTINGS).items())
        )
        const.LOGGER.debug("Rejected settings %s: %s", data, err)
        raise EntityValidationError(
            field=field,
            message=message,
            placeholders={"value": str((data or {}).get(field))},
        ) from err

    return {
        "day_boundary_hour": validated[const.DATA_SETTINGS_DAY_BOUNDARY_HOUR],
        "auto_mark_pink": validated[const.DATA_SETTINGS_AUTO_MARK_PINK],
        "week_start_day": validated[const.DATA_SETTINGS_WEEK_START_DAY],
    }


# ==============================================================================
# ENTRIES
# ==============================================================================


def build_entry(
    data: dict[str, Any], habit_id: str | None = None
) -> HabitEntryData:
    """Build a normalised habit entry.

    Raises:
        EntityValidationError: Missing/invalid date, unknown status or a
            negative count
    """
    try:
        validated = build_entry_schema()(dict(data))
    except vol.MultipleInvalid as err:
        field, message = next(
            iter(_invalid_to_errors(err, const.ERROR_FIELD_ENTRIES).items())
        )
        raise EntityValidationError(
            field=field,
            message=message,
            placeholders={"value": str(data.get(field))},
        ) from err

    entry: HabitEntryData = {
        "date": validated[const.DATA_ENTRY_DATE],
        "status": validated[const.DATA_ENTRY_STATUS],
        "count": validated[const.DATA_ENTRY_COUNT],
        "notes": validated[const.DATA_ENTRY_NOTES],
    }
    owner = habit_id or validated.get(const.DATA_ENTRY_HABIT_ID)
    if owner:
        entry["habit_id"] = owner
    return entry


def build_entry_lookup(
    raw_entries: Any, habit_id: str | None = None
) -> dict[str, HabitEntryData]:
    """Build the date-keyed entry lookup for a habit.

    Accepts either a list of entry dicts or a mapping of date → entry (or
    date → bare status string).

    Raises:
        EntityValidationError: If two entries share the same date, or an
            entry is invalid
    """
    if not raw_entries:
        return {}

    if isinstance(raw_entries, dict):
        items: list[dict[str, Any]] = []
        for key, value in raw_entries.items():
            if isinstance(value, str):
                items.append({const.DATA_ENTRY_DATE: key, const.DATA_ENTRY_STATUS: value})
            else:
                items.append({const.DATA_ENTRY_DATE: key, **dict(value)})
    elif isinstance(raw_entries, list):
        items = [dict(value) for value in raw_entries]
    else:
        raise EntityValidationError(
            field=const.ERROR_FIELD_ENTRIES,
            message="Entries must be a list or a date-keyed mapping",
        )

    lookup: dict[str, HabitEntryData] = {}
    for item in items:
        entry = build_entry(item, habit_id)
        if entry["date"] in lookup:
            raise EntityValidationError(
                field=const.ERROR_FIELD_ENTRY_DATE,
                message="Duplicate entry for date",
                placeholders={"value": entry["date"], "habit_id": str(habit_id)},
            )
        lookup[entry["date"]] = entry
    return lookup


# ==============================================================================
# HABITS
# ==============================================================================


def validate_habit_data(data: dict[str, Any]) -> dict[str, str]:
    """Validate habit business rules - returns {field: message}, empty if valid."""
    try:
        build_habit(data)
    except EntityValidationError as err:
        return {err.field: err.message}
    return {}


def build_habit(data: dict[str, Any], *, allow_children: bool = True) -> HabitData:
    """Build a complete habit dict ready for the engines.

    Rules:
        1. id is required
        2. created_at, when present, must be a valid date
        3. target_frequency, when present, must be valid
        4. daily_target, when present, must be >= 1
        5. Children are one level deep and parents have no entries

    Raises:
        EntityValidationError: On the first rule violated
    """
    habit_id = data.get(const.DATA_HABIT_ID)
    if not habit_id:
        raise EntityValidationError(
            field=const.ERROR_FIELD_HABIT_ID, message="Habit id is required"
        )
    habit_id = str(habit_id)

    created_raw = data.get(const.DATA_HABIT_CREATED_AT)
    created_at = parse_boundary_date(created_raw)
    if created_raw and created_at is None:
        raise EntityValidationError(
            field=const.ERROR_FIELD_CREATED_AT,
            message="Invalid creation date",
            placeholders={"value": str(created_raw)},
        )

    target_frequency: TargetFrequency | None = None
    if data.get(const.DATA_HABIT_TARGET_FREQUENCY):
        try:
            target_frequency = build_target_frequency_schema()(
                dict(data[const.DATA_HABIT_TARGET_FREQUENCY])
            )
        except vol.MultipleInvalid as err:
            raise EntityValidationError(
                field=const.ERROR_FIELD_TARGET_FREQUENCY,
                message=str(err),
            ) from err

    try:
        daily_target = _optional_positive_int(1)(data.get(const.DATA_HABIT_DAILY_TARGET))
    except vol.Invalid as err:
        raise EntityValidationError(
            field=const.ERROR_FIELD_DAILY_TARGET,
            message="Daily target must be a positive integer",
            placeholders={"value": str(data.get(const.DATA_HABIT_DAILY_TARGET))},
        ) from err

    raw_children = data.get(const.DATA_HABIT_CHILDREN) or []
    if raw_children and not allow_children:
        raise EntityValidationError(
            field=const.ERROR_FIELD_CHILDREN,
            message="Child habits cannot have children of their own",
            placeholders={"habit_id": habit_id},
        )
    children = [build_habit(child, allow_children=False) for child in raw_children]

    entries = build_entry_lookup(data.get(const.DATA_HABIT_ENTRIES), habit_id)
    if children and entries:
        raise EntityValidationError(
            field=const.ERROR_FIELD_ENTRIES,
            message="Parent habits derive their status and cannot have entries",
            placeholders={"habit_id": habit_id},
        )

    habit: HabitData = {
        "id": habit_id,
        "name": str(data.get(const.DATA_HABIT_NAME) or ""),
        "category_id": data.get(const.DATA_HABIT_CATEGORY_ID),
        "created_at": dt_iso(created_at) if created_at else None,
        "target_frequency": target_frequency,
        "on_track_when_gray": _validate_flag(
            data,
            const.DATA_HABIT_ON_TRACK_WHEN_GRAY,
            const.ERROR_FIELD_ON_TRACK_WHEN_GRAY,
        ),
        "daily_target": daily_target,
        "target_percentage": data.get(const.DATA_HABIT_TARGET_PERCENTAGE),
        "warning_percentage": data.get(const.DATA_HABIT_WARNING_PERCENTAGE),
        "sort_order": int(data.get(const.DATA_HABIT_SORT_ORDER) or 0),
        "is_deleted": _validate_flag(
            data, const.DATA_HABIT_IS_DELETED, const.ERROR_FIELD_IS_DELETED
        ),
        "children": children,
        "entries": entries,
    }
    return habit
