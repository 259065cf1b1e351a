"""Identities of duration units and date-time fields.

DurationFieldType names a unit of time (hours, days, months). DateTimeFieldType
names a calendar/time component (hour of day, day of month) and knows which
unit one step of its value spans and which unit contains its full range.

Example:
    hour_of_day has duration type HOURS and range duration type DAYS,
    year has duration type YEARS and no range duration type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache


class DurationFieldType(StrEnum):
    """Units of time, ordered from largest to smallest."""

    ERAS = "eras"
    CENTURIES = "centuries"
    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HALFDAYS = "halfdays"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLIS = "millis"


_TIME_DURATION_TYPES = frozenset(
    {
        DurationFieldType.HALFDAYS,
        DurationFieldType.HOURS,
        DurationFieldType.MINUTES,
        DurationFieldType.SECONDS,
        DurationFieldType.MILLIS,
    }
)


class DateTimeFieldType(StrEnum):
    """Calendar and time-of-day fields.

    The string value is the field name used in debug output, e.g.
    ``str(DateTimeFieldType.HOUR_OF_DAY) == "hour_of_day"``.
    """

    ERA = "era"
    YEAR = "year"
    MONTH_OF_YEAR = "month_of_year"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_WEEK = "day_of_week"
    HALFDAY_OF_DAY = "halfday_of_day"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE_OF_DAY = "minute_of_day"
    MINUTE_OF_HOUR = "minute_of_hour"
    SECOND_OF_DAY = "second_of_day"
    SECOND_OF_MINUTE = "second_of_minute"
    MILLIS_OF_DAY = "millis_of_day"
    MILLIS_OF_SECOND = "millis_of_second"

    @property
    def duration_type(self) -> DurationFieldType:
        """Unit spanned by one step of this field's value."""
        return _find_field_type_descriptor(self).duration_type

    @property
    def range_duration_type(self) -> DurationFieldType | None:
        """Unit containing the full range of this field, None if unbounded."""
        return _find_field_type_descriptor(self).range_duration_type

    @property
    def is_time_of_day(self) -> bool:
        """True if the field is fully determined by the time within a day."""
        return self.duration_type in _TIME_DURATION_TYPES


# =============================================================================
# Field Type Descriptors
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class _FieldTypeDescriptor:
    field_type: DateTimeFieldType
    duration_type: DurationFieldType
    range_duration_type: DurationFieldType | None = None


_FieldTypeTable: tuple[_FieldTypeDescriptor, ...] = (
    # Date fields
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.ERA,
        duration_type=DurationFieldType.ERAS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.YEAR,
        duration_type=DurationFieldType.YEARS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.MONTH_OF_YEAR,
        duration_type=DurationFieldType.MONTHS,
        range_duration_type=DurationFieldType.YEARS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.DAY_OF_YEAR,
        duration_type=DurationFieldType.DAYS,
        range_duration_type=DurationFieldType.YEARS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.DAY_OF_MONTH,
        duration_type=DurationFieldType.DAYS,
        range_duration_type=DurationFieldType.MONTHS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.DAY_OF_WEEK,
        duration_type=DurationFieldType.DAYS,
        range_duration_type=DurationFieldType.WEEKS,
    ),
    # Time of day fields
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.HALFDAY_OF_DAY,
        duration_type=DurationFieldType.HALFDAYS,
        range_duration_type=DurationFieldType.DAYS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.HOUR_OF_DAY,
        duration_type=DurationFieldType.HOURS,
        range_duration_type=DurationFieldType.DAYS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.MINUTE_OF_DAY,
        duration_type=DurationFieldType.MINUTES,
        range_duration_type=DurationFieldType.DAYS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.MINUTE_OF_HOUR,
        duration_type=DurationFieldType.MINUTES,
        range_duration_type=DurationFieldType.HOURS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.SECOND_OF_DAY,
        duration_type=DurationFieldType.SECONDS,
        range_duration_type=DurationFieldType.DAYS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.SECOND_OF_MINUTE,
        duration_type=DurationFieldType.SECONDS,
        range_duration_type=DurationFieldType.MINUTES,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.MILLIS_OF_DAY,
        duration_type=DurationFieldType.MILLIS,
        range_duration_type=DurationFieldType.DAYS,
    ),
    _FieldTypeDescriptor(
        field_type=DateTimeFieldType.MILLIS_OF_SECOND,
        duration_type=DurationFieldType.MILLIS,
        range_duration_type=DurationFieldType.SECONDS,
    ),
)


@lru_cache(maxsize=32)
def _find_field_type_descriptor(field_type: DateTimeFieldType) -> _FieldTypeDescriptor:
    for descriptor in _FieldTypeTable:
        if descriptor.field_type is field_type:
            return descriptor
    raise ValueError(f"Field type {field_type!r} not found in field type table")
