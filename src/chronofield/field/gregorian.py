"""Date fields of the proleptic Gregorian (ISO) calendar in UTC.

Positions are converted to dates through date ordinals, so the supported range
is the range of datetime.date: years 1 to 9999 (MIN_MILLIS to MAX_MILLIS).
Positions outside that range raise IllegalFieldValueError.

Leap values:
    - year: leap in leap years, by one day
    - month_of_year: February of a leap year, by one day
    - day_of_month: February 29
"""

from __future__ import annotations

import calendar
from abc import abstractmethod
from datetime import date

from ..exceptions import IllegalFieldValueError
from .base import DateTimeField
from .common import EPOCH_ORDINAL, MAX_MILLIS, MAX_YEAR, MILLIS_PER_DAY, MIN_MILLIS, MIN_YEAR
from .duration import DurationField, UnsupportedDurationField
from .fieldtypes import DateTimeFieldType, DurationFieldType

ERA_BC = 0
ERA_AD = 1


def millis_to_date(millis: int) -> date:
    """Convert a millisecond position to its UTC date.

    Raises:
        IllegalFieldValueError: If the position is outside years 1 to 9999
    """
    if not MIN_MILLIS <= millis <= MAX_MILLIS:
        raise IllegalFieldValueError(f"Millisecond position {millis} is outside the supported range")
    return date.fromordinal(EPOCH_ORDINAL + millis // MILLIS_PER_DAY)


def date_to_millis(value: date) -> int:
    """Convert a date to the millisecond position of its midnight UTC."""
    return (value.toordinal() - EPOCH_ORDINAL) * MILLIS_PER_DAY


class GregorianDateTimeField(DateTimeField):
    """Base class for Gregorian date fields.

    Fields are stateless, so two instances of the same class and type are equal.
    """

    def get(self, millis: int) -> int:
        return self._get_from_date(millis_to_date(millis))

    @abstractmethod
    def _get_from_date(self, value: date) -> int:
        """Extract the field value from a date."""

    @property
    def duration_field(self) -> DurationField:
        return DurationField.for_type(self.type.duration_type)

    @property
    def range_duration_field(self) -> DurationField | None:
        range_duration_type = self.type.range_duration_type
        if range_duration_type is None:
            return None
        return DurationField.for_type(range_duration_type)

    def round_floor(self, millis: int) -> int:
        millis_to_date(millis)
        return millis - millis % MILLIS_PER_DAY

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, GregorianDateTimeField):
            return NotImplemented
        return type(self) is type(other) and self.type is other.type

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.type))


class EraField(GregorianDateTimeField):
    """Era of the date: BC (0) or AD (1).

    Every supported date is AD. The era has no duration unit of its own and no
    range, so duration_field is the unsupported sentinel and range_duration_field
    is None.
    """

    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.ERA)

    def _get_from_date(self, value: date) -> int:
        return ERA_AD

    @property
    def duration_field(self) -> DurationField:
        return UnsupportedDurationField.get_instance(DurationFieldType.ERAS)

    @property
    def minimum_value(self) -> int:
        return ERA_BC

    @property
    def maximum_value(self) -> int:
        return ERA_AD

    def round_floor(self, millis: int) -> int:
        millis_to_date(millis)
        return MIN_MILLIS


class YearField(GregorianDateTimeField):
    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.YEAR)

    def _get_from_date(self, value: date) -> int:
        return value.year

    def is_leap(self, millis: int) -> bool:
        return calendar.isleap(self.get(millis))

    def get_leap_amount(self, millis: int) -> int:
        return 1 if self.is_leap(millis) else 0

    @property
    def leap_duration_field(self) -> DurationField:
        return DurationField.for_type(DurationFieldType.DAYS)

    @property
    def minimum_value(self) -> int:
        return MIN_YEAR

    @property
    def maximum_value(self) -> int:
        return MAX_YEAR

    def round_floor(self, millis: int) -> int:
        return date_to_millis(date(self.get(millis), 1, 1))


class MonthOfYearField(GregorianDateTimeField):
    """Month of the year, 1 (January) to 12 (December), with month names as text."""

    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.MONTH_OF_YEAR)

    def _get_from_date(self, value: date) -> int:
        return value.month

    def is_leap(self, millis: int) -> bool:
        value = millis_to_date(millis)
        return value.month == 2 and calendar.isleap(value.year)

    def get_leap_amount(self, millis: int) -> int:
        return 1 if self.is_leap(millis) else 0

    @property
    def leap_duration_field(self) -> DurationField:
        return DurationField.for_type(DurationFieldType.DAYS)

    @property
    def minimum_value(self) -> int:
        return 1

    @property
    def maximum_value(self) -> int:
        return 12

    def round_floor(self, millis: int) -> int:
        value = millis_to_date(millis)
        return date_to_millis(value.replace(day=1))


class DayOfYearField(GregorianDateTimeField):
    """Day of the year, 1 to 365 or 366 depending on the year."""

    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.DAY_OF_YEAR)

    def _get_from_date(self, value: date) -> int:
        return value.timetuple().tm_yday

    @property
    def minimum_value(self) -> int:
        return 1

    @property
    def maximum_value(self) -> int:
        return 366

    def get_maximum_value(self, millis: int | None = None) -> int:
        if millis is None:
            return self.maximum_value
        return 366 if calendar.isleap(millis_to_date(millis).year) else 365


class DayOfMonthField(GregorianDateTimeField):
    """Day of the month, 1 to 28-31 depending on month and year."""

    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.DAY_OF_MONTH)

    def _get_from_date(self, value: date) -> int:
        return value.day

    def is_leap(self, millis: int) -> bool:
        value = millis_to_date(millis)
        return value.month == 2 and value.day == 29

    def get_leap_amount(self, millis: int) -> int:
        return 1 if self.is_leap(millis) else 0

    @property
    def leap_duration_field(self) -> DurationField:
        return DurationField.for_type(DurationFieldType.DAYS)

    @property
    def minimum_value(self) -> int:
        return 1

    @property
    def maximum_value(self) -> int:
        return 31

    def get_maximum_value(self, millis: int | None = None) -> int:
        if millis is None:
            return self.maximum_value
        value = millis_to_date(millis)
        _first_weekday, days_in_month = calendar.monthrange(value.year, value.month)
        return days_in_month


class DayOfWeekField(GregorianDateTimeField):
    """ISO day of the week, 1 (Monday) to 7 (Sunday), with day names as text."""

    def __init__(self) -> None:
        super().__init__(DateTimeFieldType.DAY_OF_WEEK)

    def _get_from_date(self, value: date) -> int:
        return value.isoweekday()

    @property
    def minimum_value(self) -> int:
        return 1

    @property
    def maximum_value(self) -> int:
        return 7
