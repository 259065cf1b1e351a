"""Fields whose unit and range both have a fixed length in milliseconds."""

from __future__ import annotations

from .base import DateTimeField
from .duration import DurationField
from .fieldtypes import DateTimeFieldType


class PreciseDateTimeField(DateTimeField):
    """Field that counts whole units within a fixed-length range.

    The value at a position is ``(millis // unit) % range`` where range is the
    number of units in the range duration. Values run from 0 to range - 1,
    also for positions before 1970.

    Example:
        >>> hours = DurationField.for_type(DurationFieldType.HOURS)
        >>> days = DurationField.for_type(DurationFieldType.DAYS)
        >>> hour_of_day = PreciseDateTimeField(DateTimeFieldType.HOUR_OF_DAY, hours, days)
        >>> hour_of_day.get(3_600_000 * 26)
        2
    """

    _unit: DurationField
    _range_field: DurationField
    _range: int

    def __init__(self, field_type: DateTimeFieldType, unit: DurationField, range_field: DurationField) -> None:
        super().__init__(field_type)

        if not unit.is_precise or unit.unit_millis < 1:
            raise ValueError("Unit duration field must be precise")

        if not range_field.is_precise:
            raise ValueError("Range duration field must be precise")

        if range_field.unit_millis % unit.unit_millis != 0:
            raise ValueError("Range duration must be a whole multiple of the unit duration")

        self._unit = unit
        self._range_field = range_field
        self._range = range_field.unit_millis // unit.unit_millis

        if self._range < 2:
            raise ValueError("The effective range must be at least 2")

    @property
    def unit_millis(self) -> int:
        return self._unit.unit_millis

    @property
    def range(self) -> int:
        """Number of distinct values, e.g. 24 for hour of day."""
        return self._range

    def get(self, millis: int) -> int:
        return (millis // self._unit.unit_millis) % self._range

    @property
    def duration_field(self) -> DurationField:
        return self._unit

    @property
    def range_duration_field(self) -> DurationField:
        return self._range_field

    @property
    def minimum_value(self) -> int:
        return 0

    @property
    def maximum_value(self) -> int:
        return self._range - 1

    def round_floor(self, millis: int) -> int:
        return millis - millis % self._unit.unit_millis

    def remainder(self, millis: int) -> int:
        return millis % self._unit.unit_millis

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PreciseDateTimeField):
            return NotImplemented
        return (
            self.type is other.type
            and self._unit == other._unit
            and self._range_field == other._range_field
        )

    def __hash__(self) -> int:
        return hash((self.type, self._unit, self._range_field))
