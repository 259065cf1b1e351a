"""Duration units associated with date-time fields.

A DurationField describes the length of one unit of a field's value (the field
"hour of day" steps in hours) or of the period containing the field's range
(a day). Days and shorter units are precise; months and years vary in length
and report their average over the Gregorian cycle.

Fields without a unit of their own return UnsupportedDurationField rather
than None, so callers can always ask a unit for its type and support state.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .common import (
    MILLIS_PER_CENTURY,
    MILLIS_PER_DAY,
    MILLIS_PER_HALFDAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_MONTH,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
    MILLIS_PER_YEAR,
)
from .fieldtypes import DurationFieldType


@dataclass(frozen=True)
class DurationField:
    """A unit of time with its length in milliseconds.

    Attributes:
        type: Identity of the unit
        unit_millis: Length of one unit (average length if imprecise)
        is_precise: True if every unit has exactly unit_millis milliseconds
    """

    type: DurationFieldType
    unit_millis: int
    is_precise: bool = True

    @property
    def name(self) -> str:
        return str(self.type)

    @property
    def is_supported(self) -> bool:
        return True

    @staticmethod
    def for_type(duration_type: DurationFieldType) -> DurationField:
        """Get the standard ISO unit for a duration type.

        Returns:
            The shared DurationField, or the UnsupportedDurationField if the
            type has no fixed or average length (eras)
        """
        return _find_duration_field(duration_type)

    def __str__(self) -> str:
        return f"DurationField[{self.name}]"


@dataclass(frozen=True)
class UnsupportedDurationField(DurationField):
    """Sentinel unit for fields that have no duration of their own.

    Reports is_supported and is_precise as False and a unit length of 0.
    Use get_instance() to obtain the shared instance for a duration type.
    """

    unit_millis: int = 0
    is_precise: bool = False

    @property
    def is_supported(self) -> bool:
        return False

    @staticmethod
    def get_instance(duration_type: DurationFieldType) -> UnsupportedDurationField:
        return _unsupported_duration_field(duration_type)

    def __str__(self) -> str:
        return f"UnsupportedDurationField[{self.name}]"


# =============================================================================
# Standard ISO Units
# =============================================================================


_DurationTable: tuple[DurationField, ...] = (
    DurationField(DurationFieldType.CENTURIES, MILLIS_PER_CENTURY, is_precise=False),
    DurationField(DurationFieldType.YEARS, MILLIS_PER_YEAR, is_precise=False),
    DurationField(DurationFieldType.MONTHS, MILLIS_PER_MONTH, is_precise=False),
    DurationField(DurationFieldType.WEEKS, MILLIS_PER_WEEK),
    DurationField(DurationFieldType.DAYS, MILLIS_PER_DAY),
    DurationField(DurationFieldType.HALFDAYS, MILLIS_PER_HALFDAY),
    DurationField(DurationFieldType.HOURS, MILLIS_PER_HOUR),
    DurationField(DurationFieldType.MINUTES, MILLIS_PER_MINUTE),
    DurationField(DurationFieldType.SECONDS, MILLIS_PER_SECOND),
    DurationField(DurationFieldType.MILLIS, 1),
)


@lru_cache(maxsize=16)
def _unsupported_duration_field(duration_type: DurationFieldType) -> UnsupportedDurationField:
    return UnsupportedDurationField(duration_type)


@lru_cache(maxsize=16)
def _find_duration_field(duration_type: DurationFieldType) -> DurationField:
    for duration_field in _DurationTable:
        if duration_field.type is duration_type:
            return duration_field
    return _unsupported_duration_field(duration_type)
