"""Chronologies: named sets of date-time fields.

A Chronology maps each field type it supports to the DateTimeField computing
it. Two chronologies are provided:

    - iso_chronology(): proleptic Gregorian calendar in UTC, every field type
    - time_chronology(): time-of-day fields only, for clock values without a date

Both are cached; repeated calls return the same instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from .exceptions import IllegalFieldArgumentError
from .field.base import DateTimeField
from .field.duration import DurationField
from .field.fieldtypes import DateTimeFieldType
from .field.gregorian import (
    DayOfMonthField,
    DayOfWeekField,
    DayOfYearField,
    EraField,
    MonthOfYearField,
    YearField,
)
from .field.precise import PreciseDateTimeField

_LOGGER = logging.getLogger(__name__)


class Chronology:
    """Immutable mapping of field types to fields under a name.

    Attributes:
        name: Name identifying the chronology in debug output
    """

    name: str

    _fields: Mapping[DateTimeFieldType, DateTimeField]

    def __init__(self, name: str, fields: Iterable[DateTimeField]) -> None:
        """Initialize a chronology.

        Args:
            name: Chronology name
            fields: Fields to support, at most one per field type

        Raises:
            ValueError: If two fields share a field type
        """
        field_map: dict[DateTimeFieldType, DateTimeField] = {}
        for field in fields:
            if field.type in field_map:
                raise ValueError(f"Duplicate field for field type '{field.type}' in chronology {name}")
            field_map[field.type] = field

        self.name = name
        self._fields = MappingProxyType(field_map)

        _LOGGER.debug("Created chronology %s with %d fields", name, len(field_map))

    @property
    def field_types(self) -> frozenset[DateTimeFieldType]:
        return frozenset(self._fields)

    def is_supported(self, field_type: DateTimeFieldType) -> bool:
        return field_type in self._fields

    def get_field(self, field_type: DateTimeFieldType) -> DateTimeField:
        """Get the field for a field type.

        Raises:
            IllegalFieldArgumentError: If the field type is not supported
        """
        try:
            return self._fields[field_type]
        except KeyError:
            _LOGGER.debug("Field type %s requested from chronology %s", field_type, self.name)
            raise IllegalFieldArgumentError(
                f"Field '{field_type}' is not supported by chronology {self.name}"
            ) from None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Chronology):
            return NotImplemented
        return self.name == other.name and dict(self._fields) == dict(other._fields)

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self._fields)))

    def __reduce__(self) -> tuple[type[Chronology], tuple[str, tuple[DateTimeField, ...]]]:
        # Rebuilt from its fields; the read-only mapping view cannot be pickled
        return (Chronology, (self.name, tuple(self._fields.values())))

    def __repr__(self) -> str:
        return f"Chronology({self.name!r})"


# =============================================================================
# Standard Chronologies
# =============================================================================


def _precise_field(field_type: DateTimeFieldType) -> PreciseDateTimeField:
    range_duration_type = field_type.range_duration_type
    if range_duration_type is None:
        raise ValueError(f"Field type '{field_type}' has no range and cannot be precise")

    return PreciseDateTimeField(
        field_type,
        DurationField.for_type(field_type.duration_type),
        DurationField.for_type(range_duration_type),
    )


def _time_fields() -> list[DateTimeField]:
    return [_precise_field(field_type) for field_type in DateTimeFieldType if field_type.is_time_of_day]


@lru_cache(maxsize=1)
def iso_chronology() -> Chronology:
    """ISO-8601 chronology: proleptic Gregorian calendar in UTC."""
    return Chronology(
        "ISO[UTC]",
        [
            EraField(),
            YearField(),
            MonthOfYearField(),
            DayOfYearField(),
            DayOfMonthField(),
            DayOfWeekField(),
            *_time_fields(),
        ],
    )


@lru_cache(maxsize=1)
def time_chronology() -> Chronology:
    """Clock chronology supporting only time-of-day fields."""
    return Chronology("Time[UTC]", _time_fields())
