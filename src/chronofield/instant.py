"""Instants: millisecond positions read through a chronology.

Instant is an immutable point on the time-line; MutableInstant can be moved.
Both hand out field properties that read the instant's position live:

    >>> instant = Instant.from_datetime(datetime(2024, 2, 29, 13, 45, tzinfo=UTC))
    >>> instant.get(DateTimeFieldType.HOUR_OF_DAY)
    13
    >>> str(instant.field_property(DateTimeFieldType.MONTH_OF_YEAR))
    'Property[month_of_year]'
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from .chronology import Chronology, iso_chronology
from .exceptions import IllegalFieldArgumentError
from .field.fieldtypes import DateTimeFieldType
from .field.property import InstantFieldProperty

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Instant:
    """Immutable millisecond position with a chronology.

    Attributes:
        chronology: Chronology used to compute field values (ISO by default)
    """

    _millis: int

    chronology: Chronology

    def __init__(self, millis: int = 0, chronology: Chronology | None = None) -> None:
        """Initialize an instant.

        Args:
            millis: Milliseconds since 1970-01-01T00:00:00Z
            chronology: Chronology for field values, None for the ISO chronology
        """
        self._millis = int(millis)
        self.chronology = chronology if chronology is not None else iso_chronology()

    @classmethod
    def from_datetime(cls, value: datetime, chronology: Chronology | None = None) -> Instant:
        """Create an instant from an offset-aware datetime.

        Raises:
            ValueError: If the datetime has no UTC offset
        """
        if value.utcoffset() is None:
            raise ValueError("Instant requires offset-aware datetimes")

        delta = value - _EPOCH
        millis = (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000
        return cls(millis, chronology)

    @property
    def millis(self) -> int:
        """Milliseconds since 1970-01-01T00:00:00Z."""
        return self._millis

    def to_datetime(self) -> datetime:
        """Convert to a UTC datetime."""
        return _EPOCH + timedelta(milliseconds=self._millis)

    def is_supported(self, field_type: DateTimeFieldType) -> bool:
        return self.chronology.is_supported(field_type)

    def get(self, field_type: DateTimeFieldType) -> int:
        """Get the value of a field at this instant.

        Raises:
            IllegalFieldArgumentError: If the field type is None or not supported by the chronology
        """
        if field_type is None:
            raise IllegalFieldArgumentError("The field type must not be None")
        return self.chronology.get_field(field_type).get(self._millis)

    def field_property(self, field_type: DateTimeFieldType) -> InstantFieldProperty:
        """Get a live property for a field of this instant.

        Raises:
            IllegalFieldArgumentError: If the field type is None or not supported by the chronology
        """
        if field_type is None:
            raise IllegalFieldArgumentError("The field type must not be None")
        return InstantFieldProperty(self, self.chronology.get_field(field_type))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis == other.millis and self.chronology == other.chronology

    def __hash__(self) -> int:
        return hash((self._millis, self.chronology))

    def __str__(self) -> str:
        return self.to_datetime().isoformat(timespec="milliseconds")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(millis={self._millis}, chronology={self.chronology!r})"


class MutableInstant(Instant):
    """Instant whose position can be changed in place.

    Not thread-safe. Properties obtained from a MutableInstant reflect every
    later change of its position.
    """

    __hash__ = None  # type: ignore[assignment]

    @property
    def millis(self) -> int:
        return self._millis

    @millis.setter
    def millis(self, value: int) -> None:
        self._millis = int(value)

    def set_millis(self, millis: int) -> None:
        self._millis = int(millis)

    def add_millis(self, millis: int) -> None:
        self._millis += int(millis)

