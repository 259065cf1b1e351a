"""Field properties: live, read-only views of one field of one instant.

A field property binds a DateTimeField to the millisecond position of an
instant and answers questions about the field at that position: its value,
text, bounds, leap state and remainder. The property holds no position of its
own. Every call reads the position again from the bound instant, so when the
instant is a MutableInstant the property follows its changes:

    >>> instant = MutableInstant(date_to_millis(date(2024, 2, 28)))
    >>> day = instant.field_property(DateTimeFieldType.DAY_OF_MONTH)
    >>> day.get(), day.is_leap()
    (28, False)
    >>> instant.add_millis(MILLIS_PER_DAY)
    >>> day.get(), day.is_leap()
    (29, True)

Properties are immutable and may be read from several threads at once. The
bound instant is not guarded; concurrent mutation of it is the caller's
responsibility.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..exceptions import IllegalFieldArgumentError
from .base import DateTimeField
from .duration import DurationField
from .fieldtypes import DateTimeFieldType

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class ReadableMoment(Protocol):
    """Any temporal value that reports field values in its own chronology.

    Moments may also provide ``is_supported(field_type) -> bool``. When they
    do, compare_to() checks it before reading the value.
    """

    def get(self, field_type: DateTimeFieldType) -> int:
        """Get the value of a field type, raising if it is not supported."""
        ...


class ReadableInstant(ReadableMoment, Protocol):
    """A moment located at a millisecond position."""

    @property
    def millis(self) -> int:
        ...


class AbstractFieldProperty(ABC):
    """Base class binding a date-time field to a millisecond position.

    Subclasses supply the field and the current position. Everything else is
    derived from ``(field, _get_millis())`` on every call and never cached.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def field(self) -> DateTimeField:
        """The field being used."""

    @abstractmethod
    def _get_millis(self) -> int:
        """Current millisecond position of the bound instant."""

    # =========================================================================
    # Identity
    # =========================================================================

    @property
    def field_type(self) -> DateTimeFieldType:
        return self.field.type

    @property
    def name(self) -> str:
        return self.field.name

    # =========================================================================
    # Value and text
    # =========================================================================

    def get(self) -> int:
        """Get the current value of the field."""
        return self.field.get(self._get_millis())

    def get_as_string(self) -> str:
        """Get the current value as a decimal string, independent of locale."""
        return str(self.get())

    def get_as_text(self, locale: str | None = None) -> str:
        """Get the current value as text, e.g. "February" for month of year.

        Args:
            locale: Locale for selecting the text symbol, None for the platform default
        """
        return self.field.get_as_text(self._get_millis(), locale)

    def get_as_short_text(self, locale: str | None = None) -> str:
        """Get the current value as abbreviated text, e.g. "Feb"."""
        return self.field.get_as_short_text(self._get_millis(), locale)

    # =========================================================================
    # Units
    # =========================================================================

    @property
    def duration_field(self) -> DurationField:
        """Unit of one step of the value, e.g. hours for hour of day.

        Never None: a field without a unit returns an UnsupportedDurationField.
        """
        return self.field.duration_field

    @property
    def range_duration_field(self) -> DurationField | None:
        """Unit containing the range, e.g. days for hour of day. None if the field has no range."""
        return self.field.range_duration_field

    # =========================================================================
    # Leap
    # =========================================================================

    def is_leap(self) -> bool:
        return self.field.is_leap(self._get_millis())

    def get_leap_amount(self) -> int:
        return self.field.get_leap_amount(self._get_millis())

    @property
    def leap_duration_field(self) -> DurationField | None:
        """Unit of leap amounts, None if the field never leaps."""
        return self.field.leap_duration_field

    # =========================================================================
    # Bounds
    # =========================================================================

    @property
    def minimum_value_overall(self) -> int:
        """Minimum value of the field ignoring the current position."""
        return self.field.get_minimum_value()

    @property
    def maximum_value_overall(self) -> int:
        """Maximum value of the field ignoring the current position."""
        return self.field.get_maximum_value()

    def get_minimum_value(self) -> int:
        """Minimum value of the field at the current position."""
        return self.field.get_minimum_value(self._get_millis())

    def get_maximum_value(self) -> int:
        """Maximum value of the field at the current position, e.g. 29 for day of month in February 2024."""
        return self.field.get_maximum_value(self._get_millis())

    def get_maximum_text_length(self, locale: str | None = None) -> int:
        return self.field.get_maximum_text_length(locale)

    def get_maximum_short_text_length(self, locale: str | None = None) -> int:
        return self.field.get_maximum_short_text_length(locale)

    def remainder(self) -> int:
        """Milliseconds of the current position finer than the field's unit."""
        return self.field.remainder(self._get_millis())

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare_to(self, moment: ReadableMoment | None) -> int:
        """Compare this field's value to the same field type of another moment.

        Only the projected field values are compared, not the instants, and
        the other moment may use a different chronology. For hour of day the
        other moment's hour of day is read in its own chronology.

        Args:
            moment: The moment to compare to

        Returns:
            -1 if this value is less, 0 if equal, 1 if greater

        Raises:
            IllegalFieldArgumentError: If moment is None or reports via is_supported()
                that it does not support this field type. Moments without
                is_supported() signal unsupported field types from get().
        """
        if moment is None:
            raise IllegalFieldArgumentError("The moment must not be None")

        field_type = self.field_type
        is_supported = getattr(moment, "is_supported", None)
        if is_supported is not None and not is_supported(field_type):
            _LOGGER.debug("Rejected comparison of %s with %r", field_type, moment)
            raise IllegalFieldArgumentError(f"Field '{field_type}' is not supported by {moment!r}")

        this_value = self.get()
        other_value = moment.get(field_type)
        if this_value < other_value:
            return -1
        if this_value > other_value:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AbstractFieldProperty):
            return NotImplemented
        return self.get() == other.get() and self.field == other.field

    def __hash__(self) -> int:
        return self.get() * 17 + hash(self.field)

    def __str__(self) -> str:
        return f"Property[{self.name}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.name!r})"


class InstantFieldProperty(AbstractFieldProperty):
    """Field property bound to an instant exposing a ``millis`` position.

    The instant is kept by reference and its position is read on every call.

    Attributes:
        instant: The bound instant
    """

    __slots__ = ("_instant", "_field")

    _instant: ReadableInstant
    _field: DateTimeField

    def __init__(self, instant: ReadableInstant, field: DateTimeField) -> None:
        if instant is None:
            raise IllegalFieldArgumentError("The instant must not be None")
        if field is None:
            raise IllegalFieldArgumentError("The field must not be None")

        self._instant = instant
        self._field = field

    @property
    def field(self) -> DateTimeField:
        return self._field

    @property
    def instant(self) -> ReadableInstant:
        return self._instant

    def _get_millis(self) -> int:
        return self._instant.millis
