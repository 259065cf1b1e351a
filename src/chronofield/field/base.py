"""Field capability: converts millisecond positions into field values.

A DateTimeField is a stateless calculation unit for one field type. It never
holds a position itself; every method takes the position (milliseconds since
1970-01-01T00:00:00Z) it should compute from. The same field instance is shared
by every property and chronology that uses it.

Subclasses implement get(), round_floor(), the duration units and the overall
bounds. Text, leap, position dependent bounds and remainder have defaults
built from those.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .duration import DurationField
from .fieldtypes import DateTimeFieldType
from .text import get_symbols


class DateTimeField(ABC):
    """Abstract base class for all date-time fields.

    Attributes:
        type: The field type this field calculates
    """

    type: DateTimeFieldType

    def __init__(self, field_type: DateTimeFieldType) -> None:
        self.type = field_type

    @property
    def name(self) -> str:
        return str(self.type)

    # =========================================================================
    # Value
    # =========================================================================

    @abstractmethod
    def get(self, millis: int) -> int:
        """Get the value of this field at a millisecond position."""

    def get_as_text(self, millis: int, locale: str | None = None) -> str:
        """Get the text of the value at a position, e.g. "February" or "14".

        Args:
            millis: Millisecond position to query
            locale: Locale for the symbol, None for the platform default
        """
        return self.get_as_text_for_value(self.get(millis), locale)

    def get_as_short_text(self, millis: int, locale: str | None = None) -> str:
        """Get the abbreviated text of the value at a position, e.g. "Feb"."""
        return self.get_as_short_text_for_value(self.get(millis), locale)

    def get_as_text_for_value(self, value: int, locale: str | None = None) -> str:
        symbols = get_symbols(self.type, locale)
        if symbols is not None:
            text = symbols.get_text(value)
            if text is not None:
                return text
        return str(value)

    def get_as_short_text_for_value(self, value: int, locale: str | None = None) -> str:
        symbols = get_symbols(self.type, locale)
        if symbols is not None:
            text = symbols.get_text(value, short=True)
            if text is not None:
                return text
        return str(value)

    # =========================================================================
    # Units
    # =========================================================================

    @property
    @abstractmethod
    def duration_field(self) -> DurationField:
        """Unit of one step of the value, UnsupportedDurationField if none."""

    @property
    @abstractmethod
    def range_duration_field(self) -> DurationField | None:
        """Unit containing the full range of values, None if unbounded."""

    # =========================================================================
    # Leap
    # =========================================================================

    def is_leap(self, millis: int) -> bool:
        """True if the value at the position is a leap value (e.g. February 29)."""
        return False

    def get_leap_amount(self, millis: int) -> int:
        """Amount by which the value at the position is leap, 0 if not leap."""
        return 0

    @property
    def leap_duration_field(self) -> DurationField | None:
        """Unit of leap amounts, None if this field never leaps."""
        return None

    # =========================================================================
    # Bounds
    # =========================================================================

    @property
    @abstractmethod
    def minimum_value(self) -> int:
        """Smallest value this field can take at any position."""

    @property
    @abstractmethod
    def maximum_value(self) -> int:
        """Largest value this field can take at any position."""

    def get_minimum_value(self, millis: int | None = None) -> int:
        """Get the smallest valid value, at a position if one is given."""
        return self.minimum_value

    def get_maximum_value(self, millis: int | None = None) -> int:
        """Get the largest valid value, at a position if one is given."""
        return self.maximum_value

    def get_maximum_text_length(self, locale: str | None = None) -> int:
        """Upper bound on the length of get_as_text() over all values."""
        symbols = get_symbols(self.type, locale)
        if symbols is not None:
            return max(symbols.max_length(), self._maximum_digits())
        return self._maximum_digits()

    def get_maximum_short_text_length(self, locale: str | None = None) -> int:
        """Upper bound on the length of get_as_short_text() over all values."""
        symbols = get_symbols(self.type, locale)
        if symbols is not None:
            return max(symbols.max_length(short=True), self._maximum_digits())
        return self._maximum_digits()

    def _maximum_digits(self) -> int:
        return max(len(str(self.minimum_value)), len(str(self.maximum_value)))

    # =========================================================================
    # Rounding
    # =========================================================================

    @abstractmethod
    def round_floor(self, millis: int) -> int:
        """Round a position down to the start of its current field value."""

    def remainder(self, millis: int) -> int:
        """Milliseconds of the position not covered by the field value."""
        return millis - self.round_floor(millis)

    def __repr__(self) -> str:
        return f"DateTimeField[{self.name}]"
