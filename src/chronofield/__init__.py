"""pyChronoField: live, read-only field properties for temporal values.

A field property binds one calendar/time field (hour of day, day of month) to
an instant and exposes its value, text, bounds, leap state and remainder,
always re-read from the instant's current position.
"""

from __future__ import annotations

from .chronology import Chronology, iso_chronology, time_chronology
from .exceptions import (
    ChronoError,
    IllegalFieldArgumentError,
    IllegalFieldValueError,
    UnsupportedFieldOperationError,
)
from .field import (
    AbstractFieldProperty,
    DateTimeField,
    DateTimeFieldType,
    DurationField,
    DurationFieldType,
    InstantFieldProperty,
    ReadableMoment,
    UnsupportedDurationField,
)
from .instant import Instant, MutableInstant

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Field properties
    "AbstractFieldProperty",
    "InstantFieldProperty",
    "ReadableMoment",
    # Fields and units
    "DateTimeField",
    "DateTimeFieldType",
    "DurationField",
    "DurationFieldType",
    "UnsupportedDurationField",
    # Chronologies and instants
    "Chronology",
    "Instant",
    "MutableInstant",
    "iso_chronology",
    "time_chronology",
    # Exceptions
    "ChronoError",
    "IllegalFieldArgumentError",
    "IllegalFieldValueError",
    "UnsupportedFieldOperationError",
]
