"""Field layer: field types, duration units, fields and field properties.

Positions are milliseconds since 1970-01-01T00:00:00Z (UTC).
"""

from .base import DateTimeField
from .duration import DurationField, UnsupportedDurationField
from .fieldtypes import DateTimeFieldType, DurationFieldType
from .precise import PreciseDateTimeField
from .property import AbstractFieldProperty, InstantFieldProperty, ReadableInstant, ReadableMoment

__all__ = [
    # Field types
    "DateTimeFieldType",
    "DurationFieldType",
    # Duration units
    "DurationField",
    "UnsupportedDurationField",
    # Fields
    "DateTimeField",
    "PreciseDateTimeField",
    # Properties
    "AbstractFieldProperty",
    "InstantFieldProperty",
    "ReadableInstant",
    "ReadableMoment",
]
