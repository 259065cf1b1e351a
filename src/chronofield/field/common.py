"""Common constants shared across field components.

All positions are milliseconds since 1970-01-01T00:00:00Z on the proleptic
Gregorian calendar.
"""

from datetime import date

# =============================================================================
# Unit lengths in milliseconds
# =============================================================================

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_HALFDAY = 12 * MILLIS_PER_HOUR
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR
MILLIS_PER_WEEK = 7 * MILLIS_PER_DAY

# Average lengths over the 400 year Gregorian cycle (146097 days)
MILLIS_PER_YEAR = 31_556_952_000
MILLIS_PER_MONTH = MILLIS_PER_YEAR // 12
MILLIS_PER_CENTURY = 100 * MILLIS_PER_YEAR

# =============================================================================
# Supported range
# =============================================================================

EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

MIN_YEAR = date.min.year
MAX_YEAR = date.max.year

MIN_MILLIS = (date.min.toordinal() - EPOCH_ORDINAL) * MILLIS_PER_DAY  # 0001-01-01T00:00:00.000Z
MAX_MILLIS = (date.max.toordinal() - EPOCH_ORDINAL + 1) * MILLIS_PER_DAY - 1  # 9999-12-31T23:59:59.999Z

# =============================================================================
# Locale
# =============================================================================

DEFAULT_LOCALE = "en"  # Fallback when the platform locale is unset or unknown
