"""Locale text symbols for textual date-time fields.

Only fields with names (era, month of year, day of week, halfday of day) have
symbols; every other field renders its decimal value. Locales are plain
strings such as "de", "de_DE" or "fr-FR" and are matched on their language
part. Unknown languages fall back to DEFAULT_LOCALE.
"""

from __future__ import annotations

import locale as _platform_locale
import logging
from dataclasses import dataclass
from functools import lru_cache

from .common import DEFAULT_LOCALE
from .fieldtypes import DateTimeFieldType

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FieldSymbols:
    """Full and short symbols for a field, indexed from the field's minimum value.

    Attributes:
        minimum_value: Field value of the first symbol
        text: Full symbols ("January")
        short_text: Abbreviated symbols ("Jan")
    """

    minimum_value: int
    text: tuple[str, ...]
    short_text: tuple[str, ...]

    def get_text(self, value: int, short: bool = False) -> str | None:
        """Get the symbol for a value, None if the value has no symbol."""
        symbols = self.short_text if short else self.text
        index = value - self.minimum_value
        if 0 <= index < len(symbols):
            return symbols[index]
        return None

    def max_length(self, short: bool = False) -> int:
        symbols = self.short_text if short else self.text
        return max(len(symbol) for symbol in symbols)


# =============================================================================
# Symbol Tables
# =============================================================================


_SymbolTable: dict[str, dict[DateTimeFieldType, FieldSymbols]] = {
    "en": {
        DateTimeFieldType.ERA: FieldSymbols(
            minimum_value=0,
            text=("BC", "AD"),
            short_text=("BC", "AD"),
        ),
        DateTimeFieldType.MONTH_OF_YEAR: FieldSymbols(
            minimum_value=1,
            text=(
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ),
            short_text=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        ),
        DateTimeFieldType.DAY_OF_WEEK: FieldSymbols(
            minimum_value=1,
            text=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
            short_text=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
        ),
        DateTimeFieldType.HALFDAY_OF_DAY: FieldSymbols(
            minimum_value=0,
            text=("AM", "PM"),
            short_text=("AM", "PM"),
        ),
    },
    "de": {
        DateTimeFieldType.ERA: FieldSymbols(
            minimum_value=0,
            text=("v. Chr.", "n. Chr."),
            short_text=("v. Chr.", "n. Chr."),
        ),
        DateTimeFieldType.MONTH_OF_YEAR: FieldSymbols(
            minimum_value=1,
            text=(
                "Januar", "Februar", "März", "April", "Mai", "Juni",
                "Juli", "August", "September", "Oktober", "November", "Dezember",
            ),
            short_text=("Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
        ),
        DateTimeFieldType.DAY_OF_WEEK: FieldSymbols(
            minimum_value=1,
            text=("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
            short_text=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
        ),
        DateTimeFieldType.HALFDAY_OF_DAY: FieldSymbols(
            minimum_value=0,
            text=("AM", "PM"),
            short_text=("AM", "PM"),
        ),
    },
    "fr": {
        DateTimeFieldType.ERA: FieldSymbols(
            minimum_value=0,
            text=("av. J.-C.", "ap. J.-C."),
            short_text=("av. J.-C.", "ap. J.-C."),
        ),
        DateTimeFieldType.MONTH_OF_YEAR: FieldSymbols(
            minimum_value=1,
            text=(
                "janvier", "février", "mars", "avril", "mai", "juin",
                "juillet", "août", "septembre", "octobre", "novembre", "décembre",
            ),
            short_text=(
                "janv.", "févr.", "mars", "avr.", "mai", "juin",
                "juil.", "août", "sept.", "oct.", "nov.", "déc.",
            ),
        ),
        DateTimeFieldType.DAY_OF_WEEK: FieldSymbols(
            minimum_value=1,
            text=("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
            short_text=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
        ),
        DateTimeFieldType.HALFDAY_OF_DAY: FieldSymbols(
            minimum_value=0,
            text=("AM", "PM"),
            short_text=("AM", "PM"),
        ),
    },
}


# =============================================================================
# Locale Resolution
# =============================================================================


def language_of(locale: str | None) -> str:
    """Reduce a locale string to a supported language code.

    Args:
        locale: Locale such as "de_DE.UTF-8", "fr-FR" or "en", None for the platform default

    Returns:
        Language code present in the symbol table
    """
    if locale is None:
        locale = default_locale()

    language = locale.replace("-", "_").split(".")[0].split("_")[0].lower()
    if language in _SymbolTable:
        return language
    return DEFAULT_LOCALE


def default_locale() -> str:
    """Get the platform's time locale, DEFAULT_LOCALE if it is unset or unparsable."""
    try:
        platform_locale, _encoding = _platform_locale.getlocale(_platform_locale.LC_TIME)
    except ValueError:
        _LOGGER.debug("Unparsable LC_TIME locale, using %s", DEFAULT_LOCALE)
        return DEFAULT_LOCALE

    if not platform_locale or platform_locale in ("C", "POSIX"):
        return DEFAULT_LOCALE
    return platform_locale


@lru_cache(maxsize=64)
def _lookup_symbols(language: str, field_type: DateTimeFieldType) -> FieldSymbols | None:
    symbols = _SymbolTable[language].get(field_type)
    if symbols is None and language != DEFAULT_LOCALE:
        _LOGGER.debug("No %s symbols for %s, using %s", language, field_type, DEFAULT_LOCALE)
        symbols = _SymbolTable[DEFAULT_LOCALE].get(field_type)
    return symbols


def get_symbols(field_type: DateTimeFieldType, locale: str | None = None) -> FieldSymbols | None:
    """Get the text symbols of a field type in a locale.

    Returns:
        The symbols, or None if the field type renders as a number
    """
    return _lookup_symbols(language_of(locale), field_type)
