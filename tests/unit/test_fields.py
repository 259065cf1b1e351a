"""Unit tests for precise and Gregorian date-time fields."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from src.chronofield.exceptions import IllegalFieldValueError
from src.chronofield.field.base import DateTimeField
from src.chronofield.field.common import (
    MAX_MILLIS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_MILLIS,
)
from src.chronofield.field.duration import DurationField, UnsupportedDurationField
from src.chronofield.field.fieldtypes import DateTimeFieldType, DurationFieldType
from src.chronofield.field.gregorian import (
    DayOfMonthField,
    DayOfWeekField,
    DayOfYearField,
    EraField,
    MonthOfYearField,
    YearField,
    date_to_millis,
    millis_to_date,
)
from src.chronofield.field.precise import PreciseDateTimeField

HOURS = DurationField.for_type(DurationFieldType.HOURS)
MINUTES = DurationField.for_type(DurationFieldType.MINUTES)
DAYS = DurationField.for_type(DurationFieldType.DAYS)
MONTHS = DurationField.for_type(DurationFieldType.MONTHS)

# =============================================================================
# Precise Field Tests
# =============================================================================


class TestPreciseDateTimeField:
    """Tests for PreciseDateTimeField."""

    @pytest.fixture
    def hour_of_day(self) -> PreciseDateTimeField:
        return PreciseDateTimeField(DateTimeFieldType.HOUR_OF_DAY, HOURS, DAYS)

    @pytest.mark.parametrize(
        ("millis", "expected_value"),
        [
            (0, 0),
            (MILLIS_PER_HOUR - 1, 0),
            (MILLIS_PER_HOUR, 1),
            (26 * MILLIS_PER_HOUR, 2),
            (-1, 23),
            (-MILLIS_PER_DAY, 0),
        ],
        ids=["epoch", "end_of_first_hour", "one_hour", "next_day", "before_epoch", "day_before_epoch"],
    )
    def test_get(self, hour_of_day: PreciseDateTimeField, millis: int, expected_value: int) -> None:
        """Test value extraction including negative positions."""
        assert hour_of_day.get(millis) == expected_value

    def test_bounds_and_range(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test bounds derived from unit and range."""
        assert hour_of_day.range == 24
        assert hour_of_day.minimum_value == 0
        assert hour_of_day.maximum_value == 23
        assert hour_of_day.get_maximum_value(12345) == 23
        assert hour_of_day.unit_millis == MILLIS_PER_HOUR

    def test_round_floor_and_remainder(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test rounding to the hour and remainder."""
        millis = 5 * MILLIS_PER_HOUR + 7 * MILLIS_PER_MINUTE
        assert hour_of_day.round_floor(millis) == 5 * MILLIS_PER_HOUR
        assert hour_of_day.remainder(millis) == 7 * MILLIS_PER_MINUTE
        assert hour_of_day.round_floor(-1) == -MILLIS_PER_HOUR
        assert hour_of_day.remainder(-1) == MILLIS_PER_HOUR - 1

    def test_no_leap(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test that precise fields never leap."""
        assert hour_of_day.is_leap(0) is False
        assert hour_of_day.get_leap_amount(0) == 0
        assert hour_of_day.leap_duration_field is None

    def test_units(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test the unit and range duration fields."""
        assert hour_of_day.duration_field is HOURS
        assert hour_of_day.range_duration_field is DAYS

    def test_imprecise_unit_raises(self) -> None:
        """Test that imprecise units are rejected."""
        with pytest.raises(ValueError, match="Unit duration field must be precise"):
            PreciseDateTimeField(DateTimeFieldType.DAY_OF_MONTH, MONTHS, DAYS)

    def test_imprecise_range_raises(self) -> None:
        """Test that imprecise ranges are rejected."""
        with pytest.raises(ValueError, match="Range duration field must be precise"):
            PreciseDateTimeField(DateTimeFieldType.DAY_OF_MONTH, DAYS, MONTHS)

    def test_unsupported_unit_raises(self) -> None:
        """Test that the unsupported sentinel cannot be a unit."""
        with pytest.raises(ValueError, match="must be precise"):
            PreciseDateTimeField(
                DateTimeFieldType.ERA, UnsupportedDurationField.get_instance(DurationFieldType.ERAS), DAYS
            )

    def test_range_not_multiple_raises(self) -> None:
        """Test that the range must be a whole number of units."""
        seven_minutes = DurationField(DurationFieldType.MINUTES, 7 * MILLIS_PER_MINUTE)
        with pytest.raises(ValueError, match="whole multiple"):
            PreciseDateTimeField(DateTimeFieldType.MINUTE_OF_HOUR, seven_minutes, HOURS)

    def test_range_too_small_raises(self) -> None:
        """Test that a range of one unit is rejected."""
        with pytest.raises(ValueError, match="at least 2"):
            PreciseDateTimeField(DateTimeFieldType.HOUR_OF_DAY, HOURS, HOURS)

    def test_equality(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test equality by type, unit and range."""
        assert hour_of_day == PreciseDateTimeField(DateTimeFieldType.HOUR_OF_DAY, HOURS, DAYS)
        assert hash(hour_of_day) == hash(PreciseDateTimeField(DateTimeFieldType.HOUR_OF_DAY, HOURS, DAYS))
        assert hour_of_day != PreciseDateTimeField(DateTimeFieldType.MINUTE_OF_DAY, MINUTES, DAYS)
        assert hour_of_day != DayOfMonthField()

    def test_numeric_text(self, hour_of_day: PreciseDateTimeField) -> None:
        """Test that numeric fields render their value."""
        assert hour_of_day.get_as_text(9 * MILLIS_PER_HOUR, "en") == "9"
        assert hour_of_day.get_as_short_text(9 * MILLIS_PER_HOUR, "de") == "9"
        assert hour_of_day.get_maximum_text_length("en") == 2

    def test_repr(self, hour_of_day: PreciseDateTimeField) -> None:
        assert repr(hour_of_day) == "DateTimeField[hour_of_day]"


# =============================================================================
# Gregorian Field Tests
# =============================================================================


class TestDateConversion:
    """Tests for millis_to_date and date_to_millis."""

    def test_epoch(self) -> None:
        """Test the epoch converts to 1970-01-01."""
        assert millis_to_date(0).isoformat() == "1970-01-01"
        assert millis_to_date(-1).isoformat() == "1969-12-31"

    def test_round_trip_of_midnight(self, millis_at: Callable[..., int]) -> None:
        """Test that midnight positions convert back to the same date."""
        millis = millis_at(2024, 2, 29)
        assert date_to_millis(millis_to_date(millis)) == millis

    @pytest.mark.parametrize("millis", [MIN_MILLIS - 1, MAX_MILLIS + 1], ids=["before_year_1", "after_year_9999"])
    def test_out_of_range_raises(self, millis: int) -> None:
        """Test that positions outside years 1 to 9999 raise."""
        with pytest.raises(IllegalFieldValueError, match="outside the supported range"):
            millis_to_date(millis)

    def test_range_limits(self) -> None:
        """Test the first and last supported positions."""
        assert millis_to_date(MIN_MILLIS).isoformat() == "0001-01-01"
        assert millis_to_date(MAX_MILLIS).isoformat() == "9999-12-31"


class TestGregorianFields:
    """Tests for the Gregorian date fields at 2024-02-29T13:45:30.250Z."""

    @pytest.mark.parametrize(
        ("field", "expected_value"),
        [
            (EraField(), 1),
            (YearField(), 2024),
            (MonthOfYearField(), 2),
            (DayOfYearField(), 60),
            (DayOfMonthField(), 29),
            (DayOfWeekField(), 4),
        ],
        ids=["era", "year", "month", "day_of_year", "day_of_month", "day_of_week"],
    )
    def test_get(self, leap_day_millis: int, field: DateTimeField, expected_value: int) -> None:
        """Test field values on a leap day."""
        assert field.get(leap_day_millis) == expected_value

    @pytest.mark.parametrize(
        ("field", "date_parts"),
        [
            (YearField(), (2024, 1, 1)),
            (MonthOfYearField(), (2024, 2, 1)),
            (DayOfYearField(), (2024, 2, 29)),
            (DayOfMonthField(), (2024, 2, 29)),
            (DayOfWeekField(), (2024, 2, 29)),
        ],
        ids=["year", "month", "day_of_year", "day_of_month", "day_of_week"],
    )
    def test_round_floor(
        self,
        leap_day_millis: int,
        millis_at: Callable[..., int],
        field: DateTimeField,
        date_parts: tuple[int, int, int],
    ) -> None:
        """Test rounding down to the start of the field value."""
        assert field.round_floor(leap_day_millis) == millis_at(*date_parts)
        assert field.remainder(leap_day_millis) == leap_day_millis - millis_at(*date_parts)

    def test_era_units_and_floor(self, leap_day_millis: int) -> None:
        """Test that the era has the unsupported unit and no range."""
        era = EraField()
        assert era.duration_field is UnsupportedDurationField.get_instance(DurationFieldType.ERAS)
        assert era.range_duration_field is None
        assert era.round_floor(leap_day_millis) == MIN_MILLIS
        assert era.get_as_text(leap_day_millis, "fr") == "ap. J.-C."
        assert era.get_as_text_for_value(0, "en") == "BC"

    def test_year_units(self) -> None:
        """Test that the year has an imprecise unit and no range."""
        year = YearField()
        assert year.duration_field.type is DurationFieldType.YEARS
        assert year.duration_field.is_precise is False
        assert year.range_duration_field is None
        assert year.leap_duration_field is DAYS

    def test_day_of_year_maximum(self, millis_at: Callable[..., int]) -> None:
        """Test that the day of year maximum depends on the year."""
        field = DayOfYearField()
        assert field.get_maximum_value() == 366
        assert field.get_maximum_value(millis_at(2024, 7, 1)) == 366
        assert field.get_maximum_value(millis_at(2023, 7, 1)) == 365
        assert field.get(millis_at(2024, 12, 31)) == 366

    def test_day_of_month_maximum(self, millis_at: Callable[..., int]) -> None:
        """Test that the day of month maximum follows the month."""
        field = DayOfMonthField()
        assert field.get_maximum_value() == 31
        assert field.get_maximum_value(millis_at(2100, 2, 1)) == 28
        assert field.get_maximum_value(millis_at(2000, 2, 1)) == 29

    def test_month_text(self, millis_at: Callable[..., int]) -> None:
        """Test month names in each locale."""
        field = MonthOfYearField()
        millis = millis_at(2023, 3, 15)
        assert field.get_as_text(millis, "en") == "March"
        assert field.get_as_text(millis, "de") == "März"
        assert field.get_as_short_text(millis, "fr") == "mars"

    def test_day_of_week_text(self, millis_at: Callable[..., int]) -> None:
        """Test day names for a Sunday."""
        field = DayOfWeekField()
        millis = millis_at(2024, 3, 3)
        assert field.get(millis) == 7
        assert field.get_as_text(millis, "en") == "Sunday"
        assert field.get_as_short_text(millis, "fr") == "dim."

    @pytest.mark.parametrize(
        ("field", "locale", "expected_length", "expected_short_length"),
        [
            (MonthOfYearField(), "en", 9, 3),
            (MonthOfYearField(), "fr", 9, 5),
            (DayOfWeekField(), "de", 10, 2),
            (EraField(), "fr", 9, 9),
            (YearField(), "en", 4, 4),
            (DayOfMonthField(), "en", 2, 2),
        ],
        ids=["month_en", "month_fr", "weekday_de", "era_fr", "year", "day_of_month"],
    )
    def test_maximum_text_lengths(
        self, field: DateTimeField, locale: str, expected_length: int, expected_short_length: int
    ) -> None:
        """Test maximum text lengths per locale."""
        assert field.get_maximum_text_length(locale) == expected_length
        assert field.get_maximum_short_text_length(locale) == expected_short_length

    def test_out_of_range_propagates(self) -> None:
        """Test that fields reject positions outside the supported range."""
        with pytest.raises(IllegalFieldValueError):
            YearField().get(MAX_MILLIS + 1)
        with pytest.raises(IllegalFieldValueError):
            DayOfMonthField().is_leap(MIN_MILLIS - 1)

    def test_equality(self) -> None:
        """Test that Gregorian fields are equal by class and type."""
        assert YearField() == YearField()
        assert hash(YearField()) == hash(YearField())
        assert YearField() != MonthOfYearField()
        assert DayOfMonthField() != DayOfWeekField()

    def test_year_boundary_values(self) -> None:
        """Test the first and last supported moments."""
        assert YearField().get(MIN_MILLIS) == 1
        assert YearField().get(MAX_MILLIS) == 9999
        assert DayOfMonthField().get(MAX_MILLIS) == 31

    def test_time_within_day_does_not_change_date(self, millis_at: Callable[..., int]) -> None:
        """Test that the last millisecond of a day is still that day."""
        millis = millis_at(2024, 2, 29) + MILLIS_PER_DAY - 1
        assert DayOfMonthField().get(millis) == 29
        assert DayOfMonthField().get(millis + 1) == 1
        assert DayOfMonthField().remainder(millis) == MILLIS_PER_DAY - 1
        assert MonthOfYearField().remainder(millis_at(2024, 3, 1, 0, 0, 1)) == MILLIS_PER_SECOND
