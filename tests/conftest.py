"""Shared test fixtures for pyChronoField tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from src.chronofield.chronology import Chronology, iso_chronology, time_chronology
from src.chronofield.field.common import MILLIS_PER_HOUR, MILLIS_PER_MINUTE, MILLIS_PER_SECOND
from src.chronofield.field.gregorian import date_to_millis
from src.chronofield.instant import Instant, MutableInstant

# 2024-02-29T13:45:30.250Z: a leap day, Thursday, afternoon
LEAP_DAY_MILLIS = (
    date_to_millis(date(2024, 2, 29))
    + 13 * MILLIS_PER_HOUR
    + 45 * MILLIS_PER_MINUTE
    + 30 * MILLIS_PER_SECOND
    + 250
)


def millis_at(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, millis: int = 0) -> int:
    """Millisecond position of a UTC date and time."""
    return (
        date_to_millis(date(year, month, day))
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millis
    )


@pytest.fixture
def iso() -> Chronology:
    """ISO chronology with every field type."""
    return iso_chronology()


@pytest.fixture
def clock() -> Chronology:
    """Time-only chronology."""
    return time_chronology()


@pytest.fixture
def leap_day_instant() -> Instant:
    """Immutable instant at 2024-02-29T13:45:30.250Z."""
    return Instant(LEAP_DAY_MILLIS)


@pytest.fixture
def mutable_instant() -> MutableInstant:
    """Mutable instant starting at 2024-02-28T00:00:00.000Z."""
    return MutableInstant(millis_at(2024, 2, 28))


@pytest.fixture
def leap_day_millis() -> int:
    """Millisecond position of 2024-02-29T13:45:30.250Z."""
    return LEAP_DAY_MILLIS


@pytest.fixture(name="millis_at")
def millis_at_fixture() -> Callable[..., int]:
    """Helper building UTC millisecond positions."""
    return millis_at
