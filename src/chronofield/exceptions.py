"""Chrono field exception classes."""

from __future__ import annotations


class ChronoError(Exception):
    """Base exception for all chrono field errors."""


class IllegalFieldArgumentError(ChronoError, ValueError):
    """Invalid argument passed to a field, property or chronology."""


class IllegalFieldValueError(ChronoError, ValueError):
    """Millisecond position or field value outside the supported range."""


class UnsupportedFieldOperationError(ChronoError, NotImplementedError):
    """Operation not supported by the field implementation."""
