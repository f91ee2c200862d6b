"""
Weekday component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# --- Validation Errors ---


@dataclass(frozen=True)
class WeekdayValidationError:
    """Date validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class WeekdayInput:
    """Input for computing the weekday of a date."""

    day: int
    month: int
    year: int


# --- Output Models ---


@dataclass(frozen=True)
class WeekdayOutput:
    """Output from weekday computation."""

    date: date | None
    index: int | None
    name: str | None
    errors: tuple[WeekdayValidationError, ...]
    success: bool
