"""
Day of week - Gregorian calendar date to weekday name.

Functional Core - pure functions, no I/O.

Key behaviors:
- Zeller-style congruence; January and February count as months 13 and 14
  of the previous year
- Index 0 is Monday, index 6 is Sunday
- Dates are validated before computing: month 1..12, day within the month
  (leap years honoured), year not before the configured minimum (1754)
"""

from __future__ import annotations

from dataclasses import dataclass

from aulas.domain.errors import InvalidArgumentError

# --- Configuration ---

WEEKDAY_NAMES: tuple[str, ...] = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class WeekdayConfig:
    """Weekday configuration from rules."""

    min_year: int = 1754
    names: tuple[str, ...] = WEEKDAY_NAMES


DEFAULT_CONFIG = WeekdayConfig()


# --- Validation Functions ---


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in the given month of the given year."""
    validate_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_month(month: int) -> None:
    if month is None:
        raise InvalidArgumentError("argument is None")
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"invalid month: {month}")


def validate_year(year: int, config: WeekdayConfig = DEFAULT_CONFIG) -> None:
    if year is None:
        raise InvalidArgumentError("argument is None")
    if year < config.min_year:
        raise InvalidArgumentError(f"invalid year: {year}")


def validate_day(day: int, month: int = 1, year: int = 2000) -> None:
    """Validate a day of month; month and year bound the upper limit."""
    if day is None:
        raise InvalidArgumentError("argument is None")
    if day < 1 or day > days_in_month(month, year):
        raise InvalidArgumentError(f"invalid day: {day}")


def validate_date(
    day: int,
    month: int,
    year: int,
    config: WeekdayConfig = DEFAULT_CONFIG,
) -> None:
    """Validate a full calendar date."""
    validate_month(month)
    validate_year(year, config)
    validate_day(day, month, year)


# --- Weekday Computation ---


def weekday_name(index: int, config: WeekdayConfig = DEFAULT_CONFIG) -> str:
    """Name for a weekday index (0 = Monday ... 6 = Sunday)."""
    if index < 0 or index > 6:
        raise InvalidArgumentError(
            f"invalid weekday index: {index}. Index must be between 0 and 6."
        )
    return config.names[index]


def weekday_index(
    day: int,
    month: int,
    year: int,
    config: WeekdayConfig = DEFAULT_CONFIG,
) -> int:
    """
    Weekday index of a Gregorian date.

    Args:
        day: Day of month.
        month: Month, 1..12.
        year: Year, not before config.min_year.

    Returns:
        0 for Monday through 6 for Sunday.

    Raises:
        InvalidArgumentError: If the date is not a valid calendar date.
    """
    validate_date(day, month, year, config)

    if month in (1, 2):
        month += 12
        year -= 1

    partial = (
        day
        + 2 * month
        + 3 * (month + 1) // 5
        + year
        + year // 4
        - year // 100
        + year // 400
    )

    return partial % 7


def weekday(
    day: int,
    month: int,
    year: int,
    config: WeekdayConfig = DEFAULT_CONFIG,
) -> str:
    """Weekday name of a Gregorian date, e.g. weekday(1, 1, 2000) == 'sábado'."""
    return weekday_name(weekday_index(day, month, year, config), config)
