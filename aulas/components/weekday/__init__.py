"""
Weekday component - day of week for Gregorian dates.
"""

from ._impl import (
    DEFAULT_CONFIG,
    WEEKDAY_NAMES,
    WeekdayConfig,
    days_in_month,
    is_leap_year,
    validate_date,
    validate_day,
    validate_month,
    validate_year,
    weekday,
    weekday_index,
    weekday_name,
)
from .component import run_weekday
from .models import WeekdayInput, WeekdayOutput, WeekdayValidationError
from .ports import WeekdayRulesPort

__all__ = [
    # Entry points
    "run_weekday",
    # Models
    "WeekdayInput",
    "WeekdayOutput",
    "WeekdayValidationError",
    # Ports
    "WeekdayRulesPort",
    # _impl
    "DEFAULT_CONFIG",
    "WEEKDAY_NAMES",
    "WeekdayConfig",
    "days_in_month",
    "is_leap_year",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
    "weekday",
    "weekday_index",
    "weekday_name",
]
