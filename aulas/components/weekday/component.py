"""
Weekday component - day of week for Gregorian dates.

Shell Layer - builds configuration from rules and converts argument errors
into output models.
"""

from __future__ import annotations

from datetime import date

from ._impl import WeekdayConfig, weekday_index, weekday_name
from .models import WeekdayInput, WeekdayOutput, WeekdayValidationError
from .ports import WeekdayRulesPort


def _build_config(rules: WeekdayRulesPort | None) -> WeekdayConfig:
    """Build weekday config from rules port."""
    if rules is None:
        return WeekdayConfig()

    return WeekdayConfig(
        min_year=rules.get_min_year(),
        names=tuple(rules.get_weekday_names()),
    )


# --- Component Entry Points ---


def run_weekday(
    inp: WeekdayInput,
    *,
    rules: WeekdayRulesPort | None = None,
) -> WeekdayOutput:
    """
    Compute the weekday of a date.

    Args:
        inp: Day, month and year.
        rules: Optional rules port for configuration.

    Returns:
        WeekdayOutput with the weekday index and name, or errors. Years
        past datetime.MAXYEAR are reported as errors since the date cannot
        be represented.
    """
    config = _build_config(rules)

    try:
        index = weekday_index(inp.day, inp.month, inp.year, config)
        day = date(inp.year, inp.month, inp.day)
    except (ValueError, OverflowError) as e:
        error = WeekdayValidationError(code="invalid_date", message=str(e), field="date")
        return WeekdayOutput(date=None, index=None, name=None, errors=(error,), success=False)

    return WeekdayOutput(
        date=day,
        index=index,
        name=weekday_name(index, config),
        errors=(),
        success=True,
    )
