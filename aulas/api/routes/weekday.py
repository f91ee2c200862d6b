"""
Day of week route.

Key behaviors:
- `data` is parsed with the configured format (dd-MM-yyyy by default)
- Missing or unparseable `data` falls back to today's date
- `data2` is accepted for compatibility and ignored
- Dates the calculator rejects answer 422
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException

from aulas.adapters.clock import SystemClock
from aulas.api.deps import get_clock, get_rules
from aulas.api.schemas import WeekdayResponse
from aulas.components.weekday import WeekdayInput, run_weekday
from aulas.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_date(value: str | None, fmt: str = "%d-%m-%Y") -> date | None:
    """
    Parse a date string.

    Returns None if the value is missing or not in the expected format
    (for example "01-01-2018").
    """
    if not value:
        return None
    try:
        return datetime.strptime(value, fmt).date()
    except ValueError:
        logger.debug("Could not parse date %r with format %r", value, fmt)
        return None


@router.get("/ds", response_model=WeekdayResponse)
def day_of_week(
    data: str | None = None,
    data2: str | None = None,
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> WeekdayResponse:
    """Weekday name of the given date, or of today if none is usable."""
    initial = parse_date(data, rules.api.date_format)

    # If no date is given, or it is invalid, use the current day.
    if initial is None:
        initial = clock.today()

    result = run_weekday(
        WeekdayInput(day=initial.day, month=initial.month, year=initial.year),
        rules=rules.calendar,
    )
    if not result.success:
        raise HTTPException(
            status_code=422,
            detail=result.errors[0].message,
        )

    return WeekdayResponse(date=initial, weekday=result.name)
