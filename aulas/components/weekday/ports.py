"""
Weekday component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class WeekdayRulesPort(Protocol):
    """Port for calendar rules configuration."""

    def get_min_year(self) -> int:
        """Earliest year accepted by the calculator."""
        ...

    def get_weekday_names(self) -> list[str]:
        """Seven weekday names, Monday first."""
        ...
