from pydantic import BaseModel, Field, field_validator

from aulas.components.weekday import WEEKDAY_NAMES


class CalendarRules(BaseModel):
    min_year: int = 1754
    weekday_names: list[str] = Field(default_factory=lambda: list(WEEKDAY_NAMES))

    @field_validator("weekday_names")
    @classmethod
    def _seven_names(cls, v: list[str]) -> list[str]:
        if len(v) != 7:
            raise ValueError(f"weekday_names must have 7 entries, got {len(v)}")
        return v

    # WeekdayRulesPort
    def get_min_year(self) -> int:
        return self.min_year

    def get_weekday_names(self) -> list[str]:
        return list(self.weekday_names)


class ApiRules(BaseModel):
    title: str = "CS Aulas API"
    date_format: str = "%d-%m-%Y"
    cors_origins: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    calendar: CalendarRules = Field(default_factory=CalendarRules)
    api: ApiRules = Field(default_factory=ApiRules)
