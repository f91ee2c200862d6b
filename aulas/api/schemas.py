import datetime

from pydantic import BaseModel


class WeekdayResponse(BaseModel):
    date: datetime.date
    weekday: str
