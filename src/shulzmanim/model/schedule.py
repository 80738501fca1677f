from datetime import date, datetime

from pydantic import BaseModel


class WeekdaySchedule(BaseModel):
  week_of: date
  earliest_sunset: datetime
  mincha_maariv: datetime


class ShabbosSchedule(BaseModel):
  shabbos_date: date
  sunset: datetime
  erev_mincha: datetime
  day_mincha: datetime
  maariv: datetime
