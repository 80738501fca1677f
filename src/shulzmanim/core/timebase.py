from datetime import date, datetime, time, timedelta, tzinfo
from typing import List, Optional, Union

from .errors import CalibrationError


def as_date(day: Union[date, datetime]) -> date:
  return day.date() if isinstance(day, datetime) else day


def sunday_of_week(day: Union[date, datetime]) -> date:
  d = as_date(day)
  # weekday(): Monday is 0, Sunday is 6
  return d - timedelta(days=(d.weekday() + 1) % 7)


def work_week(day: Union[date, datetime]) -> List[date]:
  """Sunday through Thursday of the week containing ``day``."""
  sunday = sunday_of_week(day)
  return [sunday + timedelta(days=i) for i in range(5)]


def coming_shabbos(now: datetime) -> date:
  """Next Saturday on or after ``now``; Saturday from 18:00 local moves on to next week."""
  diff = (5 - now.weekday()) % 7
  if diff == 0 and now.hour >= 18:
    diff = 7
  return now.date() + timedelta(days=diff)


def parse_local_time(day: date, hhmm: str, tz: Optional[tzinfo] = None) -> datetime:
  """``HH:MM`` on ``day`` as an aware datetime; ``tz=None`` uses the host's local time rules."""
  try:
    hour, minute = (int(part) for part in hhmm.split(":"))
    naive = datetime.combine(day, time(hour, minute))
  except ValueError as e:
    raise CalibrationError(f"Not a HH:MM local time: {hhmm!r}") from e
  if tz is None:
    return naive.astimezone()
  return naive.replace(tzinfo=tz)


def local_now(tz: Optional[tzinfo] = None) -> datetime:
  if tz is None:
    return datetime.now().astimezone()
  return datetime.now(tz)
