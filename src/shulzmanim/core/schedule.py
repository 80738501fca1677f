from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union
import logging

from ..model.schedule import ShabbosSchedule, WeekdaySchedule
from .errors import ScheduleComputationError
from .solar import SolarEngine
from .timebase import coming_shabbos, work_week

logger = logging.getLogger(__name__)

WEEKDAY_MINCHA_BEFORE_SUNSET = timedelta(minutes=15)
EREV_SHABBOS_MINCHA_BEFORE_SUNSET = timedelta(minutes=15)
SHABBOS_MINCHA_BEFORE_SUNSET = timedelta(minutes=45)
MOTZAEI_SHABBOS_MAARIV_AFTER_SUNSET = timedelta(minutes=50)


@dataclass
class ScheduleComposer:
  engine: SolarEngine
  offset: timedelta = timedelta(0)
  tz: Optional[tzinfo] = None

  def weekday(self, today: Union[date, datetime]) -> WeekdaySchedule:
    days = work_week(today)
    sunsets = []
    for d in days:
      sunset = self.engine.calibrated_sunset(d, self.offset)
      if sunset is None:
        logger.warning(f"Skipping {d}: no sunset")
        continue
      sunsets.append(sunset)
    if not sunsets:
      raise ScheduleComputationError(f"No sunset computable for the week of {days[0]}")

    # One posted time for Sun-Thu, so it must hold on the day the sun sets earliest.
    earliest = min(sunsets, key=lambda s: s.astimezone(self.tz).time())
    return WeekdaySchedule(
      week_of=days[0],
      earliest_sunset=earliest,
      mincha_maariv=earliest - WEEKDAY_MINCHA_BEFORE_SUNSET,
    )

  def shabbos(self, now: datetime) -> ShabbosSchedule:
    shabbos = coming_shabbos(now)
    sunset = self.engine.calibrated_sunset(shabbos, self.offset)
    if sunset is None:
      raise ScheduleComputationError(f"No sunset computable for Shabbos {shabbos}")
    return ShabbosSchedule(
      shabbos_date=shabbos,
      sunset=sunset,
      erev_mincha=sunset - EREV_SHABBOS_MINCHA_BEFORE_SUNSET,
      day_mincha=sunset - SHABBOS_MINCHA_BEFORE_SUNSET,
      maariv=sunset + MOTZAEI_SHABBOS_MAARIV_AFTER_SUNSET,
    )
