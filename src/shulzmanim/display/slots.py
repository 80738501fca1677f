"""Display slots for the shul board and the text that goes into them."""

from datetime import datetime, tzinfo
from typing import Dict, Optional

from ..model.schedule import ShabbosSchedule, WeekdaySchedule

WEEKDAY_FALLBACK = "Check shul board"
SHABBOS_FALLBACK = "See local listing"
PARSHA_FALLBACK = "—"

WEEKDAY_SLOTS = (
  "weekday_mincha_maariv",
  "weekday_mincha_maariv_card",
  "hero_weekday_mincha",
)
SHABBOS_SLOTS = (
  "erev_shabbos_mincha",
  "shabbos_mincha",
  "shabbos_maariv",
  "hero_shabbos_mincha",
  "hero_shabbos_maariv",
)
PARSHA_SLOT = "parsha_name"
YEAR_SLOT = "year"


def format_clock(instant: datetime, tz: Optional[tzinfo] = None) -> str:
  """Local 12-hour clock without a leading zero, e.g. ``5:17 PM``."""
  local = instant.astimezone(tz)
  hour = local.hour % 12 or 12
  suffix = "AM" if local.hour < 12 else "PM"
  return f"{hour}:{local.minute:02d} {suffix}"


def weekday_slots(schedule: WeekdaySchedule, tz: Optional[tzinfo] = None) -> Dict[str, str]:
  text = format_clock(schedule.mincha_maariv, tz)
  return {slot: text for slot in WEEKDAY_SLOTS}


def shabbos_slots(schedule: ShabbosSchedule, tz: Optional[tzinfo] = None) -> Dict[str, str]:
  day_mincha = format_clock(schedule.day_mincha, tz)
  maariv = format_clock(schedule.maariv, tz)
  return {
    "erev_shabbos_mincha": format_clock(schedule.erev_mincha, tz),
    "shabbos_mincha": day_mincha,
    "shabbos_maariv": maariv,
    # hero banner shows the Shabbos-day Mincha
    "hero_shabbos_mincha": day_mincha,
    "hero_shabbos_maariv": maariv,
  }


def weekday_fallback() -> Dict[str, str]:
  return {slot: WEEKDAY_FALLBACK for slot in WEEKDAY_SLOTS}


def shabbos_fallback() -> Dict[str, str]:
  return {slot: SHABBOS_FALLBACK for slot in SHABBOS_SLOTS}
