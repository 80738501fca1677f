from datetime import date, datetime, timedelta, timezone

from shulzmanim.display.slots import (
  SHABBOS_FALLBACK,
  SHABBOS_SLOTS,
  WEEKDAY_FALLBACK,
  WEEKDAY_SLOTS,
  format_clock,
  shabbos_fallback,
  shabbos_slots,
  weekday_fallback,
  weekday_slots,
)
from shulzmanim.model.schedule import ShabbosSchedule, WeekdaySchedule

EST = timezone(timedelta(hours=-5))


def test_format_clock():
  assert format_clock(datetime(2025, 12, 6, 22, 17, tzinfo=timezone.utc), EST) == "5:17 PM"
  assert format_clock(datetime(2025, 12, 6, 0, 5, tzinfo=EST), EST) == "12:05 AM"
  assert format_clock(datetime(2025, 12, 6, 12, 0, tzinfo=EST), EST) == "12:00 PM"
  assert format_clock(datetime(2025, 12, 6, 9, 30, tzinfo=EST), EST) == "9:30 AM"


def test_weekday_slots_share_one_time():
  t = datetime(2025, 12, 9, 16, 12, tzinfo=EST)
  schedule = WeekdaySchedule(week_of=date(2025, 12, 7), earliest_sunset=t + timedelta(minutes=15), mincha_maariv=t)
  slots = weekday_slots(schedule, EST)
  assert set(slots) == set(WEEKDAY_SLOTS)
  assert set(slots.values()) == {"4:12 PM"}


def test_shabbos_hero_slots_show_day_mincha_and_maariv():
  sunset = datetime(2025, 12, 6, 16, 27, tzinfo=EST)
  schedule = ShabbosSchedule(
    shabbos_date=date(2025, 12, 6),
    sunset=sunset,
    erev_mincha=sunset - timedelta(minutes=15),
    day_mincha=sunset - timedelta(minutes=45),
    maariv=sunset + timedelta(minutes=50),
  )
  slots = shabbos_slots(schedule, EST)
  assert slots == {
    "erev_shabbos_mincha": "4:12 PM",
    "shabbos_mincha": "3:42 PM",
    "shabbos_maariv": "5:17 PM",
    "hero_shabbos_mincha": "3:42 PM",
    "hero_shabbos_maariv": "5:17 PM",
  }


def test_fallbacks_cover_every_slot():
  assert weekday_fallback() == {slot: WEEKDAY_FALLBACK for slot in WEEKDAY_SLOTS}
  assert shabbos_fallback() == {slot: SHABBOS_FALLBACK for slot in SHABBOS_SLOTS}
