from datetime import date, datetime, timedelta, timezone

import pytest

from shulzmanim.core.errors import SolarDomainError
from shulzmanim.core.solar import SolarEngine, compute_sunset, sunset_ut_hours
from shulzmanim.model.site import Location

MT_IVY = Location(latitude=41.19392515448243, longitude=-74.02504208449552, zenith_deg=90.0)
SVALBARD = Location(latitude=78.22, longitude=15.65)


def test_mt_ivy_december_sunset_is_late_afternoon_utc():
  sunset = compute_sunset(date(2025, 12, 6), MT_IVY)
  assert sunset.tzinfo == timezone.utc
  assert sunset.date() == date(2025, 12, 6)
  # about 4:2x PM EST
  assert sunset.hour == 21
  assert 10 <= sunset.minute <= 35
  assert sunset.second == 0


def test_ut_hours_in_range_across_the_year():
  d = date(2025, 1, 1)
  while d.year == 2025:
    ut = sunset_ut_hours(d, MT_IVY)
    assert ut is not None
    assert 0 <= ut < 24
    d += timedelta(days=1)


def test_summer_sunset_is_evening_local_time():
  edt = timezone(timedelta(hours=-4))
  summer = compute_sunset(date(2025, 6, 21), MT_IVY)
  # UT wraps past midnight; only the local clock time is displayed
  assert summer.astimezone(edt).hour == 20


@pytest.mark.parametrize("d", [date(2025, 6, 21), date(2025, 12, 21)])
def test_polar_day_and_night_have_no_sunset(d):
  assert sunset_ut_hours(d, SVALBARD) is None
  assert compute_sunset(d, SVALBARD) is None


def test_calibrated_sunset_adds_offset():
  engine = SolarEngine(MT_IVY)
  raw = engine.sunset(date(2025, 12, 6))
  assert engine.calibrated_sunset(date(2025, 12, 6), timedelta(minutes=5)) == raw + timedelta(minutes=5)


def test_calibrated_sunset_propagates_none():
  engine = SolarEngine(SVALBARD)
  assert engine.calibrated_sunset(date(2025, 6, 21), timedelta(minutes=5)) is None


def test_require_sunset_raises_for_polar_date():
  with pytest.raises(SolarDomainError):
    SolarEngine(SVALBARD).require_sunset(date(2025, 6, 21))


def test_depression_below_horizon_sets_later():
  civil = Location(latitude=MT_IVY.latitude, longitude=MT_IVY.longitude, zenith_deg=96.0)
  d = date(2025, 12, 6)
  assert compute_sunset(d, civil) > compute_sunset(d, MT_IVY)
  assert isinstance(compute_sunset(d, civil), datetime)
