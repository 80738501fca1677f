from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional
import logging
import math

from ..model.site import Location
from .errors import SolarDomainError

logger = logging.getLogger(__name__)


def _sin(deg: float) -> float:
  return math.sin(math.radians(deg))


def _cos(deg: float) -> float:
  return math.cos(math.radians(deg))


def _tan(deg: float) -> float:
  return math.tan(math.radians(deg))


def sunset_ut_hours(d: date, location: Location) -> Optional[float]:
  """Sunset for ``d`` as fractional UT hours in [0, 24), or None if the sun never sets/rises.

  Iterative solar-position approximation (the NOAA/Almanac for Computers
  sunrise-sunset recipe). The numeric literals are the model's empirical
  constants and the site calibration is tuned against them.
  """
  n = d.timetuple().tm_yday
  lng_hour = location.longitude / 15.0

  # 18h picks the sunset branch; sunrise would use 6h
  t = n + (18 - lng_hour) / 24.0

  mean_anomaly = 0.9856 * t - 3.289

  true_lng = mean_anomaly + 1.916 * _sin(mean_anomaly) + 0.020 * _sin(2 * mean_anomaly) + 282.634
  true_lng = true_lng % 360

  ra = math.degrees(math.atan(0.91764 * _tan(true_lng))) % 360
  # right ascension has to sit in the same quadrant as the true longitude
  ra += math.floor(true_lng / 90) * 90 - math.floor(ra / 90) * 90
  ra /= 15.0

  sin_dec = 0.39782 * _sin(true_lng)
  cos_dec = math.cos(math.asin(sin_dec))

  cos_h = (_cos(location.zenith_deg) - sin_dec * _sin(location.latitude)) / (cos_dec * _cos(location.latitude))
  if cos_h < -1 or cos_h > 1:
    return None

  h = math.degrees(math.acos(cos_h)) / 15.0

  local_mean = h + ra - 0.06571 * t - 6.622
  return (local_mean - lng_hour) % 24


def compute_sunset(d: date, location: Location) -> Optional[datetime]:
  ut = sunset_ut_hours(d, location)
  if ut is None:
    logger.debug(f"No sunset on {d} at ({location.latitude}, {location.longitude})")
    return None
  hours = int(math.floor(ut))
  minutes = int(math.floor((ut - hours) * 60 + 0.5))
  midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
  return midnight + timedelta(hours=hours, minutes=minutes)


@dataclass
class SolarEngine:
  location: Location

  def sunset(self, d: date) -> Optional[datetime]:
    return compute_sunset(d, self.location)

  def calibrated_sunset(self, d: date, offset: timedelta) -> Optional[datetime]:
    sunset = self.sunset(d)
    if sunset is None:
      return None
    return sunset + offset

  def require_sunset(self, d: date) -> datetime:
    sunset = self.sunset(d)
    if sunset is None:
      raise SolarDomainError(f"The sun does not set on {d} at latitude {self.location.latitude}")
    return sunset
