from datetime import timedelta
import logging

from ..model.site import CalibrationReference
from .solar import SolarEngine
from .timebase import parse_local_time

logger = logging.getLogger(__name__)


def compute_offset(
  reference: CalibrationReference,
  engine: SolarEngine,
) -> timedelta:
  """Signed correction that moves the engine's sunset onto the observed one.

  The observed event (e.g. Motzaei Shabbos Maariv) happened
  ``minutes_after_sunset`` after the real shkiya, so the real shkiya is
  backed out of it and compared with the theoretical sunset for the same
  date. The observation is read in the reference's own zone, never the
  display zone. The result is treated as constant for every date of the
  session.
  """
  if not reference.enabled:
    logger.info("Calibration disabled, using theoretical sunsets")
    return timedelta(0)

  theoretical = engine.sunset(reference.reference_date)
  if theoretical is None:
    logger.warning(
      f"No theoretical sunset on reference date {reference.reference_date}; running uncalibrated"
    )
    return timedelta(0)

  observed = parse_local_time(reference.reference_date, reference.observed_local_time, reference.zone())
  implied_sunset = observed - timedelta(minutes=reference.minutes_after_sunset)
  offset = implied_sunset - theoretical
  logger.info(
    f"Calibration offset {offset.total_seconds():+.0f}s "
    f"(theoretical {theoretical.isoformat()}, implied {implied_sunset.isoformat()})"
  )
  return offset
