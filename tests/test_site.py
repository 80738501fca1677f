from datetime import date

import pytest
from pydantic import ValidationError

from shulzmanim.model.site import Location, load_site_config


def test_packaged_site_config():
  site = load_site_config()
  assert site.location.latitude == 41.19392515448243
  assert site.location.longitude == -74.02504208449552
  assert site.location.zenith_deg == 90.0
  assert site.calibration.enabled is True
  assert site.calibration.reference_date == date(2025, 12, 6)
  assert site.calibration.observed_local_time == "17:17"
  assert site.calibration.minutes_after_sunset == 50
  assert site.calibration.utc_offset_hours == -5.0
  assert site.hebcal.havdalah_minutes == 50


def test_location_is_immutable():
  loc = Location(latitude=41.0, longitude=-74.0)
  assert loc.zenith_deg == 90.0
  with pytest.raises(ValidationError):
    loc.latitude = 0.0
