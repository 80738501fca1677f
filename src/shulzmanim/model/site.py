from datetime import date, timedelta, timezone, tzinfo
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
  model_config = ConfigDict(frozen=True)

  latitude: float
  longitude: float  # west negative
  zenith_deg: float = 90.0


class CalibrationReference(BaseModel):
  model_config = ConfigDict(frozen=True)

  enabled: bool = True
  reference_date: date
  observed_local_time: str  # "HH:MM", local clock
  minutes_after_sunset: int
  # zone the observation was announced in; None means host local time
  utc_offset_hours: Optional[float] = None

  def zone(self) -> Optional[tzinfo]:
    if self.utc_offset_hours is None:
      return None
    return timezone(timedelta(hours=self.utc_offset_hours))


class HebcalConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  base_url: str = "https://www.hebcal.com/shabbat"
  havdalah_minutes: int = 50
  timeout: float = 10.0


class SiteConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  name: str
  location: Location
  calibration: CalibrationReference
  hebcal: HebcalConfig = HebcalConfig()


def load_site_config(path: Optional[Path] = None) -> SiteConfig:
  if path is None:
    path = Path(__file__).parent.parent / "config" / "site.yaml"
  raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
  return SiteConfig(**raw["site"])
