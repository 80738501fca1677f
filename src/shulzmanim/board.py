"""Board coordinator that ties the zmanim engine, schedules and parsha lookup together."""

from datetime import datetime, timedelta, tzinfo
from typing import Any, Callable, Dict, Optional
import asyncio
import logging

from .api.hebcal import HebcalClient
from .core.calibration import compute_offset
from .core.schedule import ScheduleComposer
from .core.solar import SolarEngine
from .core.timebase import local_now
from .display.slots import (
    PARSHA_FALLBACK,
    PARSHA_SLOT,
    YEAR_SLOT,
    shabbos_fallback,
    shabbos_slots,
    weekday_fallback,
    weekday_slots,
)
from .model.schedule import ShabbosSchedule, WeekdaySchedule
from .model.site import SiteConfig, load_site_config

logger = logging.getLogger(__name__)


class ShulBoard:
    """Computes everything the shul board displays."""

    def __init__(
        self,
        site: Optional[SiteConfig] = None,
        hebcal: Optional[HebcalClient] = None,
        tz: Optional[tzinfo] = None,
    ):
        """Initialize the board and calibrate the engine once for the session.

        Args:
            site: Site configuration (default: packaged site.yaml)
            hebcal: Parsha lookup client (default: built from the site)
            tz: Display timezone (default: host local time)
        """
        self.site = site or load_site_config()
        self.tz = tz
        self.engine = SolarEngine(self.site.location)

        # Computed once; read-only for the rest of the session
        self.offset: timedelta = compute_offset(self.site.calibration, self.engine)

        self.composer = ScheduleComposer(self.engine, self.offset, tz=tz)
        self.hebcal = hebcal or HebcalClient.from_site(self.site)

        logger.info(f"Shul board initialized for {self.site.name}")

    def now(self) -> datetime:
        """Current time in the display timezone."""
        return local_now(self.tz)

    def _local(self, now: Optional[datetime]) -> datetime:
        """``now`` (default: current time) expressed in the display timezone."""
        return (now or self.now()).astimezone(self.tz)

    def weekday_schedule(self, now: Optional[datetime] = None) -> WeekdaySchedule:
        """Weekday Mincha/Maariv for the week containing ``now``."""
        return self.composer.weekday(self._local(now))

    def shabbos_schedule(self, now: Optional[datetime] = None) -> ShabbosSchedule:
        """Zmanim for the coming Shabbos relative to ``now``."""
        return self.composer.shabbos(self._local(now))

    def weekday_slots(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """Weekday display slots, or their fallback text if the schedule fails."""
        try:
            schedule = self.weekday_schedule(now)
        except Exception:
            logger.exception("Weekday Mincha/Maariv unavailable")
            return weekday_fallback()
        return weekday_slots(schedule, self.tz)

    def shabbos_slots(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """Shabbos display slots, or their fallback text if the schedule fails."""
        try:
            schedule = self.shabbos_schedule(now)
        except Exception:
            logger.exception("Shabbos zmanim unavailable")
            return shabbos_fallback()
        return shabbos_slots(schedule, self.tz)

    async def parsha_slots(self) -> Dict[str, str]:
        """Parsha display slot."""
        try:
            name = await self.hebcal.parsha_name()
        except Exception:
            logger.exception("Parsha lookup failed")
            name = PARSHA_FALLBACK
        return {PARSHA_SLOT: name}

    async def refresh(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """Recompute every display slot.

        The weekday, Shabbos and parsha steps are independent and run
        concurrently; each falls back on its own.

        Args:
            now: Moment to compute for (default: current local time)

        Returns:
            Mapping of slot id to display text
        """
        now = self._local(now)

        weekday, shabbos, parsha = await asyncio.gather(
            _run(self.weekday_slots, now),
            _run(self.shabbos_slots, now),
            self.parsha_slots(),
        )

        slots = {YEAR_SLOT: str(now.year)}
        slots.update(weekday)
        slots.update(shabbos)
        slots.update(parsha)
        return slots

    def calibration_info(self) -> Dict[str, Any]:
        """Describe the session calibration."""
        reference = self.site.calibration
        return {
            "enabled": reference.enabled,
            "reference_date": reference.reference_date.isoformat(),
            "observed_local_time": reference.observed_local_time,
            "minutes_after_sunset": reference.minutes_after_sunset,
            "offset_seconds": self.offset.total_seconds(),
        }


async def _run(step: Callable[..., Dict[str, str]], *args) -> Dict[str, str]:
    return step(*args)
