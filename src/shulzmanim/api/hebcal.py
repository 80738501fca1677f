"""Client for the Hebcal Shabbat API (weekly parsha name)."""

from typing import Any, Dict, List, Optional
import logging

import httpx

from ..core.errors import CalendarLookupError
from ..display.slots import PARSHA_FALLBACK
from ..model.site import SiteConfig

logger = logging.getLogger(__name__)

HEBCAL_SHABBAT_URL = "https://www.hebcal.com/shabbat"


def pick_parsha_name(items: List[Any]) -> str:
    """Return the display name of the first ``parashat`` item.

    Prefers the Hebrew-script name, then the English title.
    """
    for item in items:
        if isinstance(item, dict) and item.get("category") == "parashat":
            return item.get("hebrew") or item.get("title") or PARSHA_FALLBACK
    return PARSHA_FALLBACK


class HebcalClient:
    """Async lookup of this week's parsha for a fixed location."""

    def __init__(
        self,
        latitude: float,
        longitude: float,
        havdalah_minutes: int = 50,
        base_url: str = HEBCAL_SHABBAT_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            latitude: Site latitude in degrees
            longitude: Site longitude in degrees (west negative)
            havdalah_minutes: Minutes after sunset that Shabbos ends
            base_url: Hebcal Shabbat endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.latitude = latitude
        self.longitude = longitude
        self.havdalah_minutes = havdalah_minutes
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_site(cls, site: SiteConfig, **kwargs) -> "HebcalClient":
        """Build a client for a configured site."""
        return cls(
            latitude=site.location.latitude,
            longitude=site.location.longitude,
            havdalah_minutes=site.hebcal.havdalah_minutes,
            base_url=site.hebcal.base_url,
            timeout=site.hebcal.timeout,
            **kwargs,
        )

    def params(self) -> Dict[str, Any]:
        """Query parameters for the Shabbat API."""
        return {
            "cfg": "json",
            "geo": "pos",
            "latitude": self.latitude,
            "longitude": self.longitude,
            "m": self.havdalah_minutes,
            "leyning": "on",
        }

    async def fetch_items(self) -> List[Any]:
        """Fetch the calendar items for the coming Shabbos.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status
            CalendarLookupError: Body is not JSON or has no item list
        """
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            resp = await client.get(self.base_url, params=self.params())
            resp.raise_for_status()

        try:
            data = resp.json()
        except ValueError as e:
            raise CalendarLookupError(f"Malformed JSON from {self.base_url}") from e

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise CalendarLookupError("Hebcal response has no 'items' list")
        return items

    async def parsha_name(self) -> str:
        """Get this week's parsha name, or the fallback text on any lookup failure."""
        try:
            items = await self.fetch_items()
        except (httpx.HTTPError, CalendarLookupError) as e:
            logger.error(f"Error fetching parsha: {e}")
            return PARSHA_FALLBACK

        name = pick_parsha_name(items)
        if name == PARSHA_FALLBACK:
            logger.info("No parashat item in Hebcal response")
        return name
