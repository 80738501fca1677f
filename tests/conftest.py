from datetime import timedelta, timezone

import httpx
import pytest

from shulzmanim.api.hebcal import HebcalClient
from shulzmanim.board import ShulBoard

EST = timezone(timedelta(hours=-5))


def hebcal_stub(status=200, payload=None):
  if payload is None:
    payload = {"items": [{"category": "parashat", "title": "Parashat Vayishlach", "hebrew": "פרשת וישלח"}]}
  def handler(request):
    return httpx.Response(status, json=payload)
  return HebcalClient(41.19392515448243, -74.02504208449552, transport=httpx.MockTransport(handler))


@pytest.fixture
def board():
  return ShulBoard(hebcal=hebcal_stub(), tz=EST)
