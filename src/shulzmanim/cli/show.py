import asyncio
import sys
import logging
from datetime import datetime, timedelta, timezone

import click

from ..board import ShulBoard

logging.basicConfig(
  level=logging.INFO,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.command()
@click.option("--at", "at", type=str, help="Moment to compute for (ISO format, default: now)")
@click.option("--utc-offset", type=float, help="Display UTC offset in hours (default: host local time)")
def main(at, utc_offset):
  """Print the shul board."""
  tz = timezone(timedelta(hours=utc_offset)) if utc_offset is not None else None
  now = None
  if at:
    try:
      now = datetime.fromisoformat(at.replace("Z", "+00:00"))
    except ValueError as e:
      click.echo(f"ERROR: bad --at value: {e}", err=True)
      sys.exit(1)
    now = now.replace(tzinfo=tz) if now.tzinfo is None and tz else now.astimezone(tz)
  board = ShulBoard(tz=tz)
  slots = asyncio.run(board.refresh(now))
  width = max(len(k) for k in slots)
  for slot, text in slots.items():
    click.echo(f"{slot:<{width}}  {text}")


if __name__ == "__main__":
  main()
