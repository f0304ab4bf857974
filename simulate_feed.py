"""
Feed simulator -- publishes random connector status changes so a running
API instance has live availability to show.

Run alongside the API:
    python simulate_feed.py            # 20 updates, one per second
    python simulate_feed.py 100 0.2    # 100 updates, every 0.2 s
"""

import asyncio
import random
import sys

from evjourney.config import settings
from evjourney.domain.catalog import CHARGING_STATIONS
from evjourney.domain.entities import StationStatusUpdate
from evjourney.domain.enums import UpdatePriority
from evjourney.infrastructure.redis_client import get_redis
from evjourney.infrastructure.station_feed import StationFeed


def random_update(rng: random.Random) -> StationStatusUpdate:
    station = rng.choice(CHARGING_STATIONS)
    connector = rng.choice(station.connectors)
    return StationStatusUpdate(
        station_id=station.id,
        connector_id=connector.id,
        is_available=rng.random() < 0.7,
        priority=rng.choice(list(UpdatePriority)),
    )


async def simulate(count: int, interval: float) -> None:
    rng = random.Random()
    feed = StationFeed(await get_redis(), settings.station_feed_channel)
    for i in range(count):
        update = random_update(rng)
        reached = await feed.publish(update)
        state = "available" if update.is_available else "busy"
        print(f"  [{i + 1}/{count}] {update.connector_id} -> {state} ({reached} listeners)")
        await asyncio.sleep(interval)


async def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 20
    interval = float(sys.argv[2]) if len(sys.argv) > 2 else 1.0
    print(f"Publishing {count} station updates on {settings.station_feed_channel}...")
    await simulate(count, interval)
    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
