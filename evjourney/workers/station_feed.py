"""
Station Status Listener
=======================

Background task that keeps the in-memory station catalog current.

* Subscribes to the Redis channel ``STATION_FEED_CHANNEL``.
* Applies every status update to the shared ``StationRepository``.
* On connection loss waits ``FEED_RECONNECT_SECONDS`` (default 5 s) and
  subscribes again, until stopped.

Requests never wait on this task: they filter whatever snapshot the
repository holds at that moment.
"""

from __future__ import annotations

import asyncio
import logging

from evjourney.config import settings
from evjourney.infrastructure.redis_client import get_redis
from evjourney.infrastructure.repositories import StationRepository, station_repository
from evjourney.infrastructure.station_feed import StationFeed

logger = logging.getLogger(__name__)

_task: asyncio.Task | None = None
_stop_event: asyncio.Event | None = None


# ── Public API ────────────────────────────────────────────────────────


async def start_feed_listener() -> None:
    global _task, _stop_event
    _stop_event = asyncio.Event()
    _task = asyncio.create_task(_loop())
    logger.info("Station feed listener started (channel=%s)", settings.station_feed_channel)


async def stop_feed_listener() -> None:
    if _stop_event:
        _stop_event.set()
    if _task:
        _task.cancel()
        try:
            await _task
        except asyncio.CancelledError:
            pass
    logger.info("Station feed listener stopped")


# ── Internals ─────────────────────────────────────────────────────────


async def consume_feed(feed: StationFeed, repository: StationRepository) -> int:
    """Apply updates from *feed* until it ends.  Returns the number applied."""
    applied = 0
    async for update in feed.listen():
        if repository.apply_update(update):
            applied += 1
            logger.info(
                "Station %s connector %s -> %s",
                update.station_id,
                update.connector_id or "*",
                "available" if update.is_available else "unavailable",
            )
    return applied


async def _loop() -> None:
    """Subscribe, consume, and re-subscribe after a delay on failure."""
    assert _stop_event is not None
    while not _stop_event.is_set():
        try:
            redis = await get_redis()
            feed = StationFeed(redis, settings.station_feed_channel)
            await consume_feed(feed, station_repository)
        except Exception:
            logger.exception("Station feed disconnected")
        # Wait before reconnecting, or stop if signalled
        try:
            await asyncio.wait_for(
                _stop_event.wait(), timeout=settings.feed_reconnect_seconds
            )
            break
        except asyncio.TimeoutError:
            logger.info("Reconnecting to station feed")
