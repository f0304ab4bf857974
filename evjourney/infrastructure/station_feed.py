"""
Station status feed over Redis pub/sub.

Producers ``publish`` JSON-encoded ``StationStatusMessage`` payloads on a
channel; consumers iterate ``listen()`` and receive plain
``StationStatusUpdate`` values.  Subscription lifecycle stays here so the
filter/rank core only ever sees data.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from typing import Optional

import redis.asyncio as aioredis
from pydantic import BaseModel, Field, ValidationError

from evjourney.domain.entities import StationStatusUpdate
from evjourney.domain.enums import UpdatePriority, UpdateType

logger = logging.getLogger(__name__)


class StationStatusMessage(BaseModel):
    """Wire format of one feed message."""

    station_id: str
    is_available: bool
    connector_id: Optional[str] = None
    update_type: UpdateType = UpdateType.STATION_STATUS
    priority: UpdatePriority = UpdatePriority.MEDIUM
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_update(cls, update: StationStatusUpdate) -> "StationStatusMessage":
        return cls(
            station_id=update.station_id,
            is_available=update.is_available,
            connector_id=update.connector_id,
            update_type=update.update_type,
            priority=update.priority,
            timestamp=update.timestamp,
        )

    def to_update(self) -> StationStatusUpdate:
        return StationStatusUpdate(
            station_id=self.station_id,
            is_available=self.is_available,
            connector_id=self.connector_id,
            update_type=self.update_type,
            priority=self.priority,
            timestamp=self.timestamp,
        )


def decode_message(raw: str | bytes) -> Optional[StationStatusUpdate]:
    """Parse one payload; malformed payloads are logged and dropped."""
    try:
        return StationStatusMessage.model_validate_json(raw).to_update()
    except ValidationError:
        logger.warning("Dropping malformed station feed message: %r", raw)
        return None


class StationFeed:
    def __init__(self, client: aioredis.Redis, channel: str):
        self.redis = client
        self.channel = channel

    async def publish(self, update: StationStatusUpdate) -> int:
        """Publish *update*.  Returns the number of subscribers reached."""
        payload = StationStatusMessage.from_update(update).model_dump_json()
        return await self.redis.publish(self.channel, payload)

    async def listen(self) -> AsyncIterator[StationStatusUpdate]:
        """Yield station-status updates until the subscription ends."""
        pubsub = self.redis.pubsub()
        await pubsub.subscribe(self.channel)
        logger.info("Subscribed to station feed %s", self.channel)
        try:
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                update = decode_message(message["data"])
                if update is None:
                    continue
                if update.update_type != UpdateType.STATION_STATUS:
                    logger.debug("Ignoring %s update", update.update_type.value)
                    continue
                yield update
        finally:
            await pubsub.unsubscribe(self.channel)
            await pubsub.aclose()
