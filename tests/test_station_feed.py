"""
Tests for the station status feed: repository updates, wire decoding,
pub/sub publish / listen, and the background listener.

Redis is replaced by mocks; a tiny fake pub/sub object replays canned
messages.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from evjourney.config import settings
from evjourney.domain.entities import StationStatusUpdate
from evjourney.domain.enums import UpdatePriority, UpdateType
from evjourney.infrastructure.repositories import StationRepository
from evjourney.infrastructure.station_feed import (
    StationFeed,
    StationStatusMessage,
    decode_message,
)
from evjourney.workers import station_feed as worker
from tests.conftest import make_station

CHANNEL = "stations:status"


class FakePubSub:
    def __init__(self, messages):
        self.messages = messages
        self.subscribed = []
        self.unsubscribed = []
        self.closed = False

    async def subscribe(self, channel):
        self.subscribed.append(channel)

    async def unsubscribe(self, channel):
        self.unsubscribed.append(channel)

    async def listen(self):
        for m in self.messages:
            yield m

    async def aclose(self):
        self.closed = True


def payload(**fields) -> str:
    return StationStatusMessage(**fields).model_dump_json()


def fake_redis(messages):
    pubsub = FakePubSub(messages)
    client = MagicMock()
    client.pubsub.return_value = pubsub
    client.publish = AsyncMock(return_value=1)
    return client, pubsub


@pytest.fixture
def repo():
    return StationRepository([
        make_station("s1", connectors=[("CCS2", 150, True), ("Type2", 22, True)]),
        make_station("s2", connectors=[("CCS2", 50, False)]),
    ])


# ── Repository ────────────────────────────────────────────────────────


class TestStationRepository:
    def test_connector_update(self, repo):
        assert repo.apply_update(StationStatusUpdate("s1", False, "s1-0"))
        station = repo.get_by_id("s1")
        assert station.available_connectors == 1
        assert station.connectors[0].is_available is False

    def test_whole_station_update(self, repo):
        assert repo.apply_update(StationStatusUpdate("s2", True))
        assert repo.get_by_id("s2").available_connectors == 1

    def test_unknown_station_is_ignored(self, repo):
        assert not repo.apply_update(StationStatusUpdate("nope", False))

    def test_unknown_connector_is_ignored(self, repo):
        assert not repo.apply_update(StationStatusUpdate("s1", False, "s1-9"))
        assert repo.get_by_id("s1").available_connectors == 2

    def test_snapshot_is_isolated_from_updates(self, repo):
        snapshot = repo.list_all()
        repo.apply_update(StationStatusUpdate("s1", False))
        assert snapshot[0].available_connectors == 2
        assert repo.list_all()[0].available_connectors == 0

    def test_snapshot_mutation_does_not_leak(self, repo):
        repo.list_all()[0].connectors[0].is_available = False
        assert repo.get_by_id("s1").available_connectors == 2

    def test_source_stations_untouched(self):
        source = [make_station("s1")]
        repo = StationRepository(source)
        repo.apply_update(StationStatusUpdate("s1", False))
        assert source[0].available_connectors == 1

    def test_get_unknown(self, repo):
        assert repo.get_by_id("nope") is None


# ── Wire format ───────────────────────────────────────────────────────


class TestDecodeMessage:
    def test_valid(self):
        update = decode_message(
            payload(station_id="s1", is_available=False, connector_id="s1-0")
        )
        assert update.station_id == "s1"
        assert update.is_available is False
        assert update.connector_id == "s1-0"
        assert update.update_type == UpdateType.STATION_STATUS

    def test_wire_values(self):
        raw = json.dumps({
            "station_id": "s1",
            "is_available": True,
            "update_type": "Station Status",
            "priority": "High",
        })
        update = decode_message(raw)
        assert update.priority == UpdatePriority.HIGH
        assert update.connector_id is None

    @pytest.mark.parametrize(
        "raw",
        ["not json", "{}", '{"station_id": "s1"}', '{"station_id": "s1", "is_available": "maybe"}'],
    )
    def test_malformed_is_dropped(self, raw):
        assert decode_message(raw) is None

    def test_message_roundtrip_keeps_timestamp(self):
        update = StationStatusUpdate("s1", True, "s1-0", priority=UpdatePriority.LOW)
        msg = StationStatusMessage.from_update(update)
        assert msg.to_update() == update


# ── Pub/sub ───────────────────────────────────────────────────────────


class TestStationFeed:
    @pytest.mark.asyncio
    async def test_publish(self):
        client, _ = fake_redis([])
        feed = StationFeed(client, CHANNEL)

        reached = await feed.publish(StationStatusUpdate("s1", False, "s1-0"))

        assert reached == 1
        channel, raw = client.publish.await_args.args
        assert channel == CHANNEL
        assert json.loads(raw)["connector_id"] == "s1-0"

    @pytest.mark.asyncio
    async def test_listen_filters_and_decodes(self):
        client, pubsub = fake_redis([
            {"type": "subscribe", "data": 1},
            {"type": "message", "data": payload(station_id="s1", is_available=False)},
            {"type": "message", "data": "garbage"},
            {
                "type": "message",
                "data": payload(
                    station_id="s1", is_available=True, update_type=UpdateType.TRAFFIC
                ),
            },
            {"type": "message", "data": payload(station_id="s2", is_available=True)},
        ])
        feed = StationFeed(client, CHANNEL)

        updates = [u async for u in feed.listen()]

        assert [(u.station_id, u.is_available) for u in updates] == [
            ("s1", False),
            ("s2", True),
        ]
        assert pubsub.subscribed == [CHANNEL]
        assert pubsub.unsubscribed == [CHANNEL]
        assert pubsub.closed

    @pytest.mark.asyncio
    async def test_listen_cleans_up_when_consumer_stops_early(self):
        client, pubsub = fake_redis([
            {"type": "message", "data": payload(station_id="s1", is_available=False)},
            {"type": "message", "data": payload(station_id="s2", is_available=True)},
        ])
        stream = StationFeed(client, CHANNEL).listen()
        async for _ in stream:
            break
        await stream.aclose()
        assert pubsub.closed


# ── Background listener ───────────────────────────────────────────────


class TestFeedListener:
    @pytest.mark.asyncio
    async def test_consume_feed_applies_updates(self, repo):
        client, _ = fake_redis([
            {"type": "message", "data": payload(station_id="s1", is_available=False, connector_id="s1-0")},
            {"type": "message", "data": payload(station_id="s2", is_available=True)},
            {"type": "message", "data": payload(station_id="ghost", is_available=True)},
        ])

        applied = await worker.consume_feed(StationFeed(client, CHANNEL), repo)

        assert applied == 2
        assert repo.get_by_id("s1").available_connectors == 1
        assert repo.get_by_id("s2").available_connectors == 1

    @pytest.mark.asyncio
    async def test_listener_reconnects_after_failure(self):
        calls = []

        async def consume(feed, repository):
            calls.append(feed)
            if len(calls) == 1:
                raise ConnectionError("down")

        with (
            patch.object(worker, "get_redis", AsyncMock(return_value=MagicMock())),
            patch.object(worker, "consume_feed", consume),
            patch.object(settings, "feed_reconnect_seconds", 0.01),
        ):
            await worker.start_feed_listener()
            for _ in range(100):
                if len(calls) >= 2:
                    break
                await asyncio.sleep(0.01)
            await worker.stop_feed_listener()

        assert len(calls) >= 2
        assert all(isinstance(f, StationFeed) for f in calls)

    @pytest.mark.asyncio
    async def test_stop_is_safe_before_start(self):
        with (
            patch.object(worker, "_task", None),
            patch.object(worker, "_stop_event", None),
        ):
            await worker.stop_feed_listener()
