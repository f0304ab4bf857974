"""
Shared test fixtures.

The API fixture runs without Redis or network access: the station feed
listener is patched out, repositories are rebuilt from the static catalog
per test, and external API keys are blank so collaborators answer with
mock data.
"""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from evjourney.config import Settings
from evjourney.domain.catalog import CHARGING_STATIONS, EV_MODELS
from evjourney.domain.entities import (
    ChargingPort,
    ChargingStation,
    Connector,
    Location,
    StationPricing,
    Vehicle,
)
from evjourney.infrastructure.repositories import StationRepository, VehicleRepository


# ── Builders ──────────────────────────────────────────────────────────


def make_station(
    station_id: str,
    network: str = "Other",
    connectors: list[tuple[str, float, bool]] = (("CCS2", 50, True),),
    lat: float = 25.2,
    lng: float = 55.27,
    cost_per_kwh: float = 0.29,
    session_fee: float = 0.0,
) -> ChargingStation:
    return ChargingStation(
        id=station_id,
        name=f"Station {station_id}",
        location=Location(lat, lng),
        network=network,
        connectors=[
            Connector(
                id=f"{station_id}-{i}",
                connector_type=ctype,
                max_power_kw=power,
                is_available=available,
            )
            for i, (ctype, power, available) in enumerate(connectors)
        ],
        pricing=StationPricing(cost_per_kwh=cost_per_kwh, session_fee=session_fee),
    )


def make_vehicle(
    vehicle_id: str = "test-ev",
    battery_capacity_kwh: float = 75,
    efficiency_wh_per_km: float = 150,
    ports: tuple[str, ...] = ("CCS2",),
    max_charging_speed_kw: float = 150,
    **kwargs,
) -> Vehicle:
    return Vehicle(
        id=vehicle_id,
        make=kwargs.pop("make", "Test"),
        model=kwargs.pop("model", "EV"),
        year=kwargs.pop("year", 2024),
        battery_capacity_kwh=battery_capacity_kwh,
        efficiency_wh_per_km=efficiency_wh_per_km,
        charging_ports=tuple(
            ChargingPort(p, max_charging_speed_kw, 400) for p in ports
        ),
        max_charging_speed_kw=max_charging_speed_kw,
        **kwargs,
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def station_repo() -> StationRepository:
    return StationRepository(CHARGING_STATIONS)


@pytest.fixture
def vehicle_repo() -> VehicleRepository:
    return VehicleRepository(EV_MODELS)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, routing_api_key=None, weather_api_key=None)


@pytest_asyncio.fixture
async def app(station_repo, vehicle_repo, test_settings):
    """FastAPI app with catalog repositories and mock-only collaborators."""
    with (
        patch(
            "evjourney.workers.station_feed.start_feed_listener",
            new_callable=AsyncMock,
        ),
        patch(
            "evjourney.workers.station_feed.stop_feed_listener",
            new_callable=AsyncMock,
        ),
    ):
        from evjourney.api.app import create_app
        from evjourney.api.dependencies import (
            get_settings,
            get_station_repository,
            get_vehicle_repository,
        )
        from evjourney.api.middleware import limiter

        limiter.reset()
        application = create_app()
        application.dependency_overrides[get_station_repository] = lambda: station_repo
        application.dependency_overrides[get_vehicle_repository] = lambda: vehicle_repo
        application.dependency_overrides[get_settings] = lambda: test_settings
        yield application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
