"""FastAPI dependency injection helpers.

Configuration and collaborators are handed to route handlers explicitly,
so tests can swap any of them through ``app.dependency_overrides``.
"""

from fastapi import Depends

from evjourney.config import Settings, settings
from evjourney.infrastructure.redis_client import get_redis
from evjourney.infrastructure.repositories import (
    StationRepository,
    VehicleRepository,
    station_repository,
    vehicle_repository,
)
from evjourney.infrastructure.routing_client import RoutingClient
from evjourney.infrastructure.station_feed import StationFeed
from evjourney.infrastructure.weather_client import WeatherClient


def get_settings() -> Settings:
    return settings


def get_station_repository() -> StationRepository:
    return station_repository


def get_vehicle_repository() -> VehicleRepository:
    return vehicle_repository


def get_routing_client(cfg: Settings = Depends(get_settings)) -> RoutingClient:
    return RoutingClient(
        cfg.routing_api_key,
        base_url=cfg.routing_base_url,
        geocoding_url=cfg.geocoding_url,
        timeout=cfg.http_timeout_seconds,
    )


def get_weather_client(cfg: Settings = Depends(get_settings)) -> WeatherClient:
    return WeatherClient(
        cfg.weather_api_key,
        base_url=cfg.weather_base_url,
        timeout=cfg.http_timeout_seconds,
    )


async def get_station_feed(cfg: Settings = Depends(get_settings)) -> StationFeed:
    return StationFeed(await get_redis(), cfg.station_feed_channel)
