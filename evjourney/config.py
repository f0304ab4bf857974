"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis (station status feed)
    redis_url: str = "redis://localhost:6379/0"
    station_feed_channel: str = "stations:status"
    feed_reconnect_seconds: float = 5.0

    # External services -- no key means mock data
    routing_api_key: Optional[str] = None
    routing_base_url: str = "https://api.openrouteservice.org/v2"
    geocoding_url: str = "https://nominatim.openstreetmap.org/search"
    weather_api_key: Optional[str] = None
    weather_base_url: str = "https://api.openweathermap.org/data/2.5"
    http_timeout_seconds: float = 10.0

    # Charging stop selection
    priority_networks: list[str] = ["Tesla", "DEWA"]
    charge_target_soc: float = 80.0  # %
    min_arrival_soc: float = 20.0  # %
    max_charging_stops: int = 2

    # API
    rate_limit: str = "100/minute"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
