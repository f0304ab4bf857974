"""Current-weather client (OpenWeatherMap) with mock fallback."""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx
from pydantic import BaseModel

from .envelope import ServiceResponse

logger = logging.getLogger(__name__)


class WeatherData(BaseModel):
    temperature_c: float
    humidity_percent: float
    wind_speed_kmh: float
    wind_direction_deg: float
    condition: str
    description: str = ""
    icon: str = ""


def mock_weather() -> WeatherData:
    """A typical clear UAE day."""
    return WeatherData(
        temperature_c=28,
        humidity_percent=65,
        wind_speed_kmh=12,
        wind_direction_deg=180,
        condition="Clear",
        description="clear sky",
        icon="01d",
    )


class WeatherClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openweathermap.org/data/2.5",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def get_current_weather(
        self, lat: float, lng: float
    ) -> ServiceResponse[WeatherData]:
        started = time.perf_counter()
        if not self.api_key:
            return ServiceResponse[WeatherData].mock(mock_weather(), started)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                resp = await client.get(
                    f"{self.base_url}/weather",
                    params={
                        "lat": lat,
                        "lon": lng,
                        "appid": self.api_key,
                        "units": "metric",
                    },
                )
                resp.raise_for_status()
                data = resp.json()
                weather = WeatherData(
                    temperature_c=round(data["main"]["temp"]),
                    humidity_percent=data["main"]["humidity"],
                    wind_speed_kmh=round(data["wind"]["speed"] * 3.6),  # m/s -> km/h
                    wind_direction_deg=data["wind"].get("deg", 0),
                    condition=data["weather"][0]["main"],
                    description=data["weather"][0].get("description", ""),
                    icon=data["weather"][0].get("icon", ""),
                )
            return ServiceResponse[WeatherData].live(weather, started)
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Weather API failed, using mock data: %s", exc)
            return ServiceResponse[WeatherData].fallback(
                mock_weather(), started, "WEATHER_UNAVAILABLE", str(exc)
            )
