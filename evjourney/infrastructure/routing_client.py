"""
Routing / geocoding client (OpenRouteService + Nominatim).

Without an API key, ``get_route`` answers from a straight-line mock (the
shared haversine distance, driven at 1 km per minute).  Any upstream
failure falls back to the same mock inside an error envelope.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx
from pydantic import BaseModel

from evjourney.domain.distance import haversine_km
from evjourney.domain.entities import Location

from .envelope import ServiceResponse

logger = logging.getLogger(__name__)

MOCK_SPEED_KM_PER_MIN = 1.0

FALLBACK_PLACES = [
    ("Dubai Mall, Dubai", 25.1972, 55.2744),
    ("Abu Dhabi Mall, Abu Dhabi", 24.4888, 54.6094),
]


class RouteSummary(BaseModel):
    distance_km: float
    duration_min: float
    coordinates: list[list[float]]  # [lng, lat] pairs, GeoJSON order


class GeocodingResult(BaseModel):
    display_name: str
    lat: float
    lon: float


def mock_route(start: Location, end: Location) -> RouteSummary:
    distance = haversine_km(
        start.latitude, start.longitude, end.latitude, end.longitude
    )
    return RouteSummary(
        distance_km=round(distance, 2),
        duration_min=round(distance / MOCK_SPEED_KM_PER_MIN, 1),
        coordinates=[
            [start.longitude, start.latitude],
            [end.longitude, end.latitude],
        ],
    )


def fallback_places() -> list[GeocodingResult]:
    return [
        GeocodingResult(display_name=name, lat=lat, lon=lon)
        for name, lat, lon in FALLBACK_PLACES
    ]


class RoutingClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openrouteservice.org/v2",
        geocoding_url: str = "https://nominatim.openstreetmap.org/search",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geocoding_url = geocoding_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def get_route(
        self, start: Location, end: Location, profile: str = "driving-car"
    ) -> ServiceResponse[RouteSummary]:
        started = time.perf_counter()
        if not self.api_key:
            return ServiceResponse[RouteSummary].mock(mock_route(start, end), started)

        try:
            async with self._client() as client:
                resp = await client.post(
                    f"{self.base_url}/directions/{profile}/geojson",
                    headers={"Authorization": self.api_key},
                    json={
                        "coordinates": [
                            [start.longitude, start.latitude],
                            [end.longitude, end.latitude],
                        ],
                        "instructions": False,
                    },
                )
                resp.raise_for_status()
                feature = resp.json()["features"][0]
                summary = feature["properties"]["summary"]
                route = RouteSummary(
                    distance_km=round(summary["distance"] / 1000, 2),
                    duration_min=round(summary["duration"] / 60, 1),
                    coordinates=feature["geometry"]["coordinates"],
                )
            return ServiceResponse[RouteSummary].live(route, started)
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Routing API failed, using mock route: %s", exc)
            return ServiceResponse[RouteSummary].fallback(
                mock_route(start, end), started, "ROUTING_UNAVAILABLE", str(exc)
            )

    async def geocode(
        self, query: str, limit: int = 5
    ) -> ServiceResponse[list[GeocodingResult]]:
        """Search UAE places by name (Nominatim needs no key)."""
        started = time.perf_counter()
        try:
            async with self._client() as client:
                resp = await client.get(
                    self.geocoding_url,
                    params={
                        "format": "json",
                        "q": query,
                        "limit": limit,
                        "countrycodes": "ae",
                    },
                    headers={"User-Agent": "evjourney/1.0"},
                )
                resp.raise_for_status()
                results = [
                    GeocodingResult(
                        display_name=r["display_name"],
                        lat=float(r["lat"]),
                        lon=float(r["lon"]),
                    )
                    for r in resp.json()
                ]
            return ServiceResponse[list[GeocodingResult]].live(results, started)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", query, exc)
            return ServiceResponse[list[GeocodingResult]].fallback(
                fallback_places(), started, "GEOCODING_UNAVAILABLE", str(exc)
            )
