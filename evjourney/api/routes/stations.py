"""
Charging station endpoints
==========================

GET /api/v1/stations              -- filter (and optionally rank) stations
GET /api/v1/stations/{station_id} -- one station with live connector status
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from evjourney.api.dependencies import get_settings, get_station_repository
from evjourney.api.middleware import limiter
from evjourney.api.schemas import ErrorResponse, StationResponse
from evjourney.config import Settings, settings
from evjourney.domain.distance import haversine_km
from evjourney.domain.entities import Location, StationCriteria
from evjourney.domain.enums import ConnectorType, Network
from evjourney.domain.filtering import filter_stations, rank_charging_stops
from evjourney.infrastructure.repositories import StationRepository

router = APIRouter(prefix="/stations", tags=["stations"])


@router.get(
    "",
    response_model=list[StationResponse],
    summary="Filter charging stations",
    description=(
        "All supplied criteria must match. `max_distance_km` only applies "
        "when both `lat` and `lng` are given. Set `rank=true` to order by "
        "priority network, then descending max power."
    ),
)
@limiter.limit(settings.rate_limit)
async def list_stations(
    request: Request,
    network: Optional[Network] = None,
    connector_type: Optional[ConnectorType] = None,
    min_power_kw: Optional[float] = Query(None, ge=0),
    max_price_per_kwh: Optional[float] = Query(None, ge=0),
    available_only: bool = False,
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    max_distance_km: Optional[float] = Query(None, gt=0),
    rank: bool = False,
    repo: StationRepository = Depends(get_station_repository),
    cfg: Settings = Depends(get_settings),
):
    criteria = StationCriteria(
        network=network,
        connector_type=connector_type,
        min_power_kw=min_power_kw,
        max_distance_km=max_distance_km,
        max_price_per_kwh=max_price_per_kwh,
        available_only=available_only,
    )
    reference = Location(lat, lng) if lat is not None and lng is not None else None

    stations = filter_stations(repo.list_all(), criteria, reference)
    if rank:
        stations = rank_charging_stops(
            stations, len(stations), cfg.priority_networks
        )

    return [
        StationResponse.from_entity(
            s,
            distance_km=haversine_km(
                reference.latitude,
                reference.longitude,
                s.location.latitude,
                s.location.longitude,
            )
            if reference
            else None,
        )
        for s in stations
    ]


@router.get(
    "/{station_id}",
    response_model=StationResponse,
    summary="Get a charging station",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_station(
    request: Request,
    station_id: str,
    repo: StationRepository = Depends(get_station_repository),
):
    station = repo.get_by_id(station_id)
    if not station:
        raise HTTPException(status_code=404, detail="Station not found")
    return StationResponse.from_entity(station)
