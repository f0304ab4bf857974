"""
Route planning endpoints
========================

POST /api/v1/routes/plan       -- mock route plan with selected charging stops
GET  /api/v1/routes/geocode    -- place search (falls back to sample places)
GET  /api/v1/routes/directions -- road route geometry (straight-line mock without a key)

The plan itself is a fixed placeholder (see ``evjourney.domain.routing``);
only the charging stops and weather come from live-ish data.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from evjourney.api.dependencies import (
    get_routing_client,
    get_settings,
    get_station_repository,
    get_vehicle_repository,
    get_weather_client,
)
from evjourney.api.middleware import limiter
from evjourney.api.schemas import (
    DirectionsResponse,
    ErrorResponse,
    GeocodeResponse,
    RoutePlanRequest,
    RoutePlanResponse,
)
from evjourney.config import Settings, settings
from evjourney.domain.entities import Location
from evjourney.domain.routing import (
    DEFAULT_DESTINATION,
    DEFAULT_ORIGIN,
    plan_charging_stops,
    synthesize_mock_route,
)
from evjourney.infrastructure.repositories import StationRepository, VehicleRepository
from evjourney.infrastructure.routing_client import RoutingClient
from evjourney.infrastructure.weather_client import WeatherClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post(
    "/plan",
    response_model=RoutePlanResponse,
    summary="Plan a trip with charging stops",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def plan_route(
    request: Request,
    body: RoutePlanRequest,
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
    stations: StationRepository = Depends(get_station_repository),
    weather_client: WeatherClient = Depends(get_weather_client),
    cfg: Settings = Depends(get_settings),
):
    vehicle = vehicles.get_by_id(body.vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")

    origin = body.origin.to_location(DEFAULT_ORIGIN)
    destination = body.destination.to_location(DEFAULT_DESTINATION)

    plan = synthesize_mock_route(vehicle, origin, destination, body.initial_soc)
    stops = plan_charging_stops(
        plan,
        stations.list_all(),
        target_soc=cfg.charge_target_soc,
        min_arrival_soc=cfg.min_arrival_soc,
        max_stops=cfg.max_charging_stops,
        priority_networks=cfg.priority_networks,
    )
    if plan.charging_stops and not stops:
        logger.info("No compatible available station for %s", vehicle.id)

    weather = await weather_client.get_current_weather(
        origin.latitude, origin.longitude
    )
    return RoutePlanResponse.from_plan(
        plan, stops, weather=weather.data, weather_source=weather.metadata.source
    )


@router.get("/geocode", response_model=GeocodeResponse, summary="Search places")
@limiter.limit(settings.rate_limit)
async def geocode(
    request: Request,
    q: str = Query(..., min_length=1),
    client: RoutingClient = Depends(get_routing_client),
):
    result = await client.geocode(q)
    return GeocodeResponse(
        results=result.data or [],
        source=result.metadata.source,
        error=result.error.message if result.error else None,
    )


@router.get(
    "/directions",
    response_model=DirectionsResponse,
    summary="Road route between two points",
    description=(
        "Route geometry for drawing on a map. Independent of `/routes/plan`, "
        "whose figures stay placeholders."
    ),
)
@limiter.limit(settings.rate_limit)
async def directions(
    request: Request,
    start_lat: float = Query(..., ge=-90, le=90),
    start_lng: float = Query(..., ge=-180, le=180),
    end_lat: float = Query(..., ge=-90, le=90),
    end_lng: float = Query(..., ge=-180, le=180),
    profile: str = "driving-car",
    client: RoutingClient = Depends(get_routing_client),
):
    result = await client.get_route(
        Location(start_lat, start_lng), Location(end_lat, end_lng), profile
    )
    return DirectionsResponse(
        route=result.data,
        source=result.metadata.source,
        error=result.error.message if result.error else None,
    )
