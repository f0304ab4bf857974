"""
Vehicle endpoints
=================

GET /api/v1/vehicles                    -- filter the UAE EV catalog
GET /api/v1/vehicles/{vehicle_id}       -- one vehicle
GET /api/v1/vehicles/{vehicle_id}/range -- remaining range at a given SOC
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from evjourney.api.dependencies import get_vehicle_repository
from evjourney.api.middleware import limiter
from evjourney.api.schemas import ErrorResponse, VehicleRangeResponse, VehicleResponse
from evjourney.config import settings
from evjourney.domain.charging import remaining_range_km
from evjourney.domain.entities import VehicleCriteria
from evjourney.domain.enums import ConnectorType
from evjourney.domain.filtering import filter_vehicles
from evjourney.infrastructure.repositories import VehicleRepository

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("", response_model=list[VehicleResponse], summary="Filter vehicles")
@limiter.limit(settings.rate_limit)
async def list_vehicles(
    request: Request,
    search: Optional[str] = None,
    make: Optional[str] = None,
    year: Optional[int] = None,
    connector_type: Optional[ConnectorType] = None,
    min_range_km: Optional[float] = Query(None, ge=0),
    popular_only: bool = False,
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    criteria = VehicleCriteria(
        search=search,
        make=make,
        year=year,
        connector_type=connector_type,
        min_range_km=min_range_km,
        popular_only=popular_only,
    )
    return [
        VehicleResponse.from_entity(v)
        for v in filter_vehicles(repo.list_all(), criteria)
    ]


@router.get(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    summary="Get a vehicle",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_vehicle(
    request: Request,
    vehicle_id: str,
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    vehicle = repo.get_by_id(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return VehicleResponse.from_entity(vehicle)


@router.get(
    "/{vehicle_id}/range",
    response_model=VehicleRangeResponse,
    summary="Remaining range at a state of charge",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_vehicle_range(
    request: Request,
    vehicle_id: str,
    soc: float = Query(100.0, ge=0, le=100),
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    vehicle = repo.get_by_id(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return VehicleRangeResponse(
        vehicle_id=vehicle.id,
        soc=soc,
        remaining_range_km=round(
            remaining_range_km(
                vehicle.battery_capacity_kwh, soc, vehicle.efficiency_wh_per_km
            ),
            1,
        ),
    )
