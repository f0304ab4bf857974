"""
Admin / observability endpoints
===============================

GET  /api/v1/admin/health          -- simple health check
POST /api/v1/admin/station-updates -- publish a station status update
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from evjourney.api.dependencies import get_station_feed, get_station_repository
from evjourney.api.middleware import limiter
from evjourney.api.schemas import (
    ErrorResponse,
    HealthResponse,
    PublishResponse,
    StationUpdateRequest,
)
from evjourney.config import settings
from evjourney.domain.entities import StationStatusUpdate
from evjourney.infrastructure.repositories import StationRepository
from evjourney.infrastructure.station_feed import StationFeed

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/station-updates",
    status_code=202,
    response_model=PublishResponse,
    summary="Publish a station status update",
    responses={
        202: {"description": "Update published; applied asynchronously."},
        404: {"model": ErrorResponse},
    },
)
@limiter.limit(settings.rate_limit)
async def publish_station_update(
    request: Request,
    body: StationUpdateRequest,
    feed: StationFeed = Depends(get_station_feed),
    repo: StationRepository = Depends(get_station_repository),
):
    if repo.get_by_id(body.station_id) is None:
        raise HTTPException(status_code=404, detail="Station not found")

    subscribers = await feed.publish(
        StationStatusUpdate(
            station_id=body.station_id,
            is_available=body.is_available,
            connector_id=body.connector_id,
            priority=body.priority,
        )
    )
    return PublishResponse(station_id=body.station_id, subscribers=subscribers)


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
