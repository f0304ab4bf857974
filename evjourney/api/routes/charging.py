"""
Charging endpoints
==================

POST /api/v1/charging/estimate -- linear charging time, energy and cost
"""

from fastapi import APIRouter, Request

from evjourney.api.middleware import limiter
from evjourney.api.schemas import ChargingEstimateRequest, ChargingEstimateResponse
from evjourney.config import settings
from evjourney.domain.charging import (
    charging_cost,
    energy_to_add_kwh,
    estimate_charging_time_minutes,
)

router = APIRouter(prefix="/charging", tags=["charging"])


@router.post(
    "/estimate",
    response_model=ChargingEstimateResponse,
    summary="Estimate charging time",
    description=(
        "Linear estimate (no taper near full). A target at or below the "
        "initial SOC, or a non-positive power, gives zero minutes."
    ),
)
@limiter.limit(settings.rate_limit)
async def estimate_charging(request: Request, body: ChargingEstimateRequest):
    minutes = estimate_charging_time_minutes(
        body.battery_capacity_kwh,
        body.initial_soc,
        body.target_soc,
        body.charging_power_kw,
    )
    # Nothing is delivered when the charger can't run
    energy = (
        energy_to_add_kwh(body.battery_capacity_kwh, body.initial_soc, body.target_soc)
        if minutes > 0
        else 0.0
    )
    cost = (
        charging_cost(energy, body.cost_per_kwh, body.session_fee)
        if body.cost_per_kwh is not None
        else None
    )
    return ChargingEstimateResponse(
        energy_to_add_kwh=round(energy, 2),
        charging_time_min=round(minutes, 1),
        cost_aed=cost,
    )
