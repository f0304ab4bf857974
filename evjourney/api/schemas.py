"""Pydantic request / response schemas for the REST API.

Field bounds here are the only input validation in the project; the domain
functions accept anything and return neutral values for degenerate input.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from evjourney.domain.entities import (
    ChargingStation,
    ChargingStop,
    Location,
    RoutePlan,
    Vehicle,
)
from evjourney.domain.enums import UpdatePriority
from evjourney.domain.charging import full_range_km
from evjourney.infrastructure.routing_client import GeocodingResult, RouteSummary
from evjourney.infrastructure.weather_client import WeatherData


# ── Requests ──────────────────────────────────────────────────────────


class ChargingEstimateRequest(BaseModel):
    battery_capacity_kwh: float = Field(..., gt=0)
    initial_soc: float = Field(..., ge=0, le=100)
    target_soc: float = Field(..., ge=0, le=100)
    charging_power_kw: float = Field(
        ..., description="Non-positive power yields a zero estimate."
    )
    cost_per_kwh: Optional[float] = Field(None, ge=0, description="AED per kWh")
    session_fee: float = Field(0.0, ge=0, description="AED per session")


class PlaceIn(BaseModel):
    address: str = ""
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)

    def to_location(self, default: Location) -> Location:
        if self.lat is None or self.lng is None:
            return Location(
                default.latitude, default.longitude, self.address or default.address
            )
        return Location(self.lat, self.lng, self.address)


class RoutePlanRequest(BaseModel):
    vehicle_id: str
    origin: PlaceIn
    destination: PlaceIn
    initial_soc: float = Field(75.0, ge=0, le=100)


class StationUpdateRequest(BaseModel):
    station_id: str
    is_available: bool
    connector_id: Optional[str] = None
    priority: UpdatePriority = UpdatePriority.MEDIUM


# ── Responses ─────────────────────────────────────────────────────────


class LocationResponse(BaseModel):
    latitude: float
    longitude: float
    address: str = ""

    @classmethod
    def from_entity(cls, loc: Location) -> "LocationResponse":
        return cls(latitude=loc.latitude, longitude=loc.longitude, address=loc.address)


class ConnectorResponse(BaseModel):
    id: str
    connector_type: str
    max_power_kw: float
    is_available: bool

    model_config = {"from_attributes": True}


class StationResponse(BaseModel):
    id: str
    name: str
    network: str
    location: LocationResponse
    connectors: list[ConnectorResponse] = []
    connector_types: list[str] = []
    available_connectors: int
    total_connectors: int
    max_power_kw: float
    cost_per_kwh: float
    session_fee: float
    amenities: list[str] = []
    distance_km: Optional[float] = None

    @classmethod
    def from_entity(
        cls, s: ChargingStation, distance_km: Optional[float] = None
    ) -> "StationResponse":
        return cls(
            id=s.id,
            name=s.name,
            network=s.network,
            location=LocationResponse.from_entity(s.location),
            connectors=[ConnectorResponse.model_validate(c) for c in s.connectors],
            connector_types=s.connector_types,
            available_connectors=s.available_connectors,
            total_connectors=len(s.connectors),
            max_power_kw=s.max_power_kw,
            cost_per_kwh=s.pricing.cost_per_kwh,
            session_fee=s.pricing.session_fee,
            amenities=list(s.amenities),
            distance_km=None if distance_km is None else round(distance_km, 2),
        )


class ChargingPortResponse(BaseModel):
    connector_type: str
    max_power_kw: float
    voltage: float

    model_config = {"from_attributes": True}


class VehicleResponse(BaseModel):
    id: str
    make: str
    model: str
    year: int
    battery_capacity_kwh: float
    efficiency_wh_per_km: float
    charging_ports: list[ChargingPortResponse] = []
    mass_kg: float
    drag_coefficient: float
    frontal_area_m2: float
    max_charging_speed_kw: float
    max_voltage: float
    is_popular_in_uae: bool
    full_range_km: float

    @classmethod
    def from_entity(cls, v: Vehicle) -> "VehicleResponse":
        return cls(
            id=v.id,
            make=v.make,
            model=v.model,
            year=v.year,
            battery_capacity_kwh=v.battery_capacity_kwh,
            efficiency_wh_per_km=v.efficiency_wh_per_km,
            charging_ports=[
                ChargingPortResponse.model_validate(p) for p in v.charging_ports
            ],
            mass_kg=v.mass_kg,
            drag_coefficient=v.drag_coefficient,
            frontal_area_m2=v.frontal_area_m2,
            max_charging_speed_kw=v.max_charging_speed_kw,
            max_voltage=v.max_voltage,
            is_popular_in_uae=v.is_popular_in_uae,
            full_range_km=round(
                full_range_km(v.battery_capacity_kwh, v.efficiency_wh_per_km)
            ),
        )


class VehicleRangeResponse(BaseModel):
    vehicle_id: str
    soc: float
    remaining_range_km: float


class ChargingEstimateResponse(BaseModel):
    energy_to_add_kwh: float
    charging_time_min: float
    cost_aed: Optional[float] = None


class ChargingStopResponse(BaseModel):
    station: StationResponse
    arrival_soc: float
    departure_soc: float
    charging_time_min: float
    energy_added_kwh: float
    cost_aed: float

    @classmethod
    def from_entity(cls, stop: ChargingStop) -> "ChargingStopResponse":
        return cls(
            station=StationResponse.from_entity(stop.station),
            arrival_soc=stop.arrival_soc,
            departure_soc=stop.departure_soc,
            charging_time_min=round(stop.charging_time_min, 1),
            energy_added_kwh=round(stop.energy_added_kwh, 2),
            cost_aed=stop.cost_aed,
        )


class RoutePlanResponse(BaseModel):
    origin: LocationResponse
    destination: LocationResponse
    vehicle: VehicleResponse
    initial_soc: float
    total_distance_km: float
    total_duration_min: float
    total_energy_used_kwh: float
    final_soc: float
    charging_stops: int
    remaining_range_km: float
    consumption_kwh_per_100km: float
    weather_impact_percent: float
    stops: list[ChargingStopResponse] = []
    total_charging_time_min: float = 0.0
    total_charging_cost_aed: float = 0.0
    weather: Optional[WeatherData] = None
    weather_source: str = "mock"

    @classmethod
    def from_plan(
        cls,
        plan: RoutePlan,
        stops: list[ChargingStop],
        weather: Optional[WeatherData] = None,
        weather_source: str = "mock",
    ) -> "RoutePlanResponse":
        return cls(
            origin=LocationResponse.from_entity(plan.origin),
            destination=LocationResponse.from_entity(plan.destination),
            vehicle=VehicleResponse.from_entity(plan.vehicle),
            initial_soc=plan.initial_soc,
            total_distance_km=plan.total_distance_km,
            total_duration_min=plan.total_duration_min,
            total_energy_used_kwh=plan.total_energy_used_kwh,
            final_soc=plan.final_soc,
            charging_stops=plan.charging_stops,
            remaining_range_km=round(plan.remaining_range_km),
            consumption_kwh_per_100km=round(plan.consumption_kwh_per_100km, 1),
            weather_impact_percent=plan.weather_impact_percent,
            stops=[ChargingStopResponse.from_entity(s) for s in stops],
            total_charging_time_min=round(sum(s.charging_time_min for s in stops), 1),
            total_charging_cost_aed=round(sum(s.cost_aed for s in stops), 2),
            weather=weather,
            weather_source=weather_source,
        )


class GeocodeResponse(BaseModel):
    results: list[GeocodingResult] = []
    source: str = "live"
    error: Optional[str] = None


class DirectionsResponse(BaseModel):
    route: Optional[RouteSummary] = None
    source: str = "live"
    error: Optional[str] = None


class PublishResponse(BaseModel):
    station_id: str
    subscribers: int


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
