"""
Domain entities.

- ``Vehicle`` is immutable catalog data (frozen dataclass).
- ``ChargingStation`` only ever changes through its connectors'
  ``is_available`` flags, driven by ``StationStatusUpdate`` messages.
- Criteria objects are plain configuration records: an empty / zero /
  false field means "don't filter on this".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .charging import consumption_kwh_per_100km, remaining_range_km
from .enums import UpdatePriority, UpdateType


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    address: str = ""


@dataclass(frozen=True)
class ChargingPort:
    connector_type: str
    max_power_kw: float
    voltage: float


@dataclass(frozen=True)
class StationPricing:
    cost_per_kwh: float  # AED
    session_fee: float = 0.0  # AED


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int
    battery_capacity_kwh: float
    efficiency_wh_per_km: float
    charging_ports: tuple[ChargingPort, ...] = ()
    mass_kg: float = 0.0
    drag_coefficient: float = 0.0
    frontal_area_m2: float = 0.0
    max_charging_speed_kw: float = 0.0
    max_voltage: float = 0.0
    is_popular_in_uae: bool = False

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}"

    @property
    def connector_types(self) -> set[str]:
        return {p.connector_type for p in self.charging_ports}


@dataclass
class Connector:
    id: str
    connector_type: str
    max_power_kw: float
    is_available: bool = True


@dataclass
class ChargingStation:
    id: str
    name: str
    location: Location
    network: str
    connectors: list[Connector] = field(default_factory=list)
    pricing: StationPricing = field(default_factory=lambda: StationPricing(0.0))
    amenities: tuple[str, ...] = ()

    @property
    def available_connectors(self) -> int:
        return sum(1 for c in self.connectors if c.is_available)

    @property
    def max_power_kw(self) -> float:
        return max((c.max_power_kw for c in self.connectors), default=0.0)

    @property
    def connector_types(self) -> list[str]:
        """Distinct connector types, in the order they first appear."""
        return list(dict.fromkeys(c.connector_type for c in self.connectors))

    def has_connector_type(self, connector_type: str) -> bool:
        return any(c.connector_type == connector_type for c in self.connectors)

    def set_availability(
        self, is_available: bool, connector_id: Optional[str] = None
    ) -> bool:
        """Flip one connector (or all when *connector_id* is None).

        Returns False if *connector_id* is not on this station.
        """
        if connector_id is None:
            for c in self.connectors:
                c.is_available = is_available
            return True
        for c in self.connectors:
            if c.id == connector_id:
                c.is_available = is_available
                return True
        return False


@dataclass
class StationCriteria:
    network: Optional[str] = None
    connector_type: Optional[str] = None
    min_power_kw: Optional[float] = None
    max_distance_km: Optional[float] = None
    max_price_per_kwh: Optional[float] = None
    available_only: bool = False


@dataclass
class VehicleCriteria:
    search: Optional[str] = None
    make: Optional[str] = None
    year: Optional[int] = None
    connector_type: Optional[str] = None
    min_range_km: Optional[float] = None
    popular_only: bool = False


@dataclass
class RoutePlan:
    """Simplified plan produced by the mock route synthesizer."""

    origin: Location
    destination: Location
    vehicle: Vehicle
    initial_soc: float
    total_distance_km: float
    total_duration_min: float
    total_energy_used_kwh: float
    final_soc: float
    charging_stops: int
    weather_impact_percent: float = 0.0

    @property
    def remaining_range_km(self) -> float:
        """Range left at departure for the plan's vehicle and initial SOC."""
        return remaining_range_km(
            self.vehicle.battery_capacity_kwh,
            self.initial_soc,
            self.vehicle.efficiency_wh_per_km,
        )

    @property
    def consumption_kwh_per_100km(self) -> float:
        return consumption_kwh_per_100km(
            self.total_energy_used_kwh, self.total_distance_km
        )


@dataclass
class ChargingStop:
    station: ChargingStation
    arrival_soc: float
    departure_soc: float
    charging_time_min: float
    energy_added_kwh: float
    cost_aed: float


@dataclass
class StationStatusUpdate:
    station_id: str
    is_available: bool
    connector_id: Optional[str] = None
    update_type: UpdateType = UpdateType.STATION_STATUS
    priority: UpdatePriority = UpdatePriority.MEDIUM
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
