"""
Station / Vehicle Filter-and-Rank
=================================

Filtering
---------
A station is kept only if it matches *every* criterion that is set:

* **network**        -- equality
* **connector_type** -- ANY connector has that type
* **min_power_kw**   -- ANY connector's max power >= threshold
* **max_price**      -- cost per kWh <= ceiling
* **available_only** -- at least one available connector
* **max_distance**   -- haversine(reference, station) <= radius; skipped
  when no reference point is given

Unset criteria (``None`` / ``0`` / ``""`` / ``False``) match everything, so
an empty ``StationCriteria`` returns the input unchanged.  Input order is
preserved and an empty result is a normal outcome.

Ranking
-------
Charging stops are ranked by (1) priority network first, (2) descending
max connector power.  ``sorted`` is stable, so ties keep input order.

Complexity: O(N) to filter, O(N log N) to rank.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .charging import full_range_km
from .distance import haversine_km
from .entities import (
    ChargingStation,
    Location,
    RoutePlan,
    StationCriteria,
    Vehicle,
    VehicleCriteria,
)
from .enums import PRIORITY_NETWORKS


def _value(x) -> str:
    """Plain string for either an enum member or a str."""
    return getattr(x, "value", x)


def station_matches(
    station: ChargingStation,
    criteria: StationCriteria,
    reference_point: Optional[Location] = None,
) -> bool:
    if criteria.network and station.network != _value(criteria.network):
        return False

    if criteria.connector_type and not station.has_connector_type(
        _value(criteria.connector_type)
    ):
        return False

    if criteria.min_power_kw and not any(
        c.max_power_kw >= criteria.min_power_kw for c in station.connectors
    ):
        return False

    if (
        criteria.max_price_per_kwh
        and station.pricing.cost_per_kwh > criteria.max_price_per_kwh
    ):
        return False

    if criteria.available_only and station.available_connectors <= 0:
        return False

    if criteria.max_distance_km and reference_point is not None:
        distance = haversine_km(
            reference_point.latitude,
            reference_point.longitude,
            station.location.latitude,
            station.location.longitude,
        )
        if distance > criteria.max_distance_km:
            return False

    return True


def filter_stations(
    stations: Iterable[ChargingStation],
    criteria: StationCriteria,
    reference_point: Optional[Location] = None,
) -> list[ChargingStation]:
    return [s for s in stations if station_matches(s, criteria, reference_point)]


def vehicle_matches(vehicle: Vehicle, criteria: VehicleCriteria) -> bool:
    if criteria.search:
        if criteria.search.lower() not in vehicle.display_name.lower():
            return False

    if criteria.make and vehicle.make != criteria.make:
        return False

    if criteria.year and vehicle.year != criteria.year:
        return False

    if (
        criteria.connector_type
        and _value(criteria.connector_type) not in vehicle.connector_types
    ):
        return False

    if criteria.min_range_km:
        rng = full_range_km(
            vehicle.battery_capacity_kwh, vehicle.efficiency_wh_per_km
        )
        if rng < criteria.min_range_km:
            return False

    if criteria.popular_only and not vehicle.is_popular_in_uae:
        return False

    return True


def filter_vehicles(
    vehicles: Iterable[Vehicle], criteria: VehicleCriteria
) -> list[Vehicle]:
    return [v for v in vehicles if vehicle_matches(v, criteria)]


def rank_charging_stops(
    candidates: Iterable[ChargingStation],
    count: int,
    priority_networks: Iterable[str] = PRIORITY_NETWORKS,
) -> list[ChargingStation]:
    """Return the best *count* stations: priority networks, then most power."""
    if count <= 0:
        return []
    preferred = {_value(n) for n in priority_networks}
    ranked = sorted(
        candidates,
        key=lambda s: (s.network not in preferred, -s.max_power_kw),
    )
    return ranked[:count]


def compatible_stations(
    stations: Iterable[ChargingStation], vehicle: Vehicle
) -> list[ChargingStation]:
    """Available stations with at least one connector the vehicle can use."""
    ports = vehicle.connector_types
    return [
        s
        for s in stations
        if s.available_connectors > 0
        and any(t in ports for t in s.connector_types)
    ]


def select_charging_stops(
    plan: RoutePlan,
    stations: Iterable[ChargingStation],
    max_stops: int = 2,
    priority_networks: Iterable[str] = PRIORITY_NETWORKS,
) -> list[ChargingStation]:
    if plan.charging_stops <= 0:
        return []
    return rank_charging_stops(
        compatible_stations(stations, plan.vehicle),
        min(plan.charging_stops, max_stops),
        priority_networks,
    )
