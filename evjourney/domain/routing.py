"""
Mock Route Synthesizer
======================

**This is a placeholder, not a routing algorithm.**  No path-finding is
done: every plan carries the same fabricated Dubai -> Abu Dhabi figures
(145 km, 95 min, 24.5 kWh, one charging stop, 45 % on arrival, -2 %
weather impact) whatever origin and destination are passed in.  The
numbers only need to have the right shape for clients to render.

Charging stops
--------------
``plan_charging_stops`` picks stations with ``select_charging_stops`` and,
for each one, assumes the car arrives at ``max(final_soc, min_arrival_soc)``
and charges to ``target_soc`` at the vehicle's max charging speed.  A
vehicle without a charging speed gets a zero-minute stop with no energy
added and nothing to pay.
"""

from __future__ import annotations

from collections.abc import Iterable

from .charging import charging_cost, energy_to_add_kwh, estimate_charging_time_minutes
from .entities import ChargingStation, ChargingStop, Location, RoutePlan, Vehicle
from .enums import PRIORITY_NETWORKS
from .filtering import select_charging_stops

MOCK_DISTANCE_KM = 145.0
MOCK_DURATION_MIN = 95.0
MOCK_ENERGY_USED_KWH = 24.5
MOCK_FINAL_SOC = 45.0
MOCK_CHARGING_STOPS = 1
MOCK_WEATHER_IMPACT_PERCENT = -2.0

# Used when a request names places without coordinates
DEFAULT_ORIGIN = Location(25.2048, 55.2708, "Dubai")
DEFAULT_DESTINATION = Location(24.4539, 54.3773, "Abu Dhabi")


def synthesize_mock_route(
    vehicle: Vehicle,
    origin: Location,
    destination: Location,
    initial_soc: float,
) -> RoutePlan:
    """Fabricate a ``RoutePlan`` for *vehicle* (see module docstring)."""
    return RoutePlan(
        origin=origin,
        destination=destination,
        vehicle=vehicle,
        initial_soc=initial_soc,
        total_distance_km=MOCK_DISTANCE_KM,
        total_duration_min=MOCK_DURATION_MIN,
        total_energy_used_kwh=MOCK_ENERGY_USED_KWH,
        final_soc=MOCK_FINAL_SOC,
        charging_stops=MOCK_CHARGING_STOPS,
        weather_impact_percent=MOCK_WEATHER_IMPACT_PERCENT,
    )


def build_charging_stop(
    plan: RoutePlan,
    station: ChargingStation,
    target_soc: float = 80.0,
    min_arrival_soc: float = 20.0,
) -> ChargingStop:
    vehicle = plan.vehicle
    arrival = max(plan.final_soc, min_arrival_soc)
    minutes = estimate_charging_time_minutes(
        vehicle.battery_capacity_kwh,
        arrival,
        target_soc,
        vehicle.max_charging_speed_kw,
    )
    # No charging time, no energy delivered
    energy = (
        energy_to_add_kwh(vehicle.battery_capacity_kwh, arrival, target_soc)
        if minutes > 0
        else 0.0
    )
    return ChargingStop(
        station=station,
        arrival_soc=arrival,
        departure_soc=max(arrival, target_soc),
        charging_time_min=minutes,
        energy_added_kwh=energy,
        cost_aed=charging_cost(
            energy, station.pricing.cost_per_kwh, station.pricing.session_fee
        ),
    )


def plan_charging_stops(
    plan: RoutePlan,
    stations: Iterable[ChargingStation],
    target_soc: float = 80.0,
    min_arrival_soc: float = 20.0,
    max_stops: int = 2,
    priority_networks: Iterable[str] = PRIORITY_NETWORKS,
) -> list[ChargingStop]:
    selected = select_charging_stops(plan, stations, max_stops, priority_networks)
    return [
        build_charging_stop(plan, s, target_soc, min_arrival_soc) for s in selected
    ]
