"""
Charging and energy estimation
==============================

Formulas
--------
Energy to add (kWh)  = Capacity x (Target_SOC - Initial_SOC) / 100
Charging time (min)  = Energy_to_add / Charging_power x 60
Remaining range (km) = Capacity x 1000 x SOC / 100 / Efficiency (Wh/km)

The charging estimate is linear: it ignores the taper of real charging
curves above ~80 % SOC, so times near a full battery are optimistic.

Degenerate inputs never raise.  A non-positive power, a target at or below
the initial SOC, or a non-positive distance/efficiency all give 0.  SOC
values are expected to be clamped to [0, 100] by the caller.

Complexity: O(1) per call.
"""

from __future__ import annotations


def energy_to_add_kwh(
    battery_capacity_kwh: float, initial_soc: float, target_soc: float
) -> float:
    if target_soc <= initial_soc:
        return 0.0
    return battery_capacity_kwh * (target_soc - initial_soc) / 100


def estimate_charging_time_minutes(
    battery_capacity_kwh: float,
    initial_soc: float,
    target_soc: float,
    charging_power_kw: float,
) -> float:
    """Minutes needed to charge from *initial_soc* to *target_soc* (percent)."""
    if charging_power_kw <= 0 or target_soc <= initial_soc:
        return 0.0
    energy = energy_to_add_kwh(battery_capacity_kwh, initial_soc, target_soc)
    return energy / charging_power_kw * 60


def remaining_range_km(
    battery_capacity_kwh: float, soc: float, efficiency_wh_per_km: float
) -> float:
    if efficiency_wh_per_km <= 0:
        return 0.0
    return battery_capacity_kwh * 1000 * (soc / 100) / efficiency_wh_per_km


def full_range_km(battery_capacity_kwh: float, efficiency_wh_per_km: float) -> float:
    return remaining_range_km(battery_capacity_kwh, 100, efficiency_wh_per_km)


def consumption_kwh_per_100km(energy_used_kwh: float, distance_km: float) -> float:
    if distance_km <= 0:
        return 0.0
    return energy_used_kwh / distance_km * 100


def charging_cost(
    energy_kwh: float, cost_per_kwh: float, session_fee: float = 0.0
) -> float:
    """Session cost in AED; nothing is charged when no energy is added."""
    if energy_kwh <= 0:
        return 0.0
    return round(energy_kwh * cost_per_kwh + session_fee, 2)
