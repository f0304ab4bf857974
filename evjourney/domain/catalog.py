"""
Static UAE reference catalog: EV models sold in the UAE and public
charging stations in Dubai and Abu Dhabi.

Vehicles are immutable.  Stations are templates; the station repository
deep-copies them before connector availability is ever changed.
"""

from __future__ import annotations

from .entities import (
    ChargingPort,
    ChargingStation,
    Connector,
    Location,
    StationPricing,
    Vehicle,
)
from .enums import ConnectorType, Network

# Source data gives one max power per site.  Type2 sockets are assumed to be
# AC (22 kW three-phase) and are capped here; other types get the site rating.
AC_MAX_POWER_KW = 22.0


def _connectors(
    station_id: str,
    types: list[ConnectorType],
    max_power_kw: float,
    ports: int,
    available: bool = True,
) -> list[Connector]:
    """Spread *ports* connectors round-robin over *types*."""
    connectors = []
    for i in range(ports):
        ctype = types[i % len(types)]
        power = (
            min(max_power_kw, AC_MAX_POWER_KW)
            if ctype is ConnectorType.TYPE2
            else max_power_kw
        )
        connectors.append(
            Connector(
                id=f"{station_id}-{i + 1}",
                connector_type=ctype.value,
                max_power_kw=power,
                is_available=available,
            )
        )
    return connectors


# ── Vehicles ──────────────────────────────────────────────────────────


EV_MODELS: tuple[Vehicle, ...] = (
    Vehicle(
        id="tesla-model-3",
        make="Tesla",
        model="Model 3",
        year=2024,
        battery_capacity_kwh=75,
        efficiency_wh_per_km=150,
        mass_kg=1830,
        drag_coefficient=0.23,
        frontal_area_m2=2.28,
        charging_ports=(
            ChargingPort(ConnectorType.TESLA.value, 250, 400),
            ChargingPort(ConnectorType.CCS2.value, 170, 400),
        ),
        max_charging_speed_kw=250,
        max_voltage=400,
        is_popular_in_uae=True,
    ),
    Vehicle(
        id="bmw-i4",
        make="BMW",
        model="i4 M50",
        year=2024,
        battery_capacity_kwh=83.9,
        efficiency_wh_per_km=180,
        mass_kg=2215,
        drag_coefficient=0.24,
        frontal_area_m2=2.37,
        charging_ports=(ChargingPort(ConnectorType.CCS2.value, 205, 400),),
        max_charging_speed_kw=205,
        max_voltage=400,
        is_popular_in_uae=True,
    ),
    Vehicle(
        id="mercedes-eqs",
        make="Mercedes",
        model="EQS 450+",
        year=2024,
        battery_capacity_kwh=107.8,
        efficiency_wh_per_km=160,
        mass_kg=2585,
        drag_coefficient=0.20,
        frontal_area_m2=2.51,
        charging_ports=(ChargingPort(ConnectorType.CCS2.value, 200, 400),),
        max_charging_speed_kw=200,
        max_voltage=400,
        is_popular_in_uae=True,
    ),
    Vehicle(
        id="hyundai-ioniq5",
        make="Hyundai",
        model="IONIQ 5",
        year=2024,
        battery_capacity_kwh=77.4,
        efficiency_wh_per_km=170,
        mass_kg=2268,
        drag_coefficient=0.29,
        frontal_area_m2=2.68,
        charging_ports=(ChargingPort(ConnectorType.CCS2.value, 235, 800),),
        max_charging_speed_kw=235,
        max_voltage=800,
        is_popular_in_uae=True,
    ),
    Vehicle(
        id="genesis-gv60",
        make="Genesis",
        model="GV60",
        year=2024,
        battery_capacity_kwh=77.4,
        efficiency_wh_per_km=185,
        mass_kg=2205,
        drag_coefficient=0.28,
        frontal_area_m2=2.72,
        charging_ports=(ChargingPort(ConnectorType.CCS2.value, 235, 800),),
        max_charging_speed_kw=235,
        max_voltage=800,
        is_popular_in_uae=False,
    ),
    Vehicle(
        id="audi-etron-gt",
        make="Audi",
        model="e-tron GT",
        year=2024,
        battery_capacity_kwh=93.4,
        efficiency_wh_per_km=190,
        mass_kg=2340,
        drag_coefficient=0.24,
        frontal_area_m2=2.35,
        charging_ports=(ChargingPort(ConnectorType.CCS2.value, 270, 800),),
        max_charging_speed_kw=270,
        max_voltage=800,
        is_popular_in_uae=True,
    ),
)


# ── Charging stations ─────────────────────────────────────────────────


CHARGING_STATIONS: tuple[ChargingStation, ...] = (
    ChargingStation(
        id="dewa-mall-emirates",
        name="Mall of the Emirates - DEWA Green Charger",
        location=Location(
            25.1172, 55.2001, "Mall of the Emirates, Sheikh Zayed Road, Dubai"
        ),
        network=Network.DEWA.value,
        connectors=_connectors(
            "dewa-mall-emirates",
            [ConnectorType.CCS2, ConnectorType.CHADEMO],
            150,
            4,
        ),
        pricing=StationPricing(cost_per_kwh=0.29),
        amenities=("Shopping Mall", "Restaurants", "Cinema", "Free WiFi"),
    ),
    ChargingStation(
        id="dewa-downtown-dubai",
        name="Downtown Dubai - DEWA Station",
        location=Location(
            25.1972, 55.2744, "Downtown Dubai, Mohammed Bin Rashid Boulevard"
        ),
        network=Network.DEWA.value,
        connectors=_connectors(
            "dewa-downtown-dubai",
            [ConnectorType.CCS2, ConnectorType.TYPE2],
            120,
            6,
        ),
        pricing=StationPricing(cost_per_kwh=0.29),
        amenities=("Dubai Mall nearby", "Burj Khalifa view", "Metro station"),
    ),
    ChargingStation(
        id="tesla-supercharger-jbr",
        name="Tesla Supercharger - JBR",
        location=Location(25.0657, 55.1398, "Jumeirah Beach Residence, Dubai"),
        network=Network.TESLA.value,
        connectors=_connectors(
            "tesla-supercharger-jbr",
            [ConnectorType.TESLA, ConnectorType.CCS2],
            250,
            8,
            available=False,
        ),
        pricing=StationPricing(cost_per_kwh=0.35),
        amenities=("Beach access", "Restaurants", "Parking"),
    ),
    ChargingStation(
        id="addc-yas-island",
        name="Yas Island Mall - ADDC",
        location=Location(24.4888, 54.6094, "Yas Island, Abu Dhabi"),
        network=Network.ADDC.value,
        connectors=_connectors(
            "addc-yas-island",
            [ConnectorType.CCS2, ConnectorType.CHADEMO, ConnectorType.TYPE2],
            180,
            10,
        ),
        pricing=StationPricing(cost_per_kwh=0.27),
        amenities=("Theme parks nearby", "Shopping", "Hotels", "F1 Circuit"),
    ),
    ChargingStation(
        id="dewa-business-bay",
        name="Business Bay Metro - DEWA",
        location=Location(25.1868, 55.2650, "Business Bay Metro Station, Dubai"),
        network=Network.DEWA.value,
        connectors=_connectors(
            "dewa-business-bay",
            [ConnectorType.CCS2, ConnectorType.TYPE2],
            100,
            4,
        ),
        pricing=StationPricing(cost_per_kwh=0.29),
        amenities=("Metro station", "Business district", "Restaurants"),
    ),
)
