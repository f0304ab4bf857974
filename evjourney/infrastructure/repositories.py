"""
Repository Pattern -- in-memory catalog stores.

The filter/rank core only ever receives *snapshots* (deep copies) from
``StationRepository.list_all``, so a status update landing mid-request
cannot change a collection that is being filtered.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import Optional

from evjourney.domain.catalog import CHARGING_STATIONS, EV_MODELS
from evjourney.domain.entities import ChargingStation, StationStatusUpdate, Vehicle

logger = logging.getLogger(__name__)


class StationRepository:
    def __init__(self, stations: Iterable[ChargingStation]):
        # Own copies: catalog templates are never mutated
        self._stations: dict[str, ChargingStation] = {
            s.id: copy.deepcopy(s) for s in stations
        }

    def list_all(self) -> list[ChargingStation]:
        return [copy.deepcopy(s) for s in self._stations.values()]

    def get_by_id(self, station_id: str) -> Optional[ChargingStation]:
        station = self._stations.get(station_id)
        return copy.deepcopy(station) if station else None

    def apply_update(self, update: StationStatusUpdate) -> bool:
        """Apply a connector availability change.  Returns True if applied."""
        station = self._stations.get(update.station_id)
        if station is None:
            logger.warning("Status update for unknown station %s", update.station_id)
            return False
        if not station.set_availability(update.is_available, update.connector_id):
            logger.warning(
                "Status update for unknown connector %s on %s",
                update.connector_id,
                update.station_id,
            )
            return False
        logger.debug(
            "Station %s now has %d available connectors",
            station.id,
            station.available_connectors,
        )
        return True


class VehicleRepository:
    def __init__(self, vehicles: Iterable[Vehicle]):
        self._vehicles: dict[str, Vehicle] = {v.id: v for v in vehicles}

    def list_all(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return self._vehicles.get(vehicle_id)


# Process-wide stores seeded from the static catalog
station_repository = StationRepository(CHARGING_STATIONS)
vehicle_repository = VehicleRepository(EV_MODELS)
