"""In-memory station repository implementation."""

from __future__ import annotations

import itertools

from subway_network.domain.models.station import Station
from subway_network.domain.ports.station_repository import StationRepository


class InMemoryStationRepository(StationRepository):
    """In-memory store of stations keyed by station ID."""

    def __init__(self) -> None:
        """Initialize the repository."""
        self._stations: dict[int, Station] = {}
        self._ids = itertools.count(1)

    async def next_id(self) -> int:
        return next(self._ids)

    async def find_by_id(self, station_id: int) -> Station | None:
        return self._stations.get(station_id)

    async def find_by_name(self, name: str) -> Station | None:
        return next((s for s in self._stations.values() if s.name == name), None)

    async def find_all(self) -> list[Station]:
        return list(self._stations.values())

    async def save(self, station: Station) -> None:
        if station.id is None:
            raise ValueError("Station must have an id before it is saved")
        self._stations[station.id] = station
