"""Station service."""

import asyncio
import logging

from subway_network.domain.errors import DuplicateStationNameError, StationNotFoundError
from subway_network.domain.models.station import Station
from subway_network.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class StationService:
    """Service for registering and looking up stations."""

    def __init__(self, station_repository: StationRepository) -> None:
        """Initialize with a station repository."""
        self._station_repository = station_repository
        self._register_lock = asyncio.Lock()

    async def register_station(self, name: str) -> Station:
        """Register a new station under a unique name."""
        async with self._register_lock:
            if await self._station_repository.find_by_name(name) is not None:
                raise DuplicateStationNameError(f"Station '{name}' is already registered")
            station = Station(id=await self._station_repository.next_id(), name=name)
            await self._station_repository.save(station)

        logger.debug(f"Registered station {name} with id {station.id}")
        return station

    async def find_station_by_name(self, name: str) -> Station:
        station = await self._station_repository.find_by_name(name)
        if station is None:
            raise StationNotFoundError(f"Station '{name}' does not exist")
        return station

    async def find_stations(self) -> list[Station]:
        return await self._station_repository.find_all()
