"""Line service."""

import asyncio
import logging

from subway_network.application.services.line_lock_registry import LineLockRegistry
from subway_network.domain.errors import (
    DuplicateLineNameError,
    LineNotFoundError,
    StationNotFoundError,
)
from subway_network.domain.models.line import Line
from subway_network.domain.models.station import Station
from subway_network.domain.ports.line_repository import LineRepository
from subway_network.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class LineService:
    """Service for creating, renaming, querying and deleting lines."""

    def __init__(
        self,
        line_repository: LineRepository,
        station_repository: StationRepository,
        line_locks: LineLockRegistry | None = None,
    ) -> None:
        """Initialize with repositories and the lock registry shared by line mutations."""
        self._line_repository = line_repository
        self._station_repository = station_repository
        self._line_locks = line_locks or LineLockRegistry()
        # Line names are unique across lines
        self._names_lock = asyncio.Lock()

    async def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        """Create a line with its initial section."""
        up_station = await self._get_station(up_station_id)
        down_station = await self._get_station(down_station_id)

        async with self._names_lock:
            if await self._line_repository.exists_by_name(name):
                raise DuplicateLineNameError(f"Line name '{name}' is already in use")
            line_id = await self._line_repository.next_id()
            line = Line.create(line_id, name, color, up_station, down_station, distance)
            await self._line_repository.save(line)

        logger.info(f"Created line {name} ({up_station} -> {down_station}, {distance})")
        return line

    async def find_line(self, line_id: int) -> Line:
        line = await self._line_repository.find_by_id(line_id)
        if line is None:
            raise LineNotFoundError(f"Line {line_id} does not exist")
        return line

    async def find_lines(self) -> list[Line]:
        return await self._line_repository.find_all()

    async def update_line(self, line_id: int, name: str, color: str) -> Line:
        """Change the name and color of a line, keeping its sections."""
        await self.find_line(line_id)

        async with self._names_lock, self._line_locks.hold(line_id):
            line = await self.find_line(line_id)
            if name != line.name and await self._line_repository.exists_by_name(name):
                raise DuplicateLineNameError(f"Line name '{name}' is already in use")
            updated = line.rename(name, color)
            await self._line_repository.save(updated)

        logger.info(f"Updated line {line_id}: {line.name} -> {name}")
        return updated

    async def delete_line(self, line_id: int) -> None:
        """Delete a line together with its section chain."""
        await self.find_line(line_id)

        async with self._line_locks.hold(line_id):
            line = await self.find_line(line_id)
            await self._line_repository.delete(line_id)
        self._line_locks.discard(line_id)

        logger.info(f"Deleted line {line.name}")

    async def _get_station(self, station_id: int) -> Station:
        station = await self._station_repository.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
        return station
