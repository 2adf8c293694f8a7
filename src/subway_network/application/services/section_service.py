"""Section service."""

import logging

from subway_network.application.services.line_lock_registry import LineLockRegistry
from subway_network.domain.errors import (
    LineNotFoundError,
    StationNotFoundError,
    SubwayError,
)
from subway_network.domain.models.line import Line
from subway_network.domain.models.section import Section
from subway_network.domain.models.station import Station
from subway_network.domain.ports.line_repository import LineRepository
from subway_network.domain.ports.station_repository import StationRepository
from subway_network.domain.section_add_manager import SectionAddManager

logger = logging.getLogger(__name__)


class SectionService:
    """Service for adding and removing sections of a line."""

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

    async def add_section(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> list[Section]:
        """Add a section to a line, extending or splitting its chain.

        Validation completes before anything is saved; a rejected section
        leaves the line unchanged.

        Args:
            line_id: Line to add the section to.
            up_station_id: Station the section starts at.
            down_station_id: Station the section ends at.
            distance: Length of the section, must be positive.

        Returns:
            The full new section chain of the line, head to tail.
        """
        up_station = await self._get_station(up_station_id)
        down_station = await self._get_station(down_station_id)
        # unknown lines never get a lock
        await self._get_line(line_id)

        async with self._line_locks.hold(line_id):
            line = await self._get_line(line_id)
            try:
                new_section = Section(up_station, down_station, distance, line_id=line.id)
                change = SectionAddManager(line.sections).decide(new_section)
                updated = line.with_sections(line.sections.add(new_section, change))
            except SubwayError as e:
                logger.warning(f"Rejected section {up_station}->{down_station} on {line.name}: {e}")
                raise

            await self._line_repository.save(updated)

        logger.info(
            f"Added section {new_section} to {line.name} "
            f"({type(change).__name__}), now {len(updated.sections)} section(s)"
        )
        return list(updated.sections)

    async def remove_section(self, line_id: int, station_id: int) -> list[Section]:
        """Remove a station from a line, merging the sections around it.

        Returns:
            The full new section chain of the line, head to tail.
        """
        station = await self._get_station(station_id)
        await self._get_line(line_id)

        async with self._line_locks.hold(line_id):
            line = await self._get_line(line_id)
            try:
                updated = line.with_sections(line.sections.remove_station(station))
            except SubwayError as e:
                logger.warning(f"Rejected removal of {station} from {line.name}: {e}")
                raise

            await self._line_repository.save(updated)

        logger.info(
            f"Removed {station} from {line.name}, now {len(updated.sections)} section(s)"
        )
        return list(updated.sections)

    async def _get_line(self, line_id: int) -> Line:
        line = await self._line_repository.find_by_id(line_id)
        if line is None:
            raise LineNotFoundError(f"Line {line_id} does not exist")
        return line

    async def _get_station(self, station_id: int) -> Station:
        station = await self._station_repository.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
        return station
