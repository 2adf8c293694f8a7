"""Path service."""

import logging

from subway_network.domain.contracts.path_finder import PathFinderProtocol
from subway_network.domain.errors import StationNotFoundError
from subway_network.domain.models.shortest_path import ShortestPath
from subway_network.domain.models.station import Station
from subway_network.domain.ports.line_repository import LineRepository
from subway_network.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class PathService:
    """Service for finding the shortest path across all lines."""

    def __init__(
        self,
        line_repository: LineRepository,
        station_repository: StationRepository,
        path_finder: PathFinderProtocol,
    ) -> None:
        """Initialize with repositories and a path finder."""
        self._line_repository = line_repository
        self._station_repository = station_repository
        self._path_finder = path_finder

    async def find_shortest_path(
        self, source_station_id: int, destination_station_id: int
    ) -> ShortestPath:
        """Find the shortest path between two stations over the current sections of every line.

        Each line is read as one consistent snapshot. The lines together are not
        read atomically, so a concurrent change to another line may or may not
        be reflected.
        """
        source = await self._get_station(source_station_id)
        destination = await self._get_station(destination_station_id)

        lines = await self._line_repository.find_all()
        sections = [section for line in lines for section in line.sections]
        logger.debug(
            f"Finding path {source} -> {destination} over {len(sections)} section(s) "
            f"of {len(lines)} line(s)"
        )

        return self._path_finder.find_shortest_path(sections, source, destination)

    async def _get_station(self, station_id: int) -> Station:
        station = await self._station_repository.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
        return station
