"""Protocol for shortest path computation."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from subway_network.domain.models.section import Section
    from subway_network.domain.models.shortest_path import ShortestPath
    from subway_network.domain.models.station import Station


class PathFinderProtocol(Protocol):
    """Protocol for finding the shortest path across the sections of all lines."""

    def find_shortest_path(
        self,
        sections: Iterable["Section"],
        source: "Station",
        destination: "Station",
    ) -> "ShortestPath":
        """Find the minimum-distance path between two stations.

        Args:
            sections: Sections of every line; rebuilt into a graph on each call.
            source: Station to start from.
            destination: Station to arrive at.

        Returns:
            Stations on the path in travel order and the total distance.

        Raises:
            SameStationError: If source and destination are the same station.
            StationNotFoundError: If either station is not on any section.
            NoPathExistsError: If the destination cannot be reached.
        """
        ...
