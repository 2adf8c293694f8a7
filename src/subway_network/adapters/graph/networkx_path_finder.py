"""Shortest path finder backed by a networkx graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import networkx as nx

from subway_network.domain.contracts.path_finder import PathFinderProtocol
from subway_network.domain.errors import (
    NoPathExistsError,
    SameStationError,
    StationNotFoundError,
)
from subway_network.domain.models.path_direction import PathDirection
from subway_network.domain.models.section import Section
from subway_network.domain.models.shortest_path import ShortestPath
from subway_network.domain.models.station import Station

logger = logging.getLogger(__name__)


class NetworkxPathFinder(PathFinderProtocol):
    """Dijkstra shortest path over the union of all lines' sections.

    The graph is rebuilt from the given sections on every query, so results
    always reflect the current section state.
    """

    def __init__(self, direction: PathDirection = PathDirection.BIDIRECTIONAL) -> None:
        """Initialize with the travel direction policy.

        Args:
            direction: Whether sections may be travelled against their recorded direction.
        """
        self.direction = direction

    def build_graph(self, sections: Iterable[Section]) -> nx.DiGraph:
        """Build a weighted directed graph with one edge per section (two when bidirectional).

        Parallel sections between the same pair of stations keep the shortest distance.
        """
        graph = nx.DiGraph()
        for section in sections:
            self._add_edge(graph, section.up_station, section.down_station, section.distance)
            if self.direction == PathDirection.BIDIRECTIONAL:
                self._add_edge(graph, section.down_station, section.up_station, section.distance)

        logger.debug(
            f"Built {self.direction.value} network graph: "
            f"{graph.number_of_nodes()} stations, {graph.number_of_edges()} edges"
        )
        return graph

    @staticmethod
    def _add_edge(graph: nx.DiGraph, source: Station, target: Station, distance: int) -> None:
        if graph.has_edge(source, target) and graph[source][target]["distance"] <= distance:
            return
        graph.add_edge(source, target, distance=distance)

    def find_shortest_path(
        self,
        sections: Iterable[Section],
        source: Station,
        destination: Station,
    ) -> ShortestPath:
        """Find the minimum-distance path between two stations.

        Raises:
            SameStationError: If source and destination are the same station.
            StationNotFoundError: If either station is not on any section.
            NoPathExistsError: If the destination cannot be reached.
        """
        if source == destination:
            raise SameStationError(f"Source and destination are the same station: {source}")

        graph = self.build_graph(sections)
        for station in (source, destination):
            if station not in graph:
                raise StationNotFoundError(f"Station {station} is not part of the network")

        try:
            distance, path = nx.single_source_dijkstra(
                graph, source, destination, weight="distance"
            )
        except nx.NetworkXNoPath as e:
            raise NoPathExistsError(f"No path from {source} to {destination}") from e

        return ShortestPath(stations=list(path), distance=int(distance))
