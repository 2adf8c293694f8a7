"""Shortest path domain model."""

from dataclasses import dataclass

from subway_network.domain.models.station import Station


@dataclass(frozen=True)
class ShortestPath:
    """Stations visited from source to destination and the total distance travelled."""

    stations: list[Station]
    distance: int
