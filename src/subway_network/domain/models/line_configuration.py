"""Line configuration domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LineConfiguration:
    """Configuration for seeding one line from its stations in order."""

    name: str
    color: str
    station_names: list[str]  # consecutive pairs become sections
    distances: list[int]  # one per consecutive pair


@dataclass(frozen=True)
class NetworkConfiguration:
    """Stations and lines to seed the network with."""

    station_names: list[str] = field(default_factory=list)
    lines: list[LineConfiguration] = field(default_factory=list)
