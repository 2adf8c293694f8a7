"""Domain layer - section topology, path finding contracts and models."""

from subway_network.domain.models import (
    Line,
    Section,
    Sections,
    ShortestPath,
    Station,
)
from subway_network.domain.ports import (
    LineRepository,
    StationRepository,
)
from subway_network.domain.section_add_manager import SectionAddManager

__all__ = [
    "Line",
    "LineRepository",
    "Section",
    "SectionAddManager",
    "Sections",
    "ShortestPath",
    "Station",
    "StationRepository",
]
