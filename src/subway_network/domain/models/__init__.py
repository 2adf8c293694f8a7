"""Domain models for the subway network."""

from subway_network.domain.models.line import Line
from subway_network.domain.models.line_configuration import (
    LineConfiguration,
    NetworkConfiguration,
)
from subway_network.domain.models.path_direction import PathDirection
from subway_network.domain.models.section import Section
from subway_network.domain.models.section_addition import (
    Extension,
    SectionAddition,
    SplitInsertion,
)
from subway_network.domain.models.sections import Sections
from subway_network.domain.models.shortest_path import ShortestPath
from subway_network.domain.models.station import Station

__all__ = [
    "Extension",
    "Line",
    "LineConfiguration",
    "NetworkConfiguration",
    "PathDirection",
    "Section",
    "SectionAddition",
    "Sections",
    "ShortestPath",
    "SplitInsertion",
    "Station",
]
