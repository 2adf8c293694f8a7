"""Application services."""

from subway_network.application.services.line_lock_registry import LineLockRegistry
from subway_network.application.services.line_service import LineService
from subway_network.application.services.network_seeder import NetworkSeeder
from subway_network.application.services.path_service import PathService
from subway_network.application.services.section_service import SectionService
from subway_network.application.services.station_service import StationService

__all__ = [
    "LineLockRegistry",
    "LineService",
    "NetworkSeeder",
    "PathService",
    "SectionService",
    "StationService",
]
