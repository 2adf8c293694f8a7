"""Main entry point for the subway network application."""

import asyncio
import logging
import sys
from dataclasses import dataclass

from subway_network.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_network.adapters.graph import NetworkxPathFinder
from subway_network.adapters.persistence import (
    InMemoryLineRepository,
    InMemoryStationRepository,
)
from subway_network.application.services import (
    LineLockRegistry,
    LineService,
    NetworkSeeder,
    PathService,
    SectionService,
    StationService,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass(frozen=True)
class SubwayNetwork:
    """Wired application services sharing one set of repositories."""

    station_service: StationService
    line_service: LineService
    section_service: SectionService
    path_service: PathService


async def build_network(config: AppConfig) -> SubwayNetwork:
    """Wire repositories, services and the path finder, then seed from the network file."""
    network_config = NetworkConfigurationLoader.load(config)

    station_repo = InMemoryStationRepository()
    line_repo = InMemoryLineRepository()
    line_locks = LineLockRegistry()

    network = SubwayNetwork(
        station_service=StationService(station_repo),
        line_service=LineService(line_repo, station_repo, line_locks),
        section_service=SectionService(line_repo, station_repo, line_locks),
        path_service=PathService(
            line_repo, station_repo, NetworkxPathFinder(direction=config.path_direction)
        ),
    )

    seeder = NetworkSeeder(network.station_service, network.line_service, network.section_service)
    await seeder.seed(network_config)
    return network


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        network = await build_network(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid network configuration: {e}")
        sys.exit(1)

    lines = await network.line_service.find_lines()
    if not lines:
        logger.warning("No lines configured. Set NETWORK_FILE to a TOML network file.")
        return

    logger.info(f"Loaded {len(lines)} line(s) using {config.path_direction.value} path finding:")
    for line in lines:
        stations = " - ".join(s.name for s in line.ordered_stations())
        logger.info(f"  - {line.name} ({line.sections.total_distance}): {stations}")


if __name__ == "__main__":
    asyncio.run(main())
