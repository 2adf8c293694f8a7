"""Network seeding service."""

import logging

from subway_network.application.services.line_service import LineService
from subway_network.application.services.section_service import SectionService
from subway_network.application.services.station_service import StationService
from subway_network.domain.models.line_configuration import NetworkConfiguration

logger = logging.getLogger(__name__)


class NetworkSeeder:
    """Seeds stations and lines from a network configuration.

    Lines are built through the regular services: the first station pair
    creates the line and every following pair extends its tail, so seeded
    sections go through the same validation as any other addition.
    """

    def __init__(
        self,
        station_service: StationService,
        line_service: LineService,
        section_service: SectionService,
    ) -> None:
        self._station_service = station_service
        self._line_service = line_service
        self._section_service = section_service

    async def seed(self, network_config: NetworkConfiguration) -> None:
        station_ids: dict[str, int] = {}
        for name in network_config.station_names:
            station = await self._station_service.register_station(name)
            station_ids[name] = station.id  # type: ignore[assignment]

        for line_config in network_config.lines:
            names = line_config.station_names
            line = await self._line_service.create_line(
                line_config.name,
                line_config.color,
                station_ids[names[0]],
                station_ids[names[1]],
                line_config.distances[0],
            )
            for up_name, down_name, distance in zip(
                names[1:-1], names[2:], line_config.distances[1:], strict=True
            ):
                await self._section_service.add_section(
                    line.id, station_ids[up_name], station_ids[down_name], distance
                )

        logger.info(
            f"Seeded network with {len(station_ids)} station(s) "
            f"and {len(network_config.lines)} line(s)"
        )
