"""Network configuration loader."""

import logging

from subway_network.adapters.config.app_config import AppConfig
from subway_network.domain.models.line_configuration import (
    LineConfiguration,
    NetworkConfiguration,
)

logger = logging.getLogger(__name__)


class NetworkConfigurationLoader:
    """Loads the seed network configuration from app config."""

    @staticmethod
    def load(config: AppConfig) -> NetworkConfiguration:
        """Load stations and lines from app config.

        Stations referenced by lines are registered even when they are not
        listed under [[stations]].

        Raises:
            ValueError: If a line has fewer than two stations or a distance count
                that does not match its consecutive station pairs.
        """
        if not config.network_file:
            return NetworkConfiguration()

        network_data = config.get_network_config()

        station_names: list[str] = []
        for station_data in network_data["stations"]:
            name = station_data.get("name") if isinstance(station_data, dict) else station_data
            if not name or not isinstance(name, str):
                continue
            if name not in station_names:
                station_names.append(name)

        line_configs: list[LineConfiguration] = []
        for line_data in network_data["lines"]:
            name = str(line_data["name"])
            color = str(line_data.get("color", ""))
            stations = [str(s) for s in line_data.get("stations", [])]
            distances = line_data.get("distances", [])

            if len(stations) < 2:
                raise ValueError(f"Line '{name}' must list at least two stations")
            if not isinstance(distances, list) or len(distances) != len(stations) - 1:
                raise ValueError(
                    f"Line '{name}' needs exactly {len(stations) - 1} distance(s), "
                    f"one per consecutive station pair"
                )
            try:
                distances = [int(d) for d in distances]
            except (ValueError, TypeError) as e:
                raise ValueError(f"Line '{name}' distances must be integers") from e

            for station_name in stations:
                if station_name not in station_names:
                    station_names.append(station_name)

            line_configs.append(
                LineConfiguration(
                    name=name,
                    color=color,
                    station_names=stations,
                    distances=distances,
                )
            )

        logger.info(
            f"Loaded network configuration: {len(station_names)} station(s), "
            f"{len(line_configs)} line(s)"
        )
        return NetworkConfiguration(station_names=station_names, lines=line_configs)
