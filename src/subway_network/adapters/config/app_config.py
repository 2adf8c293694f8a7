"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subway_network.domain.models.path_direction import PathDirection

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_path_direction(value: str) -> PathDirection:
    if value.lower() not in ("bidirectional", "directed"):
        raise ValueError("path_direction must be either 'bidirectional' or 'directed'")
    return PathDirection(value.lower())


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level for the application")

    # Path finding configuration
    path_direction: PathDirection = Field(
        default=PathDirection.BIDIRECTIONAL,
        description="Travel direction for path finding: 'bidirectional' or 'directed'",
    )

    # TOML network file with [[stations]] and [[lines]]
    # If not set, the network starts empty
    network_file: str | None = Field(
        default=None,
        description="Path to TOML file used to seed stations and lines",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    @field_validator("path_direction", mode="before")
    @classmethod
    def validate_path_direction(cls, v: Any) -> Any:
        """Validate path direction is either 'bidirectional' or 'directed'."""
        if isinstance(v, str):
            return _parse_path_direction(v)
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the network TOML file."""
        if not self.network_file:
            raise ValueError("network_file must be set to load the network configuration")

        config_path = Path(self.network_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Network file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # [path] direction applies only when PATH_DIRECTION (or an explicit
        # argument) did not already set the policy
        path_settings = toml_data.get("path", {})
        if "direction" in path_settings and "path_direction" not in self.model_fields_set:
            self.path_direction = _parse_path_direction(str(path_settings["direction"]))

        return toml_data

    def get_network_config(self) -> dict[str, Any]:
        """Parse and return stations and lines from the network TOML file.

        Returns a dict with 'stations' (list of dicts with 'name') and 'lines'
        (list of dicts with 'name', 'color', 'stations' and 'distances').

        Raises ValueError if the sections are not lists or line names are not unique.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        lines = toml_data.get("lines", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")

        for line in lines:
            if not isinstance(line, dict) or "name" not in line:
                raise ValueError("All lines must have a 'name' field")

        names = [line["name"] for line in lines]
        if len(names) != len(set(names)):
            duplicates = {n for n in names if names.count(n) > 1}
            raise ValueError(f"Line names must be unique. Duplicate names found: {duplicates}")

        return {"stations": stations, "lines": lines}
