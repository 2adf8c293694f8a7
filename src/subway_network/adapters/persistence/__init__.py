"""Persistence adapters."""

from subway_network.adapters.persistence.in_memory_line_repository import InMemoryLineRepository
from subway_network.adapters.persistence.in_memory_station_repository import (
    InMemoryStationRepository,
)

__all__ = ["InMemoryLineRepository", "InMemoryStationRepository"]
