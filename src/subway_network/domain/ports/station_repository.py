"""Station repository port."""

from typing import Protocol

from subway_network.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving and registering stations."""

    async def next_id(self) -> int:
        """Reserve an identifier for a new station."""
        ...

    async def find_by_id(self, station_id: int) -> Station | None:
        """Find a station by its identifier."""
        ...

    async def find_by_name(self, name: str) -> Station | None:
        """Find a station by its display name."""
        ...

    async def find_all(self) -> list[Station]:
        """Return every registered station."""
        ...

    async def save(self, station: Station) -> None:
        """Store a station."""
        ...
