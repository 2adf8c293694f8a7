"""Line repository port."""

from typing import Protocol

from subway_network.domain.models.line import Line


class LineRepository(Protocol):
    """Port for storing lines together with their section chains."""

    async def next_id(self) -> int:
        """Reserve an identifier for a new line."""
        ...

    async def find_by_id(self, line_id: int) -> Line | None:
        """Find a line by its identifier."""
        ...

    async def find_all(self) -> list[Line]:
        """Return every line in the network."""
        ...

    async def exists_by_name(self, name: str) -> bool:
        """Whether a line with this name already exists."""
        ...

    async def save(self, line: Line) -> None:
        """Store a line, replacing its previous state and full section chain."""
        ...

    async def delete(self, line_id: int) -> None:
        """Delete a line together with its sections."""
        ...
