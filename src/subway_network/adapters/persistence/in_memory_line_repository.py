"""In-memory line repository implementation."""

from __future__ import annotations

import itertools
import logging

from subway_network.domain.models.line import Line
from subway_network.domain.ports.line_repository import LineRepository

logger = logging.getLogger(__name__)


class InMemoryLineRepository(LineRepository):
    """In-memory store of lines keyed by line ID.

    Lines are immutable values, so a saved line replaces the previous state
    in a single assignment and readers never observe a partial chain.
    """

    def __init__(self) -> None:
        """Initialize the repository."""
        self._lines: dict[int, Line] = {}
        self._ids = itertools.count(1)

    async def next_id(self) -> int:
        return next(self._ids)

    async def find_by_id(self, line_id: int) -> Line | None:
        return self._lines.get(line_id)

    async def find_all(self) -> list[Line]:
        return list(self._lines.values())

    async def exists_by_name(self, name: str) -> bool:
        return any(line.name == name for line in self._lines.values())

    async def save(self, line: Line) -> None:
        """Store a line, replacing the previous state of its whole section chain."""
        self._lines[line.id] = line
        logger.debug(f"Saved line {line.name} with {len(line.sections)} section(s)")

    async def delete(self, line_id: int) -> None:
        self._lines.pop(line_id, None)
