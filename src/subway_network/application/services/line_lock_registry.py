"""Per-line mutual exclusion for section topology changes.

Adding or removing a section is a validate-then-save sequence. Two concurrent
changes to the same line could both pass the "exactly one endpoint present"
check and corrupt the chain, so every change to one line holds that line's lock.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class LineLockRegistry:
    """Registry of asyncio locks keyed by line ID."""

    def __init__(self) -> None:
        """Initialize the registry."""
        self._locks: dict[int, asyncio.Lock] = {}

    def lock_for(self, line_id: int) -> asyncio.Lock:
        """Get or create the lock guarding a line."""
        if line_id not in self._locks:
            self._locks[line_id] = asyncio.Lock()
            logger.debug(f"Created lock for line {line_id}")
        return self._locks[line_id]

    @asynccontextmanager
    async def hold(self, line_id: int) -> AsyncIterator[None]:
        """Hold the lock of a line for the duration of the block."""
        async with self.lock_for(line_id):
            yield

    def discard(self, line_id: int) -> None:
        """Forget the lock of a deleted line."""
        self._locks.pop(line_id, None)

    def __contains__(self, line_id: object) -> bool:
        return line_id in self._locks
