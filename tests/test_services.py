"""Tests for application services."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import pytest

from subway_network.adapters.graph import NetworkxPathFinder
from subway_network.adapters.persistence import (
    InMemoryLineRepository,
    InMemoryStationRepository,
)
from subway_network.application.services import (
    LineLockRegistry,
    LineService,
    PathService,
    SectionService,
    StationService,
)
from subway_network.domain.errors import (
    DuplicateLineNameError,
    DuplicateOrDisjointStationsError,
    DuplicateStationNameError,
    LastSectionRemovalError,
    LineNotFoundError,
    NoPathExistsError,
    SectionTooLongError,
    StationNotFoundError,
    StationNotInLineError,
)
from subway_network.domain.models import Line, Section, Station


class YieldingLineRepository(InMemoryLineRepository):
    """Line repository that gives control back to the event loop after every read."""

    async def find_by_id(self, line_id: int) -> Line | None:
        line = await super().find_by_id(line_id)
        await asyncio.sleep(0)
        return line


class UnguardedLineLocks(LineLockRegistry):
    """Lock registry whose locks never block."""

    @asynccontextmanager
    async def hold(self, line_id: int) -> AsyncIterator[None]:
        yield


@dataclass
class Services:
    """Services sharing one set of in-memory repositories."""

    line_repository: InMemoryLineRepository
    locks: LineLockRegistry
    stations: StationService
    lines: LineService
    sections: SectionService
    paths: PathService

    async def register(self, *names: str) -> list[Station]:
        return [await self.stations.register_station(name) for name in names]


def build_services(
    line_repo: InMemoryLineRepository | None = None,
    locks: LineLockRegistry | None = None,
) -> Services:
    station_repo = InMemoryStationRepository()
    line_repo = line_repo or InMemoryLineRepository()
    locks = locks or LineLockRegistry()
    return Services(
        line_repository=line_repo,
        locks=locks,
        stations=StationService(station_repo),
        lines=LineService(line_repo, station_repo, locks),
        sections=SectionService(line_repo, station_repo, locks),
        paths=PathService(line_repo, station_repo, NetworkxPathFinder()),
    )


@pytest.fixture
def services() -> Services:
    """Create services backed by in-memory repositories."""
    return build_services()

class TestStationService:
    """Tests for station registration."""

    @pytest.mark.asyncio
    async def test_register_assigns_ids(self, services: Services) -> None:
        a, b = await services.register("A", "B")

        assert a.id != b.id
        assert await services.stations.find_stations() == [a, b]
        assert await services.stations.find_station_by_name("B") == b

    @pytest.mark.asyncio
    async def test_duplicate_station_name_fails(self, services: Services) -> None:
        await services.register("A")

        with pytest.raises(DuplicateStationNameError):
            await services.stations.register_station("A")

    @pytest.mark.asyncio
    async def test_unknown_station_name_fails(self, services: Services) -> None:
        with pytest.raises(StationNotFoundError):
            await services.stations.find_station_by_name("Nowhere")


class TestLineService:
    """Tests for line management."""

    @pytest.mark.asyncio
    async def test_create_line_with_initial_section(self, services: Services) -> None:
        a, b = await services.register("A", "B")

        line = await services.lines.create_line("Line 1", "red", a.id, b.id, 10)

        found = await services.lines.find_line(line.id)
        assert found.name == "Line 1"
        assert found.ordered_stations() == [a, b]

    @pytest.mark.asyncio
    async def test_duplicate_line_name_fails(self, services: Services) -> None:
        a, b = await services.register("A", "B")
        await services.lines.create_line("Line 1", "red", a.id, b.id, 10)

        with pytest.raises(DuplicateLineNameError):
            await services.lines.create_line("Line 1", "blue", a.id, b.id, 3)

    @pytest.mark.asyncio
    async def test_create_line_with_unknown_station_fails(self, services: Services) -> None:
        (a,) = await services.register("A")

        with pytest.raises(StationNotFoundError):
            await services.lines.create_line("Line 1", "red", a.id, 999, 10)

    @pytest.mark.asyncio
    async def test_update_line_keeps_sections(self, services: Services) -> None:
        a, b = await services.register("A", "B")
        line = await services.lines.create_line("Line 1", "red", a.id, b.id, 10)

        updated = await services.lines.update_line(line.id, "Line 9", "gold")

        assert updated.name == "Line 9"
        assert updated.color == "gold"
        assert (await services.lines.find_line(line.id)).sections == line.sections

    @pytest.mark.asyncio
    async def test_update_line_to_taken_name_fails(self, services: Services) -> None:
        a, b = await services.register("A", "B")
        await services.lines.create_line("Line 1", "red", a.id, b.id, 10)
        second = await services.lines.create_line("Line 2", "blue", a.id, b.id, 10)

        with pytest.raises(DuplicateLineNameError):
            await services.lines.update_line(second.id, "Line 1", "blue")

    @pytest.mark.asyncio
    async def test_delete_line(self, services: Services) -> None:
        a, b = await services.register("A", "B")
        line = await services.lines.create_line("Line 1", "red", a.id, b.id, 10)

        await services.lines.delete_line(line.id)

        assert await services.lines.find_lines() == []
        with pytest.raises(LineNotFoundError):
            await services.lines.find_line(line.id)
        assert line.id not in services.locks

    @pytest.mark.asyncio
    async def test_update_or_delete_unknown_line_keeps_no_lock(self, services: Services) -> None:
        with pytest.raises(LineNotFoundError):
            await services.lines.update_line(42, "Line 9", "gold")
        with pytest.raises(LineNotFoundError):
            await services.lines.delete_line(42)

        assert 42 not in services.locks


class TestSectionService:
    """Tests for section addition and removal through the service."""

    @pytest.mark.asyncio
    async def test_add_section_returns_full_chain(self, services: Services) -> None:
        """Given A->B(3), when adding A->C(1), then the returned chain is A->C(1), C->B(2)."""
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 3)

        chain = await services.sections.add_section(line.id, a.id, c.id, 1)

        assert chain == [Section(a, c, 1, line_id=line.id), Section(c, b, 2, line_id=line.id)]
        assert list((await services.lines.find_line(line.id)).sections) == chain

    @pytest.mark.asyncio
    async def test_rejected_section_leaves_line_unchanged(self, services: Services) -> None:
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 3)

        with pytest.raises(SectionTooLongError):
            await services.sections.add_section(line.id, a.id, c.id, 3)
        with pytest.raises(DuplicateOrDisjointStationsError):
            await services.sections.add_section(line.id, a.id, b.id, 1)

        assert (await services.lines.find_line(line.id)).sections == line.sections

    @pytest.mark.asyncio
    async def test_add_section_to_unknown_line_fails(self, services: Services) -> None:
        a, b = await services.register("A", "B")

        with pytest.raises(LineNotFoundError):
            await services.sections.add_section(42, a.id, b.id, 1)

    @pytest.mark.asyncio
    async def test_remove_section_merges_interior_station(self, services: Services) -> None:
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)
        await services.sections.add_section(line.id, a.id, c.id, 3)

        chain = await services.sections.remove_section(line.id, c.id)

        assert chain == [Section(a, b, 7, line_id=line.id)]

    @pytest.mark.asyncio
    async def test_remove_last_section_fails(self, services: Services) -> None:
        a, b = await services.register("A", "B")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)

        with pytest.raises(LastSectionRemovalError):
            await services.sections.remove_section(line.id, a.id)

    @pytest.mark.asyncio
    async def test_remove_station_not_on_line_fails(self, services: Services) -> None:
        a, b, c, d = await services.register("A", "B", "C", "D")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)
        await services.sections.add_section(line.id, b.id, c.id, 2)

        with pytest.raises(StationNotInLineError):
            await services.sections.remove_section(line.id, d.id)

    @pytest.mark.asyncio
    async def test_concurrent_additions_to_one_line_are_serialized(self) -> None:
        """Given two concurrent prepends of the same station, when both run, then only one succeeds."""
        services = build_services(line_repo=YieldingLineRepository())
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)

        results = await asyncio.gather(
            services.sections.add_section(line.id, c.id, a.id, 2),
            services.sections.add_section(line.id, c.id, a.id, 2),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], DuplicateOrDisjointStationsError)
        final = await services.lines.find_line(line.id)
        assert final.ordered_stations() == [c, a, b]

    @pytest.mark.asyncio
    async def test_unguarded_concurrent_additions_both_pass_validation(self) -> None:
        """Given no line lock, when two prepends interleave, then both validate against the stale chain."""
        services = build_services(line_repo=YieldingLineRepository(), locks=UnguardedLineLocks())
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)

        results = await asyncio.gather(
            services.sections.add_section(line.id, c.id, a.id, 2),
            services.sections.add_section(line.id, c.id, a.id, 2),
            return_exceptions=True,
        )

        assert [r for r in results if isinstance(r, Exception)] == []

    @pytest.mark.asyncio
    async def test_unknown_line_gets_no_lock(self, services: Services) -> None:
        """Given no line 42, when changing its sections, then no lock is kept for it."""
        a, b = await services.register("A", "B")

        with pytest.raises(LineNotFoundError):
            await services.sections.add_section(42, a.id, b.id, 1)
        with pytest.raises(LineNotFoundError):
            await services.sections.remove_section(42, a.id)

        assert 42 not in services.locks


class TestPathService:
    """Tests for shortest paths across lines."""

    @pytest.mark.asyncio
    async def test_path_transfers_at_shared_station(self, services: Services) -> None:
        a, m, d = await services.register("A", "M", "D")
        await services.lines.create_line("Line 1", "red", a.id, m.id, 4)
        await services.lines.create_line("Line 2", "blue", m.id, d.id, 6)

        path = await services.paths.find_shortest_path(a.id, d.id)

        assert path.stations == [a, m, d]
        assert path.distance == 10

    @pytest.mark.asyncio
    async def test_path_reflects_latest_sections(self, services: Services) -> None:
        a, b, c = await services.register("A", "B", "C")
        line = await services.lines.create_line("L", "red", a.id, b.id, 7)
        await services.sections.add_section(line.id, a.id, c.id, 3)

        path = await services.paths.find_shortest_path(a.id, c.id)

        assert path.stations == [a, c]
        assert path.distance == 3

    @pytest.mark.asyncio
    async def test_unknown_station_id_fails(self, services: Services) -> None:
        (a,) = await services.register("A")

        with pytest.raises(StationNotFoundError):
            await services.paths.find_shortest_path(a.id, 999)

    @pytest.mark.asyncio
    async def test_station_without_sections_is_not_in_network(self, services: Services) -> None:
        a, b, lonely = await services.register("A", "B", "Lonely")
        await services.lines.create_line("L", "red", a.id, b.id, 7)

        with pytest.raises(StationNotFoundError):
            await services.paths.find_shortest_path(a.id, lonely.id)

    @pytest.mark.asyncio
    async def test_disconnected_lines_have_no_path(self, services: Services) -> None:
        a, b, c, d = await services.register("A", "B", "C", "D")
        await services.lines.create_line("Line 1", "red", a.id, b.id, 7)
        await services.lines.create_line("Line 2", "blue", c.id, d.id, 7)

        with pytest.raises(NoPathExistsError):
            await services.paths.find_shortest_path(a.id, d.id)
