"""Ordered section chain of a single line."""

from collections.abc import Callable, Iterable, Iterator

from subway_network.domain.errors import (
    InvalidSectionError,
    LastSectionRemovalError,
    StationNotInLineError,
)
from subway_network.domain.models.section import Section
from subway_network.domain.models.section_addition import (
    Extension,
    SectionAddition,
    SplitInsertion,
)
from subway_network.domain.models.station import Station


class Sections:
    """Immutable, contiguous, non-branching chain of sections from head to tail.

    Every mutation returns a new chain. A chain of n sections always spans
    exactly n + 1 distinct stations.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        """Build a chain from sections given in any order.

        Raises:
            InvalidSectionError: If the sections do not form a single chain.
        """
        self._sections: tuple[Section, ...] = self._link(tuple(sections))

    @staticmethod
    def _link(sections: tuple[Section, ...]) -> tuple[Section, ...]:
        if not sections:
            return ()

        by_up: dict[Station, Section] = {}
        down_stations: set[Station] = set()
        for section in sections:
            if section.up_station in by_up or section.down_station in down_stations:
                raise InvalidSectionError(f"Sections branch at {section}")
            by_up[section.up_station] = section
            down_stations.add(section.down_station)

        heads = [s for s in sections if s.up_station not in down_stations]
        if len(heads) != 1:
            raise InvalidSectionError("Sections must form exactly one chain")

        ordered = [heads[0]]
        while ordered[-1].down_station in by_up:
            ordered.append(by_up[ordered[-1].down_station])

        if len(ordered) != len(sections):
            raise InvalidSectionError("Sections must form exactly one chain")
        return tuple(ordered)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sections):
            return NotImplemented
        return self._sections == other._sections

    def __hash__(self) -> int:
        return hash(self._sections)

    def __repr__(self) -> str:
        return f"Sections({', '.join(str(s) for s in self._sections)})"

    @property
    def head_station(self) -> Station | None:
        return self._sections[0].up_station if self._sections else None

    @property
    def tail_station(self) -> Station | None:
        return self._sections[-1].down_station if self._sections else None

    @property
    def total_distance(self) -> int:
        return sum(section.distance for section in self._sections)

    def has_station(self, station: Station) -> bool:
        return any(section.contains_station(station) for section in self._sections)

    def filter(self, predicate: Callable[[Section], bool]) -> Section | None:
        """Return the first section matching `predicate`, or None.

        The chain invariant guarantees at most one match for the endpoint
        predicates used by the addition policy.
        """
        return next((section for section in self._sections if predicate(section)), None)

    def ordered_stations(self) -> list[Station]:
        """Return the distinct stations of the chain from head to tail."""
        if not self._sections:
            return []
        return [self._sections[0].up_station] + [s.down_station for s in self._sections]

    def add(self, new_section: Section, change: SectionAddition) -> "Sections":
        """Apply an addition decided by the section addition policy."""
        if isinstance(change, Extension):
            if change.position == "head":
                return Sections((new_section, *self._sections))
            return Sections((*self._sections, new_section))

        if isinstance(change, SplitInsertion):
            index = self._sections.index(change.target)
            if new_section.up_station == change.target.up_station:
                replacement = (new_section, change.residual)
            else:
                replacement = (change.residual, new_section)
            return Sections(self._sections[:index] + replacement + self._sections[index + 1 :])

        raise TypeError(f"Unsupported section addition: {change!r}")

    def remove_station(self, station: Station) -> "Sections":
        """Remove a station from the chain.

        Removing the head or tail drops its only section. Removing an interior
        station merges the two sections around it.

        Raises:
            LastSectionRemovalError: If the chain has a single section.
            StationNotInLineError: If the station is not part of the chain.
        """
        if len(self._sections) <= 1:
            raise LastSectionRemovalError("Cannot remove the only section of a line")
        if not self.has_station(station):
            raise StationNotInLineError(f"Station {station} is not part of the line")

        upper = self.filter(lambda section: section.has_down_station(station))
        lower = self.filter(lambda section: section.has_up_station(station))

        if upper is not None and lower is not None:
            index = self._sections.index(upper)
            merged = upper.merge_with(lower)
            return Sections(self._sections[:index] + (merged,) + self._sections[index + 2 :])

        dropped = upper if lower is None else lower
        return Sections(section for section in self._sections if section != dropped)
