"""Validation and decision policy for adding a section to a line."""

import logging
from collections.abc import Callable

from subway_network.domain.errors import DuplicateOrDisjointStationsError, SectionTooLongError
from subway_network.domain.models.section import Section
from subway_network.domain.models.section_addition import (
    Extension,
    SectionAddition,
    SplitInsertion,
)
from subway_network.domain.models.sections import Sections
from subway_network.domain.models.station import Station

logger = logging.getLogger(__name__)


class SectionAddManager:
    """Decides how a candidate section fits into a chain, before the chain changes.

    Exactly one endpoint of the candidate must already be on the line. When the
    shared station is the head (as down-station) or the tail (as up-station),
    the candidate extends the chain. Otherwise it splits the section that
    starts or ends at the shared station.
    """

    def __init__(self, sections: Sections) -> None:
        """Initialize with the chain the candidate will be added to."""
        self._sections = sections

    def validate(self, up_station: Station, down_station: Station, distance: int) -> None:
        """Validate a candidate section against the chain.

        Raises:
            DuplicateOrDisjointStationsError: If both or neither station is on the line.
            SectionTooLongError: If the section it would split is not strictly longer.
        """
        self._validate_line_has_one_of(up_station, down_station)

        overlapping = self._sections.filter(self._match_one_of(up_station, down_station))
        if overlapping is not None and overlapping.distance <= distance:
            raise SectionTooLongError(
                f"Section of distance {distance} does not fit into {overlapping}"
            )

    def look_for_change(self, new_section: Section) -> Section | None:
        """Return the residual of the section split by `new_section`, or None for an extension."""
        overlapping = self._overlapping(new_section)
        if overlapping is None:
            return None
        return overlapping.cut_by(new_section)

    def decide(self, new_section: Section) -> SectionAddition:
        """Validate `new_section` and return how the chain has to change to take it."""
        self.validate(new_section.up_station, new_section.down_station, new_section.distance)

        residual = self.look_for_change(new_section)
        if residual is None:
            if new_section.down_station == self._sections.head_station:
                return Extension(position="head")
            return Extension(position="tail")

        # a residual exists only when a section overlaps the candidate
        target = next(s for s in self._sections if s.match_either_station(new_section))
        logger.debug(f"Section {new_section} splits {target}, leaving {residual}")
        return SplitInsertion(target=target, residual=residual)

    def _overlapping(self, new_section: Section) -> Section | None:
        return self._sections.filter(lambda section: section.match_either_station(new_section))

    @staticmethod
    def _match_one_of(up_station: Station, down_station: Station) -> Callable[[Section], bool]:
        return lambda section: (
            section.has_up_station(up_station) or section.has_down_station(down_station)
        )

    def _validate_line_has_one_of(self, up_station: Station, down_station: Station) -> None:
        has_up_station = self._sections.has_station(up_station)
        has_down_station = self._sections.has_station(down_station)

        if has_up_station and has_down_station:
            raise DuplicateOrDisjointStationsError(
                f"Both {up_station} and {down_station} are already on the line"
            )
        if not has_up_station and not has_down_station:
            raise DuplicateOrDisjointStationsError(
                f"Neither {up_station} nor {down_station} is on the line"
            )
