"""Section domain model."""

from dataclasses import dataclass, replace

from subway_network.domain.errors import InvalidSectionError, SectionTooLongError
from subway_network.domain.models.station import Station


@dataclass(frozen=True)
class Section:
    """A weighted edge from an up-station to a down-station on one line.

    Sections are values: splitting, merging and re-binding always return a
    new section and leave the original untouched.
    """

    up_station: Station
    down_station: Station
    distance: int
    line_id: int | None = None
    id: int | None = None

    def __post_init__(self) -> None:
        if self.distance <= 0:
            raise InvalidSectionError(
                f"Section distance must be positive, got {self.distance}"
            )
        if self.up_station == self.down_station:
            raise InvalidSectionError(
                f"Up and down station of a section must differ: "
                f"{self.up_station} -> {self.down_station}"
            )

    def can_precede(self, other: "Section") -> bool:
        """Whether `other` can directly follow this section in a chain."""
        return self.down_station == other.up_station

    def contains_station(self, station: Station) -> bool:
        return self.up_station == station or self.down_station == station

    def has_up_station(self, station: Station) -> bool:
        return self.up_station == station

    def has_down_station(self, station: Station) -> bool:
        return self.down_station == station

    def match_either_station(self, other: "Section") -> bool:
        """Whether `other` starts where this section starts or ends where it ends."""
        return self.up_station == other.up_station or self.down_station == other.down_station

    def belongs_to(self, line_id: int | None) -> bool:
        return self.line_id == line_id

    def with_line(self, line_id: int | None) -> "Section":
        return replace(self, line_id=line_id)

    def cut_by(self, new_section: "Section") -> "Section":
        """Return the residual left over when `new_section` is inserted into this one.

        The new section must share exactly one endpoint with this section and
        be strictly shorter. The residual covers the remaining span and carries
        the remaining distance.

        Raises:
            SectionTooLongError: If the new section is not strictly shorter.
            InvalidSectionError: If the new section does not share exactly one endpoint.
        """
        same_up = self.up_station == new_section.up_station
        same_down = self.down_station == new_section.down_station
        if same_up == same_down:
            raise InvalidSectionError(
                f"Section {new_section} must share exactly one endpoint with {self}"
            )
        if new_section.distance >= self.distance:
            raise SectionTooLongError(
                f"Section {new_section} is not shorter than the section it splits ({self})"
            )

        remaining = self.distance - new_section.distance
        if same_up:
            return Section(new_section.down_station, self.down_station, remaining, self.line_id)
        return Section(self.up_station, new_section.up_station, remaining, self.line_id)

    def merge_with(self, next_section: "Section") -> "Section":
        """Collapse this section and the following one into a single section.

        Raises:
            InvalidSectionError: If `next_section` does not start where this one ends.
        """
        if not self.can_precede(next_section):
            raise InvalidSectionError(f"Sections {self} and {next_section} are not adjacent")
        return Section(
            self.up_station,
            next_section.down_station,
            self.distance + next_section.distance,
            self.line_id,
        )

    def __str__(self) -> str:
        return f"{self.up_station}->{self.down_station}({self.distance})"
