"""Line domain model."""

from dataclasses import dataclass, replace

from subway_network.domain.models.section import Section
from subway_network.domain.models.sections import Sections
from subway_network.domain.models.station import Station


@dataclass(frozen=True)
class Line:
    """A named, colored subway line owning its section chain."""

    id: int
    name: str
    color: str
    sections: Sections

    @classmethod
    def create(
        cls,
        id: int,  # noqa: A002
        name: str,
        color: str,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> "Line":
        """Create a line with its initial section."""
        section = Section(up_station, down_station, distance, line_id=id)
        return cls(id=id, name=name, color=color, sections=Sections((section,)))

    def ordered_stations(self) -> list[Station]:
        return self.sections.ordered_stations()

    def with_sections(self, sections: Sections) -> "Line":
        return replace(self, sections=Sections(s.with_line(self.id) for s in sections))

    def rename(self, name: str, color: str) -> "Line":
        return replace(self, name=name, color=color)
