"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Station:
    """Represents a subway station.

    Stations are identified by id. Stations that have not been persisted yet
    (id is None) are compared by id and name together.
    """

    id: int | None
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        if self.id is None or other.id is None:
            return (self.id, self.name) == (other.id, other.name)
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return hash(self.name)
        return hash(self.id)

    def __str__(self) -> str:
        return self.name
