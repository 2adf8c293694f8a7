"""Domain errors raised by the section-topology and shortest-path engines.

All errors are validation failures detected synchronously. They are never
retried: the same input reproduces the same failure. Callers map them to a
user-facing response.
"""


class SubwayError(ValueError):
    """Base class for every error raised by the subway network domain."""


class InvalidSectionError(SubwayError):
    """Malformed section: non-positive distance, identical endpoints or a broken chain."""


class SectionTooLongError(InvalidSectionError):
    """Splitting insertion not strictly shorter than the section it overlaps."""


class DuplicateOrDisjointStationsError(SubwayError):
    """Section addition where both or neither endpoint already exists in the line."""


class StationNotInLineError(SubwayError):
    """Operation references a station that is not part of the line."""


class StationNotFoundError(SubwayError):
    """Operation references a station that is unknown in the relevant scope."""


class LastSectionRemovalError(SubwayError):
    """Attempt to remove the only remaining section of a line."""


class NoPathExistsError(SubwayError):
    """Source and destination are not connected in the network."""


class SameStationError(SubwayError):
    """Path requested between a station and itself."""


class LineNotFoundError(SubwayError):
    """Operation references a line that does not exist."""


class DuplicateLineNameError(SubwayError):
    """Line name already used by another line."""


class DuplicateStationNameError(SubwayError):
    """Station name already registered."""
