"""Travel direction policy for path finding."""

from enum import Enum


class PathDirection(str, Enum):
    """How sections are turned into graph edges.

    BIDIRECTIONAL adds a reverse edge with the same distance for every
    section. DIRECTED only allows travel from up-station to down-station.
    """

    BIDIRECTIONAL = "bidirectional"
    DIRECTED = "directed"
