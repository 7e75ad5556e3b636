"""Line stop domain model."""

from dataclasses import dataclass

from prim_transit.domain.models.coordinates import Coordinates


@dataclass(frozen=True)
class LineStop:
    """A station served by a line."""

    id: str  # e.g. "22089" or "monomodalStopPlace:47918"
    name: str
    coords: Coordinates | None = None
