"""Search result domain models."""

from dataclasses import dataclass, field
from typing import Literal

from prim_transit.domain.models.coordinates import Coordinates
from prim_transit.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class StopSearchResult:
    """A stop area matching a search query."""

    id: str  # full ref, e.g. "stop_area:IDFM:71264"
    numeric_id: str
    name: str
    city: str | None = None
    lines: list[str] = field(default_factory=list)
    coords: Coordinates | None = None
    type: Literal["stop"] = "stop"


@dataclass(frozen=True)
class LineSearchResult:
    """A line matching a search query."""

    id: str  # full ref, e.g. "line:IDFM:C01371"
    name: str
    code: str | None = None
    color: str | None = None
    mode: TransportMode | None = None
    type: Literal["line"] = "line"


SearchResult = StopSearchResult | LineSearchResult

SearchKind = Literal["stop", "line", "all"]
