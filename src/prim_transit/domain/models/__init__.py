"""Domain models for PRIM transit data."""

from prim_transit.domain.models.bulk_passages import BulkPassagesResult, StopPassagesResult
from prim_transit.domain.models.canonical_line import CanonicalLine, LineFormat
from prim_transit.domain.models.canonical_stop import CanonicalStop, StopFormat
from prim_transit.domain.models.coordinates import Coordinates
from prim_transit.domain.models.http_response import HttpResponse
from prim_transit.domain.models.late_chance import (
    AffectedFavoriteLine,
    LateChanceResult,
    RiskLevel,
)
from prim_transit.domain.models.line_stop import LineStop
from prim_transit.domain.models.passage import Passage
from prim_transit.domain.models.screen_message import ScreenMessage, ScreenMessageChannel
from prim_transit.domain.models.search_result import (
    LineSearchResult,
    SearchKind,
    SearchResult,
    StopSearchResult,
)
from prim_transit.domain.models.trafic_info import (
    DisruptionSeverity,
    LineStatus,
    SimplifiedDisruption,
    TraficInfo,
)
from prim_transit.domain.models.transport_mode import TransportMode

__all__ = [
    "AffectedFavoriteLine",
    "BulkPassagesResult",
    "CanonicalLine",
    "CanonicalStop",
    "Coordinates",
    "DisruptionSeverity",
    "HttpResponse",
    "LateChanceResult",
    "LineFormat",
    "LineSearchResult",
    "LineStatus",
    "LineStop",
    "Passage",
    "RiskLevel",
    "ScreenMessage",
    "ScreenMessageChannel",
    "SearchKind",
    "SearchResult",
    "SimplifiedDisruption",
    "StopFormat",
    "StopPassagesResult",
    "StopSearchResult",
    "TraficInfo",
    "TransportMode",
]
