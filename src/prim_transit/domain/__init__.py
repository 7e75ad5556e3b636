"""Domain layer - identifiers, value objects, errors and ports."""

from prim_transit.domain.errors import (
    PrimApiError,
    PrimError,
    PrimFetchError,
    PrimRateLimitError,
    PrimValidationError,
    ValidationIssue,
)
from prim_transit.domain.models import (
    CanonicalLine,
    CanonicalStop,
    LineStop,
    Passage,
    ScreenMessage,
    SearchResult,
    TraficInfo,
    TransportMode,
)
from prim_transit.domain.ports import (
    HttpTransport,
    TransitClient,
)

__all__ = [
    "CanonicalLine",
    "CanonicalStop",
    "HttpTransport",
    "LineStop",
    "Passage",
    "PrimApiError",
    "PrimError",
    "PrimFetchError",
    "PrimRateLimitError",
    "PrimValidationError",
    "ScreenMessage",
    "SearchResult",
    "TraficInfo",
    "TransitClient",
    "TransportMode",
    "ValidationIssue",
]
