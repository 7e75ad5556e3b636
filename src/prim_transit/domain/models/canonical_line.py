"""Canonical line identifier domain model."""

from dataclasses import dataclass
from enum import StrEnum

from prim_transit.domain.models.transport_mode import TransportMode


class LineFormat(StrEnum):
    """Identifier encoding a line reference was recognized as."""

    GRAPH = "graph"  # line:IDFM:C01371
    LEGACY = "legacy"  # STIF:Line::C01371:
    CODE = "code"  # C01371
    EMBEDDED = "embedded"  # code found inside another string
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CanonicalLine:
    """One transit line with every equivalent identifier encoding."""

    code: str
    graph_ref: str
    legacy_ref: str
    display_name: str
    mode: TransportMode
    original: str
    format: LineFormat
