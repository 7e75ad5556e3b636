"""Canonical stop identifier domain model."""

from dataclasses import dataclass
from enum import StrEnum


class StopFormat(StrEnum):
    """Identifier encoding a stop reference was recognized as."""

    LEGACY = "legacy"  # STIF:StopPoint:Q:22089:
    STOP_AREA = "stop_area"  # stop_area:IDFM:71264
    STOP_POINT = "stop_point"  # stop_point:IDFM:22089
    MONOMODAL_STOP_POINT = "monomodal_stop_point"  # stop_point:IDFM:monomodalStopPlace:47918
    MONOMODAL = "monomodal"  # monomodalStopPlace:47918
    NUMERIC = "numeric"  # 22089
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CanonicalStop:
    """One physical stop with every equivalent identifier encoding."""

    numeric_id: str
    legacy_ref: str
    graph_ref: str
    original: str
    format: StopFormat
    area_ref: str | None = None

    @property
    def is_monomodal(self) -> bool:
        """Whether the stop was referenced as a monomodal stop place."""
        return self.format in (StopFormat.MONOMODAL, StopFormat.MONOMODAL_STOP_POINT)
