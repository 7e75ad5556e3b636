"""Passage domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Passage:
    """A predicted vehicle arrival or departure at a stop."""

    id: str
    line_id: str
    line_name: str
    destination: str
    direction: str
    expected_time: datetime | None  # None when upstream sent no parseable time
    status: str  # onTime, delayed, early, cancelled, noReport, or upstream value
    waiting_time: int | None  # minutes, None when expected_time is unknown
    aimed_time: datetime | None = None
