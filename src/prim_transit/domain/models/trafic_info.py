"""Traffic status domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class LineStatus(StrEnum):
    """Aggregated status of one line."""

    NORMAL = "normal"
    PERTURBE = "perturbe"
    INTERROMPU = "interrompu"


class DisruptionSeverity(StrEnum):
    """Three-level severity shown for a disruption."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class SimplifiedDisruption:
    """A disruption reduced to what the dashboard displays."""

    id: str
    title: str
    message: str
    severity: DisruptionSeverity
    start_time: datetime
    end_time: datetime | None = None
    affected_lines: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TraficInfo:
    """Traffic status of one line and the disruptions that explain it."""

    line_id: str
    line_name: str
    line_code: str
    line_color: str
    status: LineStatus
    disruptions: list[SimplifiedDisruption] = field(default_factory=list)
