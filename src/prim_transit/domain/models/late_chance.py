"""Late-chance estimate domain models."""

from dataclasses import dataclass, field
from enum import StrEnum

from prim_transit.domain.models.trafic_info import DisruptionSeverity, LineStatus


class RiskLevel(StrEnum):
    """How likely disruptions on favourite lines are to make the user late."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class AffectedFavoriteLine:
    """A favourite line currently not running normally."""

    line_id: str
    line_name: str
    severity: DisruptionSeverity
    impact: str
    status: LineStatus


@dataclass(frozen=True)
class LateChanceResult:
    """Estimated chance of being late, with the lines responsible."""

    percentage: int
    risk: RiskLevel
    recommendation: str
    affected_lines: list[AffectedFavoriteLine] = field(default_factory=list)
    humor_quote: str | None = None
