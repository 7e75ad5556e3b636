"""Screen message domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class ScreenMessageChannel(StrEnum):
    """Channel a message is broadcast on in stations."""

    INFORMATION = "Information"
    PERTURBATION = "Perturbation"
    COMMERCIAL = "Commercial"


@dataclass(frozen=True)
class ScreenMessage:
    """A message displayed on station screens."""

    id: str
    channel: ScreenMessageChannel
    message: str
    recorded_at: datetime | None
    valid_until: datetime | None = None
    affected_lines: list[str] = field(default_factory=list)
