"""Bulk passages domain models."""

from dataclasses import dataclass, field

from prim_transit.domain.models.passage import Passage


@dataclass(frozen=True)
class StopPassagesResult:
    """Passages fetched for one stop of a bulk request."""

    stop_id: str
    passages: list[Passage] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None  # "api", "rate_limit", "validation", "fetch"

    @property
    def ok(self) -> bool:
        """Whether the stop was fetched successfully."""
        return self.error is None


@dataclass(frozen=True)
class BulkPassagesResult:
    """Passages for several stops, with per-stop failures kept apart."""

    results: list[StopPassagesResult]

    @property
    def requested(self) -> int:
        return len(self.results)

    @property
    def success(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def errors(self) -> int:
        return self.requested - self.success
