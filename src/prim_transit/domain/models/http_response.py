"""HTTP response domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body returned by the transport."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
