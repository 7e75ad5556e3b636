"""Errors raised by transit clients.

Every failure of a TransitClient call is one of these, so callers can tell
an upstream rejection from a malformed payload or a network failure.
"""

from dataclasses import dataclass

BODY_EXCERPT_LENGTH = 200


@dataclass(frozen=True)
class ValidationIssue:
    """A single structural mismatch in a payload."""

    path: str  # e.g. "Siri.ServiceDelivery.ResponseTimestamp"
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class PrimError(Exception):
    """Base class for classified PRIM failures."""


class PrimApiError(PrimError):
    """Raised when PRIM answers with a non-success HTTP status."""

    def __init__(self, status: int, endpoint: str, body: str = "") -> None:
        self.status = status
        self.endpoint = endpoint
        self.body_excerpt = body[:BODY_EXCERPT_LENGTH]
        super().__init__(f"PRIM API error {status} on {endpoint}")


class PrimRateLimitError(PrimApiError):
    """Raised when PRIM rejects a request with HTTP 429."""

    def __init__(self, endpoint: str, body: str = "") -> None:
        super().__init__(429, endpoint, body)
        self.args = (f"Rate limit exceeded for {endpoint}",)


class PrimValidationError(PrimError):
    """Raised when a successful response is not JSON or does not match its schema."""

    def __init__(self, endpoint: str, issues: list[ValidationIssue]) -> None:
        self.endpoint = endpoint
        self.issues = issues
        super().__init__(f"Validation error on {endpoint}: {len(issues)} issue(s)")


class PrimFetchError(PrimError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Failed to fetch {endpoint}: {reason}")
