"""HTTP transport port."""

from typing import Protocol

from prim_transit.domain.models.http_response import HttpResponse


class HttpTransport(Protocol):
    """Port for performing GET requests against the upstream API.

    Implementations raise on network failure and return any HTTP status,
    success or not, as an HttpResponse. Timeouts and retries belong here,
    not in the client.
    """

    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Perform a GET request."""
        ...
