"""HTTP transport for PRIM requests over aiohttp."""

import logging

from aiohttp import ClientSession, ClientTimeout

from prim_transit.domain.models import HttpResponse

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """HttpTransport backed by a caller-owned aiohttp session."""

    def __init__(self, session: ClientSession, timeout: float = 10.0) -> None:
        """Initialize with an aiohttp session and a per-request timeout in seconds."""
        self._session = session
        self._timeout = ClientTimeout(total=timeout)

    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Perform a GET and return the status with the raw body.

        Network errors and timeouts propagate to the caller.
        """
        async with self._session.get(url, headers=headers, timeout=self._timeout) as response:
            body = await response.text()
            logger.debug(f"GET {url} -> {response.status} ({len(body)} bytes)")
            return HttpResponse(status=response.status, body=body)
