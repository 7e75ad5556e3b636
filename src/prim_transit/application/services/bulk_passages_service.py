"""Bulk passages service."""

import asyncio
import logging
from collections.abc import Iterable

from prim_transit.domain.errors import (
    PrimApiError,
    PrimError,
    PrimFetchError,
    PrimRateLimitError,
    PrimValidationError,
)
from prim_transit.domain.models import BulkPassagesResult, StopPassagesResult
from prim_transit.domain.ports import TransitClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_STOPS = 10


def describe_error(error: PrimError) -> tuple[str, str]:
    """Return (message, kind) describing a failed stop."""
    if isinstance(error, PrimRateLimitError):
        return f"API Error: {error.status}", "rate_limit"
    if isinstance(error, PrimApiError):
        return f"API Error: {error.status}", "api"
    if isinstance(error, PrimValidationError):
        return "Invalid response from PRIM API", "validation"
    if isinstance(error, PrimFetchError):
        return str(error), "fetch"
    return str(error), "unknown"


class BulkPassagesService:
    """Service for fetching the next passages of several stops at once."""

    def __init__(self, client: TransitClient, max_stops: int = DEFAULT_MAX_STOPS) -> None:
        """Initialize with a transit client and the per-request stop limit."""
        self._client = client
        self._max_stops = max_stops

    def normalize_stop_ids(self, stop_ids: Iterable[str]) -> list[str]:
        """Strip stop ids and drop blank ones, rejecting empty or oversized requests.

        Raises:
            ValueError: If no stop id remains or more than max_stops are given.
        """
        normalized = [stop_id.strip() for stop_id in stop_ids if stop_id and stop_id.strip()]
        if not normalized:
            raise ValueError("At least one stop ID is required")
        if len(normalized) > self._max_stops:
            raise ValueError(f"Maximum {self._max_stops} stops allowed per request")
        return normalized

    async def get_bulk_passages(self, stop_ids: Iterable[str]) -> BulkPassagesResult:
        """Fetch passages for every stop concurrently.

        A failing stop does not fail the request: its result carries an error
        message instead of passages.
        """
        normalized = self.normalize_stop_ids(stop_ids)
        results = await asyncio.gather(*(self._fetch_stop(stop_id) for stop_id in normalized))
        bulk = BulkPassagesResult(results=list(results))

        logger.info(
            f"Bulk passages: {bulk.success}/{bulk.requested} stops fetched, {bulk.errors} failed"
        )
        return bulk

    async def _fetch_stop(self, stop_id: str) -> StopPassagesResult:
        try:
            passages = await self._client.get_next_departures(stop_id)
        except PrimError as e:
            message, kind = describe_error(e)
            logger.warning(f"Failed to fetch passages for stop {stop_id}: {e}")
            return StopPassagesResult(stop_id=stop_id, error=message, error_kind=kind)
        return StopPassagesResult(stop_id=stop_id, passages=passages)
