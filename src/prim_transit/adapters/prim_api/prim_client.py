"""PRIM API client.

Wraps the PRIM marketplace endpoints behind typed methods: identifiers are
canonicalized, responses are validated against their schema and projected
into domain objects. Every failure is raised as a PrimError subclass.
"""

import json
import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from prim_transit.adapters.api_request_logger import log_api_request, log_api_response
from prim_transit.adapters.config import AppConfig
from prim_transit.adapters.prim_api.constants import (
    ALL_LINES_REF,
    API_KEY_HEADER,
    DEFAULT_HEADERS,
    DISRUPTIONS_BULK_PATH,
    GENERAL_MESSAGE_PATH,
    LINE_REPORTS_BY_LINE_PATH,
    LINE_REPORTS_BY_MODE_PATH,
    LINE_REPORTS_PATH,
    LINE_STOP_POINTS_PATH,
    PLACES_PATH,
    SEARCH_MIN_QUERY_LENGTH,
    STOP_MONITORING_PATH,
)
from prim_transit.adapters.prim_api.line_stop_parser import parse_line_stops
from prim_transit.adapters.prim_api.message_parser import parse_screen_messages
from prim_transit.adapters.prim_api.passage_parser import parse_passages
from prim_transit.adapters.prim_api.schemas import (
    GeneralMessageResponse,
    LineStopsResponse,
    PlacesResponse,
    StopMonitoringResponse,
    TrafficResponse,
)
from prim_transit.adapters.prim_api.search_parser import PLACE_TYPES_BY_KIND, parse_search_results
from prim_transit.adapters.prim_api.traffic_parser import parse_traffic_info
from prim_transit.adapters.prim_api.validation import ROOT_PATH, validate_payload
from prim_transit.domain.errors import (
    PrimApiError,
    PrimFetchError,
    PrimRateLimitError,
    PrimValidationError,
    ValidationIssue,
)
from prim_transit.domain.identifiers import (
    build_stop_monitoring_ref,
    to_canonical_line,
    to_canonical_stop,
)
from prim_transit.domain.models import (
    LineStop,
    Passage,
    ScreenMessage,
    SearchKind,
    SearchResult,
    TraficInfo,
    TransportMode,
)
from prim_transit.domain.ports import HttpTransport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class PrimClient:
    """Client for the PRIM marketplace APIs (SIRI Lite, Navitia, Places)."""

    def __init__(
        self,
        transport: HttpTransport,
        config: AppConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: HTTP transport performing the GET requests.
            config: Application configuration. Loaded from the environment if omitted.
            clock: Returns the current instant. Defaults to UTC wall-clock time.
        """
        self._transport = transport
        self._config = config or AppConfig()
        self._clock = clock or _utc_now

        if not self._config.prim_api_key:
            logger.warning("PRIM_API_KEY is not set, PRIM will reject requests")

    def _headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self._config.prim_api_key, **DEFAULT_HEADERS}

    @staticmethod
    def _log_call(label: str, endpoint: str, started: float, extra: str = "") -> None:
        elapsed_ms = round((time.perf_counter() - started) * 1000)
        message = f"[PRIM] {label} {endpoint} ({elapsed_ms}ms)"
        if extra:
            message = f"{message} {extra}"
        if label == "OK":
            logger.debug(message)
        else:
            logger.warning(message)

    async def _fetch(self, endpoint: str, schema: type[ModelT]) -> ModelT:
        """GET an endpoint and validate its JSON body against schema."""
        url = f"{self._config.prim_base_url}{endpoint}"
        headers = self._headers()
        log_api_request("GET", url, headers=headers)
        started = time.perf_counter()

        try:
            response = await self._transport.get(url, headers)
        except Exception as e:
            self._log_call("FETCH_ERROR", endpoint, started, str(e))
            raise PrimFetchError(endpoint, str(e) or type(e).__name__) from e

        log_api_response(url, response.status, response.body)

        if response.status == 429:
            self._log_call("RATE_LIMIT", endpoint, started)
            raise PrimRateLimitError(endpoint, response.body)

        if not response.ok:
            self._log_call("ERROR", endpoint, started, f"status={response.status}")
            raise PrimApiError(response.status, endpoint, response.body)

        try:
            data = json.loads(response.body)
        except json.JSONDecodeError as e:
            self._log_call("VALIDATION", endpoint, started, "body is not JSON")
            issue = ValidationIssue(path=ROOT_PATH, reason=f"Response is not valid JSON: {e.msg}")
            raise PrimValidationError(endpoint, [issue]) from e

        result = validate_payload(schema, data)
        if result.value is None:
            self._log_call("VALIDATION", endpoint, started, f"{len(result.issues)} issue(s)")
            for issue in result.issues:
                logger.debug(f"[PRIM] {endpoint} {issue}")
            raise PrimValidationError(endpoint, result.issues)

        self._log_call("OK", endpoint, started)
        return result.value

    # ============================================
    # Next passages (SIRI Lite)
    # ============================================

    async def get_next_departures(self, stop_id: str) -> list[Passage]:
        """Get the next passages at a stop.

        Args:
            stop_id: Stop identifier in any supported format.

        Returns:
            Passages in upstream order.
        """
        monitoring_ref = build_stop_monitoring_ref(to_canonical_stop(stop_id))
        endpoint = f"{STOP_MONITORING_PATH}?MonitoringRef={quote(monitoring_ref, safe='')}"
        response = await self._fetch(endpoint, StopMonitoringResponse)
        return parse_passages(response, self._clock())

    async def get_line_passages(self, line_id: str) -> list[Passage]:
        """Get the passages of a line at all of its stops."""
        line = to_canonical_line(line_id)
        endpoint = f"{STOP_MONITORING_PATH}?LineRef={quote(line.legacy_ref, safe='')}"
        response = await self._fetch(endpoint, StopMonitoringResponse)
        return parse_passages(response, self._clock())

    # ============================================
    # Traffic (Navitia)
    # ============================================

    async def get_traffic_info(self, mode: TransportMode | None = None) -> list[TraficInfo]:
        """Get the traffic status of every line, optionally restricted to one mode."""
        path = (
            LINE_REPORTS_BY_MODE_PATH.format(mode=mode.physical_mode) if mode else LINE_REPORTS_PATH
        )
        endpoint = f"{path}?count={self._config.traffic_report_count}"
        response = await self._fetch(endpoint, TrafficResponse)
        return parse_traffic_info(response, self._clock())

    async def get_line_traffic_info(self, line_id: str) -> list[TraficInfo]:
        """Get the traffic status of one line."""
        line = to_canonical_line(line_id)
        endpoint = LINE_REPORTS_BY_LINE_PATH.format(line_id=line.graph_ref)
        response = await self._fetch(endpoint, TrafficResponse)
        return parse_traffic_info(response, self._clock())

    async def get_bulk_disruptions(self) -> list[TraficInfo]:
        """Get the traffic status derived from every ongoing disruption."""
        response = await self._fetch(DISRUPTIONS_BULK_PATH, TrafficResponse)
        return parse_traffic_info(response, self._clock())

    # ============================================
    # Screen messages (SIRI Lite general message)
    # ============================================

    async def get_screen_messages(self, line_id: str | None = None) -> list[ScreenMessage]:
        """Get station screen messages for one line, or for all lines."""
        line_ref = to_canonical_line(line_id).legacy_ref if line_id else ALL_LINES_REF
        endpoint = f"{GENERAL_MESSAGE_PATH}?LineRef={quote(line_ref, safe='')}"
        response = await self._fetch(endpoint, GeneralMessageResponse)
        return parse_screen_messages(response)

    # ============================================
    # Line stops (Navitia)
    # ============================================

    async def get_line_stops(self, line_id: str) -> list[LineStop]:
        """Get the stations served by a line, deduplicated by name."""
        line = to_canonical_line(line_id)
        path = LINE_STOP_POINTS_PATH.format(line_id=line.graph_ref)
        endpoint = f"{path}?count={self._config.line_stops_count}"
        response = await self._fetch(endpoint, LineStopsResponse)
        return parse_line_stops(response)

    # ============================================
    # Search (PRIM Places)
    # ============================================

    async def search(self, query: str, kind: SearchKind = "all") -> list[SearchResult]:
        """Search stops and lines by name.

        Args:
            query: Search text. Queries shorter than two characters return nothing.
            kind: "stop", "line" or "all".

        Returns:
            Matching stop areas and/or lines, in upstream relevance order.

        Raises:
            ValueError: If kind is not a known search type. Nothing is requested.
        """
        if kind not in PLACE_TYPES_BY_KIND:
            raise ValueError(f"Unknown search type: {kind}")

        query = query.strip()
        if len(query) < SEARCH_MIN_QUERY_LENGTH:
            return []

        endpoint = f"{PLACES_PATH}?q={quote(query, safe='')}&count={self._config.search_count}"
        response = await self._fetch(endpoint, PlacesResponse)
        return parse_search_results(response, kind, limit=self._config.search_result_limit)
