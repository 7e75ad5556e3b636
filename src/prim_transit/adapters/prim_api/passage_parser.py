"""Parser for PRIM stop-monitoring responses (SIRI Lite)."""

import math
from datetime import UTC, datetime

from prim_transit.adapters.prim_api.constants import DEFAULT_DESTINATION, DEFAULT_STATUS
from prim_transit.adapters.prim_api.schemas import (
    MonitoredCall,
    MonitoredStopVisit,
    SiriValue,
    StopMonitoringResponse,
)
from prim_transit.adapters.prim_api.timestamps import parse_timestamp
from prim_transit.domain.identifiers import extract_line_display_name
from prim_transit.domain.models import Passage


class PassageParser:
    """Turns validated stop-monitoring envelopes into Passage objects."""

    @staticmethod
    def parse_passages(response: StopMonitoringResponse, now: datetime) -> list[Passage]:
        """Parse the monitored visits of the first delivery.

        Args:
            response: Validated stop-monitoring envelope.
            now: Reference instant for waiting times. Naive values are taken as UTC.

        Returns:
            Passages in upstream order.
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        return [
            PassageParser._parse_visit(visit, index, now)
            for index, visit in enumerate(response.visits)
        ]

    @staticmethod
    def _parse_visit(visit: MonitoredStopVisit, index: int, now: datetime) -> Passage:
        journey = visit.monitored_vehicle_journey
        call = journey.monitored_call
        line_ref = journey.line_ref.value

        expected_time = parse_timestamp(
            call.expected_departure_time or call.expected_arrival_time
        )

        return Passage(
            id=f"{line_ref}-{index}",
            line_id=line_ref,
            line_name=extract_line_display_name(line_ref),
            destination=_first_value(journey.destination_name) or DEFAULT_DESTINATION,
            direction=_first_value(journey.direction_name),
            expected_time=expected_time,
            aimed_time=parse_timestamp(call.aimed_departure_time),
            status=PassageParser._resolve_status(call),
            waiting_time=compute_waiting_time(expected_time, now),
        )

    @staticmethod
    def _resolve_status(call: MonitoredCall) -> str:
        return call.departure_status or call.arrival_status or DEFAULT_STATUS


def _first_value(values: list[SiriValue] | None) -> str:
    return values[0].value if values else ""


def compute_waiting_time(expected_time: datetime | None, now: datetime) -> int | None:
    """Minutes until expected_time, rounded half up and never negative."""
    if expected_time is None:
        return None
    minutes = (expected_time - now).total_seconds() / 60
    return max(0, math.floor(minutes + 0.5))


parse_passages = PassageParser.parse_passages
