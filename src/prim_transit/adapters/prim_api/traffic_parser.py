"""Parser for PRIM traffic responses (Navitia line_reports and disruptions_bulk)."""

import logging
from collections.abc import Iterable
from datetime import datetime

from prim_transit.adapters.prim_api.constants import (
    DEFAULT_DISRUPTION_MESSAGE,
    DEFAULT_DISRUPTION_TITLE,
)
from prim_transit.adapters.prim_api.schemas import (
    Disruption,
    DisruptionEffect,
    ImpactedLine,
    ReportLine,
    TrafficResponse,
)
from prim_transit.adapters.prim_api.timestamps import parse_timestamp
from prim_transit.domain.identifiers import DEFAULT_LINE_COLOR, get_line_color
from prim_transit.domain.models import (
    DisruptionSeverity,
    LineStatus,
    SimplifiedDisruption,
    TraficInfo,
)

logger = logging.getLogger(__name__)

SEVERITY_BY_EFFECT: dict[DisruptionEffect, DisruptionSeverity] = {
    DisruptionEffect.NO_SERVICE: DisruptionSeverity.CRITICAL,
    DisruptionEffect.SIGNIFICANT_DELAYS: DisruptionSeverity.WARNING,
    DisruptionEffect.REDUCED_SERVICE: DisruptionSeverity.WARNING,
}

PERTURBING_EFFECTS = frozenset(
    {DisruptionEffect.SIGNIFICANT_DELAYS, DisruptionEffect.REDUCED_SERVICE}
)


def compute_line_status(disruptions: Iterable[Disruption]) -> LineStatus:
    """Aggregate the disruptions of a line into a single status.

    Only active disruptions count. NO_SERVICE wins over SIGNIFICANT_DELAYS and
    REDUCED_SERVICE; anything else is normal.
    """
    effects = {d.effect for d in disruptions if d.is_active}

    if DisruptionEffect.NO_SERVICE in effects:
        return LineStatus.INTERROMPU
    if effects & PERTURBING_EFFECTS:
        return LineStatus.PERTURBE
    return LineStatus.NORMAL


def map_severity(effect: DisruptionEffect | None) -> DisruptionSeverity:
    """Three-level severity for a disruption effect."""
    if effect is None:
        return DisruptionSeverity.INFO
    return SEVERITY_BY_EFFECT.get(effect, DisruptionSeverity.INFO)


def resolve_line_color(color: str | None, code: str | None) -> str:
    """Upstream colour first, then the palette, then grey."""
    if color:
        return color if color.startswith("#") else f"#{color}"
    if code:
        return get_line_color(code)
    return DEFAULT_LINE_COLOR


class TrafficParser:
    """Turns validated traffic envelopes into TraficInfo objects."""

    @staticmethod
    def parse_traffic_info(response: TrafficResponse, now: datetime) -> list[TraficInfo]:
        """Parse line traffic status.

        Explicit line reports are used when present. Otherwise lines are rebuilt
        from the line objects impacted by each disruption, in first-seen order.

        Args:
            response: Validated traffic envelope.
            now: Start time for disruptions without an application period begin.

        Returns:
            One TraficInfo per line.
        """
        disruptions = response.disruptions or []

        if response.line_reports:
            return [
                TrafficParser._build_info(
                    report.line,
                    [d for d in disruptions if _impacts(d, report.line.id)],
                    now,
                )
                for report in response.line_reports
            ]

        lines: dict[str, ImpactedLine] = {}
        line_disruptions: dict[str, list[Disruption]] = {}

        for disruption in disruptions:
            for impacted in disruption.impacted_objects or []:
                pt_object = impacted.pt_object
                if pt_object.embedded_type != "line" or pt_object.line is None:
                    continue
                line = pt_object.line
                if line.id not in lines:
                    lines[line.id] = line
                    line_disruptions[line.id] = []
                # A disruption may list the same line more than once
                if not any(d is disruption for d in line_disruptions[line.id]):
                    line_disruptions[line.id].append(disruption)

        logger.debug(f"Rebuilt {len(lines)} line(s) from {len(disruptions)} disruption(s)")

        return [
            TrafficParser._build_info(line, line_disruptions[line_id], now)
            for line_id, line in lines.items()
        ]

    @staticmethod
    def _build_info(
        line: ReportLine | ImpactedLine, disruptions: list[Disruption], now: datetime
    ) -> TraficInfo:
        return TraficInfo(
            line_id=line.id,
            line_name=line.name,
            line_code=line.code or "",
            line_color=resolve_line_color(line.color, line.code),
            status=compute_line_status(disruptions),
            disruptions=[TrafficParser.simplify_disruption(d, now) for d in disruptions],
        )

    @staticmethod
    def simplify_disruption(disruption: Disruption, now: datetime) -> SimplifiedDisruption:
        """Reduce a Navitia disruption to its displayed fields."""
        first_text = disruption.messages[0].text if disruption.messages else ""
        period = disruption.application_periods[0] if disruption.application_periods else None

        start_time = parse_timestamp(period.begin) if period else None
        end_time = parse_timestamp(period.end) if period else None

        return SimplifiedDisruption(
            id=disruption.id,
            title=disruption.category or DEFAULT_DISRUPTION_TITLE,
            message=first_text or disruption.cause or DEFAULT_DISRUPTION_MESSAGE,
            severity=map_severity(disruption.effect),
            start_time=start_time or now,
            end_time=end_time,
            affected_lines=[obj.pt_object.name for obj in disruption.impacted_objects or []],
        )


def _impacts(disruption: Disruption, line_id: str) -> bool:
    return any(obj.pt_object.id == line_id for obj in disruption.impacted_objects or [])


parse_traffic_info = TrafficParser.parse_traffic_info
