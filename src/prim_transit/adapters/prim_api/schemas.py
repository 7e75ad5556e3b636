"""Pydantic schemas for PRIM API responses.

Models are strict on the fields the parsers read and keep every other field
(extra="allow"), reachable through model_extra. SIRI Lite envelopes use
PascalCase keys, Navitia uses snake_case and PRIM Places uses camelCase.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

from prim_transit.domain.models.screen_message import ScreenMessageChannel


class PassthroughModel(BaseModel):
    """Validates known fields and retains unknown ones."""

    model_config = ConfigDict(extra="allow")


class SiriModel(PassthroughModel):
    """SIRI Lite object with PascalCase keys."""

    model_config = ConfigDict(alias_generator=to_pascal)


class PlacesModel(PassthroughModel):
    """PRIM Places object with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel)


class SiriValue(PassthroughModel):
    """SIRI wrapper around a single string ({"value": "..."})."""

    value: str


# ============================================
# Stop monitoring (SIRI Lite)
# ============================================


class MonitoredCall(SiriModel):
    expected_departure_time: str | None = None
    expected_arrival_time: str | None = None
    aimed_departure_time: str | None = None
    aimed_arrival_time: str | None = None
    departure_status: str | None = None
    arrival_status: str | None = None
    stop_point_name: list[SiriValue] | None = None
    vehicle_at_stop: bool | None = None
    destination_display: list[SiriValue] | None = None


class MonitoredVehicleJourney(SiriModel):
    line_ref: SiriValue
    operator_ref: SiriValue | None = None
    direction_name: list[SiriValue] | None = None
    destination_ref: SiriValue | None = None
    destination_name: list[SiriValue] | None = None
    destination_short_name: list[SiriValue] | None = None
    monitored_call: MonitoredCall


class MonitoredStopVisit(SiriModel):
    monitored_vehicle_journey: MonitoredVehicleJourney
    recorded_at_time: str | None = None
    item_identifier: str | None = None
    monitoring_ref: SiriValue | None = None


class StopMonitoringDelivery(SiriModel):
    response_timestamp: str | None = None
    version: str | None = None
    status: str | bool | None = None
    monitored_stop_visit: list[MonitoredStopVisit] | None = None


class StopMonitoringServiceDelivery(SiriModel):
    response_timestamp: str
    producer_ref: str | None = None
    response_message_identifier: str | None = None
    stop_monitoring_delivery: list[StopMonitoringDelivery]


class StopMonitoringSiri(SiriModel):
    service_delivery: StopMonitoringServiceDelivery


class StopMonitoringResponse(SiriModel):
    """Envelope returned by /stop-monitoring."""

    siri: StopMonitoringSiri

    @property
    def visits(self) -> list[MonitoredStopVisit]:
        """Visits of the first delivery, empty when absent."""
        deliveries = self.siri.service_delivery.stop_monitoring_delivery
        if not deliveries:
            return []
        return deliveries[0].monitored_stop_visit or []


# ============================================
# Traffic and disruptions (Navitia)
# ============================================


class DisruptionEffect(StrEnum):
    NO_SERVICE = "NO_SERVICE"
    REDUCED_SERVICE = "REDUCED_SERVICE"
    SIGNIFICANT_DELAYS = "SIGNIFICANT_DELAYS"
    DETOUR = "DETOUR"
    ADDITIONAL_SERVICE = "ADDITIONAL_SERVICE"
    MODIFIED_SERVICE = "MODIFIED_SERVICE"
    OTHER_EFFECT = "OTHER_EFFECT"
    UNKNOWN_EFFECT = "UNKNOWN_EFFECT"
    STOP_MOVED = "STOP_MOVED"


class DisruptionStatus(StrEnum):
    ACTIVE = "active"
    PAST = "past"
    FUTURE = "future"


class Severity(PassthroughModel):
    name: str
    effect: DisruptionEffect | None = None
    priority: int | None = None
    color: str | None = None


class MessageChannel(PassthroughModel):
    id: str | None = None
    name: str | None = None


class DisruptionMessage(PassthroughModel):
    text: str
    channel: MessageChannel | None = None


class ApplicationPeriod(PassthroughModel):
    begin: str | None = None
    end: str | None = None


class ImpactedLine(PassthroughModel):
    id: str
    name: str
    code: str | None = None
    color: str | None = None
    text_color: str | None = None


class PtObject(PassthroughModel):
    id: str
    name: str
    embedded_type: str | None = None
    line: ImpactedLine | None = None  # present when embedded_type == "line"


class ImpactedObject(PassthroughModel):
    pt_object: PtObject


class Disruption(PassthroughModel):
    id: str
    status: DisruptionStatus
    severity: Severity
    messages: list[DisruptionMessage] | None = None
    application_periods: list[ApplicationPeriod] | None = None
    impacted_objects: list[ImpactedObject] | None = None
    cause: str | None = None
    category: str | None = None
    updated_at: str | None = None

    @property
    def effect(self) -> DisruptionEffect | None:
        return self.severity.effect

    @property
    def is_active(self) -> bool:
        return self.status == DisruptionStatus.ACTIVE


class PhysicalMode(PassthroughModel):
    id: str
    name: str


class ReportLine(PassthroughModel):
    id: str
    name: str
    code: str | None = None
    color: str | None = None
    text_color: str | None = None
    physical_modes: list[PhysicalMode] | None = None


class PtObjectRef(PassthroughModel):
    id: str
    name: str
    embedded_type: str | None = None


class LineReport(PassthroughModel):
    line: ReportLine
    pt_objects: list[PtObjectRef] | None = None


class TrafficResponse(PassthroughModel):
    """Envelope returned by line_reports and /disruptions_bulk."""

    disruptions: list[Disruption] | None = None
    line_reports: list[LineReport] | None = None


# ============================================
# Screen messages (SIRI Lite general message)
# ============================================


class InfoMessageText(SiriModel):
    message_type: str | None = None
    message_text: SiriValue


class InfoMessageContent(SiriModel):
    message: list[InfoMessageText] = Field(min_length=1)
    line_ref: list[SiriValue] | None = None


class InfoMessage(SiriModel):
    recorded_at_time: str
    info_message_identifier: str
    info_message_version: int | None = None
    info_channel_ref: ScreenMessageChannel
    valid_until_time: str | None = None
    content: InfoMessageContent


class GeneralMessageDelivery(SiriModel):
    response_timestamp: str | None = None
    version: str | None = None
    status: str | bool | None = None
    info_message: list[InfoMessage] | None = None


class GeneralMessageServiceDelivery(SiriModel):
    response_timestamp: str
    producer_ref: str | None = None
    response_message_identifier: str | None = None
    general_message_delivery: list[GeneralMessageDelivery]


class GeneralMessageSiri(SiriModel):
    service_delivery: GeneralMessageServiceDelivery


class GeneralMessageResponse(SiriModel):
    """Envelope returned by /general-message."""

    siri: GeneralMessageSiri

    @property
    def info_messages(self) -> list[InfoMessage]:
        """Messages of every delivery, in delivery order."""
        return [
            message
            for delivery in self.siri.service_delivery.general_message_delivery
            for message in delivery.info_message or []
        ]


# ============================================
# Place search (PRIM Places)
# ============================================


class PlaceType(StrEnum):
    STOP_AREA = "StopArea"
    CITY = "City"
    ADDRESS = "Address"
    LINE = "Line"


class PlaceMode(PlacesModel):
    id: str
    name: str


class PlaceLine(PlacesModel):
    id: str
    short_name: str | None = None
    color: str | None = None
    text_color: str | None = None
    mode: list[PlaceMode] | None = None


class Place(PlacesModel):
    id: str
    name: str
    type: PlaceType
    quality: float | None = None
    x: float | None = None  # longitude
    y: float | None = None  # latitude
    city: str | None = None
    zip_code: str | None = None
    insee: str | None = None
    lines: list[PlaceLine] | None = None  # StopArea
    modes: list[str] | None = None
    short_name: str | None = None  # Line
    color: str | None = None  # Line
    text_color: str | None = None  # Line
    mode: list[PlaceMode] | None = None  # Line


class PlacesResponse(PlacesModel):
    """Envelope returned by /places."""

    places: list[Place] | None = None


# ============================================
# Line stop points (Navitia)
# ============================================


class StopPointCoord(PassthroughModel):
    lat: str
    lon: str


class StopPoint(PassthroughModel):
    id: str
    name: str
    coord: StopPointCoord | None = None
    label: str | None = None


class LineStopsResponse(PassthroughModel):
    """Envelope returned by /v2/navitia/lines/{line}/stop_points."""

    stop_points: list[StopPoint] | None = None
