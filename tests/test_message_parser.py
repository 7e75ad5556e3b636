"""Tests for the general-message parser."""

from datetime import UTC, datetime
from typing import Any

from prim_transit.adapters.prim_api.message_parser import parse_screen_messages
from prim_transit.adapters.prim_api.schemas import GeneralMessageResponse
from prim_transit.domain.models import ScreenMessageChannel


def _message(
    identifier: str, text: str, channel: str = "Perturbation", **fields: Any
) -> dict[str, Any]:
    content: dict[str, Any] = {"Message": [{"MessageText": {"value": text}}]}
    if "line_refs" in fields:
        content["LineRef"] = [{"value": ref} for ref in fields.pop("line_refs")]
    return {
        "InfoMessageIdentifier": identifier,
        "RecordedAtTime": "2024-01-15T07:30:00.000Z",
        "InfoChannelRef": channel,
        "Content": content,
        **fields,
    }


def _response(*deliveries: list[dict[str, Any]]) -> GeneralMessageResponse:
    return GeneralMessageResponse.model_validate(
        {
            "Siri": {
                "ServiceDelivery": {
                    "ResponseTimestamp": "2024-01-15T08:00:00.000Z",
                    "GeneralMessageDelivery": [
                        {"InfoMessage": messages} for messages in deliveries
                    ],
                }
            }
        }
    )


class TestParseScreenMessages:
    """Tests for parse_screen_messages."""

    def test_message_then_fields_projected(self) -> None:
        """Given one message, when parsing, then text, channel, dates and lines are projected."""
        response = _response(
            [
                _message(
                    "IDFM:msg-1",
                    "Trafic perturbé sur la ligne A",
                    line_refs=["STIF:Line::C01742:", "STIF:Line::C01371:"],
                    ValidUntilTime="2024-01-15T20:00:00.000Z",
                )
            ]
        )

        messages = parse_screen_messages(response)

        assert len(messages) == 1
        message = messages[0]
        assert message.id == "IDFM:msg-1"
        assert message.channel == ScreenMessageChannel.PERTURBATION
        assert message.message == "Trafic perturbé sur la ligne A"
        assert message.recorded_at == datetime(2024, 1, 15, 7, 30, tzinfo=UTC)
        assert message.valid_until == datetime(2024, 1, 15, 20, 0, tzinfo=UTC)
        assert message.affected_lines == ["RER A", "Métro 1"]

    def test_every_delivery_then_flattened_in_order(self) -> None:
        """Given several deliveries, when parsing, then messages of all of them are returned."""
        response = _response(
            [_message("m1", "Premier", channel="Information")],
            [_message("m2", "Deuxième", channel="Commercial"), _message("m3", "Troisième")],
        )

        messages = parse_screen_messages(response)

        assert [m.id for m in messages] == ["m1", "m2", "m3"]
        assert messages[1].channel == ScreenMessageChannel.COMMERCIAL

    def test_first_message_text_is_used(self) -> None:
        """Given several message texts, when parsing, then the first one is kept."""
        message = _message("m1", "Court")
        message["Content"]["Message"].append({"MessageText": {"value": "Version longue"}})

        parsed = parse_screen_messages(_response([message]))[0]

        assert parsed.message == "Court"

    def test_optional_fields_absent_then_defaults(self) -> None:
        """Given no validity or line refs, when parsing, then they are empty."""
        parsed = parse_screen_messages(_response([_message("m1", "Info")]))[0]

        assert parsed.valid_until is None
        assert parsed.affected_lines == []

    def test_no_delivery_then_empty(self) -> None:
        """Given no delivery, when parsing, then no message is returned."""
        assert parse_screen_messages(_response()) == []
