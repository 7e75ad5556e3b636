"""Parser for PRIM general-message responses (station screens)."""

from prim_transit.adapters.prim_api.schemas import GeneralMessageResponse, InfoMessage
from prim_transit.adapters.prim_api.timestamps import parse_timestamp
from prim_transit.domain.identifiers import extract_line_display_name
from prim_transit.domain.models import ScreenMessage


class MessageParser:
    """Turns validated general-message envelopes into ScreenMessage objects."""

    @staticmethod
    def parse_screen_messages(response: GeneralMessageResponse) -> list[ScreenMessage]:
        """Parse the info messages of every delivery, in delivery order."""
        return [MessageParser._parse_message(msg) for msg in response.info_messages]

    @staticmethod
    def _parse_message(msg: InfoMessage) -> ScreenMessage:
        content = msg.content
        return ScreenMessage(
            id=msg.info_message_identifier,
            channel=msg.info_channel_ref,
            message=content.message[0].message_text.value,
            recorded_at=parse_timestamp(msg.recorded_at_time),
            valid_until=parse_timestamp(msg.valid_until_time),
            affected_lines=[
                extract_line_display_name(ref.value) for ref in content.line_ref or []
            ],
        )


parse_screen_messages = MessageParser.parse_screen_messages
