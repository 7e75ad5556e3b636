"""Timestamp parsing for PRIM payloads."""

from datetime import datetime, tzinfo

from prim_transit.adapters.prim_api.constants import PRIM_TIMEZONE


def parse_timestamp(value: str | None, default_tz: tzinfo = PRIM_TIMEZONE) -> datetime | None:
    """Parse an ISO 8601 timestamp, extended or basic ("20240115T080000").

    Naive values are interpreted in default_tz. Returns None for missing or
    unparseable values.
    """
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed
