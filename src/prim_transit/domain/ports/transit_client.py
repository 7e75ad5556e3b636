"""Transit client port."""

from typing import Protocol

from prim_transit.domain.models import (
    LineStop,
    Passage,
    ScreenMessage,
    SearchKind,
    SearchResult,
    TraficInfo,
    TransportMode,
)


class TransitClient(Protocol):
    """Port for reading real-time transit data as domain objects."""

    async def get_next_departures(self, stop_id: str) -> list[Passage]:
        """Get the next passages at a stop."""
        ...

    async def get_traffic_info(self, mode: TransportMode | None = None) -> list[TraficInfo]:
        """Get the traffic status of every line, optionally for one mode."""
        ...

    async def get_line_traffic_info(self, line_id: str) -> list[TraficInfo]:
        """Get the traffic status of one line."""
        ...

    async def get_line_passages(self, line_id: str) -> list[Passage]:
        """Get the passages of one line at all of its stops."""
        ...

    async def get_screen_messages(self, line_id: str | None = None) -> list[ScreenMessage]:
        """Get station screen messages, for one line or all lines."""
        ...

    async def get_bulk_disruptions(self) -> list[TraficInfo]:
        """Get the traffic status derived from every ongoing disruption."""
        ...

    async def get_line_stops(self, line_id: str) -> list[LineStop]:
        """Get the stations served by a line."""
        ...

    async def search(self, query: str, kind: SearchKind = "all") -> list[SearchResult]:
        """Search stops and lines by name."""
        ...
