"""Parser for Navitia line stop_points responses."""

import unicodedata

from prim_transit.adapters.prim_api.schemas import LineStopsResponse, StopPointCoord
from prim_transit.domain.identifiers import strip_stop_point_prefix
from prim_transit.domain.models import Coordinates, LineStop


def collation_key(name: str) -> tuple[str, str]:
    """Sort key that orders accented letters with their base letter ("É" near "E")."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name


def _parse_coord(coord: StopPointCoord | None) -> Coordinates | None:
    if coord is None:
        return None
    try:
        return Coordinates(lat=float(coord.lat), lon=float(coord.lon))
    except ValueError:
        return None


class LineStopParser:
    """Turns validated stop_points envelopes into LineStop objects."""

    @staticmethod
    def parse_line_stops(response: LineStopsResponse) -> list[LineStop]:
        """Parse stations served by a line.

        Several stop points share a station name (one per platform); the first
        one wins. The result is sorted by name.
        """
        seen: set[str] = set()
        stops: list[LineStop] = []

        for stop_point in response.stop_points or []:
            key = stop_point.name.strip().lower()
            if key in seen:
                continue
            seen.add(key)
            stops.append(
                LineStop(
                    id=strip_stop_point_prefix(stop_point.id),
                    name=stop_point.name,
                    coords=_parse_coord(stop_point.coord),
                )
            )

        return sorted(stops, key=lambda stop: collation_key(stop.name))


parse_line_stops = LineStopParser.parse_line_stops
