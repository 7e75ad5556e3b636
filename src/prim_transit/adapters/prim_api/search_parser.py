"""Parser for PRIM Places search responses."""

from prim_transit.adapters.prim_api.schemas import Place, PlaceMode, PlacesResponse, PlaceType
from prim_transit.domain.identifiers import extract_numeric_stop_id
from prim_transit.domain.models import (
    Coordinates,
    LineSearchResult,
    SearchKind,
    SearchResult,
    StopSearchResult,
    TransportMode,
)

SEARCH_RESULT_LIMIT = 10

PLACE_TYPES_BY_KIND: dict[str, frozenset[PlaceType]] = {
    "stop": frozenset({PlaceType.STOP_AREA}),
    "line": frozenset({PlaceType.LINE}),
    "all": frozenset({PlaceType.STOP_AREA, PlaceType.LINE}),
}


class SearchParser:
    """Turns validated Places envelopes into search results."""

    @staticmethod
    def parse_search_results(
        response: PlacesResponse,
        kind: SearchKind = "all",
        limit: int = SEARCH_RESULT_LIMIT,
    ) -> list[SearchResult]:
        """Keep stop areas and/or lines, in upstream order, up to limit results.

        Cities and addresses are never returned.
        """
        wanted = PLACE_TYPES_BY_KIND[kind]
        places = [place for place in response.places or [] if place.type in wanted]
        return [SearchParser._to_result(place) for place in places[:limit]]

    @staticmethod
    def _to_result(place: Place) -> SearchResult:
        if place.type == PlaceType.LINE:
            return LineSearchResult(
                id=place.id,
                name=place.name,
                code=place.short_name,
                color=f"#{place.color}" if place.color else None,
                mode=_first_mode(place.mode),
            )

        # Places report Lambert-style axes: x is the longitude, y the latitude
        coords = None
        if place.x is not None and place.y is not None:
            coords = Coordinates(lat=place.y, lon=place.x)

        return StopSearchResult(
            id=place.id,
            numeric_id=extract_numeric_stop_id(place.id),
            name=place.name,
            city=place.city,
            lines=[line.short_name or line.id for line in place.lines or []],
            coords=coords,
        )


def _first_mode(modes: list[PlaceMode] | None) -> TransportMode | None:
    if not modes:
        return None
    return TransportMode.from_physical_mode(modes[0].id)


parse_search_results = SearchParser.parse_search_results
