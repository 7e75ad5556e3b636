"""Stop identifier canonicalization.

Detection runs as an ordered chain of matchers; the first one that recognizes
the input wins. Order matters because some encodings are substrings of others
(a bare numeric id is also the tail of every graph ref).
"""

from collections.abc import Callable

from prim_transit.domain.identifiers.formats import (
    ANY_DIGITS_PATTERN,
    GRAPH_STOP_AREA_PATTERN,
    GRAPH_STOP_POINT_PATTERN,
    GRAPH_STOP_POINT_PREFIX,
    LEGACY_STOP_ENVELOPE_PATTERN,
    LEGACY_STOP_PATTERN,
    MONOMODAL_PREFIX,
    MONOMODAL_STOP_PATTERN,
    NUMERIC_STOP_PATTERN,
    graph_stop_ref,
    legacy_stop_ref,
)
from prim_transit.domain.models.canonical_stop import CanonicalStop, StopFormat


def is_legacy_stop_ref(stop_ref: str) -> bool:
    return LEGACY_STOP_PATTERN.match(stop_ref) is not None


def is_graph_stop_ref(stop_ref: str) -> bool:
    return GRAPH_STOP_POINT_PATTERN.match(stop_ref) is not None


def is_stop_area_ref(stop_ref: str) -> bool:
    return GRAPH_STOP_AREA_PATTERN.match(stop_ref) is not None


def is_monomodal_stop_ref(stop_ref: str) -> bool:
    """Bare monomodal stop place, without the graph prefix."""
    return MONOMODAL_STOP_PATTERN.match(stop_ref) is not None


def _match_legacy(trimmed: str, original: str) -> CanonicalStop | None:
    match = LEGACY_STOP_PATTERN.match(trimmed)
    if not match:
        return None
    numeric_id = match.group(1)
    return CanonicalStop(
        numeric_id=numeric_id,
        legacy_ref=trimmed,
        graph_ref=graph_stop_ref(numeric_id),
        original=original,
        format=StopFormat.LEGACY,
    )


def _match_stop_area(trimmed: str, original: str) -> CanonicalStop | None:
    match = GRAPH_STOP_AREA_PATTERN.match(trimmed)
    if not match:
        return None
    numeric_id = match.group(1)
    return CanonicalStop(
        numeric_id=numeric_id,
        legacy_ref=legacy_stop_ref(numeric_id),
        graph_ref=graph_stop_ref(numeric_id),
        original=original,
        format=StopFormat.STOP_AREA,
        area_ref=trimmed,
    )


def _match_stop_point(trimmed: str, original: str) -> CanonicalStop | None:
    match = GRAPH_STOP_POINT_PATTERN.match(trimmed)
    if not match:
        return None
    suffix = match.group(1)
    if suffix.startswith(MONOMODAL_PREFIX):
        numeric_id = suffix.removeprefix(MONOMODAL_PREFIX)
        stop_format = StopFormat.MONOMODAL_STOP_POINT
    else:
        numeric_id = suffix
        stop_format = StopFormat.STOP_POINT
    return CanonicalStop(
        numeric_id=numeric_id,
        legacy_ref=legacy_stop_ref(numeric_id),
        graph_ref=trimmed,
        original=original,
        format=stop_format,
    )


def _match_monomodal(trimmed: str, original: str) -> CanonicalStop | None:
    match = MONOMODAL_STOP_PATTERN.match(trimmed)
    if not match:
        return None
    numeric_id = match.group(1)
    return CanonicalStop(
        numeric_id=numeric_id,
        legacy_ref=legacy_stop_ref(numeric_id),
        graph_ref=graph_stop_ref(trimmed),
        original=original,
        format=StopFormat.MONOMODAL,
    )


def _match_numeric(trimmed: str, original: str) -> CanonicalStop | None:
    if not NUMERIC_STOP_PATTERN.match(trimmed):
        return None
    return CanonicalStop(
        numeric_id=trimmed,
        legacy_ref=legacy_stop_ref(trimmed),
        graph_ref=graph_stop_ref(trimmed),
        original=original,
        format=StopFormat.NUMERIC,
    )


_STOP_MATCHERS: tuple[Callable[[str, str], CanonicalStop | None], ...] = (
    _match_legacy,
    _match_stop_area,
    _match_stop_point,
    _match_monomodal,
    _match_numeric,
)


def extract_numeric_stop_id(stop_ref: str) -> str:
    """Extract the numeric id from any stop reference.

    Falls back to the first run of digits in the string, then to the
    reference itself.

    Examples:
        "STIF:StopPoint:Q:22089:" -> "22089"
        "stop_area:IDFM:71264" -> "71264"
        "unknown:format" -> "unknown:format"
    """
    return to_canonical_stop(stop_ref).numeric_id


def to_canonical_stop(stop_ref: str) -> CanonicalStop:
    """Convert a stop reference in any supported encoding to its canonical form.

    Never raises: unrecognized input degrades to a best-effort record.
    """
    trimmed = stop_ref.strip()

    for matcher in _STOP_MATCHERS:
        canonical = matcher(trimmed, stop_ref)
        if canonical is not None:
            return canonical

    # A legacy envelope around a non-numeric id unwraps to that id
    envelope = LEGACY_STOP_ENVELOPE_PATTERN.match(trimmed)
    candidate = envelope.group(1) if envelope else trimmed
    digits = ANY_DIGITS_PATTERN.search(candidate)
    numeric_id = digits.group(0) if digits else candidate
    return CanonicalStop(
        numeric_id=numeric_id,
        legacy_ref=legacy_stop_ref(numeric_id),
        graph_ref=graph_stop_ref(numeric_id),
        original=stop_ref,
        format=StopFormat.FALLBACK,
    )


def build_stop_monitoring_ref(stop: CanonicalStop) -> str:
    """Identifier to send as MonitoringRef for a stop.

    Monomodal stop places are only known to stop monitoring under their
    graph ref; everything else is queried with the legacy ref.
    """
    if stop.is_monomodal:
        return stop.graph_ref
    return stop.legacy_ref


def strip_stop_point_prefix(stop_ref: str) -> str:
    """Drop the "stop_point:IDFM:" prefix from a stop point ref.

    Examples:
        "stop_point:IDFM:monomodalStopPlace:47918" -> "monomodalStopPlace:47918"
        "stop_point:IDFM:22089" -> "22089"
    """
    _, separator, tail = stop_ref.partition(GRAPH_STOP_POINT_PREFIX)
    return tail if separator and tail else stop_ref
