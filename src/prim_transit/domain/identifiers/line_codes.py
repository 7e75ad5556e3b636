"""Line code extraction from any line reference encoding."""

from prim_transit.domain.identifiers.formats import (
    EMBEDDED_LINE_CODE_PATTERN,
    GRAPH_LINE_PATTERN,
    LEGACY_LINE_PATTERN,
    LINE_CODE_PATTERN,
)
from prim_transit.domain.models.canonical_line import LineFormat


def is_graph_line_ref(line_ref: str) -> bool:
    return GRAPH_LINE_PATTERN.match(line_ref) is not None


def is_legacy_line_ref(line_ref: str) -> bool:
    return LEGACY_LINE_PATTERN.match(line_ref) is not None


def is_line_code(line_ref: str) -> bool:
    return LINE_CODE_PATTERN.match(line_ref) is not None


def detect_line_code(line_ref: str) -> tuple[str, LineFormat] | None:
    """Find the line code and the encoding it was found in, in precedence order."""
    match = GRAPH_LINE_PATTERN.match(line_ref)
    if match:
        return match.group(1), LineFormat.GRAPH

    match = LEGACY_LINE_PATTERN.match(line_ref)
    if match:
        return match.group(1), LineFormat.LEGACY

    if LINE_CODE_PATTERN.match(line_ref):
        return line_ref, LineFormat.CODE

    match = EMBEDDED_LINE_CODE_PATTERN.search(line_ref)
    if match:
        return match.group(0), LineFormat.EMBEDDED

    return None


def extract_line_code(line_ref: str) -> str | None:
    """Extract the line code from any line reference.

    Examples:
        "line:IDFM:C01371" -> "C01371"
        "STIF:Line::C01371:" -> "C01371"
        "some:prefix:C01371:suffix" -> "C01371"
        "12345" -> None
    """
    detected = detect_line_code(line_ref)
    return detected[0] if detected else None
