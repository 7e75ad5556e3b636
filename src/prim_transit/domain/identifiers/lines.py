"""Line identifier canonicalization."""

from prim_transit.domain.identifiers.display_names import (
    detect_transport_mode,
    extract_line_display_name,
)
from prim_transit.domain.identifiers.formats import graph_line_ref, legacy_line_ref
from prim_transit.domain.identifiers.line_codes import detect_line_code
from prim_transit.domain.models.canonical_line import CanonicalLine, LineFormat
from prim_transit.domain.models.transport_mode import TransportMode


def to_canonical_line(line_ref: str) -> CanonicalLine:
    """Convert a line reference in any supported encoding to its canonical form.

    Never raises: input without a recognizable code becomes a Bus line named
    after the input itself.
    """
    trimmed = line_ref.strip()

    detected = detect_line_code(trimmed)
    if detected is None:
        return CanonicalLine(
            code=trimmed,
            graph_ref=graph_line_ref(trimmed),
            legacy_ref=legacy_line_ref(trimmed),
            display_name=trimmed,
            mode=TransportMode.BUS,
            original=line_ref,
            format=LineFormat.FALLBACK,
        )

    code, line_format = detected
    return CanonicalLine(
        code=code,
        graph_ref=graph_line_ref(code),
        legacy_ref=legacy_line_ref(code),
        display_name=extract_line_display_name(trimmed, code),
        mode=detect_transport_mode(code),
        original=line_ref,
        format=line_format,
    )
