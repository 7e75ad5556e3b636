"""Identifier canonicalization and line naming."""

from prim_transit.domain.identifiers.display_names import (
    detect_transport_mode,
    extract_line_display_name,
)
from prim_transit.domain.identifiers.line_codes import (
    extract_line_code,
    is_graph_line_ref,
    is_legacy_line_ref,
    is_line_code,
)
from prim_transit.domain.identifiers.line_colors import DEFAULT_LINE_COLOR, get_line_color
from prim_transit.domain.identifiers.lines import to_canonical_line
from prim_transit.domain.identifiers.stops import (
    build_stop_monitoring_ref,
    extract_numeric_stop_id,
    is_graph_stop_ref,
    is_legacy_stop_ref,
    is_monomodal_stop_ref,
    is_stop_area_ref,
    strip_stop_point_prefix,
    to_canonical_stop,
)

__all__ = [
    "DEFAULT_LINE_COLOR",
    "build_stop_monitoring_ref",
    "detect_transport_mode",
    "extract_line_code",
    "extract_line_display_name",
    "extract_numeric_stop_id",
    "get_line_color",
    "is_graph_line_ref",
    "is_graph_stop_ref",
    "is_legacy_line_ref",
    "is_legacy_stop_ref",
    "is_line_code",
    "is_monomodal_stop_ref",
    "is_stop_area_ref",
    "strip_stop_point_prefix",
    "to_canonical_line",
    "to_canonical_stop",
]
