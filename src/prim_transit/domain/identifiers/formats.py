"""Identifier encodings used across the PRIM endpoints.

Stops:

    legacy (SIRI Lite)    STIF:StopPoint:Q:{id}:                   STIF:StopPoint:Q:22089:
    graph (Navitia)       stop_point:IDFM:{id}                     stop_point:IDFM:22089
    graph, monomodal      stop_point:IDFM:monomodalStopPlace:{id}  stop_point:IDFM:monomodalStopPlace:47918
    graph, area           stop_area:IDFM:{id}                      stop_area:IDFM:71264
    short                 {id}                                     22089

Lines:

    legacy (SIRI Lite)    STIF:Line::{code}:                       STIF:Line::C01371:
    graph (Navitia)       line:IDFM:{code}                         line:IDFM:C01371
    short                 {code}                                   C01371
"""

import re

LEGACY_STOP_PATTERN = re.compile(r"^STIF:StopPoint:Q:(\d+):$")
LEGACY_STOP_ENVELOPE_PATTERN = re.compile(r"^STIF:StopPoint:Q:(.*):$")
GRAPH_STOP_POINT_PATTERN = re.compile(r"^stop_point:IDFM:(\d+|monomodalStopPlace:\d+)$")
GRAPH_STOP_AREA_PATTERN = re.compile(r"^stop_area:IDFM:(\d+)$")
MONOMODAL_STOP_PATTERN = re.compile(r"^monomodalStopPlace:(\d+)$")
NUMERIC_STOP_PATTERN = re.compile(r"^\d+$")
ANY_DIGITS_PATTERN = re.compile(r"\d+")

GRAPH_LINE_PATTERN = re.compile(r"^line:IDFM:([A-Z]\d+)$")
LEGACY_LINE_PATTERN = re.compile(r"^STIF:Line::([A-Z]\d+):$")
LINE_CODE_PATTERN = re.compile(r"^[A-Z]\d+$")
EMBEDDED_LINE_CODE_PATTERN = re.compile(r"[A-Z]\d+")

MONOMODAL_PREFIX = "monomodalStopPlace:"
GRAPH_STOP_POINT_PREFIX = "stop_point:IDFM:"


def legacy_stop_ref(numeric_id: str) -> str:
    return f"STIF:StopPoint:Q:{numeric_id}:"


def graph_stop_ref(stop_id: str) -> str:
    return f"{GRAPH_STOP_POINT_PREFIX}{stop_id}"


def legacy_line_ref(code: str) -> str:
    return f"STIF:Line::{code}:"


def graph_line_ref(code: str) -> str:
    return f"line:IDFM:{code}"
