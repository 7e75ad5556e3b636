"""Transport mode and display name resolution from IDFM line codes.

Codes follow upstream's numbering scheme:

    Metro       C01371..C01384 (lines 1-14), C01386 (3bis), C01387 (7bis)
    Tramway     C01389.. (T1, T2, T3...), T4-T13 on scattered codes
    RER         C01742 A, C01743 B, C01727 C, C01728 D, C01729 E
    Transilien  C02xxx
    Bus         C01xxx otherwise
"""

import re

from prim_transit.domain.identifiers.line_codes import extract_line_code
from prim_transit.domain.models.transport_mode import TransportMode

METRO_PREFIX = "C013"
RER_PREFIX = "C017"
TRANSILIEN_PREFIX = "C02"

METRO_FIRST_SUFFIX = 71
METRO_LAST_SUFFIX = 84
METRO_3BIS_SUFFIX = 86
METRO_7BIS_SUFFIX = 87
TRAMWAY_SUFFIX_OFFSET = 88
TRAMWAY_LAST_SUFFIX = 99
BUS_MIN_NUMBER = 20

# T4-T13 do not follow the C013 continuation; checked before the bus rule
# since several of them look like C01 bus codes.
TRAMWAY_CODES: dict[str, str] = {
    "C01843": "T4",
    "C02317": "T5",
    "C01394": "T6",
    "C01774": "T7",
    "C01795": "T8",
    "C02344": "T9",
    "C02528": "T10",
    "C01999": "T11",
    "C02529": "T12",
    "C02530": "T13",
}

RER_LETTERS: dict[str, str] = {
    "42": "A",
    "43": "B",
    "27": "C",
    "28": "D",
    "29": "E",
}

_BUS_CODE_PATTERN = re.compile(r"^C01(\d{3,4})$")


def _parse_suffix(code: str, prefix: str) -> int | None:
    """Numeric part following a prefix, parsed like a leading-digits integer."""
    match = re.match(r"\d+", code[len(prefix) :])
    return int(match.group(0)) if match else None


def detect_transport_mode(line_code: str) -> TransportMode:
    """Classify a line code into a transport mode. Defaults to Bus."""
    if not line_code:
        return TransportMode.BUS

    if line_code in TRAMWAY_CODES:
        return TransportMode.TRAMWAY

    if line_code.startswith(METRO_PREFIX):
        suffix = _parse_suffix(line_code, METRO_PREFIX)
        if suffix is not None:
            if METRO_FIRST_SUFFIX <= suffix <= METRO_LAST_SUFFIX or suffix in (
                METRO_3BIS_SUFFIX,
                METRO_7BIS_SUFFIX,
            ):
                return TransportMode.METRO
            if suffix > TRAMWAY_SUFFIX_OFFSET:
                return TransportMode.TRAMWAY

    if line_code.startswith(RER_PREFIX) and line_code[len(RER_PREFIX) :] in RER_LETTERS:
        return TransportMode.RER

    if line_code.startswith(TRANSILIEN_PREFIX):
        return TransportMode.TRANSILIEN

    return TransportMode.BUS


def extract_line_display_name(line_ref: str, line_code: str | None = None) -> str:
    """Human-readable name for a line ("Métro 1", "RER A", "T4", "Bus 147").

    Uses line_code when given, otherwise extracts it from line_ref. Returns
    the code unchanged when no rule applies, and line_ref when no code can
    be extracted.
    """
    code = line_code if line_code is not None else extract_line_code(line_ref)
    if not code:
        return line_ref

    if code in TRAMWAY_CODES:
        return TRAMWAY_CODES[code]

    if code.startswith(METRO_PREFIX):
        suffix = _parse_suffix(code, METRO_PREFIX)
        if suffix is not None:
            if METRO_FIRST_SUFFIX <= suffix <= METRO_LAST_SUFFIX:
                return f"Métro {suffix - (METRO_FIRST_SUFFIX - 1)}"
            if suffix == METRO_3BIS_SUFFIX:
                return "Métro 3bis"
            if suffix == METRO_7BIS_SUFFIX:
                return "Métro 7bis"
            if TRAMWAY_SUFFIX_OFFSET < suffix <= TRAMWAY_LAST_SUFFIX:
                return f"T{suffix - TRAMWAY_SUFFIX_OFFSET}"

    if code.startswith(RER_PREFIX):
        letter = RER_LETTERS.get(code[len(RER_PREFIX) :])
        if letter:
            return f"RER {letter}"

    # No friendly name without the upstream short name.
    if code.startswith(TRANSILIEN_PREFIX):
        return code

    bus_match = _BUS_CODE_PATTERN.match(code)
    if bus_match:
        bus_number = int(bus_match.group(1))
        if bus_number >= BUS_MIN_NUMBER:
            return f"Bus {bus_number}"

    return code
