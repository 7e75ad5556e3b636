"""Tests for line display names, transport modes and colours."""

import pytest

from prim_transit.domain.identifiers import (
    DEFAULT_LINE_COLOR,
    detect_transport_mode,
    extract_line_display_name,
    get_line_color,
)
from prim_transit.domain.models import TransportMode


class TestExtractLineDisplayName:
    """Tests for extract_line_display_name."""

    @pytest.mark.parametrize(
        ("line_ref", "expected"),
        [
            ("line:IDFM:C01371", "Métro 1"),
            ("line:IDFM:C01384", "Métro 14"),
            ("STIF:Line::C01386:", "Métro 3bis"),
            ("C01387", "Métro 7bis"),
            ("C01389", "T1"),
            ("C01390", "T2"),
            ("C01391", "T3"),
            ("C01843", "T4"),
            ("C02317", "T5"),
            ("C02530", "T13"),
            ("line:IDFM:C01742", "RER A"),
            ("C01743", "RER B"),
            ("C01727", "RER C"),
            ("C01728", "RER D"),
            ("C01729", "RER E"),
            ("C01147", "Bus 147"),
        ],
    )
    def test_known_codes(self, line_ref: str, expected: str) -> None:
        """Given a known line ref, when resolving its name, then the friendly name is returned."""
        assert extract_line_display_name(line_ref) == expected

    def test_transilien_code_then_code_itself(self) -> None:
        """Given a Transilien code, when resolving its name, then the code is kept unchanged."""
        assert extract_line_display_name("line:IDFM:C02711") == "C02711"

    def test_low_bus_number_then_code_itself(self) -> None:
        """Given a C01 code below the bus range, when resolving its name, then the code is kept."""
        assert extract_line_display_name("C01015") == "C01015"

    def test_no_code_then_ref_itself(self) -> None:
        """Given a ref without a line code, when resolving its name, then the ref is returned."""
        assert extract_line_display_name("12345") == "12345"

    def test_explicit_code_then_used_over_ref(self) -> None:
        """Given an explicit code, when resolving the name, then the code wins over the ref."""
        assert extract_line_display_name("anything", "C01742") == "RER A"


class TestDetectTransportMode:
    """Tests for detect_transport_mode."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("C01371", TransportMode.METRO),
            ("C01384", TransportMode.METRO),
            ("C01386", TransportMode.METRO),
            ("C01387", TransportMode.METRO),
            ("C01389", TransportMode.TRAMWAY),
            ("C01843", TransportMode.TRAMWAY),
            ("C02344", TransportMode.TRAMWAY),
            ("C01742", TransportMode.RER),
            ("C01729", TransportMode.RER),
            ("C02711", TransportMode.TRANSILIEN),
            ("C01147", TransportMode.BUS),
            ("C01385", TransportMode.BUS),
            ("C01388", TransportMode.BUS),
            ("", TransportMode.BUS),
            ("garbage", TransportMode.BUS),
        ],
    )
    def test_modes(self, code: str, expected: TransportMode) -> None:
        """Given a line code, when detecting its mode, then the expected mode is returned."""
        assert detect_transport_mode(code) == expected

    @pytest.mark.parametrize("code", ["C01371", "C01843", "C01742", "C02711", "C01147", "X9"])
    def test_repeated_calls_then_same_mode_from_enumeration(self, code: str) -> None:
        """Given any code, when detecting twice, then the same enumerated mode is returned."""
        first = detect_transport_mode(code)

        assert detect_transport_mode(code) == first
        assert first in set(TransportMode)


class TestLineColors:
    """Tests for get_line_color."""

    def test_known_short_name_then_official_color(self) -> None:
        """Given a known short name, when looking up its colour, then the palette one is used."""
        assert get_line_color("1") == "#FFCE00"
        assert get_line_color("A") == "#E3051C"

    def test_unknown_short_name_then_gray(self) -> None:
        """Given an unknown short name, when looking up its colour, then gray is returned."""
        assert get_line_color("999") == DEFAULT_LINE_COLOR == "#808080"
