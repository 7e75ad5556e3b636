"""Tests for the late-chance service."""

from datetime import UTC, datetime

import pytest

from prim_transit.application.services import LateChanceService
from prim_transit.application.services.late_chance_service import (
    NO_FAVORITES_RECOMMENDATION,
    risk_level,
)
from prim_transit.domain.models import (
    DisruptionSeverity,
    LineStatus,
    RiskLevel,
    SimplifiedDisruption,
    TraficInfo,
)

START = datetime(2024, 1, 15, 7, 0, tzinfo=UTC)


def _disruption(
    severity: DisruptionSeverity, message: str = "Incident voyageur"
) -> SimplifiedDisruption:
    return SimplifiedDisruption(
        id="d1",
        title="Information trafic",
        message=message,
        severity=severity,
        start_time=START,
    )


def _line(
    code: str,
    status: LineStatus,
    *disruptions: SimplifiedDisruption,
) -> TraficInfo:
    return TraficInfo(
        line_id=f"line:IDFM:{code}",
        line_name=code,
        line_code=code,
        line_color="#808080",
        status=status,
        disruptions=list(disruptions),
    )


class TestRiskLevel:
    """Tests for risk buckets."""

    @pytest.mark.parametrize(
        ("percentage", "expected"),
        [
            (0, RiskLevel.LOW),
            (19, RiskLevel.LOW),
            (20, RiskLevel.MODERATE),
            (49, RiskLevel.MODERATE),
            (50, RiskLevel.HIGH),
            (74, RiskLevel.HIGH),
            (75, RiskLevel.CRITICAL),
            (95, RiskLevel.CRITICAL),
        ],
    )
    def test_thresholds(self, percentage: int, expected: RiskLevel) -> None:
        """Given a percentage, when bucketing, then the threshold boundaries hold."""
        assert risk_level(percentage) == expected


class TestCalculate:
    """Tests for LateChanceService.calculate."""

    def test_no_favorites(self) -> None:
        """Given no favourite lines, when calculating, then the risk is zero."""
        result = LateChanceService().calculate([], [_line("A", LineStatus.INTERROMPU)])

        assert result.percentage == 0
        assert result.risk == RiskLevel.LOW
        assert result.recommendation == NO_FAVORITES_RECOMMENDATION
        assert result.affected_lines == []

    def test_normal_and_unfavored_lines_ignored(self) -> None:
        """Given disruptions on other lines only, when calculating, then the risk is zero."""
        traffic = [
            _line("1", LineStatus.NORMAL),
            _line("A", LineStatus.INTERROMPU),
        ]

        result = LateChanceService().calculate(["1"], traffic)

        assert result.percentage == 0
        assert result.risk == RiskLevel.LOW
        assert result.recommendation == "Trafic normal sur vos lignes. Bon voyage !"

    def test_interrupted_line(self) -> None:
        """Given an interrupted favourite line, when calculating, then it adds 40."""
        traffic = [_line("A", LineStatus.INTERROMPU, _disruption(DisruptionSeverity.CRITICAL))]

        result = LateChanceService().calculate(["A"], traffic)

        assert result.percentage == 40
        assert result.risk == RiskLevel.MODERATE
        affected = result.affected_lines[0]
        assert affected.line_name == "A"
        assert affected.impact == "Trafic interrompu"
        assert affected.severity == DisruptionSeverity.CRITICAL

    def test_warning_disruption_impact_excerpt(self) -> None:
        """Given a perturbed line with a warning, when calculating, then the message is cut."""
        message = "x" * 80
        disruption = _disruption(DisruptionSeverity.WARNING, message)
        traffic = [_line("1", LineStatus.PERTURBE, disruption)]

        result = LateChanceService().calculate(["1"], traffic)

        assert result.percentage == 20
        assert result.affected_lines[0].impact == "x" * 50 + "..."
        assert result.affected_lines[0].severity == DisruptionSeverity.WARNING

    def test_critical_disruption_on_perturbed_line(self) -> None:
        """Given a perturbed line with a critical disruption, when calculating, then it adds 30."""
        traffic = [_line("1", LineStatus.PERTURBE, _disruption(DisruptionSeverity.CRITICAL))]

        result = LateChanceService().calculate(["1"], traffic)

        assert result.percentage == 30

    def test_minor_disruption(self) -> None:
        """Given a perturbed line with only info disruptions, when calculating, then it adds 5."""
        traffic = [_line("1", LineStatus.PERTURBE, _disruption(DisruptionSeverity.INFO))]

        result = LateChanceService().calculate(["1"], traffic)

        assert result.percentage == 5
        assert result.affected_lines[0].impact == "Perturbation mineure"

    def test_contributions_add_up(self) -> None:
        """Given several affected lines, when calculating, then contributions add up."""
        traffic = [_line("A", LineStatus.INTERROMPU), _line("1", LineStatus.PERTURBE)]

        result = LateChanceService().calculate(["A", "1"], traffic)

        assert result.percentage == 45
        assert result.risk == RiskLevel.MODERATE

        traffic.append(_line("B", LineStatus.INTERROMPU))
        result = LateChanceService().calculate(["A", "1", "B"], traffic)

        assert result.percentage == 85
        assert result.risk == RiskLevel.CRITICAL

    def test_high_risk_recommendation(self) -> None:
        """Given one interrupted and one warned line, when calculating, then the risk is high."""
        traffic = [
            _line("A", LineStatus.INTERROMPU),
            _line("1", LineStatus.PERTURBE, _disruption(DisruptionSeverity.WARNING)),
        ]

        result = LateChanceService().calculate(["A", "1"], traffic)

        assert result.percentage == 60
        assert result.risk == RiskLevel.HIGH
        assert result.recommendation.startswith("Attention : 1 ligne(s) interrompue(s).")

    def test_percentage_capped(self) -> None:
        """Given many interrupted lines, when calculating, then the percentage stops at 95."""
        traffic = [_line(code, LineStatus.INTERROMPU) for code in ("A", "B", "C")]

        result = LateChanceService().calculate(["A", "B", "C"], traffic)

        assert result.percentage == 95
        assert result.risk == RiskLevel.CRITICAL

    def test_humor_quote_only_when_requested(self) -> None:
        """Given humor off then on, when calculating, then the quote follows the flag."""
        traffic = [_line("B", LineStatus.INTERROMPU), _line("A", LineStatus.INTERROMPU)]

        plain = LateChanceService().calculate(["A", "B"], traffic)
        funny = LateChanceService().calculate(["A", "B"], traffic, humor=True)

        assert plain.humor_quote is None
        assert funny.humor_quote == "Le RER B a décidé de prendre sa journée."
