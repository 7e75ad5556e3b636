"""Late-chance estimation from the traffic status of favourite lines."""

from collections.abc import Iterable

from prim_transit.domain.models import (
    AffectedFavoriteLine,
    DisruptionSeverity,
    LateChanceResult,
    LineStatus,
    RiskLevel,
    TraficInfo,
)

INTERRUPTED_LINE_RISK = 40
CRITICAL_DISRUPTION_RISK = 30
WARNING_DISRUPTION_RISK = 20
MINOR_DISRUPTION_RISK = 5
MAX_PERCENTAGE = 95  # never certain

MODERATE_THRESHOLD = 20
HIGH_THRESHOLD = 50
CRITICAL_THRESHOLD = 75

IMPACT_EXCERPT_LENGTH = 50
RER_B_CODE = "B"

NO_FAVORITES_RECOMMENDATION = "Ajoutez des lignes favorites pour voir votre risque de retard."


def risk_level(percentage: int) -> RiskLevel:
    """Risk bucket for a late-chance percentage."""
    if percentage < MODERATE_THRESHOLD:
        return RiskLevel.LOW
    if percentage < HIGH_THRESHOLD:
        return RiskLevel.MODERATE
    if percentage < CRITICAL_THRESHOLD:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


def _assess_line(info: TraficInfo) -> tuple[int, AffectedFavoriteLine]:
    """Risk contribution and summary of a line that is not running normally."""
    critical = [d for d in info.disruptions if d.severity == DisruptionSeverity.CRITICAL]
    warning = [d for d in info.disruptions if d.severity == DisruptionSeverity.WARNING]

    if info.status == LineStatus.INTERROMPU:
        risk = INTERRUPTED_LINE_RISK
        severity = DisruptionSeverity.CRITICAL
        impact = "Trafic interrompu"
    elif critical:
        risk = CRITICAL_DISRUPTION_RISK
        severity = DisruptionSeverity.CRITICAL
        impact = critical[0].message[:IMPACT_EXCERPT_LENGTH] + "..."
    elif warning:
        risk = WARNING_DISRUPTION_RISK
        severity = DisruptionSeverity.WARNING
        impact = warning[0].message[:IMPACT_EXCERPT_LENGTH] + "..."
    else:
        risk = MINOR_DISRUPTION_RISK
        severity = DisruptionSeverity.INFO
        impact = "Perturbation mineure"

    return risk, AffectedFavoriteLine(
        line_id=info.line_id,
        line_name=info.line_code,
        severity=severity,
        impact=impact,
        status=info.status,
    )


def recommendation_for(risk: RiskLevel, affected: list[AffectedFavoriteLine]) -> str:
    """French advice shown next to the estimate."""
    if risk == RiskLevel.LOW:
        return "Trafic normal sur vos lignes. Bon voyage !"
    if risk == RiskLevel.MODERATE:
        return "Quelques perturbations mineures. Prévoyez quelques minutes supplémentaires."
    if risk == RiskLevel.HIGH:
        interrupted = sum(1 for line in affected if line.status == LineStatus.INTERROMPU)
        if interrupted:
            return (
                f"Attention : {interrupted} ligne(s) interrompue(s). "
                "Cherchez un itinéraire alternatif."
            )
        return "Perturbations significatives. Anticipez des retards importants."
    return "Risque critique de retard. Envisagez un mode de transport alternatif."


def humor_quote_for(risk: RiskLevel, affected: list[AffectedFavoriteLine]) -> str:
    """Light-hearted comment on the estimate."""
    has_rer_b = any(line.line_name == RER_B_CODE for line in affected)

    if risk == RiskLevel.LOW:
        return "Miracle : tout fonctionne. Méfiance."
    if risk == RiskLevel.MODERATE:
        return "Pas encore de quoi perdre son sang-froid."
    if risk == RiskLevel.HIGH:
        if has_rer_b:
            return "Oui, encore le RER B. Non, personne n'est surpris."
        return 'Temps de réviser votre playlist "coincé dans le métro".'
    if has_rer_b:
        return "Le RER B a décidé de prendre sa journée."
    return "Aujourd'hui, c'est vélo."


class LateChanceService:
    """Estimates the chance of being late on a set of favourite lines."""

    def calculate(
        self,
        favorite_line_codes: Iterable[str],
        traffic: list[TraficInfo],
        humor: bool = False,
    ) -> LateChanceResult:
        """Combine the traffic status of favourite lines into a percentage.

        Args:
            favorite_line_codes: Short codes of the favourite lines ("1", "A", "T3a").
            traffic: Current traffic status, as returned by the transit client.
            humor: Attach a humorous quote to the result.

        Returns:
            The estimate, capped below certainty.
        """
        favorites = set(favorite_line_codes)
        if not favorites:
            return LateChanceResult(
                percentage=0,
                risk=RiskLevel.LOW,
                recommendation=NO_FAVORITES_RECOMMENDATION,
            )

        total = 0
        affected: list[AffectedFavoriteLine] = []
        for info in traffic:
            if info.line_code not in favorites or info.status == LineStatus.NORMAL:
                continue
            contribution, line = _assess_line(info)
            total += contribution
            affected.append(line)

        percentage = min(total, MAX_PERCENTAGE)
        risk = risk_level(percentage)

        return LateChanceResult(
            percentage=percentage,
            risk=risk,
            recommendation=recommendation_for(risk, affected),
            affected_lines=affected,
            humor_quote=humor_quote_for(risk, affected) if humor else None,
        )
