"""Risk classifier - maps a balance projection to a risk tier and recommendations"""

from dataclasses import dataclass
from typing import Optional, Tuple

from finance_advisor.domain.models import (
    FinancialSnapshot,
    ProjectionResult,
    RiskAssessment,
    RiskLevel,
)

LOW_SURPLUS_THRESHOLD_CENTS = 50_000  # 500.00 per month
HIGH_RISK_MAX_MONTH = 3
MEDIUM_RISK_MAX_MONTH = 6


@dataclass(frozen=True)
class RecommendationTable:
    """Ordered recommendation texts per risk tier"""

    low: Tuple[str, ...]
    medium: Tuple[str, ...]
    high: Tuple[str, ...]

    def for_level(self, level: RiskLevel) -> Tuple[str, ...]:
        return {
            RiskLevel.LOW: self.low,
            RiskLevel.MEDIUM: self.medium,
            RiskLevel.HIGH: self.high,
        }[level]


DEFAULT_RECOMMENDATIONS = RecommendationTable(
    low=(
        "Keep your spending under control",
        "Consider raising your savings goal",
        "Explore investment options",
    ),
    medium=(
        "Monitor your spending more closely",
        "Build an emergency fund",
        "Review your budget every month",
    ),
    high=(
        "Cut non-essential spending immediately",
        "Consider an extra source of income",
        "Avoid installment purchases and new financing",
    ),
)


def determine_risk_level(
    insolvency_month: Optional[int],
    monthly_surplus_cents: int,
    low_surplus_threshold_cents: int = LOW_SURPLUS_THRESHOLD_CENTS,
    high_risk_max_month: int = HIGH_RISK_MAX_MONTH,
    medium_risk_max_month: int = MEDIUM_RISK_MAX_MONTH,
) -> RiskLevel:
    """
    Map insolvency proximity and current surplus to a risk tier.

    Rules (first match wins):
    - Insolvent within 3 months: high
    - Insolvent within 6 months: medium
    - Monthly surplus below 500.00: medium
    - Otherwise: low

    The surplus rule also covers insolvency beyond month 6, so a thin
    surplus that runs out late in the horizon is never reported as low.
    """
    if insolvency_month is not None and insolvency_month <= high_risk_max_month:
        return RiskLevel.HIGH
    elif insolvency_month is not None and insolvency_month <= medium_risk_max_month:
        return RiskLevel.MEDIUM
    elif monthly_surplus_cents < low_surplus_threshold_cents:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW


def classify_risk(
    snapshot: FinancialSnapshot,
    projection: ProjectionResult,
    recommendations: RecommendationTable = DEFAULT_RECOMMENDATIONS,
    low_surplus_threshold_cents: int = LOW_SURPLUS_THRESHOLD_CENTS,
    high_risk_max_month: int = HIGH_RISK_MAX_MONTH,
    medium_risk_max_month: int = MEDIUM_RISK_MAX_MONTH,
) -> RiskAssessment:
    """
    Main entry point: classify a projection into a RiskAssessment.

    Returns the tier, the projection it was derived from and the tier's
    recommendation list from the injected table.
    """
    level = determine_risk_level(
        projection.insolvency_month,
        snapshot.monthly_surplus_cents,
        low_surplus_threshold_cents=low_surplus_threshold_cents,
        high_risk_max_month=high_risk_max_month,
        medium_risk_max_month=medium_risk_max_month,
    )

    return RiskAssessment(
        level=level,
        projection=projection,
        recommendations=recommendations.for_level(level),
    )
