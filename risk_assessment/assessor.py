from __future__ import annotations

from typing import Optional

from contracts.schemas import (
    CityOverrideRecord,
    CulturalSensitivityRecord,
    ProductionConfiguration,
    RiskAssessment,
    RiskLevel,
)

# Fixed tier cut-offs on the raw factor count (out of five possible factors).
HIGH_RISK_MIN_FACTORS = 4
MEDIUM_RISK_MIN_FACTORS = 2

_SENSITIVE_CULTURAL_LEVELS = frozenset({RiskLevel.MEDIUM, RiskLevel.HIGH})


def classify_risk(factor_count: int) -> RiskLevel:
    if factor_count < 0:
        raise ValueError("factor_count must be >= 0")
    if factor_count >= HIGH_RISK_MIN_FACTORS:
        return RiskLevel.HIGH
    if factor_count >= MEDIUM_RISK_MIN_FACTORS:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def assess_risk(
    config: ProductionConfiguration,
    cultural: Optional[CulturalSensitivityRecord] = None,
    city_override: Optional[CityOverrideRecord] = None,
) -> RiskAssessment:
    """
    Collect risk factors with their paired recommendation, in fixed order:
      - drones
      - minors
      - foreign crew
      - cultural sensitivity at MEDIUM or HIGH
      - city override with restrictions
    """
    pairs: list[tuple[str, str]] = []

    if config.has_drones:
        pairs.append(
            ("Drone operations increase regulatory complexity", "Hire certified drone operator with local experience")
        )
    if config.has_minors:
        pairs.append(
            ("Working with minors requires additional compliance", "Ensure welfare worker/studio teacher is booked")
        )
    if config.has_foreign_crew:
        pairs.append(("Foreign crew requires visa processing time", "Start visa applications immediately"))

    if cultural is not None and cultural.risk_level in _SENSITIVE_CULTURAL_LEVELS:
        pairs.append(("Location has cultural/religious sensitivities", "Hire local cultural advisor/fixer"))

    if (
        city_override is not None
        and city_override.country == config.country_code
        and city_override.restrictions
    ):
        city = config.city_name or city_override.city
        pairs.append((f"{city} has specific filming restrictions", "Contact local film commission early"))

    return RiskAssessment(
        risk_factors=tuple(f for f, _ in pairs),
        recommendations=tuple(r for _, r in pairs),
        overall_risk=classify_risk(len(pairs)),
    )
