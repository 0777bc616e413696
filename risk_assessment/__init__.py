from .assessor import HIGH_RISK_MIN_FACTORS, MEDIUM_RISK_MIN_FACTORS, assess_risk, classify_risk

__all__ = [
    "HIGH_RISK_MIN_FACTORS",
    "MEDIUM_RISK_MIN_FACTORS",
    "assess_risk",
    "classify_risk",
]
