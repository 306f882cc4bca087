"""Risk scoring module for token safety assessment."""

from risk.models import FactorCategory, RiskFactor, RiskLevel, RiskScore, TokenRiskData
from risk.risk_scorer import RiskScorer, calculate_risk_score
from risk.settings import RiskSettings, RiskWeights

__all__ = [
    "FactorCategory",
    "RiskFactor",
    "RiskLevel",
    "RiskScore",
    "RiskScorer",
    "RiskSettings",
    "RiskWeights",
    "TokenRiskData",
    "calculate_risk_score",
]
