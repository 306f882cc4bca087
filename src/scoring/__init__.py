# src/scoring/__init__.py
"""Token quality scoring module."""

from .models import (
    FilteredTokens,
    NewbieAnalysis,
    PairSnapshot,
    QualityCategory,
    QualityRisk,
    Recommendation,
    TokenQuality,
)
from .token_quality import TokenQualityAnalyzer

__all__ = [
    "FilteredTokens",
    "NewbieAnalysis",
    "PairSnapshot",
    "QualityCategory",
    "QualityRisk",
    "Recommendation",
    "TokenQuality",
    "TokenQualityAnalyzer",
]
