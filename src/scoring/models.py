# src/scoring/models.py
"""Data models for token quality scoring."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class QualityCategory(str, Enum):
    """Quality bucket for a token pair."""

    DIAMOND = "DIAMOND"
    SAFE = "SAFE"
    RISKY = "RISKY"
    SCAM = "SCAM"


class QualityRisk(str, Enum):
    """Plain risk label shown to new traders."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    EXTREME = "EXTREME"


class Recommendation(str, Enum):
    """Suggested action for a token."""

    BUY = "BUY"
    HOLD = "HOLD"
    SELL = "SELL"
    AVOID = "AVOID"


@dataclass
class PairSnapshot:
    """Market snapshot of a DEX trading pair.

    Attributes:
        pair_address: Pair identifier on the DEX.
        base_symbol: Symbol of the base token.
        price_usd: Current price in USD.
        liquidity_usd: Pool liquidity in USD.
        volume_24h: 24h trading volume in USD.
        price_change_24h: 24h price change in percent.
        fdv: Fully diluted valuation in USD.
        pair_created_at: When the pair was created.
    """

    pair_address: str
    base_symbol: str
    price_usd: float
    liquidity_usd: float
    volume_24h: float
    price_change_24h: float
    fdv: float
    pair_created_at: datetime


@dataclass
class TokenQuality:
    """Quality assessment of a pair.

    Attributes:
        score: Quality score from 0-100.
        category: Quality bucket.
        risk_level: Plain risk label.
        reasons: Positive findings.
        warnings: Negative findings.
        recommendation: Suggested action.
        confidence: Confidence in the recommendation (0-1).
    """

    score: int
    category: QualityCategory
    risk_level: QualityRisk
    reasons: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    recommendation: Recommendation = Recommendation.AVOID
    confidence: float = 0.0


@dataclass
class NewbieAnalysis:
    """Plain-language explanation of a quality assessment."""

    simple_explanation: str
    should_i_buy: str  # YES, NO or MAYBE
    why_reason: str
    risk_in_plain_english: str
    what_to_watch: list[str]
    red_flags: list[str]
    green_flags: list[str]


@dataclass
class FilteredTokens:
    """Pairs bucketed by quality."""

    diamonds: list[PairSnapshot] = field(default_factory=list)
    safe: list[PairSnapshot] = field(default_factory=list)
    trending: list[PairSnapshot] = field(default_factory=list)
    avoid: list[PairSnapshot] = field(default_factory=list)
