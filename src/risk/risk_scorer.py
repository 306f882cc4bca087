"""Weighted multi-factor risk scoring for tokens."""

import math

from models.numbers import format_compact, plain_number
from risk.models import FactorCategory, RiskFactor, RiskLevel, RiskScore, TokenRiskData
from risk.settings import RiskWeights


LP_LOCK = "Liquidity Pool Lock"
OWNERSHIP = "Contract Ownership"
HONEYPOT = "Honeypot Detection"
VERIFICATION = "Contract Verification"
CONCENTRATION = "Holder Concentration"
TAX = "Tax Structure"
LIQUIDITY = "Liquidity Depth"
VOLUME = "Volume Health"
PRICE_STABILITY = "Price Stability"
COMMUNITY = "Community Size"

# Factors scoring below this are reported as issues
LOW_SCORE_THRESHOLD = 50

LEVEL_HEADLINES: dict[RiskLevel, str] = {
    RiskLevel.SAFE: "✅ **SAFE TOKEN**",
    RiskLevel.WARNING: "⚠️ **MODERATE RISK**",
    RiskLevel.DANGER: "🚨 **HIGH RISK**",
    RiskLevel.CRITICAL: "💀 **CRITICAL RISK**",
}

LEVEL_VERDICTS: dict[RiskLevel, str] = {
    RiskLevel.SAFE: (
        "This token appears to have good security practices and healthy "
        "fundamentals. Always DYOR!"
    ),
    RiskLevel.WARNING: (
        "This token has some concerning factors but may still be worth "
        "investigating. Proceed with caution."
    ),
    RiskLevel.DANGER: (
        "This token has multiple red flags. Strongly consider avoiding this investment."
    ),
    RiskLevel.CRITICAL: "This token has severe security issues. AVOID AT ALL COSTS!",
}

LEVEL_RECOMMENDATIONS: dict[RiskLevel, list[str]] = {
    RiskLevel.CRITICAL: [
        "🚨 AVOID THIS TOKEN - Multiple critical security issues detected",
        "💀 High risk of losing your investment",
        "⚠️ Do not invest under any circumstances",
    ],
    RiskLevel.DANGER: [
        "⚠️ Proceed with extreme caution",
        "🔍 Conduct thorough research before investing",
        "💰 Only invest what you can afford to lose",
    ],
    RiskLevel.WARNING: [
        "🔍 Research the specific concerns mentioned",
        "💰 Consider starting with a small investment",
        "📊 Monitor the token closely",
    ],
    RiskLevel.SAFE: [
        "✅ Token appears relatively safe",
        "🔍 Still conduct your own research",
        "💰 Invest responsibly",
    ],
}

FACTOR_RECOMMENDATIONS: dict[str, str] = {
    LP_LOCK: "🔒 LP is not locked - high rug pull risk",
    OWNERSHIP: "👤 Owner can manipulate contract - avoid",
    HONEYPOT: "🍯 Token may be a honeypot - cannot sell",
    VERIFICATION: "📜 Contract is not verified - code cannot be audited",
    CONCENTRATION: "🐋 Top holder concentration too high",
    TAX: "💸 High buy/sell taxes eat into returns",
    LIQUIDITY: "💧 Thin liquidity - large sells will move the price",
    VOLUME: "📉 Low trading volume - exits may be difficult",
    PRICE_STABILITY: "🎢 Extreme price swings in the last 24h",
    COMMUNITY: "👥 Small holder base",
}


class RiskScorer:
    """Computes a weighted 0-100 risk score from token attributes.

    Each of ten factors is scored on a 0-100 scale through a threshold
    ladder. The overall score is the weighted sum divided by the total
    weight, so it only depends on the inputs and the configured weights.

    Attributes:
        weights: Weight of each factor.
    """

    def __init__(self, weights: RiskWeights | None = None):
        """Initialize the scorer.

        Args:
            weights: Factor weights. Defaults to RiskWeights().
        """
        self.weights = weights or RiskWeights()
        self._total_weight = self.weights.total

    @property
    def total_weight(self) -> float:
        """Normalization constant for the weighted sum."""
        return self._total_weight

    def calculate(self, data: TokenRiskData) -> RiskScore:
        """Score a token.

        Args:
            data: Token risk attributes.

        Returns:
            RiskScore with the ten factors, level, summary and recommendations.
        """
        factors = self._evaluate_factors(data)

        weighted = sum(factor.weighted_score for factor in factors)
        overall = _round_half_up(weighted / self._total_weight)
        overall = max(0, min(100, overall))

        level = RiskLevel.from_score(overall)

        return RiskScore(
            overall_score=overall,
            risk_level=level,
            factors=factors,
            summary=_build_summary(overall, level, factors),
            recommendations=_build_recommendations(level, factors),
            color=level.color,
        )

    def _evaluate_factors(self, data: TokenRiskData) -> list[RiskFactor]:
        w = self.weights
        price_sign = "+" if data.price_change_24h > 0 else ""

        if data.lp_locked:
            lp_description = (
                f"LP locked for {plain_number(data.lp_lock_duration or 0)} days "
                f"({plain_number(data.lp_lock_percentage or 0)}% locked)"
            )
        else:
            lp_description = "LP is NOT locked - HIGH RISK"

        if data.owner_can_mint or data.owner_can_pause:
            ownership_description = "Owner can manipulate contract - HIGH RISK"
        else:
            ownership_description = "Contract ownership renounced - SAFE"

        return [
            RiskFactor(
                name=LP_LOCK,
                weight=w.lp_lock,
                score=_lp_lock_score(data),
                description=lp_description,
                category=FactorCategory.SECURITY,
            ),
            RiskFactor(
                name=OWNERSHIP,
                weight=w.ownership,
                score=0 if data.owner_can_mint or data.owner_can_pause else 100,
                description=ownership_description,
                category=FactorCategory.SECURITY,
            ),
            RiskFactor(
                name=HONEYPOT,
                weight=w.honeypot,
                score=0 if data.honeypot_risk else 100,
                description=(
                    "Token may be a honeypot - CANNOT SELL"
                    if data.honeypot_risk
                    else "Token appears sellable - SAFE"
                ),
                category=FactorCategory.SECURITY,
            ),
            RiskFactor(
                name=VERIFICATION,
                weight=w.verification,
                score=100 if data.contract_verified else 0,
                description=(
                    "Contract is verified on blockchain explorer"
                    if data.contract_verified
                    else "Contract is NOT verified - proceed with caution"
                ),
                category=FactorCategory.SECURITY,
            ),
            RiskFactor(
                name=CONCENTRATION,
                weight=w.holder_concentration,
                score=_concentration_score(data.top_holder_percentage),
                description=f"Top holder owns {data.top_holder_percentage:.1f}% of supply",
                category=FactorCategory.TOKENOMICS,
            ),
            RiskFactor(
                name=TAX,
                weight=w.tax,
                score=_tax_score(data.buy_tax + data.sell_tax),
                description=(
                    f"Buy tax: {plain_number(data.buy_tax)}%, "
                    f"Sell tax: {plain_number(data.sell_tax)}%"
                ),
                category=FactorCategory.TOKENOMICS,
            ),
            RiskFactor(
                name=LIQUIDITY,
                weight=w.liquidity,
                score=_liquidity_score(data.liquidity_usd),
                description=f"Liquidity: ${format_compact(data.liquidity_usd)}",
                category=FactorCategory.MARKET,
            ),
            RiskFactor(
                name=VOLUME,
                weight=w.volume,
                score=_volume_score(data.volume_24h),
                description=f"24h Volume: ${format_compact(data.volume_24h)}",
                category=FactorCategory.MARKET,
            ),
            RiskFactor(
                name=PRICE_STABILITY,
                weight=w.price_stability,
                score=_price_stability_score(data.price_change_24h),
                description=f"24h Change: {price_sign}{data.price_change_24h:.2f}%",
                category=FactorCategory.MARKET,
            ),
            RiskFactor(
                name=COMMUNITY,
                weight=w.holder_count,
                score=_holder_count_score(data.holder_count),
                description=f"{data.holder_count} holders",
                category=FactorCategory.COMMUNITY,
            ),
        ]


def calculate_risk_score(data: TokenRiskData) -> RiskScore:
    """Score a token with the default weights."""
    return _DEFAULT_SCORER.calculate(data)


def _lp_lock_score(data: TokenRiskData) -> float:
    if not data.lp_locked:
        return 0
    duration = data.lp_lock_duration or 0
    if duration >= 365:
        return 100
    if duration >= 180:
        return 90
    if duration >= 90:
        return 80
    if duration >= 30:
        return 70
    return 50


def _concentration_score(top_holder_percentage: float) -> float:
    if top_holder_percentage > 50:
        return 0
    if top_holder_percentage > 30:
        return 20
    if top_holder_percentage > 20:
        return 40
    if top_holder_percentage > 10:
        return 70
    return 100


def _tax_score(total_tax: float) -> float:
    if total_tax > 50:
        return 0
    if total_tax > 30:
        return 20
    if total_tax > 20:
        return 40
    if total_tax > 10:
        return 70
    return 100


def _liquidity_score(liquidity_usd: float) -> float:
    if liquidity_usd < 10_000:
        return 0
    if liquidity_usd < 50_000:
        return 30
    if liquidity_usd < 100_000:
        return 60
    if liquidity_usd < 500_000:
        return 80
    return 100


def _volume_score(volume_24h: float) -> float:
    if volume_24h < 1_000:
        return 0
    if volume_24h < 10_000:
        return 30
    if volume_24h < 50_000:
        return 60
    if volume_24h < 100_000:
        return 80
    return 100


def _price_stability_score(price_change_24h: float) -> float:
    change = abs(price_change_24h)
    if change > 50:
        return 0
    if change > 30:
        return 30
    if change > 20:
        return 50
    if change > 10:
        return 70
    return 100


def _holder_count_score(holder_count: int) -> float:
    if holder_count < 100:
        return 0
    if holder_count < 500:
        return 30
    if holder_count < 1000:
        return 60
    if holder_count < 5000:
        return 80
    return 100


def _low_scoring(factors: list[RiskFactor]) -> list[RiskFactor]:
    """Factors below the issue threshold, heaviest weight first."""
    low = [f for f in factors if f.score < LOW_SCORE_THRESHOLD]
    return sorted(low, key=lambda f: f.weight, reverse=True)


def _build_summary(score: int, level: RiskLevel, factors: list[RiskFactor]) -> str:
    summary = f"{LEVEL_HEADLINES[level]} ({score}/100)\n\n{LEVEL_VERDICTS[level]}"
    issues = _low_scoring(factors)
    if issues:
        summary += "\n\nMain issues: " + ", ".join(f.name for f in issues)
    return summary


def _build_recommendations(level: RiskLevel, factors: list[RiskFactor]) -> list[str]:
    recommendations = list(LEVEL_RECOMMENDATIONS[level])
    for factor in _low_scoring(factors):
        advice = FACTOR_RECOMMENDATIONS.get(factor.name)
        if advice:
            recommendations.append(advice)
    return recommendations


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


_DEFAULT_SCORER = RiskScorer()
