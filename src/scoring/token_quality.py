"""Token quality scoring for new traders."""

import logging
from datetime import datetime, timezone

from scoring.models import (
    FilteredTokens,
    NewbieAnalysis,
    PairSnapshot,
    QualityCategory,
    QualityRisk,
    Recommendation,
    TokenQuality,
)

logger = logging.getLogger(__name__)

TRENDING_MIN_SCORE = 60
TRENDING_MIN_VOLUME = 100_000

RISK_EXPLANATIONS: dict[QualityRisk, str] = {
    QualityRisk.LOW: "This is a relatively safe token with good fundamentals.",
    QualityRisk.MEDIUM: "This token has some risk but could be worth watching.",
    QualityRisk.HIGH: "This token is risky and should be approached with caution.",
    QualityRisk.EXTREME: "This token is very risky and should be avoided.",
}


class TokenQualityAnalyzer:
    """Scores DEX pairs on liquidity, activity, age, stability and size.

    The score is the sum of five capped components:
    liquidity (40), volume/liquidity ratio (25), age (15),
    price stability (10) and market cap (10).
    """

    def analyze(self, pair: PairSnapshot, now: datetime | None = None) -> TokenQuality:
        """Score a pair.

        Args:
            pair: Market snapshot to score.
            now: Reference time for the age component. Defaults to current UTC time.

        Returns:
            TokenQuality with score, category and the findings behind it.
        """
        score = 0
        reasons: list[str] = []
        warnings: list[str] = []

        # Liquidity (40)
        if pair.liquidity_usd > 1_000_000:
            score += 40
            reasons.append("High liquidity - easy to buy/sell")
        elif pair.liquidity_usd > 500_000:
            score += 30
            reasons.append("Good liquidity")
        elif pair.liquidity_usd > 100_000:
            score += 20
            reasons.append("Moderate liquidity")
        else:
            score += 5
            warnings.append("Low liquidity - hard to sell")

        # Volume relative to liquidity (25)
        ratio = pair.volume_24h / pair.liquidity_usd if pair.liquidity_usd > 0 else 0.0
        if ratio > 10:
            score += 25
            reasons.append("High trading activity")
        elif ratio > 5:
            score += 20
            reasons.append("Good trading volume")
        elif ratio > 2:
            score += 15
            reasons.append("Moderate trading")
        else:
            score += 5
            warnings.append("Low trading volume")

        # Age (15)
        age_hours = self._age_hours(pair, now)
        if age_hours > 168:
            score += 15
            reasons.append("Established token (1+ week old)")
        elif age_hours > 72:
            score += 10
            reasons.append("Mature token (3+ days old)")
        elif age_hours > 24:
            score += 5
            reasons.append("New but not too new")
        else:
            warnings.append("Very new token - higher risk")

        # Price stability (10)
        price_change = abs(pair.price_change_24h)
        if price_change < 20:
            score += 10
            reasons.append("Stable price movement")
        elif price_change < 50:
            score += 5
            reasons.append("Moderate price movement")
        else:
            warnings.append("High price volatility")

        # Market cap (10)
        if pair.fdv > 10_000_000:
            score += 10
            reasons.append("Established market cap")
        elif pair.fdv > 1_000_000:
            score += 8
            reasons.append("Good market cap")
        elif pair.fdv > 100_000:
            score += 5
            reasons.append("Small but reasonable cap")
        else:
            score += 2
            warnings.append("Very small market cap")

        category, risk_level, recommendation, confidence = self._classify(score)

        return TokenQuality(
            score=score,
            category=category,
            risk_level=risk_level,
            reasons=reasons,
            warnings=warnings,
            recommendation=recommendation,
            confidence=confidence,
        )

    def explain(self, pair: PairSnapshot, quality: TokenQuality) -> NewbieAnalysis:
        """Build a plain-language explanation of a quality assessment."""
        if quality.recommendation == Recommendation.BUY:
            should_i_buy = "YES"
        elif quality.recommendation == Recommendation.HOLD:
            should_i_buy = "MAYBE"
        else:
            should_i_buy = "NO"

        return NewbieAnalysis(
            simple_explanation=self._simple_explanation(pair, quality),
            should_i_buy=should_i_buy,
            why_reason=self._why_reason(quality),
            risk_in_plain_english=RISK_EXPLANATIONS.get(quality.risk_level, "Risk level unclear."),
            what_to_watch=self._watch_list(pair, quality),
            red_flags=list(quality.warnings),
            green_flags=list(quality.reasons),
        )

    def filter_tokens(
        self, pairs: list[PairSnapshot], now: datetime | None = None
    ) -> FilteredTokens:
        """Bucket pairs into diamonds, safe, trending and avoid lists.

        A pair can appear in both a category bucket and the trending list.
        """
        result = FilteredTokens()
        for pair in pairs:
            quality = self.analyze(pair, now)
            if quality.category == QualityCategory.DIAMOND:
                result.diamonds.append(pair)
            elif quality.category == QualityCategory.SAFE:
                result.safe.append(pair)
            elif quality.category == QualityCategory.SCAM:
                result.avoid.append(pair)

            if quality.score > TRENDING_MIN_SCORE and pair.volume_24h > TRENDING_MIN_VOLUME:
                result.trending.append(pair)

        logger.debug(
            f"Filtered {len(pairs)} pairs: {len(result.diamonds)} diamonds, "
            f"{len(result.safe)} safe, {len(result.avoid)} to avoid"
        )
        return result

    def _age_hours(self, pair: PairSnapshot, now: datetime | None) -> float:
        now = now or datetime.now(timezone.utc)
        created = pair.pair_created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return (now - created).total_seconds() / 3600

    def _classify(
        self, score: int
    ) -> tuple[QualityCategory, QualityRisk, Recommendation, float]:
        if score >= 80:
            return QualityCategory.DIAMOND, QualityRisk.LOW, Recommendation.BUY, 0.9
        elif score >= 60:
            return QualityCategory.SAFE, QualityRisk.LOW, Recommendation.BUY, 0.7
        elif score >= 40:
            return QualityCategory.RISKY, QualityRisk.MEDIUM, Recommendation.HOLD, 0.5
        else:
            return QualityCategory.SCAM, QualityRisk.HIGH, Recommendation.AVOID, 0.8

    def _simple_explanation(self, pair: PairSnapshot, quality: TokenQuality) -> str:
        sign = "+" if pair.price_change_24h > 0 else ""
        return (
            f"This token is worth ${pair.price_usd:.8f} and has moved "
            f"{sign}{pair.price_change_24h:.1f}% in the last 24 hours. "
            f"It has ${pair.liquidity_usd / 1_000_000:.2f}M in liquidity and "
            f"${pair.volume_24h / 1_000_000:.2f}M in trading volume. "
            f"Our analysis gives it a {quality.score}/100 score."
        )

    def _why_reason(self, quality: TokenQuality) -> str:
        if quality.recommendation == Recommendation.BUY:
            return (
                f"This token looks good because: {', '.join(quality.reasons[:3])}. "
                f"It has a {quality.score}/100 quality score."
            )
        if quality.recommendation == Recommendation.HOLD:
            first = quality.reasons[0] if quality.reasons else "Mixed signals."
            return f"This token is okay but risky. {first} Score: {quality.score}/100."
        if quality.recommendation == Recommendation.AVOID:
            return (
                f"We recommend avoiding this token because: "
                f"{', '.join(quality.warnings[:3])}. Score: {quality.score}/100."
            )
        return "Mixed signals on this token."

    def _watch_list(self, pair: PairSnapshot, quality: TokenQuality) -> list[str]:
        watch: list[str] = []
        if pair.liquidity_usd < 500_000:
            watch.append("Liquidity levels - make sure you can sell")
        if abs(pair.price_change_24h) > 50:
            watch.append("Price volatility - could swing either way")
        if quality.score < 50:
            watch.append("Overall quality score - consider waiting")
        return watch
