# tests/scoring/test_token_quality.py
"""Tests for TokenQualityAnalyzer."""

from datetime import datetime, timedelta, timezone

import pytest

from scoring.models import PairSnapshot, QualityCategory, QualityRisk, Recommendation
from scoring.token_quality import TokenQualityAnalyzer

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def make_pair(**overrides) -> PairSnapshot:
    data = dict(
        pair_address="0xa1b2c3d4e5f60718293a4b5c6d7e8f9012345678",
        base_symbol="DOGEX",
        price_usd=0.00042,
        liquidity_usd=1_500_000,
        volume_24h=18_000_000,
        price_change_24h=12.5,
        fdv=25_000_000,
        pair_created_at=NOW - timedelta(days=30),
    )
    data.update(overrides)
    return PairSnapshot(**data)


@pytest.fixture
def analyzer():
    return TokenQualityAnalyzer()


@pytest.fixture
def scam_pair():
    return make_pair(
        base_symbol="RUGME",
        liquidity_usd=4_000,
        volume_24h=2_000,
        price_change_24h=-85,
        fdv=20_000,
        pair_created_at=NOW - timedelta(hours=4),
    )


@pytest.fixture
def risky_pair():
    return make_pair(
        base_symbol="MEH",
        liquidity_usd=200_000,
        volume_24h=500_000,
        price_change_24h=30,
        fdv=500_000,
        pair_created_at=NOW - timedelta(hours=48),
    )


class TestAnalyze:
    """Tests for quality scoring."""

    def test_mature_liquid_pair_is_diamond(self, analyzer):
        """High liquidity, activity and age score as DIAMOND."""
        quality = analyzer.analyze(make_pair(), now=NOW)

        assert quality.score == 100
        assert quality.category == QualityCategory.DIAMOND
        assert quality.risk_level == QualityRisk.LOW
        assert quality.recommendation == Recommendation.BUY
        assert quality.confidence == 0.9
        assert quality.warnings == []
        assert "Established token (1+ week old)" in quality.reasons

    def test_thin_new_pair_is_scam(self, analyzer, scam_pair):
        """Low liquidity, new and volatile pairs score as SCAM."""
        quality = analyzer.analyze(scam_pair, now=NOW)

        assert quality.score == 12
        assert quality.category == QualityCategory.SCAM
        assert quality.recommendation == Recommendation.AVOID
        assert "Low liquidity - hard to sell" in quality.warnings
        assert "Very new token - higher risk" in quality.warnings
        assert "High price volatility" in quality.warnings

    def test_middling_pair_is_risky(self, analyzer, risky_pair):
        """Middling pairs score as RISKY with a HOLD."""
        quality = analyzer.analyze(risky_pair, now=NOW)

        assert quality.score == 50
        assert quality.category == QualityCategory.RISKY
        assert quality.risk_level == QualityRisk.MEDIUM
        assert quality.recommendation == Recommendation.HOLD

    def test_zero_liquidity_ratio(self, analyzer):
        """Zero liquidity does not divide by zero."""
        quality = analyzer.analyze(make_pair(liquidity_usd=0), now=NOW)

        assert "Low trading volume" in quality.warnings

    def test_naive_created_at_treated_as_utc(self, analyzer):
        """Naive timestamps are read as UTC."""
        pair = make_pair(pair_created_at=datetime(2026, 10, 17, 10, 0))

        quality = analyzer.analyze(pair, now=NOW)

        assert "Very new token - higher risk" in quality.warnings


class TestExplain:
    """Tests for plain-language explanations."""

    def test_buy_explanation(self, analyzer):
        """BUY maps to YES with the top reasons."""
        pair = make_pair()
        quality = analyzer.analyze(pair, now=NOW)

        explanation = analyzer.explain(pair, quality)

        assert explanation.should_i_buy == "YES"
        assert explanation.why_reason.startswith("This token looks good because: ")
        assert "100/100 score" in explanation.simple_explanation
        assert "+12.5%" in explanation.simple_explanation
        assert explanation.green_flags == quality.reasons

    def test_avoid_explanation(self, analyzer, scam_pair):
        """AVOID maps to NO and lists what to watch."""
        quality = analyzer.analyze(scam_pair, now=NOW)

        explanation = analyzer.explain(scam_pair, quality)

        assert explanation.should_i_buy == "NO"
        assert explanation.risk_in_plain_english == (
            "This token is risky and should be approached with caution."
        )
        assert explanation.red_flags == quality.warnings
        assert explanation.what_to_watch == [
            "Liquidity levels - make sure you can sell",
            "Price volatility - could swing either way",
            "Overall quality score - consider waiting",
        ]

    def test_hold_explanation(self, analyzer, risky_pair):
        """HOLD maps to MAYBE."""
        quality = analyzer.analyze(risky_pair, now=NOW)

        assert analyzer.explain(risky_pair, quality).should_i_buy == "MAYBE"


class TestFilterTokens:
    """Tests for bucketing pairs."""

    def test_buckets(self, analyzer, scam_pair, risky_pair):
        """Pairs land in category buckets and trending."""
        diamond = make_pair()

        result = analyzer.filter_tokens([diamond, scam_pair, risky_pair], now=NOW)

        assert result.diamonds == [diamond]
        assert result.safe == []
        assert result.avoid == [scam_pair]
        assert result.trending == [diamond]

    def test_trending_needs_volume(self, analyzer):
        """High-scoring pairs with little volume are not trending."""
        pair = make_pair(liquidity_usd=1_500_000, volume_24h=50_000)

        result = analyzer.filter_tokens([pair], now=NOW)

        assert result.trending == []
