# tests/alerts/test_detectors.py
"""Tests for alert detectors."""

import pytest

from alerts.detectors import (
    detect_honeypot,
    detect_new_token,
    detect_rug_pull,
    detect_volume_spike,
    detect_whale,
    run_detectors,
)
from alerts.settings import AlertConfig
from analysis.models import AnalysisData
from models.alert_types import AlertType


def make_data(**sections) -> AnalysisData:
    return AnalysisData.model_validate(sections)


@pytest.fixture
def config():
    return AlertConfig()


class TestDetectWhale:
    """Tests for the whale detector."""

    def test_percentage_rule(self, config):
        """Holders above 5% of supply are whales regardless of threshold."""
        data = make_data(
            holderAnalysis={"topHolders": [{"address": "Addr1", "percentage": 8, "amount": 5000}]}
        )

        detection = detect_whale(data, config)

        assert detection.alert_type == AlertType.WHALE
        assert "8% of supply" in detection.description
        assert detection.description == (
            "Large whale activity detected. 8% of supply moved by Addr1..."
        )
        assert detection.wallet_address == "Addr1"
        assert detection.amount == "5,000"

    def test_amount_rule(self, config):
        """Holders above the whale threshold are whales."""
        data = make_data(
            holderAnalysis={
                "topHolders": [
                    {"address": "SmallFish111", "percentage": 1, "amount": 50},
                    {"address": "BigWallet9999", "percentage": 2.5, "amount": 20000},
                ]
            }
        )

        detection = detect_whale(data, config)

        assert detection.description == (
            "Large whale activity detected. 2.5% of supply moved by BigWalle..."
        )
        assert detection.wallet_address == "BigWallet9999"

    def test_boundaries_not_whale(self, config):
        """Exactly 5% and exactly the threshold do not qualify."""
        data = make_data(
            holderAnalysis={"topHolders": [{"address": "A", "percentage": 5, "amount": 10000}]}
        )

        assert detect_whale(data, config) is None

    def test_missing_section(self, config):
        assert detect_whale(make_data(), config) is None

    def test_missing_address(self, config):
        """Holders without an address still alert."""
        data = make_data(holderAnalysis={"topHolders": [{"percentage": 40}]})

        detection = detect_whale(data, config)

        assert "moved by unknown..." in detection.description
        assert detection.wallet_address is None


class TestDetectVolumeSpike:
    """Tests for the volume detector."""

    def test_spike(self, config):
        data = make_data(volumeAnalysis={"change24h": 7.5, "volume24h": 250000})

        detection = detect_volume_spike(data, config)

        assert detection.description == "Volume spike detected! 7.5x increase in 24h volume."
        assert detection.amount == "250,000"

    def test_at_threshold(self, config):
        assert detect_volume_spike(make_data(volumeAnalysis={"change24h": 5}), config) is None

    def test_amount_optional(self, config):
        detection = detect_volume_spike(make_data(volumeAnalysis={"change24h": 6}), config)

        assert detection.amount is None


class TestDetectRugPull:
    """Tests for the rug-pull detector."""

    def test_above_confidence(self, config):
        data = make_data(rugAnalysis={"confidence": 85, "reasons": ["LP unlocked", "Dev selling"]})

        detection = detect_rug_pull(data, config)

        assert detection.alert_type == AlertType.RUG
        assert detection.description == "Rug pull detected! Confidence: 85%. LP unlocked, Dev selling"

    def test_at_confidence(self, config):
        assert detect_rug_pull(make_data(rugAnalysis={"confidence": 70}), config) is None

    def test_custom_confidence(self):
        config = AlertConfig(rug_pull_confidence=50)

        assert detect_rug_pull(make_data(rugAnalysis={"confidence": 55}), config) is not None


class TestDetectNewToken:
    """Tests for the new-token detector."""

    def test_young_token(self, config):
        data = make_data(tokenAnalysis={"age": 3, "name": "Pepe", "symbol": "PEPE"})

        detection = detect_new_token(data, config)

        assert detection.description == "New token launched: Pepe (PEPE)"

    def test_unknown_name(self, config):
        detection = detect_new_token(make_data(tokenAnalysis={}), config)

        assert detection.description == "New token launched: Unknown (Unknown)"

    def test_day_old_token(self, config):
        assert detect_new_token(make_data(tokenAnalysis={"age": 24}), config) is None


class TestDetectHoneypot:
    """Tests for the honeypot detector."""

    def test_honeypot(self, config):
        data = make_data(honeypotAnalysis={"isHoneypot": True, "riskFactors": ["sell blocked", "tax 99%"]})

        detection = detect_honeypot(data, config)

        assert detection.description == (
            "Honeypot detected! Token is not sellable. Risk factors: sell blocked, tax 99%"
        )

    def test_not_honeypot(self, config):
        assert detect_honeypot(make_data(honeypotAnalysis={"isHoneypot": False}), config) is None


class TestRunDetectors:
    """Tests for running all detectors."""

    def test_order(self, config):
        """Detections come back in detector order."""
        data = make_data(
            honeypotAnalysis={"isHoneypot": True},
            tokenAnalysis={"age": 1},
            rugAnalysis={"confidence": 99},
            volumeAnalysis={"change24h": 10},
            holderAnalysis={"topHolders": [{"percentage": 30}]},
        )

        types = [d.alert_type for d in run_detectors(data, config)]

        assert types == [
            AlertType.WHALE,
            AlertType.VOLUME,
            AlertType.RUG,
            AlertType.NEW_TOKEN,
            AlertType.HONEYPOT,
        ]

    def test_empty(self, config):
        assert run_detectors(make_data(), config) == []
