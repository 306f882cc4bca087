# tests/alerts/test_settings.py
"""Tests for alert settings."""

import pytest
from pydantic import ValidationError

from alerts.settings import AlertConfig, AlertStoreSettings
from models.alert_types import NotificationChannel


class TestAlertConfig:
    """Tests for AlertConfig."""

    def test_defaults(self):
        """Defaults match the dashboard defaults."""
        config = AlertConfig()

        assert config.whale_threshold == 10_000
        assert config.volume_spike_threshold == 5
        assert config.rug_pull_confidence == 70
        assert config.enabled_channels == [
            NotificationChannel.TELEGRAM,
            NotificationChannel.DISCORD,
        ]
        assert config.auto_analysis is True
        assert config.notifications_enabled is True

    @pytest.mark.parametrize(
        "field,value",
        [
            ("whale_threshold", -1),
            ("volume_spike_threshold", -0.5),
            ("rug_pull_confidence", 101),
            ("rug_pull_confidence", -1),
            ("enabled_channels", ["email"]),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            AlertConfig(**{field: value})

    def test_channels_deduped(self):
        config = AlertConfig(enabled_channels=["telegram", "telegram"])

        assert config.enabled_channels == [NotificationChannel.TELEGRAM]


class TestAlertStoreSettings:
    def test_default_and_bounds(self):
        assert AlertStoreSettings().max_alerts == 100
        with pytest.raises(ValidationError):
            AlertStoreSettings(max_alerts=0)
