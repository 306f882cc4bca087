# src/alerts/settings.py
"""Settings for the alert engine."""

from pydantic import BaseModel, Field, field_validator

from models.alert_types import NotificationChannel


class AlertConfig(BaseModel):
    """Thresholds and switches for the alert engine.

    Attributes:
        whale_threshold: Holder amount above which a holder counts as a whale.
        volume_spike_threshold: 24h volume change multiple that counts as a spike.
        rug_pull_confidence: Rug-pull confidence percentage that raises an alert.
        enabled_channels: Channels alerts are delivered to.
        auto_analysis: Carried for callers; detection does not depend on it.
        notifications_enabled: Whether detected alerts are sent to channels.
    """

    whale_threshold: float = Field(default=10_000, ge=0)
    volume_spike_threshold: float = Field(default=5, ge=0)
    rug_pull_confidence: float = Field(default=70, ge=0, le=100)
    enabled_channels: list[NotificationChannel] = Field(
        default_factory=lambda: [NotificationChannel.TELEGRAM, NotificationChannel.DISCORD]
    )
    auto_analysis: bool = True
    notifications_enabled: bool = True

    @field_validator("enabled_channels")
    @classmethod
    def dedupe_channels(cls, v: list[NotificationChannel]) -> list[NotificationChannel]:
        """Drop repeated channels, keeping first-seen order."""
        return list(dict.fromkeys(v))


class AlertStoreSettings(BaseModel):
    """Settings for alert history."""

    max_alerts: int = Field(default=100, ge=1)
