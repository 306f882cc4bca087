# src/models/alert_types.py
"""Enumerations shared by the alerting and notification modules."""
from enum import Enum


class AlertType(str, Enum):
    """Kind of event an alert reports."""

    WHALE = "whale"
    SWAP = "swap"
    RUG = "rug"
    VOLUME = "volume"
    NEW_TOKEN = "new_token"
    HONEYPOT = "honeypot"

    @property
    def title(self) -> str:
        """Human-readable headline for this alert type."""
        return ALERT_TITLES[self]


class AlertPriority(str, Enum):
    """Urgency of an alert."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def for_type(cls, alert_type: AlertType) -> "AlertPriority":
        """Get the fixed priority assigned to an alert type.

        Args:
            alert_type: The alert type.

        Returns:
            HIGH for whale, rug and honeypot alerts, MEDIUM otherwise.
        """
        if alert_type in (AlertType.WHALE, AlertType.RUG, AlertType.HONEYPOT):
            return cls.HIGH
        return cls.MEDIUM


class NotificationChannel(str, Enum):
    """Delivery channel for alert notifications."""

    TELEGRAM = "telegram"
    DISCORD = "discord"


ALERT_TITLES: dict[AlertType, str] = {
    AlertType.WHALE: "Whale Movement Detected",
    AlertType.SWAP: "Large Swap Detected",
    AlertType.RUG: "Rug Pull Alert",
    AlertType.VOLUME: "Volume Spike Detected",
    AlertType.NEW_TOKEN: "New Token Launched",
    AlertType.HONEYPOT: "Honeypot Detected",
}
