# tests/notifications/test_models.py
"""Tests for notification models."""

from datetime import timezone


class TestAlertNotification:
    """Tests for AlertNotification."""

    def test_defaults(self):
        """Optional fields default to None and timestamp to UTC now."""
        from models.alert_types import AlertPriority, AlertType
        from notifications.models import AlertNotification

        alert = AlertNotification(
            id="rug-1",
            alert_type=AlertType.RUG,
            priority=AlertPriority.HIGH,
            title="Rug Pull Alert",
            description="Rug pull detected! Confidence: 90%.",
        )

        assert alert.token_address is None
        assert alert.amount is None
        assert alert.timestamp.tzinfo == timezone.utc
