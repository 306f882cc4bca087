"""Data models for notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from models.alert_types import AlertPriority, AlertType


@dataclass
class AlertNotification:
    """An alert to be delivered to notification channels.

    Attributes:
        id: Identifier of the alert being delivered.
        alert_type: Type of alert.
        priority: Alert priority, drives emoji and embed color.
        title: Headline.
        description: Body text.
        token_address: Token the alert is about (if applicable).
        amount: Human-formatted amount (if applicable).
        timestamp: When the alert was created.
    """

    id: str
    alert_type: AlertType
    priority: AlertPriority
    title: str
    description: str
    token_address: str | None = None
    amount: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
