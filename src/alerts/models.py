"""Data models for alerts."""

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone

from models.alert_types import AlertPriority, AlertType, NotificationChannel
from notifications.models import AlertNotification


ID_PREFIXES: dict[AlertType, str] = {
    AlertType.WHALE: "whale",
    AlertType.SWAP: "swap",
    AlertType.RUG: "rug",
    AlertType.VOLUME: "volume",
    AlertType.NEW_TOKEN: "new",
    AlertType.HONEYPOT: "honeypot",
}

_sequence = itertools.count(1)


def new_alert_id(alert_type: AlertType, timestamp: datetime) -> str:
    """Build a process-unique alert ID, e.g. 'whale-1767225600000-3'."""
    millis = int(timestamp.timestamp() * 1000)
    return f"{ID_PREFIXES[alert_type]}-{millis}-{next(_sequence)}"


@dataclass
class AlertTrigger:
    """An alert raised for a token.

    Attributes:
        id: Process-unique identifier.
        alert_type: What was detected.
        priority: Fixed per alert type.
        description: Human-readable summary, fixed at creation.
        timestamp: Creation time (UTC).
        channels: Channels delivery was attempted on.
        token_address: Token the alert is about.
        wallet_address: Wallet involved, if any.
        amount: Human-formatted amount, if any.
        is_read: Whether the alert was marked as read.
        is_starred: Whether the alert is starred.
    """

    id: str
    alert_type: AlertType
    priority: AlertPriority
    description: str
    timestamp: datetime
    channels: list[NotificationChannel] = field(default_factory=list)
    token_address: str | None = None
    wallet_address: str | None = None
    amount: str | None = None
    is_read: bool = False
    is_starred: bool = False

    @property
    def title(self) -> str:
        """Headline for this alert's type."""
        return self.alert_type.title

    def to_notification(self) -> AlertNotification:
        """Build the payload sent to notification channels."""
        return AlertNotification(
            id=self.id,
            alert_type=self.alert_type,
            priority=self.priority,
            title=self.title,
            description=self.description,
            token_address=self.token_address,
            amount=self.amount,
            timestamp=self.timestamp,
        )

    @classmethod
    def create(
        cls,
        alert_type: AlertType,
        description: str,
        channels: list[NotificationChannel],
        token_address: str | None = None,
        wallet_address: str | None = None,
        amount: str | None = None,
    ) -> "AlertTrigger":
        """Create a new unread alert stamped with the current time.

        The channel list is copied so later config changes do not alter it.
        """
        timestamp = datetime.now(timezone.utc)
        return cls(
            id=new_alert_id(alert_type, timestamp),
            alert_type=alert_type,
            priority=AlertPriority.for_type(alert_type),
            description=description,
            timestamp=timestamp,
            channels=list(channels),
            token_address=token_address,
            wallet_address=wallet_address,
            amount=amount,
        )


@dataclass
class AlertStats:
    """Counters over the stored alerts."""

    total: int = 0
    sent_today: int = 0
    high_priority: int = 0
    active_channels: int = 0
    unread: int = 0
    starred: int = 0
