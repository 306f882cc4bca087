"""Alert history storage."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from alerts.models import AlertStats, AlertTrigger
from models.alert_types import AlertPriority, AlertType


class AlertStore(ABC):
    """Abstract repository of alerts, most recent first.

    Read/star mutations and the stats/search helpers are built on
    get() and all(), so implementations only provide storage.
    """

    @abstractmethod
    def add(self, alert: AlertTrigger) -> None:
        """Insert an alert at the front."""
        pass

    @abstractmethod
    def get(self, alert_id: str) -> AlertTrigger | None:
        """Look up an alert by ID."""
        pass

    @abstractmethod
    def all(self) -> list[AlertTrigger]:
        """Get all alerts, most recent first."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all alerts."""
        pass

    def __len__(self) -> int:
        return len(self.all())

    def mark_as_read(self, alert_id: str) -> AlertTrigger | None:
        """Mark an alert as read.

        Returns:
            The updated alert, or None if no alert has that ID.
        """
        alert = self.get(alert_id)
        if alert is not None:
            alert.is_read = True
        return alert

    def toggle_star(self, alert_id: str) -> AlertTrigger | None:
        """Flip an alert's starred flag.

        Returns:
            The updated alert, or None if no alert has that ID.
        """
        alert = self.get(alert_id)
        if alert is not None:
            alert.is_starred = not alert.is_starred
        return alert

    def stats(self, active_channels: int, now: datetime | None = None) -> AlertStats:
        """Count alerts by state.

        Args:
            active_channels: Number of enabled delivery channels.
            now: Reference time for "today". Defaults to current UTC time.
                A naive datetime is taken as UTC.

        Returns:
            AlertStats over the stored alerts.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        alerts = self.all()

        return AlertStats(
            total=len(alerts),
            sent_today=sum(1 for a in alerts if a.timestamp >= start_of_day),
            high_priority=sum(1 for a in alerts if a.priority == AlertPriority.HIGH),
            active_channels=active_channels,
            unread=sum(1 for a in alerts if not a.is_read),
            starred=sum(1 for a in alerts if a.is_starred),
        )

    def search(
        self,
        search_term: str = "",
        alert_type: AlertType | None = None,
        priority: AlertPriority | None = None,
        show_read: bool = True,
    ) -> list[AlertTrigger]:
        """Filter alerts. All given criteria must match.

        Args:
            search_term: Case-insensitive substring of the description.
            alert_type: Only alerts of this type.
            priority: Only alerts with this priority.
            show_read: Include alerts already marked as read.

        Returns:
            Matching alerts, most recent first.
        """
        term = search_term.lower()
        return [
            alert
            for alert in self.all()
            if term in alert.description.lower()
            and (alert_type is None or alert.alert_type == alert_type)
            and (priority is None or alert.priority == priority)
            and (show_read or not alert.is_read)
        ]


class InMemoryAlertStore(AlertStore):
    """Process-local alert history capped at max_alerts entries.

    The oldest alerts are evicted first.
    """

    def __init__(self, max_alerts: int = 100):
        if max_alerts < 1:
            raise ValueError("max_alerts must be at least 1")
        self._max_alerts = max_alerts
        self._alerts: list[AlertTrigger] = []

    @property
    def max_alerts(self) -> int:
        return self._max_alerts

    def add(self, alert: AlertTrigger) -> None:
        self._alerts.insert(0, alert)

        # Trim to max alerts
        if len(self._alerts) > self._max_alerts:
            self._alerts = self._alerts[: self._max_alerts]

    def get(self, alert_id: str) -> AlertTrigger | None:
        for alert in self._alerts:
            if alert.id == alert_id:
                return alert
        return None

    def all(self) -> list[AlertTrigger]:
        return list(self._alerts)

    def clear(self) -> None:
        self._alerts = []
