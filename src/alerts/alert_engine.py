# src/alerts/alert_engine.py
"""Token monitoring and alert management."""

import logging
from datetime import datetime
from typing import Any

from analysis.executor import BaseAnalysisExecutor
from analysis.models import AnalysisResult
from models.alert_types import AlertPriority, AlertType
from notifications.notification_service import NotificationService

from .detectors import run_detectors
from .models import AlertStats, AlertTrigger
from .settings import AlertConfig
from .store import AlertStore, InMemoryAlertStore

logger = logging.getLogger(__name__)


class AlertEngine:
    """Runs token analysis, raises alerts and keeps their history.

    One monitor_token call makes one executor request, evaluates every
    detector, notifies each alert when notifications are enabled, and
    only then stores the alerts. A failure anywhere in that pipeline
    returns no alerts and leaves the store untouched.

    Attributes:
        _config: Alert thresholds and switches.
        _executor: Source of analysis payloads.
        _notifications: Channel fan-out service.
        _store: Alert history.
    """

    def __init__(
        self,
        config: AlertConfig,
        executor: BaseAnalysisExecutor,
        notification_service: NotificationService,
        store: AlertStore | None = None,
    ):
        """Initialize the engine.

        Args:
            config: Alert thresholds and switches.
            executor: Source of analysis payloads.
            notification_service: Channel fan-out service.
            store: Alert history. Defaults to an in-memory store of 100 alerts.
        """
        self._config = config
        self._executor = executor
        self._notifications = notification_service
        self._store = store if store is not None else InMemoryAlertStore()

    @property
    def config(self) -> AlertConfig:
        """Current alert configuration."""
        return self._config

    @property
    def store(self) -> AlertStore:
        return self._store

    async def monitor_token(self, token_address: str) -> list[AlertTrigger]:
        """Analyze a token and raise an alert for every detector that fires.

        Args:
            token_address: Address of the token to analyze.

        Returns:
            New alerts in detector order, or an empty list if the analysis
            failed or any step raised.
        """
        try:
            raw = await self._executor.execute(
                f"Analyze token {token_address} for potential alerts"
            )
            result = AnalysisResult.model_validate(raw)

            if not result.success:
                logger.warning(f"Analysis failed for {token_address}: {result.error}")
                return []

            alerts = [
                AlertTrigger.create(
                    alert_type=detection.alert_type,
                    description=detection.description,
                    channels=self._config.enabled_channels,
                    token_address=token_address,
                    wallet_address=detection.wallet_address,
                    amount=detection.amount,
                )
                for detection in run_detectors(result.data, self._config)
            ]

            for alert in alerts:
                if self._config.notifications_enabled:
                    await self._send_notification(alert)

            # Oldest first so the store's front matches the returned order
            for alert in reversed(alerts):
                self._store.add(alert)

            if alerts:
                logger.info(f"Raised {len(alerts)} alerts for {token_address}")
            return alerts

        except Exception as e:
            logger.error(f"Error monitoring token {token_address}: {e}")
            return []

    async def _send_notification(self, alert: AlertTrigger) -> None:
        try:
            sent = await self._notifications.send_alert(alert.to_notification())
            if not sent:
                logger.warning(f"Alert {alert.id} was not delivered to any channel")
        except Exception as e:
            logger.error(f"Error sending notification for {alert.id}: {e}")

    def get_active_alerts(self) -> list[AlertTrigger]:
        """Get all stored alerts, most recent first."""
        return self._store.all()

    def add_alert(self, alert: AlertTrigger) -> None:
        """Store an alert at the front of the history."""
        self._store.add(alert)

    def mark_as_read(self, alert_id: str) -> AlertTrigger | None:
        """Mark an alert as read. Unknown IDs are ignored."""
        return self._store.mark_as_read(alert_id)

    def toggle_star(self, alert_id: str) -> AlertTrigger | None:
        """Flip an alert's starred flag. Unknown IDs are ignored."""
        return self._store.toggle_star(alert_id)

    def update_config(self, **changes: Any) -> AlertConfig:
        """Merge changes into the alert configuration.

        A change to enabled_channels is also applied to the notification
        service.

        Args:
            **changes: AlertConfig fields to replace.

        Returns:
            The validated new configuration.

        Raises:
            pydantic.ValidationError: If the merged configuration is invalid.
        """
        merged = {**self._config.model_dump(), **changes}
        config = AlertConfig.model_validate(merged)

        if config.enabled_channels != self._config.enabled_channels:
            self._notifications.update_config(enabled_channels=config.enabled_channels)

        self._config = config
        logger.info(f"Alert config updated: {sorted(changes)}")
        return self._config

    async def test_notifications(self) -> dict[str, bool]:
        """Send a test alert to every channel and report each result."""
        return await self._notifications.test_channels()

    def get_stats(self, now: datetime | None = None) -> AlertStats:
        """Count stored alerts by state."""
        return self._store.stats(
            active_channels=len(self._config.enabled_channels), now=now
        )

    def filter_alerts(
        self,
        search_term: str = "",
        alert_type: AlertType | None = None,
        priority: AlertPriority | None = None,
        show_read: bool = True,
    ) -> list[AlertTrigger]:
        """Search stored alerts. See AlertStore.search."""
        return self._store.search(
            search_term=search_term,
            alert_type=alert_type,
            priority=priority,
            show_read=show_read,
        )
