# src/notifications/notification_service.py
"""Fan-out of alerts to every enabled notification channel."""

import asyncio
import logging
from typing import Any

from models.alert_types import AlertPriority, AlertType, NotificationChannel

from .alert_formatter import AlertFormatter
from .discord_notifier import DiscordNotifier
from .models import AlertNotification
from .settings import NotificationSettings
from .telegram_notifier import TelegramNotifier

logger = logging.getLogger(__name__)


class NotificationService:
    """Delivers alerts to Telegram and Discord.

    Enabled channels are sent concurrently and joined with per-channel
    result capture. A failing channel never fails the others, and no
    error reaches the caller. Nothing is retried.

    Attributes:
        _settings: Notification settings.
        _telegram: Telegram sender.
        _discord: Discord sender.
    """

    def __init__(
        self,
        settings: NotificationSettings,
        formatter: AlertFormatter | None = None,
        telegram: TelegramNotifier | None = None,
        discord: DiscordNotifier | None = None,
    ):
        """Initialize the service.

        Args:
            settings: Notification settings.
            formatter: Shared formatter. Defaults to one using the settings footer.
            telegram: Telegram sender. Built from settings when omitted.
            discord: Discord sender. Built from settings when omitted.
        """
        self._settings = settings
        formatter = formatter or AlertFormatter(footer_text=settings.footer_text)
        self._telegram = telegram or TelegramNotifier(settings=settings, formatter=formatter)
        self._discord = discord or DiscordNotifier(settings=settings, formatter=formatter)

    @property
    def settings(self) -> NotificationSettings:
        """Current notification settings."""
        return self._settings

    async def send_alert(self, alert: AlertNotification) -> bool:
        """Send an alert to all enabled channels.

        Args:
            alert: The alert to send.

        Returns:
            True if at least one channel delivered the alert.
        """
        results = await self.deliver(alert)
        return any(results.values())

    async def deliver(self, alert: AlertNotification) -> dict[NotificationChannel, bool]:
        """Send an alert to all enabled channels and report each outcome.

        Args:
            alert: The alert to send.

        Returns:
            Delivery result per enabled channel.
        """
        channels = list(self._settings.enabled_channels)
        if not channels:
            logger.debug("No notification channels enabled")
            return {}

        return await self._send_all(
            {channel: self._sender_for(channel).send(alert) for channel in channels}
        )

    async def test_channels(self) -> dict[str, bool]:
        """Send a test alert to both channels, enabled or not.

        Returns:
            Mapping of "telegram" and "discord" to whether delivery succeeded.
        """
        alert = AlertNotification(
            id="test",
            alert_type=AlertType.WHALE,
            priority=AlertPriority.MEDIUM,
            title="Test Alert",
            description="This is a test alert to verify notification channels are working.",
        )
        results = await self._send_all(
            {
                NotificationChannel.TELEGRAM: self._telegram.send(alert),
                NotificationChannel.DISCORD: self._discord.send(alert),
            }
        )
        return {channel.value: ok for channel, ok in results.items()}

    def update_config(self, **changes: Any) -> NotificationSettings:
        """Merge changes into the settings.

        Args:
            **changes: NotificationSettings fields to replace.

        Returns:
            The validated new settings.

        Raises:
            pydantic.ValidationError: If the merged settings are invalid.
        """
        merged = {**self._settings.model_dump(), **changes}
        self._settings = NotificationSettings.model_validate(merged)
        self._telegram.update_settings(self._settings)
        self._discord.update_settings(self._settings)
        return self._settings

    async def stop(self) -> None:
        """Release channel resources."""
        await self._telegram.stop()

    def _sender_for(self, channel: NotificationChannel) -> TelegramNotifier | DiscordNotifier:
        if channel == NotificationChannel.TELEGRAM:
            return self._telegram
        return self._discord

    async def _send_all(self, sends: dict[NotificationChannel, Any]) -> dict[NotificationChannel, bool]:
        outcomes = await asyncio.gather(*sends.values(), return_exceptions=True)

        results: dict[NotificationChannel, bool] = {}
        for channel, outcome in zip(sends.keys(), outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"{channel.value} delivery raised: {outcome}")
                results[channel] = False
            else:
                results[channel] = outcome is True
        return results
