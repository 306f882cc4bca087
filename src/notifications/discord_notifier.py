"""Discord webhook notification sender."""

import logging
from typing import Any

import aiohttp

from .alert_formatter import AlertFormatter
from .models import AlertNotification
from .settings import NotificationSettings

logger = logging.getLogger(__name__)


class DiscordNotifier:
    """Posts alerts as embeds to a Discord incoming webhook."""

    def __init__(
        self,
        settings: NotificationSettings,
        formatter: AlertFormatter,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize the notifier.

        Args:
            settings: Notification settings.
            formatter: Alert formatter for embed formatting.
            session: Shared HTTP session. When omitted, a session is opened per send.
        """
        self._settings = settings
        self._formatter = formatter
        self._session = session

    @property
    def is_configured(self) -> bool:
        """Check if a webhook URL is set."""
        return self._settings.is_discord_configured

    def update_settings(self, settings: NotificationSettings) -> None:
        """Swap in new settings."""
        self._settings = settings

    async def send(self, alert: AlertNotification) -> bool:
        """Send an alert as a single-embed webhook message.

        Args:
            alert: The alert to send.

        Returns:
            True if Discord answered with a 2xx status, False otherwise.
        """
        if not self.is_configured:
            logger.warning("Discord not configured")
            return False

        payload = {"embeds": [self._formatter.format_discord_embed(alert)]}

        try:
            if self._session is not None:
                return await self._post(self._session, payload, alert)
            async with aiohttp.ClientSession() as session:
                return await self._post(session, payload, alert)
        except Exception as e:
            logger.error(f"Error sending to Discord: {e}")
            return False

    async def _post(
        self,
        session: aiohttp.ClientSession,
        payload: dict[str, Any],
        alert: AlertNotification,
    ) -> bool:
        async with session.post(self._settings.discord_webhook_url, json=payload) as resp:
            if 200 <= resp.status < 300:
                logger.info(f"Sent {alert.alert_type.value} alert to Discord")
                return True
            logger.error(f"Discord webhook failed: {resp.status} {await resp.text()}")
            return False
