# src/notifications/telegram_notifier.py
"""Telegram notification sender."""

import logging

from telegram import Bot, LinkPreviewOptions

from .alert_formatter import AlertFormatter
from .models import AlertNotification
from .settings import NotificationSettings

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Sends alerts to a Telegram chat via the Bot API.

    Attributes:
        _settings: Notification settings.
        _formatter: Alert formatter.
        _bot: Telegram bot instance, created and initialized on first send.
        _retired_bots: Bots replaced by a token change, shut down on stop.
    """

    def __init__(
        self,
        settings: NotificationSettings,
        formatter: AlertFormatter,
    ):
        """Initialize the notifier.

        Args:
            settings: Notification settings.
            formatter: Alert formatter for message formatting.
        """
        self._settings = settings
        self._formatter = formatter
        self._bot: Bot | None = None
        self._retired_bots: list[Bot] = []

    @property
    def is_configured(self) -> bool:
        """Check if bot token and chat ID are set."""
        return self._settings.is_telegram_configured

    def update_settings(self, settings: NotificationSettings) -> None:
        """Swap in new settings, retiring the bot if the token changed."""
        if settings.telegram_token != self._settings.telegram_token and self._bot:
            self._retired_bots.append(self._bot)
            self._bot = None
        self._settings = settings

    async def send(self, alert: AlertNotification) -> bool:
        """Send an alert as an HTML message.

        Args:
            alert: The alert to send.

        Returns:
            True if Telegram accepted the message, False otherwise.
        """
        if not self.is_configured:
            logger.warning("Telegram not configured")
            return False

        try:
            bot = await self._get_bot()
            await bot.send_message(
                chat_id=self._settings.chat_id,
                text=self._formatter.format_telegram(alert),
                parse_mode="HTML",
                link_preview_options=LinkPreviewOptions(is_disabled=True),
            )
            logger.info(f"Sent {alert.alert_type.value} alert to Telegram")
            return True
        except Exception as e:
            logger.error(f"Error sending to Telegram: {e}")
            return False

    async def stop(self) -> None:
        """Shut down every bot and close its HTTP connections."""
        bots = self._retired_bots + ([self._bot] if self._bot else [])
        self._bot = None
        self._retired_bots = []

        for bot in bots:
            try:
                await bot.shutdown()
            except Exception as e:
                logger.error(f"Error shutting down Telegram bot: {e}")

    async def _get_bot(self) -> Bot:
        if self._bot is None:
            bot = Bot(token=self._settings.telegram_token)
            await bot.initialize()
            self._bot = bot
        return self._bot
