# src/notifications/settings.py
"""Settings for notifications module."""

from pydantic import BaseModel, computed_field, field_validator

from models.alert_types import NotificationChannel


class NotificationSettings(BaseModel):
    """Configuration for Telegram and Discord notifications.

    Attributes:
        enabled_channels: Channels alerts are fanned out to.
        telegram_token: Bot token from BotFather.
        chat_id: Telegram chat ID to send messages to.
        discord_webhook_url: Discord incoming webhook URL.
        footer_text: Footer shown on Discord embeds.
    """

    enabled_channels: list[NotificationChannel] = [
        NotificationChannel.TELEGRAM,
        NotificationChannel.DISCORD,
    ]
    telegram_token: str = ""
    chat_id: str = ""
    discord_webhook_url: str = ""
    footer_text: str = "0rug Analytics - AI-Powered Alerts"

    @field_validator("enabled_channels")
    @classmethod
    def dedupe_channels(cls, v: list[NotificationChannel]) -> list[NotificationChannel]:
        """Drop repeated channels, keeping first-seen order."""
        return list(dict.fromkeys(v))

    @computed_field
    @property
    def is_telegram_configured(self) -> bool:
        """Check if Telegram credentials are configured."""
        return bool(self.telegram_token and self.chat_id)

    @computed_field
    @property
    def is_discord_configured(self) -> bool:
        """Check if a Discord webhook is configured."""
        return bool(self.discord_webhook_url)
