# src/config/settings.py
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from alerts.settings import AlertConfig, AlertStoreSettings
from notifications.settings import NotificationSettings
from risk.settings import RiskSettings


class SystemConfig(BaseModel):
    name: str = "Token Alert Engine"
    version: str = "1.0.0"
    log_level: str = "INFO"


class TelegramConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TELEGRAM_")

    bot_token: str = ""
    chat_id: str = ""


class DiscordConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DISCORD_")

    webhook_url: str = ""


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    alerts: AlertConfig = Field(default_factory=AlertConfig)
    alert_store: AlertStoreSettings = Field(default_factory=AlertStoreSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    risk: RiskSettings = Field(default_factory=RiskSettings)
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    discord: DiscordConfig = Field(default_factory=DiscordConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        telegram = TelegramConfig()
        discord = DiscordConfig()

        return cls(
            **data,
            telegram=telegram,
            discord=discord,
        )

    def build_notification_settings(self) -> NotificationSettings:
        """Combine notification settings with env credentials and alert channels.

        Credentials from the environment take precedence over the YAML file.
        The channel list always follows the alert configuration.
        """
        return self.notifications.model_copy(
            update={
                "telegram_token": self.telegram.bot_token or self.notifications.telegram_token,
                "chat_id": self.telegram.chat_id or self.notifications.chat_id,
                "discord_webhook_url": (
                    self.discord.webhook_url or self.notifications.discord_webhook_url
                ),
                "enabled_channels": list(self.alerts.enabled_channels),
            }
        )
