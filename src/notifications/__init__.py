"""Notifications module for token alerts via Telegram and Discord."""

from .alert_formatter import AlertFormatter
from .discord_notifier import DiscordNotifier
from .models import AlertNotification
from .notification_service import NotificationService
from .settings import NotificationSettings
from .telegram_notifier import TelegramNotifier

__all__ = [
    "AlertFormatter",
    "AlertNotification",
    "DiscordNotifier",
    "NotificationService",
    "NotificationSettings",
    "TelegramNotifier",
]
