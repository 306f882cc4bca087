# src/notifications/alert_formatter.py
"""Formats alerts for Telegram messages and Discord embeds."""

from html import escape
from typing import Any

from models.alert_types import AlertPriority, AlertType

from .models import AlertNotification


TYPE_EMOJI: dict[AlertType, str] = {
    AlertType.WHALE: "🐋",
    AlertType.SWAP: "💱",
    AlertType.RUG: "⚠️",
    AlertType.VOLUME: "📈",
    AlertType.NEW_TOKEN: "🆕",
    AlertType.HONEYPOT: "🍯",
}

PRIORITY_EMOJI: dict[AlertPriority, str] = {
    AlertPriority.HIGH: "🚨",
    AlertPriority.MEDIUM: "⚠️",
    AlertPriority.LOW: "ℹ️",
}

PRIORITY_COLOR: dict[AlertPriority, int] = {
    AlertPriority.HIGH: 0xFF0000,
    AlertPriority.MEDIUM: 0xFFA500,
    AlertPriority.LOW: 0x00FF00,
}

DEFAULT_EMOJI = "🔔"
DEFAULT_COLOR = 0x808080


class AlertFormatter:
    """Formats alert notifications into channel payloads."""

    def __init__(self, footer_text: str = "0rug Analytics - AI-Powered Alerts"):
        self._footer_text = footer_text

    def format_telegram(self, alert: AlertNotification) -> str:
        """Format an alert as HTML text for Telegram."""
        type_emoji = TYPE_EMOJI.get(alert.alert_type, DEFAULT_EMOJI)
        priority_emoji = PRIORITY_EMOJI.get(alert.priority, DEFAULT_EMOJI)

        lines = [
            f"{priority_emoji} <b>{escape(alert.title, quote=False)}</b>",
            "",
            f"{type_emoji} {escape(alert.description, quote=False)}",
            "",
        ]

        if alert.token_address:
            lines.append(f"🔗 Token: <code>{escape(alert.token_address, quote=False)}</code>")

        if alert.amount:
            lines.append(f"💰 Amount: {escape(alert.amount, quote=False)}")

        lines.append(f"⏰ {alert.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}")
        lines.append("")
        lines.append(f"#{alert.alert_type.value.upper()} #ALERT")

        return "\n".join(lines)

    def format_discord_embed(self, alert: AlertNotification) -> dict[str, Any]:
        """Format an alert as a Discord embed object."""
        type_emoji = TYPE_EMOJI.get(alert.alert_type, DEFAULT_EMOJI)

        fields: list[dict[str, Any]] = []
        if alert.token_address:
            fields.append(
                {"name": "Token Address", "value": f"`{alert.token_address}`", "inline": True}
            )
        if alert.amount:
            fields.append({"name": "Amount", "value": alert.amount, "inline": True})
        fields.append(
            {"name": "Priority", "value": alert.priority.value.upper(), "inline": True}
        )

        return {
            "title": f"{type_emoji} {alert.title}",
            "description": alert.description,
            "color": PRIORITY_COLOR.get(alert.priority, DEFAULT_COLOR),
            "timestamp": alert.timestamp.isoformat(),
            "fields": fields,
            "footer": {"text": self._footer_text},
        }
