# tests/notifications/test_formatter.py
"""Tests for AlertFormatter."""

from datetime import datetime, timezone

import pytest

from models.alert_types import AlertPriority, AlertType
from notifications.alert_formatter import AlertFormatter
from notifications.models import AlertNotification


@pytest.fixture
def whale_alert():
    return AlertNotification(
        id="whale-1",
        alert_type=AlertType.WHALE,
        priority=AlertPriority.HIGH,
        title="Whale Movement Detected",
        description="Large whale activity detected. 8% of supply moved by Addr1...",
        token_address="So11111111111111111111111111111111111111112",
        amount="5,000",
        timestamp=datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc),
    )


class TestFormatTelegram:
    """Tests for Telegram HTML messages."""

    def test_full_message(self, whale_alert):
        """Message has headline, body, token, amount, time and tags."""
        message = AlertFormatter().format_telegram(whale_alert)

        lines = message.split("\n")
        assert lines[0] == "🚨 <b>Whale Movement Detected</b>"
        assert lines[2] == "🐋 Large whale activity detected. 8% of supply moved by Addr1..."
        assert "🔗 Token: <code>So11111111111111111111111111111111111111112</code>" in message
        assert "💰 Amount: 5,000" in message
        assert "⏰ 2026-10-17 12:00:00 UTC" in message
        assert lines[-1] == "#WHALE #ALERT"

    def test_optional_lines_omitted(self, whale_alert):
        """Token and amount lines only appear when set."""
        whale_alert.token_address = None
        whale_alert.amount = None

        message = AlertFormatter().format_telegram(whale_alert)

        assert "Token:" not in message
        assert "Amount:" not in message

    def test_escapes_html(self, whale_alert):
        """Dynamic text cannot inject markup."""
        whale_alert.description = "Rug <b>now</b> & run"

        message = AlertFormatter().format_telegram(whale_alert)

        assert "Rug &lt;b&gt;now&lt;/b&gt; &amp; run" in message
        assert "<b>now</b>" not in message

    def test_new_token_hashtag(self, whale_alert):
        """Hashtag uses the upper-case type value."""
        whale_alert.alert_type = AlertType.NEW_TOKEN

        assert AlertFormatter().format_telegram(whale_alert).endswith("#NEW_TOKEN #ALERT")


class TestFormatDiscordEmbed:
    """Tests for Discord embeds."""

    def test_embed(self, whale_alert):
        """Embed carries title, color, timestamp, fields and footer."""
        embed = AlertFormatter(footer_text="Footer").format_discord_embed(whale_alert)

        assert embed["title"] == "🐋 Whale Movement Detected"
        assert embed["description"] == whale_alert.description
        assert embed["color"] == 0xFF0000
        assert embed["timestamp"] == "2026-10-17T12:00:00+00:00"
        assert embed["fields"] == [
            {
                "name": "Token Address",
                "value": "`So11111111111111111111111111111111111111112`",
                "inline": True,
            },
            {"name": "Amount", "value": "5,000", "inline": True},
            {"name": "Priority", "value": "HIGH", "inline": True},
        ]
        assert embed["footer"] == {"text": "Footer"}

    @pytest.mark.parametrize(
        "priority,color",
        [
            (AlertPriority.HIGH, 0xFF0000),
            (AlertPriority.MEDIUM, 0xFFA500),
            (AlertPriority.LOW, 0x00FF00),
        ],
    )
    def test_color_by_priority(self, whale_alert, priority, color):
        whale_alert.priority = priority

        assert AlertFormatter().format_discord_embed(whale_alert)["color"] == color

    def test_priority_field_only(self, whale_alert):
        """Without token and amount only the priority field remains."""
        whale_alert.token_address = None
        whale_alert.amount = None

        embed = AlertFormatter().format_discord_embed(whale_alert)

        assert [f["name"] for f in embed["fields"]] == ["Priority"]
