"""Shared models for the token alert engine."""

from models.alert_types import ALERT_TITLES, AlertPriority, AlertType, NotificationChannel

__all__ = ["ALERT_TITLES", "AlertPriority", "AlertType", "NotificationChannel"]
