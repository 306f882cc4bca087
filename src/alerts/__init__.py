"""Alert detection, history and statistics."""

from alerts.alert_engine import AlertEngine
from alerts.detectors import DETECTORS, Detection, run_detectors
from alerts.models import AlertStats, AlertTrigger
from alerts.settings import AlertConfig, AlertStoreSettings
from alerts.store import AlertStore, InMemoryAlertStore

__all__ = [
    "DETECTORS",
    "AlertConfig",
    "AlertEngine",
    "AlertStats",
    "AlertStore",
    "AlertStoreSettings",
    "AlertTrigger",
    "Detection",
    "InMemoryAlertStore",
    "run_detectors",
]
