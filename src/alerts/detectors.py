"""Alert detectors over a validated analysis payload.

Each detector looks at one section of the analysis and returns a
Detection when its condition holds, or None. Detectors run in the
fixed order of DETECTORS, which is the order alerts are returned in.
"""

from dataclasses import dataclass
from typing import Callable

from analysis.models import AnalysisData
from models.alert_types import AlertType
from models.numbers import format_amount, plain_number

from .settings import AlertConfig

WHALE_SUPPLY_PERCENT = 5
NEW_TOKEN_MAX_AGE_HOURS = 24


@dataclass
class Detection:
    """What a detector found, before it becomes an alert."""

    alert_type: AlertType
    description: str
    wallet_address: str | None = None
    amount: str | None = None


def detect_whale(data: AnalysisData, config: AlertConfig) -> Detection | None:
    """Flag the first top holder above 5% of supply or the whale threshold."""
    if data.holder_analysis is None:
        return None

    for holder in data.holder_analysis.top_holders:
        if holder.percentage > WHALE_SUPPLY_PERCENT or holder.amount > config.whale_threshold:
            address = holder.address or "unknown"
            return Detection(
                alert_type=AlertType.WHALE,
                description=(
                    f"Large whale activity detected. {plain_number(holder.percentage)}% "
                    f"of supply moved by {address[:8]}..."
                ),
                wallet_address=holder.address,
                amount=format_amount(holder.amount),
            )
    return None


def detect_volume_spike(data: AnalysisData, config: AlertConfig) -> Detection | None:
    """Flag a 24h volume change above the spike threshold."""
    volume = data.volume_analysis
    if volume is None or volume.change_24h <= config.volume_spike_threshold:
        return None

    return Detection(
        alert_type=AlertType.VOLUME,
        description=(
            f"Volume spike detected! {plain_number(volume.change_24h)}x increase in 24h volume."
        ),
        amount=format_amount(volume.volume_24h) if volume.volume_24h is not None else None,
    )


def detect_rug_pull(data: AnalysisData, config: AlertConfig) -> Detection | None:
    """Flag a rug-pull confidence above the configured level."""
    rug = data.rug_analysis
    if rug is None or rug.confidence <= config.rug_pull_confidence:
        return None

    description = f"Rug pull detected! Confidence: {plain_number(rug.confidence)}%."
    if rug.reasons:
        description += f" {', '.join(rug.reasons)}"
    return Detection(alert_type=AlertType.RUG, description=description)


def detect_new_token(data: AnalysisData, config: AlertConfig) -> Detection | None:
    """Flag a token younger than 24 hours."""
    token = data.token_analysis
    if token is None or token.age >= NEW_TOKEN_MAX_AGE_HOURS:
        return None

    return Detection(
        alert_type=AlertType.NEW_TOKEN,
        description=(
            f"New token launched: {token.name or 'Unknown'} ({token.symbol or 'Unknown'})"
        ),
    )


def detect_honeypot(data: AnalysisData, config: AlertConfig) -> Detection | None:
    """Flag a token that cannot be sold."""
    honeypot = data.honeypot_analysis
    if honeypot is None or not honeypot.is_honeypot:
        return None

    description = "Honeypot detected! Token is not sellable."
    if honeypot.risk_factors:
        description += f" Risk factors: {', '.join(honeypot.risk_factors)}"
    return Detection(alert_type=AlertType.HONEYPOT, description=description)


Detector = Callable[[AnalysisData, AlertConfig], Detection | None]

DETECTORS: list[Detector] = [
    detect_whale,
    detect_volume_spike,
    detect_rug_pull,
    detect_new_token,
    detect_honeypot,
]


def run_detectors(data: AnalysisData, config: AlertConfig) -> list[Detection]:
    """Run every detector in order and collect what fired."""
    detections = []
    for detector in DETECTORS:
        detection = detector(data, config)
        if detection is not None:
            detections.append(detection)
    return detections
