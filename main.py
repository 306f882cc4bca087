# main.py
"""Command-line entry point for the token alert engine."""
import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml
from dotenv import load_dotenv

from alerts import AlertEngine, InMemoryAlertStore
from analysis import JsonFileAnalysisExecutor
from config.settings import Settings
from notifications import NotificationService
from risk import RiskScorer, TokenRiskData
from scoring import PairSnapshot, TokenQualityAnalyzer


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


def load_and_validate_config(config_path: Path) -> Settings:
    """Load and validate configuration.

    Args:
        config_path: Path to the YAML settings file.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If the config file is missing or invalid.
    """
    # Load environment variables
    load_dotenv()

    if not config_path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(config_path)
        logger.info(f"✓ Settings loaded from {config_path}")
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.system.log_level.upper())
    return settings


def build_engine(
    settings: Settings, analysis_path: Path, notification_service: NotificationService
) -> AlertEngine:
    """Wire the alert engine to a file-backed analysis executor."""
    return AlertEngine(
        config=settings.alerts,
        executor=JsonFileAnalysisExecutor(analysis_path),
        notification_service=notification_service,
        store=InMemoryAlertStore(max_alerts=settings.alert_store.max_alerts),
    )


async def run_monitor(settings: Settings, token_address: str, analysis_path: Path, notify: bool) -> int:
    """Monitor one token and log the alerts it raises."""
    notification_service = NotificationService(settings.build_notification_settings())
    engine = build_engine(settings, analysis_path, notification_service)
    if not notify:
        engine.update_config(notifications_enabled=False)

    try:
        alerts = await engine.monitor_token(token_address)
    finally:
        await notification_service.stop()

    if not alerts:
        logger.info(f"No alerts for {token_address}")
        return 0

    for alert in alerts:
        amount = f" ({alert.amount})" if alert.amount else ""
        logger.info(f"[{alert.priority.value.upper()}] {alert.title}: {alert.description}{amount}")
    return 0


async def run_test_notifications(settings: Settings) -> int:
    """Send a test alert to every channel and report each result."""
    service = NotificationService(settings.build_notification_settings())
    try:
        results = await service.test_channels()
    finally:
        await service.stop()

    for channel, ok in results.items():
        status = "✓" if ok else "✗"
        logger.info(f"{status} {channel}")
    return 0 if any(results.values()) else 1


def load_token(token_path: Path) -> TokenRiskData:
    """Read token risk attributes from a YAML mapping.

    Raises:
        SystemExit: If the file is missing, unreadable, or its keys do not
            match the token attributes.
    """
    try:
        with open(token_path) as f:
            return TokenRiskData(**(yaml.safe_load(f) or {}))
    except Exception as e:
        logger.error(f"Failed to parse {token_path}: {e}")
        sys.exit(1)


def run_risk(settings: Settings, token_path: Path) -> int:
    """Score a token described in a YAML file."""
    data = load_token(token_path)

    score = RiskScorer(weights=settings.risk.weights).calculate(data)

    logger.info(f"Risk score: {score.overall_score}/100 ({score.risk_level.value})")
    logger.info(score.summary)
    for factor in score.factors:
        logger.info(f"  {factor.name}: {factor.score:.0f} (weight {factor.weight:g}) - {factor.description}")
    for recommendation in score.recommendations:
        logger.info(f"  • {recommendation}")
    return 0


def load_pairs(pairs_path: Path) -> list[PairSnapshot]:
    """Read pair snapshots from a YAML list."""
    with open(pairs_path) as f:
        rows = yaml.safe_load(f) or []

    pairs = []
    for row in rows:
        created = row["pair_created_at"]
        if isinstance(created, str):
            created = datetime.fromisoformat(created.replace("Z", "+00:00"))
        pairs.append(PairSnapshot(**{**row, "pair_created_at": created}))
    return pairs


def run_quality(pairs_path: Path) -> int:
    """Classify DEX pairs and explain each verdict."""
    try:
        pairs = load_pairs(pairs_path)
    except Exception as e:
        logger.error(f"Failed to parse {pairs_path}: {e}")
        sys.exit(1)

    analyzer = TokenQualityAnalyzer()

    for pair in pairs:
        quality = analyzer.analyze(pair)
        explanation = analyzer.explain(pair, quality)
        logger.info(
            f"{pair.base_symbol}: {quality.score}/100 {quality.category.value} "
            f"-> {quality.recommendation.value} (should I buy? {explanation.should_i_buy})"
        )
        logger.info(f"  {explanation.why_reason}")

    buckets = analyzer.filter_tokens(pairs)
    logger.info(
        f"Diamonds: {len(buckets.diamonds)}, Safe: {len(buckets.safe)}, "
        f"Trending: {len(buckets.trending)}, Avoid: {len(buckets.avoid)}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Meme-coin risk scoring and alerting")
    parser.add_argument(
        "--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to settings YAML"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    monitor = subparsers.add_parser("monitor", help="Analyze a token and raise alerts")
    monitor.add_argument("address", help="Token address")
    monitor.add_argument("--analysis", type=Path, required=True, help="Analysis payload JSON")
    monitor.add_argument("--notify", action="store_true", help="Send alerts to channels")

    subparsers.add_parser("test-notifications", help="Send a test alert to every channel")

    risk = subparsers.add_parser("risk", help="Score a token's risk")
    risk.add_argument("token", type=Path, help="Token attributes YAML")

    quality = subparsers.add_parser("quality", help="Classify DEX pairs by quality")
    quality.add_argument("pairs", type=Path, help="Pair snapshots YAML")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected command.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    settings = load_and_validate_config(args.config)

    if args.command == "monitor":
        return asyncio.run(run_monitor(settings, args.address, args.analysis, args.notify))
    if args.command == "test-notifications":
        return asyncio.run(run_test_notifications(settings))
    if args.command == "risk":
        return run_risk(settings, args.token)
    return run_quality(args.pairs)


if __name__ == "__main__":
    sys.exit(main())
