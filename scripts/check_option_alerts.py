#!/usr/bin/env python
"""
Option Alerts Check Script

Reads open option positions from a YAML file, derives DTE, moneyness and
P/L%, and logs the resulting alerts sorted by severity.

Positions file:
    positions:
      - ticker: AAPL
        option_type: call
        position: long
        strike: 150
        contracts: 2
        expiration_date: 2025-01-17
        spot_price: 158.2
        avg_premium: 4.10
        current_price: 8.35
        theta: -0.12

Exit codes:
- 0: No danger alerts
- 1: At least one danger alert
- 2: Invalid input

Usage:
    python scripts/check_option_alerts.py positions.yaml
    python scripts/check_option_alerts.py positions.yaml --config config/alert_thresholds.yaml -v
"""

import argparse
import sys
from pathlib import Path

import yaml
from loguru import logger

from portfolio_options.alerts import (
    AlertEngine,
    AlertSeverity,
    count_alerts_by_severity,
    load_alert_thresholds,
)
from portfolio_options.log import setup_logging
from portfolio_options.positions import build_alertable_options


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Check alerts for open option positions")
    parser.add_argument("positions", type=Path, help="YAML file with a 'positions' list")
    parser.add_argument("--config", default=None, help="Alert thresholds YAML")
    parser.add_argument("--as-of", default=None, help="Reference date (YYYY-MM-DD) for DTE")
    parser.add_argument("--log-file", default=None, help="Optional log file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


def load_position_records(path: Path) -> list:
    """
    Read the raw position records from a YAML file.

    Accepts a mapping with a 'positions' list or a bare list.

    Raises:
        ValueError: If the file does not hold a list of mappings
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    records = data.get("positions", []) if isinstance(data, dict) else data
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"Expected a list of position mappings in {path}")
    return records


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging("DEBUG" if args.verbose else "INFO", args.log_file)

    try:
        thresholds = load_alert_thresholds(args.config)
        records = load_position_records(args.positions)
        options = build_alertable_options(records, today=args.as_of)
    except (OSError, KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Could not load positions: {e}")
        return 2

    alerts = AlertEngine(thresholds).generate_all_alerts(options)

    log_by_severity = {
        AlertSeverity.DANGER: logger.error,
        AlertSeverity.WARNING: logger.warning,
        AlertSeverity.INFO: logger.info,
    }
    for alert in alerts:
        log_by_severity[alert.severity](f"[{alert.type.value}] {alert.message}")

    counts = count_alerts_by_severity(alerts)
    logger.info(
        f"{len(options)} positions, {counts.total} alerts "
        f"({counts.danger} danger, {counts.warning} warning, {counts.info} info)"
    )

    return 1 if counts.danger else 0


if __name__ == "__main__":
    sys.exit(main())
