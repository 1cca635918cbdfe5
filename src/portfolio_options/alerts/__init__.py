"""
Option Alerts Package

Rule-based alerts for open option positions.

Exports:
- AlertEngine: Rule evaluator (thresholds bound at construction)
- AlertThresholds, load_alert_thresholds: Threshold configuration
- AlertableOption, OptionAlert, AlertSeverity, AlertType, AlertCounts: Models
- generate_alerts_for_option, generate_all_alerts: Standard-rule shortcuts
- count_alerts_by_severity, get_alerts_for_option, get_highest_severity

Example:
    ```python
    from portfolio_options.alerts import AlertableOption, generate_all_alerts

    alerts = generate_all_alerts([
        AlertableOption(
            option_symbol="AAPL250117C00150000",
            ticker="AAPL",
            option_type="call",
            position="long",
            strike=150,
            contracts=1,
            dte=5,
            moneyness="ITM",
        ),
    ])
    ```
"""

from portfolio_options.alerts.config import (
    DEFAULT_THRESHOLDS,
    AlertThresholds,
    load_alert_thresholds,
)
from portfolio_options.alerts.engine import (
    AlertEngine,
    AlertRule,
    count_alerts_by_severity,
    generate_alerts_for_option,
    generate_all_alerts,
    get_alerts_for_option,
    get_highest_severity,
    sort_alerts_by_severity,
)
from portfolio_options.alerts.models import (
    AlertableOption,
    AlertCounts,
    AlertSeverity,
    AlertType,
    OptionAlert,
)
from portfolio_options.alerts.rules import (
    DTECheck,
    ITMCheck,
    PLCheck,
    ThetaCheck,
    default_rules,
)

__all__ = [
    "AlertEngine",
    "AlertRule",
    "AlertThresholds",
    "DEFAULT_THRESHOLDS",
    "load_alert_thresholds",
    "AlertableOption",
    "AlertCounts",
    "AlertSeverity",
    "AlertType",
    "OptionAlert",
    "DTECheck",
    "ITMCheck",
    "PLCheck",
    "ThetaCheck",
    "default_rules",
    "generate_alerts_for_option",
    "generate_all_alerts",
    "count_alerts_by_severity",
    "get_alerts_for_option",
    "get_highest_severity",
    "sort_alerts_by_severity",
]
