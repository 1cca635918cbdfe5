"""
Option Alert Rules

Four independent threshold checks. Each returns at most one alert per option;
the engine runs them in priority order and concatenates the results.

Rules:
- DTECheck (Priority 1): dte <= 0 -> expiring, <= 7 danger, <= 14 warning
- ITMCheck (Priority 2): ITM and dte <= 14 -> exercise/assignment decision
- PLCheck (Priority 3): P/L% <= -50 danger, <= -25 warning, >= 50 info
- ThetaCheck (Priority 4): long only, daily decay >= $10 -> warning

Key patterns:
- Thresholds injected at construction (AlertThresholds, immutable)
- Missing metrics (None) skip the rule instead of raising
- message and short_message are built from the same values
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from loguru import logger

from portfolio_options.alerts.config import DEFAULT_THRESHOLDS, AlertThresholds
from portfolio_options.alerts.models import (
    AlertableOption,
    AlertSeverity,
    AlertType,
    OptionAlert,
)
from portfolio_options.economics import CONTRACT_MULTIPLIER
from portfolio_options.models import Moneyness, OptionPosition


def _whole(value: float) -> str:
    """Whole-number text, halves rounded away from zero (-50.5 -> "-51")."""
    return str(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _make_alert(
    option: AlertableOption,
    alert_type: AlertType,
    severity: AlertSeverity,
    message: str,
    short_message: str,
) -> OptionAlert:
    return OptionAlert(
        type=alert_type,
        severity=severity,
        message=message,
        short_message=short_message,
        option_symbol=option.option_symbol,
        ticker=option.ticker,
    )


class DTECheck:
    """
    Days-to-expiration rule (Priority 1).

    - dte <= 0 → DANGER, type EXPIRING
    - dte <= dte_danger → DANGER
    - dte <= dte_warning → WARNING
    - otherwise no alert (a 15-30 day info level is too noisy)
    """

    priority = 1
    name = "dte"

    def __init__(self, thresholds: AlertThresholds = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def evaluate(self, option: AlertableOption) -> Optional[OptionAlert]:
        dte = option.dte
        if dte is None:
            return None

        if dte <= 0:
            return _make_alert(
                option,
                AlertType.EXPIRING,
                AlertSeverity.DANGER,
                f"{option.label} expires today!",
                "Expires today!",
            )

        if dte <= self.thresholds.dte_danger:
            severity = AlertSeverity.DANGER
            message = f"{option.label} - only {dte} days to expiration"
        elif dte <= self.thresholds.dte_warning:
            severity = AlertSeverity.WARNING
            message = f"{option.label} - {dte} days to expiration"
        else:
            return None

        return _make_alert(option, AlertType.DTE, severity, message, f"{dte}D to expiration")


class ITMCheck:
    """
    In-the-money near expiration rule (Priority 2).

    An ITM position close to expiry needs a decision: long holders exercise
    or sell, short writers face assignment. DANGER within dte_danger days,
    WARNING up to dte_warning.
    """

    priority = 2
    name = "itm"

    def __init__(self, thresholds: AlertThresholds = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def evaluate(self, option: AlertableOption) -> Optional[OptionAlert]:
        if option.moneyness is not Moneyness.ITM:
            return None
        if option.dte is None or option.dte > self.thresholds.dte_warning:
            return None

        severity = (
            AlertSeverity.DANGER
            if option.dte <= self.thresholds.dte_danger
            else AlertSeverity.WARNING
        )

        if option.position is OptionPosition.LONG:
            return _make_alert(
                option,
                AlertType.ITM,
                severity,
                f"{option.label} is ITM - consider exercise or sale",
                "ITM - decision",
            )
        return _make_alert(
            option,
            AlertType.ITM,
            severity,
            f"{option.label} is ITM - assignment risk",
            "ITM - risk",
        )


class PLCheck:
    """
    Profit/loss extremes rule (Priority 3).

    - P/L% <= pl_danger_loss → DANGER (large loss)
    - P/L% <= pl_warning_loss → WARNING (loss)
    - P/L% >= pl_info_gain → INFO (consider taking profit)
    """

    priority = 3
    name = "pl"

    def __init__(self, thresholds: AlertThresholds = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def evaluate(self, option: AlertableOption) -> Optional[OptionAlert]:
        if option.pl_percent is None:
            return None

        pct = _whole(option.pl_percent)

        if option.pl_percent <= self.thresholds.pl_danger_loss:
            return _make_alert(
                option,
                AlertType.PL,
                AlertSeverity.DANGER,
                f"{option.label} - large loss ({pct}%)",
                f"{pct}% loss",
            )

        if option.pl_percent <= self.thresholds.pl_warning_loss:
            return _make_alert(
                option,
                AlertType.PL,
                AlertSeverity.WARNING,
                f"{option.label} - loss {pct}%",
                f"{pct}% loss",
            )

        if option.pl_percent >= self.thresholds.pl_info_gain:
            return _make_alert(
                option,
                AlertType.PL,
                AlertSeverity.INFO,
                f"{option.label} - gain {pct}%, consider taking profit",
                f"{pct}% gain",
            )

        return None


class ThetaCheck:
    """
    Theta decay rule (Priority 4).

    Only long positions bleed time value. Daily decay in USD is
    |theta| × contracts × 100; at or above theta_warning → WARNING.
    """

    priority = 4
    name = "theta"

    def __init__(self, thresholds: AlertThresholds = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def evaluate(self, option: AlertableOption) -> Optional[OptionAlert]:
        if option.theta is None:
            return None
        if option.position is not OptionPosition.LONG:
            return None

        daily_decay = abs(option.theta) * option.contracts * CONTRACT_MULTIPLIER
        if daily_decay < self.thresholds.theta_warning:
            return None

        logger.debug(f"Theta decay ${daily_decay:.2f}/day on {option.option_symbol}")

        return _make_alert(
            option,
            AlertType.THETA,
            AlertSeverity.WARNING,
            f"{option.label} - high theta decay (${_whole(daily_decay)}/day)",
            f"${_whole(daily_decay)}/day decay",
        )


def default_rules(thresholds: AlertThresholds = DEFAULT_THRESHOLDS) -> list:
    """
    Build the four standard rules bound to the given thresholds.

    Example:
        >>> [rule.name for rule in default_rules()]
        ['dte', 'itm', 'pl', 'theta']
    """
    return [
        DTECheck(thresholds),
        ITMCheck(thresholds),
        PLCheck(thresholds),
        ThetaCheck(thresholds),
    ]
