"""
Option Alert Engine

Stateless rule evaluator run once per refresh over the full set of open
option positions.

Key patterns:
- Rule registration: rules sorted by priority, replaced by name
- All rules run (no first-wins): every check contributes at most one alert
- Stable severity sort: DANGER before WARNING before INFO, ties keep
  per-option, per-rule generation order
- No alert history, no deduplication across calls
"""

from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

from loguru import logger

from portfolio_options.alerts.config import DEFAULT_THRESHOLDS, AlertThresholds
from portfolio_options.alerts.models import (
    AlertableOption,
    AlertCounts,
    AlertSeverity,
    OptionAlert,
)
from portfolio_options.alerts.rules import default_rules


@runtime_checkable
class AlertRule(Protocol):
    """
    Alert rule protocol.

    Attributes:
        priority: Evaluation order (lower runs first)
        name: Unique rule name

    Methods:
        evaluate: Return an alert for the option, or None
    """

    priority: int
    name: str

    def evaluate(self, option: AlertableOption) -> Optional[OptionAlert]:
        ...


class AlertEngine:
    """
    Evaluate alert rules for option positions.

    Attributes:
        thresholds: Thresholds the default rules were built with
        _rules: Registered rules sorted by priority

    Example:
        ```python
        engine = AlertEngine(AlertThresholds(dte_danger=5))
        alerts = engine.generate_all_alerts(options)
        ```
    """

    def __init__(
        self,
        thresholds: Optional[AlertThresholds] = None,
        rules: Optional[Sequence[AlertRule]] = None,
    ):
        """
        Initialize alert engine.

        Args:
            thresholds: Rule thresholds (default: AlertThresholds())
            rules: Rules to register instead of the four standard checks
        """
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self._rules: list[AlertRule] = []

        for rule in rules if rules is not None else default_rules(self.thresholds):
            self.register_rule(rule)

    def register_rule(self, rule: AlertRule) -> None:
        """
        Register a rule, replacing any rule with the same name.

        Raises:
            TypeError: If rule does not implement AlertRule
        """
        if not isinstance(rule, AlertRule):
            raise TypeError(f"Not an alert rule: {rule!r}")

        self._rules = [r for r in self._rules if r.name != rule.name]
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.priority)

    @property
    def rule_names(self) -> list[str]:
        """Registered rule names in evaluation order."""
        return [rule.name for rule in self._rules]

    def generate_alerts_for_option(self, option: AlertableOption) -> list[OptionAlert]:
        """
        Run every rule against one option.

        Returns:
            Alerts in rule order (unsorted by severity)
        """
        alerts = []
        for rule in self._rules:
            alert = rule.evaluate(option)
            if alert is not None:
                alerts.append(alert)
        return alerts

    def generate_all_alerts(self, options: Iterable[AlertableOption]) -> list[OptionAlert]:
        """
        Run every rule against every option.

        Returns:
            All alerts, DANGER first, then WARNING, then INFO
        """
        all_alerts: list[OptionAlert] = []
        evaluated = 0

        for option in options:
            all_alerts.extend(self.generate_alerts_for_option(option))
            evaluated += 1

        logger.debug(f"Generated {len(all_alerts)} alerts for {evaluated} options")

        return sort_alerts_by_severity(all_alerts)


def sort_alerts_by_severity(alerts: Iterable[OptionAlert]) -> list[OptionAlert]:
    """Stable sort by severity rank; equal severities keep their order."""
    return sorted(alerts, key=lambda a: AlertSeverity(a.severity).rank)


def generate_alerts_for_option(
    option: AlertableOption,
    thresholds: Optional[AlertThresholds] = None,
) -> list[OptionAlert]:
    """Alerts for one option with the standard rules."""
    return AlertEngine(thresholds).generate_alerts_for_option(option)


def generate_all_alerts(
    options: Iterable[AlertableOption],
    thresholds: Optional[AlertThresholds] = None,
) -> list[OptionAlert]:
    """Severity-sorted alerts for all options with the standard rules."""
    return AlertEngine(thresholds).generate_all_alerts(options)


def count_alerts_by_severity(alerts: Sequence[OptionAlert]) -> AlertCounts:
    """Tally alerts by severity."""
    return AlertCounts(
        danger=sum(1 for a in alerts if a.severity == AlertSeverity.DANGER),
        warning=sum(1 for a in alerts if a.severity == AlertSeverity.WARNING),
        info=sum(1 for a in alerts if a.severity == AlertSeverity.INFO),
        total=len(alerts),
    )


def get_alerts_for_option(
    alerts: Iterable[OptionAlert], option_symbol: str
) -> list[OptionAlert]:
    """Alerts whose option_symbol matches exactly."""
    return [a for a in alerts if a.option_symbol == option_symbol]


def get_highest_severity(alerts: Sequence[OptionAlert]) -> Optional[AlertSeverity]:
    """
    Most severe level present.

    Returns:
        DANGER, WARNING or INFO, or None for no alerts
    """
    if not alerts:
        return None

    severities = {AlertSeverity(a.severity) for a in alerts}
    if AlertSeverity.DANGER in severities:
        return AlertSeverity.DANGER
    if AlertSeverity.WARNING in severities:
        return AlertSeverity.WARNING
    return AlertSeverity.INFO
