"""
Alert Data Models and Enums

Input and output records of the option alert engine.

Key patterns:
- dataclass(frozen=True, slots=True): the engine never mutates its input
- __post_init__ coerces enum fields so callers can pass plain strings
- Optional metrics (None = unknown) skip the checks that need them
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from portfolio_options.models import Moneyness, OptionPosition, OptionType
from portfolio_options.symbols import format_strike


class AlertSeverity(str, Enum):
    """
    Alert severity.

    Ordered by rank: DANGER sorts first, INFO last.
    """

    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    AlertSeverity.DANGER: 0,
    AlertSeverity.WARNING: 1,
    AlertSeverity.INFO: 2,
}


class AlertType(str, Enum):
    """Which check produced the alert."""

    DTE = "dte"
    ITM = "itm"
    PL = "pl"
    THETA = "theta"
    EXPIRING = "expiring"


@dataclass(frozen=True, slots=True)
class AlertableOption:
    """
    Open option position enriched with derived metrics.

    Built by the caller from position data plus classifier/economics output.

    Attributes:
        option_symbol: OCC symbol
        ticker: Underlying ticker
        option_type: Call or put
        position: Long or short
        strike: Strike price
        contracts: Number of contracts
        dte: Days to expiration (None = unknown)
        moneyness: ITM/ATM/OTM (None = unknown)
        pl_percent: Unrealized P/L in percent (None = unknown)
        theta: Theta per share per day (None = unknown)
        current_price: Current option price (None = unknown)

    Raises:
        ValueError: If an enum field holds an unknown value
    """

    option_symbol: str
    ticker: str
    option_type: OptionType
    position: OptionPosition
    strike: float
    contracts: float
    dte: Optional[int] = None
    moneyness: Optional[Moneyness] = None
    pl_percent: Optional[float] = None
    theta: Optional[float] = None
    current_price: Optional[float] = None

    def __post_init__(self):
        """Coerce string enum values (frozen, so via object.__setattr__)."""
        object.__setattr__(self, "option_type", OptionType(self.option_type))
        object.__setattr__(self, "position", OptionPosition(self.position))
        if self.moneyness is not None:
            object.__setattr__(self, "moneyness", Moneyness(self.moneyness))

    @property
    def label(self) -> str:
        """Prefix shared by alert messages, e.g. 'AAPL C $150 LONG'."""
        return (
            f"{self.ticker} {self.option_type.code} "
            f"${format_strike(self.strike)} {self.position.value.upper()}"
        )


@dataclass(frozen=True, slots=True)
class OptionAlert:
    """
    A single alert for one option position.

    Attributes:
        type: Check that produced the alert
        severity: danger, warning or info
        message: Full sentence for lists and tooltips
        short_message: Compact text for badges
        option_symbol: OCC symbol of the position
        ticker: Underlying ticker
    """

    type: AlertType
    severity: AlertSeverity
    message: str
    short_message: str
    option_symbol: str
    ticker: str


@dataclass(frozen=True, slots=True)
class AlertCounts:
    """Alert tally by severity."""

    danger: int = 0
    warning: int = 0
    info: int = 0
    total: int = 0
