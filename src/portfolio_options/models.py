"""
Option Data Models and Enums

This module provides the value types shared by the symbol codec, the
expiration/moneyness classifiers and the economics calculator.

Key patterns:
- str Enums so plain strings ("call", "long") compare equal and coerce cleanly
- dataclass(frozen=True, slots=True) for transient value records
- Dedicated sentinel for "no finite bound" (never float('inf'))
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union


class OptionType(str, Enum):
    """Option contract type."""

    CALL = "call"
    PUT = "put"

    @property
    def code(self) -> str:
        """Single-character OCC flag (C/P)."""
        return "C" if self is OptionType.CALL else "P"


class OptionPosition(str, Enum):
    """
    Position direction.

    Determines the P/L sign convention: long profits when the option price
    rises, short profits when it falls.
    """

    LONG = "long"
    SHORT = "short"


class Moneyness(str, Enum):
    """Strike vs. spot relationship."""

    ITM = "ITM"  # In the money
    ATM = "ATM"  # Within the ATM tolerance band
    OTM = "OTM"  # Out of the money


class DTECategory(str, Enum):
    """Days-to-expiration urgency bucket for colour coding."""

    EXPIRED = "expired"  # dte < 0
    CRITICAL = "critical"  # 0 <= dte <= 7
    WARNING = "warning"  # 8 <= dte <= 14
    OK = "ok"  # dte > 14


class Unbounded(Enum):
    """
    Sentinel for a profit or loss with no finite bound.

    Not a str/float mixin, so arithmetic or numeric comparison with it
    raises TypeError.
    """

    UNLIMITED = "unlimited"

    def __repr__(self) -> str:
        return "UNLIMITED"


UNLIMITED = Unbounded.UNLIMITED

Bound = Union[float, Unbounded]


@dataclass(frozen=True, slots=True)
class ParsedSymbol:
    """
    Decoded OCC option symbol.

    Attributes:
        ticker: Underlying ticker (as found in the symbol)
        strike: Strike price
        expiration_date: Expiration date
        option_type: Call or put
    """

    ticker: str
    strike: float
    expiration_date: date
    option_type: OptionType


@dataclass(frozen=True, slots=True)
class MaxProfitLoss:
    """
    Maximum profit and maximum loss of a single-leg option position.

    Attributes:
        max_profit: Total max profit in USD, or UNLIMITED
        max_loss: Total max loss in USD, or UNLIMITED
        max_profit_description: Human-readable explanation of max_profit
        max_loss_description: Human-readable explanation of max_loss
    """

    max_profit: Bound
    max_loss: Bound
    max_profit_description: str
    max_loss_description: str

    @property
    def profit_unlimited(self) -> bool:
        return self.max_profit is UNLIMITED

    @property
    def loss_unlimited(self) -> bool:
        return self.max_loss is UNLIMITED
