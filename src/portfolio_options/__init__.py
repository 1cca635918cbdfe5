"""
Portfolio Options Package

Calculation library for option positions in a portfolio tracker: OCC symbol
codec, DTE and moneyness classification, position economics and rule-based
alerts. Pure and synchronous; no persistence, no network I/O.

Key exports:
- encode_symbol, decode_symbol, is_valid_symbol: OCC symbol codec
- compute_dte, classify_dte, classify_moneyness: Classifiers
- unrealized_pl, breakeven, max_profit_loss, ...: Position economics
- portfolio_options.alerts: Alert engine
"""

from portfolio_options.economics import (
    CONTRACT_MULTIPLIER,
    breakeven,
    max_profit_loss,
    position_value,
    probability_of_profit,
    unrealized_pl,
    unrealized_pl_percent,
)
from portfolio_options.expiration import (
    classify_dte,
    compute_dte,
    format_dte,
    is_valid_expiration,
)
from portfolio_options.models import (
    UNLIMITED,
    DTECategory,
    MaxProfitLoss,
    Moneyness,
    OptionPosition,
    OptionType,
    ParsedSymbol,
    Unbounded,
)
from portfolio_options.moneyness import classify_moneyness, moneyness_label
from portfolio_options.symbols import (
    decode_symbol,
    encode_symbol,
    format_option_display,
    format_option_short,
    format_strike,
    is_valid_symbol,
)

__version__ = "1.0.0"

__all__ = [
    "OptionType",
    "OptionPosition",
    "Moneyness",
    "DTECategory",
    "Unbounded",
    "UNLIMITED",
    "ParsedSymbol",
    "MaxProfitLoss",
    "encode_symbol",
    "decode_symbol",
    "is_valid_symbol",
    "format_option_display",
    "format_option_short",
    "format_strike",
    "compute_dte",
    "classify_dte",
    "format_dte",
    "is_valid_expiration",
    "classify_moneyness",
    "moneyness_label",
    "CONTRACT_MULTIPLIER",
    "position_value",
    "unrealized_pl",
    "unrealized_pl_percent",
    "breakeven",
    "max_profit_loss",
    "probability_of_profit",
]
