"""
Moneyness Classification

ITM/ATM/OTM from the current spot price. Recomputed on every call since the
spot price moves continuously; nothing here is cached.
"""

import math
from typing import Union

from portfolio_options.models import Moneyness, OptionType

DEFAULT_ATM_TOLERANCE_PERCENT = 2.0

_LABELS = {
    Moneyness.ITM: "In The Money",
    Moneyness.ATM: "At The Money",
    Moneyness.OTM: "Out of The Money",
}


def classify_moneyness(
    option_type: Union[OptionType, str],
    spot_price: float,
    strike: float,
    atm_tolerance_percent: float = DEFAULT_ATM_TOLERANCE_PERCENT,
) -> Moneyness:
    """
    Determine option moneyness.

    Args:
        option_type: 'call' or 'put'
        spot_price: Current underlying price
        strike: Strike price
        atm_tolerance_percent: Band around the strike treated as ATM, in
            percent of the strike (inclusive, default 2%)

    Returns:
        Moneyness.ATM inside the band regardless of type, otherwise ITM/OTM
        by direction (call: spot > strike, put: spot < strike)
    """
    if strike:
        percent_diff = abs(spot_price - strike) / strike * 100
    else:
        # Zero strike: no meaningful band, never ATM
        percent_diff = math.inf

    if percent_diff <= atm_tolerance_percent:
        return Moneyness.ATM

    if OptionType(option_type) is OptionType.CALL:
        return Moneyness.ITM if spot_price > strike else Moneyness.OTM
    return Moneyness.ITM if spot_price < strike else Moneyness.OTM


def moneyness_label(moneyness: Union[Moneyness, str]) -> str:
    """Human-readable moneyness label."""
    return _LABELS[Moneyness(moneyness)]
