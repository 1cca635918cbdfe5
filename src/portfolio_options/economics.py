"""
Position Economics

Value, unrealized P/L, breakeven, max profit/loss and a delta-based
probability of profit for single-leg option positions.

Key patterns:
- Plain functions over plain numbers (no validation; the entry form validates)
- Sign convention by position: long profits when the option price rises,
  short profits when it falls
- Unbounded payoffs use the UNLIMITED sentinel, never float('inf')
"""

from typing import Optional, Union

from portfolio_options.models import (
    UNLIMITED,
    MaxProfitLoss,
    OptionPosition,
    OptionType,
)

CONTRACT_MULTIPLIER = 100  # Shares per US equity option contract

_UNLIMITED_DESCRIPTION = "Unlimited (stock can rise indefinitely)"


def position_value(
    contracts: float,
    premium_per_share: float,
    multiplier: float = CONTRACT_MULTIPLIER,
) -> float:
    """
    Total value of an option position.

    Args:
        contracts: Number of contracts
        premium_per_share: Option price per share
        multiplier: Shares per contract (default 100)
    """
    return contracts * premium_per_share * multiplier


def unrealized_pl(
    position: Union[OptionPosition, str],
    contracts: float,
    avg_premium: float,
    current_price: float,
    multiplier: float = CONTRACT_MULTIPLIER,
) -> float:
    """
    Unrealized P/L in USD.

    Args:
        position: 'long' or 'short'
        contracts: Number of contracts
        avg_premium: Average opening premium per share
        current_price: Current option price per share
        multiplier: Shares per contract (default 100)

    Returns:
        Profit (positive) or loss (negative)

    Example:
        >>> unrealized_pl('short', 2, 3.0, 2.0)
        200.0
    """
    cost_basis = contracts * avg_premium * multiplier
    current_value = contracts * current_price * multiplier

    if OptionPosition(position) is OptionPosition.LONG:
        return current_value - cost_basis
    return cost_basis - current_value


def unrealized_pl_percent(
    position: Union[OptionPosition, str],
    avg_premium: float,
    current_price: float,
) -> float:
    """
    Unrealized P/L as a percentage of the opening premium.

    Returns 0 when avg_premium is 0.
    """
    if avg_premium == 0:
        return 0.0

    if OptionPosition(position) is OptionPosition.LONG:
        return (current_price - avg_premium) / avg_premium * 100
    return (avg_premium - current_price) / avg_premium * 100


def breakeven(
    option_type: Union[OptionType, str],
    strike: float,
    premium: float,
) -> float:
    """Breakeven underlying price at expiration: call strike + premium, put strike - premium."""
    if OptionType(option_type) is OptionType.CALL:
        return strike + premium
    return strike - premium


def max_profit_loss(
    option_type: Union[OptionType, str],
    position: Union[OptionPosition, str],
    strike: float,
    premium: float,
    contracts: float = 1,
    multiplier: float = CONTRACT_MULTIPLIER,
) -> MaxProfitLoss:
    """
    Maximum profit and loss of a single-leg position held to expiration.

    - Long call: loss = premium paid, profit unlimited
    - Long put: loss = premium paid, profit = (strike - premium) if stock goes to 0
    - Short call: profit = premium received, loss unlimited
    - Short put: profit = premium received, loss = (strike - premium) if stock goes to 0

    Put-side bounds are floored at 0.

    Args:
        option_type: 'call' or 'put'
        position: 'long' or 'short'
        strike: Strike price
        premium: Premium paid/received per share
        contracts: Number of contracts (default 1)
        multiplier: Shares per contract (default 100)

    Returns:
        MaxProfitLoss with numeric bounds or UNLIMITED
    """
    option_type = OptionType(option_type)
    position = OptionPosition(position)
    total_premium = premium * contracts * multiplier

    if position is OptionPosition.LONG:
        paid = f"{total_premium:.0f} USD (premium paid)"
        if option_type is OptionType.CALL:
            return MaxProfitLoss(
                max_profit=UNLIMITED,
                max_loss=total_premium,
                max_profit_description=_UNLIMITED_DESCRIPTION,
                max_loss_description=paid,
            )

        max_profit = max(0.0, (strike - premium) * contracts * multiplier)
        return MaxProfitLoss(
            max_profit=max_profit,
            max_loss=total_premium,
            max_profit_description=f"{max_profit:.0f} USD (stock falls to 0)",
            max_loss_description=paid,
        )

    received = f"{total_premium:.0f} USD (premium received)"
    if option_type is OptionType.CALL:
        return MaxProfitLoss(
            max_profit=total_premium,
            max_loss=UNLIMITED,
            max_profit_description=received,
            max_loss_description=_UNLIMITED_DESCRIPTION,
        )

    max_loss = max(0.0, (strike - premium) * contracts * multiplier)
    return MaxProfitLoss(
        max_profit=total_premium,
        max_loss=max_loss,
        max_profit_description=received,
        max_loss_description=f"{max_loss:.0f} USD (stock falls to 0)",
    )


def probability_of_profit(
    delta: Optional[float],
    position: Union[OptionPosition, str],
) -> Optional[float]:
    """
    Estimate probability of profit from delta.

    |delta| approximates the probability of expiring in the money. Long
    positions profit from ITM expiry, short positions from the complement.

    Args:
        delta: Option delta (0..1 for calls, -1..0 for puts), or None
        position: 'long' or 'short'

    Returns:
        Probability in percent, or None when delta is unknown
    """
    if delta is None:
        return None

    prob_itm = abs(delta) * 100

    if OptionPosition(position) is OptionPosition.LONG:
        return prob_itm
    return 100 - prob_itm
