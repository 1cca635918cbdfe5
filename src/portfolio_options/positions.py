"""
Position Enrichment

Builds AlertableOption records from raw position records (as loaded from a
file or returned by the data layer) by deriving DTE, moneyness and P/L% with
the classifier and economics functions.

A raw record is a mapping with:
- required: ticker (or symbol), option_type, position, strike, contracts,
  and expiration_date (or an option_symbol to read it from)
- optional: option_symbol (generated when missing), spot_price,
  avg_premium, current_price, theta, atm_tolerance_percent

Precomputed dte / moneyness / pl_percent values in the record win over
derived ones.
"""

from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from portfolio_options.alerts.models import AlertableOption
from portfolio_options.economics import unrealized_pl_percent
from portfolio_options.expiration import compute_dte
from portfolio_options.moneyness import DEFAULT_ATM_TOLERANCE_PERCENT, classify_moneyness
from portfolio_options.symbols import DateLike, decode_symbol, encode_symbol


def build_alertable_option(
    record: Mapping[str, Any],
    today: Optional[DateLike] = None,
) -> AlertableOption:
    """
    Enrich one raw position record.

    Args:
        record: Raw position mapping (see module docstring)
        today: Reference day for DTE (default: date.today())

    Returns:
        AlertableOption ready for the alert engine

    Raises:
        KeyError: If a required field is missing
        ValueError: If an enum field or date is invalid
    """
    ticker = str(record.get("ticker") or record["symbol"]).strip().upper()
    option_type = record["option_type"]
    position = record["position"]
    strike = float(record["strike"])
    expiration_date = record.get("expiration_date")

    option_symbol = record.get("option_symbol")
    if expiration_date is None and option_symbol:
        parsed = decode_symbol(option_symbol)
        if parsed is not None:
            expiration_date = parsed.expiration_date
    if not option_symbol:
        if expiration_date is None:
            raise KeyError("expiration_date")
        option_symbol = encode_symbol(ticker, strike, expiration_date, option_type)

    dte = record.get("dte")
    if dte is None and expiration_date is not None:
        dte = compute_dte(expiration_date, today)

    moneyness = record.get("moneyness")
    spot_price = record.get("spot_price")
    if moneyness is None and spot_price is not None:
        moneyness = classify_moneyness(
            option_type,
            float(spot_price),
            strike,
            float(record.get("atm_tolerance_percent", DEFAULT_ATM_TOLERANCE_PERCENT)),
        )

    current_price = record.get("current_price")
    pl_percent = record.get("pl_percent")
    avg_premium = record.get("avg_premium")
    if pl_percent is None and avg_premium is not None and current_price is not None:
        pl_percent = unrealized_pl_percent(position, float(avg_premium), float(current_price))

    theta = record.get("theta")

    return AlertableOption(
        option_symbol=option_symbol,
        ticker=ticker,
        option_type=option_type,
        position=position,
        strike=strike,
        contracts=float(record["contracts"]),
        dte=dte,
        moneyness=moneyness,
        pl_percent=pl_percent,
        theta=None if theta is None else float(theta),
        current_price=None if current_price is None else float(current_price),
    )


def build_alertable_options(
    records: Iterable[Mapping[str, Any]],
    today: Optional[DateLike] = None,
) -> list[AlertableOption]:
    """Enrich every record, in input order."""
    options = [build_alertable_option(record, today) for record in records]
    logger.debug(f"Enriched {len(options)} option positions")
    return options
