"""
OCC Option Symbol Codec

Encodes and decodes the standardized option contract identifier:

    [Ticker][YYMMDD][C/P][Strike x 1000, 8 digits zero padded]

Example: AAPL250117C00150000 -> AAPL, 2025-01-17, call, $150.00

Two formats are in circulation:
- Compact (no ticker padding, 16-21 chars), the format this module emits and
  the one quote providers use.
- Legacy padded (ticker padded with spaces to 6, always 21 chars), still found
  in older transaction records.

decode_symbol() accepts both. is_valid_symbol() only accepts the legacy
padded form; the two checks are intentionally not unified.
"""

import math
import re
from datetime import date, datetime
from typing import Optional, Union

from portfolio_options.models import OptionType, ParsedSymbol

DateLike = Union[date, datetime, str]

MIN_SYMBOL_LENGTH = 16  # 1 char ticker + 6 date + 1 type + 8 strike
MAX_SYMBOL_LENGTH = 21  # 6 char ticker + 15
STRIKE_DIGITS = 8
STRIKE_SCALE = 1000
CENTURY_PIVOT = 50  # YY < 50 -> 20YY, else 19YY

_WHITESPACE = re.compile(r"\s")
_PADDED_STRIKE = re.compile(r"[0-9]{8}")
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_date(value: DateLike) -> date:
    """
    Normalize a date-like value to a calendar date.

    Accepts date, datetime (time of day dropped) or an ISO "YYYY-MM-DD"
    string. A malformed string raises ValueError from the parser.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def format_strike(strike: float) -> str:
    """
    Render a strike without a trailing ".0".

    Examples:
        >>> format_strike(150.0)
        '150'
        >>> format_strike(200.5)
        '200.5'
    """
    text = format(strike, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def encode_symbol(
    ticker: str,
    strike: float,
    expiration_date: DateLike,
    option_type: Union[OptionType, str],
) -> str:
    """
    Build an OCC symbol (compact, no ticker padding).

    Args:
        ticker: Underlying ticker, trimmed and upper-cased here
        strike: Strike price (up to 3 decimals)
        expiration_date: Expiration as date, datetime or ISO string
        option_type: 'call' or 'put'

    Returns:
        Symbol of length len(ticker) + 15

    Note:
        The strike field holds 8 digits, so strikes up to 99999.999 encode.
        A strike of 100000 or more overflows to 9 digits; the result is one
        character longer and decode_symbol will not read it back.

    Example:
        >>> encode_symbol('AAPL', 150, '2025-01-17', 'call')
        'AAPL250117C00150000'
        >>> encode_symbol('TSLA', 200.5, '2025-03-21', 'put')
        'TSLA250321P00200500'
    """
    ticker_clean = ticker.strip().upper()

    expiry = to_date(expiration_date)
    date_str = f"{expiry.year % 100:02d}{expiry.month:02d}{expiry.day:02d}"

    type_char = OptionType(option_type).code

    # Round half up: 150.0005 -> 150001, not banker's rounding
    strike_int = int(math.floor(strike * STRIKE_SCALE + 0.5))
    strike_str = str(strike_int).zfill(STRIKE_DIGITS)

    return f"{ticker_clean}{date_str}{type_char}{strike_str}"


def decode_symbol(symbol: str) -> Optional[ParsedSymbol]:
    """
    Parse an OCC symbol back into its parts.

    Handles both the compact and the legacy space-padded format. Whitespace
    anywhere in the symbol is ignored.

    Args:
        symbol: OCC symbol, e.g. 'AAPL250117C00150000' or 'AAPL  250117C00150000'

    Returns:
        ParsedSymbol, or None on any structural mismatch

    Example:
        >>> decode_symbol('AAPL250117C00150000')
        ParsedSymbol(ticker='AAPL', strike=150.0, expiration_date=datetime.date(2025, 1, 17), option_type=<OptionType.CALL: 'call'>)
    """
    clean = _WHITESPACE.sub("", symbol)

    if len(clean) < MIN_SYMBOL_LENGTH or len(clean) > MAX_SYMBOL_LENGTH:
        return None

    # Type flag sits right before the 8-digit strike
    type_pos = len(clean) - STRIKE_DIGITS - 1
    type_char = clean[type_pos]
    if type_char not in ("C", "P"):
        return None

    ticker = clean[: type_pos - 6]
    date_str = clean[type_pos - 6 : type_pos]
    strike_str = clean[-STRIKE_DIGITS:]

    if not (date_str.isascii() and date_str.isdigit()):
        return None
    if not (strike_str.isascii() and strike_str.isdigit()):
        return None

    yy = int(date_str[:2])
    year = 2000 + yy if yy < CENTURY_PIVOT else 1900 + yy
    try:
        expiry = date(year, int(date_str[2:4]), int(date_str[4:6]))
    except ValueError:
        return None

    return ParsedSymbol(
        ticker=ticker,
        strike=int(strike_str) / STRIKE_SCALE,
        expiration_date=expiry,
        option_type=OptionType.CALL if type_char == "C" else OptionType.PUT,
    )


def is_valid_symbol(symbol: str) -> bool:
    """
    Strict check for the legacy padded 21-character format.

    Requires exact length 21, 'C' or 'P' at index 12 and an all-digit strike
    field. Compact symbols with short tickers fail this check even though
    decode_symbol() parses them.
    """
    if len(symbol) != MAX_SYMBOL_LENGTH:
        return False

    if symbol[12] not in ("C", "P"):
        return False

    return _PADDED_STRIKE.fullmatch(symbol[13:21]) is not None


def format_option_display(
    ticker: str,
    strike: float,
    expiration_date: DateLike,
    option_type: Union[OptionType, str],
) -> str:
    """
    Long display form for position tables and detail views.

    Example:
        >>> format_option_display('AAPL', 150, '2025-01-17', 'call')
        'AAPL $150 Call 17 Jan 2025'
    """
    expiry = to_date(expiration_date)
    type_label = OptionType(option_type).value.capitalize()
    return (
        f"{ticker} ${format_strike(strike)} {type_label} "
        f"{expiry.day} {_MONTH_ABBR[expiry.month - 1]} {expiry.year}"
    )


def format_option_short(
    strike: float,
    expiration_date: DateLike,
    option_type: Union[OptionType, str],
) -> str:
    """Compact form for narrow table cells, e.g. '$150 C 17/1'."""
    expiry = to_date(expiration_date)
    return (
        f"${format_strike(strike)} {OptionType(option_type).code} "
        f"{expiry.day}/{expiry.month}"
    )
