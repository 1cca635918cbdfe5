"""
Days to Expiration (DTE)

Whole-day DTE arithmetic and the urgency buckets used for colour coding.
Both dates are reduced to calendar days before differencing, so the result
does not depend on the time of day of the evaluation.
"""

from datetime import date
from typing import Optional

from portfolio_options.models import DTECategory
from portfolio_options.symbols import DateLike, to_date

DTE_CRITICAL_DAYS = 7
DTE_WARNING_DAYS = 14


def compute_dte(expiration_date: DateLike, today: Optional[DateLike] = None) -> int:
    """
    Calculate days to expiration.

    Args:
        expiration_date: Expiration as date, datetime or ISO string
        today: Reference day (default: date.today())

    Returns:
        Signed day count: positive = future, 0 = expires today,
        negative = already expired
    """
    reference = date.today() if today is None else to_date(today)
    return (to_date(expiration_date) - reference).days


def classify_dte(dte: int) -> DTECategory:
    """
    Map DTE to its urgency bucket.

    Boundaries belong to the more urgent bucket: 7 is CRITICAL, 14 is WARNING.
    """
    if dte < 0:
        return DTECategory.EXPIRED
    if dte <= DTE_CRITICAL_DAYS:
        return DTECategory.CRITICAL
    if dte <= DTE_WARNING_DAYS:
        return DTECategory.WARNING
    return DTECategory.OK


def format_dte(dte: int) -> str:
    """
    Format DTE for display.

    Example:
        >>> format_dte(5)
        '5d'
        >>> format_dte(0)
        'Today'
        >>> format_dte(-1)
        'Expired'
    """
    if dte < 0:
        return "Expired"
    if dte == 0:
        return "Today"
    return f"{dte}d"


def is_valid_expiration(
    expiration_date: DateLike, today: Optional[DateLike] = None
) -> bool:
    """Expiration is valid for new entries when it is today or later."""
    return compute_dte(expiration_date, today) >= 0
