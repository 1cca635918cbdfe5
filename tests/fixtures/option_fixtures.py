"""
Option fixtures for testing the classifiers and the alert engine.

Usage:
    def test_alert(make_option):
        option = make_option(dte=5, moneyness="ITM")
        assert option.dte == 5
"""

from datetime import date

import pytest

from portfolio_options.alerts.models import AlertableOption


@pytest.fixture
def as_of():
    """Fixed reference day so DTE results do not depend on the test date."""
    return date(2025, 1, 10)


@pytest.fixture
def make_option():
    """
    Factory for AlertableOption records.

    Defaults describe a quiet position (far expiry, no metrics) that
    triggers no alert; override only the fields a test cares about.

    Example:
        def test_theta(make_option):
            option = make_option(theta=-0.25, contracts=2)
    """

    def _make(**overrides):
        fields = {
            "option_symbol": "AAPL250117C00150000",
            "ticker": "AAPL",
            "option_type": "call",
            "position": "long",
            "strike": 150.0,
            "contracts": 1,
            "dte": 45,
            "moneyness": None,
            "pl_percent": None,
            "theta": None,
            "current_price": None,
        }
        fields.update(overrides)
        return AlertableOption(**fields)

    return _make


@pytest.fixture
def long_call_itm(make_option):
    """Long AAPL call, ITM, 5 days out, down 60%, theta unknown."""
    return make_option(dte=5, moneyness="ITM", pl_percent=-60.0)


@pytest.fixture
def raw_position():
    """Raw position record as loaded from a positions file."""
    return {
        "ticker": "aapl",
        "option_type": "call",
        "position": "long",
        "strike": 150,
        "contracts": 2,
        "expiration_date": "2025-01-17",
        "spot_price": 160.0,
        "avg_premium": 4.0,
        "current_price": 6.0,
        "theta": -0.12,
    }
