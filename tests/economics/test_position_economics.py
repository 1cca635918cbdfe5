"""
Tests for position value, P/L, breakeven, max profit/loss and
probability of profit.
"""

import pytest

from portfolio_options.economics import (
    breakeven,
    max_profit_loss,
    position_value,
    probability_of_profit,
    unrealized_pl,
    unrealized_pl_percent,
)
from portfolio_options.models import UNLIMITED, OptionPosition, Unbounded


class TestPositionValue:
    """Test position_value()."""

    def test_default_multiplier(self):
        """Test 5 contracts × $2.50 × 100 = $1,250."""
        assert position_value(5, 2.5) == 1250

    def test_custom_multiplier(self):
        assert position_value(5, 2.5, 10) == 125

    def test_single_contract(self):
        assert position_value(1, 3.0) == 300


class TestUnrealizedPL:
    """Test unrealized_pl()."""

    def test_long_profit(self):
        """Test long profits when the option price rises."""
        assert unrealized_pl("long", 2, 2.0, 3.0) == 200

    def test_long_loss(self):
        assert unrealized_pl("long", 2, 3.0, 2.0) == -200

    def test_short_profit(self):
        """Test short profits $200 when price drops from $3 to $2 on 2 contracts."""
        assert unrealized_pl("short", 2, 3.0, 2.0) == 200

    def test_short_loss(self):
        assert unrealized_pl(OptionPosition.SHORT, 2, 2.0, 3.0) == -200

    @pytest.mark.parametrize(
        "contracts,avg,current",
        [(1, 2.0, 3.0), (3, 4.25, 1.1), (10, 0.05, 0.0), (7, 12.5, 12.5)],
    )
    def test_long_short_symmetry(self, contracts, avg, current):
        """Test long and short P/L are exact negatives."""
        assert unrealized_pl("long", contracts, avg, current) == -unrealized_pl(
            "short", contracts, avg, current
        )


class TestUnrealizedPLPercent:
    """Test unrealized_pl_percent()."""

    def test_long(self):
        """Test bought at $2, now $3 = +50%."""
        assert unrealized_pl_percent("long", 2.0, 3.0) == 50

    def test_short(self):
        """Test sold at $3, now $2 = +33.33%."""
        assert unrealized_pl_percent("short", 3.0, 2.0) == pytest.approx(33.33, abs=0.01)

    def test_zero_premium_returns_zero(self):
        """Test zero average premium is a defined 0, not an error."""
        assert unrealized_pl_percent("long", 0, 3.0) == 0
        assert unrealized_pl_percent("short", 0, 3.0) == 0


class TestBreakeven:
    """Test breakeven()."""

    def test_call(self):
        assert breakeven("call", 150, 5) == 155

    def test_put(self):
        assert breakeven("put", 150, 5) == 145


class TestMaxProfitLoss:
    """Test max_profit_loss()."""

    def test_long_call(self):
        """Test long call: loss = premium, profit unlimited."""
        result = max_profit_loss("call", "long", 150, 5, 1)

        assert result.max_loss == 500
        assert result.max_profit is UNLIMITED
        assert result.profit_unlimited
        assert not result.loss_unlimited
        assert result.max_loss_description == "500 USD (premium paid)"
        assert "Unlimited" in result.max_profit_description

    def test_long_put(self):
        """Test long put: profit = (strike - premium) × contracts × 100."""
        result = max_profit_loss("put", "long", 150, 5, 2)

        assert result.max_profit == 29000
        assert result.max_loss == 1000
        assert result.max_profit_description == "29000 USD (stock falls to 0)"

    def test_long_put_floored_at_zero(self):
        """Test premium above strike does not give a negative max profit."""
        result = max_profit_loss("put", "long", 2, 3)
        assert result.max_profit == 0
        assert result.max_loss == 300

    def test_short_call(self):
        """Test short call: profit = premium, loss unlimited."""
        result = max_profit_loss("call", "short", 150, 5)

        assert result.max_profit == 500
        assert result.max_loss is UNLIMITED
        assert result.loss_unlimited
        assert result.max_profit_description == "500 USD (premium received)"

    def test_short_put(self):
        """Test short put: loss = (strike - premium) × contracts × 100."""
        result = max_profit_loss("put", "short", 150, 5)

        assert result.max_profit == 500
        assert result.max_loss == 14500
        assert result.max_loss_description == "14500 USD (stock falls to 0)"

    def test_short_put_floored_at_zero(self):
        result = max_profit_loss("put", "short", 2, 3)
        assert result.max_loss == 0

    def test_custom_multiplier(self):
        result = max_profit_loss("call", "long", 150, 5, contracts=3, multiplier=10)
        assert result.max_loss == 150


class TestUnlimitedSentinel:
    """Test the UNLIMITED sentinel stays out of arithmetic."""

    def test_not_a_number(self):
        assert isinstance(UNLIMITED, Unbounded)
        assert UNLIMITED != float("inf")

    def test_arithmetic_raises(self):
        with pytest.raises(TypeError):
            UNLIMITED + 1

    def test_numeric_comparison_raises(self):
        with pytest.raises(TypeError):
            UNLIMITED > 0


class TestProbabilityOfProfit:
    """Test probability_of_profit()."""

    def test_none_passthrough(self):
        """Test unknown delta gives None."""
        assert probability_of_profit(None, "long") is None

    def test_long(self):
        """Test long call with delta 0.30 ≈ 30%."""
        assert probability_of_profit(0.30, "long") == pytest.approx(30.0)

    def test_short(self):
        """Test short put with delta -0.25 ≈ 75%."""
        assert probability_of_profit(-0.25, "short") == pytest.approx(75.0)

    def test_zero_delta(self):
        assert probability_of_profit(0.0, "long") == 0
        assert probability_of_profit(0.0, "short") == 100
