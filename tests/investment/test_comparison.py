"""Tests for investment and tax comparison"""

import pytest

from fincalc_app.errors import DomainError
from fincalc_app.investment.comparison import (
    Strategy,
    after_tax,
    better_strategy,
    investment_value,
)


class TestInvestmentValue:
    """Test future value of lump sum plus contributions"""

    def test_lump_sum_and_contributions(self):
        """Test $1,000 plus $100 a month at 1% for a year"""
        result = investment_value(1000, 100, 0.01, 12)
        assert result.gross_return == pytest.approx(2395.08, abs=0.01)
        assert result.total_invested == 2200
        assert result.profit == pytest.approx(195.08, abs=0.01)
        assert result.taxes == 0
        assert result.net_return == result.gross_return

    def test_zero_rate_contributions(self):
        """Test contributions simply accumulate without returns"""
        result = investment_value(0, 100, 0.0, 12)
        assert result.gross_return == 1200
        assert result.profit == 0

    def test_zero_months(self):
        """Test nothing grows over zero months"""
        result = investment_value(10000, 500, 0.01, 0)
        assert result.gross_return == 10000
        assert result.total_invested == 10000

    def test_losses_never_produce_negative_profit(self):
        """Test profit is clamped at zero when the investment loses value"""
        result = investment_value(10000, 0, -0.01, 12)
        assert result.gross_return < result.total_invested
        assert result.profit == 0

    @pytest.mark.parametrize("lump_sum,contribution,rate,months", [
        (-1, 0, 0.01, 12),
        (0, -1, 0.01, 12),
        (0, 100, -1.5, 12),
        (0, 100, 0.01, -1),
    ])
    def test_invalid_inputs(self, lump_sum, contribution, rate, months):
        """Test domain violations are rejected"""
        with pytest.raises(DomainError):
            investment_value(lump_sum, contribution, rate, months)


class TestAfterTax:
    """Test capital-gains tax on profit only"""

    def test_profit_taxed(self):
        """Test 20% of a $75k gain"""
        result = after_tax(175000, 100000, 0.20)
        assert result.profit == 75000
        assert result.taxes == 15000
        assert result.net_return == 160000
        assert result.net_benefit == 60000

    def test_principal_never_taxed(self):
        """Test a loss incurs no tax"""
        result = after_tax(90000, 100000, 0.20)
        assert result.profit == 0
        assert result.taxes == 0
        assert result.net_return == 90000

    def test_invariants(self):
        """Test profit, taxes and net return relationships"""
        result = after_tax(123456.78, 65432.10, 0.15)
        assert result.profit == pytest.approx(max(0, result.gross_return - result.total_invested))
        assert result.taxes == pytest.approx(result.profit * 0.15, abs=0.01)
        assert result.net_return == pytest.approx(result.gross_return - result.taxes, abs=0.01)

    @pytest.mark.parametrize("tax_rate", [-0.01, 1.01])
    def test_tax_rate_out_of_range(self, tax_rate):
        """Test tax rate must be within [0, 1]"""
        with pytest.raises(DomainError):
            after_tax(175000, 100000, tax_rate)


class TestBetterStrategy:
    """Test payoff versus invest recommendation"""

    def test_invest_wins(self):
        """Test investing when its net benefit is larger"""
        assert better_strategy(25000, 30000) == Strategy.INVEST

    def test_payoff_wins(self):
        """Test paying off when interest saved is larger"""
        assert better_strategy(25000, 20000) == Strategy.PAYOFF

    def test_tie_favours_payoff(self):
        """Test equal outcomes recommend paying off"""
        assert better_strategy(25000, 25000) == Strategy.PAYOFF

    def test_negative_interest_saved_rejected(self):
        """Test interest saved cannot be negative"""
        with pytest.raises(DomainError):
            better_strategy(-1, 100)
