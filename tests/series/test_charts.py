"""Tests for chart series generation"""

import pytest

from fincalc_app.amortization.engine import monthly_rate, payoff
from fincalc_app.errors import DomainError, NeverPaysOffError
from fincalc_app.growth.compound import inflation_adjust
from fincalc_app.models.charts import ChartDataset, ChartSeries
from fincalc_app.series.charts import (
    coast_fire_projection_chart,
    decimate_indices,
    interest_comparison_chart,
    investment_comparison_chart,
    mortgage_balance_chart,
    required_savings_by_age_chart,
)


def assert_aligned(series: ChartSeries) -> None:
    for dataset in series.datasets:
        assert len(dataset.data) == len(series.labels)


class TestDecimation:
    """Test bounded sampling"""

    def test_short_series_untouched(self):
        """Test series within the cap keep every sample"""
        assert decimate_indices(10, 20) == list(range(10))

    def test_even_stride(self):
        """Test stride keeps first and last"""
        assert decimate_indices(5, 3) == [0, 2, 4]

    def test_long_series_capped(self):
        """Test long series never exceed the cap"""
        indices = decimate_indices(1000, 360)
        assert len(indices) <= 360
        assert indices[0] == 0
        assert indices[-1] == 999
        assert indices == sorted(set(indices))

    def test_cap_too_small(self):
        """Test a cap below two samples is rejected"""
        with pytest.raises(DomainError):
            decimate_indices(10, 1)


class TestChartSeries:
    """Test chart series record"""

    def test_misaligned_dataset_rejected(self):
        """Test datasets must match label count"""
        with pytest.raises(ValueError):
            ChartSeries(labels=("a", "b"), datasets=(ChartDataset(label="x", data=(1.0,)),))

    def test_to_dict(self):
        """Test Chart.js shaped output"""
        series = ChartSeries(
            labels=("Start",),
            datasets=(ChartDataset(label="Target", data=(1.0,), border_dash=(5, 5),
                                   point_radius=0),),
        )
        data = series.to_dict()
        assert data["labels"] == ["Start"]
        assert data["datasets"][0]["data"] == [1.0]
        assert data["datasets"][0]["borderDash"] == [5, 5]
        assert data["datasets"][0]["pointRadius"] == 0


class TestCoastFireProjectionChart:
    """Test savings projection series"""

    def test_yearly_points_to_retirement(self):
        """Test one point per year, inclusive"""
        series = coast_fire_projection_chart(50000, 30, 65, 0.07, 1000000)
        assert len(series.labels) == 36
        assert series.labels[0] == "Age 30"
        assert series.labels[-1] == "Age 65"
        projected = series.dataset("Projected Savings").data
        assert projected[0] == 50000
        assert projected[-1] == pytest.approx(533829, abs=1)
        assert set(series.dataset("Target Amount").data) == {1000000}

    def test_nominal_target_grows_with_inflation(self):
        """Test the target line is inflated year by year"""
        series = coast_fire_projection_chart(50000, 30, 65, 0.07, 1000000, inflation_rate=0.03)
        targets = series.dataset("Target Amount").data
        assert targets[0] == 1000000
        assert targets[-1] == pytest.approx(inflation_adjust(1000000, 0.03, 35))

    def test_real_returns_keep_target_flat(self):
        """Test real returns leave the target in today's dollars"""
        series = coast_fire_projection_chart(50000, 30, 65, 0.0388, 1000000,
                                             inflation_rate=0.03, use_real_returns=True)
        assert set(series.dataset("Target Amount").data) == {1000000}

    def test_capped(self):
        """Test a long horizon is decimated"""
        series = coast_fire_projection_chart(1000, 18, 100, 0.05, 1000000, max_points=20)
        assert len(series.labels) <= 20
        assert series.labels[-1] == "Age 100"
        assert_aligned(series)


class TestRequiredSavingsByAgeChart:
    """Test required savings over the starting-age grid"""

    def test_default_grid(self):
        """Test ages 20 to 50 in steps of 5"""
        series = required_savings_by_age_chart(1000000, 65, 0.07)
        assert series.labels == ("Age 20", "Age 25", "Age 30", "Age 35",
                                 "Age 40", "Age 45", "Age 50")
        required = series.dataset("Required Savings to Coast").data
        assert required[0] == pytest.approx(1000000 / 1.07 ** 45)
        assert list(required) == sorted(required)

    def test_at_or_past_retirement_needs_full_target(self):
        """Test no growth time means the full target"""
        series = required_savings_by_age_chart(1000000, 40, 0.07)
        assert series.dataset("Required Savings to Coast").data[-3:] == (1000000,) * 3

    def test_invalid_grid(self):
        """Test start age must precede end age"""
        with pytest.raises(DomainError):
            required_savings_by_age_chart(1000000, 65, 0.07, start_age=50, end_age=20)


class TestMortgageBalanceChart:
    """Test monthly balance series"""

    def test_small_loan(self):
        """Test hand-computed balances padded with zeros after payoff"""
        series = mortgage_balance_chart(1000, 300, 200, 0.01)
        assert series.labels == ("Start", "Month 1", "Month 2", "Month 3", "Month 4")
        assert series.dataset("Standard Payoff").data == pytest.approx(
            (1000, 710.0, 417.1, 121.27, 0.0))
        assert series.dataset("Accelerated Payoff").data == pytest.approx(
            (1000, 510.0, 15.1, 0.0, 0.0))

    def test_lump_sum_lowers_opening_balance(self):
        """Test the accelerated line starts below principal"""
        series = mortgage_balance_chart(1000, 300, 0, 0.01, lump_sum=400)
        assert series.dataset("Accelerated Payoff").data[0] == 600

    def test_thirty_year_loan_is_decimated(self):
        """Test 361 monthly samples are capped"""
        rate = monthly_rate(4.5)
        series = mortgage_balance_chart(300000, 1520.07, 0, rate)
        assert len(series.labels) <= 360
        assert series.labels[0] == "Start"
        assert series.labels[-1] == "Month 360"
        assert series.dataset("Standard Payoff").data[-1] == 0

    def test_never_pays_off_propagates(self):
        """Test failures are raised, never replaced with placeholder data"""
        with pytest.raises(NeverPaysOffError):
            mortgage_balance_chart(100000, 300, 0, 0.005)

    def test_negative_extra_payment_rejected(self):
        """Test extra payment cannot be negative"""
        with pytest.raises(DomainError):
            mortgage_balance_chart(1000, 300, -1, 0.01)


class TestInterestComparisonChart:
    """Test yearly cumulative interest series"""

    def test_labels_cover_partial_final_year(self):
        """Test the payoff month is included when it falls mid-year"""
        series = interest_comparison_chart(2600, 100, 0, 0.0)
        assert series.labels == ("Start", "Year 1", "Year 2", "Year 2.2")

    def test_final_point_is_total_interest(self):
        """Test cumulative interest ends at the run's total"""
        rate = monthly_rate(6.0)
        series = interest_comparison_chart(200000, 1500, 500, rate, lump_sum=10000)
        standard = series.dataset("Standard Payoff Interest").data
        accelerated = series.dataset("Accelerated Payoff Interest").data
        assert standard[0] == 0
        assert standard[-1] == pytest.approx(payoff(200000, 1500, rate).total_interest)
        assert accelerated[-1] == pytest.approx(
            payoff(200000, 2000, rate, lump_sum=10000).total_interest)
        assert all(a <= s for a, s in zip(accelerated, standard))


class TestInvestmentComparisonChart:
    """Test payoff value against after-tax investment value"""

    def test_start_point(self):
        """Test both sides start from the lump sum"""
        series = investment_comparison_chart(200000, 1500, 500, monthly_rate(6.0), 10000,
                                             0.07 / 12, 0.20)
        assert series.labels[0] == "Start"
        assert series.dataset("Mortgage Payoff Value").data[0] == 10000
        assert series.dataset("Investment Value (After Tax)").data[0] == 10000

    def test_horizon_is_accelerated_payoff(self):
        """Test sampling stops at the accelerated payoff month"""
        rate = monthly_rate(6.0)
        months = payoff(200000, 2000, rate, lump_sum=10000).months
        series = investment_comparison_chart(200000, 1500, 500, rate, 10000, 0.07 / 12, 0.20)
        assert len(series.labels) == months // 12 + 1 + (1 if months % 12 else 0)
        assert_aligned(series)

    def test_zero_return_is_untaxed(self):
        """Test contributions with no gains are returned in full"""
        series = investment_comparison_chart(1200, 100, 100, 0.0, 0, 0.0, 0.20)
        # Accelerated loan closes in 6 months, contributions total $600
        assert series.labels == ("Start", "Year 0.5")
        assert series.dataset("Investment Value (After Tax)").data == (0.0, 600.0)

    def test_invalid_tax_rate(self):
        """Test tax rate must be within [0, 1]"""
        with pytest.raises(DomainError):
            investment_comparison_chart(200000, 1500, 500, 0.005, 0, 0.005, 1.5)
