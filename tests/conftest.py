"""Pytest configuration and shared fixtures."""

import pytest

from fincalc_app.config.defaults import get_default_config
from fincalc_app.engine import FinanceEngine
from fincalc_app.validation.inputs import CoastFireInputs, MortgageInputs


@pytest.fixture
def coast_fire_inputs() -> CoastFireInputs:
    """Coast FIRE form values: age 30 to 65, $50k saved, 7%, $1M target."""
    return CoastFireInputs(
        current_age=30,
        retirement_age=65,
        current_savings=50000.0,
        expected_return_rate=7.0,
        target_retirement_amount=1000000.0,
        withdrawal_rate=4.0,
        inflation_rate=0.0,
    )


@pytest.fixture
def mortgage_inputs() -> MortgageInputs:
    """Mortgage form values: $300k left over 25 years at 4.5%, $1,500/month."""
    return MortgageInputs(
        principal=300000.0,
        years_left=25.0,
        interest_rate=4.5,
        monthly_payment=1500.0,
        additional_monthly_payment=500.0,
        lump_sum_payment=10000.0,
        investment_return_rate=7.0,
        investment_tax_rate=20.0,
    )


@pytest.fixture
def engine() -> FinanceEngine:
    """Engine running on built-in defaults."""
    return FinanceEngine(config=get_default_config())
