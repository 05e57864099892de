"""Default configuration parameters for the finance calculation engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AmortizationParams:
    """Loan simulation limits."""
    max_months: int = 600                 # 50 years
    closure_epsilon: float = 0.01         # Balance treated as paid off


@dataclass(frozen=True)
class ChartParams:
    """Time-series sampling parameters."""
    max_points: int = 360                 # Practical visualization limit
    required_savings_start_age: int = 20
    required_savings_end_age: int = 50
    required_savings_step: int = 5


@dataclass(frozen=True)
class ValidationParams:
    """Form input ranges. Rates are in percent."""
    min_age: float = 18
    max_age: float = 100
    max_return_rate: float = 30
    min_withdrawal_rate: float = 2
    max_withdrawal_rate: float = 8
    max_inflation_rate: float = 10
    max_tax_rate: float = 50
    max_interest_rate: float = 15
    min_years_left: float = 0.1
    max_years_left: float = 50


@dataclass(frozen=True)
class CoastFireDefaults:
    """Initial Coast FIRE form values."""
    current_age: int = 30
    retirement_age: int = 65
    current_savings: float = 50000.0
    expected_return_rate: float = 7.0
    target_retirement_amount: float = 1000000.0
    withdrawal_rate: float = 4.0
    inflation_rate: float = 0.0


@dataclass(frozen=True)
class MortgageDefaults:
    """Initial mortgage form values."""
    principal: float = 300000.0
    years_left: float = 25.0
    interest_rate: float = 4.5
    monthly_payment: float = 1500.0
    investment_return_rate: float = 7.0
    investment_tax_rate: float = 20.0


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""
    amortization: AmortizationParams
    charts: ChartParams
    validation: ValidationParams
    coast_fire: CoastFireDefaults
    mortgage: MortgageDefaults


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        amortization=AmortizationParams(),
        charts=ChartParams(),
        validation=ValidationParams(),
        coast_fire=CoastFireDefaults(),
        mortgage=MortgageDefaults(),
    )
