"""
Finance engine coordinator.

Turns raw form inputs (rates in percent, ages, dollars) into complete Coast
FIRE and mortgage payoff reports by composing the pure calculation modules.
Percent to decimal conversion happens here, at the engine boundary.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .amortization.engine import (
    PayoffComparison,
    PayoffState,
    compare_payoffs,
    monthly_rate,
    payoff,
    payoff_state,
    required_payment,
)
from .config.defaults import EngineConfig, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .growth.coast_fire import (
    TargetSource,
    additional_savings_needed,
    age_at_readiness,
    coast_fire_number,
    is_ready,
    monthly_expenses_from_target,
    resolve_target,
)
from .growth.compound import (
    future_value,
    inflation_adjust,
    real_return_rate,
    years_to_retirement,
)
from .investment.comparison import Strategy, after_tax, better_strategy, investment_value
from .logging.config import get_engine_logger, log_payoff_outcome
from .models.charts import ChartSeries
from .models.outcome import Ok, Outcome, capture
from .models.records import InvestmentResult, ValidationResult
from .series.charts import (
    coast_fire_projection_chart,
    interest_comparison_chart,
    investment_comparison_chart,
    mortgage_balance_chart,
    required_savings_by_age_chart,
)
from .validation.inputs import (
    CoastFireInputs,
    MortgageInputs,
    validate_coast_fire_inputs,
    validate_mortgage_inputs,
)

logger = get_engine_logger(__name__)


@dataclass(frozen=True)
class CoastFireMetrics:
    """Every Coast FIRE figure derived from one valid set of inputs."""
    years_to_retirement: float
    effective_return_rate: float          # decimal, real when use_real_returns
    active_target: float                  # today's dollars
    adjusted_target: float                # dollars at retirement
    future_value: float
    is_ready: bool
    coast_fire_number: float
    additional_savings_needed: float
    coast_fire_age: Outcome[int]
    monthly_spending_available: float
    projection_chart: ChartSeries
    required_savings_chart: ChartSeries


@dataclass(frozen=True)
class CoastFireReport:
    validation: ValidationResult
    metrics: Optional[CoastFireMetrics] = None


@dataclass(frozen=True)
class MortgageMetrics:
    """Standard vs accelerated payoff and the invest-instead alternative."""
    monthly_rate: float
    scheduled_payment: float
    standard: Outcome
    accelerated: Outcome
    standard_state: PayoffState
    accelerated_state: PayoffState
    comparison: Optional[PayoffComparison] = None
    investment: Optional[InvestmentResult] = None
    strategy: Optional[Strategy] = None
    balance_chart: Optional[ChartSeries] = None
    interest_chart: Optional[ChartSeries] = None
    investment_chart: Optional[ChartSeries] = None


@dataclass(frozen=True)
class MortgageReport:
    validation: ValidationResult
    metrics: Optional[MortgageMetrics] = None


class FinanceEngine:
    """
    Entry point for orchestration layers.

    Holds only configuration; every report is computed fresh from its
    arguments, so one engine can serve concurrent callers.
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 config_dir: Optional[Path] = None) -> None:
        self.logger = logger
        self.config = config or self._load_config(config_dir)

        self.logger.info(
            "Finance engine initialized",
            max_months=self.config.amortization.max_months,
            max_points=self.config.charts.max_points
        )

    def _load_config(self, config_dir: Optional[Path]) -> EngineConfig:
        loader = ConfigLoader.create(config_dir)
        validation_errors = ConfigValidator.validate_config(loader.merge_config())
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})"
                          for err in validation_errors]
            self.logger.error("Engine configuration invalid, using defaults", errors=error_msgs)
            return get_default_config()
        return loader.load_engine_config()

    def coast_fire_report(self, inputs: CoastFireInputs,
                          target_source: TargetSource = TargetSource.TARGET) -> CoastFireReport:
        """
        Evaluate Coast FIRE readiness.

        Args:
            inputs: Raw form values, rates in percent
            target_source: Field the user edited last among target/monthly/yearly

        Returns:
            CoastFireReport; metrics is None when validation fails
        """
        validation = validate_coast_fire_inputs(inputs, self.config.validation)
        if not validation.is_valid:
            self.logger.info("Coast FIRE inputs invalid", fields=sorted(validation.errors))
            return CoastFireReport(validation=validation)

        years = years_to_retirement(inputs.current_age, inputs.retirement_age)
        nominal = inputs.expected_return_rate / 100
        inflation = inputs.inflation_rate / 100
        withdrawal = inputs.withdrawal_rate / 100

        rate = real_return_rate(nominal, inflation) if inputs.use_real_returns else nominal
        active_target = resolve_target(target_source, inputs.target_retirement_amount,
                                       inputs.monthly_expenses, inputs.yearly_expenses,
                                       withdrawal)
        if inputs.use_real_returns:
            adjusted_target = active_target
        else:
            adjusted_target = inflation_adjust(active_target, inflation, years)

        ready = is_ready(inputs.current_savings, adjusted_target, rate, years)
        if ready:
            coast_age: Outcome[int] = Ok(math.ceil(inputs.current_age))
        else:
            coast_age = capture(age_at_readiness, inputs.current_savings, adjusted_target,
                                rate, inputs.current_age)

        charts = self.config.charts
        metrics = CoastFireMetrics(
            years_to_retirement=years,
            effective_return_rate=rate,
            active_target=active_target,
            adjusted_target=adjusted_target,
            future_value=future_value(inputs.current_savings, rate, years),
            is_ready=ready,
            coast_fire_number=coast_fire_number(adjusted_target, rate, years),
            additional_savings_needed=additional_savings_needed(
                inputs.current_savings, adjusted_target, rate, years),
            coast_fire_age=coast_age,
            monthly_spending_available=monthly_expenses_from_target(active_target, withdrawal),
            projection_chart=coast_fire_projection_chart(
                inputs.current_savings, int(inputs.current_age), int(inputs.retirement_age),
                rate, active_target, inflation, inputs.use_real_returns,
                max_points=charts.max_points),
            required_savings_chart=required_savings_by_age_chart(
                active_target, int(inputs.retirement_age), rate, inflation,
                inputs.use_real_returns,
                start_age=charts.required_savings_start_age,
                end_age=charts.required_savings_end_age,
                step=charts.required_savings_step,
                max_points=charts.max_points),
        )

        self.logger.info(
            "Coast FIRE report generated",
            is_ready=ready,
            target_source=target_source.value,
            coast_fire_age_ok=coast_age.is_ok
        )
        return CoastFireReport(validation=validation, metrics=metrics)

    def mortgage_report(self, inputs: MortgageInputs) -> MortgageReport:
        """
        Compare standard payoff, accelerated payoff and investing the extra money.

        Payoff failures are carried as Err outcomes; the comparison and charts
        are only produced when both runs pay off.
        """
        validation = validate_mortgage_inputs(inputs, self.config.validation)
        if not validation.is_valid:
            self.logger.info("Mortgage inputs invalid", fields=sorted(validation.errors))
            return MortgageReport(validation=validation)

        amort = self.config.amortization
        rate = monthly_rate(inputs.interest_rate)
        accelerated_payment = inputs.monthly_payment + inputs.additional_monthly_payment

        standard = capture(payoff, inputs.principal, inputs.monthly_payment, rate, 0.0,
                           amort.max_months, amort.closure_epsilon)
        accelerated = capture(payoff, inputs.principal, accelerated_payment, rate,
                              inputs.lump_sum_payment, amort.max_months,
                              amort.closure_epsilon)

        for scenario, outcome in (("standard", standard), ("accelerated", accelerated)):
            log_payoff_outcome(
                self.logger, scenario, outcome.is_ok,
                months=outcome.value.months if outcome.is_ok else None,
                failure_kind=None if outcome.is_ok else outcome.kind.value
            )

        scheduled = required_payment(inputs.principal, rate,
                                     max(1, round(inputs.years_left * 12)))

        if not (standard.is_ok and accelerated.is_ok):
            return MortgageReport(validation=validation, metrics=MortgageMetrics(
                monthly_rate=rate,
                scheduled_payment=scheduled,
                standard=standard,
                accelerated=accelerated,
                standard_state=payoff_state(standard),
                accelerated_state=payoff_state(accelerated),
            ))

        comparison = compare_payoffs(standard.value, accelerated.value)
        investment_rate = inputs.investment_return_rate / 100 / 12
        tax_rate = inputs.investment_tax_rate / 100

        grown = investment_value(inputs.lump_sum_payment, inputs.additional_monthly_payment,
                                 investment_rate, accelerated.value.months)
        investment = after_tax(grown.gross_return, grown.total_invested, tax_rate)
        strategy = better_strategy(max(0.0, comparison.interest_saved),
                                   investment.net_benefit)

        chart_args = (inputs.principal, inputs.monthly_payment,
                      inputs.additional_monthly_payment, rate)
        chart_kwargs = {
            "max_months": amort.max_months,
            "closure_epsilon": amort.closure_epsilon,
            "max_points": self.config.charts.max_points,
        }
        metrics = MortgageMetrics(
            monthly_rate=rate,
            scheduled_payment=scheduled,
            standard=standard,
            accelerated=accelerated,
            standard_state=PayoffState.PAID_OFF,
            accelerated_state=PayoffState.PAID_OFF,
            comparison=comparison,
            investment=investment,
            strategy=strategy,
            balance_chart=mortgage_balance_chart(
                *chart_args, lump_sum=inputs.lump_sum_payment, **chart_kwargs),
            interest_chart=interest_comparison_chart(
                *chart_args, lump_sum=inputs.lump_sum_payment, **chart_kwargs),
            investment_chart=investment_comparison_chart(
                *chart_args, inputs.lump_sum_payment, investment_rate, tax_rate,
                **chart_kwargs),
        )

        self.logger.info(
            "Mortgage report generated",
            months_saved=comparison.months_saved,
            interest_saved=comparison.interest_saved,
            strategy=strategy.value
        )
        return MortgageReport(validation=validation, metrics=metrics)
