"""
Chart series generation.

Every series is recomputed from scratch for a given set of inputs and is
capped at max_points samples; long horizons are decimated with an even
stride that always keeps the first and last sample.
"""

import math
from typing import Sequence

from ..amortization.engine import CLOSURE_EPSILON, MAX_MONTHS, schedule
from ..config.defaults import ChartParams
from ..errors import DomainError
from ..growth.coast_fire import coast_fire_number, project_savings
from ..growth.compound import inflation_adjust
from ..investment.comparison import after_tax, investment_value
from ..models.charts import ChartDataset, ChartSeries
from ..models.records import PaymentDetail

_DEFAULTS = ChartParams()
MAX_POINTS = _DEFAULTS.max_points
MONTHS_PER_YEAR = 12


def decimate_indices(count: int, max_points: int = MAX_POINTS) -> list[int]:
    """
    Indices of the samples to keep from a series of `count` samples.

    decimate_indices(5, 3) -> [0, 2, 4]
    """
    if max_points < 2:
        raise DomainError("max points must be at least 2", field="max_points",
                          value=max_points)
    if count <= max_points:
        return list(range(count))

    stride = math.ceil((count - 1) / (max_points - 1))
    indices = list(range(0, count - 1, stride))
    indices.append(count - 1)
    return indices


def _build_series(labels: Sequence[str], columns: Sequence[tuple[dict, Sequence[float]]],
                  max_points: int) -> ChartSeries:
    keep = decimate_indices(len(labels), max_points)
    return ChartSeries(
        labels=tuple(labels[i] for i in keep),
        datasets=tuple(
            ChartDataset(data=tuple(values[i] for i in keep), **style)
            for style, values in columns
        ),
    )


def _yearly_months(horizon: int) -> list[int]:
    """Month offsets at each full year, plus the horizon itself if it falls mid-year."""
    months = list(range(0, horizon + 1, MONTHS_PER_YEAR))
    if months[-1] != horizon:
        months.append(horizon)
    return months


def _year_label(month: int) -> str:
    if month == 0:
        return "Start"
    if month % MONTHS_PER_YEAR == 0:
        return f"Year {month // MONTHS_PER_YEAR}"
    return f"Year {month / MONTHS_PER_YEAR:.1f}"


def _cumulative_interest(payments: list[PaymentDetail], month: int) -> float:
    if month == 0 or not payments:
        return 0.0
    return payments[min(month, len(payments)) - 1].total_interest


def _balance_at(payments: list[PaymentDetail], opening_balance: float, month: int) -> float:
    if month == 0:
        return opening_balance
    if month > len(payments):
        return 0.0
    return payments[month - 1].balance


def _check_extra_payment(extra_payment: float) -> None:
    if extra_payment < 0:
        raise DomainError("extra payment cannot be negative", field="extra_payment",
                          value=extra_payment)


def coast_fire_projection_chart(current_savings: float, current_age: int, retirement_age: int,
                                rate: float, target: float, inflation_rate: float = 0.0,
                                use_real_returns: bool = False,
                                max_points: int = MAX_POINTS) -> ChartSeries:
    """
    Projected savings against the target, yearly from now to retirement.

    With nominal returns the target line grows with inflation; with real
    returns it stays in today's dollars.
    """
    projection = project_savings(current_savings, current_age, retirement_age, rate)

    targets = []
    for point in projection:
        if use_real_returns or inflation_rate == 0:
            targets.append(target)
        else:
            targets.append(inflation_adjust(target, inflation_rate, point.age - current_age))

    return _build_series(
        [f"Age {point.age}" for point in projection],
        [
            ({"label": "Projected Savings", "border_color": "#409eff",
              "background_color": "#409eff33", "fill": True},
             [point.projected_savings for point in projection]),
            ({"label": "Target Amount", "border_color": "#e74c3c",
              "border_dash": (5, 5), "point_radius": 0, "tension": 0.0},
             targets),
        ],
        max_points,
    )


def required_savings_by_age_chart(target: float, retirement_age: int, rate: float,
                                  inflation_rate: float = 0.0, use_real_returns: bool = False,
                                  start_age: int = _DEFAULTS.required_savings_start_age,
                                  end_age: int = _DEFAULTS.required_savings_end_age,
                                  step: int = _DEFAULTS.required_savings_step,
                                  max_points: int = MAX_POINTS) -> ChartSeries:
    """Savings needed to coast to target when starting at each age of a fixed grid."""
    if target <= 0:
        raise DomainError("target must be positive", field="target", value=target)
    if retirement_age <= 0:
        raise DomainError("retirement age must be positive", field="retirement_age",
                          value=retirement_age)
    if start_age >= end_age:
        raise DomainError("start age must be less than end age", field="start_age",
                          value=start_age)
    if step <= 0:
        raise DomainError("step must be positive", field="step", value=step)

    ages = list(range(start_age, end_age + 1, step))
    required = []
    for age in ages:
        years = retirement_age - age
        if years <= 0:
            required.append(target)
            continue
        if use_real_returns or inflation_rate == 0:
            adjusted = target
        else:
            adjusted = inflation_adjust(target, inflation_rate, years)
        required.append(coast_fire_number(adjusted, rate, years))

    return _build_series(
        [f"Age {age}" for age in ages],
        [({"label": "Required Savings to Coast", "border_color": "#27ae60",
           "background_color": "#27ae6033", "fill": True}, required)],
        max_points,
    )


def mortgage_balance_chart(principal: float, base_payment: float, extra_payment: float,
                           rate: float, lump_sum: float = 0.0,
                           max_months: int = MAX_MONTHS,
                           closure_epsilon: float = CLOSURE_EPSILON,
                           max_points: int = MAX_POINTS) -> ChartSeries:
    """Monthly balance of the standard and accelerated loans over the longer payoff."""
    _check_extra_payment(extra_payment)
    standard = schedule(principal, base_payment, rate, 0.0, max_months, closure_epsilon)
    accelerated = schedule(principal, base_payment + extra_payment, rate, lump_sum,
                           max_months, closure_epsilon)

    horizon = max(len(standard), len(accelerated))
    months = range(horizon + 1)
    accelerated_opening = principal - min(lump_sum, principal)

    return _build_series(
        ["Start" if m == 0 else f"Month {m}" for m in months],
        [
            ({"label": "Standard Payoff", "border_color": "#95a5a6",
              "background_color": "#95a5a633"},
             [_balance_at(standard, principal, m) for m in months]),
            ({"label": "Accelerated Payoff", "border_color": "#27ae60",
              "background_color": "#27ae6033"},
             [_balance_at(accelerated, accelerated_opening, m) for m in months]),
        ],
        max_points,
    )


def interest_comparison_chart(principal: float, base_payment: float, extra_payment: float,
                              rate: float, lump_sum: float = 0.0,
                              max_months: int = MAX_MONTHS,
                              closure_epsilon: float = CLOSURE_EPSILON,
                              max_points: int = MAX_POINTS) -> ChartSeries:
    """Cumulative interest paid, sampled yearly, for standard vs accelerated payoff."""
    _check_extra_payment(extra_payment)
    standard = schedule(principal, base_payment, rate, 0.0, max_months, closure_epsilon)
    accelerated = schedule(principal, base_payment + extra_payment, rate, lump_sum,
                           max_months, closure_epsilon)

    months = _yearly_months(max(len(standard), len(accelerated)))

    return _build_series(
        [_year_label(m) for m in months],
        [
            ({"label": "Standard Payoff Interest", "border_color": "#e74c3c",
              "background_color": "#e74c3c33", "fill": True},
             [_cumulative_interest(standard, m) for m in months]),
            ({"label": "Accelerated Payoff Interest", "border_color": "#27ae60",
              "background_color": "#27ae6033", "fill": True},
             [_cumulative_interest(accelerated, m) for m in months]),
        ],
        max_points,
    )


def investment_comparison_chart(principal: float, base_payment: float, extra_payment: float,
                                rate: float, lump_sum: float,
                                investment_monthly_return: float, tax_rate: float,
                                max_months: int = MAX_MONTHS,
                                closure_epsilon: float = CLOSURE_EPSILON,
                                max_points: int = MAX_POINTS) -> ChartSeries:
    """
    Value of paying the loan down early against investing the same money.

    Sampled yearly up to the accelerated payoff horizon. The payoff side is
    the extra principal paid so far plus the interest avoided so far; the
    investment side is the after-tax value of the same contributions.
    """
    _check_extra_payment(extra_payment)
    if tax_rate < 0 or tax_rate > 1:
        raise DomainError("tax rate must be between 0 and 1", field="tax_rate", value=tax_rate)

    standard = schedule(principal, base_payment, rate, 0.0, max_months, closure_epsilon)
    accelerated = schedule(principal, base_payment + extra_payment, rate, lump_sum,
                           max_months, closure_epsilon)
    months = _yearly_months(len(accelerated))
    applied_lump = min(lump_sum, principal)

    payoff_values = []
    investment_values = []
    for m in months:
        equity = min(applied_lump + extra_payment * m, principal)
        interest_avoided = max(0.0, _cumulative_interest(standard, m)
                               - _cumulative_interest(accelerated, m))
        payoff_values.append(equity + interest_avoided)

        grown = investment_value(lump_sum, extra_payment, investment_monthly_return, m)
        investment_values.append(
            after_tax(grown.gross_return, grown.total_invested, tax_rate).net_return
        )

    return _build_series(
        [_year_label(m) for m in months],
        [
            ({"label": "Mortgage Payoff Value", "border_color": "#409eff",
              "background_color": "#409eff33"}, payoff_values),
            ({"label": "Investment Value (After Tax)", "border_color": "#f39c12",
              "background_color": "#f39c1233"}, investment_values),
        ],
        max_points,
    )
