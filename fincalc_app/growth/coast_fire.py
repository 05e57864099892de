"""
Coast FIRE decision logic.

Coast FIRE is reached when current savings, left alone to compound with no
further contributions, grow into the retirement target by retirement age.

Which of {target, monthly expenses, yearly expenses} the user edited last is
an orchestration concern; it is passed in explicitly as a TargetSource
rather than remembered here.
"""

import math
from dataclasses import dataclass
from enum import Enum

from ..errors import DomainError, UndefinedCoastAgeError, UnreachableTargetError
from ..models.records import SavingsPoint
from .compound import future_value, present_value, time_to_target, years_to_retirement

MONTHS_PER_YEAR = 12


class TargetSource(str, Enum):
    """Form field that currently drives the retirement target."""
    TARGET = "target"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class ExpenseFields:
    """Target and spending fields kept consistent with each other."""
    target: float
    monthly_expenses: float
    yearly_expenses: float


def _whole_dollars(amount: float) -> float:
    # Half-up, matching how amounts are shown in the form
    return float(math.floor(amount + 0.5))


def _check_savings(current_savings: float) -> None:
    if current_savings < 0:
        raise DomainError("current savings cannot be negative", field="current_savings",
                          value=current_savings)


def coast_fire_number(target: float, rate: float, years: float) -> float:
    """Amount needed today to coast to target by pure growth."""
    return present_value(target, rate, years)


def is_ready(current_savings: float, target: float, rate: float, years: float) -> bool:
    """True if current savings alone grow to at least the target."""
    _check_savings(current_savings)
    return future_value(current_savings, rate, years) >= target


def additional_savings_needed(current_savings: float, target: float,
                              rate: float, years: float) -> float:
    """
    Lump sum to add today to be Coast FIRE ready immediately.

    Zero when already ready. With no years left the coast number degenerates
    to the target itself, so the gap is the plain difference, clamped at zero.
    """
    if is_ready(current_savings, target, rate, years):
        return 0.0

    if years == 0:
        gap = target - current_savings
    else:
        gap = coast_fire_number(target, rate, years) - current_savings

    return max(0.0, gap)


def age_at_readiness(current_savings: float, target: float, rate: float,
                     current_age: float) -> int:
    """
    Age (rounded up) at which current savings alone reach the target.

    Raises:
        UndefinedCoastAgeError: If current savings are not positive
        UnreachableTargetError: If the rate can never grow savings to target
        DomainError: If current age is negative
    """
    if current_savings <= 0:
        raise UndefinedCoastAgeError(
            "Coast FIRE age is undefined without positive current savings",
            field="current_savings", value=current_savings
        )
    if current_age < 0:
        raise DomainError("current age cannot be negative", field="current_age",
                          value=current_age)

    if current_savings >= target:
        return math.ceil(current_age)

    years_needed = time_to_target(current_savings, target, rate)
    if math.isinf(years_needed):
        raise UnreachableTargetError(
            f"Savings of {current_savings} never reach {target} at rate {rate}",
            principal=current_savings, target=target, rate=rate
        )

    return math.ceil(current_age + years_needed)


def target_from_annual_expenses(annual_expenses: float, withdrawal_rate: float) -> float:
    """Portfolio size that supports annual expenses at the withdrawal rate."""
    if annual_expenses < 0:
        raise DomainError("annual expenses cannot be negative", field="annual_expenses",
                          value=annual_expenses)
    if withdrawal_rate <= 0 or withdrawal_rate > 1:
        raise DomainError("withdrawal rate must be in (0, 1]", field="withdrawal_rate",
                          value=withdrawal_rate)

    if annual_expenses == 0:
        return 0.0

    return annual_expenses / withdrawal_rate


def target_from_monthly_expenses(monthly_expenses: float, withdrawal_rate: float) -> float:
    if monthly_expenses < 0:
        raise DomainError("monthly expenses cannot be negative", field="monthly_expenses",
                          value=monthly_expenses)
    return target_from_annual_expenses(monthly_expenses * MONTHS_PER_YEAR, withdrawal_rate)


def expenses_from_target(target: float, withdrawal_rate: float) -> float:
    """Annual spending a portfolio supports at the withdrawal rate."""
    if target < 0:
        raise DomainError("target cannot be negative", field="target", value=target)
    if withdrawal_rate < 0 or withdrawal_rate > 1:
        raise DomainError("withdrawal rate must be in [0, 1]", field="withdrawal_rate",
                          value=withdrawal_rate)

    return target * withdrawal_rate


def monthly_expenses_from_target(target: float, withdrawal_rate: float) -> float:
    return expenses_from_target(target, withdrawal_rate) / MONTHS_PER_YEAR


def resolve_target(source: TargetSource, target: float, monthly_expenses: float,
                   yearly_expenses: float, withdrawal_rate: float) -> float:
    """
    Authoritative retirement target for the field the user edited last.

    An expense field only takes over while the target it implies, rounded to
    whole dollars, is positive; otherwise the directly entered target stays
    in effect.
    """
    derived = 0.0
    if source == TargetSource.MONTHLY and monthly_expenses > 0:
        derived = _whole_dollars(target_from_monthly_expenses(monthly_expenses, withdrawal_rate))
    elif source == TargetSource.YEARLY and yearly_expenses > 0:
        derived = _whole_dollars(target_from_annual_expenses(yearly_expenses, withdrawal_rate))
    return derived if derived > 0 else target


def sync_expense_fields(source: TargetSource, target: float, monthly_expenses: float,
                        yearly_expenses: float, withdrawal_rate: float) -> ExpenseFields:
    """Recompute the two fields not being edited from the one that is."""
    if source == TargetSource.MONTHLY:
        return ExpenseFields(
            target=_whole_dollars(target_from_monthly_expenses(monthly_expenses, withdrawal_rate)),
            monthly_expenses=monthly_expenses,
            yearly_expenses=_whole_dollars(monthly_expenses * MONTHS_PER_YEAR),
        )

    if source == TargetSource.YEARLY:
        return ExpenseFields(
            target=_whole_dollars(target_from_annual_expenses(yearly_expenses, withdrawal_rate)),
            monthly_expenses=_whole_dollars(yearly_expenses / MONTHS_PER_YEAR),
            yearly_expenses=yearly_expenses,
        )

    monthly = _whole_dollars(monthly_expenses_from_target(target, withdrawal_rate))
    return ExpenseFields(
        target=target,
        monthly_expenses=monthly,
        yearly_expenses=monthly * MONTHS_PER_YEAR,
    )


def project_savings(current_savings: float, current_age: int, retirement_age: int,
                    rate: float) -> list[SavingsPoint]:
    """Yearly projected savings from current age to retirement age, inclusive."""
    _check_savings(current_savings)
    if retirement_age < current_age:
        raise DomainError("retirement age must be >= current age", field="retirement_age",
                          value=retirement_age)

    years = int(years_to_retirement(current_age, retirement_age))
    return [
        SavingsPoint(age=current_age + i,
                     projected_savings=future_value(current_savings, rate, i))
        for i in range(years + 1)
    ]
