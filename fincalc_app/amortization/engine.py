"""
Iterative amortization engine.

Each run moves from ACCRUING to exactly one terminal state: PAID_OFF,
NEVER_PAYS_OFF or ITERATION_LIMIT_EXCEEDED. The simulation is bounded by
the month cap, so every call terminates.

payoff() and schedule() share one simulation loop; there is no other
implementation of the month-by-month arithmetic in the package.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ..config.defaults import AmortizationParams
from ..errors import DomainError, ErrorKind, IterationLimitExceededError, NeverPaysOffError
from ..logging.config import get_logger
from ..models.outcome import Outcome
from ..models.records import PaymentDetail, PayoffResult, round_cents

logger = get_logger(__name__)

_DEFAULTS = AmortizationParams()
MAX_MONTHS = _DEFAULTS.max_months
CLOSURE_EPSILON = _DEFAULTS.closure_epsilon


class PayoffState(str, Enum):
    """Lifecycle of one amortization run."""
    ACCRUING = "accruing"
    PAID_OFF = "paid_off"
    NEVER_PAYS_OFF = "never_pays_off"
    ITERATION_LIMIT_EXCEEDED = "iteration_limit_exceeded"


@dataclass(frozen=True)
class PayoffComparison:
    """Savings of an accelerated run relative to the standard run."""
    months_saved: int
    interest_saved: float


@dataclass(frozen=True)
class _Step:
    month: int
    balance: float
    interest: float
    principal: float
    total_interest: float


def monthly_rate(annual_rate_percent: float) -> float:
    """
    Convert an annual percentage rate into a monthly decimal rate.

    monthly_rate(4.5) == 0.00375
    """
    if annual_rate_percent < 0:
        raise DomainError("annual rate cannot be negative", field="annual_rate",
                          value=annual_rate_percent)
    return annual_rate_percent / 100 / 12


def _validate_run(principal: float, monthly_payment: float, rate: float,
                  lump_sum: float, max_months: int) -> None:
    if principal <= 0:
        raise DomainError("principal must be positive", field="principal", value=principal)
    if monthly_payment <= 0:
        raise DomainError("monthly payment must be positive", field="monthly_payment",
                          value=monthly_payment)
    if rate < 0:
        raise DomainError("monthly rate cannot be negative", field="monthly_rate", value=rate)
    if lump_sum < 0:
        raise DomainError("lump sum cannot be negative", field="lump_sum", value=lump_sum)
    if max_months <= 0:
        raise DomainError("max months must be positive", field="max_months", value=max_months)


def _amortize(principal: float, monthly_payment: float, rate: float, lump_sum: float,
              max_months: int, closure_epsilon: float) -> Iterator[_Step]:
    """Yield one step per simulated month until the balance closes."""
    balance = principal - min(lump_sum, principal)
    total_interest = 0.0
    month = 0

    while balance > closure_epsilon:
        if month >= max_months:
            logger.debug("Amortization hit month cap", max_months=max_months,
                         remaining_balance=balance)
            raise IterationLimitExceededError(
                f"Loan is not paid off within {max_months} months",
                max_months=max_months, remaining_balance=round_cents(balance)
            )

        month += 1
        interest = balance * rate
        principal_paid = min(monthly_payment - interest, balance)

        if principal_paid <= 0:
            logger.debug("Payment does not cover interest", month=month,
                         payment=monthly_payment, interest=interest)
            raise NeverPaysOffError(
                f"Monthly payment {monthly_payment} does not cover interest of "
                f"{round_cents(interest)}",
                month=month, balance=round_cents(balance),
                payment=monthly_payment, interest=round_cents(interest)
            )

        balance -= principal_paid
        if balance <= closure_epsilon:
            # Sub-cent residual is settled with the final payment
            principal_paid += balance
            balance = 0.0

        total_interest += interest
        yield _Step(month, balance, interest, principal_paid, total_interest)


def payoff(principal: float, monthly_payment: float, rate: float, lump_sum: float = 0.0,
           max_months: int = MAX_MONTHS,
           closure_epsilon: float = CLOSURE_EPSILON) -> PayoffResult:
    """
    Months and interest needed to pay off a loan.

    Args:
        principal: Outstanding balance
        monthly_payment: Payment made every month
        rate: Monthly interest rate as decimal
        lump_sum: Extra principal paid at month 0
        max_months: Supported horizon

    Returns:
        PayoffResult with months, total interest and total payments

    Raises:
        DomainError: Invalid arguments
        NeverPaysOffError: Payment does not exceed accruing interest
        IterationLimitExceededError: Not paid off within max_months
    """
    _validate_run(principal, monthly_payment, rate, lump_sum, max_months)

    months = 0
    total_interest = 0.0
    total_paid = min(lump_sum, principal)
    for step in _amortize(principal, monthly_payment, rate, lump_sum,
                          max_months, closure_epsilon):
        months = step.month
        total_interest = step.total_interest
        total_paid += step.interest + step.principal

    return PayoffResult(
        months=months,
        total_interest=round_cents(total_interest),
        total_payments=round_cents(total_paid),
    )


def schedule(principal: float, monthly_payment: float, rate: float, lump_sum: float = 0.0,
             max_months: int = MAX_MONTHS,
             closure_epsilon: float = CLOSURE_EPSILON) -> list[PaymentDetail]:
    """Full month-by-month amortization schedule; same failure rules as payoff()."""
    _validate_run(principal, monthly_payment, rate, lump_sum, max_months)

    return [
        PaymentDetail(
            month=step.month,
            balance=round_cents(step.balance),
            interest_payment=round_cents(step.interest),
            principal_payment=round_cents(step.principal),
            total_interest=round_cents(step.total_interest),
        )
        for step in _amortize(principal, monthly_payment, rate, lump_sum,
                              max_months, closure_epsilon)
    ]


def required_payment(principal: float, rate: float, total_months: int) -> float:
    """
    Level monthly payment that amortizes principal over total_months.

    M = P * [r(1+r)^n] / [(1+r)^n - 1], or P / n when r == 0
    """
    if principal <= 0:
        raise DomainError("principal must be positive", field="principal", value=principal)
    if rate < 0:
        raise DomainError("monthly rate cannot be negative", field="monthly_rate", value=rate)
    if total_months <= 0:
        raise DomainError("total months must be positive", field="total_months",
                          value=total_months)

    if rate == 0:
        return principal / total_months

    growth = math.pow(1 + rate, total_months)
    return principal * (rate * growth) / (growth - 1)


def compare_payoffs(standard: PayoffResult, accelerated: PayoffResult) -> PayoffComparison:
    return PayoffComparison(
        months_saved=standard.months - accelerated.months,
        interest_saved=round_cents(standard.total_interest - accelerated.total_interest),
    )


_STATE_BY_KIND = {
    ErrorKind.NEVER_PAYS_OFF: PayoffState.NEVER_PAYS_OFF,
    ErrorKind.ITERATION_LIMIT_EXCEEDED: PayoffState.ITERATION_LIMIT_EXCEEDED,
}


def payoff_state(outcome: Outcome) -> PayoffState:
    """
    Terminal state of a captured payoff run.

    Raises:
        ValueError: If the outcome failed for a reason other than amortization
    """
    if outcome.is_ok:
        return PayoffState.PAID_OFF
    try:
        return _STATE_BY_KIND[outcome.kind]
    except KeyError:
        raise ValueError(f"Outcome failed before simulation: {outcome.kind.value}") from None
