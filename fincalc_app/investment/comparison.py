"""
Investment and tax comparison.

Compares putting extra money into an investment account against using it
to pay a loan down early. The investment horizon is normally the months
to payoff of the accelerated loan scenario.
"""

import math
from enum import Enum

from ..errors import DomainError
from ..models.records import InvestmentResult, round_cents


class Strategy(str, Enum):
    """Recommended use of extra money."""
    PAYOFF = "payoff"
    INVEST = "invest"


def investment_value(lump_sum: float, monthly_contribution: float,
                     monthly_return_rate: float, months: int) -> InvestmentResult:
    """
    Future value of a lump sum plus a monthly contribution stream, before tax.

    Lump sum:      L * (1 + r)^n
    Contributions: C * [(1 + r)^n - 1] / r, or C * n when r == 0

    Taxes are zero and net return equals gross return at this stage.
    """
    if lump_sum < 0:
        raise DomainError("lump sum cannot be negative", field="lump_sum", value=lump_sum)
    if monthly_contribution < 0:
        raise DomainError("monthly contribution cannot be negative",
                          field="monthly_contribution", value=monthly_contribution)
    if monthly_return_rate < -1:
        raise DomainError("monthly return rate cannot be less than -100%",
                          field="monthly_return_rate", value=monthly_return_rate)
    if months < 0:
        raise DomainError("months cannot be negative", field="months", value=months)

    growth = math.pow(1 + monthly_return_rate, months)
    lump_sum_fv = lump_sum * growth

    annuity_fv = 0.0
    if monthly_contribution > 0 and months > 0:
        if monthly_return_rate == 0:
            annuity_fv = monthly_contribution * months
        else:
            annuity_fv = monthly_contribution * (growth - 1) / monthly_return_rate

    gross_return = lump_sum_fv + annuity_fv
    total_invested = lump_sum + monthly_contribution * months
    profit = max(0.0, gross_return - total_invested)

    return InvestmentResult(
        gross_return=round_cents(gross_return),
        profit=round_cents(profit),
        taxes=0.0,
        net_return=round_cents(gross_return),
        total_invested=round_cents(total_invested),
    )


def after_tax(gross_return: float, total_invested: float, tax_rate: float) -> InvestmentResult:
    """
    Apply a flat capital-gains rate to the profit only; principal is never taxed.

    Args:
        gross_return: Investment value before tax
        total_invested: Amount contributed
        tax_rate: Tax rate on gains as decimal (0.20 for 20%)
    """
    if gross_return < 0:
        raise DomainError("gross return cannot be negative", field="gross_return",
                          value=gross_return)
    if total_invested < 0:
        raise DomainError("total invested cannot be negative", field="total_invested",
                          value=total_invested)
    if tax_rate < 0 or tax_rate > 1:
        raise DomainError("tax rate must be between 0 and 1", field="tax_rate",
                          value=tax_rate)

    profit = max(0.0, gross_return - total_invested)
    taxes = profit * tax_rate

    return InvestmentResult(
        gross_return=round_cents(gross_return),
        profit=round_cents(profit),
        taxes=round_cents(taxes),
        net_return=round_cents(gross_return - taxes),
        total_invested=round_cents(total_invested),
    )


def better_strategy(interest_saved: float, investment_net_benefit: float) -> Strategy:
    """
    Pick the better use of extra money. Ties favour paying off the loan.

    Args:
        interest_saved: Interest avoided by the accelerated payoff
        investment_net_benefit: Net return minus amount invested
    """
    if interest_saved < 0:
        raise DomainError("interest saved cannot be negative", field="interest_saved",
                          value=interest_saved)

    if investment_net_benefit > interest_saved:
        return Strategy.INVEST
    return Strategy.PAYOFF
