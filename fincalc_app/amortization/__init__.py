"""Loan amortization under extra-payment and lump-sum scenarios."""

from .engine import (
    PayoffComparison,
    PayoffState,
    compare_payoffs,
    monthly_rate,
    payoff,
    payoff_state,
    required_payment,
    schedule,
)

__all__ = [
    "PayoffComparison",
    "PayoffState",
    "compare_payoffs",
    "monthly_rate",
    "payoff",
    "payoff_state",
    "required_payment",
    "schedule",
]
