"""
Immutable result records.

All records are created fresh per computation call and are never mutated
afterwards. Money fields are rounded to cents when the record is built.
"""

from dataclasses import dataclass, field


def round_cents(amount: float) -> float:
    """Round a currency amount to whole cents."""
    return round(amount, 2)


@dataclass(frozen=True)
class PayoffResult:
    """Summary of one amortization run that reached a zero balance."""
    months: int
    total_interest: float
    total_payments: float


@dataclass(frozen=True)
class PaymentDetail:
    """State of the loan after one simulated month."""
    month: int
    balance: float
    interest_payment: float
    principal_payment: float
    total_interest: float


@dataclass(frozen=True)
class InvestmentResult:
    """Growth of an investment stream, optionally after capital-gains tax."""
    gross_return: float
    profit: float
    taxes: float
    net_return: float
    total_invested: float

    @property
    def net_benefit(self) -> float:
        """Net return minus everything that was put in."""
        return self.net_return - self.total_invested


@dataclass(frozen=True)
class SavingsPoint:
    """Projected savings at a given age."""
    age: int
    projected_savings: float


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one form's inputs; empty errors means valid."""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, field_name: str) -> str:
        """Message for a field, or an empty string when it has none."""
        return self.errors.get(field_name, "")
