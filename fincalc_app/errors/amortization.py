"""
Amortization run failures.

A run either pays the loan off or ends in exactly one of these two states.
They are expected outcomes, not bugs, and callers must handle both.
"""

from typing import Optional

from .base import ErrorKind, FinanceError


class AmortizationError(FinanceError):
    """Base class for loan simulations that do not reach a zero balance."""


class NeverPaysOffError(AmortizationError):
    """Monthly payment does not exceed the interest accruing that month."""

    kind = ErrorKind.NEVER_PAYS_OFF

    def __init__(self, message: str, month: Optional[int] = None,
                 balance: Optional[float] = None, payment: Optional[float] = None,
                 interest: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.month = month
        self.balance = balance
        self.payment = payment
        self.interest = interest


class IterationLimitExceededError(AmortizationError):
    """Loan would take longer than the supported horizon to amortize."""

    kind = ErrorKind.ITERATION_LIMIT_EXCEEDED

    def __init__(self, message: str, max_months: Optional[int] = None,
                 remaining_balance: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.max_months = max_months
        self.remaining_balance = remaining_balance
