"""
Error classification for the finance calculation engine.

Every failure raised by the engine carries an ErrorKind so callers can map
each kind to a distinct message instead of guessing from exception text.
"""

from .base import ErrorKind, FinanceError
from .domain import DomainError, UndefinedCoastAgeError, UnreachableTargetError
from .amortization import (
    AmortizationError,
    IterationLimitExceededError,
    NeverPaysOffError,
)

__all__ = [
    "ErrorKind",
    "FinanceError",
    # Input errors
    "DomainError",
    "UndefinedCoastAgeError",
    "UnreachableTargetError",
    # Amortization failures
    "AmortizationError",
    "NeverPaysOffError",
    "IterationLimitExceededError",
]
