"""
Input-domain errors.

Raised immediately at the point of the call when an argument falls outside
the range a formula is defined for. These are never retried.
"""

from typing import Any, Optional

from .base import ErrorKind, FinanceError


class DomainError(FinanceError):
    """Negative money, out-of-range rate or invalid duration."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class UndefinedCoastAgeError(DomainError):
    """Age at readiness requested with no current savings to grow."""

    kind = ErrorKind.UNDEFINED_COAST_AGE


class UnreachableTargetError(FinanceError):
    """Target can never be reached by growth alone at the given rate."""

    kind = ErrorKind.UNREACHABLE_TARGET

    def __init__(self, message: str, principal: Optional[float] = None,
                 target: Optional[float] = None, rate: Optional[float] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.principal = principal
        self.target = target
        self.rate = rate
