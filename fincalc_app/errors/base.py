"""Base exception and failure kinds shared by every engine error."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Failure kinds a caller must be able to tell apart."""
    INVALID_INPUT = "invalid_input"
    UNREACHABLE_TARGET = "unreachable_target"
    NEVER_PAYS_OFF = "never_pays_off"
    ITERATION_LIMIT_EXCEEDED = "iteration_limit_exceeded"
    UNDEFINED_COAST_AGE = "undefined_coast_age"


class FinanceError(Exception):
    """Base class for every failure raised by the calculation engine."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
