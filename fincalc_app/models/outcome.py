"""
Tagged result type for calls whose failure is an expected branch.

Callers that would otherwise wrap a call in try/except and substitute a
guessed placeholder use ``capture`` instead and match on Ok/Err.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from ..errors import ErrorKind, FinanceError

T = TypeVar("T")

FAILURE_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "One or more inputs are outside the supported range",
    ErrorKind.UNREACHABLE_TARGET: "The target cannot be reached by growth alone",
    ErrorKind.NEVER_PAYS_OFF: "Payment is too low to cover the monthly interest",
    ErrorKind.ITERATION_LIMIT_EXCEEDED: "Payoff would take longer than 50 years",
    ErrorKind.UNDEFINED_COAST_AGE: "Coast FIRE age is undefined without current savings",
}


def failure_message(kind: ErrorKind) -> str:
    """User-facing message for a failure kind."""
    return FAILURE_MESSAGES[kind]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful computation."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed computation with its classified kind."""
    kind: ErrorKind
    message: str
    error: FinanceError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def display_message(self) -> str:
        return failure_message(self.kind)


Outcome = Union[Ok[T], Err]


def capture(func: Callable[..., T], *args, **kwargs) -> "Outcome[T]":
    """Run func and fold any engine failure into an Err."""
    try:
        return Ok(func(*args, **kwargs))
    except FinanceError as e:
        return Err(kind=e.kind, message=str(e), error=e)
