"""
Input validation for the Coast FIRE and mortgage forms.

Each predicate returns None for a valid value or a field-specific message.
The aggregate validators collect every violated field at once and never
raise, so the caller can show all errors together. Rates are percentages
here (7 for 7%), exactly as entered in the forms.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config.defaults import ValidationParams
from ..models.records import ValidationResult

_DEFAULT_PARAMS = ValidationParams()


@dataclass(frozen=True)
class CoastFireInputs:
    """Raw Coast FIRE form values."""
    current_age: float
    retirement_age: float
    current_savings: float
    expected_return_rate: float
    target_retirement_amount: float
    monthly_expenses: float = 0.0
    yearly_expenses: float = 0.0
    withdrawal_rate: float = 4.0
    inflation_rate: float = 0.0
    use_real_returns: bool = False


@dataclass(frozen=True)
class MortgageInputs:
    """Raw mortgage payoff form values."""
    principal: float
    years_left: float
    interest_rate: float
    monthly_payment: float
    additional_monthly_payment: float = 0.0
    lump_sum_payment: float = 0.0
    investment_return_rate: float = 7.0
    investment_tax_rate: float = 20.0


def _fmt(number: float) -> str:
    return f"{number:g}"


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and not math.isnan(value))


def validate_numeric_range(value: Any, min_value: float, max_value: float,
                           field_name: str) -> Optional[str]:
    """
    Validate a number lies within [min_value, max_value].

    validate_numeric_range(15, 18, 100, "Age") -> "Age must be between 18 and 100"
    """
    if not _is_number(value):
        return f"{field_name} must be a valid number"

    if value < min_value or value > max_value:
        return f"{field_name} must be between {_fmt(min_value)} and {_fmt(max_value)}"

    return None


def validate_non_negative(value: Any, field_name: str) -> Optional[str]:
    if not _is_number(value):
        return f"{field_name} must be a valid number"

    if value < 0:
        return f"{field_name} cannot be negative"

    return None


def validate_positive(value: Any, field_name: str) -> Optional[str]:
    if not _is_number(value):
        return f"{field_name} must be a valid number"

    if value <= 0:
        return f"{field_name} must be greater than 0"

    return None


def _percent_range(value: Any, min_value: float, max_value: float, field_name: str,
                   verb: str = "must") -> Optional[str]:
    error = validate_numeric_range(value, min_value, max_value, field_name)
    if error and _is_number(value):
        return f"{field_name} {verb} be between {_fmt(min_value)}% and {_fmt(max_value)}%"
    return error


def validate_age(age: Any, field_name: str,
                 params: ValidationParams = _DEFAULT_PARAMS) -> Optional[str]:
    return validate_numeric_range(age, params.min_age, params.max_age, field_name)


def validate_return_rate(rate: Any, field_name: str,
                         params: ValidationParams = _DEFAULT_PARAMS) -> Optional[str]:
    return _percent_range(rate, 0, params.max_return_rate, field_name)


def validate_withdrawal_rate(rate: Any, field_name: str,
                             params: ValidationParams = _DEFAULT_PARAMS) -> Optional[str]:
    return _percent_range(rate, params.min_withdrawal_rate, params.max_withdrawal_rate,
                          field_name, verb="should")


def validate_inflation_rate(rate: Any, field_name: str,
                            params: ValidationParams = _DEFAULT_PARAMS) -> Optional[str]:
    return _percent_range(rate, 0, params.max_inflation_rate, field_name, verb="should")


def validate_tax_rate(rate: Any, field_name: str,
                      params: ValidationParams = _DEFAULT_PARAMS) -> Optional[str]:
    return _percent_range(rate, 0, params.max_tax_rate, field_name)


def validate_retirement_age(current_age: Any, retirement_age: Any) -> Optional[str]:
    """Cross-field rule: retirement must come after the current age."""
    if not _is_number(current_age):
        return "Current age must be a valid number"

    if not _is_number(retirement_age):
        return "Retirement age must be a valid number"

    if retirement_age <= current_age:
        return "Retirement age must be greater than current age"

    return None


def _collect(checks: list[tuple[str, Callable[[], Optional[str]]]]) -> dict[str, str]:
    errors = {}
    for field_name, check in checks:
        message = check()
        if message and field_name not in errors:
            errors[field_name] = message
    return errors


def validate_coast_fire_inputs(inputs: CoastFireInputs,
                               params: Optional[ValidationParams] = None) -> ValidationResult:
    """Validate every Coast FIRE field; the range message wins over the cross-field one."""
    p = params or _DEFAULT_PARAMS
    errors = _collect([
        ("current_age", lambda: validate_age(inputs.current_age, "Current age", p)),
        ("retirement_age", lambda: validate_age(inputs.retirement_age, "Retirement age", p)),
        ("current_savings", lambda: validate_non_negative(inputs.current_savings,
                                                          "Current savings")),
        ("expected_return_rate", lambda: validate_return_rate(inputs.expected_return_rate,
                                                               "Return rate", p)),
        ("target_retirement_amount", lambda: validate_positive(
            inputs.target_retirement_amount, "Target retirement amount")),
        ("monthly_expenses", lambda: validate_non_negative(inputs.monthly_expenses,
                                                           "Monthly expenses")),
        ("yearly_expenses", lambda: validate_non_negative(inputs.yearly_expenses,
                                                          "Yearly expenses")),
        ("withdrawal_rate", lambda: validate_withdrawal_rate(inputs.withdrawal_rate,
                                                             "Withdrawal rate", p)),
        ("inflation_rate", lambda: validate_inflation_rate(inputs.inflation_rate,
                                                           "Inflation rate", p)),
        ("retirement_age", lambda: validate_retirement_age(inputs.current_age,
                                                           inputs.retirement_age)),
    ])
    return ValidationResult(errors=errors)


def validate_mortgage_inputs(inputs: MortgageInputs,
                             params: Optional[ValidationParams] = None) -> ValidationResult:
    p = params or _DEFAULT_PARAMS
    errors = _collect([
        ("principal", lambda: validate_positive(inputs.principal, "Principal")),
        ("years_left", lambda: validate_numeric_range(inputs.years_left, p.min_years_left,
                                                      p.max_years_left, "Years left")),
        ("interest_rate", lambda: _percent_range(inputs.interest_rate, 0,
                                                 p.max_interest_rate, "Interest rate")),
        ("monthly_payment", lambda: validate_positive(inputs.monthly_payment,
                                                      "Monthly payment")),
        ("additional_monthly_payment", lambda: validate_non_negative(
            inputs.additional_monthly_payment, "Additional monthly payment")),
        ("lump_sum_payment", lambda: validate_non_negative(inputs.lump_sum_payment,
                                                           "Lump sum payment")),
        ("investment_return_rate", lambda: validate_return_rate(
            inputs.investment_return_rate, "Investment return rate", p)),
        ("investment_tax_rate", lambda: validate_tax_rate(inputs.investment_tax_rate,
                                                          "Investment tax rate", p)),
    ])
    return ValidationResult(errors=errors)
