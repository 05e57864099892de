"""Form input validation producing complete per-field error maps."""

from .inputs import (
    CoastFireInputs,
    MortgageInputs,
    validate_age,
    validate_coast_fire_inputs,
    validate_inflation_rate,
    validate_mortgage_inputs,
    validate_non_negative,
    validate_numeric_range,
    validate_positive,
    validate_retirement_age,
    validate_return_rate,
    validate_tax_rate,
    validate_withdrawal_rate,
)

__all__ = [
    "CoastFireInputs",
    "MortgageInputs",
    "validate_age",
    "validate_coast_fire_inputs",
    "validate_inflation_rate",
    "validate_mortgage_inputs",
    "validate_non_negative",
    "validate_numeric_range",
    "validate_positive",
    "validate_retirement_age",
    "validate_return_rate",
    "validate_tax_rate",
    "validate_withdrawal_rate",
]
