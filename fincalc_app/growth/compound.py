"""
Compound growth formulas.

All rates are decimal fractions (0.07 for 7%) and all durations are
fractional years. Percent to decimal conversion belongs to the caller.
"""

import math

from ..errors import DomainError


def _check_rate(rate: float, field: str = "rate") -> None:
    if rate < -1:
        raise DomainError(f"{field} cannot be less than -100%", field=field, value=rate)


def _check_years(years: float) -> None:
    if years < 0:
        raise DomainError("years cannot be negative", field="years", value=years)


def future_value(principal: float, rate: float, years: float) -> float:
    """
    Grow a present amount at a fixed annual rate.

    FV = PV * (1 + r)^t

    Args:
        principal: Present value
        rate: Annual rate as decimal
        years: Years to compound

    Returns:
        Future value after compounding

    Raises:
        DomainError: If principal or years is negative, or rate < -100%
    """
    if principal < 0:
        raise DomainError("principal cannot be negative", field="principal", value=principal)
    _check_rate(rate)
    _check_years(years)

    if years == 0 or principal == 0:
        return principal

    return principal * math.pow(1 + rate, years)


def present_value(future_amount: float, rate: float, years: float) -> float:
    """
    Discount a future amount back to today.

    PV = FV / (1 + r)^t

    Raises:
        DomainError: If the future amount or years is negative, or rate < -100%
    """
    if future_amount < 0:
        raise DomainError("future value cannot be negative", field="future_value",
                          value=future_amount)
    _check_rate(rate)
    _check_years(years)

    if years == 0 or future_amount == 0:
        return future_amount

    return future_amount / math.pow(1 + rate, years)


def time_to_target(principal: float, target: float, rate: float) -> float:
    """
    Years needed for principal to grow into target.

    t = ln(target / principal) / ln(1 + r)

    Returns 0 when the target is already met and ``math.inf`` when the rate
    cannot grow the principal (rate <= 0). Callers treat a non-finite result
    as "unreachable", not as an error.

    Raises:
        DomainError: If principal or target is not positive, or rate <= -100%
    """
    if principal <= 0:
        raise DomainError("principal must be positive", field="principal", value=principal)
    if target <= 0:
        raise DomainError("target must be positive", field="target", value=target)
    if rate <= -1:
        raise DomainError("rate must be greater than -100%", field="rate", value=rate)

    if target <= principal:
        return 0.0
    if rate <= 0:
        return math.inf

    return math.log(target / principal) / math.log(1 + rate)


def real_return_rate(nominal_rate: float, inflation_rate: float) -> float:
    """
    Inflation-adjusted return via the Fisher equation.

    real = (1 + nominal) / (1 + inflation) - 1

    Simple subtraction (nominal - inflation) overstates the real rate.
    """
    _check_rate(nominal_rate, "nominal_rate")
    if inflation_rate <= -1:
        raise DomainError("inflation_rate must be greater than -100%",
                          field="inflation_rate", value=inflation_rate)

    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def inflation_adjust(target: float, inflation_rate: float, years: float) -> float:
    """Express a target in today's dollars as nominal dollars `years` from now."""
    if target < 0:
        raise DomainError("target cannot be negative", field="target", value=target)
    _check_rate(inflation_rate, "inflation_rate")
    _check_years(years)

    if years == 0 or inflation_rate == 0 or target == 0:
        return target

    return target * math.pow(1 + inflation_rate, years)


def years_to_retirement(current_age: float, retirement_age: float) -> float:
    """Years left until retirement, never below zero."""
    if current_age < 0:
        raise DomainError("current age cannot be negative", field="current_age",
                          value=current_age)
    if retirement_age < 0:
        raise DomainError("retirement age cannot be negative", field="retirement_age",
                          value=retirement_age)

    return max(0, retirement_age - current_age)
