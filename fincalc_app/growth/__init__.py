"""Compound growth and Coast FIRE retirement-readiness calculations."""

from .coast_fire import (
    TargetSource,
    additional_savings_needed,
    age_at_readiness,
    coast_fire_number,
    expenses_from_target,
    is_ready,
    monthly_expenses_from_target,
    project_savings,
    resolve_target,
    sync_expense_fields,
    target_from_annual_expenses,
    target_from_monthly_expenses,
)
from .compound import (
    future_value,
    inflation_adjust,
    present_value,
    real_return_rate,
    time_to_target,
    years_to_retirement,
)

__all__ = [
    "future_value",
    "present_value",
    "time_to_target",
    "real_return_rate",
    "inflation_adjust",
    "years_to_retirement",
    "TargetSource",
    "coast_fire_number",
    "is_ready",
    "additional_savings_needed",
    "age_at_readiness",
    "target_from_annual_expenses",
    "target_from_monthly_expenses",
    "expenses_from_target",
    "monthly_expenses_from_target",
    "resolve_target",
    "sync_expense_fields",
    "project_savings",
]
