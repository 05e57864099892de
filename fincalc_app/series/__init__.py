"""Bounded-resolution time series for visualization."""

from .charts import (
    coast_fire_projection_chart,
    decimate_indices,
    interest_comparison_chart,
    investment_comparison_chart,
    mortgage_balance_chart,
    required_savings_by_age_chart,
)

__all__ = [
    "coast_fire_projection_chart",
    "decimate_indices",
    "interest_comparison_chart",
    "investment_comparison_chart",
    "mortgage_balance_chart",
    "required_savings_by_age_chart",
]
