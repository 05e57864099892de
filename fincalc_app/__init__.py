"""
FinCalc App - Personal Finance Calculation Engine

Deterministic, stateless functions for compound-growth projections,
Coast FIRE readiness, loan amortization under extra-payment scenarios and
after-tax investment comparisons, plus chart-ready time series.
"""

__version__ = "0.1.0"
__author__ = "FinCalc Team"
