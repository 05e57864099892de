"""Value records produced by the calculation engine."""

from .charts import ChartDataset, ChartSeries
from .outcome import Err, Ok, Outcome, capture, failure_message
from .records import (
    InvestmentResult,
    PaymentDetail,
    PayoffResult,
    SavingsPoint,
    ValidationResult,
)

__all__ = [
    "ChartDataset",
    "ChartSeries",
    "Err",
    "Ok",
    "Outcome",
    "capture",
    "failure_message",
    "InvestmentResult",
    "PaymentDetail",
    "PayoffResult",
    "SavingsPoint",
    "ValidationResult",
]
