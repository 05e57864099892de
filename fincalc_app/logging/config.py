"""
Centralized logging configuration for the finance engine.

All components log through structlog so that scenario runs, payoff
failures and report generation share one structured format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the finance engine subsystem."""
    return get_logger(name).bind(subsystem="finance_engine")


def log_payoff_outcome(
    logger: FilteringBoundLogger,
    scenario: str,
    paid_off: bool,
    months: Optional[int] = None,
    failure_kind: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one amortization scenario with standardized format.

    Args:
        logger: Structlog logger instance
        scenario: Scenario name, e.g. "standard" or "accelerated"
        paid_off: Whether the run reached a zero balance
        months: Months to payoff when paid_off
        failure_kind: ErrorKind value when the run failed
        context: Additional context data
    """
    bound_logger = logger.bind(
        scenario=scenario,
        payoff_result="PAID_OFF" if paid_off else "FAILED",
        months=months,
        failure_kind=failure_kind,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if paid_off:
        bound_logger.info("Payoff scenario evaluated")
    else:
        bound_logger.warning("Payoff scenario failed")
