"""Tests for logging configuration and helpers."""

from unittest.mock import Mock

import structlog

from fincalc_app.logging import configure_logging, get_engine_logger, get_logger
from fincalc_app.logging.config import log_payoff_outcome


class TestLoggingConfiguration:
    """Test structlog setup."""

    def test_configure_logging_console(self) -> None:
        """Test console configuration completes and yields usable loggers."""
        configure_logging(level="DEBUG", format_json=False)
        logger = get_logger("test")
        logger.info("console message", value=1)

    def test_configure_logging_json(self) -> None:
        """Test JSON configuration ends with the JSON renderer."""
        configure_logging(level="WARNING", format_json=True, include_caller=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_engine_logger_binds_subsystem(self) -> None:
        """Test engine logger carries the subsystem key."""
        configure_logging(level="INFO", format_json=True)
        logger = get_engine_logger("fincalc_app.engine")
        assert logger is not None
        logger.info("bound message")


class TestPayoffOutcomeLogging:
    """Test standardized payoff logging."""

    def _mock_logger(self) -> Mock:
        logger = Mock()
        logger.bind.return_value = logger
        return logger

    def test_paid_off_logs_info(self) -> None:
        """Test successful scenario logs at info level."""
        logger = self._mock_logger()
        log_payoff_outcome(logger, "standard", True, months=370)

        logger.bind.assert_called_once_with(
            scenario="standard", payoff_result="PAID_OFF", months=370, failure_kind=None)
        logger.info.assert_called_once_with("Payoff scenario evaluated")
        logger.warning.assert_not_called()

    def test_failure_logs_warning(self) -> None:
        """Test failed scenario logs a warning with extra context."""
        logger = self._mock_logger()
        log_payoff_outcome(logger, "accelerated", False, failure_kind="never_pays_off",
                           context={"payment": 300})

        assert logger.bind.call_count == 2
        logger.bind.assert_called_with(context={"payment": 300})
        logger.warning.assert_called_once_with("Payoff scenario failed")
        logger.info.assert_not_called()
