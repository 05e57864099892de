"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ConfigValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_amortization_params(params: dict[str, Any]) -> list[ConfigValidationError]:
        """Validate amortization parameters."""
        errors = []

        if "max_months" in params:
            value = params["max_months"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ConfigValidationError(
                    field="max_months",
                    message="Must be a positive integer",
                    value=value
                ))

        if "closure_epsilon" in params:
            value = params["closure_epsilon"]
            if not _is_number(value) or value <= 0 or value >= 1:
                errors.append(ConfigValidationError(
                    field="closure_epsilon",
                    message="Must be a positive number below 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_chart_params(params: dict[str, Any]) -> list[ConfigValidationError]:
        """Validate chart sampling parameters."""
        errors = []

        if "max_points" in params:
            value = params["max_points"]
            # Decimation needs room for both endpoints
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                errors.append(ConfigValidationError(
                    field="max_points",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        if "required_savings_step" in params:
            value = params["required_savings_step"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ConfigValidationError(
                    field="required_savings_step",
                    message="Must be a positive integer",
                    value=value
                ))

        start = params.get("required_savings_start_age")
        end = params.get("required_savings_end_age")
        if _is_number(start) and _is_number(end) and start >= end:
            errors.append(ConfigValidationError(
                field="required_savings_start_age",
                message="Must be less than required_savings_end_age",
                value=start
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigValidationError]:
        """Validate complete configuration."""
        errors = []

        if "amortization" in config:
            errors.extend(ConfigValidator.validate_amortization_params(config["amortization"]))

        if "charts" in config:
            errors.extend(ConfigValidator.validate_chart_params(config["charts"]))

        return errors
