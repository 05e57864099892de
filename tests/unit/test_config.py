"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from fincalc_app.config.defaults import EngineConfig, get_default_config
from fincalc_app.config.loader import ConfigLoader
from fincalc_app.config.validation import ConfigValidator


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.amortization.max_months == 600
        assert config.amortization.closure_epsilon == 0.01
        assert config.charts.max_points == 360
        assert config.validation.min_age == 18
        assert config.coast_fire.withdrawal_rate == 4.0
        assert config.mortgage.interest_rate == 4.5


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with no config file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["amortization"]["max_months"] == 600
        assert config["charts"]["required_savings_step"] == 5

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Test YAML values take precedence over defaults."""
        (tmp_path / "engine.yaml").write_text("amortization:\n  max_months: 480\n")
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["amortization"]["max_months"] == 480
        assert config["amortization"]["closure_epsilon"] == 0.01

    def test_explicit_overrides_win(self, tmp_path: Path) -> None:
        """Test explicit overrides take precedence over the file."""
        (tmp_path / "engine.yaml").write_text("charts:\n  max_points: 200\n")
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config({"charts": {"max_points": 100}})

        assert config["charts"]["max_points"] == 100
        assert config["charts"]["required_savings_start_age"] == 20

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty YAML file behaves like no file."""
        (tmp_path / "engine.yaml").write_text("")
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_file_config() == {}

    def test_load_engine_config(self, tmp_path: Path) -> None:
        """Test merged mapping is rebuilt into typed config."""
        (tmp_path / "engine.yaml").write_text(
            "validation:\n  max_return_rate: 20\nunknown_section:\n  x: 1\n"
        )
        loader = ConfigLoader.create(tmp_path)
        config = loader.load_engine_config({"amortization": {"max_months": 360}})

        assert isinstance(config, EngineConfig)
        assert config.validation.max_return_rate == 20
        assert config.amortization.max_months == 360
        assert config.charts.max_points == 360

    def test_shipped_config_file_is_valid(self) -> None:
        """Test the repository config file passes validation."""
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_params(self) -> None:
        """Test validation of valid parameters."""
        errors = ConfigValidator.validate_config({
            "amortization": {"max_months": 600, "closure_epsilon": 0.01},
            "charts": {"max_points": 120, "required_savings_step": 5},
        })
        assert errors == []

    @pytest.mark.parametrize("params,field", [
        ({"max_months": 0}, "max_months"),
        ({"max_months": 12.5}, "max_months"),
        ({"closure_epsilon": 0}, "closure_epsilon"),
        ({"closure_epsilon": "tiny"}, "closure_epsilon"),
    ])
    def test_invalid_amortization_params(self, params, field) -> None:
        """Test validation of invalid amortization parameters."""
        errors = ConfigValidator.validate_amortization_params(params)
        assert len(errors) == 1
        assert errors[0].field == field

    def test_invalid_chart_params(self) -> None:
        """Test validation of invalid chart parameters."""
        errors = ConfigValidator.validate_chart_params({
            "max_points": 1,
            "required_savings_step": -5,
            "required_savings_start_age": 60,
            "required_savings_end_age": 50,
        })
        assert {e.field for e in errors} == {
            "max_points", "required_savings_step", "required_savings_start_age"
        }
