"""Unit tests for configuration management.

Tests cover configuration loading, validation, environment variable overrides,
and error handling.
"""

import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from sa_idnumber.config import (
    CodecConfig,
    Config,
    GeneratorConfig,
    LoggingConfig,
    get_generator_config,
    get_logging_config,
    load_config,
)
from sa_idnumber.config.defaults import DEFAULT_CONFIG
from sa_idnumber.utils.exceptions import ConfigurationError


ENV_VARS = [
    "SA_IDNUMBER_CENTURY_PIVOT",
    "SA_IDNUMBER_START_DATE",
    "SA_IDNUMBER_END_DATE",
    "SA_IDNUMBER_SEED",
    "SA_IDNUMBER_LOG_LEVEL",
    "SA_IDNUMBER_LOG_FILE",
    "SA_IDNUMBER_REDACT_IDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration environment variables for every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfigurationSchema:
    """Test pydantic configuration models validation."""

    def test_defaults(self) -> None:
        """Test the default configuration values."""
        # Arrange & Act
        config = Config()

        # Assert
        assert config.codec.century_pivot == 69
        assert config.generator.start_date == date(1969, 12, 31)
        assert config.generator.end_date == date(2068, 12, 31)
        assert config.generator.seed is None
        assert config.logging.level == "INFO"
        assert config.logging.redact_ids is False

    def test_default_dict_matches_models(self) -> None:
        """Test DEFAULT_CONFIG validates to the model defaults."""
        assert Config(**DEFAULT_CONFIG) == Config()

    @pytest.mark.parametrize("pivot", [-1, 100])
    def test_codec_pivot_range(self, pivot: int) -> None:
        """Test CodecConfig rejects pivots outside 0-99."""
        with pytest.raises(ValidationError):
            CodecConfig(century_pivot=pivot)

    def test_generator_dates_from_strings(self) -> None:
        """Test GeneratorConfig parses ISO date strings."""
        # Arrange & Act
        config = GeneratorConfig(start_date="1980-01-01", end_date="1989-12-31")

        # Assert
        assert config.start_date == date(1980, 1, 1)
        assert config.end_date == date(1989, 12, 31)

    def test_generator_inverted_span(self) -> None:
        """Test GeneratorConfig rejects end_date before start_date."""
        with pytest.raises(ValidationError) as exc_info:
            GeneratorConfig(start_date="2000-01-01", end_date="1999-01-01")

        assert "Invalid date span" in str(exc_info.value)

    def test_span_must_fit_century_window(self) -> None:
        """Test the generator span must be readable under the codec pivot."""
        # Default span ends in 2068, pivot 50 only covers 1950-2049
        with pytest.raises(ValidationError) as exc_info:
            Config(codec={"century_pivot": 50})

        assert "1950-2049" in str(exc_info.value)

    def test_span_matching_custom_pivot(self) -> None:
        """Test a span inside a custom pivot's window is accepted."""
        # Act
        config = Config(
            codec={"century_pivot": 50},
            generator={"start_date": "1950-01-01", "end_date": "2049-12-31"},
        )

        # Assert
        assert config.codec.century_pivot == 50

    def test_logging_config_case_insensitive(self) -> None:
        """Test LoggingConfig accepts case-insensitive log levels."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_logging_config_invalid_level(self) -> None:
        """Test LoggingConfig rejects invalid log level."""
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(level="INVALID")

        assert "Invalid log level" in str(exc_info.value)


class TestLoadConfig:
    """Test configuration loading from files and environment."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test a missing config file falls back to defaults."""
        # Act
        config = load_config(tmp_path / "missing.json")

        # Assert
        assert config == Config()

    def test_load_from_file(self, tmp_path: Path) -> None:
        """Test values are read from a JSON file."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "codec": {"century_pivot": 30},
            "generator": {"start_date": "1970-01-01", "end_date": "1979-12-31", "seed": 7},
            "logging": {"level": "warning"},
        }))

        # Act
        config = load_config(config_file)

        # Assert
        assert config.codec.century_pivot == 30
        assert config.generator.seed == 7
        assert config.generator.end_date == date(1979, 12, 31)
        assert config.logging.level == "WARNING"

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        """Test sections missing from the file keep their defaults."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "debug"}}))

        # Act
        config = load_config(config_file)

        # Assert
        assert config.logging.level == "DEBUG"
        assert config.codec == CodecConfig()
        assert config.generator == GeneratorConfig()

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ConfigurationError."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        # Act & Assert
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(config_file)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test schema violations raise ConfigurationError."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"codec": {"century_pivot": 150}}))

        # Act & Assert
        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            load_config(config_file)

    def test_env_overrides(self, tmp_path: Path, monkeypatch) -> None:
        """Test environment variables override the config file."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"codec": {"century_pivot": 30}}))
        monkeypatch.setenv("SA_IDNUMBER_CENTURY_PIVOT", "50")
        monkeypatch.setenv("SA_IDNUMBER_SEED", "99")
        monkeypatch.setenv("SA_IDNUMBER_START_DATE", "1990-01-01")
        monkeypatch.setenv("SA_IDNUMBER_END_DATE", "2040-12-31")
        monkeypatch.setenv("SA_IDNUMBER_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("SA_IDNUMBER_REDACT_IDS", "yes")

        # Act
        config = load_config(config_file)

        # Assert
        assert config.codec.century_pivot == 50
        assert config.generator.seed == 99
        assert config.generator.start_date == date(1990, 1, 1)
        assert config.generator.end_date == date(2040, 12, 31)
        assert config.logging.level == "ERROR"
        assert config.logging.redact_ids is True

    def test_env_non_integer(self, tmp_path: Path, monkeypatch) -> None:
        """Test a non-numeric integer override raises ConfigurationError."""
        # Arrange
        monkeypatch.setenv("SA_IDNUMBER_SEED", "abc")

        # Act & Assert
        with pytest.raises(ConfigurationError, match="SA_IDNUMBER_SEED"):
            load_config(tmp_path / "missing.json")


class TestConfigHelpers:
    """Test configuration accessor helpers."""

    def test_get_generator_config(self) -> None:
        """Test the generator section accessor."""
        config = Config()
        assert get_generator_config(config) is config.generator

    def test_get_logging_config(self) -> None:
        """Test the logging section accessor."""
        config = Config()
        assert get_logging_config(config) is config.logging
