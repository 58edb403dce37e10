"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading functionality, including
support for JSON configuration files, environment variable overrides, and
configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from sa_idnumber.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from sa_idnumber.config.schema import Config, GeneratorConfig, LoggingConfig
from sa_idnumber.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "SA_IDNUMBER_"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (SA_IDNUMBER_* prefix)
    3. Configuration file (JSON)
    4. Default values

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> pivot = config.codec.century_pivot
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If JSON is malformed or unreadable
    """
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
            logger.info(f"Loaded configuration from {config_path}")
            return config_dict
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check file permissions and path"
            ) from e
    else:
        logger.info(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Deep copy so callers cannot mutate the defaults
        return json.loads(json.dumps(DEFAULT_CONFIG))


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with SA_IDNUMBER_ prefix.

    Environment variables follow the pattern: SA_IDNUMBER_<FIELD>
    For example: SA_IDNUMBER_CENTURY_PIVOT, SA_IDNUMBER_LOG_LEVEL

    Args:
        config_dict: Configuration dictionary to update

    Returns:
        Updated configuration dictionary with environment overrides applied

    Raises:
        ConfigurationError: If a numeric override is not an integer
    """
    # Codec section
    if century_pivot := os.getenv(f"{ENV_PREFIX}CENTURY_PIVOT"):
        config_dict.setdefault("codec", {})["century_pivot"] = _parse_int(
            "CENTURY_PIVOT", century_pivot
        )
        logger.debug("Override: century_pivot from environment")

    # Generator section
    if start_date := os.getenv(f"{ENV_PREFIX}START_DATE"):
        config_dict.setdefault("generator", {})["start_date"] = start_date
        logger.debug("Override: start_date from environment")

    if end_date := os.getenv(f"{ENV_PREFIX}END_DATE"):
        config_dict.setdefault("generator", {})["end_date"] = end_date
        logger.debug("Override: end_date from environment")

    if seed := os.getenv(f"{ENV_PREFIX}SEED"):
        config_dict.setdefault("generator", {})["seed"] = _parse_int("SEED", seed)
        logger.debug("Override: seed from environment")

    # Logging section
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")

    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")

    if redact_ids := os.getenv(f"{ENV_PREFIX}REDACT_IDS"):
        config_dict.setdefault("logging", {})["redact_ids"] = _parse_bool(redact_ids)
        logger.debug("Override: redact_ids from environment")

    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string.

    Args:
        value: String value to parse (case-insensitive)

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "on")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid value for {ENV_PREFIX}{name}: {value!r} is not an integer"
        ) from e


def get_generator_config(config: Config) -> GeneratorConfig:
    """Get random generation settings.

    Args:
        config: Configuration instance

    Returns:
        GeneratorConfig with date span and seed
    """
    return config.generator


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Args:
        config: Configuration instance

    Returns:
        LoggingConfig with level, log_file, and redact_ids settings
    """
    return config.logging
