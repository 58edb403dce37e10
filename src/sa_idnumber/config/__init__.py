"""Config module.

This module provides configuration management functionality.
"""

from sa_idnumber.config.manager import (
    get_generator_config,
    get_logging_config,
    load_config,
)
from sa_idnumber.config.schema import (
    CodecConfig,
    Config,
    GeneratorConfig,
    LoggingConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_generator_config",
    "get_logging_config",
    # Configuration models
    "Config",
    "CodecConfig",
    "GeneratorConfig",
    "LoggingConfig",
]
