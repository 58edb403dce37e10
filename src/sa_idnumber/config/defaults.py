"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "codec": {
        # 69-99 -> 1969-1999, 00-68 -> 2000-2068
        "century_pivot": 69,
    },
    "generator": {
        "start_date": "1969-12-31",
        "end_date": "2068-12-31",
        # No seed: every run produces different ID numbers
        "seed": None,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/sa-idnumber.log",
        # ID numbers are logged in full unless the user opts in
        "redact_ids": False,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
