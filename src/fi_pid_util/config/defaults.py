"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "generator": {
        # Matches the GeneratorConfig defaults
        "min_year": 1966,
        "max_year": 2042,
        # Ordinary PIDs by default; "test" generates 900-999 individual numbers
        "validity": "valid",
        "count": 10,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/fi-pid-util.log",
        # PIDs are personal data; redaction is opt-in
        "redact_pii": False,
    },
}

DEFAULT_CONFIG_PATH = "config/config.json"
