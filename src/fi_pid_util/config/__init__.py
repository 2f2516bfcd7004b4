"""Config module.

This module provides configuration management functionality.
"""

from fi_pid_util.config.manager import (
    get_generator_settings,
    get_logging_config,
    load_config,
)
from fi_pid_util.config.schema import Config, GeneratorSettings, LoggingConfig

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_generator_settings",
    "get_logging_config",
    # Configuration models
    "Config",
    "GeneratorSettings",
    "LoggingConfig",
]
