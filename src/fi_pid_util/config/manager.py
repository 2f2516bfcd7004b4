"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading and management functionality,
including support for JSON configuration files, environment variable overrides,
and configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from fi_pid_util.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from fi_pid_util.config.schema import Config, GeneratorSettings, LoggingConfig
from fi_pid_util.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "FI_PID_"


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


# (environment variable suffix, config section, field, converter)
ENV_OVERRIDES: list[tuple[str, str, str, Callable[[str], Any]]] = [
    ("MIN_YEAR", "generator", "min_year", int),
    ("MAX_YEAR", "generator", "max_year", int),
    ("VALIDITY", "generator", "validity", str),
    ("COUNT", "generator", "count", int),
    ("LOG_LEVEL", "logging", "level", str),
    ("LOG_FILE", "logging", "log_file", str),
    ("REDACT_PII", "logging", "redact_pii", _parse_bool),
]


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (FI_PID_* prefix)
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
        >>> config.generator.min_year
        1966
    """
    # Load .env file from the working directory or its parents
    load_dotenv(find_dotenv(usecwd=True))

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and "
            f"{ENV_PREFIX}* environment variables."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If JSON is malformed or the file cannot be read
    """
    if not config_path.exists():
        logger.debug(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Deep copy so callers cannot mutate the defaults
        return json.loads(json.dumps(DEFAULT_CONFIG))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
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

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a JSON object, "
            f"got {type(config_dict).__name__}"
        )

    logger.info(f"Loaded configuration from {config_path}")
    return config_dict


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with FI_PID_ prefix.

    Environment variables follow the pattern: FI_PID_<FIELD>
    For example: FI_PID_MIN_YEAR, FI_PID_LOG_LEVEL

    Args:
        config_dict: Configuration dictionary to update

    Returns:
        Updated configuration dictionary with environment overrides applied

    Raises:
        ConfigurationError: If a numeric override is not a number
    """
    for suffix, section, field, convert in ENV_OVERRIDES:
        name = f"{ENV_PREFIX}{suffix}"
        raw = os.getenv(name)
        if not raw:
            continue
        try:
            value = convert(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {name}: {raw!r}\n"
                f"Error: {e}"
            ) from e
        config_dict.setdefault(section, {})[field] = value
        logger.debug(f"Override: {field} from environment")

    return config_dict


def get_generator_settings(config: Config) -> GeneratorSettings:
    """Get PID generation settings.

    Example:
        >>> config = load_config()
        >>> settings = get_generator_settings(config)
        >>> generator_config = settings.to_generator_config()
    """
    return config.generator


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Example:
        >>> config = load_config()
        >>> log_level = get_logging_config(config).level
    """
    return config.logging
