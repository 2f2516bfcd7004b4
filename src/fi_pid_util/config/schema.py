"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from fi_pid_util.models.pid import GeneratorConfig, Validity
from fi_pid_util.pid.constants import MAX_YEAR, MIN_YEAR


class GeneratorSettings(BaseModel):
    """Default settings for the ``generate`` command.

    Attributes:
        min_year: Lowest year of birth (inclusive)
        max_year: Highest year of birth (inclusive)
        validity: "valid" for ordinary PIDs, "test" for test PIDs
        count: Number of PIDs to generate

    Example:
        >>> settings = GeneratorSettings(min_year=1990, max_year=1999, validity="test")
        >>> settings.validity
        'test'
    """

    min_year: int = Field(default=1966, description="Lowest year of birth")
    max_year: int = Field(default=2042, description="Highest year of birth")
    validity: str = Field(default="valid", description="Validity: valid or test")
    count: int = Field(default=10, ge=1, description="Number of PIDs to generate")

    @field_validator("validity")
    @classmethod
    def validate_validity(cls, v: str) -> str:
        """Validate generated PID validity.

        Args:
            v: Validity string

        Returns:
            Validated validity (lowercase)

        Raises:
            ValueError: If validity is not "valid" or "test"
        """
        valid_values = [Validity.VALID.value, Validity.TEST.value]
        v_lower = v.lower()
        if v_lower not in valid_values:
            raise ValueError(
                f"Invalid validity: {v}. Must be one of: {', '.join(valid_values)}"
            )
        return v_lower

    @model_validator(mode="after")
    def validate_year_range(self) -> "GeneratorSettings":
        """Validate the year range is ordered and supported by the PID format.

        Raises:
            ValueError: If the range is reversed or outside 1800-2099
        """
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) cannot be greater than "
                f"max_year ({self.max_year}). "
                f"Fix: Set min_year <= max_year."
            )
        if self.min_year < MIN_YEAR or self.max_year > MAX_YEAR:
            raise ValueError(
                f"Year range {self.min_year}-{self.max_year} is not supported. "
                f"Fix: Use years between {MIN_YEAR} and {MAX_YEAR}."
            )
        return self

    def to_generator_config(self) -> GeneratorConfig:
        """Build the GeneratorConfig used by the PID generator."""
        return GeneratorConfig(
            min_year=self.min_year,
            max_year=self.max_year,
            validity=Validity(self.validity),
        )


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PIDs from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/fi-pid-util.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PIDs from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        generator: Defaults for PID generation
        logging: Logging configuration

    Example:
        >>> config = Config(generator=GeneratorSettings(count=5))
        >>> config.generator.count
        5
    """

    generator: GeneratorSettings = GeneratorSettings()
    logging: LoggingConfig = LoggingConfig()
