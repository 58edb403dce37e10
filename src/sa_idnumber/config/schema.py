"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from sa_idnumber.core.codec import DEFAULT_CENTURY_PIVOT, century_window
from sa_idnumber.core.generator import DEFAULT_END_DATE, DEFAULT_START_DATE


class CodecConfig(BaseModel):
    """Configuration for reading ID number strings.

    Attributes:
        century_pivot: First two-digit year that maps to the 1900s; lower
            two-digit years map to the 2000s
    """

    century_pivot: int = Field(
        default=DEFAULT_CENTURY_PIVOT,
        ge=0,
        le=99,
        description="Two-digit years >= pivot are 19YY, others 20YY",
    )


class GeneratorConfig(BaseModel):
    """Configuration for random ID number generation.

    Attributes:
        start_date: First possible birth date (inclusive)
        end_date: Last possible birth date (inclusive)
        seed: Optional random seed for reproducible output

    Example:
        >>> GeneratorConfig(start_date=date(1980, 1, 1), end_date=date(1999, 12, 31))
    """

    start_date: date = Field(
        default=DEFAULT_START_DATE,
        description="First possible birth date",
    )
    end_date: date = Field(
        default=DEFAULT_END_DATE,
        description="Last possible birth date",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducible ID numbers",
    )

    @model_validator(mode="after")
    def validate_date_span(self) -> "GeneratorConfig":
        """Validate the birth date span is not empty.

        Raises:
            ValueError: If end_date is before start_date
        """
        if self.end_date < self.start_date:
            raise ValueError(
                f"Invalid date span: end_date {self.end_date.isoformat()} is before "
                f"start_date {self.start_date.isoformat()}"
            )
        return self


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_ids: Whether to redact ID numbers from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/sa-idnumber.log"),
        description="Log file path"
    )
    redact_ids: bool = Field(
        default=False,
        description="Redact ID numbers from logs"
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
        codec: ID string reading settings
        generator: Random generation settings
        logging: Logging settings
    """

    codec: CodecConfig = Field(default_factory=CodecConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_span_fits_century_window(self) -> "Config":
        """Validate generated birth dates can be read back under the pivot.

        Raises:
            ValueError: If the generator span leaves the century window
        """
        first_year, last_year = century_window(self.codec.century_pivot)
        if (
            self.generator.start_date.year < first_year
            or self.generator.end_date.year > last_year
        ):
            raise ValueError(
                f"Generator span {self.generator.start_date.isoformat()} to "
                f"{self.generator.end_date.isoformat()} is outside {first_year}-{last_year}, "
                f"the years century_pivot {self.codec.century_pivot} can represent"
            )
        return self
