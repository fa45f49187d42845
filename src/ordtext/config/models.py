"""Configuration models for ordtext.

This module contains:
- LoggingConfig: Log level, format and destination settings
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


class LoggingConfig(BaseModel):
    """Pydantic model for logging configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = Field(default=10_485_760, ge=1)

    # Number of rotated files to keep
    backup_count: int = Field(default=5, ge=0)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level."""
        level = v.casefold()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Normalize and validate the log format."""
        log_format = v.casefold()
        if log_format not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(VALID_LOG_FORMATS)}, got {v}"
            )
        return log_format
