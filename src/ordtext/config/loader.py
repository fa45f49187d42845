"""Configuration loader.

Logging configuration is read from environment variables, falling back
to LoggingConfig defaults for anything unset or invalid.

Environment variables:
- ORDTEXT_LOG_LEVEL: debug, info, warning or error (default info)
- ORDTEXT_LOG_FORMAT: text or json (default text)
- ORDTEXT_LOG_FILE: Path to a log file (default: stderr only)
- ORDTEXT_LOG_STDERR: Also log to stderr when a file is set
- ORDTEXT_LOG_MAX_BYTES: Rotation threshold in bytes
- ORDTEXT_LOG_BACKUP_COUNT: Number of rotated files to keep
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ordtext.config.env import EnvReader
from ordtext.config.models import LoggingConfig
from ordtext.core.string_utils import is_null_or_whitespace, trim

logger = logging.getLogger(__name__)

ENV_PREFIX = "ORDTEXT_"


def get_logging_config(env: Mapping[str, str] | None = None) -> LoggingConfig:
    """Build the logging configuration from environment variables.

    Args:
        env: Optional mapping to read instead of os.environ.

    Returns:
        LoggingConfig with environment overrides applied.
    """
    reader = EnvReader(env)
    overrides: dict[str, Any] = {}

    level = reader.get_str(f"{ENV_PREFIX}LOG_LEVEL")
    if not is_null_or_whitespace(level):
        overrides["level"] = trim(level)

    log_format = reader.get_str(f"{ENV_PREFIX}LOG_FORMAT")
    if not is_null_or_whitespace(log_format):
        overrides["format"] = trim(log_format)

    log_file = reader.get_str(f"{ENV_PREFIX}LOG_FILE")
    if not is_null_or_whitespace(log_file):
        overrides["file"] = Path(trim(log_file)).expanduser()

    include_stderr = reader.get_bool(f"{ENV_PREFIX}LOG_STDERR")
    if include_stderr is not None:
        overrides["include_stderr"] = include_stderr

    max_bytes = reader.get_int(f"{ENV_PREFIX}LOG_MAX_BYTES")
    if max_bytes is not None:
        overrides["max_bytes"] = max_bytes

    backup_count = reader.get_int(f"{ENV_PREFIX}LOG_BACKUP_COUNT")
    if backup_count is not None:
        overrides["backup_count"] = backup_count

    return _build_config(overrides)


def _build_config(overrides: dict[str, Any]) -> LoggingConfig:
    """Validate overrides, dropping any field that fails validation."""
    try:
        return LoggingConfig(**overrides)
    except ValidationError as e:
        invalid = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
        for field in sorted(invalid):
            logger.warning(
                "Ignoring invalid logging setting %s=%r", field, overrides.get(field)
            )
        valid = {k: v for k, v in overrides.items() if k not in invalid}
        return LoggingConfig(**valid)
