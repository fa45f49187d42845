"""Logging configuration for ordtext.

configure_logging() attaches handlers to the ``ordtext`` package logger
only, so an application's own root logger setup is left alone. Records
from ordtext modules stop at the package logger once it is configured.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler

from ordtext.config.loader import get_logging_config
from ordtext.config.models import LoggingConfig
from ordtext.logging.handlers import EscapingFormatter, JSONFormatter

PACKAGE_LOGGER = "ordtext"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JSONFormatter()
    return EscapingFormatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _close_handlers(package_logger: logging.Logger) -> None:
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install handlers on the ordtext package logger.

    Handlers from a previous call are closed and replaced. When the log
    file cannot be opened, output falls back to stderr and the failure is
    logged there.

    Args:
        config: Validated logging configuration.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _close_handlers(package_logger)

    level = logging.getLevelName(config.level.upper())
    package_logger.setLevel(level)
    package_logger.propagate = False

    formatter = _build_formatter(config.format)

    file_error: OSError | None = None
    if config.file:
        try:
            file_path = config.file.expanduser()
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                file_path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            file_error = e

    if config.include_stderr or not package_logger.handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        package_logger.addHandler(stderr_handler)

    if file_error is not None:
        package_logger.warning(
            "Could not open log file %s: %s",
            config.file,
            file_error,
            extra={"log_file": str(config.file)},
        )

    return package_logger


def setup_logging(env: Mapping[str, str] | None = None) -> LoggingConfig:
    """Configure the package logger from ORDTEXT_LOG_* environment variables.

    Args:
        env: Optional mapping to read instead of os.environ.

    Returns:
        The configuration that was applied.
    """
    config = get_logging_config(env)
    configure_logging(config)
    return config
