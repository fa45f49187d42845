"""Configuration package for ordtext.

Provides the logging configuration model and the environment reader used
to populate it.
"""

from ordtext.config.env import EnvReader
from ordtext.config.loader import ENV_PREFIX, get_logging_config
from ordtext.config.models import (
    VALID_LOG_FORMATS,
    VALID_LOG_LEVELS,
    LoggingConfig,
)

__all__ = [
    "ENV_PREFIX",
    "EnvReader",
    "LoggingConfig",
    "VALID_LOG_FORMATS",
    "VALID_LOG_LEVELS",
    "get_logging_config",
]
