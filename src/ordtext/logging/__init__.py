"""Logging setup for ordtext.

Provides single-line text and JSON formatters and configuration of the
package logger from LoggingConfig or the environment.
"""

from ordtext.logging.config import PACKAGE_LOGGER, configure_logging, setup_logging
from ordtext.logging.handlers import EscapingFormatter, JSONFormatter, escape_message

__all__ = [
    "EscapingFormatter",
    "JSONFormatter",
    "PACKAGE_LOGGER",
    "configure_logging",
    "escape_message",
    "setup_logging",
]
