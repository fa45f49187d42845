"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables with type conversion and validation. It supports dependency injection
for testing by accepting an optional env mapping.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from ordtext.core.splitting import split
from ordtext.core.string_utils import is_false, is_true, trim

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Supports dependency injection by accepting an optional env mapping,
    making it easy to test code that depends on environment variables
    without modifying os.environ.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        level = reader.get_str("ORDTEXT_LOG_LEVEL", "info")

        # Testing usage (inject custom env)
        reader = EnvReader(env={"ORDTEXT_LOG_MAX_BYTES": "1024"})
        max_bytes = reader.get_int("ORDTEXT_LOG_MAX_BYTES", 0)  # Returns 1024
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
                 If None, reads from os.environ. Useful for testing.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set. Defaults to None.

        Returns:
            The environment variable value, or default if not set.
        """
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set or invalid.

        Returns:
            Parsed integer value, or default if not set or invalid.
            Logs a warning if the value is set but cannot be parsed.
        """
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean from environment variable.

        Recognizes "true"/"yes" and "t"/"y"/"1" as true, and "false"/"no"
        and "f"/"n"/"0" as false (case-insensitive, surrounding blanks
        ignored).

        Args:
            var: Environment variable name.
            default: Default value if not set or unrecognized.

        Returns:
            Boolean value, or default if not set or unrecognized.
            Logs a warning if the value is set but unrecognized.
        """
        value = self._env.get(var)
        if value is None:
            return default
        if is_true(value):
            return True
        if is_false(value):
            return False
        logger.warning("Invalid boolean value for %s: %s", var, value)
        return default

    def get_list(
        self, var: str, separators: str = ",", default: list[str] | None = None
    ) -> list[str]:
        """Get a list of strings from environment variable.

        Args:
            var: Environment variable name.
            separators: Characters that separate entries. Defaults to ",".
            default: Default value if not set. Defaults to empty list.

        Returns:
            List of trimmed entries. Blank entries are filtered out.
        """
        value = self._env.get(var)
        if value is None:
            return default if default is not None else []

        entries: list[str] = []
        for part in split(value, separators):
            part = trim(part)
            if part:
                entries.append(part)
        return entries
