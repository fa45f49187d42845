"""Formatters for ordtext log output.

Both formatters keep every record on a single line:

- EscapingFormatter renders the message through escape_char(), so
  newlines, controls and non-ASCII code units in logged values appear as
  escape sequences instead of breaking the line.
- JSONFormatter emits one JSON object per record.

Records that carry an InvalidArgumentError expose the offending parameter
name as a separate field.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from ordtext.core.code_units import code_units
from ordtext.core.escaping import escape_char
from ordtext.exceptions import InvalidArgumentError

# Attributes every LogRecord has, plus those added while formatting
_STANDARD_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


def escape_message(message: str) -> str:
    """Render a message as single-line, printable ASCII.

    Example:
        >>> escape_message("bad value\\n\\u00e9")
        'bad value\\\\n\\\\u00e9'
    """
    return "".join(escape_char(chr(unit)) for unit in code_units(message))


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Collect attributes passed through ``extra=``, skipping private ones."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


def invalid_argument(record: logging.LogRecord) -> str | None:
    """Name the offending parameter if the record carries an InvalidArgumentError."""
    if record.exc_info and isinstance(record.exc_info[1], InvalidArgumentError):
        return record.exc_info[1].argument
    return None


class EscapingFormatter(logging.Formatter):
    """Text formatter that escapes the rendered message.

    The traceback of an attached exception is appended unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        escaped = logging.makeLogRecord(vars(record))
        escaped.msg = escape_message(record.getMessage())
        escaped.args = None
        argument = invalid_argument(record)
        if argument is not None:
            escaped.msg = f"{escaped.msg} [argument={argument}]"
        return super().format(escaped)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON objects.

    Each log entry is a valid JSON object with:
    - timestamp: ISO-8601 UTC
    - level: Log level name
    - logger: Logger name
    - message: Log message
    - argument: Offending parameter of an InvalidArgumentError, when present
    - context: Additional context from record.extra
    - exception: Formatted traceback, when present
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        argument = invalid_argument(record)
        if argument is not None:
            log_entry["argument"] = argument

        context = record_context(record)
        if context:
            log_entry["context"] = context

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)
