"""Argument validation utilities.

Fail-fast precondition checks used at the top of every public operation.
Each check raises InvalidArgumentError before any work is done and
otherwise returns its input, so it can be used inline.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ordtext.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Highest code point that fits in a single UTF-16 code unit
MAX_CODE_UNIT = 0xFFFF


def _rejected(argument: str, message: str) -> InvalidArgumentError:
    logger.debug(
        "Rejected argument %s: %s", argument, message, extra={"argument": argument}
    )
    return InvalidArgumentError(argument, message)


def not_none(value: T | None, argument: str) -> T:
    """Reject an absent value.

    Args:
        value: Value to check.
        argument: Parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise _rejected(argument, f"Argument '{argument}' must not be None")
    return value


def non_negative(value: int, argument: str) -> int:
    """Reject a negative (or absent) integer.

    Args:
        value: Integer to check.
        argument: Parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If value is None or less than zero.
    """
    not_none(value, argument)
    if value < 0:
        raise _rejected(
            argument, f"Argument '{argument}' must be non-negative, got {value}"
        )
    return value


def single_code_unit(value: str, argument: str) -> str:
    """Reject anything other than a one-character BMP string.

    Lone surrogates are accepted; characters outside the Basic
    Multilingual Plane are not, since they occupy two UTF-16 code units.

    Args:
        value: Character to check.
        argument: Parameter name used in the error message.

    Returns:
        The character, unchanged.

    Raises:
        InvalidArgumentError: If value is not a single UTF-16 code unit.
    """
    not_none(value, argument)
    if not isinstance(value, str) or len(value) != 1 or ord(value) > MAX_CODE_UNIT:
        raise _rejected(
            argument,
            f"Argument '{argument}' must be a single UTF-16 code unit, got {value!r}",
        )
    return value
