"""Joining and delimiter-based splitting.

The two join functions skip None entries differently:

- join() decides on a separator by whether something has already been
  written, so skipped entries never leave a stray separator.
- join_values() decides by position, so every entry after the first gets
  a separator even when an earlier entry was None.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ordtext.core.string_utils import EMPTY, is_null_or_empty
from ordtext.core.validation import not_none, single_code_unit


def join(separator: str | None, values: Iterable[Any]) -> str:
    """Join the non-None entries of an iterable.

    Entries that are not strings are converted with str(). A separator is
    written only between two entries that were actually written.

    Args:
        separator: Text placed between entries. None means no separator.
        values: Entries to join.

    Returns:
        The joined string.

    Raises:
        InvalidArgumentError: If values is None.

    Example:
        >>> join(",", [None, "a", None, "b"])
        'a,b'
    """
    not_none(values, "values")

    parts: list[str] = []
    append_separator = False

    for value in values:
        if value is None:
            continue
        if append_separator and separator:
            parts.append(separator)
        append_separator = True
        parts.append(str(value))

    return "".join(parts)


def join_values(separator: str | None, *values: str | None) -> str:
    """Join positional values, placing separators by position.

    None entries are left out, but a separator still goes before every
    value at a position other than the first.

    Example:
        >>> join_values(",", None, "a", "b")
        ',a,b'
    """
    if not values:
        return EMPTY

    parts: list[str] = []

    for index, value in enumerate(values):
        if value is None:
            continue
        if index != 0 and separator is not None:
            parts.append(separator)
        parts.append(value)

    return "".join(parts)


def concat(values: Iterable[Any]) -> str:
    """Concatenate the non-None entries of an iterable."""
    return join(None, values)


def concat_values(*values: str | None) -> str:
    """Concatenate positional values, skipping None."""
    return join_values(None, *values)


def split(
    value: str | None,
    delimiters: Iterable[str],
    remove_empty_entries: bool = True,
) -> list[str]:
    """Split a string at every delimiter character.

    A single left-to-right scan; each character found in delimiters ends
    the current segment.

    Args:
        value: String to split. None or empty gives an empty list.
        delimiters: Delimiter characters, as a string or an iterable of
            single characters.
        remove_empty_entries: Drop zero-length segments. When False, a
            delimiter at the very end produces a trailing empty segment.

    Returns:
        List of segments.

    Raises:
        InvalidArgumentError: If delimiters is None or holds something
            other than single characters.

    Example:
        >>> split("a,,b", ",")
        ['a', 'b']
        >>> split("a,,b", ",", remove_empty_entries=False)
        ['a', '', 'b']
    """
    not_none(delimiters, "delimiters")
    delimiter_set = frozenset(
        single_code_unit(delimiter, "delimiters") for delimiter in delimiters
    )

    parts: list[str] = []

    if is_null_or_empty(value):
        return parts

    start = 0
    end = len(value)

    for i, ch in enumerate(value):
        if ch not in delimiter_set:
            continue

        if i != start or not remove_empty_entries:
            parts.append(value[start:i])

        start = i + 1

        if not remove_empty_entries and start == end:
            parts.append(EMPTY)

    if start < end:
        parts.append(value[start:end])

    return parts
