"""String manipulation utilities.

This module provides the ordinal (locale-independent) string operations:
null/empty/whitespace predicates, hashing, prefix/suffix matching, affix
removal, trimming, padding and UTF-8 size estimation.

Positions, lengths and hash inputs are measured in UTF-16 code units. Two
different notions of whitespace are in use on purpose:

- is_null_or_whitespace() uses the Unicode-aware whitespace test.
- trim(), trim_left() and trim_right() strip every code unit at or below
  U+0020, like an ASCII trim.
"""

from __future__ import annotations

from collections.abc import Iterable

from ordtext.core.code_units import (
    code_units,
    is_whitespace,
    simple_lower,
    slice_units,
    utf16_length,
)
from ordtext.core.comparison import (
    EXACT_IGNORE_CASE,
    StringComparison,
    get_comparator,
)
from ordtext.core.validation import non_negative, not_none, single_code_unit

EMPTY = ""

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_HASH_MULTIPLIER = 31

_TRUE_CHARS = frozenset("ty1")
_FALSE_CHARS = frozenset("fn0")
_TRUE_WORDS = ("true", "yes")
_FALSE_WORDS = ("false", "no")


def _comparison_for(ignore_case: bool) -> StringComparison:
    if ignore_case:
        return StringComparison.EXACT_IGNORE_CASE
    return StringComparison.EXACT


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


# =============================================================================
# Predicates
# =============================================================================


def is_null_or_empty(value: str | None) -> bool:
    """Check whether a string is None or has length zero.

    Example:
        >>> is_null_or_empty("")
        True
        >>> is_null_or_empty(" ")
        False
    """
    return value is None or len(value) == 0


def is_null_or_whitespace(value: str | None) -> bool:
    """Check whether a string is None, empty, or all whitespace.

    Uses the Unicode-aware whitespace test, so a non-breaking space is
    not whitespace but an em space is.

    Example:
        >>> is_null_or_whitespace(" \\t\\n")
        True
        >>> is_null_or_whitespace("\\u00a0")
        False
    """
    if is_null_or_empty(value):
        return True
    return all(is_whitespace(unit) for unit in code_units(value))


def is_true(value: str | None) -> bool:
    """Check whether a string spells a true value.

    The value is trimmed first. A single character matches "t", "y" or "1";
    anything longer matches "true" or "yes". Matching is case-insensitive.

    Args:
        value: String to test, or None.

    Returns:
        True if the value spells true. None and blank strings give False.
    """
    return _matches_truth_value(value, _TRUE_CHARS, _TRUE_WORDS)


def is_false(value: str | None) -> bool:
    """Check whether a string spells a false value.

    The value is trimmed first. A single character matches "f", "n" or "0";
    anything longer matches "false" or "no". Matching is case-insensitive.
    This is not the complement of is_true(): blank or unrecognized values
    are neither true nor false.

    Args:
        value: String to test, or None.

    Returns:
        True if the value spells false. None and blank strings give False.
    """
    return _matches_truth_value(value, _FALSE_CHARS, _FALSE_WORDS)


def _matches_truth_value(
    value: str | None, chars: frozenset[str], words: tuple[str, ...]
) -> bool:
    if is_null_or_whitespace(value):
        return False

    trimmed = trim(value)

    if utf16_length(trimmed) == 1:
        return chr(simple_lower(ord(trimmed))) in chars

    return any(EXACT_IGNORE_CASE.equals(trimmed, word) for word in words)


# =============================================================================
# Comparison and hashing
# =============================================================================


def equals(
    a: str | None,
    b: str | None,
    comparison: StringComparison = StringComparison.EXACT,
) -> bool:
    """Check two strings for equality under a comparison mode.

    None equals only None.

    Example:
        >>> equals("Hello", "hello", StringComparison.EXACT_IGNORE_CASE)
        True
        >>> equals(None, "x")
        False
    """
    return get_comparator(comparison).equals(a, b)


def compare(
    a: str | None,
    b: str | None,
    comparison: StringComparison = StringComparison.EXACT,
) -> int:
    """Compare two strings under a comparison mode.

    Returns:
        A negative number, zero, or a positive number as a sorts before,
        equal to, or after b. None sorts before any string.
    """
    return get_comparator(comparison).compare(a, b)


def get_hash_code(value: str | None) -> int:
    """Compute the 32-bit polynomial hash of a string.

    Folds each UTF-16 code unit into h = h * 31 + unit with signed 32-bit
    wraparound. Strings that are equal under exact comparison hash equal.

    Args:
        value: String to hash, or None.

    Returns:
        Signed 32-bit hash; 0 for None or an empty string.

    Example:
        >>> get_hash_code("ab")
        3105
    """
    if is_null_or_empty(value):
        return 0

    hash_code = 0
    for unit in code_units(value):
        hash_code = (_HASH_MULTIPLIER * hash_code + unit) & _INT32_MASK
    return _to_int32(hash_code)


def get_hash_code_ignore_case(value: str | None) -> int:
    """Compute the case-insensitive 32-bit polynomial hash of a string.

    Same recurrence as get_hash_code(), but each code unit is mapped to
    its simple lowercase form first, so strings that are equal under
    ignore-case comparison hash equal.

    Args:
        value: String to hash, or None.

    Returns:
        Signed 32-bit hash; 0 for None or an empty string.
    """
    if is_null_or_empty(value):
        return 0

    hash_code = 0
    for unit in code_units(value):
        hash_code = (_HASH_MULTIPLIER * hash_code + simple_lower(unit)) & _INT32_MASK
    return _to_int32(hash_code)


# =============================================================================
# Substring, prefix and suffix matching
# =============================================================================


def substring_equals(
    value: str,
    offset: int,
    comparand: str,
    comparand_offset: int,
    length: int,
    comparison: StringComparison = StringComparison.EXACT,
) -> bool:
    """Compare a run of code units from two strings.

    Ranges that run past the end of either string are not an error; the
    comparison simply fails.

    Args:
        value: First string.
        offset: Start position in value.
        comparand: Second string.
        comparand_offset: Start position in comparand.
        length: Number of code units to compare.
        comparison: Comparison mode.

    Returns:
        True if the two ranges are in bounds and match.

    Raises:
        InvalidArgumentError: If a string is None or a position or length
            is negative.
    """
    not_none(value, "value")
    not_none(comparand, "comparand")
    non_negative(offset, "offset")
    non_negative(comparand_offset, "comparand_offset")
    non_negative(length, "length")
    comparator = get_comparator(comparison)

    value_units = code_units(value)
    if offset + length > len(value_units):
        return False

    comparand_units = code_units(comparand)
    if comparand_offset + length > len(comparand_units):
        return False

    for i in range(length):
        if not comparator.units_equal(
            value_units[offset + i], comparand_units[comparand_offset + i]
        ):
            return False
    return True


def starts_with(value: str, prefix: str) -> bool:
    """Check whether value begins with prefix, comparing code units exactly."""
    return _starts_with(value, prefix, StringComparison.EXACT)


def starts_with_ignore_case(value: str, prefix: str) -> bool:
    """Check whether value begins with prefix, ignoring case."""
    return _starts_with(value, prefix, StringComparison.EXACT_IGNORE_CASE)


def ends_with(value: str, suffix: str) -> bool:
    """Check whether value ends with suffix, comparing code units exactly."""
    return _ends_with(value, suffix, StringComparison.EXACT)


def ends_with_ignore_case(value: str, suffix: str) -> bool:
    """Check whether value ends with suffix, ignoring case."""
    return _ends_with(value, suffix, StringComparison.EXACT_IGNORE_CASE)


def _starts_with(value: str, prefix: str, comparison: StringComparison) -> bool:
    not_none(value, "value")
    not_none(prefix, "prefix")
    return substring_equals(value, 0, prefix, 0, utf16_length(prefix), comparison)


def _ends_with(value: str, suffix: str, comparison: StringComparison) -> bool:
    suffix_length = utf16_length(not_none(suffix, "suffix"))
    test_offset = utf16_length(not_none(value, "value")) - suffix_length
    # A suffix longer than the value never matches
    return test_offset >= 0 and substring_equals(
        value, test_offset, suffix, 0, suffix_length, comparison
    )


# =============================================================================
# Affix removal and trimming
# =============================================================================


def remove_left(value: str, prefix: str | None, ignore_case: bool = False) -> str:
    """Remove one occurrence of prefix from the start of value.

    Args:
        value: String to strip.
        prefix: Prefix to remove. None or empty leaves value unchanged.
        ignore_case: Match the prefix case-insensitively.

    Returns:
        value without the prefix, or value unchanged if it does not start
        with the prefix.

    Example:
        >>> remove_left("prefixValue", "prefix")
        'Value'
        >>> remove_left("prefix", "prefix")
        ''
    """
    not_none(value, "value")

    if is_null_or_empty(prefix):
        return value

    prefix_length = utf16_length(prefix)
    remaining = utf16_length(value) - prefix_length

    if remaining < 0:
        return value

    comparison = _comparison_for(ignore_case)

    if remaining == 0:
        return EMPTY if equals(value, prefix, comparison) else value

    if _starts_with(value, prefix, comparison):
        return slice_units(value, prefix_length)
    return value


def remove_right(value: str, suffix: str | None, ignore_case: bool = False) -> str:
    """Remove one occurrence of suffix from the end of value.

    Args:
        value: String to strip.
        suffix: Suffix to remove. None or empty leaves value unchanged.
        ignore_case: Match the suffix case-insensitively.

    Returns:
        value without the suffix, or value unchanged if it does not end
        with the suffix.
    """
    not_none(value, "value")

    if is_null_or_empty(suffix):
        return value

    end = utf16_length(value) - utf16_length(suffix)

    if end < 0:
        return value

    comparison = _comparison_for(ignore_case)

    if end == 0:
        return EMPTY if equals(value, suffix, comparison) else value

    if _ends_with(value, suffix, comparison):
        return slice_units(value, 0, end)
    return value


def remove_left_chars(value: str, remove_chars: Iterable[str]) -> str:
    """Strip the leading run of characters that belong to remove_chars.

    Only the contiguous run at the start is removed; matching characters
    further in are kept.

    Example:
        >>> remove_left_chars("--a-b", "-")
        'a-b'
    """
    not_none(value, "value")
    char_set = frozenset(not_none(remove_chars, "remove_chars"))

    start = 0
    total_length = len(value)
    while start < total_length and value[start] in char_set:
        start += 1

    return value[start:] if start > 0 else value


def remove_right_chars(value: str, remove_chars: Iterable[str]) -> str:
    """Strip the trailing run of characters that belong to remove_chars."""
    not_none(value, "value")
    char_set = frozenset(not_none(remove_chars, "remove_chars"))

    total_length = len(value)
    length = total_length
    while length > 0 and value[length - 1] in char_set:
        length -= 1

    return value if length == total_length else value[:length]


def trim_left(value: str) -> str:
    """Strip leading code units at or below U+0020."""
    not_none(value, "value")

    start = 0
    total_length = len(value)
    while start < total_length and value[start] <= " ":
        start += 1

    return value[start:] if start > 0 else value


def trim_right(value: str) -> str:
    """Strip trailing code units at or below U+0020."""
    not_none(value, "value")

    total_length = len(value)
    length = total_length
    while length > 0 and value[length - 1] <= " ":
        length -= 1

    return value if length == total_length else value[:length]


def trim(value: str) -> str:
    """Strip code units at or below U+0020 from both ends.

    Unlike str.strip(), Unicode spaces such as U+2003 are kept, and
    control characters such as U+0001 are removed.
    """
    return trim_right(trim_left(value))


def trim_and_remove_left(
    value: str, prefix: str | None, ignore_case: bool = False
) -> str:
    """Trim value, remove prefix, then trim the start again if needed.

    Example:
        >>> trim_and_remove_left("  --x ", "--")
        'x'
    """
    trimmed = trim(not_none(value, "value"))
    result = remove_left(trimmed, prefix, ignore_case)
    if len(result) == len(trimmed):
        return trimmed
    return trim_left(result)


def trim_and_remove_right(
    value: str, suffix: str | None, ignore_case: bool = False
) -> str:
    """Trim value, remove suffix, then trim the end again if needed."""
    trimmed = trim(not_none(value, "value"))
    result = remove_right(trimmed, suffix, ignore_case)
    if len(result) == len(trimmed):
        return trimmed
    return trim_right(result)


def trim_and_remove_left_chars(value: str, remove_chars: Iterable[str]) -> str:
    """Trim value, strip leading remove_chars, then trim the start again."""
    trimmed = trim(not_none(value, "value"))
    result = remove_left_chars(trimmed, remove_chars)
    if len(result) == len(trimmed):
        return trimmed
    return trim_left(result)


def trim_and_remove_right_chars(value: str, remove_chars: Iterable[str]) -> str:
    """Trim value, strip trailing remove_chars, then trim the end again."""
    trimmed = trim(not_none(value, "value"))
    result = remove_right_chars(trimmed, remove_chars)
    if len(result) == len(trimmed):
        return trimmed
    return trim_right(result)


# =============================================================================
# Padding, repetition and sizing
# =============================================================================


def pad_left(value: str, width: int) -> str:
    """Left-pad value with spaces to at least width code units.

    Values already at or over the width are returned unchanged, never
    truncated.

    Example:
        >>> pad_left("ab", 5)
        '   ab'
    """
    not_none(value, "value")
    non_negative(width, "width")

    missing = width - utf16_length(value)
    if missing <= 0:
        return value
    return " " * missing + value


def pad_right(value: str, width: int) -> str:
    """Right-pad value with spaces to at least width code units.

    Example:
        >>> pad_right("ab", 5)
        'ab   '
    """
    not_none(value, "value")
    non_negative(width, "width")

    missing = width - utf16_length(value)
    if missing <= 0:
        return value
    return value + " " * missing


def repeat(ch: str, length: int) -> str:
    """Return a string made of length copies of ch."""
    single_code_unit(ch, "ch")
    non_negative(length, "length")
    return ch * length


def get_utf8_byte_count(value: str) -> int:
    """Estimate the UTF-8 encoded size of a string.

    Each UTF-16 code unit counts on its own: 1 byte up to U+007F, 2 bytes
    up to U+07FF, 3 bytes above. A surrogate pair therefore counts as 6
    bytes rather than the 4 its real encoding takes.

    Example:
        >>> get_utf8_byte_count("caf\\u00e9")
        5
    """
    not_none(value, "value")

    count = 0
    for unit in code_units(value):
        if unit > 0x07FF:
            count += 3
        elif unit > 0x007F:
            count += 2
        else:
            count += 1
    return count
