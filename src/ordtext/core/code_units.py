"""UTF-16 code-unit view of Python strings.

Python strings are sequences of code points, while every ordinal
operation in this package is defined over UTF-16 code units. Characters
outside the Basic Multilingual Plane therefore count as two units (a
surrogate pair). The character-class predicates here classify single
code units, not code points.
"""

from __future__ import annotations

import struct
import unicodedata
from functools import lru_cache

from ordtext.core.validation import MAX_CODE_UNIT

_SURROGATE_MIN = 0xD800
_SURROGATE_MAX = 0xDFFF
_HIGH_SURROGATE_BASE = 0xD800
_LOW_SURROGATE_BASE = 0xDC00
_SUPPLEMENTARY_BASE = 0x10000

# Separators that are not treated as breaking whitespace
_NON_BREAKING_SPACES = frozenset({0x00A0, 0x2007, 0x202F})
_SEPARATOR_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})


def code_units(value: str) -> list[int]:
    """Return the UTF-16 code units of a string.

    Args:
        value: String to convert.

    Returns:
        List of integers in the range 0..0xFFFF.

    Example:
        >>> code_units("a\\U0001F600")
        [97, 55357, 56832]
    """
    units: list[int] = []
    for ch in value:
        cp = ord(ch)
        if cp > MAX_CODE_UNIT:
            cp -= _SUPPLEMENTARY_BASE
            units.append(_HIGH_SURROGATE_BASE + (cp >> 10))
            units.append(_LOW_SURROGATE_BASE + (cp & 0x3FF))
        else:
            units.append(cp)
    return units


def from_code_units(units: list[int]) -> str:
    """Build a string from UTF-16 code units.

    Valid surrogate pairs are recombined into a single character; lone
    surrogates are kept as-is.
    """
    data = struct.pack(f"<{len(units)}H", *units)
    return data.decode("utf-16-le", "surrogatepass")


def utf16_length(value: str) -> int:
    """Return the length of a string in UTF-16 code units."""
    return len(value) + sum(1 for ch in value if ord(ch) > MAX_CODE_UNIT)


def has_supplementary(value: str) -> bool:
    """Check whether a string contains characters outside the BMP."""
    return any(ord(ch) > MAX_CODE_UNIT for ch in value)


def slice_units(value: str, start: int, end: int | None = None) -> str:
    """Slice a string by UTF-16 code-unit positions.

    Args:
        value: String to slice.
        start: First code unit to keep.
        end: Code unit position to stop before, or None for the end.

    Returns:
        The sliced string.
    """
    if not has_supplementary(value):
        return value[start:end]
    return from_code_units(code_units(value)[start:end])


@lru_cache(maxsize=4096)
def simple_lower(unit: int) -> int:
    """Map a code unit to its simple lowercase form.

    Only the first unit of the lowercase mapping is kept, so multi-unit
    expansions (U+0130 becomes "i" plus a combining dot) collapse to a
    single unit.
    """
    lowered = chr(unit).lower()
    first = ord(lowered[0])
    if first > MAX_CODE_UNIT:
        return unit
    return first


def is_whitespace(unit: int) -> bool:
    """Check whether a code unit is whitespace.

    Tab through carriage return, the file/group/record/unit separators,
    and Unicode space, line and paragraph separators count as whitespace.
    Non-breaking spaces and U+0085 do not.
    """
    if 0x09 <= unit <= 0x0D or 0x1C <= unit <= 0x1F:
        return True
    if unit in _NON_BREAKING_SPACES:
        return False
    return unicodedata.category(chr(unit)) in _SEPARATOR_CATEGORIES


def is_iso_control(unit: int) -> bool:
    """Check whether a code unit is in the C0 or C1 control ranges."""
    return unit <= 0x1F or 0x7F <= unit <= 0x9F


def is_surrogate(unit: int) -> bool:
    """Check whether a code unit is a UTF-16 surrogate half."""
    return _SURROGATE_MIN <= unit <= _SURROGATE_MAX
