"""Character and string escaping.

Renders code units as source-style escape sequences. The single-character
and whole-string escapes differ:

- escape_char() maps NUL and seven other structural characters to
  two-character escapes, and writes any code unit that is >= U+00C0, an
  ISO control, a surrogate half, or non-space whitespace as \\uXXXX.
- escape() maps only seven structural characters (NUL is not one of
  them), writes code units >= U+00C0 as \\uXXXX followed by a
  semicolon, and passes every other code unit through unchanged,
  including controls below U+00C0.
"""

from __future__ import annotations

from ordtext.core.code_units import (
    code_units,
    is_iso_control,
    is_surrogate,
    is_whitespace,
)
from ordtext.core.validation import not_none, single_code_unit

_STRING_ESCAPES: dict[str, str] = {
    "\t": "\\t",
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    '"': '\\"',
    "\\": "\\\\",
}

_CHAR_ESCAPES: dict[str, str] = {**_STRING_ESCAPES, "\0": "\\0"}

# Code units at or above this value are always hex-escaped
_HEX_ESCAPE_THRESHOLD = 0xC0


def _needs_hex_escape(unit: int) -> bool:
    return (
        unit >= _HEX_ESCAPE_THRESHOLD
        or is_iso_control(unit)
        or is_surrogate(unit)
        or (is_whitespace(unit) and unit != 0x20)
    )


def escape_char(ch: str, quote: bool = False) -> str:
    """Escape a single code unit.

    Args:
        ch: One UTF-16 code unit (a one-character BMP string).
        quote: Wrap the result in single quotes.

    Returns:
        The escaped form of ch.

    Raises:
        InvalidArgumentError: If ch is not a single code unit.

    Example:
        >>> escape_char("\\n")
        '\\\\n'
        >>> escape_char("\\u00e9", quote=True)
        "'\\\\u00e9'"
    """
    unit = ord(single_code_unit(ch, "ch"))

    escaped = _CHAR_ESCAPES.get(ch)
    if escaped is None:
        escaped = f"\\u{unit:04x}" if _needs_hex_escape(unit) else ch

    if quote:
        return f"'{escaped}'"
    return escaped


def escape(value: str, quote: bool = False) -> str:
    """Escape every code unit of a string.

    Args:
        value: String to escape.
        quote: Wrap the result in double quotes.

    Returns:
        The escaped string.

    Raises:
        InvalidArgumentError: If value is None.

    Example:
        >>> escape("a\\tb")
        'a\\\\tb'
        >>> escape("caf\\u00e9")
        'caf\\\\u00e9;'
    """
    not_none(value, "value")

    parts: list[str] = []
    if quote:
        parts.append('"')

    for unit in code_units(value):
        ch = chr(unit)
        escaped = _STRING_ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif unit >= _HEX_ESCAPE_THRESHOLD:
            parts.append(f"\\u{unit:04x};")
        else:
            parts.append(ch)

    if quote:
        parts.append('"')

    return "".join(parts)
