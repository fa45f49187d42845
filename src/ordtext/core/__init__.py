"""Core utilities package.

This package contains the pure, stateless text functions: ordinal
comparison, predicates, hashing, affix removal, padding, escaping and
splitting. Nothing here performs I/O or keeps mutable state, so every
function is safe to call from any thread.
"""

from ordtext.core.code_units import code_units, utf16_length
from ordtext.core.comparison import (
    StringComparator,
    StringComparison,
    get_comparator,
)
from ordtext.core.escaping import escape, escape_char
from ordtext.core.splitting import (
    concat,
    concat_values,
    join,
    join_values,
    split,
)
from ordtext.core.string_utils import (
    EMPTY,
    compare,
    ends_with,
    ends_with_ignore_case,
    equals,
    get_hash_code,
    get_hash_code_ignore_case,
    get_utf8_byte_count,
    is_false,
    is_null_or_empty,
    is_null_or_whitespace,
    is_true,
    pad_left,
    pad_right,
    remove_left,
    remove_left_chars,
    remove_right,
    remove_right_chars,
    repeat,
    starts_with,
    starts_with_ignore_case,
    substring_equals,
    trim,
    trim_and_remove_left,
    trim_and_remove_left_chars,
    trim_and_remove_right,
    trim_and_remove_right_chars,
    trim_left,
    trim_right,
)

__all__ = [
    # code_units
    "code_units",
    "utf16_length",
    # comparison
    "StringComparison",
    "StringComparator",
    "get_comparator",
    # escaping
    "escape",
    "escape_char",
    # splitting
    "join",
    "join_values",
    "concat",
    "concat_values",
    "split",
    # string_utils - constants
    "EMPTY",
    # string_utils - predicates
    "is_null_or_empty",
    "is_null_or_whitespace",
    "is_true",
    "is_false",
    # string_utils - comparison and hashing
    "equals",
    "compare",
    "get_hash_code",
    "get_hash_code_ignore_case",
    # string_utils - substring matching
    "substring_equals",
    "starts_with",
    "starts_with_ignore_case",
    "ends_with",
    "ends_with_ignore_case",
    # string_utils - affixes and trimming
    "remove_left",
    "remove_right",
    "remove_left_chars",
    "remove_right_chars",
    "trim",
    "trim_left",
    "trim_right",
    "trim_and_remove_left",
    "trim_and_remove_right",
    "trim_and_remove_left_chars",
    "trim_and_remove_right_chars",
    # string_utils - padding and sizing
    "pad_left",
    "pad_right",
    "repeat",
    "get_utf8_byte_count",
]
