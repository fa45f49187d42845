"""Ordinal string comparison strategies.

Two comparison behaviors are available, selected by StringComparison:

- EXACT: raw UTF-16 code-unit comparison, no locale or collation rules.
- EXACT_IGNORE_CASE: the same, after mapping each code unit to its simple
  lowercase form. No full Unicode case folding is applied.

Strategies are looked up through a read-only mapping keyed by the
comparison mode itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from ordtext.core.code_units import code_units, simple_lower, utf16_length
from ordtext.core.validation import not_none
from ordtext.exceptions import InvalidArgumentError


class StringComparison(Enum):
    """Comparison mode for ordinal string operations."""

    EXACT = "exact"
    EXACT_IGNORE_CASE = "exact_ignore_case"


class StringComparator(ABC):
    """Base class for ordinal comparison strategies.

    Subclasses define how a single code unit is normalized before two
    units are compared; ordering and equality follow from that.
    """

    @abstractmethod
    def fold(self, unit: int) -> int:
        """Normalize a code unit before comparison."""

    def units_equal(self, a: int, b: int) -> bool:
        """Check whether two code units match under this strategy."""
        return a == b or self.fold(a) == self.fold(b)

    def compare(self, a: str | None, b: str | None) -> int:
        """Compare two strings code unit by code unit.

        None sorts before any string, and two None values are equal.

        Args:
            a: First string, or None.
            b: Second string, or None.

        Returns:
            Zero if equal, the difference of the first mismatching
            (folded) code units, or else the difference in length.
        """
        if a is b:
            return 0
        if a is None:
            return -1
        if b is None:
            return 1

        units_a = code_units(a)
        units_b = code_units(b)
        for unit_a, unit_b in zip(units_a, units_b):
            if unit_a == unit_b:
                continue
            folded_a = self.fold(unit_a)
            folded_b = self.fold(unit_b)
            if folded_a != folded_b:
                return folded_a - folded_b
        return len(units_a) - len(units_b)

    def equals(self, a: str | None, b: str | None) -> bool:
        """Check two strings for equality; None equals only None."""
        if a is None or b is None:
            return a is b
        return self.compare(a, b) == 0


class ExactComparator(StringComparator):
    """Raw code-unit comparison."""

    def fold(self, unit: int) -> int:
        return unit

    def equals(self, a: str | None, b: str | None) -> bool:
        if a is None or b is None:
            return a is b
        if a == b:
            return True
        # A surrogate pair and the same two lone surrogates share code units
        if utf16_length(a) != utf16_length(b):
            return False
        return self.compare(a, b) == 0


class ExactIgnoreCaseComparator(StringComparator):
    """Code-unit comparison after simple lowercase mapping."""

    def fold(self, unit: int) -> int:
        return simple_lower(unit)

    def equals(self, a: str | None, b: str | None) -> bool:
        if a is None or b is None:
            return a is b
        if utf16_length(a) != utf16_length(b):
            return False
        return self.compare(a, b) == 0


EXACT = ExactComparator()
EXACT_IGNORE_CASE = ExactIgnoreCaseComparator()

_COMPARATORS: Mapping[StringComparison, StringComparator] = MappingProxyType(
    {
        StringComparison.EXACT: EXACT,
        StringComparison.EXACT_IGNORE_CASE: EXACT_IGNORE_CASE,
    }
)


def get_comparator(comparison: StringComparison) -> StringComparator:
    """Resolve a comparison mode to its strategy.

    Args:
        comparison: Comparison mode.

    Returns:
        The shared comparator for that mode.

    Raises:
        InvalidArgumentError: If comparison is None or not a StringComparison.
    """
    not_none(comparison, "comparison")
    try:
        return _COMPARATORS[comparison]
    except (KeyError, TypeError):
        raise InvalidArgumentError(
            "comparison", f"Unknown string comparison: {comparison!r}"
        ) from None
