"""Tests for ordinal comparison strategies."""

import pytest

from ordtext.core.comparison import (
    EXACT,
    EXACT_IGNORE_CASE,
    ExactComparator,
    ExactIgnoreCaseComparator,
    StringComparison,
    get_comparator,
)
from ordtext.exceptions import InvalidArgumentError


class TestGetComparator:
    """Tests for get_comparator function."""

    def test_exact(self):
        """get_comparator resolves EXACT to the exact comparator."""
        assert get_comparator(StringComparison.EXACT) is EXACT
        assert isinstance(EXACT, ExactComparator)

    def test_exact_ignore_case(self):
        """get_comparator resolves EXACT_IGNORE_CASE to the ignore-case comparator."""
        comparator = get_comparator(StringComparison.EXACT_IGNORE_CASE)
        assert comparator is EXACT_IGNORE_CASE
        assert isinstance(comparator, ExactIgnoreCaseComparator)

    def test_every_mode_has_a_comparator(self):
        """get_comparator resolves every comparison mode."""
        for mode in StringComparison:
            assert get_comparator(mode) is not None

    def test_none_raises(self):
        """get_comparator rejects None."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            get_comparator(None)
        assert exc_info.value.argument == "comparison"

    def test_unknown_mode_raises(self):
        """get_comparator rejects values that are not comparison modes."""
        with pytest.raises(InvalidArgumentError):
            get_comparator("exact")

    def test_unhashable_mode_raises(self):
        """get_comparator rejects unhashable values with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            get_comparator([])


class TestExactComparator:
    """Tests for the exact comparator."""

    def test_equal_strings(self):
        """compare returns zero for identical strings."""
        assert EXACT.compare("hello", "hello") == 0

    def test_first_difference_decides(self):
        """compare returns the difference of the first mismatching units."""
        assert EXACT.compare("a", "b") == -1
        assert EXACT.compare("b", "a") == 1

    def test_case_matters(self):
        """compare orders uppercase before lowercase."""
        assert EXACT.compare("A", "a") == ord("A") - ord("a")

    def test_prefix_sorts_first(self):
        """compare returns the length difference when one is a prefix."""
        assert EXACT.compare("ab", "abc") == -1
        assert EXACT.compare("abc", "a") == 2

    def test_none_sorts_first(self):
        """compare sorts None before any string."""
        assert EXACT.compare(None, "") < 0
        assert EXACT.compare("", None) > 0
        assert EXACT.compare(None, None) == 0

    def test_orders_by_code_unit_not_code_point(self):
        """compare orders U+FFFF after a surrogate pair."""
        assert EXACT.compare("\uffff", "\U00010000") > 0

    def test_equals(self):
        """equals is case-sensitive."""
        assert EXACT.equals("abc", "abc") is True
        assert EXACT.equals("abc", "ABC") is False

    def test_equals_none(self):
        """equals treats None as equal only to None."""
        assert EXACT.equals(None, None) is True
        assert EXACT.equals(None, "x") is False
        assert EXACT.equals("x", None) is False

    def test_equals_pair_and_lone_surrogates(self):
        """equals compares code units, so a pair equals its two halves."""
        assert EXACT.equals("\U0001f600", "\ud83d\ude00") is True

    def test_equals_mixed_pairs_and_lone_surrogates(self):
        """equals agrees with compare when pairs and lone halves are swapped."""
        a = "\U0001f600\ud83d\ude00"
        b = "\ud83d\ude00\U0001f600"
        assert EXACT.compare(a, b) == 0
        assert EXACT.equals(a, b) is True
        assert EXACT_IGNORE_CASE.equals(a, b) is True


class TestExactIgnoreCaseComparator:
    """Tests for the ignore-case comparator."""

    def test_equal_ignoring_case(self):
        """compare returns zero for strings differing only in case."""
        assert EXACT_IGNORE_CASE.compare("Hello", "hELLO") == 0

    def test_orders_lowercased_units(self):
        """compare uses lowercased units for ordering."""
        assert EXACT_IGNORE_CASE.compare("A", "b") == ord("a") - ord("b")

    def test_equals(self):
        """equals ignores ASCII and Latin-1 case."""
        assert EXACT_IGNORE_CASE.equals("CAFÉ", "café") is True
        assert EXACT_IGNORE_CASE.equals("abc", "abd") is False

    def test_different_lengths_not_equal(self):
        """equals returns False for strings of different length."""
        assert EXACT_IGNORE_CASE.equals("abc", "ABCD") is False

    def test_no_full_case_folding(self):
        """equals does not expand sharp s to ss."""
        assert EXACT_IGNORE_CASE.equals("straße", "STRASSE") is False

    def test_dotted_capital_i(self):
        """equals matches U+0130 with plain i."""
        assert EXACT_IGNORE_CASE.equals("İ", "i") is True

    def test_equals_none(self):
        """equals treats None as equal only to None."""
        assert EXACT_IGNORE_CASE.equals(None, None) is True
        assert EXACT_IGNORE_CASE.equals(None, "x") is False


class TestSymmetry:
    """Both comparators are symmetric."""

    def test_equals_is_symmetric(self):
        """equals(a, b) == equals(b, a) for both modes."""
        samples = ["", "a", "A", "ab", "AB", "é", "É", None, "\U0001f600"]
        for comparator in (EXACT, EXACT_IGNORE_CASE):
            for a in samples:
                for b in samples:
                    assert comparator.equals(a, b) == comparator.equals(b, a)

    def test_compare_is_antisymmetric(self):
        """compare(a, b) and compare(b, a) have opposite signs."""
        samples = ["", "a", "B", "abc", "ABD", None]
        for comparator in (EXACT, EXACT_IGNORE_CASE):
            for a in samples:
                for b in samples:
                    forward = comparator.compare(a, b)
                    backward = comparator.compare(b, a)
                    assert (forward > 0) == (backward < 0)
                    assert (forward == 0) == (backward == 0)
