"""Tests for the UTF-16 code-unit helpers."""

from ordtext.core.code_units import (
    code_units,
    from_code_units,
    has_supplementary,
    is_iso_control,
    is_surrogate,
    is_whitespace,
    simple_lower,
    slice_units,
    utf16_length,
)


class TestCodeUnits:
    """Tests for code_units and from_code_units."""

    def test_ascii_string(self):
        """code_units returns one unit per ASCII character."""
        assert code_units("abc") == [97, 98, 99]

    def test_empty_string(self):
        """code_units returns an empty list for an empty string."""
        assert code_units("") == []

    def test_supplementary_character_becomes_surrogate_pair(self):
        """code_units splits characters outside the BMP into two units."""
        assert code_units("a\U0001f600") == [0x61, 0xD83D, 0xDE00]

    def test_from_code_units_recombines_pair(self):
        """from_code_units joins a surrogate pair into one character."""
        assert from_code_units([0xD83D, 0xDE00]) == "\U0001f600"

    def test_from_code_units_keeps_lone_surrogate(self):
        """from_code_units keeps a lone surrogate as-is."""
        assert from_code_units([0x61, 0xD800]) == "a\ud800"


class TestLengthAndSlicing:
    """Tests for utf16_length, has_supplementary and slice_units."""

    def test_length_counts_pairs_twice(self):
        """utf16_length counts a supplementary character as two units."""
        assert utf16_length("a\U0001f600") == 3

    def test_length_of_bmp_string(self):
        """utf16_length equals len() for BMP-only strings."""
        assert utf16_length("café") == 4

    def test_has_supplementary(self):
        """has_supplementary detects characters outside the BMP."""
        assert has_supplementary("x\U0001f600") is True
        assert has_supplementary("x\uffff") is False

    def test_slice_bmp_string(self):
        """slice_units slices BMP strings like ordinary slicing."""
        assert slice_units("abcdef", 2, 4) == "cd"

    def test_slice_after_surrogate_pair(self):
        """slice_units measures positions in code units."""
        assert slice_units("\U0001f600xy", 2) == "xy"

    def test_slice_before_surrogate_pair(self):
        """slice_units keeps a whole pair when the range covers it."""
        assert slice_units("x\U0001f600y", 0, 3) == "x\U0001f600"


class TestSimpleLower:
    """Tests for simple_lower function."""

    def test_ascii_uppercase(self):
        """simple_lower maps ASCII uppercase to lowercase."""
        assert simple_lower(ord("A")) == ord("a")

    def test_already_lowercase(self):
        """simple_lower leaves lowercase letters alone."""
        assert simple_lower(ord("z")) == ord("z")

    def test_latin1_uppercase(self):
        """simple_lower maps U+00C9 to U+00E9."""
        assert simple_lower(0xC9) == 0xE9

    def test_dotted_capital_i_maps_to_single_unit(self):
        """simple_lower maps U+0130 to plain i, not i plus combining dot."""
        assert simple_lower(0x130) == ord("i")

    def test_sharp_s_is_not_expanded(self):
        """simple_lower does not apply full case folding to U+00DF."""
        assert simple_lower(0xDF) == 0xDF

    def test_surrogate_unchanged(self):
        """simple_lower leaves surrogate halves unchanged."""
        assert simple_lower(0xD800) == 0xD800


class TestCharacterClasses:
    """Tests for is_whitespace, is_iso_control and is_surrogate."""

    def test_ascii_whitespace(self):
        """is_whitespace accepts space, tab, newline and friends."""
        for ch in " \t\n\x0b\x0c\r":
            assert is_whitespace(ord(ch)) is True

    def test_information_separators_are_whitespace(self):
        """is_whitespace accepts U+001C through U+001F."""
        for unit in range(0x1C, 0x20):
            assert is_whitespace(unit) is True

    def test_unicode_spaces_are_whitespace(self):
        """is_whitespace accepts em space and line/paragraph separators."""
        assert is_whitespace(0x2003) is True
        assert is_whitespace(0x2028) is True
        assert is_whitespace(0x2029) is True

    def test_non_breaking_spaces_are_not_whitespace(self):
        """is_whitespace rejects the non-breaking spaces."""
        assert is_whitespace(0x00A0) is False
        assert is_whitespace(0x2007) is False
        assert is_whitespace(0x202F) is False

    def test_next_line_is_not_whitespace(self):
        """is_whitespace rejects U+0085."""
        assert is_whitespace(0x85) is False

    def test_letters_are_not_whitespace(self):
        """is_whitespace rejects ordinary characters."""
        assert is_whitespace(ord("a")) is False

    def test_iso_control_ranges(self):
        """is_iso_control covers C0, DEL and C1 controls."""
        assert is_iso_control(0x00) is True
        assert is_iso_control(0x1F) is True
        assert is_iso_control(0x7F) is True
        assert is_iso_control(0x9F) is True
        assert is_iso_control(0x20) is False
        assert is_iso_control(0xA0) is False

    def test_surrogate_range(self):
        """is_surrogate covers U+D800 through U+DFFF."""
        assert is_surrogate(0xD800) is True
        assert is_surrogate(0xDFFF) is True
        assert is_surrogate(0xD7FF) is False
        assert is_surrogate(0xE000) is False
