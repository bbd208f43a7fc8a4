# =============================================================================
# test_text.py - Text Utility Unit Tests
# =============================================================================
# Tests for single-byte character classification and the 64-bit numeric
# conversions used by the lexer.
# =============================================================================

import pytest

from kplc.text import (
    INTEGER_MAX,
    NATURAL_MAX,
    convert_to_integer,
    convert_to_natural,
    convert_to_real,
    is_alphabetic,
    is_hexadecimal,
    is_numeric,
    is_whitespace,
)


class TestClassification:
    """Test character predicates."""

    def test_whitespace(self):
        for char in " \t\n\v\f\r":
            assert is_whitespace(char)
        assert not is_whitespace("a")

    def test_alphabetic(self):
        assert is_alphabetic("a")
        assert is_alphabetic("Z")
        assert not is_alphabetic("_")
        assert not is_alphabetic("1")
        assert not is_alphabetic("\xe9")

    def test_numeric(self):
        assert all(is_numeric(c) for c in "0123456789")
        assert not is_numeric("a")

    def test_hexadecimal(self):
        assert all(is_hexadecimal(c) for c in "09afAF")
        assert not is_hexadecimal("g")

    def test_end_of_input_matches_nothing(self):
        """The empty string (end of input) is never classified."""
        for predicate in (is_whitespace, is_alphabetic, is_numeric, is_hexadecimal):
            assert not predicate("")


class TestConversions:
    """Test fixed-width conversions and their failure modes."""

    def test_natural_bases(self):
        assert convert_to_natural("1010", 2) == 10
        assert convert_to_natural("1f", 16) == 31
        assert convert_to_natural("42") == 42

    def test_natural_limit(self):
        assert convert_to_natural("f" * 16, 16) == NATURAL_MAX
        with pytest.raises(OverflowError):
            convert_to_natural("1" + "0" * 16, 16)

    @pytest.mark.parametrize("text,base", [("", 2), ("12", 2), ("1_0", 10), (" 1", 10), ("-1", 10)])
    def test_natural_invalid(self, text, base):
        with pytest.raises(ValueError):
            convert_to_natural(text, base)

    def test_integer(self):
        assert convert_to_integer("123") == 123
        assert convert_to_integer("-5") == -5
        assert convert_to_integer(str(INTEGER_MAX)) == INTEGER_MAX

    def test_integer_range(self):
        with pytest.raises(OverflowError):
            convert_to_integer(str(INTEGER_MAX + 1))
        with pytest.raises(OverflowError):
            convert_to_integer("-9223372036854775809")

    @pytest.mark.parametrize("text", ["", "-", "1.0", "1e3", "abc"])
    def test_integer_invalid(self, text):
        with pytest.raises(ValueError):
            convert_to_integer(text)

    def test_real(self):
        assert convert_to_real("3.14") == pytest.approx(3.14)
        assert convert_to_real(".5") == pytest.approx(0.5)
        assert convert_to_real("2.5e-1") == pytest.approx(0.25)

    @pytest.mark.parametrize("text", ["", ".", "inf", "nan", "1_0.0", "1.5e"])
    def test_real_invalid(self, text):
        with pytest.raises(ValueError):
            convert_to_real(text)

    def test_real_overflow(self):
        with pytest.raises(OverflowError):
            convert_to_real("1.0e400")
