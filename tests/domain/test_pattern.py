"""Tests for periodfmt.domain.pattern."""

from datetime import date

import pytest

from periodfmt.domain.pattern import (
    Field,
    Literal,
    PatternError,
    UnsupportedFieldError,
    compile_pattern,
    format_date,
)

MAY_6 = date(2001, 5, 6)  # a Sunday


class TestCompilePattern:
    """Tests for compile_pattern validation."""

    def test_unknown_letters_fail(self) -> None:
        """Should reject CM at the first unknown letter."""
        with pytest.raises(PatternError, match="Unknown pattern letter: C"):
            compile_pattern("CM")

    @pytest.mark.parametrize("letter", ["b", "C", "f", "I", "J", "l", "o", "P", "R", "r", "T", "t", "U"])
    def test_unknown_letter(self, letter: str) -> None:
        with pytest.raises(PatternError, match=f"Unknown pattern letter: {letter}"):
            compile_pattern(letter)

    def test_pattern_error_is_valueerror(self) -> None:
        with pytest.raises(ValueError):
            compile_pattern("CM")

    def test_pad_modifier_not_supported(self) -> None:
        """Should name the pad modifier rather than call it unknown."""
        with pytest.raises(PatternError, match="Pad modifier"):
            compile_pattern("ppd")

    def test_unimplemented_date_letter(self) -> None:
        """Should reject week-based letters at compile time."""
        with pytest.raises(PatternError, match="Unsupported pattern letter: w"):
            compile_pattern("w")

    def test_too_many_letters(self) -> None:
        with pytest.raises(PatternError, match="Too many pattern letters: d"):
            compile_pattern("ddd")

    @pytest.mark.parametrize(
        "pattern,letter",
        [("HHH", "H"), ("hhh", "h"), ("mmmmmm", "m"), ("sss", "s"), ("aa", "a"), ("VVV", "V"), ("zzzzz", "z"), ("XXXXXX", "X")],
    )
    def test_too_many_time_letters(self, pattern: str, letter: str) -> None:
        """Should limit run length for time and zone letters too."""
        with pytest.raises(PatternError, match=f"Too many pattern letters: {letter}"):
            compile_pattern(pattern)

    def test_reserved_character(self) -> None:
        with pytest.raises(PatternError, match="reserved character"):
            compile_pattern("yyyy#")

    def test_optional_section_not_supported(self) -> None:
        with pytest.raises(PatternError, match="Optional sections"):
            compile_pattern("yyyy[-MM]")

    def test_unterminated_quote(self) -> None:
        with pytest.raises(PatternError, match="incomplete string literal"):
            compile_pattern("'abc")

    def test_parts(self) -> None:
        """Should split into fields and merged literals."""
        compiled = compile_pattern("yyyy-MM 'on' d")

        assert compiled.parts == (
            Field("y", 4),
            Literal("-"),
            Field("M", 2),
            Literal(" on "),
            Field("d", 1),
        )

    def test_time_letter_compiles(self) -> None:
        """Should accept time letters; they fail only when formatting."""
        compiled = compile_pattern("HH:mm")

        assert compiled.parts[0] == Field("H", 2)


class TestQuotedLiterals:
    """Tests for quoted literal text."""

    @pytest.mark.parametrize(
        "value",
        [date(2001, 5, 6), date(1, 1, 1), date(9999, 12, 31)],
    )
    def test_quoted_only_pattern_prints_literal(self, value: date) -> None:
        """Should print exactly the quoted text for any date."""
        assert compile_pattern("'CM'").format(value) == "CM"

    def test_doubled_quote_outside(self) -> None:
        assert compile_pattern("''").format(MAY_6) == "'"

    def test_doubled_quote_inside(self) -> None:
        assert compile_pattern("'o''clock'").format(MAY_6) == "o'clock"

    def test_non_letters_are_literal(self) -> None:
        assert compile_pattern("-/ :.,").format(MAY_6) == "-/ :.,"

    def test_empty_pattern(self) -> None:
        assert compile_pattern("").format(MAY_6) == ""


class TestFormatDate:
    """Tests for format_date field rendering."""

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("yyyy-MM-dd", "2001-05-06"),
            ("uuuu/M/d", "2001/5/6"),
            ("yy", "01"),
            ("y", "2001"),
            ("yyyyy", "02001"),
            ("MMM", "May"),
            ("MMMM", "May"),
            ("MMMMM", "M"),
            ("LL", "05"),
            ("D", "126"),
            ("DDD", "126"),
            ("E", "Sun"),
            ("EEEE", "Sunday"),
            ("EEEEE", "S"),
            ("Q", "2"),
            ("QQ", "02"),
            ("QQQ", "Q2"),
            ("QQQQ", "2nd quarter"),
            ("G", "AD"),
            ("GGGG", "Anno Domini"),
            ("EEEE, d MMMM yyyy", "Sunday, 6 May 2001"),
        ],
    )
    def test_fields(self, pattern: str, expected: str) -> None:
        assert format_date(compile_pattern(pattern), MAY_6) == expected

    def test_short_month_name(self) -> None:
        assert compile_pattern("d MMM").format(date(2001, 2, 5)) == "5 Feb"

    def test_day_of_year_padding(self) -> None:
        assert compile_pattern("DDD").format(date(2001, 1, 9)) == "009"

    def test_time_field_fails_on_date(self) -> None:
        """Should raise when a date is formatted with an hour field."""
        compiled = compile_pattern("yyyy HH")

        with pytest.raises(UnsupportedFieldError, match="HourOfDay"):
            compiled.format(MAY_6)
