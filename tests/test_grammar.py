"""Tests for the numeral grammar builder.

Covers sub-pattern construction, greedy prefix matching, digit bounds,
thousand-separator grouping, optional integer parts and memoization.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import event, given

from numeralcodec.enums import ENotationPolicy, SignPolicy
from numeralcodec.grammar import NumeralMatch, build_pattern, build_regex_source
from numeralcodec.options import NumberFormatOptions
from tests.strategies import number_format_options, numeral_noise

UK = NumberFormatOptions(thousand_separator=",")


def _integer(options: NumberFormatOptions, text: str) -> str | None:
    match = build_pattern(options).match_prefix(text)
    return None if match is None else match.integer


class TestRegexSource:
    """Generated regular expression sources."""

    def test_default_source(self):
        """Default options: optional minus, lone 0 or non-zero run, optional fraction."""
        source = build_regex_source(NumberFormatOptions(max_fractional_digits=2))

        assert source == r"(?P<sign>-)?(?P<integer>0|[1-9][0-9]*)(?:\.(?P<fraction>[0-9]{1,2}))?"

    def test_ascii_digits_only(self):
        r"""Sources never use \d."""
        source = build_regex_source(UK.with_scientific())

        assert r"\d" not in source

    def test_no_fraction_part_for_integers(self):
        """Integer options have no fractional sub-pattern."""
        source = build_regex_source(NumberFormatOptions().with_no_fractional_part())

        assert "fraction" not in source

    def test_no_exponent_when_forbidden(self):
        """Exponent sub-pattern only exists when e-notation is allowed."""
        assert "exponent" not in build_regex_source(NumberFormatOptions())
        assert "exponent" in build_regex_source(
            NumberFormatOptions(e_notation_policy=ENotationPolicy.UPPERCASE)
        )


class TestMatchPrefix:
    """NumeralMatch contents."""

    def test_groups(self):
        """All groups are captured and the end index is past the numeral."""
        options = UK.with_e_notation(ENotationPolicy.LOWERCASE)

        match = build_pattern(options).match_prefix("-1,234.56e-7 rest")

        assert match == NumeralMatch(
            text="-1,234.56e-7",
            end=12,
            sign="-",
            integer="1,234",
            fraction="56",
            exponent="-7",
        )

    def test_absent_groups_are_empty(self):
        """Groups that did not participate are empty strings."""
        match = build_pattern(NumberFormatOptions()).match_prefix("7")

        assert match is not None
        assert (match.sign, match.fraction, match.exponent) == ("", "", "")

    def test_no_match(self):
        """Input that does not start with a numeral gives None."""
        assert build_pattern(NumberFormatOptions()).match_prefix("foo") is None
        assert build_pattern(NumberFormatOptions()).match_prefix("") is None

    def test_leading_space_not_skipped(self):
        """Matching is anchored at index 0."""
        assert build_pattern(NumberFormatOptions()).match_prefix(" 1") is None

    def test_non_ascii_digits_rejected(self):
        """Other Unicode decimal digits are not numeral digits."""
        assert build_pattern(NumberFormatOptions()).match_prefix("٣") is None


class TestIntegerPart:
    """Integer sub-pattern."""

    def test_leading_zero_stops_at_lone_zero(self):
        """A multi-digit integer part never starts with 0."""
        assert _integer(NumberFormatOptions(), "007") == "0"

    def test_grouping_is_greedy(self):
        """The longest valid grouped run is taken."""
        assert _integer(UK, "1,234,567.5") == "1,234,567"

    def test_incomplete_group_not_consumed(self):
        """A separator not followed by three digits ends the integer part."""
        assert _integer(UK, "1,23") == "1"

    def test_ungrouped_digits_stop_at_three(self):
        """With a thousand separator, at most three digits precede a separator."""
        assert _integer(UK, "1234") == "123"

    def test_bounded_ungrouped(self):
        """Ungrouped runs honour [min, max] integer digits."""
        options = NumberFormatOptions(min_integer_digits=2, max_integer_digits=4)

        assert _integer(options, "5") is None
        assert _integer(options, "0") == "0"
        assert _integer(options, "12345") == "1234"

    def test_bounded_grouped(self):
        """Grouped runs count digits, not characters, against the bounds."""
        options = NumberFormatOptions(thousand_separator=",", max_integer_digits=4)

        assert _integer(options, "1,234") == "1,234"
        assert _integer(options, "12,345") == "12"
        assert _integer(options, "1,234,567") == "1,234"

    def test_grouped_minimum(self):
        """A grouped minimum of 4 digits requires at least one separator."""
        options = NumberFormatOptions(thousand_separator=",", min_integer_digits=4)

        assert _integer(options, "999") is None
        assert _integer(options, "1,000") == "1,000"
        assert _integer(options, "0") == "0"

    def test_nonzero_integer_part(self):
        """nonzero_integer_part rejects a lone 0."""
        options = NumberFormatOptions().with_scientific()

        assert _integer(options, "0.5e1") is None
        assert _integer(options, "12e3") == "1"

    def test_optional_integer_part(self):
        """min_integer_digits=0 allows a numeral to start with the separator."""
        options = NumberFormatOptions(min_integer_digits=0)
        pattern = build_pattern(options)

        match = pattern.match_prefix("-.5")
        assert match is not None
        assert (match.sign, match.integer, match.fraction) == ("-", "", "5")
        assert pattern.match_prefix("12.5") is not None

    def test_optional_integer_part_needs_digits(self):
        """A bare sign or separator is never a numeral."""
        pattern = build_pattern(NumberFormatOptions(min_integer_digits=0))

        assert pattern.match_prefix("-") is None
        assert pattern.match_prefix(".") is None
        assert pattern.match_prefix("-.e") is None

    def test_fraction_only(self):
        """max_integer_digits=0 restricts the integer part to an optional 0."""
        options = NumberFormatOptions(max_fractional_digits=4).with_no_integer_part()
        pattern = build_pattern(options)

        assert _integer(options, "0.5") == "0"
        assert _integer(options, ".5") == ""
        assert _integer(options, "0") == "0"
        assert pattern.match_prefix("5") is None
        assert pattern.match_prefix("10.3") is None


class TestFractionalPart:
    """Fractional sub-pattern."""

    def test_maximum_digits(self):
        """At most max_fractional_digits digits are consumed."""
        match = build_pattern(NumberFormatOptions(max_fractional_digits=2)).match_prefix("1.234")

        assert match is not None
        assert (match.fraction, match.end) == ("23", 4)

    def test_mandatory_fraction(self):
        """min_fractional_digits > 0 makes the fraction mandatory."""
        pattern = build_pattern(UK.with_fractional_digits(2))

        assert pattern.match_prefix("10.3foo") is None
        assert pattern.match_prefix("10") is None
        assert pattern.match_prefix("10.30foo") is not None

    def test_separator_without_digits_not_consumed(self):
        """A trailing separator is left unread."""
        match = build_pattern(NumberFormatOptions()).match_prefix("1001.")

        assert match is not None
        assert match.text == "1001"


class TestSignPart:
    """Sign sub-pattern for each policy."""

    @pytest.mark.parametrize(
        ("policy", "text", "matches"),
        [
            (SignPolicy.FORBIDDEN, "5", True),
            (SignPolicy.FORBIDDEN, "-5", False),
            (SignPolicy.FORBIDDEN, "+5", False),
            (SignPolicy.MINUS_OPTIONAL, "-5", True),
            (SignPolicy.MINUS_OPTIONAL, "+5", False),
            (SignPolicy.MANDATORY, "5", False),
            (SignPolicy.MANDATORY, "+5", True),
            (SignPolicy.MANDATORY, "-5", True),
            (SignPolicy.PLUS_MINUS_OPTIONAL, "5", True),
            (SignPolicy.PLUS_MINUS_OPTIONAL, "+5", True),
        ],
    )
    def test_sign_policy(self, policy: SignPolicy, text: str, matches: bool):
        """Each policy accepts exactly its signs."""
        pattern = build_pattern(NumberFormatOptions(sign_policy=policy))

        assert (pattern.match_prefix(text) is not None) is matches


class TestExponentPart:
    """Exponent sub-pattern."""

    def test_letter_without_digits_not_consumed(self):
        """'e' or 'e+' without digits is left unread."""
        pattern = build_pattern(NumberFormatOptions(e_notation_policy=ENotationPolicy.LOWERCASE))

        for text, end in (("1e", 1), ("1e+", 1), ("1e+5", 4), ("1E5", 1)):
            match = pattern.match_prefix(text)
            assert match is not None
            assert match.end == end

    def test_uppercase_letter(self):
        """UPPERCASE policy reads 'E' only."""
        pattern = build_pattern(NumberFormatOptions(e_notation_policy=ENotationPolicy.UPPERCASE))

        match = pattern.match_prefix("1E5e5")
        assert match is not None
        assert match.text == "1E5"


class TestMemoization:
    """build_pattern caching."""

    def test_equal_options_share_pattern(self):
        """Equal options return the same pattern object."""
        first = build_pattern(NumberFormatOptions(thousand_separator="'"))
        second = build_pattern(NumberFormatOptions(thousand_separator="'"))

        assert first is second

    def test_compilation_logged_at_debug(self, caplog: pytest.LogCaptureFixture):
        """Compiling a new pattern logs its source."""
        options = NumberFormatOptions(thousand_separator="_", max_fractional_digits=7)
        build_pattern.cache_clear()

        with caplog.at_level(logging.DEBUG, logger="numeralcodec.grammar"):
            pattern = build_pattern(options)

        assert repr(pattern.source) in caplog.text


class TestGrammarProperties:
    """Property tests over random options and noisy input."""

    @given(options=number_format_options(), text=numeral_noise())
    def test_match_is_prefix(self, options: NumberFormatOptions, text: str):
        """A match is always a non-empty prefix of the input."""
        match = build_pattern(options).match_prefix(text)
        event(f"matched={match is not None}")

        if match is not None:
            assert match.text
            assert text.startswith(match.text)
            assert match.end == len(match.text)

    @given(options=number_format_options(), text=numeral_noise())
    def test_integer_digits_within_bounds(self, options: NumberFormatOptions, text: str):
        """Matched integer parts honour the configured digit bounds."""
        match = build_pattern(options).match_prefix(text)
        if match is None or match.integer in ("", "0"):
            return
        separator = options.thousand_separator
        digits = match.integer.replace(separator, "") if separator else match.integer

        assert digits[0] != "0"
        assert len(digits) >= options.min_nonzero_integer_digits
        if options.max_integer_digits is not None:
            assert len(digits) <= options.max_integer_digits
