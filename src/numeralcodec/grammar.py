"""Grammar builder: translate NumberFormatOptions into a prefix-matching pattern.

The pattern recognizes, at index 0 of an arbitrary string, the longest
numeral conforming to the options and never consumes trailing characters
that are not part of it. It is the concatenation of four sub-patterns:

    sign  integer-part  fractional-part  exponent

Each sub-pattern is derived independently from its own options. Given the
option invariants (distinct separators, exponent letter distinct from both)
the sub-patterns never compete for the same character, so the first match
the regex engine finds is the only reading of the input.

Built patterns are memoized per options value. NumberFormatOptions is
frozen and hashable; recomputing a pattern concurrently yields an equal
object, so no lock is needed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from numeralcodec.constants import DIGIT_GROUP_SIZE, PATTERN_CACHE_SIZE
from numeralcodec.enums import SignPolicy
from numeralcodec.options import NumberFormatOptions

__all__ = [
    "NumeralMatch",
    "NumeralPattern",
    "build_pattern",
    "build_regex_source",
]

logger = logging.getLogger(__name__)

# ASCII only: \d would also accept other Unicode decimal digits
_DIGIT = "[0-9]"
_NONZERO_DIGIT = "[1-9]"


@dataclass(frozen=True, slots=True)
class NumeralMatch:
    """Numeral found at the start of an input string.

    Attributes:
        text: The matched prefix
        end: Index just past the matched prefix
        sign: '+', '-' or '' when no sign was read
        integer: Integer digits as written (thousand separators included)
        fraction: Fractional digits ('' when absent)
        exponent: Signed exponent digits ('' when absent)
    """

    text: str
    end: int
    sign: str
    integer: str
    fraction: str
    exponent: str


@dataclass(frozen=True, slots=True)
class NumeralPattern:
    """Compiled, immutable numeral grammar for one NumberFormatOptions.

    Attributes:
        options: Options the grammar was derived from
        regex: Compiled regular expression (anchored with re.match)
    """

    options: NumberFormatOptions
    regex: re.Pattern[str]

    @property
    def source(self) -> str:
        """Regular expression source, for debugging."""
        return self.regex.pattern

    def match_prefix(self, text: str) -> NumeralMatch | None:
        """Match the longest valid numeral at the start of text.

        Args:
            text: Arbitrary input string

        Returns:
            NumeralMatch, or None when text does not start with a numeral
        """
        match = self.regex.match(text)
        if match is None:
            return None
        groups = match.groupdict()
        return NumeralMatch(
            text=match.group(0),
            end=match.end(),
            sign=groups.get("sign") or "",
            integer=groups.get("integer") or "",
            fraction=groups.get("fraction") or "",
            exponent=groups.get("exponent") or "",
        )


def _repeat(atom: str, low: int, high: int | None) -> str:
    """Repeat a single regex unit between low and high times (None: unbounded)."""
    if high is None:
        return f"{atom}*" if low == 0 else f"{atom}{{{low},}}"
    if high == 0:
        return ""
    if low == high:
        return atom if low == 1 else f"{atom}{{{low}}}"
    return f"{atom}{{{low},{high}}}"


def _nonzero_run(low: int, high: int | None) -> str:
    """Digit run starting with a non-zero digit, low..high digits long."""
    return _NONZERO_DIGIT + _repeat(_DIGIT, low - 1, None if high is None else high - 1)


def _grouped_run(low: int, high: int | None, separator: str) -> str:
    """Grouped digit run starting with a non-zero digit, low..high digits long.

    A run with k separators holds lead + k * DIGIT_GROUP_SIZE digits where the
    leading group holds 1..DIGIT_GROUP_SIZE digits. One alternative is emitted
    per admissible k, largest k first: the regex engine keeps the first
    alternative that matches, so ordering them longest-first makes the
    integer part greedy.
    """
    size = DIGIT_GROUP_SIZE
    group = f"(?:{re.escape(separator)}{_DIGIT}{{{size}}})"
    alternatives: list[str] = []

    if high is None:
        # From k_any separators on, every lead length satisfies the minimum
        k_any = -(-(low - 1) // size)
        alternatives.append(_nonzero_run(1, size) + _repeat(group, k_any, None))
        group_counts = range(k_any - 1, -1, -1)
    else:
        group_counts = range((high - 1) // size, -1, -1)

    for k in group_counts:
        lead_low = max(1, low - k * size)
        lead_high = size if high is None else min(size, high - k * size)
        if lead_low <= lead_high:
            alternatives.append(_nonzero_run(lead_low, lead_high) + _repeat(group, k, k))

    return "(?:" + "|".join(alternatives) + ")"


def _sign_part(policy: SignPolicy) -> str:
    match policy:
        case SignPolicy.FORBIDDEN:
            return ""
        case SignPolicy.MINUS_OPTIONAL:
            return "(?P<sign>-)?"
        case SignPolicy.MANDATORY:
            return "(?P<sign>[+-])"
        case SignPolicy.PLUS_MINUS_OPTIONAL:
            return "(?P<sign>[+-])?"


def _integer_part(options: NumberFormatOptions) -> str:
    if options.max_integer_digits == 0:
        return "(?P<integer>0)?"

    low = options.min_nonzero_integer_digits
    high = options.max_integer_digits
    if options.thousand_separator is None:
        nonzero = _nonzero_run(low, high)
    else:
        nonzero = _grouped_run(low, high, options.thousand_separator)

    body = nonzero if options.nonzero_integer_part else f"0|{nonzero}"
    optional = "?" if options.integer_part_optional else ""
    return f"(?P<integer>{body}){optional}"


def _integer_lookahead(options: NumberFormatOptions) -> str:
    """Require a digit before an optional integer part, so a bare sign never matches."""
    if not options.integer_part_optional:
        return ""
    if options.max_integer_digits == 0:
        start = "0"
    elif options.nonzero_integer_part:
        start = _NONZERO_DIGIT
    else:
        start = _DIGIT
    if options.allows_fraction:
        return f"(?={start}|{re.escape(options.fractional_separator)}{_DIGIT})"
    return f"(?={start})"


def _fractional_part(options: NumberFormatOptions) -> str:
    if not options.allows_fraction:
        return ""
    digits = _repeat(
        _DIGIT, max(1, options.min_fractional_digits), options.max_fractional_digits
    )
    part = f"{re.escape(options.fractional_separator)}(?P<fraction>{digits})"
    return part if options.min_fractional_digits > 0 else f"(?:{part})?"


def _exponent_part(options: NumberFormatOptions) -> str:
    if not options.allows_e_notation:
        return ""
    return f"(?:{options.e_notation_policy.letter}(?P<exponent>[+-]?{_DIGIT}+))?"


def build_regex_source(options: NumberFormatOptions) -> str:
    """Regular expression source recognizing numerals for options.

    Args:
        options: Validated options

    Returns:
        Regex source, to be applied with re.match (anchored at index 0)

    Example:
        >>> build_regex_source(NumberFormatOptions(max_fractional_digits=2))
        '(?P<sign>-)?(?P<integer>0|[1-9][0-9]*)(?:\\\\.(?P<fraction>[0-9]{1,2}))?'
    """
    return (
        _sign_part(options.sign_policy)
        + _integer_lookahead(options)
        + _integer_part(options)
        + _fractional_part(options)
        + _exponent_part(options)
    )


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def build_pattern(options: NumberFormatOptions) -> NumeralPattern:
    """Build (or fetch the memoized) numeral pattern for options.

    Args:
        options: Validated options

    Returns:
        Immutable NumeralPattern
    """
    source = build_regex_source(options)
    logger.debug("Compiled numeral pattern %r for %s", source, options.describe())
    return NumeralPattern(options=options, regex=re.compile(source))
