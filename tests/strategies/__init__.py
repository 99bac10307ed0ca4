"""Hypothesis strategies for numeralcodec property-based testing.

Usage:
    from tests.strategies import number_format_options, short_floats
    from tests.strategies.numerals import SEPARATOR_PAIRS, numeral_noise

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - number_format_options, short_decimals
"""

from .numerals import (
    FLOAT_SAFE_DIGITS,
    NUMERAL_NOISE_ALPHABET,
    SEPARATOR_PAIRS,
    number_format_options,
    numeral_noise,
    short_decimals,
    short_floats,
)

__all__ = [
    "FLOAT_SAFE_DIGITS",
    "NUMERAL_NOISE_ALPHABET",
    "SEPARATOR_PAIRS",
    "number_format_options",
    "numeral_noise",
    "short_decimals",
    "short_floats",
]
