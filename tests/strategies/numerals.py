"""Hypothesis strategies for numeral codec testing.

Provides reusable, event-emitting strategies for generating format options,
values with a bounded number of significant digits, and numeral-like noise.

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - options_layout: integer-part layout (unbounded|bounded|scientific|fraction_only|optional)
    - options_separators: separator convention
    - options_e_notation: e-notation policy
    - value_magnitude: order of magnitude bucket (zero|tiny|small|large)
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st

from numeralcodec.enums import ENotationPolicy, SignPolicy
from numeralcodec.options import NumberFormatOptions

# (thousand separator, fractional separator)
SEPARATOR_PAIRS: tuple[tuple[str | None, str], ...] = (
    (None, "."),
    (",", "."),
    (".", ","),
    (" ", ","),
    ("'", "."),
    ("_", ","),
)

# Characters a numeral reader must cope with at arbitrary positions
NUMERAL_NOISE_ALPHABET = "0123456789+-.,eE '_x ٣"

# Significant digits that survive a decimal -> float -> decimal round trip
FLOAT_SAFE_DIGITS = 15


@st.composite
def number_format_options(draw: st.DrawFn) -> NumberFormatOptions:
    """Generate valid NumberFormatOptions across every configuration axis.

    Events emitted:
    - options_layout={unbounded|bounded|scientific|fraction_only|optional}
    - options_separators={thousand}/{fractional}
    - options_e_notation={forbidden|lowercase|uppercase}
    """
    sign_policy = draw(st.sampled_from(SignPolicy))
    e_notation_policy = draw(st.sampled_from(ENotationPolicy))
    thousand, fractional = draw(st.sampled_from(SEPARATOR_PAIRS))
    min_frac = draw(st.integers(min_value=0, max_value=3))
    max_frac = draw(st.none() | st.integers(min_value=min_frac, max_value=min_frac + 4))

    layout = draw(
        st.sampled_from(["unbounded", "bounded", "scientific", "fraction_only", "optional"])
    )
    nonzero = False
    match layout:
        case "unbounded":
            min_int, max_int = 1, None
        case "bounded":
            min_int = draw(st.integers(min_value=1, max_value=4))
            max_int = draw(st.integers(min_value=min_int, max_value=min_int + 8))
        case "scientific":
            min_int, max_int, nonzero = 1, 1, True
        case "fraction_only":
            min_int, max_int = 0, 0
            if max_frac == 0:
                max_frac = None
        case _:  # optional
            min_int, max_int = 0, None

    event(f"options_layout={layout}")
    event(f"options_separators={thousand}/{fractional}")
    event(f"options_e_notation={e_notation_policy}")

    return NumberFormatOptions(
        sign_policy=sign_policy,
        e_notation_policy=e_notation_policy,
        thousand_separator=thousand,
        fractional_separator=fractional,
        min_fractional_digits=min_frac,
        max_fractional_digits=max_frac,
        min_integer_digits=min_int,
        max_integer_digits=max_int,
        nonzero_integer_part=nonzero,
    )


@st.composite
def short_decimals(
    draw: st.DrawFn,
    max_digits: int = FLOAT_SAFE_DIGITS,
    min_exponent: int = -12,
    max_exponent: int = 12,
) -> Decimal:
    """Generate Decimals with at most max_digits significant digits.

    With the default of 15 digits, float(value) converts back to the same
    decimal through repr(), so float writers see exactly this value.

    Events emitted:
    - value_magnitude={zero|tiny|small|large}
    """
    bound = 10**max_digits - 1
    coefficient = draw(st.integers(min_value=-bound, max_value=bound))
    exponent = draw(st.integers(min_value=min_exponent, max_value=max_exponent))
    value = Decimal(coefficient).scaleb(exponent)
    if value.is_zero():
        event("value_magnitude=zero")
    elif abs(value) < 1:
        event("value_magnitude=tiny")
    elif abs(value) < 10**6:
        event("value_magnitude=small")
    else:
        event("value_magnitude=large")
    return value


def short_floats(max_digits: int = FLOAT_SAFE_DIGITS) -> st.SearchStrategy[float]:
    """Floats whose shortest repr has at most max_digits significant digits."""
    return short_decimals(max_digits=max_digits).map(float)


def numeral_noise(max_size: int = 24) -> st.SearchStrategy[str]:
    """Strings dense in digits, signs, separators and exponent letters."""
    return st.text(alphabet=NUMERAL_NOISE_ALPHABET, max_size=max_size)
