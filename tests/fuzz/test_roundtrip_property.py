"""Fuzz properties over random option sets.

Every option set the strategies generate is exercised with floats, Decimals
and noisy text:
- what a writer produces, the matching reader reads back in full
- writing what was read back reproduces the text exactly
- readers never raise on arbitrary input

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from numeralcodec.options import NumberFormatOptions
from numeralcodec.transformer import (
    Transformer,
    decimal_transformer,
    int_transformer,
    real_transformer,
)
from tests.strategies import number_format_options, numeral_noise, short_decimals, short_floats

pytestmark = pytest.mark.fuzz


def _assert_stable(transformer: Transformer, value: object) -> None:
    text, errors = transformer.write(value)
    event(f"written={text is not None}")
    if text is None:
        assert errors
        return

    result, errors = transformer.read_all(text)
    assert errors == (), f"{transformer.name} cannot read back {text!r}"
    assert result is not None

    assert transformer.write(result[0]) == (text, ())


class TestWriteReadWrite:
    """Written text is a fixed point of read then write."""

    @given(options=number_format_options(), value=short_floats())
    @settings(max_examples=1000)
    def test_floats(self, options: NumberFormatOptions, value: float) -> None:
        """Float transformers over random options."""
        _assert_stable(real_transformer(options), value)

    @given(options=number_format_options(), value=short_decimals(max_digits=30))
    @settings(max_examples=1000)
    def test_decimals(self, options: NumberFormatOptions, value: Decimal) -> None:
        """Decimal transformers over random options, beyond float precision."""
        _assert_stable(decimal_transformer(options), value)

    @given(
        options=number_format_options(),
        value=st.integers(min_value=-(10**25), max_value=10**25),
    )
    @settings(max_examples=500)
    def test_integers(self, options: NumberFormatOptions, value: int) -> None:
        """Integer transformers over the integer projection of random options."""
        integer_options = NumberFormatOptions(
            sign_policy=options.sign_policy,
            thousand_separator=options.thousand_separator,
            fractional_separator=options.fractional_separator,
            min_integer_digits=max(options.min_integer_digits, 1),
            max_integer_digits=options.max_integer_digits or None,
            max_fractional_digits=0,
        )
        transformer = int_transformer(integer_options)

        _assert_stable(transformer, value)
        text, _ = transformer.write(value)
        if text is not None:
            assert transformer.read_all(text) == ((value, ""), ())


class TestReadRobustness:
    """Readers on arbitrary input."""

    @given(options=number_format_options(), text=numeral_noise(max_size=40))
    @settings(max_examples=1000)
    def test_read_never_raises(self, options: NumberFormatOptions, text: str) -> None:
        """Reads either succeed on a prefix or return errors."""
        result, errors = real_transformer(options).read(text)
        event(f"read={result is not None}")

        if result is None:
            assert errors
        else:
            assert errors == ()
            assert text.endswith(result[1])

    @given(options=number_format_options(), text=st.text(max_size=40))
    @settings(max_examples=500)
    def test_read_all_never_raises(self, options: NumberFormatOptions, text: str) -> None:
        """read_all on any text returns a value with an empty rest or errors."""
        result, errors = decimal_transformer(options).read_all(text)

        assert (result is None) == bool(errors)
        if result is not None:
            assert result[1] == ""
