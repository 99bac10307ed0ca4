"""Transformer: a named read/write inverse pair over one value domain.

Transformers are the unit the catalog exposes and string templates consume.
They carry no state of their own beyond the two closures, so a single
instance can be shared freely.

Read and write never raise for expected failures; they return a result
(None on failure) paired with a tuple of errors, following the same
convention throughout the package:

    >>> from numeralcodec.catalog import UK_FLOATING_POINT_2
    >>> UK_FLOATING_POINT_2.read("10.30foo")
    ((10.3, 'foo'), ())
    >>> UK_FLOATING_POINT_2.write(-1740.7)
    ('-1,740.70', ())

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from decimal import Decimal

from numeralcodec.diagnostics import ConfigurationError, ErrorTemplate, NoMatchError
from numeralcodec.enums import SignPolicy
from numeralcodec.grammar import build_pattern
from numeralcodec.guards import is_finite_decimal, is_int, is_non_negative_int, is_real
from numeralcodec.options import NumberFormatOptions
from numeralcodec.reader import ReadResult, Reader, make_reader, to_decimal, to_float, to_int
from numeralcodec.writer import Writer, make_writer

__all__ = [
    "Transformer",
    "decimal_transformer",
    "int_transformer",
    "non_negative_int_transformer",
    "real_transformer",
]


@dataclass(frozen=True, slots=True)
class Transformer[A]:
    """Named read/write inverse pair.

    Type Parameters:
        A: The value domain (float, Decimal, int, str)

    Attributes:
        name: Human-readable id, echoed in diagnostics
        read: text -> ((value, rest) | None, errors)
        write: value -> (text | None, errors)

    Invariant:
        For every value the writer accepts, read(write(value)) gives back
        the value (at the configured precision) with an empty rest.
    """

    name: str
    read: Reader[A]
    write: Writer[A]

    def read_all(self, text: str) -> ReadResult[A]:
        """Read a value that must span the whole of text.

        Returns:
            ((value, ''), ()) on success; (None, errors) when text does not
            start with a numeral or has characters left over
        """
        result, errors = self.read(text)
        if result is None:
            return (None, errors)
        if result[1]:
            error = NoMatchError(
                ErrorTemplate.unexpected_rest(result[1], self.name),
                input_value=text,
                transformer_name=self.name,
            )
            return (None, (error,))
        return (result, ())

    def __repr__(self) -> str:
        return f"Transformer({self.name!r})"


def real_transformer(
    options: NumberFormatOptions, name: str | None = None
) -> Transformer[float]:
    """Transformer between numerals and finite floats.

    Args:
        options: Validated options
        name: Name echoed in diagnostics (derived from options by default)

    Returns:
        Transformer[float]; writes also accept ints a float holds exactly
        (big integers are written exactly as Decimals by decimal_transformer)
    """
    name = name or f"real number ({options.describe()})"
    return Transformer(
        name=name,
        read=make_reader(build_pattern(options), to_float, name),
        write=make_writer(options, name, is_real, "a finite float or a float-exact int"),
    )


def decimal_transformer(
    options: NumberFormatOptions, name: str | None = None
) -> Transformer[Decimal]:
    """Transformer between numerals and exact Decimals."""
    name = name or f"decimal ({options.describe()})"
    return Transformer(
        name=name,
        read=make_reader(build_pattern(options), to_decimal, name),
        write=make_writer(options, name, is_finite_decimal, "a finite Decimal"),
    )


def _check_integer_options(kind: str, options: NumberFormatOptions) -> None:
    if options.max_fractional_digits != 0:
        raise ConfigurationError(
            ErrorTemplate.incompatible_transformer(kind, "max_fractional_digits must be 0")
        )
    if options.allows_e_notation:
        raise ConfigurationError(
            ErrorTemplate.incompatible_transformer(kind, "e-notation must be forbidden")
        )
    if options.max_integer_digits == 0:
        raise ConfigurationError(
            ErrorTemplate.incompatible_transformer(kind, "max_integer_digits must be > 0")
        )


def int_transformer(
    options: NumberFormatOptions, name: str | None = None
) -> Transformer[int]:
    """Transformer between numerals and signed integers.

    Raises:
        ConfigurationError: If options admit a fraction or an exponent
    """
    _check_integer_options("integer", options)
    name = name or f"integer ({options.describe()})"
    return Transformer(
        name=name,
        read=make_reader(build_pattern(options), to_int, name),
        write=make_writer(options, name, is_int, "an integer"),
    )


def non_negative_int_transformer(
    options: NumberFormatOptions, name: str | None = None
) -> Transformer[int]:
    """Transformer between unsigned numerals and non-negative integers.

    Raises:
        ConfigurationError: If options admit a fraction, an exponent or a sign
    """
    _check_integer_options("non-negative integer", options)
    if options.sign_policy is not SignPolicy.FORBIDDEN:
        raise ConfigurationError(
            ErrorTemplate.incompatible_transformer(
                "non-negative integer", "sign_policy must be forbidden"
            )
        )
    name = name or f"non-negative integer ({options.describe()})"
    return Transformer(
        name=name,
        read=make_reader(build_pattern(options), to_int, name),
        write=make_writer(options, name, is_non_negative_int, "a non-negative integer"),
    )
