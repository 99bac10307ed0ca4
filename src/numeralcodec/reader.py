"""Reader: turn a numeral pattern into a prefix-reading function.

A reader matches the longest numeral at the start of its input, hands the
matched groups to a semantic parser and returns the value together with the
unread remainder. Expected failures are returned, never raised:

    value_and_rest, errors = reader("1,048 items")

Python 3.13+. Zero external dependencies.
"""

import math
from collections.abc import Callable
from decimal import Decimal

from numeralcodec.diagnostics import CodecError, ErrorTemplate, NoMatchError
from numeralcodec.grammar import NumeralPattern

__all__ = [
    "ReadResult",
    "Reader",
    "SemanticParser",
    "make_reader",
    "to_decimal",
    "to_float",
    "to_int",
]

type ReadResult[A] = tuple[tuple[A, str] | None, tuple[CodecError, ...]]
type Reader[A] = Callable[[str], ReadResult[A]]

# (sign, integer digits without separators, fraction digits, exponent digits)
type SemanticParser[A] = Callable[[str, str, str, str], A]


def _canonical(sign: str, integer: str, fraction: str, exponent: str) -> str:
    """Plain scientific literal accepted by both float() and Decimal()."""
    return f"{sign}{integer or '0'}.{fraction or '0'}e{exponent or '0'}"


def to_float(sign: str, integer: str, fraction: str, exponent: str) -> float:
    """Semantic parser producing a float.

    Raises:
        OverflowError: If the exponent takes the value out of float range
    """
    value = float(_canonical(sign, integer, fraction, exponent))
    if not math.isfinite(value):
        msg = "numeral exceeds float range"
        raise OverflowError(msg)
    return value


def to_decimal(sign: str, integer: str, fraction: str, exponent: str) -> Decimal:
    """Semantic parser producing an exact Decimal."""
    return Decimal(_canonical(sign, integer, fraction, exponent))


def to_int(sign: str, integer: str, fraction: str, exponent: str) -> int:  # noqa: ARG001
    """Semantic parser for integer grammars (no fraction, no exponent).

    Converts through Decimal, which has no digit limit, so integers longer
    than sys.get_int_max_str_digits() read back like any other.
    """
    return int(Decimal(f"{sign}{integer or '0'}"))


def _no_match(text: str, name: str) -> NoMatchError:
    return NoMatchError(
        ErrorTemplate.no_match(text, name), input_value=text, transformer_name=name
    )


def make_reader[A](
    pattern: NumeralPattern,
    semantic_parser: SemanticParser[A],
    name: str,
) -> Reader[A]:
    """Build a reader from a compiled pattern and a semantic parser.

    Args:
        pattern: Grammar to match at the start of the input
        semantic_parser: Converts the matched groups into a value
        name: Transformer name, echoed in diagnostics

    Returns:
        Function text -> ((value, rest) | None, errors)
    """
    separator = pattern.options.thousand_separator

    def read(text: str) -> ReadResult[A]:
        match = pattern.match_prefix(text)
        if match is None:
            return (None, (_no_match(text, name),))

        integer = match.integer.replace(separator, "") if separator else match.integer
        try:
            value = semantic_parser(match.sign, integer, match.fraction, match.exponent)
        except (ArithmeticError, ValueError):
            return (None, (_no_match(text, name),))
        return ((value, text[match.end:]), ())

    return read
