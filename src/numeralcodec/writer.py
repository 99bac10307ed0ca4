"""Writer: format numbers as numerals the matching reader reads back.

The writer works on a Decimal built from the shortest round-tripping repr of
the value, so floats are rounded as they print rather than as they are
stored in binary: -194.455 written with two fractional digits gives
'-194.46'.

Steps:
    1. validate the value domain
    2. choose the exponent (only when e-notation is allowed)
    3. round the mantissa half away from zero
    4. validate integer digits, zero exclusion and sign policy
    5. render sign, grouped integer digits, trimmed/padded fraction, exponent

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from numeralcodec.constants import DIGIT_GROUP_SIZE, MIN_DECIMAL_PRECISION, MINUS_SIGN, PLUS_SIGN
from numeralcodec.diagnostics import (
    CodecError,
    Diagnostic,
    ErrorTemplate,
    NotRepresentableError,
)
from numeralcodec.enums import SignPolicy
from numeralcodec.options import NumberFormatOptions

__all__ = [
    "Validator",
    "WriteResult",
    "Writer",
    "group_digits",
    "make_writer",
]

type WriteResult = tuple[str | None, tuple[CodecError, ...]]
type Writer[A] = Callable[[A], WriteResult]
type Validator = Callable[[object], bool]


def group_digits(digits: str, separator: str | None) -> str:
    """Insert separator every DIGIT_GROUP_SIZE digits, counting from the right.

    Example:
        >>> group_digits("10034538", ",")
        '10,034,538'
    """
    if separator is None or len(digits) <= DIGIT_GROUP_SIZE:
        return digits
    head = len(digits) % DIGIT_GROUP_SIZE or DIGIT_GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(
        digits[i : i + DIGIT_GROUP_SIZE] for i in range(head, len(digits), DIGIT_GROUP_SIZE)
    )
    return separator.join(groups)


def _to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _integer_digit_count(number: Decimal) -> int:
    """Digits before the decimal point of a non-zero number (<= 0 when |number| < 1)."""
    return number.adjusted() + 1


def _choose_exponent(number: Decimal, options: NumberFormatOptions) -> int:
    """Smallest power-of-ten shift bringing the integer digit count into bounds."""
    if not options.allows_e_notation or number.is_zero():
        return 0
    digits = _integer_digit_count(number)
    high = options.max_integer_digits
    if high is not None and digits > high:
        return digits - high
    low = (
        options.min_nonzero_integer_digits
        if options.nonzero_integer_part
        else options.min_integer_digits
    )
    if low > 0 and digits < low:
        return digits - low
    return 0


def _shift_and_round(
    number: Decimal, exponent: int, max_fractional_digits: int | None
) -> Decimal:
    """Divide by 10**exponent, then round half away from zero, without precision loss."""
    with localcontext() as ctx:
        ctx.prec = max(MIN_DECIMAL_PRECISION, len(number.as_tuple().digits) + 2)
        mantissa = number.scaleb(-exponent)
        if max_fractional_digits is None:
            return mantissa
        ctx.prec = max(ctx.prec, mantissa.adjusted() + max_fractional_digits + 2)
        return mantissa.quantize(Decimal(1).scaleb(-max_fractional_digits), ROUND_HALF_UP)


def _split(magnitude: Decimal) -> tuple[str, str]:
    """Integer and fractional digit strings of a non-negative Decimal."""
    integer, _, fraction = format(magnitude, "f").partition(".")
    return integer, fraction


def _check_mantissa(
    value: object, integer: str, options: NumberFormatOptions, name: str
) -> Diagnostic | None:
    if integer == "0":
        if options.nonzero_integer_part:
            return ErrorTemplate.zero_excluded(value, name)
        return None
    digits = len(integer)
    high = options.max_integer_digits
    if digits < options.min_nonzero_integer_digits or (high is not None and digits > high):
        return ErrorTemplate.integer_digits_out_of_range(
            value, digits, options.min_integer_digits, high, name
        )
    return None


def make_writer[A](
    options: NumberFormatOptions,
    name: str,
    validator: Validator,
    expected: str = "a finite real number",
) -> Writer[A]:
    """Build a writer for options.

    Args:
        options: Validated options
        name: Transformer name, echoed in diagnostics
        validator: Domain guard (see numeralcodec.guards)
        expected: Description of the domain, used in diagnostics

    Returns:
        Function value -> (text | None, errors)

    Example:
        >>> from numeralcodec.guards import is_real
        >>> write = make_writer(NumberFormatOptions(thousand_separator=","), "uk", is_real)
        >>> write(-1740.7654)
        ('-1,740.7654', ())
    """

    def fail(diagnostic: Diagnostic, value: object) -> WriteResult:
        return (None, (NotRepresentableError(diagnostic, value=value, transformer_name=name),))

    def write(value: A) -> WriteResult:
        if not validator(value):
            if isinstance(value, (float, Decimal)):
                number = Decimal(value) if isinstance(value, float) else value
                if not number.is_finite():
                    return fail(ErrorTemplate.non_finite_value(value, name), value)
            return fail(ErrorTemplate.invalid_value(value, expected, name), value)

        number = _to_decimal(value)  # type: ignore[arg-type]
        if number.is_zero() and options.nonzero_integer_part:
            return fail(ErrorTemplate.zero_excluded(value, name), value)

        exponent = _choose_exponent(number, options)
        mantissa = _shift_and_round(number, exponent, options.max_fractional_digits)
        if options.allows_e_notation and not mantissa.is_zero():
            # Rounding can carry into a new integer digit (9.99996 -> 10.0000).
            # The carried value is a power of ten, so one renormalization is exact.
            rounded = _shift_and_round(mantissa, -exponent, None)
            renormalized = _choose_exponent(rounded, options)
            if renormalized != exponent:
                exponent = renormalized
                mantissa = _shift_and_round(rounded, exponent, options.max_fractional_digits)
        integer, fraction = _split(mantissa.copy_abs())

        diagnostic = _check_mantissa(value, integer, options, name)
        if diagnostic is not None:
            return fail(diagnostic, value)

        negative = mantissa.is_signed() and not mantissa.is_zero()
        match options.sign_policy:
            case SignPolicy.FORBIDDEN if negative:
                return fail(ErrorTemplate.sign_forbidden(value, name), value)
            case SignPolicy.MANDATORY:
                sign = MINUS_SIGN if negative else PLUS_SIGN
            case _:
                sign = MINUS_SIGN if negative else ""

        fraction = fraction.rstrip("0").ljust(options.min_fractional_digits, "0")
        text = sign + group_digits(integer, options.thousand_separator)
        if fraction:
            text += options.fractional_separator + fraction
        if exponent != 0:
            text += options.e_notation_policy.letter + str(exponent)
        return (text, ())

    return write
