"""Unsigned integer codec for radix 2, 8 and 16.

Readers take the longest run of digits valid for the radix (hexadecimal is
case-insensitive), with no sign, prefix or separator. Writers produce the
minimal-width lowercase representation.

    >>> BINARY.read("00118foo")
    ((3, '8foo'), ())
    >>> HEXADECIMAL.write(255)
    ('ff', ())

Python 3.13+. Zero external dependencies.
"""

import re

from numeralcodec.diagnostics import (
    ConfigurationError,
    ErrorTemplate,
    NoMatchError,
    NotRepresentableError,
)
from numeralcodec.guards import is_non_negative_int
from numeralcodec.reader import ReadResult
from numeralcodec.transformer import Transformer
from numeralcodec.writer import WriteResult

__all__ = ["BINARY", "HEXADECIMAL", "OCTAL", "radix_transformer"]

_DIGITS_BY_RADIX: dict[int, tuple[str, str]] = {
    # radix: (digit class, format spec)
    2: ("[01]", "b"),
    8: ("[0-7]", "o"),
    16: ("[0-9A-Fa-f]", "x"),
}


def radix_transformer(radix: int, name: str) -> Transformer[int]:
    """Transformer between base-`radix` digit runs and non-negative integers.

    Args:
        radix: 2, 8 or 16
        name: Name echoed in diagnostics

    Returns:
        Transformer[int]

    Raises:
        ConfigurationError: If radix is not 2, 8 or 16
    """
    try:
        digit_class, spec = _DIGITS_BY_RADIX[radix]
    except KeyError:
        raise ConfigurationError(
            ErrorTemplate.incompatible_transformer(
                f"radix {radix}", "radix must be 2, 8 or 16"
            )
        ) from None
    regex = re.compile(f"{digit_class}+")

    def read(text: str) -> ReadResult[int]:
        match = regex.match(text)
        if match is None:
            error = NoMatchError(
                ErrorTemplate.no_match(text, name), input_value=text, transformer_name=name
            )
            return (None, (error,))
        return ((int(match.group(0), radix), text[match.end():]), ())

    def write(value: int) -> WriteResult:
        if not is_non_negative_int(value):
            error = NotRepresentableError(
                ErrorTemplate.invalid_value(value, "a non-negative integer", name),
                value=value,
                transformer_name=name,
            )
            return (None, (error,))
        return (format(value, spec), ())

    return Transformer(name=name, read=read, write=write)


BINARY: Transformer[int] = radix_transformer(2, "binary")
OCTAL: Transformer[int] = radix_transformer(8, "octal")
HEXADECIMAL: Transformer[int] = radix_transformer(16, "hexadecimal")
