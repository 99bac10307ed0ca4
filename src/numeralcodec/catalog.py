"""Catalog of named transformers.

Presets cover four separator conventions:

    standard  no thousand separator, '.' fractional separator
    UK        ',' thousand separator, '.' fractional separator
    German    '.' thousand separator, ',' fractional separator
    French    ' ' thousand separator, ',' fractional separator

and, for each convention, floating-point numbers (at most 4 fractional
digits, or exactly 2 for the `_2` variants), scientific notation,
fraction-only numbers, signed integers and unsigned integers. The radix
2/8/16 codecs and the plain string transformer complete the catalog.

Every preset is a module-level constant and is also registered, under its
snake_case name, in the read-only CATALOG mapping:

    >>> get_transformer("uk_int") is UK_INT
    True

Python 3.13+.
"""

from functools import lru_cache
from types import MappingProxyType

from numeralcodec.bases import BINARY, HEXADECIMAL, OCTAL
from numeralcodec.constants import CATALOG_MAX_FRACTIONAL_DIGITS, TRANSFORMER_CACHE_SIZE
from numeralcodec.diagnostics import ConfigurationError, ErrorTemplate
from numeralcodec.options import NumberFormatOptions
from numeralcodec.strings import STRING
from numeralcodec.transformer import (
    Transformer,
    int_transformer,
    non_negative_int_transformer,
    real_transformer,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Floating point
    "STANDARD_FLOATING_POINT",
    "UK_FLOATING_POINT",
    "GERMAN_FLOATING_POINT",
    "FRENCH_FLOATING_POINT",
    "STANDARD_FLOATING_POINT_2",
    "UK_FLOATING_POINT_2",
    "GERMAN_FLOATING_POINT_2",
    "FRENCH_FLOATING_POINT_2",
    # Scientific notation
    "SCIENTIFIC_NOTATION",
    "UK_SCIENTIFIC_NOTATION",
    "GERMAN_SCIENTIFIC_NOTATION",
    "FRENCH_SCIENTIFIC_NOTATION",
    # Fraction only
    "FRACTIONAL",
    "UK_FRACTIONAL",
    "GERMAN_FRACTIONAL",
    "FRENCH_FRACTIONAL",
    # Integers
    "STANDARD_INT",
    "SIGNED_INT",
    "PLUSSED_INT",
    "UK_INT",
    "SIGNED_UK_INT",
    "PLUSSED_UK_INT",
    "GERMAN_INT",
    "SIGNED_GERMAN_INT",
    "PLUSSED_GERMAN_INT",
    "FRENCH_INT",
    "SIGNED_FRENCH_INT",
    "PLUSSED_FRENCH_INT",
    # Unsigned integers
    "UNSIGNED_INT",
    "UNSIGNED_UK_INT",
    "UNSIGNED_GERMAN_INT",
    "UNSIGNED_FRENCH_INT",
    # Other
    "BINARY",
    "OCTAL",
    "HEXADECIMAL",
    "STRING",
    # Registry
    "CATALOG",
    "get_transformer",
    "number_transformer",
]

_STANDARD = NumberFormatOptions(max_fractional_digits=CATALOG_MAX_FRACTIONAL_DIGITS)
_UK = _STANDARD.with_separators(",", ".")
_GERMAN = _STANDARD.with_separators(".", ",")
_FRENCH = _STANDARD.with_separators(" ", ",")

# ============================================================================
# FLOATING POINT
# ============================================================================

STANDARD_FLOATING_POINT = real_transformer(_STANDARD, "standard_floating_point")
UK_FLOATING_POINT = real_transformer(_UK, "uk_floating_point")
GERMAN_FLOATING_POINT = real_transformer(_GERMAN, "german_floating_point")
FRENCH_FLOATING_POINT = real_transformer(_FRENCH, "french_floating_point")

STANDARD_FLOATING_POINT_2 = real_transformer(
    _STANDARD.with_fractional_digits(2), "standard_floating_point_2"
)
UK_FLOATING_POINT_2 = real_transformer(_UK.with_fractional_digits(2), "uk_floating_point_2")
GERMAN_FLOATING_POINT_2 = real_transformer(
    _GERMAN.with_fractional_digits(2), "german_floating_point_2"
)
FRENCH_FLOATING_POINT_2 = real_transformer(
    _FRENCH.with_fractional_digits(2), "french_floating_point_2"
)

# ============================================================================
# SCIENTIFIC NOTATION
# ============================================================================

SCIENTIFIC_NOTATION = real_transformer(_STANDARD.with_scientific(), "scientific_notation")
UK_SCIENTIFIC_NOTATION = real_transformer(_UK.with_scientific(), "uk_scientific_notation")
GERMAN_SCIENTIFIC_NOTATION = real_transformer(
    _GERMAN.with_scientific(), "german_scientific_notation"
)
FRENCH_SCIENTIFIC_NOTATION = real_transformer(
    _FRENCH.with_scientific(), "french_scientific_notation"
)

# ============================================================================
# FRACTION ONLY
# ============================================================================

FRACTIONAL = real_transformer(_STANDARD.with_no_integer_part(), "fractional")
UK_FRACTIONAL = real_transformer(_UK.with_no_integer_part(), "uk_fractional")
GERMAN_FRACTIONAL = real_transformer(_GERMAN.with_no_integer_part(), "german_fractional")
FRENCH_FRACTIONAL = real_transformer(_FRENCH.with_no_integer_part(), "french_fractional")

# ============================================================================
# INTEGERS
# ============================================================================

_STANDARD_INT = _STANDARD.with_no_fractional_part()
_UK_INT = _UK.with_no_fractional_part()
_GERMAN_INT = _GERMAN.with_no_fractional_part()
_FRENCH_INT = _FRENCH.with_no_fractional_part()

STANDARD_INT = int_transformer(_STANDARD_INT, "standard_int")
SIGNED_INT = int_transformer(_STANDARD_INT.with_mandatory_sign(), "signed_int")
PLUSSED_INT = int_transformer(_STANDARD_INT.with_optional_sign(), "plussed_int")

UK_INT = int_transformer(_UK_INT, "uk_int")
SIGNED_UK_INT = int_transformer(_UK_INT.with_mandatory_sign(), "signed_uk_int")
PLUSSED_UK_INT = int_transformer(_UK_INT.with_optional_sign(), "plussed_uk_int")

GERMAN_INT = int_transformer(_GERMAN_INT, "german_int")
SIGNED_GERMAN_INT = int_transformer(_GERMAN_INT.with_mandatory_sign(), "signed_german_int")
PLUSSED_GERMAN_INT = int_transformer(_GERMAN_INT.with_optional_sign(), "plussed_german_int")

FRENCH_INT = int_transformer(_FRENCH_INT, "french_int")
SIGNED_FRENCH_INT = int_transformer(_FRENCH_INT.with_mandatory_sign(), "signed_french_int")
PLUSSED_FRENCH_INT = int_transformer(_FRENCH_INT.with_optional_sign(), "plussed_french_int")

UNSIGNED_INT = non_negative_int_transformer(_STANDARD_INT.with_no_sign(), "unsigned_int")
UNSIGNED_UK_INT = non_negative_int_transformer(_UK_INT.with_no_sign(), "unsigned_uk_int")
UNSIGNED_GERMAN_INT = non_negative_int_transformer(
    _GERMAN_INT.with_no_sign(), "unsigned_german_int"
)
UNSIGNED_FRENCH_INT = non_negative_int_transformer(
    _FRENCH_INT.with_no_sign(), "unsigned_french_int"
)

# ============================================================================
# REGISTRY
# ============================================================================

CATALOG: MappingProxyType[str, Transformer] = MappingProxyType(
    {
        name.lower(): transformer
        for name, transformer in list(globals().items())
        if name.isupper() and isinstance(transformer, Transformer)
    }
)


def get_transformer(name: str) -> Transformer:
    """Look up a catalog transformer by its snake_case name.

    Args:
        name: Registered name, e.g. "uk_floating_point_2" or "hexadecimal"

    Returns:
        The registered Transformer

    Raises:
        ConfigurationError: If no transformer has that name
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise ConfigurationError(ErrorTemplate.unknown_transformer(name)) from None


@lru_cache(maxsize=TRANSFORMER_CACHE_SIZE)
def number_transformer(options: NumberFormatOptions) -> Transformer[float]:
    """Float transformer for ad hoc options, memoized per options value."""
    return real_transformer(options)
