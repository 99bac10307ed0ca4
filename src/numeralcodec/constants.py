"""Shared constants for numeralcodec.

Constants are grouped by domain:
- Grammar: digit grouping and numeral alphabet
- Cache limits: Memory bounds for pattern and transformer memoization
- Catalog: Defaults shared by the named presets

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "DIGIT_GROUP_SIZE",
    "MINUS_SIGN",
    "PLUS_SIGN",
    # Cache limits
    "PATTERN_CACHE_SIZE",
    "TRANSFORMER_CACHE_SIZE",
    # Catalog
    "CATALOG_MAX_FRACTIONAL_DIGITS",
    "MIN_DECIMAL_PRECISION",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Digits between two thousand separators. The leading group holds 1 to
# DIGIT_GROUP_SIZE digits, every following group exactly DIGIT_GROUP_SIZE.
DIGIT_GROUP_SIZE: int = 3

MINUS_SIGN: str = "-"
PLUS_SIGN: str = "+"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled numeral patterns, keyed by NumberFormatOptions.
# The catalog alone uses about 30 distinct option sets.
PATTERN_CACHE_SIZE: int = 128

# Ad hoc float transformers returned by catalog.number_transformer().
TRANSFORMER_CACHE_SIZE: int = 64

# ============================================================================
# CATALOG
# ============================================================================

# Maximum fractional digits written by the floating-point presets.
CATALOG_MAX_FRACTIONAL_DIGITS: int = 4

# Floor for the decimal context precision used while rounding. The writer
# raises it when a value needs more significant digits.
MIN_DECIMAL_PRECISION: int = 28
