"""Type guard functions for the numeric value domains.

Writers validate their input with these guards before formatting, and
callers can use them to narrow read results for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept arbitrary objects and return False for bool, since
bool is an int subclass but never a numeral value.

Example:
    >>> from numeralcodec.catalog import UK_INT
    >>> result, errors = UK_INT.read("1,048 items")
    >>> if result is not None and is_int(result[0]):
    ...     total = result[0] * 2
"""

import math
from decimal import Decimal
from typing import TypeIs

__all__ = [
    "is_finite_decimal",
    "is_int",
    "is_non_negative_int",
    "is_real",
]


def is_real(value: object) -> TypeIs[float | int]:
    """Type guard: Check if value is a finite float, or an int a float holds exactly.

    Ints above 2**53 that a float cannot hold, and ints beyond the float
    range, are rejected: a float reader could not give them back.

    Args:
        value: Any object

    Returns:
        True if value is a float-representable real number, False otherwise
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        try:
            return float(value) == value
        except OverflowError:
            return False
    return isinstance(value, float) and math.isfinite(value)


def is_finite_decimal(value: object) -> TypeIs[Decimal]:
    """Type guard: Check if value is a Decimal that is not NaN or Infinity."""
    return isinstance(value, Decimal) and value.is_finite()


def is_int(value: object) -> TypeIs[int]:
    """Type guard: Check if value is an int (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_non_negative_int(value: object) -> TypeIs[int]:
    """Type guard: Check if value is an int >= 0 (bool excluded)."""
    return is_int(value) and value >= 0
