"""Enumerations for numeralcodec policy options.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SignPolicy(StrEnum):
    """How a sign token may or must prefix a numeral.

    StrEnum provides automatic string conversion: str(SignPolicy.MANDATORY) == "mandatory"
    """

    FORBIDDEN = "forbidden"
    """No sign accepted. Negative values cannot be written."""

    MINUS_OPTIONAL = "minusOptional"
    """A leading '-' may be present. Non-negative values are written unsigned."""

    MANDATORY = "mandatory"
    """A leading '+' or '-' is required. Zero is written as '+0'."""

    PLUS_MINUS_OPTIONAL = "plusMinusOptional"
    """A leading '+' or '-' may be present. '+' is accepted but never written."""


class ENotationPolicy(StrEnum):
    """Whether a scientific exponent suffix is permitted and its letter case.

    StrEnum provides automatic string conversion: str(ENotationPolicy.LOWERCASE) == "lowercase"
    """

    FORBIDDEN = "forbidden"
    """No exponent suffix."""

    LOWERCASE = "lowercase"
    """Exponent introduced by 'e': 1.5e3"""

    UPPERCASE = "uppercase"
    """Exponent introduced by 'E': 1.5E3"""

    @property
    def letter(self) -> str:
        """Exponent letter, or the empty string when e-notation is forbidden."""
        match self:
            case ENotationPolicy.FORBIDDEN:
                return ""
            case ENotationPolicy.LOWERCASE:
                return "e"
            case ENotationPolicy.UPPERCASE:
                return "E"


__all__ = [
    "ENotationPolicy",
    "SignPolicy",
]
