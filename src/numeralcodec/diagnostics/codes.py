"""Diagnostic codes and data structures.

Defines error categories, error codes, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for CodecError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        CONFIGURATION: Self-contradictory options (raised at construction)
        READ: No valid numeral at the start of the input (returned)
        WRITE: Value cannot be rendered under the options (returned)
    """

    CONFIGURATION = "configuration"
    READ = "read"
    WRITE = "write"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (invalid or contradictory options)
        2000-2999: Read errors (input does not start with a valid numeral)
        3000-3999: Write errors (value not representable)
    """

    # Configuration errors (1000-1999)
    INVALID_SEPARATOR = 1001
    SEPARATOR_CONFLICT = 1002
    INVALID_DIGIT_BOUNDS = 1003
    CONTRADICTORY_OPTIONS = 1004
    UNKNOWN_OPTION = 1005
    UNKNOWN_LOCALE = 1006
    UNSUPPORTED_LOCALE_SYMBOL = 1007
    INCOMPATIBLE_TRANSFORMER = 1008
    UNKNOWN_TRANSFORMER = 1009
    INVALID_STRING_LAYOUT = 1010

    # Read errors (2000-2999)
    NO_MATCH = 2001
    INPUT_TOO_SHORT = 2002
    UNEXPECTED_REST = 2003

    # Write errors (3000-3999)
    INVALID_VALUE = 3001
    NON_FINITE_VALUE = 3002
    SIGN_FORBIDDEN = 3003
    INTEGER_DIGITS_OUT_OF_RANGE = 3004
    ZERO_EXCLUDED = 3005
    VALUE_TOO_LONG = 3006
    VALUE_NOT_MAPPED = 3007


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        transformer_name: Transformer that produced the diagnostic, if any
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    transformer_name: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[NO_MATCH]: Could not read uk_int from the start of 'foo'
              = transformer: uk_int
              = help: Check the sign, separators and digit counts of the input

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
