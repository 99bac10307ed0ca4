"""Codec exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
ConfigurationError is raised. NoMatchError and NotRepresentableError are
returned inside the errors tuple of read()/write() and never raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "CodecError",
    "ConfigurationError",
    "NoMatchError",
    "NotRepresentableError",
]


class CodecError(Exception):
    """Base exception for all codec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category
    """

    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CodecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(CodecError, ValueError):
    """Self-contradictory or invalid options.

    Raised by NumberFormatOptions construction, with_defaults(), transformer
    constructors and options_for_locale(). Also a ValueError so callers
    validating user input can catch it generically.
    """

    category = ErrorCategory.CONFIGURATION


class NoMatchError(CodecError):
    """Input does not start with a numeral valid for the transformer.

    Attributes:
        input_value: The string that failed to read
        transformer_name: Name of the transformer that was reading

    Example:
        >>> result, errors = UK_INT.read("foo")
        >>> result is None
        True
        >>> errors[0].input_value
        'foo'
    """

    category = ErrorCategory.READ

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        transformer_name: str = "",
    ) -> None:
        """Initialize NoMatchError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to read
            transformer_name: Name of the transformer that was reading
        """
        super().__init__(message)
        self.input_value = input_value
        self.transformer_name = transformer_name


class NotRepresentableError(CodecError):
    """Value cannot be rendered under the transformer's options.

    Attributes:
        value: The value that failed to write
        transformer_name: Name of the transformer that was writing
    """

    category = ErrorCategory.WRITE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        value: object = None,
        transformer_name: str = "",
    ) -> None:
        """Initialize NotRepresentableError.

        Args:
            message: Error message string OR Diagnostic object
            value: The value that failed to write
            transformer_name: Name of the transformer that was writing
        """
        super().__init__(message)
        self.value = value
        self.transformer_name = transformer_name
