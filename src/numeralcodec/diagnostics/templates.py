"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Inputs longer than this are shortened when echoed in a message
_EXCERPT_LENGTH: int = 40


def _excerpt(text: str) -> str:
    """Shorten text for inclusion in a message."""
    if len(text) > _EXCERPT_LENGTH:
        return text[:_EXCERPT_LENGTH] + "..."
    return text


def _bound(value: int | None) -> str:
    return "unbounded" if value is None else str(value)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistent, and documented in one place.
    """

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_separator(role: str, separator: str) -> Diagnostic:
        """Separator is not a single non-digit, non-sign character.

        Args:
            role: Which separator ("thousand" or "fractional")
            separator: The rejected separator

        Returns:
            Diagnostic for INVALID_SEPARATOR
        """
        msg = f"Invalid {role} separator {separator!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SEPARATOR,
            message=msg,
            hint="Separators must be exactly one character that is neither a digit nor a sign",
        )

    @staticmethod
    def separator_conflict(first: str, second: str, reason: str) -> Diagnostic:
        """Two tokens of the grammar share the same character.

        Args:
            first: First conflicting token
            second: Second conflicting token
            reason: What the two tokens are

        Returns:
            Diagnostic for SEPARATOR_CONFLICT
        """
        msg = f"Ambiguous options: {first!r} and {second!r} are both used ({reason})"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_CONFLICT,
            message=msg,
            hint="Use distinct characters so every numeral has a single reading",
        )

    @staticmethod
    def invalid_digit_bounds(part: str, low: int, high: int | None) -> Diagnostic:
        """Digit bounds are negative or inverted.

        Args:
            part: "integer" or "fractional"
            low: Configured minimum
            high: Configured maximum (None for unbounded)

        Returns:
            Diagnostic for INVALID_DIGIT_BOUNDS
        """
        msg = f"Invalid {part} digit bounds [{low}, {_bound(high)}]"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGIT_BOUNDS,
            message=msg,
            hint="Bounds must be non-negative integers with minimum <= maximum",
        )

    @staticmethod
    def contradictory_options(reason: str) -> Diagnostic:
        """Options that no numeral could ever satisfy.

        Args:
            reason: Description of the contradiction

        Returns:
            Diagnostic for CONTRADICTORY_OPTIONS
        """
        msg = f"Contradictory options: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONTRADICTORY_OPTIONS,
            message=msg,
            hint="Relax one of the conflicting options",
        )

    @staticmethod
    def unknown_option(names: list[str]) -> Diagnostic:
        """Unknown option names passed to with_defaults().

        Args:
            names: The unrecognized option names

        Returns:
            Diagnostic for UNKNOWN_OPTION
        """
        msg = f"Unknown option(s): {', '.join(sorted(names))}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPTION,
            message=msg,
            hint="See NumberFormatOptions for the recognized option names",
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale not recognized by Babel.

        Args:
            locale_code: The locale identifier
            reason: Babel's error message

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Unknown locale '{_excerpt(locale_code)}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Use a BCP 47 or POSIX locale identifier known to CLDR (e.g. 'de-DE')",
        )

    @staticmethod
    def unsupported_locale_symbol(locale_code: str, role: str, symbol: str) -> Diagnostic:
        """CLDR symbol that cannot serve as a single-character separator.

        Args:
            locale_code: The locale identifier
            role: Which symbol ("decimal" or "group")
            symbol: The CLDR symbol

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE_SYMBOL
        """
        msg = f"Locale '{locale_code}' uses {role} symbol {symbol!r}, which is not a single character"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE_SYMBOL,
            message=msg,
            hint="Pass the separator explicitly as an override",
        )

    @staticmethod
    def incompatible_transformer(kind: str, reason: str) -> Diagnostic:
        """Options unusable for the requested value domain.

        Args:
            kind: The transformer kind requested ("int", "non-negative int")
            reason: Why the options do not fit

        Returns:
            Diagnostic for INCOMPATIBLE_TRANSFORMER
        """
        msg = f"Options cannot build a {kind} transformer: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPATIBLE_TRANSFORMER,
            message=msg,
            hint="Derive the options with with_no_fractional_part() / with_no_sign()",
        )

    @staticmethod
    def unknown_transformer(name: str) -> Diagnostic:
        """Catalog lookup for a name that is not registered.

        Args:
            name: The requested name

        Returns:
            Diagnostic for UNKNOWN_TRANSFORMER
        """
        msg = f"No transformer named '{_excerpt(name)}' in the catalog"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TRANSFORMER,
            message=msg,
            hint="See numeralcodec.catalog.CATALOG for the registered names",
        )

    @staticmethod
    def invalid_string_layout(reason: str) -> Diagnostic:
        """Invalid parameters for a string transformer.

        Args:
            reason: What is wrong

        Returns:
            Diagnostic for INVALID_STRING_LAYOUT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_STRING_LAYOUT,
            message=f"Invalid string transformer: {reason}",
        )

    # ------------------------------------------------------------------
    # Read errors
    # ------------------------------------------------------------------

    @staticmethod
    def no_match(input_value: str, transformer_name: str) -> Diagnostic:
        """Input does not start with a valid numeral.

        Args:
            input_value: The input string
            transformer_name: Reading transformer

        Returns:
            Diagnostic for NO_MATCH
        """
        msg = f"Could not read {transformer_name} from the start of '{_excerpt(input_value)}'"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=msg,
            hint="Check the sign, separators and digit counts of the input",
            transformer_name=transformer_name,
        )

    @staticmethod
    def input_too_short(input_value: str, length: int, transformer_name: str) -> Diagnostic:
        """Fewer characters left than a fixed-length read needs.

        Args:
            input_value: The input string
            length: Characters required
            transformer_name: Reading transformer

        Returns:
            Diagnostic for INPUT_TOO_SHORT
        """
        msg = f"'{_excerpt(input_value)}' does not have {length} characters to read"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_SHORT,
            message=msg,
            transformer_name=transformer_name,
        )

    @staticmethod
    def unexpected_rest(rest: str, transformer_name: str) -> Diagnostic:
        """Inner transformer of a composition left characters unread.

        Args:
            rest: The unread characters
            transformer_name: Composed transformer

        Returns:
            Diagnostic for UNEXPECTED_REST
        """
        msg = f"Found unexpected characters '{_excerpt(rest)}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_REST,
            message=msg,
            transformer_name=transformer_name,
        )

    # ------------------------------------------------------------------
    # Write errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_value(value: object, expected: str, transformer_name: str) -> Diagnostic:
        """Value outside the transformer's domain.

        Args:
            value: The rejected value
            expected: Description of the accepted domain
            transformer_name: Writing transformer

        Returns:
            Diagnostic for INVALID_VALUE
        """
        msg = f"Expected {expected}, got {type(value).__name__} {_excerpt(repr(value))}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            transformer_name=transformer_name,
        )

    @staticmethod
    def non_finite_value(value: object, transformer_name: str) -> Diagnostic:
        """NaN or infinity.

        Args:
            value: The rejected value
            transformer_name: Writing transformer

        Returns:
            Diagnostic for NON_FINITE_VALUE
        """
        msg = f"Non-finite value {value!r} has no numeral"
        return Diagnostic(
            code=DiagnosticCode.NON_FINITE_VALUE,
            message=msg,
            transformer_name=transformer_name,
        )

    @staticmethod
    def sign_forbidden(value: object, transformer_name: str) -> Diagnostic:
        """Negative value under SignPolicy.FORBIDDEN.

        Args:
            value: The rejected value
            transformer_name: Writing transformer

        Returns:
            Diagnostic for SIGN_FORBIDDEN
        """
        msg = f"Negative value {value!r} cannot be written without a sign"
        return Diagnostic(
            code=DiagnosticCode.SIGN_FORBIDDEN,
            message=msg,
            hint="Use a transformer whose sign policy accepts '-'",
            transformer_name=transformer_name,
        )

    @staticmethod
    def integer_digits_out_of_range(
        value: object,
        digits: int,
        low: int,
        high: int | None,
        transformer_name: str,
    ) -> Diagnostic:
        """Rounded integer part has too many or too few digits.

        Args:
            value: The rejected value
            digits: Integer digits the value would need
            low: Configured minimum
            high: Configured maximum (None for unbounded)
            transformer_name: Writing transformer

        Returns:
            Diagnostic for INTEGER_DIGITS_OUT_OF_RANGE
        """
        msg = (
            f"Value {value!r} needs {digits} integer digit(s), "
            f"allowed range is [{low}, {_bound(high)}]"
        )
        return Diagnostic(
            code=DiagnosticCode.INTEGER_DIGITS_OUT_OF_RANGE,
            message=msg,
            hint="Enable e-notation to let the writer shift the value into range",
            transformer_name=transformer_name,
        )

    @staticmethod
    def zero_excluded(value: object, transformer_name: str) -> Diagnostic:
        """Zero under a format whose integer part must be non-zero.

        Args:
            value: The rejected value
            transformer_name: Writing transformer

        Returns:
            Diagnostic for ZERO_EXCLUDED
        """
        msg = f"Value {value!r} has a zero integer part, which this format excludes"
        return Diagnostic(
            code=DiagnosticCode.ZERO_EXCLUDED,
            message=msg,
            hint="Scientific notation mantissas lie in [1, 10); zero has no such mantissa",
            transformer_name=transformer_name,
        )

    @staticmethod
    def value_too_long(value: str, length: int, transformer_name: str) -> Diagnostic:
        """String does not fit a fixed-length field.

        Args:
            value: The rejected string
            length: Field length
            transformer_name: Writing transformer

        Returns:
            Diagnostic for VALUE_TOO_LONG
        """
        msg = f"'{_excerpt(value)}' is not {length} characters long"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TOO_LONG,
            message=msg,
            transformer_name=transformer_name,
        )

    @staticmethod
    def value_not_mapped(value: object, transformer_name: str) -> Diagnostic:
        """Value absent from a mapped transformer's table.

        Args:
            value: The rejected value
            transformer_name: Writing transformer

        Returns:
            Diagnostic for VALUE_NOT_MAPPED
        """
        msg = f"Value {_excerpt(repr(value))} has no keyword in {transformer_name}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_MAPPED,
            message=msg,
            transformer_name=transformer_name,
        )
