"""Number format options for the base-10 numeral codec.

Provides a single frozen dataclass that aggregates every axis of the
configuration space: sign policy, e-notation policy, separators, and
integer/fractional digit bounds. Instances are validated at construction
time, hashable, and therefore usable as memoization keys by the grammar
builder.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from numeralcodec.constants import MINUS_SIGN, PLUS_SIGN
from numeralcodec.diagnostics import ConfigurationError, ErrorTemplate
from numeralcodec.enums import ENotationPolicy, SignPolicy

__all__ = ["NumberFormatOptions", "with_defaults"]


def _check_separator(role: str, separator: object) -> None:
    if (
        not isinstance(separator, str)
        or len(separator) != 1
        or separator.isdigit()
        or separator in (PLUS_SIGN, MINUS_SIGN)
    ):
        raise ConfigurationError(ErrorTemplate.invalid_separator(role, str(separator)))


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _check_bounds(part: str, low: int, high: int | None) -> None:
    if not _is_count(low) or not (high is None or (_is_count(high) and high >= low)):
        raise ConfigurationError(ErrorTemplate.invalid_digit_bounds(part, low, high))


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Immutable configuration of a base-10 numeral format.

    All fields have defaults; ``NumberFormatOptions()`` describes an ungrouped
    real number with an optional minus sign, '.' as fractional separator and
    no bound on the fractional digits. Use ``with_defaults()`` to build an
    instance from a partial mapping (string policy names accepted).

    Attributes:
        sign_policy: Whether and how a sign may or must prefix the numeral.
        e_notation_policy: Whether an exponent suffix is permitted, and its letter.
        thousand_separator: Digit-grouping character, or None for no grouping.
        fractional_separator: Character between integer and fractional digits.
        min_fractional_digits: Fewest fractional digits read; the writer
            right-pads with zeros up to this count.
        max_fractional_digits: Most fractional digits read; the writer rounds
            to this precision. None means unbounded.
        min_integer_digits: Fewest digits of a non-zero integer part. A lone
            '0' integer part is always accepted (unless nonzero_integer_part).
            0 makes the integer part optional before a fractional part ('.5').
        max_integer_digits: Most integer digits. None means unbounded. 0
            restricts the integer part to an optional lone '0'.
        nonzero_integer_part: Reject a lone '0' integer part. Scientific
            formats set this with integer digits [1, 1] so the mantissa lies
            in [1, 10).

    Example:
        >>> options = NumberFormatOptions(thousand_separator=",", max_fractional_digits=2)
        >>> options.min_integer_digits
        1
        >>> options.with_mandatory_sign().sign_policy
        <SignPolicy.MANDATORY: 'mandatory'>

    Raises:
        ConfigurationError: On construction with self-contradictory options.
    """

    sign_policy: SignPolicy = SignPolicy.MINUS_OPTIONAL
    e_notation_policy: ENotationPolicy = ENotationPolicy.FORBIDDEN
    thousand_separator: str | None = None
    fractional_separator: str = "."
    min_fractional_digits: int = 0
    max_fractional_digits: int | None = None
    min_integer_digits: int = 1
    max_integer_digits: int | None = None
    nonzero_integer_part: bool = False

    def __post_init__(self) -> None:
        """Validate option invariants at construction time.

        Raises:
            ConfigurationError: If a separator is invalid or ambiguous, if
                digit bounds are negative or inverted, or if the options
                admit no numeral at all.
        """
        if not isinstance(self.sign_policy, SignPolicy):
            msg = f"sign_policy must be a SignPolicy, got {self.sign_policy!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.e_notation_policy, ENotationPolicy):
            msg = f"e_notation_policy must be an ENotationPolicy, got {self.e_notation_policy!r}"
            raise ConfigurationError(msg)

        _check_separator("fractional", self.fractional_separator)
        if self.thousand_separator is not None:
            _check_separator("thousand", self.thousand_separator)
            if self.thousand_separator == self.fractional_separator:
                raise ConfigurationError(
                    ErrorTemplate.separator_conflict(
                        self.thousand_separator,
                        self.fractional_separator,
                        "thousand and fractional separators",
                    )
                )

        letter = self.e_notation_policy.letter
        if letter and letter in (self.fractional_separator, self.thousand_separator):
            raise ConfigurationError(
                ErrorTemplate.separator_conflict(letter, letter, "exponent letter and separator")
            )

        _check_bounds("fractional", self.min_fractional_digits, self.max_fractional_digits)
        _check_bounds("integer", self.min_integer_digits, self.max_integer_digits)

        if self.max_integer_digits == 0:
            if self.max_fractional_digits == 0:
                raise ConfigurationError(
                    ErrorTemplate.contradictory_options(
                        "no integer digits and no fractional digits leave only '0'"
                    )
                )
            if self.nonzero_integer_part:
                raise ConfigurationError(
                    ErrorTemplate.contradictory_options(
                        "a non-zero integer part needs max_integer_digits > 0"
                    )
                )

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def allows_e_notation(self) -> bool:
        """True when an exponent suffix may be read and written."""
        return self.e_notation_policy is not ENotationPolicy.FORBIDDEN

    @property
    def allows_fraction(self) -> bool:
        """True when a fractional part may appear."""
        return self.max_fractional_digits != 0

    @property
    def integer_part_optional(self) -> bool:
        """True when a numeral may start directly with the fractional separator."""
        return self.min_integer_digits == 0 or self.max_integer_digits == 0

    @property
    def min_nonzero_integer_digits(self) -> int:
        """Fewest digits of a non-zero integer part (at least one)."""
        return max(self.min_integer_digits, 1)

    def describe(self) -> str:
        """Stable human-readable id, used to name transformers.

        Example:
            >>> NumberFormatOptions(thousand_separator=",", max_fractional_digits=2).describe()
            "minusOptional|','|'.'|int[1,*]|frac[0,2]|e:forbidden"
        """
        max_int = "*" if self.max_integer_digits is None else self.max_integer_digits
        max_frac = "*" if self.max_fractional_digits is None else self.max_fractional_digits
        thousand = "none" if self.thousand_separator is None else repr(self.thousand_separator)
        nonzero = "|nonzero" if self.nonzero_integer_part else ""
        return (
            f"{self.sign_policy}|{thousand}|{self.fractional_separator!r}"
            f"|int[{self.min_integer_digits},{max_int}]"
            f"|frac[{self.min_fractional_digits},{max_frac}]"
            f"|e:{self.e_notation_policy}{nonzero}"
        )

    # ------------------------------------------------------------------
    # Derivation helpers (each returns a validated copy)
    # ------------------------------------------------------------------

    def with_no_sign(self) -> NumberFormatOptions:
        """Copy accepting no sign; negative values cannot be written."""
        return replace(self, sign_policy=SignPolicy.FORBIDDEN)

    def with_mandatory_sign(self) -> NumberFormatOptions:
        """Copy requiring '+' or '-'."""
        return replace(self, sign_policy=SignPolicy.MANDATORY)

    def with_optional_sign(self) -> NumberFormatOptions:
        """Copy accepting an optional '+' or '-'."""
        return replace(self, sign_policy=SignPolicy.PLUS_MINUS_OPTIONAL)

    def with_minus_sign_allowed(self) -> NumberFormatOptions:
        """Copy accepting an optional '-'."""
        return replace(self, sign_policy=SignPolicy.MINUS_OPTIONAL)

    def with_no_fractional_part(self) -> NumberFormatOptions:
        """Copy for integers: fractional digits [0, 0]."""
        return replace(self, min_fractional_digits=0, max_fractional_digits=0)

    def with_fractional_digits(self, digits: int) -> NumberFormatOptions:
        """Copy with exactly `digits` fractional digits."""
        return replace(self, min_fractional_digits=digits, max_fractional_digits=digits)

    def with_no_integer_part(self) -> NumberFormatOptions:
        """Copy for fraction-only numerals: integer part is an optional lone '0'."""
        return replace(
            self, min_integer_digits=0, max_integer_digits=0, nonzero_integer_part=False
        )

    def with_no_thousand_separator(self) -> NumberFormatOptions:
        """Copy without digit grouping."""
        return replace(self, thousand_separator=None)

    def with_separators(
        self, thousand_separator: str | None, fractional_separator: str
    ) -> NumberFormatOptions:
        """Copy with both separators replaced."""
        return replace(
            self,
            thousand_separator=thousand_separator,
            fractional_separator=fractional_separator,
        )

    def with_e_notation(self, policy: ENotationPolicy) -> NumberFormatOptions:
        """Copy with the given e-notation policy."""
        return replace(self, e_notation_policy=policy)

    def with_scientific(self) -> NumberFormatOptions:
        """Copy for scientific notation: one non-zero integer digit and a lowercase exponent."""
        return replace(
            self,
            min_integer_digits=1,
            max_integer_digits=1,
            nonzero_integer_part=True,
            e_notation_policy=ENotationPolicy.LOWERCASE,
        )


_OPTION_NAMES: frozenset[str] = frozenset(f.name for f in fields(NumberFormatOptions))


def with_defaults(**partial: Any) -> NumberFormatOptions:
    """Build validated options from a partial configuration.

    Unset fields take the canonical defaults (optional minus sign, no
    e-notation, no thousand separator, '.' fractional separator, fractional
    digits [0, unbounded], integer digits [1, unbounded]). Policies may be
    given as enum members or by their string values ("forbidden",
    "minusOptional", "mandatory", "plusMinusOptional"; "forbidden",
    "lowercase", "uppercase").

    Args:
        **partial: Any subset of the NumberFormatOptions fields

    Returns:
        Validated NumberFormatOptions

    Raises:
        ConfigurationError: If an option name is unknown, a policy name is
            not recognized, or the combination violates the option invariants.

    Example:
        >>> options = with_defaults(sign_policy="mandatory", thousand_separator=",")
        >>> options.sign_policy is SignPolicy.MANDATORY
        True
    """
    unknown = [name for name in partial if name not in _OPTION_NAMES]
    if unknown:
        raise ConfigurationError(ErrorTemplate.unknown_option(unknown))

    values = dict(partial)
    try:
        if "sign_policy" in values:
            values["sign_policy"] = SignPolicy(values["sign_policy"])
        if "e_notation_policy" in values:
            values["e_notation_policy"] = ENotationPolicy(values["e_notation_policy"])
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    return NumberFormatOptions(**values)
