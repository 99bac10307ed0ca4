"""Locale-derived number format options.

Reads the CLDR decimal and group symbols of a locale through Babel and turns
them into NumberFormatOptions, so numerals can be read and written the way a
locale prints them:

    >>> options = options_for_locale("de-DE", max_fractional_digits=2)
    >>> options.thousand_separator, options.fractional_separator
    ('.', ',')

Only the separator axis comes from CLDR; sign, e-notation and digit bounds
keep the with_defaults() values unless overridden.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from numeralcodec.diagnostics import ConfigurationError, ErrorTemplate
from numeralcodec.options import NumberFormatOptions, with_defaults

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "options_for_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("fr-FR")
        'fr_FR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        ConfigurationError: If the locale is unknown or malformed
    """
    normalized = normalize_locale(locale_code)
    try:
        return Locale.parse(normalized)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(ErrorTemplate.unknown_locale(locale_code, str(e))) from e


def _single_character(locale_code: str, role: str, symbol: str) -> str:
    if len(symbol) != 1:
        raise ConfigurationError(
            ErrorTemplate.unsupported_locale_symbol(locale_code, role, symbol)
        )
    return symbol


def options_for_locale(locale_code: str, **overrides: Any) -> NumberFormatOptions:
    """Build options whose separators are the CLDR symbols of a locale.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)
        **overrides: Any NumberFormatOptions fields; an explicit
            thousand_separator or fractional_separator replaces the CLDR one

    Returns:
        Validated NumberFormatOptions

    Raises:
        ConfigurationError: If the locale is unknown, one of its symbols is
            not a single character, or the resulting options are invalid
    """
    locale = get_babel_locale(locale_code)
    values: dict[str, Any] = {}
    if "fractional_separator" not in overrides:
        values["fractional_separator"] = _single_character(
            locale_code, "decimal", babel_numbers.get_decimal_symbol(locale)
        )
    if "thousand_separator" not in overrides:
        values["thousand_separator"] = _single_character(
            locale_code, "group", babel_numbers.get_group_symbol(locale)
        )
    values.update(overrides)

    logger.debug(
        "Locale %s resolved to separators thousand=%r fractional=%r",
        locale,
        values.get("thousand_separator"),
        values.get("fractional_separator"),
    )
    return with_defaults(**values)
