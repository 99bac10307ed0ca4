"""numeralcodec - Locale-configurable numeral reading and writing.

Reads numbers from the start of arbitrary strings and writes them back, under
a configuration of sign policy, thousand and fractional separators, digit
bounds and e-notation. Everything a writer produces is read back identically
by the reader built from the same options.

Public API:
    NumberFormatOptions - Frozen, validated format configuration
    with_defaults - Build options from a partial configuration
    options_for_locale - Options whose separators come from CLDR (Babel)
    Transformer - Named read/write inverse pair
    real_transformer / decimal_transformer / int_transformer /
    non_negative_int_transformer - Transformer constructors
    get_transformer - Catalog lookup by name

Exceptions:
    CodecError - Base exception class
    ConfigurationError - Invalid options (raised)
    NoMatchError - Input does not start with a numeral (returned by read)
    NotRepresentableError - Value has no numeral (returned by write)

Submodules:
    numeralcodec.catalog - Named presets (UK_INT, FRENCH_SCIENTIFIC_NOTATION, ...)
    numeralcodec.bases - Radix 2/8/16 codecs
    numeralcodec.strings - String transformers and composition
    numeralcodec.grammar - Numeral pattern builder
    numeralcodec.diagnostics - Diagnostic codes, templates and formatter
"""

from .catalog import CATALOG, get_transformer, number_transformer
from .diagnostics import (
    CodecError,
    ConfigurationError,
    NoMatchError,
    NotRepresentableError,
)
from .enums import ENotationPolicy, SignPolicy
from .locales import options_for_locale
from .options import NumberFormatOptions, with_defaults
from .transformer import (
    Transformer,
    decimal_transformer,
    int_transformer,
    non_negative_int_transformer,
    real_transformer,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numeralcodec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CATALOG",
    "CodecError",
    "ConfigurationError",
    "ENotationPolicy",
    "NoMatchError",
    "NotRepresentableError",
    "NumberFormatOptions",
    "SignPolicy",
    "Transformer",
    "__version__",
    "decimal_transformer",
    "get_transformer",
    "int_transformer",
    "non_negative_int_transformer",
    "number_transformer",
    "options_for_locale",
    "real_transformer",
    "with_defaults",
]
