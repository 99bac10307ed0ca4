"""Plain string transformers and transformer composition.

These complete the numeric transformers for string templating: a template
placeholder reads either the rest of its input, a fixed-width field, or one
keyword of a table, and a fixed-width field can be composed with a numeric
transformer to read a padded number.

    >>> field = compose(fixed_length(6, left_padding=" "), UK_INT)
    >>> field.read(" 1,048 units")
    ((1048, ' units'), ())
    >>> field.write(1048)
    (' 1,048', ())

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable, Mapping

from numeralcodec.diagnostics import (
    ConfigurationError,
    ErrorTemplate,
    NoMatchError,
    NotRepresentableError,
)
from numeralcodec.reader import ReadResult
from numeralcodec.transformer import Transformer
from numeralcodec.writer import WriteResult

__all__ = [
    "STRING",
    "compose",
    "fixed_length",
    "mapped",
    "rest",
]


def _not_a_string(value: object, name: str) -> WriteResult:
    error = NotRepresentableError(
        ErrorTemplate.invalid_value(value, "a string", name), value=value, transformer_name=name
    )
    return (None, (error,))


def rest() -> Transformer[str]:
    """Transformer reading the whole remaining input and writing strings unchanged."""
    name = "string"

    def read(text: str) -> ReadResult[str]:
        return ((text, ""), ())

    def write(value: str) -> WriteResult:
        if not isinstance(value, str):
            return _not_a_string(value, name)
        return (value, ())

    return Transformer(name=name, read=read, write=write)


def _check_padding(side: str, padding: str) -> None:
    if len(padding) > 1:
        raise ConfigurationError(
            ErrorTemplate.invalid_string_layout(
                f"{side} padding must be at most one character, got {padding!r}"
            )
        )


def fixed_length(length: int, left_padding: str = "", right_padding: str = "") -> Transformer[str]:
    """Transformer for a field of exactly `length` characters.

    Reading takes `length` characters, then trims left_padding from the start
    and right_padding from the end. Writing pads on the left when
    left_padding is set, otherwise on the right when right_padding is set;
    without padding the value must already be `length` characters long.

    Args:
        length: Field width (> 0)
        left_padding: Single padding character or ''
        right_padding: Single padding character or ''

    Returns:
        Transformer[str]

    Raises:
        ConfigurationError: If length is not positive or a padding is longer
            than one character
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise ConfigurationError(
            ErrorTemplate.invalid_string_layout(f"length must be a positive integer, got {length!r}")
        )
    _check_padding("left", left_padding)
    _check_padding("right", right_padding)
    name = f"string{length}"

    def read(text: str) -> ReadResult[str]:
        if len(text) < length:
            error = NoMatchError(
                ErrorTemplate.input_too_short(text, length, name),
                input_value=text,
                transformer_name=name,
            )
            return (None, (error,))
        field = text[:length]
        if left_padding:
            field = field.lstrip(left_padding)
        if right_padding:
            field = field.rstrip(right_padding)
        return ((field, text[length:]), ())

    def write(value: str) -> WriteResult:
        if not isinstance(value, str):
            return _not_a_string(value, name)
        if left_padding:
            padded = value.rjust(length, left_padding)
        elif right_padding:
            padded = value.ljust(length, right_padding)
        else:
            padded = value
        if len(padded) != length:
            error = NotRepresentableError(
                ErrorTemplate.value_too_long(value, length, name),
                value=value,
                transformer_name=name,
            )
            return (None, (error,))
        return (padded, ())

    return Transformer(name=name, read=read, write=write)


def mapped[A: Hashable](
    mapping: Mapping[str, A], name: str, strict_case: bool = True
) -> Transformer[A]:
    """Transformer between the keywords of a bijective table and their values.

    Reading tries the keywords in mapping order and stops at the first one
    found at the start of the input, so list a keyword before any keyword it
    is a prefix of. Writing returns the keyword of a value (lowercased when
    strict_case is False).

    Args:
        mapping: keyword -> value, one keyword per value
        name: Name echoed in diagnostics
        strict_case: Compare keywords case-sensitively

    Returns:
        Transformer[A]

    Raises:
        ConfigurationError: If the table is empty or not a bijection

    Example:
        >>> meridiem = mapped({"am": 0, "Pm": 12}, "am/pm", strict_case=False)
        >>> meridiem.read("PMfoo")
        ((12, 'foo'), ())
        >>> meridiem.write(12)
        ('pm', ())
    """
    entries = [
        (keyword if strict_case else keyword.lower(), value) for keyword, value in mapping.items()
    ]
    keywords = {keyword for keyword, _ in entries}
    if not entries or "" in keywords:
        raise ConfigurationError(
            ErrorTemplate.invalid_string_layout(f"{name} needs non-empty keywords")
        )
    by_value = {value: keyword for keyword, value in entries}
    if len(keywords) != len(entries) or len(by_value) != len(entries):
        raise ConfigurationError(
            ErrorTemplate.invalid_string_layout(f"{name} keywords and values must be one-to-one")
        )

    def read(text: str) -> ReadResult[A]:
        for keyword, value in entries:
            head = text[: len(keyword)]
            if (head if strict_case else head.lower()) == keyword:
                return ((value, text[len(keyword):]), ())
        error = NoMatchError(
            ErrorTemplate.no_match(text, name), input_value=text, transformer_name=name
        )
        return (None, (error,))

    def write(value: A) -> WriteResult:
        try:
            return (by_value[value], ())
        except (KeyError, TypeError):
            error = NotRepresentableError(
                ErrorTemplate.value_not_mapped(value, name), value=value, transformer_name=name
            )
            return (None, (error,))

    return Transformer(name=name, read=read, write=write)


def compose[A](outer: Transformer[str], inner: Transformer[A]) -> Transformer[A]:
    """Chain a string transformer with a transformer that must consume its whole output.

    Reading applies outer, then requires inner to read all of the string
    outer produced. Writing applies inner, then outer.

    Args:
        outer: Transformer extracting a string from the input
        inner: Transformer interpreting that string

    Returns:
        Transformer[A]
    """
    name = f"{outer.name} {inner.name}"

    def read(text: str) -> ReadResult[A]:
        outer_result, errors = outer.read(text)
        if outer_result is None:
            return (None, errors)
        field, remaining = outer_result
        inner_result, errors = inner.read_all(field)
        if inner_result is None:
            return (None, errors)
        return ((inner_result[0], remaining), ())

    def write(value: A) -> WriteResult:
        text, errors = inner.write(value)
        if text is None:
            return (None, errors)
        return outer.write(text)

    return Transformer(name=name, read=read, write=write)


STRING: Transformer[str] = rest()
