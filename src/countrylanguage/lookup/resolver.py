"""Code scheme resolution.

Infers which code scheme a caller-supplied string belongs to from its
length, and validates integer code-type selectors. Pure functions: nothing
here touches the dataset.

Country codes are normalized to uppercase; length 2 selects alpha-2,
length 3 selects alpha-3. Language codes are normalized to lowercase;
length 2 selects ISO-639-1, length 3 selects ISO-639-2, then ISO-639-2en,
then ISO-639-3, in that precedence order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from countrylanguage.constants import ALPHA_2_LENGTH, ALPHA_3_LENGTH
from countrylanguage.diagnostics import (
    EmptyInputError,
    ErrorTemplate,
    InvalidCodeFormatError,
    InvalidCodeTypeError,
)
from countrylanguage.enums import (
    CountryCodeType,
    LanguageCodeField,
    LanguageCodeType,
)

__all__ = [
    "coerce_country_code_type",
    "coerce_language_code_type",
    "require_text",
    "resolve_country_field",
    "resolve_language_fields",
]

# Three-letter language codes are matched against these fields, first match wins.
THREE_LETTER_LANGUAGE_FIELDS: tuple[LanguageCodeField, ...] = (
    LanguageCodeField.ISO639_2,
    LanguageCodeField.ISO639_2EN,
    LanguageCodeField.ISO639_3,
)

TWO_LETTER_LANGUAGE_FIELDS: tuple[LanguageCodeField, ...] = (LanguageCodeField.ISO639_1,)


def require_text(value: object, kind: str) -> str:
    """Return ``value`` if it is a non-blank string.

    Args:
        value: Caller input
        kind: What was expected, for the error message ("country code", ...)

    Raises:
        EmptyInputError: If value is not a string or is blank
    """
    if not isinstance(value, str) or not value.strip():
        raise EmptyInputError(ErrorTemplate.empty_input(kind))
    return value


def resolve_country_field(code: object) -> tuple[str, CountryCodeType]:
    """Normalize a country code and pick the field it must match.

    Args:
        code: Alpha-2 or alpha-3 code, any case

    Returns:
        (uppercased code, ALPHA_2 or ALPHA_3)

    Raises:
        EmptyInputError: If code is missing, blank, or not a string
        InvalidCodeFormatError: If code length is neither 2 nor 3

    Example:
        >>> resolve_country_field("ma")
        ('MA', <CountryCodeType.ALPHA_2: 2>)
    """
    normalized = require_text(code, "country code").upper()
    if len(normalized) == ALPHA_2_LENGTH:
        return normalized, CountryCodeType.ALPHA_2
    if len(normalized) == ALPHA_3_LENGTH:
        return normalized, CountryCodeType.ALPHA_3
    raise InvalidCodeFormatError(ErrorTemplate.invalid_country_code(normalized))


def resolve_language_fields(code: object) -> tuple[str, tuple[LanguageCodeField, ...]]:
    """Normalize a language code and list the fields to try, in order.

    Args:
        code: ISO-639-1/2/2en/3 code, any case

    Returns:
        (lowercased code, candidate fields in precedence order)

    Raises:
        EmptyInputError: If code is missing, blank, or not a string
        InvalidCodeFormatError: If code length is neither 2 nor 3
    """
    normalized = require_text(code, "language code").lower()
    if len(normalized) == ALPHA_2_LENGTH:
        return normalized, TWO_LETTER_LANGUAGE_FIELDS
    if len(normalized) == ALPHA_3_LENGTH:
        return normalized, THREE_LETTER_LANGUAGE_FIELDS
    raise InvalidCodeFormatError(ErrorTemplate.invalid_language_code(normalized))


def _coerce_selector[E: (CountryCodeType, LanguageCodeType)](
    enum_cls: type[E], value: object, kind: str, choices: str
) -> E:
    # bool is an int subclass; True must not mean ALPHA_2 / ISO639_1.
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise InvalidCodeTypeError(ErrorTemplate.invalid_code_type(kind, value, choices))


def coerce_country_code_type(value: object) -> CountryCodeType:
    """Validate a country code-type selector (1, 2, 3 or a CountryCodeType).

    Raises:
        InvalidCodeTypeError: If value is not one of the accepted selectors
    """
    return _coerce_selector(
        CountryCodeType,
        value,
        "country",
        "1, 2, 3 for numeric code, alpha-2, alpha-3 respectively",
    )


def coerce_language_code_type(value: object) -> LanguageCodeType:
    """Validate a language code-type selector (1, 2, 3 or a LanguageCodeType).

    Raises:
        InvalidCodeTypeError: If value is not one of the accepted selectors
    """
    return _coerce_selector(
        LanguageCodeType,
        value,
        "language",
        "1, 2, 3 for iso639-1, iso639-2, iso639-3 respectively",
    )
