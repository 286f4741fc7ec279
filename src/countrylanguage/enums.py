"""Enumerations for countrylanguage type-safe constants.

Code scheme selectors are IntEnum so the historical integer selectors
(1, 2, 3) keep working; field names and script directions are StrEnum so
``str(member)`` is the raw dataset value.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class CountryCodeType(IntEnum):
    """ISO 3166-1 country code scheme.

    Values match the integer selectors accepted by ``get_country_codes``.
    """

    NUMERIC = 1
    """Numeric code, zero-padded to three digits: 504"""

    ALPHA_2 = 2
    """Two-letter code: MA"""

    ALPHA_3 = 3
    """Three-letter code: MAR"""

    @property
    def field(self) -> str:
        """Dataset key holding codes of this scheme."""
        return _COUNTRY_FIELDS[self]


_COUNTRY_FIELDS: dict[CountryCodeType, str] = {
    CountryCodeType.NUMERIC: "num_code",
    CountryCodeType.ALPHA_2: "code_2",
    CountryCodeType.ALPHA_3: "code_3",
}


class LanguageCodeField(StrEnum):
    """Language record fields usable as lookup keys.

    StrEnum provides automatic string conversion: str(LanguageCodeField.ISO639_3) == "iso639_3"
    """

    ISO639_1 = "iso639_1"
    """Two-letter code, absent for many languages: ar"""

    ISO639_2 = "iso639_2"
    """Three-letter terminology code: fra"""

    ISO639_2EN = "iso639_2en"
    """Three-letter code derived from the English name: fre"""

    ISO639_3 = "iso639_3"
    """Three-letter code, always present: fra"""


class LanguageCodeType(IntEnum):
    """ISO 639 language code scheme selector for code listings.

    ``ISO639_2`` lists the English-derived ``iso639_2en`` values.
    """

    ISO639_1 = 1
    ISO639_2 = 2
    ISO639_3 = 3

    @property
    def field(self) -> LanguageCodeField:
        """Language record field listed for this scheme."""
        return _LANGUAGE_FIELDS[self]


_LANGUAGE_FIELDS: dict[LanguageCodeType, LanguageCodeField] = {
    LanguageCodeType.ISO639_1: LanguageCodeField.ISO639_1,
    LanguageCodeType.ISO639_2: LanguageCodeField.ISO639_2EN,
    LanguageCodeType.ISO639_3: LanguageCodeField.ISO639_3,
}


class ScriptDirection(StrEnum):
    """Writing direction of a language's script."""

    LTR = "LTR"
    """Left-to-right"""

    RTL = "RTL"
    """Right-to-left"""


__all__ = [
    "CountryCodeType",
    "LanguageCodeField",
    "LanguageCodeType",
    "ScriptDirection",
]
