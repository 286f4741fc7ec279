"""Derived views over a loaded Dataset.

Code listings, type-agnostic existence checks, identifying-code
aggregators, language-culture passthrough, family membership and locale
string formatting.

Failure policy:
    - Existence checks never raise; every failure collapses to False.
    - The identifying-code aggregators and language-culture getters turn
      NotFoundError into an empty list; malformed or empty codes still raise.
    - Everything else raises its typed error.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from countrylanguage.diagnostics import (
    ErrorTemplate,
    NotFoundError,
    UnknownFamilyError,
)
from countrylanguage.enums import CountryCodeType, LanguageCodeField, LanguageCodeType
from countrylanguage.locale_utils import format_locales

from .resolver import coerce_country_code_type, coerce_language_code_type, require_text

if TYPE_CHECKING:
    from countrylanguage.dataset.schema import (
        CountryCodes,
        Dataset,
        LanguageCodes,
        LanguageView,
        LocaleCulture,
    )

    from .engine import LookupEngine

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code listings
    "list_country_codes",
    "list_language_codes",
    # Existence checks
    "country_code_exists",
    "language_code_exists",
    # Identifying codes of related records
    "country_languages",
    "language_countries",
    # Language cultures
    "country_ms_locales",
    "language_ms_locales",
    # Families and locales
    "language_families",
    "language_family_members",
    "locales",
]

logger = logging.getLogger(__name__)

# Fields checked by language_code_exists, in order: the three listing schemes,
# then the terminology code so every code find_language accepts is covered.
_LANGUAGE_EXISTENCE_FIELDS: tuple[LanguageCodeField, ...] = (
    *(code_type.field for code_type in LanguageCodeType),
    LanguageCodeField.ISO639_2,
)


# ============================================================================
# CODE LISTINGS
# ============================================================================


def list_country_codes(dataset: Dataset, code_type: object) -> list[str]:
    """All country codes of one scheme, in dataset order.

    Args:
        dataset: Loaded dataset
        code_type: 1/NUMERIC, 2/ALPHA_2 or 3/ALPHA_3

    Raises:
        InvalidCodeTypeError: If code_type is not one of the accepted selectors
    """
    attr = coerce_country_code_type(code_type).field
    return [value for country in dataset.countries if (value := getattr(country, attr))]


def list_language_codes(dataset: Dataset, code_type: object) -> list[str]:
    """All language codes of one scheme, in dataset order.

    Languages without a code in the scheme contribute nothing, so the
    ISO-639-1 listing is shorter than the others.

    Args:
        dataset: Loaded dataset
        code_type: 1/ISO639_1, 2/ISO639_2 (English-derived codes) or 3/ISO639_3

    Raises:
        InvalidCodeTypeError: If code_type is not one of the accepted selectors
    """
    attr = str(coerce_language_code_type(code_type).field)
    return [value for language in dataset.languages if (value := getattr(language, attr))]


# ============================================================================
# EXISTENCE CHECKS
# ============================================================================


def country_code_exists(dataset: Dataset, code: object) -> bool:
    """True if any country carries ``code`` as numeric, alpha-2 or alpha-3 code.

    Never raises: empty, non-string, or unknown codes give False.
    """
    if not isinstance(code, str) or not code:
        return False
    normalized = code.upper()
    return any(dataset.country_by(code_type, normalized) for code_type in CountryCodeType)


def language_code_exists(dataset: Dataset, code: object) -> bool:
    """True if any language carries ``code`` in any of its code fields.

    Never raises: empty, non-string, or unknown codes give False.
    """
    if not isinstance(code, str) or not code:
        return False
    normalized = code.lower()
    return any(dataset.language_by(fld, normalized) for fld in _LANGUAGE_EXISTENCE_FIELDS)


# ============================================================================
# IDENTIFYING CODES OF RELATED RECORDS
# ============================================================================


def country_languages(engine: LookupEngine, code: object) -> list[LanguageCodes]:
    """Identifying codes of every language spoken in a country.

    Returns an empty list for an unknown country.

    Raises:
        EmptyInputError, InvalidCodeFormatError
    """
    try:
        country = engine.get_country(code, expand=True)
    except NotFoundError:
        return []
    return [language.codes for language in country.languages]


def language_countries(engine: LookupEngine, code: object) -> list[CountryCodes]:
    """Identifying codes of every country where a language is spoken.

    Returns an empty list for an unknown language.

    Raises:
        EmptyInputError, InvalidCodeFormatError
    """
    try:
        language = engine.get_language(code, expand=True)
    except NotFoundError:
        return []
    return [country.codes for country in language.countries]


# ============================================================================
# LANGUAGE CULTURES
# ============================================================================


def country_ms_locales(engine: LookupEngine, code: object) -> list[LocaleCulture]:
    """Language-culture entries attached to a country, unchanged.

    Returns an empty list for an unknown country.
    """
    try:
        return list(engine.find_country(code).lang_culture_ms)
    except NotFoundError:
        return []


def language_ms_locales(engine: LookupEngine, code: object) -> list[LocaleCulture]:
    """Language-culture entries attached to a language, unchanged.

    Returns an empty list for an unknown language.
    """
    try:
        return list(engine.find_language(code).lang_culture_ms)
    except NotFoundError:
        return []


# ============================================================================
# FAMILIES AND LOCALES
# ============================================================================


def language_families(dataset: Dataset) -> list[str]:
    """Every known language family name, in dataset order."""
    return list(dataset.language_families)


def locales(dataset: Dataset, mode: bool = False) -> list[str]:
    """Every locale triple formatted as a string.

    Args:
        dataset: Loaded dataset
        mode: False for language_region[_script] ('az_AZ_Cyrl'),
            True for language[_script]_region ('az_Cyrl_AZ')
    """
    return format_locales(dataset.locales, mode)


def language_family_members(engine: LookupEngine, family: object) -> list[LanguageView]:
    """Every language of a family, each with its countries embedded.

    The family name is matched case-insensitively against the known set.

    Raises:
        EmptyInputError: If family is missing, blank, or not a string
        UnknownFamilyError: If no known family matches
    """
    name = require_text(family, "language family").casefold()
    dataset = engine.dataset
    if not any(known.casefold() == name for known in dataset.language_families):
        raise UnknownFamilyError(ErrorTemplate.unknown_family(str(family)))

    members = [lang for lang in dataset.languages if lang.family.casefold() == name]
    logger.debug("Family %r has %d member languages", family, len(members))
    return [engine.get_language(lang.iso639_3, expand=True) for lang in members]
