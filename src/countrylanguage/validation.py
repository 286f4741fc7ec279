"""Cross-reference integrity checks for a loaded Dataset.

Countries and languages list each other by code on both sides. This module
reports where the two sides disagree:

    DANGLING_LANGUAGE_REFERENCE - a country lists a code no language carries
    DANGLING_COUNTRY_REFERENCE  - a language lists a code no country carries
    ASYMMETRIC_REFERENCE        - one side lists the other, which omits it

Findings are warnings. Queries stay correct on such data: expansion skips
dangling references, and the one-hop limit does not depend on symmetry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from countrylanguage.diagnostics import CountryLanguageError, ErrorTemplate, ValidationResult
from countrylanguage.lookup.engine import LookupEngine

if TYPE_CHECKING:
    from countrylanguage.dataset.schema import Country, Dataset, Language
    from countrylanguage.diagnostics import Diagnostic

__all__ = ["validate_dataset"]

logger = logging.getLogger(__name__)


def _lists_language(country: Country, language: Language) -> bool:
    codes = {
        code
        for code in (language.iso639_1, language.iso639_2, language.iso639_2en, language.iso639_3)
        if code
    }
    return any(ref.lower() in codes for ref in country.languages)


def _lists_country(language: Language, country: Country) -> bool:
    codes = {country.code_2, country.code_3}
    return any(ref.upper() in codes for ref in language.countries)


def validate_dataset(dataset: Dataset) -> ValidationResult:
    """Check that country and language references resolve and agree.

    Args:
        dataset: Loaded dataset

    Returns:
        ValidationResult whose warnings list every finding, countries first,
        each in dataset order.
    """
    engine = LookupEngine(dataset)
    warnings: list[Diagnostic] = []

    for country in dataset.countries:
        for ref in country.languages:
            try:
                language = engine.find_language(ref)
            except CountryLanguageError:
                warnings.append(ErrorTemplate.dangling_language_reference(country.code_2, ref))
                continue
            if not _lists_country(language, country):
                warnings.append(
                    ErrorTemplate.asymmetric_reference(country.code_2, language.iso639_3)
                )

    for language in dataset.languages:
        for ref in language.countries:
            try:
                country = engine.find_country(ref)
            except CountryLanguageError:
                warnings.append(
                    ErrorTemplate.dangling_country_reference(language.iso639_3, ref)
                )
                continue
            if not _lists_language(country, language):
                warnings.append(
                    ErrorTemplate.asymmetric_reference(language.iso639_3, country.code_2)
                )

    result = ValidationResult(warnings=tuple(warnings))
    if not result.is_clean:
        logger.warning(
            "Dataset %s has %d cross-reference findings", dataset.source, result.warning_count
        )
    return result
