"""Single-entity lookup and one-hop cross-reference expansion.

Countries and languages reference each other by code on both sides. An
expanded result embeds the records on the other side, and the embedded
records are always fetched with expansion switched off, so a result is at
most one hop deep in either direction:

    get_country("MA")            -> CountryView(languages=(Language, Language))
    get_country("MA").languages[0].countries  -> ("DZ", "EG", ...)  codes only

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal, overload

from countrylanguage.dataset.schema import CountryView, LanguageView
from countrylanguage.diagnostics import (
    ErrorTemplate,
    InvalidCodeFormatError,
    NotFoundError,
)

from .resolver import resolve_country_field, resolve_language_fields

if TYPE_CHECKING:
    from countrylanguage.dataset.schema import Country, Dataset, Language

__all__ = ["LookupEngine"]

logger = logging.getLogger(__name__)


class LookupEngine:
    """Resolves codes to records of a loaded Dataset.

    Stateless apart from the dataset reference; safe to share between
    threads.

    Args:
        dataset: Loaded, immutable dataset
    """

    __slots__ = ("_dataset",)

    def __init__(self, dataset: Dataset) -> None:
        self._dataset = dataset

    @property
    def dataset(self) -> Dataset:
        """The dataset this engine reads."""
        return self._dataset

    # ------------------------------------------------------------------
    # Base record fetch
    # ------------------------------------------------------------------

    def find_country(self, code: object) -> Country:
        """Return the raw country record for an alpha-2 or alpha-3 code.

        Raises:
            EmptyInputError: If code is missing, blank, or not a string
            InvalidCodeFormatError: If code length is neither 2 nor 3
            NotFoundError: If no country carries the code
        """
        normalized, code_type = resolve_country_field(code)
        country = self._dataset.country_by(code_type, normalized)
        if country is None:
            logger.debug("No country with %s %r", code_type.field, normalized)
            raise NotFoundError(ErrorTemplate.country_not_found(normalized))
        return country

    def find_language(self, code: object) -> Language:
        """Return the raw language record for an ISO-639 code.

        Three-letter codes are tried against iso639_2, then iso639_2en, then
        iso639_3; the first field holding the code wins.

        Raises:
            EmptyInputError: If code is missing, blank, or not a string
            InvalidCodeFormatError: If code length is neither 2 nor 3
            NotFoundError: If no language carries the code
        """
        normalized, fields = resolve_language_fields(code)
        for fld in fields:
            language = self._dataset.language_by(fld, normalized)
            if language is not None:
                return language
        logger.debug("No language with code %r in %s", normalized, [str(f) for f in fields])
        raise NotFoundError(ErrorTemplate.language_not_found(normalized))

    # ------------------------------------------------------------------
    # Expanding fetch
    # ------------------------------------------------------------------

    @overload
    def get_country(self, code: object, expand: Literal[True] = ...) -> CountryView: ...

    @overload
    def get_country(self, code: object, expand: Literal[False]) -> Country: ...

    @overload
    def get_country(self, code: object, expand: bool = ...) -> Country | CountryView: ...

    def get_country(self, code: object, expand: bool = True) -> Country | CountryView:
        """Fetch a country, optionally embedding its languages.

        Args:
            code: Alpha-2 or alpha-3 code, any case
            expand: Embed the referenced languages (unexpanded) when True;
                return the raw record with language codes when False

        Raises:
            EmptyInputError, InvalidCodeFormatError, NotFoundError
        """
        country = self.find_country(code)
        if not expand:
            return country
        languages: list[Language] = []
        for ref in country.languages:
            try:
                languages.append(self.get_language(ref, expand=False))
            except (NotFoundError, InvalidCodeFormatError) as e:
                logger.warning(
                    "Country %s: skipping language reference %r: %s", country.code_2, ref, e
                )
        return CountryView.expand(country, tuple(languages))

    @overload
    def get_language(self, code: object, expand: Literal[True] = ...) -> LanguageView: ...

    @overload
    def get_language(self, code: object, expand: Literal[False]) -> Language: ...

    @overload
    def get_language(self, code: object, expand: bool = ...) -> Language | LanguageView: ...

    def get_language(self, code: object, expand: bool = True) -> Language | LanguageView:
        """Fetch a language, optionally embedding its countries.

        Args:
            code: ISO-639-1/2/2en/3 code, any case
            expand: Embed the referenced countries (unexpanded) when True;
                return the raw record with country codes when False

        Raises:
            EmptyInputError, InvalidCodeFormatError, NotFoundError
        """
        language = self.find_language(code)
        if not expand:
            return language
        countries: list[Country] = []
        for ref in language.countries:
            try:
                countries.append(self.get_country(ref, expand=False))
            except (NotFoundError, InvalidCodeFormatError) as e:
                logger.warning(
                    "Language %s: skipping country reference %r: %s", language.iso639_3, ref, e
                )
        return LanguageView.expand(language, tuple(countries))
