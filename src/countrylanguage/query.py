"""Public query facade.

CountryLanguage composes the dataset loader, the lookup engine and the
aggregation queries behind one object. The dataset is loaded lazily on the
first query, exactly once even under concurrent first access; afterwards
every call is a lock-free read of immutable data.

The module-level functions delegate to a shared default instance that reads
the bundled dataset.

Example:
    >>> from countrylanguage import CountryLanguage
    >>> cl = CountryLanguage()
    >>> cl.get_country("MA").name
    'Morocco'
    >>> [lang.iso639_3 for lang in cl.get_country("MA").languages]
    ['ara', 'fra']

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Literal, overload

from countrylanguage.dataset.loading import PackageDatasetLoader, load_dataset
from countrylanguage.diagnostics import DatasetLoadError
from countrylanguage.lookup import aggregation
from countrylanguage.lookup.engine import LookupEngine
from countrylanguage.validation import validate_dataset

if TYPE_CHECKING:
    from countrylanguage.dataset.loading import DatasetLoader
    from countrylanguage.dataset.schema import (
        Country,
        CountryCodes,
        CountryView,
        Dataset,
        Language,
        LanguageCodes,
        LanguageView,
        LocaleCulture,
    )

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Facade
    "CountryLanguage",
    # Default instance
    "get_default",
    "clear_default_cache",
    # Module-level API
    "get_country_codes",
    "get_language_codes",
    "country_code_exists",
    "language_code_exists",
    "get_country",
    "get_language",
    "get_country_languages",
    "get_language_countries",
    "get_country_ms_locales",
    "get_language_ms_locales",
    "get_countries",
    "get_languages",
    "get_language_families",
    "get_locales",
    "get_language_family_members",
]

logger = logging.getLogger(__name__)


class CountryLanguage:
    """Country and language reference-data queries.

    Args:
        loader: Source of the raw dataset document. Defaults to the dataset
            bundled with the package.
        validate: Check cross-references once after loading and log any
            findings (never fatal).

    Thread-safe. The loader runs at most once; a load failure is remembered
    and re-raised by every later query instead of retrying.
    """

    __slots__ = ("_engine", "_load_error", "_loader", "_lock", "_validate")

    def __init__(self, loader: DatasetLoader | None = None, *, validate: bool = True) -> None:
        self._loader: DatasetLoader = loader if loader is not None else PackageDatasetLoader()
        self._validate = validate
        self._lock = threading.Lock()
        self._engine: LookupEngine | None = None
        self._load_error: DatasetLoadError | None = None

    def __repr__(self) -> str:
        state = "loaded" if self._engine is not None else "not loaded"
        return f"CountryLanguage(source={self._loader.describe()!r}, {state})"

    def _get_engine(self) -> LookupEngine:
        engine = self._engine
        if engine is not None:
            return engine
        with self._lock:
            if self._engine is None:
                if self._load_error is not None:
                    raise self._load_error
                try:
                    dataset = load_dataset(self._loader)
                except DatasetLoadError as e:
                    self._load_error = e
                    raise
                if self._validate:
                    validate_dataset(dataset)
                self._engine = LookupEngine(dataset)
            return self._engine

    @property
    def dataset(self) -> Dataset:
        """The loaded dataset (loads it on first access).

        Raises:
            DatasetLoadError: If the dataset cannot be loaded
        """
        return self._get_engine().dataset

    # ------------------------------------------------------------------
    # Code listings and existence
    # ------------------------------------------------------------------

    def get_country_codes(self, code_type: object = 2) -> list[str]:
        """Country codes of one scheme: 1 numeric, 2 alpha-2, 3 alpha-3.

        Raises:
            InvalidCodeTypeError: If code_type is not 1, 2 or 3
        """
        return aggregation.list_country_codes(self.dataset, code_type)

    def get_language_codes(self, code_type: object = 1) -> list[str]:
        """Language codes of one scheme: 1 ISO-639-1, 2 ISO-639-2 (2en), 3 ISO-639-3.

        Raises:
            InvalidCodeTypeError: If code_type is not 1, 2 or 3
        """
        return aggregation.list_language_codes(self.dataset, code_type)

    def country_code_exists(self, code: object) -> bool:
        """True if ``code`` is a known numeric, alpha-2 or alpha-3 country code."""
        return aggregation.country_code_exists(self.dataset, code)

    def language_code_exists(self, code: object) -> bool:
        """True if ``code`` is a known ISO-639 code of any scheme."""
        return aggregation.language_code_exists(self.dataset, code)

    # ------------------------------------------------------------------
    # Single records
    # ------------------------------------------------------------------

    @overload
    def get_country(self, code: object, expand: Literal[True] = ...) -> CountryView: ...

    @overload
    def get_country(self, code: object, expand: Literal[False]) -> Country: ...

    @overload
    def get_country(self, code: object, expand: bool = ...) -> Country | CountryView: ...

    def get_country(self, code: object, expand: bool = True) -> Country | CountryView:
        """Country by alpha-2 or alpha-3 code, languages embedded by default.

        Raises:
            EmptyInputError: If code is missing, blank, or not a string
            InvalidCodeFormatError: If code length is neither 2 nor 3
            NotFoundError: If no country carries the code
        """
        return self._get_engine().get_country(code, expand=expand)

    @overload
    def get_language(self, code: object, expand: Literal[True] = ...) -> LanguageView: ...

    @overload
    def get_language(self, code: object, expand: Literal[False]) -> Language: ...

    @overload
    def get_language(self, code: object, expand: bool = ...) -> Language | LanguageView: ...

    def get_language(self, code: object, expand: bool = True) -> Language | LanguageView:
        """Language by ISO-639-1/2/2en/3 code, countries embedded by default.

        Raises:
            EmptyInputError: If code is missing, blank, or not a string
            InvalidCodeFormatError: If code length is neither 2 nor 3
            NotFoundError: If no language carries the code
        """
        return self._get_engine().get_language(code, expand=expand)

    # ------------------------------------------------------------------
    # Related records
    # ------------------------------------------------------------------

    def get_country_languages(self, code: object) -> list[LanguageCodes]:
        """Identifying codes of the languages spoken in a country ([] if unknown)."""
        return aggregation.country_languages(self._get_engine(), code)

    def get_language_countries(self, code: object) -> list[CountryCodes]:
        """Identifying codes of the countries speaking a language ([] if unknown)."""
        return aggregation.language_countries(self._get_engine(), code)

    def get_country_ms_locales(self, code: object) -> list[LocaleCulture]:
        """Language-culture entries of a country ([] if unknown)."""
        return aggregation.country_ms_locales(self._get_engine(), code)

    def get_language_ms_locales(self, code: object) -> list[LocaleCulture]:
        """Language-culture entries of a language ([] if unknown)."""
        return aggregation.language_ms_locales(self._get_engine(), code)

    # ------------------------------------------------------------------
    # Whole-dataset views
    # ------------------------------------------------------------------

    def get_countries(self) -> list[Country]:
        """Every country record, unexpanded, in dataset order."""
        return list(self.dataset.countries)

    def get_languages(self) -> list[Language]:
        """Every language record, unexpanded, in dataset order."""
        return list(self.dataset.languages)

    def get_language_families(self) -> list[str]:
        """Every known language family name."""
        return aggregation.language_families(self.dataset)

    def get_locales(self, mode: bool = False) -> list[str]:
        """Every locale as 'lang_REGION[_Script]', or 'lang[_Script]_REGION' if mode."""
        return aggregation.locales(self.dataset, mode)

    def get_language_family_members(self, family: object) -> list[LanguageView]:
        """Languages of a family (case-insensitive), countries embedded.

        Raises:
            EmptyInputError: If family is missing, blank, or not a string
            UnknownFamilyError: If the family is not known
        """
        return aggregation.language_family_members(self._get_engine(), family)


# ============================================================================
# DEFAULT INSTANCE
# ============================================================================

_default_lock = threading.Lock()
_default: CountryLanguage | None = None


def get_default() -> CountryLanguage:
    """Shared CountryLanguage reading the bundled dataset, created on first use."""
    global _default  # noqa: PLW0603  # pylint: disable=global-statement
    instance = _default
    if instance is None:
        with _default_lock:
            if _default is None:
                _default = CountryLanguage()
            instance = _default
    return instance


def clear_default_cache() -> None:
    """Drop the shared instance; the next module-level call reloads the dataset."""
    global _default  # noqa: PLW0603  # pylint: disable=global-statement
    with _default_lock:
        _default = None
    logger.debug("Default CountryLanguage instance cleared")


# ============================================================================
# MODULE-LEVEL API
# ============================================================================


def get_country_codes(code_type: object = 2) -> list[str]:
    """See CountryLanguage.get_country_codes."""
    return get_default().get_country_codes(code_type)


def get_language_codes(code_type: object = 1) -> list[str]:
    """See CountryLanguage.get_language_codes."""
    return get_default().get_language_codes(code_type)


def country_code_exists(code: object) -> bool:
    """See CountryLanguage.country_code_exists."""
    return get_default().country_code_exists(code)


def language_code_exists(code: object) -> bool:
    """See CountryLanguage.language_code_exists."""
    return get_default().language_code_exists(code)


def get_country(code: object, expand: bool = True) -> Country | CountryView:
    """See CountryLanguage.get_country."""
    return get_default().get_country(code, expand=expand)


def get_language(code: object, expand: bool = True) -> Language | LanguageView:
    """See CountryLanguage.get_language."""
    return get_default().get_language(code, expand=expand)


def get_country_languages(code: object) -> list[LanguageCodes]:
    """See CountryLanguage.get_country_languages."""
    return get_default().get_country_languages(code)


def get_language_countries(code: object) -> list[CountryCodes]:
    """See CountryLanguage.get_language_countries."""
    return get_default().get_language_countries(code)


def get_country_ms_locales(code: object) -> list[LocaleCulture]:
    """See CountryLanguage.get_country_ms_locales."""
    return get_default().get_country_ms_locales(code)


def get_language_ms_locales(code: object) -> list[LocaleCulture]:
    """See CountryLanguage.get_language_ms_locales."""
    return get_default().get_language_ms_locales(code)


def get_countries() -> list[Country]:
    """See CountryLanguage.get_countries."""
    return get_default().get_countries()


def get_languages() -> list[Language]:
    """See CountryLanguage.get_languages."""
    return get_default().get_languages()


def get_language_families() -> list[str]:
    """See CountryLanguage.get_language_families."""
    return get_default().get_language_families()


def get_locales(mode: bool = False) -> list[str]:
    """See CountryLanguage.get_locales."""
    return get_default().get_locales(mode)


def get_language_family_members(family: object) -> list[LanguageView]:
    """See CountryLanguage.get_language_family_members."""
    return get_default().get_language_family_members(family)
