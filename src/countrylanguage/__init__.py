"""countrylanguage - country, language and locale reference data.

A read-only lookup library over a bundled dataset of the world's countries,
languages, language families and locale codes. Answers cross-referencing
queries ("which languages are spoken in MA", "which countries speak fra")
and normalizes ISO 3166-1 and ISO 639 code formats.

Public API:
    CountryLanguage - Query facade over a (lazily loaded) dataset
    get_country, get_language, ... - Same queries on a shared default instance
    CountryCodeType, LanguageCodeType - Code scheme selectors
    PathDatasetLoader, MappingDatasetLoader - Alternative dataset sources

Exceptions:
    CountryLanguageError - Base exception class
    EmptyInputError - Missing or blank code argument
    InvalidCodeFormatError - Code length matches no scheme
    InvalidCodeTypeError - Code type selector outside 1..3
    NotFoundError - Well-formed code with no record
    UnknownFamilyError - Unknown language family name
    DatasetLoadError - Dataset unreadable or malformed

Submodules:
    countrylanguage.dataset - Record types and loaders
    countrylanguage.lookup - Code resolution, lookup engine, aggregations
    countrylanguage.diagnostics - Error codes, templates and formatting
    countrylanguage.validation - Cross-reference integrity checks
"""

from .dataset import (
    Country,
    CountryCodes,
    CountryView,
    Dataset,
    DatasetLoader,
    Language,
    LanguageCodes,
    LanguageView,
    LocaleCulture,
    LocaleTriple,
    MappingDatasetLoader,
    PackageDatasetLoader,
    PathDatasetLoader,
)
from .diagnostics import (
    CountryLanguageError,
    DatasetLoadError,
    EmptyInputError,
    InvalidCodeFormatError,
    InvalidCodeTypeError,
    NotFoundError,
    UnknownFamilyError,
)
from .enums import CountryCodeType, LanguageCodeType, ScriptDirection
from .query import (
    CountryLanguage,
    clear_default_cache,
    country_code_exists,
    get_countries,
    get_country,
    get_country_codes,
    get_country_languages,
    get_country_ms_locales,
    get_language,
    get_language_codes,
    get_language_countries,
    get_language_families,
    get_language_family_members,
    get_language_ms_locales,
    get_languages,
    get_locales,
    language_code_exists,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("countrylanguage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Country",
    "CountryCodeType",
    "CountryCodes",
    "CountryLanguage",
    "CountryLanguageError",
    "CountryView",
    "Dataset",
    "DatasetLoadError",
    "DatasetLoader",
    "EmptyInputError",
    "InvalidCodeFormatError",
    "InvalidCodeTypeError",
    "Language",
    "LanguageCodeType",
    "LanguageCodes",
    "LanguageView",
    "LocaleCulture",
    "LocaleTriple",
    "MappingDatasetLoader",
    "NotFoundError",
    "PackageDatasetLoader",
    "PathDatasetLoader",
    "ScriptDirection",
    "UnknownFamilyError",
    "__version__",
    "clear_default_cache",
    "country_code_exists",
    "get_countries",
    "get_country",
    "get_country_codes",
    "get_country_languages",
    "get_country_ms_locales",
    "get_language",
    "get_language_codes",
    "get_language_countries",
    "get_language_families",
    "get_language_family_members",
    "get_language_ms_locales",
    "get_languages",
    "get_locales",
    "language_code_exists",
]
