"""Reference dataset: typed schema and loaders.

Exports:
    Dataset, Country, Language, CountryView, LanguageView, LocaleCulture,
    LocaleTriple, CountryCodes, LanguageCodes - immutable record types
    DatasetLoader - Loader protocol
    PackageDatasetLoader, PathDatasetLoader, MappingDatasetLoader - loaders
    load_dataset, parse_dataset - document to Dataset conversion

Python 3.13+.
"""

from .loading import (
    DatasetLoader,
    MappingDatasetLoader,
    PackageDatasetLoader,
    PathDatasetLoader,
    load_dataset,
    parse_dataset,
)
from .schema import (
    Country,
    CountryCode,
    CountryCodes,
    CountryView,
    Dataset,
    Language,
    LanguageCode,
    LanguageCodes,
    LanguageView,
    LocaleCulture,
    LocaleTriple,
)

__all__ = [
    "Country",
    "CountryCode",
    "CountryCodes",
    "CountryView",
    "Dataset",
    "DatasetLoader",
    "Language",
    "LanguageCode",
    "LanguageCodes",
    "LanguageView",
    "LocaleCulture",
    "LocaleTriple",
    "MappingDatasetLoader",
    "PackageDatasetLoader",
    "PathDatasetLoader",
    "load_dataset",
    "parse_dataset",
]
