"""Typed in-memory representation of the reference dataset.

All record types are immutable, hashable, slotted dataclasses. A Dataset is
built once by the loader and shared read-only by every query; results hand
out the same record objects, or shallow views with one reference field
replaced by embedded records.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from countrylanguage.constants import LOCALE_SEPARATOR
from countrylanguage.enums import CountryCodeType, LanguageCodeField, ScriptDirection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CountryCode",
    "LanguageCode",
    # Leaf records
    "LocaleCulture",
    "LocaleTriple",
    # Entity records
    "Country",
    "Language",
    # Expanded views
    "CountryView",
    "LanguageView",
    # Identifying tuples
    "CountryCodes",
    "LanguageCodes",
    # Aggregate
    "Dataset",
]

logger = logging.getLogger(__name__)


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type CountryCode = str
"""ISO 3166-1 code in any scheme (e.g., 'MA', 'MAR', '504')."""

type LanguageCode = str
"""ISO 639 code in any scheme (e.g., 'ar', 'ara', 'fre')."""


# ============================================================================
# LEAF RECORDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleCulture:
    """Vendor language-culture entry attached to a country or language.

    Opaque passthrough: never expanded or interpreted.

    Attributes:
        lang_culture_name: Culture name (e.g., 'ar-MA')
        display_name: Human-readable name (e.g., 'Arabic - Morocco')
        culture_code: Culture identifier (e.g., '0x1801')
    """

    lang_culture_name: str
    display_name: str
    culture_code: str

    def to_dict(self) -> dict[str, str]:
        """Serialize with the dataset's key names."""
        return {
            "langCultureName": self.lang_culture_name,
            "displayName": self.display_name,
            "cultureCode": self.culture_code,
        }


@dataclass(frozen=True, slots=True)
class LocaleTriple:
    """Locale subtags used to build locale identifier strings.

    Attributes:
        language: Language subtag (e.g., 'az')
        region: Region subtag (e.g., 'AZ')
        script: Script subtag or None (e.g., 'Cyrl')
    """

    language: str
    region: str
    script: str | None = None

    def format(self, mode: bool = False) -> str:
        """Join the subtags with underscores.

        Args:
            mode: False for language_region[_script], True for
                language[_script]_region.

        Returns:
            Locale string such as 'az_AZ_Cyrl' or 'az_Cyrl_AZ'.
        """
        if self.script is None:
            parts = (self.language, self.region)
        elif mode:
            parts = (self.language, self.script, self.region)
        else:
            parts = (self.language, self.region, self.script)
        return LOCALE_SEPARATOR.join(parts)

    def to_babel(self) -> Locale:
        """Return the Babel Locale for this triple.

        Raises:
            BabelImportError: If Babel is not installed
            babel.core.UnknownLocaleError: If CLDR has no data for the locale
        """
        from countrylanguage.core.babel_compat import get_locale_class  # noqa: PLC0415

        locale_class = get_locale_class()
        return locale_class(self.language, territory=self.region, script=self.script)


# ============================================================================
# ENTITY RECORDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Country:
    """ISO 3166-1 country as stored in the dataset.

    Attributes:
        num_code: Numeric code, zero-padded to three digits
        code_2: Alpha-2 code, canonical key
        code_3: Alpha-3 code
        name: English display name
        languages: Codes of the languages spoken, in dataset order
        lang_culture_ms: Attached language-culture entries
    """

    num_code: str
    code_2: CountryCode
    code_3: CountryCode
    name: str
    languages: tuple[LanguageCode, ...] = ()
    lang_culture_ms: tuple[LocaleCulture, ...] = ()

    @property
    def codes(self) -> CountryCodes:
        """Identifying codes of this country."""
        return CountryCodes(code_2=self.code_2, code_3=self.code_3, num_code=self.num_code)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the dataset's key names."""
        return {
            "code_2": self.code_2,
            "code_3": self.code_3,
            "numCode": self.num_code,
            "name": self.name,
            "languages": list(self.languages),
            "langCultureMs": [c.to_dict() for c in self.lang_culture_ms],
        }


@dataclass(frozen=True, slots=True)
class Language:
    """ISO 639 language as stored in the dataset.

    Attributes:
        iso639_1: Two-letter code, or None when the language has none
        iso639_2: Three-letter terminology code
        iso639_2en: Three-letter code derived from the English name
        iso639_3: Three-letter code, canonical key
        name: English names
        native_name: Names in the language itself
        direction: Script direction
        family: Language family name
        countries: Codes of the countries where it is spoken, in dataset order
        lang_culture_ms: Attached language-culture entries
    """

    iso639_1: LanguageCode | None
    iso639_2: LanguageCode
    iso639_2en: LanguageCode
    iso639_3: LanguageCode
    name: tuple[str, ...]
    native_name: tuple[str, ...]
    direction: ScriptDirection
    family: str
    countries: tuple[CountryCode, ...] = ()
    lang_culture_ms: tuple[LocaleCulture, ...] = ()

    @property
    def codes(self) -> LanguageCodes:
        """Identifying codes of this language."""
        return LanguageCodes(
            iso639_1=self.iso639_1,
            iso639_2=self.iso639_2en,
            iso639_3=self.iso639_3,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the dataset's key names."""
        return {
            "iso639_1": self.iso639_1 or "",
            "iso639_2": self.iso639_2,
            "iso639_2en": self.iso639_2en,
            "iso639_3": self.iso639_3,
            "name": list(self.name),
            "nativeName": list(self.native_name),
            "direction": str(self.direction),
            "family": self.family,
            "countries": list(self.countries),
            "langCultureMs": [c.to_dict() for c in self.lang_culture_ms],
        }


# ============================================================================
# EXPANDED VIEWS
# ============================================================================


@dataclass(frozen=True, slots=True)
class CountryView:
    """Country with its languages embedded one hop deep.

    The embedded Language records are the raw dataset records: their
    ``countries`` field still holds codes, never expanded countries.
    """

    num_code: str
    code_2: CountryCode
    code_3: CountryCode
    name: str
    languages: tuple[Language, ...]
    lang_culture_ms: tuple[LocaleCulture, ...]

    @classmethod
    def expand(cls, country: Country, languages: tuple[Language, ...]) -> CountryView:
        """Build a view of ``country`` with ``languages`` embedded."""
        return cls(
            num_code=country.num_code,
            code_2=country.code_2,
            code_3=country.code_3,
            name=country.name,
            languages=languages,
            lang_culture_ms=country.lang_culture_ms,
        )

    @property
    def codes(self) -> CountryCodes:
        """Identifying codes of this country."""
        return CountryCodes(code_2=self.code_2, code_3=self.code_3, num_code=self.num_code)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the dataset's key names, languages as objects."""
        return {
            "code_2": self.code_2,
            "code_3": self.code_3,
            "numCode": self.num_code,
            "name": self.name,
            "languages": [lang.to_dict() for lang in self.languages],
            "langCultureMs": [c.to_dict() for c in self.lang_culture_ms],
        }


@dataclass(frozen=True, slots=True)
class LanguageView:
    """Language with its countries embedded one hop deep.

    The embedded Country records are the raw dataset records: their
    ``languages`` field still holds codes, never expanded languages.
    """

    iso639_1: LanguageCode | None
    iso639_2: LanguageCode
    iso639_2en: LanguageCode
    iso639_3: LanguageCode
    name: tuple[str, ...]
    native_name: tuple[str, ...]
    direction: ScriptDirection
    family: str
    countries: tuple[Country, ...]
    lang_culture_ms: tuple[LocaleCulture, ...]

    @classmethod
    def expand(cls, language: Language, countries: tuple[Country, ...]) -> LanguageView:
        """Build a view of ``language`` with ``countries`` embedded."""
        return cls(
            iso639_1=language.iso639_1,
            iso639_2=language.iso639_2,
            iso639_2en=language.iso639_2en,
            iso639_3=language.iso639_3,
            name=language.name,
            native_name=language.native_name,
            direction=language.direction,
            family=language.family,
            countries=countries,
            lang_culture_ms=language.lang_culture_ms,
        )

    @property
    def codes(self) -> LanguageCodes:
        """Identifying codes of this language."""
        return LanguageCodes(
            iso639_1=self.iso639_1,
            iso639_2=self.iso639_2en,
            iso639_3=self.iso639_3,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the dataset's key names, countries as objects."""
        return {
            "iso639_1": self.iso639_1 or "",
            "iso639_2": self.iso639_2,
            "iso639_2en": self.iso639_2en,
            "iso639_3": self.iso639_3,
            "name": list(self.name),
            "nativeName": list(self.native_name),
            "direction": str(self.direction),
            "family": self.family,
            "countries": [c.to_dict() for c in self.countries],
            "langCultureMs": [c.to_dict() for c in self.lang_culture_ms],
        }


# ============================================================================
# IDENTIFYING TUPLES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CountryCodes:
    """Lightweight identifying codes of a country."""

    code_2: CountryCode
    code_3: CountryCode
    num_code: str

    def to_dict(self) -> dict[str, str]:
        """Serialize with the dataset's key names."""
        return {"code_2": self.code_2, "code_3": self.code_3, "numCode": self.num_code}


@dataclass(frozen=True, slots=True)
class LanguageCodes:
    """Lightweight identifying codes of a language.

    ``iso639_2`` carries the English-derived (2en) code.
    """

    iso639_1: LanguageCode | None
    iso639_2: LanguageCode
    iso639_3: LanguageCode

    def to_dict(self) -> dict[str, str]:
        """Serialize with the dataset's key names."""
        return {
            "iso639_1": self.iso639_1 or "",
            "iso639_2": self.iso639_2,
            "iso639_3": self.iso639_3,
        }


# ============================================================================
# AGGREGATE
# ============================================================================

# Language lookup fields in the order indexes are built.
_LANGUAGE_INDEX_FIELDS: tuple[LanguageCodeField, ...] = tuple(LanguageCodeField)


def _build_index[T](records: tuple[T, ...], attr: str) -> Mapping[str, T]:
    """Map field value -> first record carrying it (matches a linear scan)."""
    index: dict[str, T] = {}
    for record in records:
        value = getattr(record, attr)
        if value:
            index.setdefault(value, record)
    return MappingProxyType(index)


@dataclass(frozen=True, slots=True)
class Dataset:
    """Immutable parsed reference dataset.

    Code indexes are built once in ``__post_init__``; lookups through them
    return the same record a first-match linear scan would.

    Attributes:
        countries: Country records in dataset order
        languages: Language records in dataset order
        language_families: Known family names in dataset order
        locales: Locale triples in dataset order
        source: Human-readable description of where the data came from
    """

    countries: tuple[Country, ...]
    languages: tuple[Language, ...]
    language_families: tuple[str, ...]
    locales: tuple[LocaleTriple, ...]
    source: str = "<memory>"
    _country_index: Mapping[str, Mapping[str, Country]] = field(
        init=False, repr=False, compare=False
    )
    _language_index: Mapping[str, Mapping[str, Language]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Build the read-only code indexes."""
        country_index = {
            code_type.field: _build_index(self.countries, code_type.field)
            for code_type in CountryCodeType
        }
        language_index = {
            str(fld): _build_index(self.languages, str(fld))
            for fld in _LANGUAGE_INDEX_FIELDS
        }
        object.__setattr__(self, "_country_index", MappingProxyType(country_index))
        object.__setattr__(self, "_language_index", MappingProxyType(language_index))
        logger.debug(
            "Built code indexes for %s: %d country keys, %d language keys",
            self.source,
            sum(len(index) for index in country_index.values()),
            sum(len(index) for index in language_index.values()),
        )

    def country_by(self, code_type: CountryCodeType, code: str) -> Country | None:
        """First country whose ``code_type`` field equals ``code``."""
        return self._country_index[code_type.field].get(code)

    def language_by(self, fld: LanguageCodeField, code: str) -> Language | None:
        """First language whose ``fld`` field equals ``code``."""
        return self._language_index[str(fld)].get(code)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the on-disk document layout."""
        return {
            "countries": [c.to_dict() for c in self.countries],
            "languages": [lang.to_dict() for lang in self.languages],
            "languageFamilies": list(self.language_families),
            "locales": [
                [t.language, t.region] + ([t.script] if t.script else [])
                for t in self.locales
            ],
        }
