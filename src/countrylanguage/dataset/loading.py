"""Dataset loading infrastructure.

Provides the protocol for dataset loaders, the bundled-resource, filesystem
and in-memory implementations, and the parser that turns the raw document
into a typed Dataset.

Components:
    DatasetLoader - Protocol for reading the raw dataset document
    PackageDatasetLoader - Reads the dataset bundled inside the package
    PathDatasetLoader - Reads a dataset from an explicit filesystem path
    MappingDatasetLoader - Serves an already-decoded document
    parse_dataset - Validates a raw document and builds a Dataset
    load_dataset - Runs a loader and parses its output

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Protocol

from countrylanguage.constants import (
    ALPHA_2_LENGTH,
    ALPHA_3_LENGTH,
    DATASET_ENCODING,
    DATASET_PACKAGE,
    DATASET_RESOURCE,
    KEY_COUNTRIES,
    KEY_LANGUAGE_FAMILIES,
    KEY_LANGUAGES,
    KEY_LOCALES,
)
from countrylanguage.diagnostics import DatasetLoadError, ErrorTemplate
from countrylanguage.enums import ScriptDirection

from .schema import Country, Dataset, Language, LocaleCulture, LocaleTriple

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DatasetLoader",
    # Concrete loaders
    "PackageDatasetLoader",
    "PathDatasetLoader",
    "MappingDatasetLoader",
    # Parsing
    "parse_dataset",
    "load_dataset",
]

logger = logging.getLogger(__name__)


# ============================================================================
# LOADERS
# ============================================================================


class DatasetLoader(Protocol):
    """Protocol for reading the raw dataset document.

    Implementations return the decoded document: a mapping with the keys
    ``countries``, ``languages``, ``languageFamilies`` and ``locales``.

    This is a Protocol (structural typing) rather than ABC so embedders can
    supply any object with matching methods.

    Example:
        >>> class HttpLoader:
        ...     def load(self) -> Mapping[str, Any]:
        ...         return fetch_json("https://example.org/data.json")
        ...     def describe(self) -> str:
        ...         return "https://example.org/data.json"
        ...
        >>> cl = CountryLanguage(HttpLoader())
    """

    def load(self) -> Mapping[str, Any]:
        """Read and decode the dataset document.

        Raises:
            OSError: If the underlying resource cannot be read
            ValueError: If the resource is not valid JSON
        """
        ...

    def describe(self) -> str:
        """Return a human-readable description of the source for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class PackageDatasetLoader:
    """Reads the dataset shipped inside the installed package.

    Uses importlib.resources, so it works from wheels and zip imports and
    never depends on the current working directory.

    Attributes:
        package: Dotted package name holding the resource
        resource: Resource file name
    """

    package: str = DATASET_PACKAGE
    resource: str = DATASET_RESOURCE

    def load(self) -> Mapping[str, Any]:
        """Read and decode the bundled JSON resource."""
        text = resources.files(self.package).joinpath(self.resource).read_text(
            encoding=DATASET_ENCODING
        )
        return json.loads(text)  # type: ignore[no-any-return]

    def describe(self) -> str:
        """Return 'package:<package>/<resource>'."""
        return f"package:{self.package}/{self.resource}"


@dataclass(frozen=True, slots=True)
class PathDatasetLoader:
    """Reads a dataset JSON file from an explicit filesystem path.

    Relative paths are resolved once, at construction, so later changes of
    the working directory do not change what is loaded.

    Example:
        >>> loader = PathDatasetLoader("/srv/reference/data.json")
        >>> cl = CountryLanguage(loader)

    Attributes:
        path: Path to the JSON document
    """

    path: str | Path
    _resolved: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve the path eagerly."""
        object.__setattr__(self, "_resolved", Path(self.path).resolve())

    def load(self) -> Mapping[str, Any]:
        """Read and decode the JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON
        """
        with self._resolved.open(encoding=DATASET_ENCODING) as fh:
            return json.load(fh)  # type: ignore[no-any-return]

    def describe(self) -> str:
        """Return the resolved path."""
        return str(self._resolved)


@dataclass(frozen=True, slots=True)
class MappingDatasetLoader:
    """Serves an already-decoded dataset document.

    Attributes:
        data: Decoded document
        name: Description used in diagnostics
    """

    data: Mapping[str, Any]
    name: str = "<memory>"

    def load(self) -> Mapping[str, Any]:
        """Return the stored document."""
        return self.data

    def describe(self) -> str:
        """Return the configured name."""
        return self.name


# ============================================================================
# PARSING
# ============================================================================


class _DocumentParser:
    """Validating converter from the raw document to typed records.

    Every structural problem raises DatasetLoadError naming the offending
    location, e.g. ``languages[12].direction``.
    """

    def __init__(self, source: str) -> None:
        self._source = source

    def fail(self, location: str, reason: str) -> DatasetLoadError:
        return DatasetLoadError(ErrorTemplate.dataset_malformed(self._source, location, reason))

    def mapping(self, value: object, location: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise self.fail(location, f"expected object, got {type(value).__name__}")
        return value

    def sequence(self, value: object, location: str) -> Sequence[Any]:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise self.fail(location, f"expected array, got {type(value).__name__}")
        return value

    def string(self, value: object, location: str, *, length: int | None = None) -> str:
        if not isinstance(value, str) or not value:
            raise self.fail(location, "expected non-empty string")
        if length is not None and len(value) != length:
            raise self.fail(location, f"expected {length} characters, got {value!r}")
        return value

    def strings(self, value: object, location: str) -> tuple[str, ...]:
        # Some name fields hold a bare string instead of a one-element list.
        if isinstance(value, str):
            return (value,) if value else ()
        items = self.sequence(value, location)
        return tuple(self.string(item, f"{location}[{i}]") for i, item in enumerate(items))

    def cultures(self, value: object, location: str) -> tuple[LocaleCulture, ...]:
        if value is None:
            return ()
        result: list[LocaleCulture] = []
        for i, item in enumerate(self.sequence(value, location)):
            loc = f"{location}[{i}]"
            entry = self.mapping(item, loc)
            result.append(
                LocaleCulture(
                    lang_culture_name=self.string(
                        entry.get("langCultureName"), f"{loc}.langCultureName"
                    ),
                    display_name=self.string(entry.get("displayName"), f"{loc}.displayName"),
                    culture_code=self.string(entry.get("cultureCode"), f"{loc}.cultureCode"),
                )
            )
        return tuple(result)

    def num_code(self, value: object, location: str) -> str:
        # Numeric codes are zero-padded strings; integers are accepted and padded.
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return f"{value:03d}"
        text = self.string(value, location)
        if not text.isdigit():
            raise self.fail(location, f"expected digits, got {text!r}")
        return text.zfill(ALPHA_3_LENGTH)

    def country(self, value: object, location: str) -> Country:
        raw = self.mapping(value, location)
        return Country(
            num_code=self.num_code(raw.get("numCode"), f"{location}.numCode"),
            code_2=self.string(raw.get("code_2"), f"{location}.code_2", length=ALPHA_2_LENGTH),
            code_3=self.string(raw.get("code_3"), f"{location}.code_3", length=ALPHA_3_LENGTH),
            name=self.string(raw.get("name"), f"{location}.name"),
            languages=self.strings(raw.get("languages", []), f"{location}.languages"),
            lang_culture_ms=self.cultures(raw.get("langCultureMs"), f"{location}.langCultureMs"),
        )

    def language(self, value: object, location: str, families: frozenset[str]) -> Language:
        raw = self.mapping(value, location)
        iso639_1 = raw.get("iso639_1")
        if iso639_1 in (None, ""):
            iso639_1 = None
        else:
            iso639_1 = self.string(iso639_1, f"{location}.iso639_1", length=ALPHA_2_LENGTH)
        iso639_3 = self.string(
            raw.get("iso639_3"), f"{location}.iso639_3", length=ALPHA_3_LENGTH
        )

        direction_raw = raw.get("direction")
        try:
            direction = ScriptDirection(direction_raw)
        except ValueError:
            raise self.fail(
                f"{location}.direction", f"expected 'LTR' or 'RTL', got {direction_raw!r}"
            ) from None

        family = self.string(raw.get("family"), f"{location}.family")
        if family not in families:
            raise DatasetLoadError(
                ErrorTemplate.dataset_family_unknown(self._source, iso639_3, family)
            )

        return Language(
            iso639_1=iso639_1,
            iso639_2=self.string(
                raw.get("iso639_2"), f"{location}.iso639_2", length=ALPHA_3_LENGTH
            ),
            iso639_2en=self.string(
                raw.get("iso639_2en"), f"{location}.iso639_2en", length=ALPHA_3_LENGTH
            ),
            iso639_3=iso639_3,
            name=self.strings(raw.get("name", []), f"{location}.name"),
            native_name=self.strings(raw.get("nativeName", []), f"{location}.nativeName"),
            direction=direction,
            family=family,
            countries=self.strings(raw.get("countries", []), f"{location}.countries"),
            lang_culture_ms=self.cultures(raw.get("langCultureMs"), f"{location}.langCultureMs"),
        )

    def locale(self, value: object, location: str) -> LocaleTriple:
        parts = self.sequence(value, location)
        if len(parts) not in (2, 3):
            raise self.fail(location, f"expected 2 or 3 subtags, got {len(parts)}")
        language = self.string(parts[0], f"{location}[0]")
        region = self.string(parts[1], f"{location}[1]")
        script = parts[2] if len(parts) == 3 else None
        if script == "":
            script = None
        elif script is not None:
            script = self.string(script, f"{location}[2]")
        return LocaleTriple(language=language, region=region, script=script)


def parse_dataset(raw: object, source: str = "<memory>") -> Dataset:
    """Validate a decoded dataset document and build a Dataset.

    Args:
        raw: Decoded document (mapping with the four top-level keys)
        source: Description of where the document came from

    Returns:
        Immutable Dataset with code indexes built

    Raises:
        DatasetLoadError: If the document does not match the expected layout,
            or a language names a family absent from ``languageFamilies``
    """
    parser = _DocumentParser(source)
    document = parser.mapping(raw, "<root>")
    for key in (KEY_COUNTRIES, KEY_LANGUAGES, KEY_LANGUAGE_FAMILIES, KEY_LOCALES):
        if key not in document:
            raise parser.fail("<root>", f"missing key '{key}'")

    families = parser.strings(document[KEY_LANGUAGE_FAMILIES], KEY_LANGUAGE_FAMILIES)
    family_set = frozenset(families)

    countries = tuple(
        parser.country(item, f"{KEY_COUNTRIES}[{i}]")
        for i, item in enumerate(parser.sequence(document[KEY_COUNTRIES], KEY_COUNTRIES))
    )
    languages = tuple(
        parser.language(item, f"{KEY_LANGUAGES}[{i}]", family_set)
        for i, item in enumerate(parser.sequence(document[KEY_LANGUAGES], KEY_LANGUAGES))
    )
    locales = tuple(
        parser.locale(item, f"{KEY_LOCALES}[{i}]")
        for i, item in enumerate(parser.sequence(document[KEY_LOCALES], KEY_LOCALES))
    )

    return Dataset(
        countries=countries,
        languages=languages,
        language_families=families,
        locales=locales,
        source=source,
    )


def load_dataset(loader: DatasetLoader) -> Dataset:
    """Run ``loader`` and parse its output.

    Any exception raised by the loader (OSError, invalid JSON, or an error
    from a custom loader) is wrapped in DatasetLoadError with the original
    exception chained.

    Raises:
        DatasetLoadError: If the dataset cannot be read or is malformed
    """
    source = loader.describe()
    try:
        raw = loader.load()
    except Exception as e:
        logger.error("Failed to read dataset from %s: %s", source, e)
        raise DatasetLoadError(ErrorTemplate.dataset_unreadable(source, str(e))) from e

    try:
        dataset = parse_dataset(raw, source)
    except DatasetLoadError as e:
        logger.error("Rejected dataset from %s: %s", source, e)
        raise

    logger.info(
        "Loaded dataset from %s: %d countries, %d languages, %d families, %d locales",
        source,
        len(dataset.countries),
        len(dataset.languages),
        len(dataset.language_families),
        len(dataset.locales),
    )
    return dataset
