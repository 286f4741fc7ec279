"""Tests for the CountryLanguage facade and the module-level API.

Tests cover:
- Lazy loading: the loader runs once, on first query, even under concurrency
- Load failures cached and re-raised without retrying
- Optional cross-reference validation on load
- Shared default instance and clear_default_cache()
- Module-level functions delegate to the default instance
"""

import logging
import threading
import time
from collections.abc import Mapping
from typing import Any

import pytest

import countrylanguage
from countrylanguage import CountryLanguage, DatasetLoadError, MappingDatasetLoader
from countrylanguage.diagnostics import ErrorCode
from countrylanguage.query import clear_default_cache, get_default


class CountingLoader:
    """Loader serving a fixed document and counting load() calls."""

    def __init__(self, document: Mapping[str, Any], delay: float = 0.0) -> None:
        self.document = document
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def load(self) -> Mapping[str, Any]:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return self.document

    def describe(self) -> str:
        return "counting"


class BrokenLoader:
    """Loader whose source cannot be read."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls = 0
        self.error = error if error is not None else OSError("disk on fire")

    def load(self) -> Mapping[str, Any]:
        self.calls += 1
        raise self.error

    def describe(self) -> str:
        return "broken"


class TestLazyLoading:
    """The dataset is loaded on first use, exactly once."""

    def test_construction_does_not_load(self, fixture_document: dict[str, Any]) -> None:
        """Creating the facade does not touch the loader."""
        loader = CountingLoader(fixture_document)
        CountryLanguage(loader)
        assert loader.calls == 0

    def test_loads_once_across_queries(self, fixture_document: dict[str, Any]) -> None:
        """Many queries share one load."""
        loader = CountingLoader(fixture_document)
        cl = CountryLanguage(loader, validate=False)
        cl.get_country("FR")
        cl.get_language_codes(3)
        cl.country_code_exists("BE")
        cl.get_locales()
        assert loader.calls == 1

    def test_concurrent_first_access_loads_once(
        self, fixture_document: dict[str, Any]
    ) -> None:
        """Threads racing on the first query trigger a single load."""
        loader = CountingLoader(fixture_document, delay=0.05)
        cl = CountryLanguage(loader, validate=False)
        barrier = threading.Barrier(8)
        results: list[str] = []
        results_lock = threading.Lock()

        def query() -> None:
            barrier.wait()
            name = cl.get_country("MA").name
            with results_lock:
                results.append(name)

        threads = [threading.Thread(target=query) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert loader.calls == 1
        assert results == ["Morocco"] * 8

    def test_repr_reports_state(self, fixture_document: dict[str, Any]) -> None:
        """repr shows the source and whether the dataset is loaded."""
        cl = CountryLanguage(MappingDatasetLoader(fixture_document, "fixture"), validate=False)
        assert repr(cl) == "CountryLanguage(source='fixture', not loaded)"
        cl.get_country_codes()
        assert repr(cl) == "CountryLanguage(source='fixture', loaded)"

    def test_dataset_property(self, cl: CountryLanguage) -> None:
        """dataset exposes the loaded Dataset."""
        assert cl.dataset.source == "fixture"
        assert len(cl.dataset.countries) == 5


class TestLoadFailure:
    """A failed load is fatal and remembered."""

    def test_error_raised_on_first_query(self) -> None:
        """The first query surfaces DatasetLoadError."""
        cl = CountryLanguage(BrokenLoader())
        with pytest.raises(DatasetLoadError) as exc_info:
            cl.get_country("FR")
        assert exc_info.value.code is ErrorCode.DATASET_UNREADABLE
        assert "disk on fire" in str(exc_info.value)

    def test_error_cached_not_retried(self) -> None:
        """Later queries re-raise the same error without calling the loader."""
        loader = BrokenLoader()
        cl = CountryLanguage(loader)
        with pytest.raises(DatasetLoadError) as first:
            cl.get_countries()
        with pytest.raises(DatasetLoadError) as second:
            cl.country_code_exists("FR")
        assert second.value is first.value
        assert loader.calls == 1

    def test_foreign_loader_error_wrapped_and_cached(self) -> None:
        """A KeyError from a custom loader becomes DatasetLoadError, loaded once."""
        loader = BrokenLoader(KeyError("countries"))
        cl = CountryLanguage(loader)
        with pytest.raises(DatasetLoadError) as first:
            cl.get_country("MA")
        with pytest.raises(DatasetLoadError) as second:
            cl.get_country("MA")
        assert first.value.code is ErrorCode.DATASET_UNREADABLE
        assert isinstance(first.value.__cause__, KeyError)
        assert second.value is first.value
        assert loader.calls == 1

    def test_existence_check_does_not_hide_load_error(self) -> None:
        """Existence checks swallow lookup misses, not load failures."""
        cl = CountryLanguage(BrokenLoader())
        with pytest.raises(DatasetLoadError):
            cl.language_code_exists("fr")

    def test_malformed_document(self, fixture_document: dict[str, Any]) -> None:
        """Structural problems surface as DatasetLoadError."""
        del fixture_document["locales"]
        cl = CountryLanguage(MappingDatasetLoader(fixture_document))
        with pytest.raises(DatasetLoadError, match="missing key 'locales'"):
            cl.get_locales()


class TestValidationOnLoad:
    """validate=True checks cross-references once and only logs."""

    def test_findings_logged(
        self, fixture_document: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Inconsistent fixture data is reported as a warning."""
        cl = CountryLanguage(MappingDatasetLoader(fixture_document, "fixture"))
        with caplog.at_level(logging.WARNING, logger="countrylanguage.validation"):
            assert cl.get_country("FR").name == "France"
        assert "Dataset fixture has 2 cross-reference findings" in caplog.text

    def test_disabled(
        self, fixture_document: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        """validate=False skips the check."""
        cl = CountryLanguage(MappingDatasetLoader(fixture_document, "fixture"), validate=False)
        with caplog.at_level(logging.WARNING, logger="countrylanguage.validation"):
            cl.get_country("FR")
        assert "cross-reference findings" not in caplog.text


class TestDefaultInstance:
    """Tests for the shared default instance."""

    @pytest.fixture(autouse=True)
    def _reset_default(self) -> Any:
        clear_default_cache()
        yield
        clear_default_cache()

    def test_default_is_shared(self) -> None:
        """get_default returns the same instance until cleared."""
        assert get_default() is get_default()

    def test_clear_default_cache(self) -> None:
        """Clearing creates a fresh instance on next use."""
        first = get_default()
        clear_default_cache()
        assert get_default() is not first

    def test_default_reads_bundled_dataset(self) -> None:
        """The default instance uses the packaged dataset."""
        assert get_default().dataset.source == "package:countrylanguage.dataset.data/data.json"


class TestModuleLevelApi:
    """Module-level functions answer from the bundled dataset."""

    def test_get_country(self) -> None:
        """get_country expands by default."""
        view = countrylanguage.get_country("ma")
        assert view.name == "Morocco"
        assert [lang.iso639_1 for lang in view.languages] == ["ar", "fr"]

    def test_get_language_unexpanded(self) -> None:
        """get_language forwards expand."""
        french = countrylanguage.get_language("fre", expand=False)
        assert "MA" in french.countries

    def test_listings(self) -> None:
        """Code listings and existence checks."""
        assert "MAR" in countrylanguage.get_country_codes(3)
        assert "504" in countrylanguage.get_country_codes(1)
        assert "fre" in countrylanguage.get_language_codes(2)
        assert countrylanguage.country_code_exists("504")
        assert countrylanguage.language_code_exists("fre")
        assert not countrylanguage.language_code_exists("zz")

    def test_related_codes(self) -> None:
        """Identifying codes of related records."""
        codes = countrylanguage.get_country_languages("MA")
        assert [c.iso639_3 for c in codes] == ["ara", "fra"]
        assert "MA" in [c.code_2 for c in countrylanguage.get_language_countries("ar")]

    def test_whole_dataset(self) -> None:
        """Whole-dataset views agree with each other."""
        assert len(countrylanguage.get_countries()) == len(countrylanguage.get_country_codes())
        assert len(countrylanguage.get_languages()) == len(countrylanguage.get_language_codes(3))
        assert "Afro-Asiatic" in countrylanguage.get_language_families()
        assert "az_Cyrl_AZ" in countrylanguage.get_locales(True)

    def test_language_cultures(self) -> None:
        """Language-culture entries come through unchanged."""
        names = [c.lang_culture_name for c in countrylanguage.get_country_ms_locales("MA")]
        assert "ar-MA" in names
        assert countrylanguage.get_language_ms_locales("ar")

    def test_family_members(self) -> None:
        """Every member belongs to the requested family."""
        members = countrylanguage.get_language_family_members("afro-asiatic")
        assert members
        assert {m.family for m in members} == {"Afro-Asiatic"}
