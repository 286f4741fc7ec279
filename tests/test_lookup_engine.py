"""Tests for single-record lookup and one-hop expansion.

Tests cover:
- find_country / find_language normalization and code-scheme precedence
- get_country / get_language with and without expansion
- One-hop limit: embedded records carry codes, never embedded records
- Dangling references skipped with a warning
- Error taxonomy: empty input, bad format, not found
"""

import logging
from typing import Any

import pytest

from countrylanguage import (
    Country,
    CountryLanguage,
    CountryView,
    EmptyInputError,
    InvalidCodeFormatError,
    Language,
    LanguageView,
    NotFoundError,
)
from countrylanguage.dataset import parse_dataset
from countrylanguage.diagnostics import ErrorCode
from countrylanguage.lookup import LookupEngine


@pytest.fixture
def engine(fixture_document: dict[str, Any]) -> LookupEngine:
    """LookupEngine over the fixture dataset."""
    return LookupEngine(parse_dataset(fixture_document, "fixture"))


class TestFindCountry:
    """Tests for raw country lookup."""

    @pytest.mark.parametrize("code", ["MA", "ma", "Ma", "MAR", "mar"])
    def test_alpha2_and_alpha3_any_case(self, engine: LookupEngine, code: str) -> None:
        """Both alphabetic schemes resolve, case-insensitively."""
        assert engine.find_country(code).name == "Morocco"

    def test_numeric_code_not_accepted(self, engine: LookupEngine) -> None:
        """Three digits are treated as an alpha-3 code and miss."""
        with pytest.raises(NotFoundError):
            engine.find_country("504")

    def test_not_found_carries_diagnostic(self, engine: LookupEngine) -> None:
        """A miss raises NotFoundError with the normalized code."""
        with pytest.raises(NotFoundError) as exc_info:
            engine.find_country("xx")
        assert exc_info.value.code is ErrorCode.COUNTRY_NOT_FOUND
        assert str(exc_info.value) == "There is no country with code 'XX'"

    def test_not_found_is_lookup_error(self, engine: LookupEngine) -> None:
        """NotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            engine.find_country("QQQ")

    @pytest.mark.parametrize("code", ["M", "MORO", "MAROC"])
    def test_bad_length(self, engine: LookupEngine, code: str) -> None:
        """Lengths other than 2 and 3 are a format error."""
        with pytest.raises(InvalidCodeFormatError, match="Wrong type of country code"):
            engine.find_country(code)

    @pytest.mark.parametrize("code", ["", "   ", None, 250])
    def test_empty_or_non_string(self, engine: LookupEngine, code: object) -> None:
        """Missing, blank and non-string codes are EmptyInputError."""
        with pytest.raises(EmptyInputError):
            engine.find_country(code)


class TestFindLanguage:
    """Tests for raw language lookup and three-letter precedence."""

    @pytest.mark.parametrize("code", ["fr", "FR", "fra", "FRA", "fre"])
    def test_every_scheme_resolves(self, engine: LookupEngine, code: str) -> None:
        """ISO-639-1, -2, -2en and -3 codes all find French."""
        assert engine.find_language(code).name == ("French",)

    def test_language_without_two_letter_code(self, engine: LookupEngine) -> None:
        """A language lacking iso639_1 is reachable by its 3-letter code."""
        kabyle = engine.find_language("kab")
        assert kabyle.iso639_1 is None
        assert kabyle.name == ("Kabyle",)

    def test_iso639_2_wins_over_iso639_3(self, engine: LookupEngine) -> None:
        """When two languages claim a code, the iso639_2 holder is returned."""
        assert engine.find_language("xyz").name == ("First Claimant",)

    def test_iso639_2en_wins_over_iso639_3(
        self, fixture_document: dict[str, Any]
    ) -> None:
        """The English-derived code is tried before the ISO-639-3 code."""
        fixture_document["languages"][4]["iso639_2en"] = "ara"
        engine = LookupEngine(parse_dataset(fixture_document))
        assert engine.find_language("ara").name == ("Arabic",)
        fixture_document["languages"][2]["iso639_2"] = "arb"
        fixture_document["languages"][2]["iso639_2en"] = "arb"
        engine = LookupEngine(parse_dataset(fixture_document))
        assert engine.find_language("ara").name == ("Second Claimant",)

    def test_not_found(self, engine: LookupEngine) -> None:
        """A miss names the lower-cased code."""
        with pytest.raises(NotFoundError, match="There is no language with code 'zz'"):
            engine.find_language("ZZ")

    @pytest.mark.parametrize("code", ["f", "fren", "french"])
    def test_bad_length(self, engine: LookupEngine, code: str) -> None:
        """Lengths other than 2 and 3 are a format error."""
        with pytest.raises(InvalidCodeFormatError, match="Wrong type of language code"):
            engine.find_language(code)


class TestGetCountry:
    """Tests for country fetch with expansion."""

    def test_unexpanded_returns_raw_record(self, engine: LookupEngine) -> None:
        """expand=False returns the dataset record with language codes."""
        country = engine.get_country("MA", expand=False)
        assert isinstance(country, Country)
        assert country.languages == ("ar", "fr", "kab")
        assert country is engine.dataset.countries[2]

    def test_expanded_embeds_languages_in_order(self, engine: LookupEngine) -> None:
        """expand=True embeds one Language per reference, in list order."""
        view = engine.get_country("MA")
        assert isinstance(view, CountryView)
        assert [lang.iso639_3 for lang in view.languages] == ["ara", "fra", "kab"]
        assert all(isinstance(lang, Language) for lang in view.languages)

    def test_expansion_is_one_hop(self, engine: LookupEngine) -> None:
        """Embedded languages keep their countries as codes."""
        view = engine.get_country("BE")
        french = view.languages[1]
        assert french.countries == ("FR", "BE", "MA")

    def test_scalar_fields_preserved(self, engine: LookupEngine) -> None:
        """Expansion changes only the languages field."""
        raw = engine.get_country("FR", expand=False)
        view = engine.get_country("FR")
        assert (view.code_2, view.code_3, view.num_code, view.name) == (
            raw.code_2, raw.code_3, raw.num_code, raw.name,
        )
        assert view.lang_culture_ms == raw.lang_culture_ms

    def test_country_without_languages(self, engine: LookupEngine) -> None:
        """An empty language list expands to an empty tuple."""
        assert engine.get_country("AQ").languages == ()

    def test_dangling_reference_skipped_with_warning(
        self, engine: LookupEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown language codes are dropped from the expansion and logged."""
        with caplog.at_level(logging.WARNING, logger="countrylanguage.lookup.engine"):
            view = engine.get_country("ZZ")
        assert view.languages == ()
        assert "skipping language reference 'qq'" in caplog.text

    def test_repeated_calls_equal(self, engine: LookupEngine) -> None:
        """Lookups are idempotent."""
        assert engine.get_country("MA") == engine.get_country("mar")


class TestGetLanguage:
    """Tests for language fetch with expansion."""

    def test_expanded_embeds_countries(self, engine: LookupEngine) -> None:
        """expand=True embeds raw Country records in list order."""
        view = engine.get_language("fre")
        assert isinstance(view, LanguageView)
        assert [c.code_2 for c in view.countries] == ["FR", "BE", "MA"]

    def test_expansion_is_one_hop(self, engine: LookupEngine) -> None:
        """Embedded countries keep their languages as codes."""
        view = engine.get_language("ar")
        assert view.countries[0].languages == ("ar", "fr", "kab")

    def test_unexpanded(self, engine: LookupEngine) -> None:
        """expand=False returns country codes."""
        language = engine.get_language("nl", expand=False)
        assert isinstance(language, Language)
        assert language.countries == ("BE",)

    def test_asymmetric_reference_still_expands(self, engine: LookupEngine) -> None:
        """A language may list a country that does not list it back."""
        view = engine.get_language("xyz")
        assert [c.code_2 for c in view.countries] == ["FR"]
        assert view.countries[0].languages == ("fr",)


class TestFacadeLookup:
    """The facade delegates to the engine over the loaded dataset."""

    def test_get_country_via_facade(self, cl: CountryLanguage) -> None:
        """CountryLanguage.get_country returns the same view as the engine."""
        view = cl.get_country("be")
        assert view.name == "Belgium"
        assert [lang.iso639_1 for lang in view.languages] == ["nl", "fr"]

    def test_get_language_unexpanded_via_facade(self, cl: CountryLanguage) -> None:
        """expand is forwarded."""
        assert cl.get_language("kab", expand=False).countries == ("MA",)

    def test_bundled_morocco(self, bundled: CountryLanguage) -> None:
        """The bundled dataset resolves Morocco by either alphabetic code."""
        view = bundled.get_country("MAR")
        assert view.code_2 == "MA"
        assert view.num_code == "504"
        assert [lang.iso639_3 for lang in view.languages] == ["ara", "fra"]
