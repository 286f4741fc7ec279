"""Pytest configuration for the countrylanguage test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fixtures:
- fixture_document: small hand-written dataset document with known edge cases
- cl: CountryLanguage over fixture_document
- bundled: CountryLanguage over the dataset shipped with the package
"""

import copy
import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from countrylanguage import CountryLanguage, MappingDatasetLoader

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# DATASET FIXTURES
# =============================================================================

# Edge cases covered:
# - FR/BE/MA share French; MA also lists Arabic
# - ZZ lists a language code nothing carries (dangling)
# - AQ has no languages at all
# - kab has no ISO-639-1 code and is referenced by its 3-letter code
# - fre is the iso639_2en code of French; fra is iso639_2 and iso639_3
# - "xyz" is the iso639_2 of one language and the iso639_3 of another,
#   so 3-letter precedence is observable
# - "Niger-Congo" has no member languages
FIXTURE_DOCUMENT: dict[str, Any] = {
    "countries": [
        {
            "code_2": "FR",
            "code_3": "FRA",
            "numCode": "250",
            "name": "France",
            "languages": ["fr"],
            "langCultureMs": [
                {
                    "langCultureName": "fr-FR",
                    "displayName": "French - France",
                    "cultureCode": "0x040C",
                }
            ],
        },
        {
            "code_2": "BE",
            "code_3": "BEL",
            "numCode": "056",
            "name": "Belgium",
            "languages": ["nl", "fr"],
        },
        {
            "code_2": "MA",
            "code_3": "MAR",
            "numCode": "504",
            "name": "Morocco",
            "languages": ["ar", "fr", "kab"],
            "langCultureMs": [
                {
                    "langCultureName": "ar-MA",
                    "displayName": "Arabic - Morocco",
                    "cultureCode": "0x1801",
                }
            ],
        },
        {
            "code_2": "AQ",
            "code_3": "ATA",
            "numCode": "010",
            "name": "Antarctica",
            "languages": [],
        },
        {
            "code_2": "ZZ",
            "code_3": "ZZZ",
            "numCode": "999",
            "name": "Nowhere",
            "languages": ["qq"],
        },
    ],
    "languages": [
        {
            "iso639_1": "fr",
            "iso639_2": "fra",
            "iso639_2en": "fre",
            "iso639_3": "fra",
            "name": ["French"],
            "nativeName": ["français"],
            "direction": "LTR",
            "family": "Indo-European",
            "countries": ["FR", "BE", "MA"],
            "langCultureMs": [
                {
                    "langCultureName": "fr-FR",
                    "displayName": "French - France",
                    "cultureCode": "0x040C",
                },
                {
                    "langCultureName": "fr-BE",
                    "displayName": "French - Belgium",
                    "cultureCode": "0x080C",
                },
            ],
        },
        {
            "iso639_1": "nl",
            "iso639_2": "nld",
            "iso639_2en": "dut",
            "iso639_3": "nld",
            "name": ["Dutch", "Flemish"],
            "nativeName": ["Nederlands", "Vlaams"],
            "direction": "LTR",
            "family": "Indo-European",
            "countries": ["BE"],
        },
        {
            "iso639_1": "ar",
            "iso639_2": "ara",
            "iso639_2en": "ara",
            "iso639_3": "ara",
            "name": ["Arabic"],
            "nativeName": ["العربية"],
            "direction": "RTL",
            "family": "Afro-Asiatic",
            "countries": ["MA"],
        },
        {
            "iso639_1": "",
            "iso639_2": "kab",
            "iso639_2en": "kab",
            "iso639_3": "kab",
            "name": ["Kabyle"],
            "nativeName": ["Taqbaylit"],
            "direction": "LTR",
            "family": "Afro-Asiatic",
            "countries": ["MA"],
        },
        {
            "iso639_1": "",
            "iso639_2": "abc",
            "iso639_2en": "abc",
            "iso639_3": "xyz",
            "name": ["Second Claimant"],
            "nativeName": ["Second Claimant"],
            "direction": "LTR",
            "family": "Afro-Asiatic",
            "countries": [],
        },
        {
            "iso639_1": "",
            "iso639_2": "xyz",
            "iso639_2en": "xyq",
            "iso639_3": "xyw",
            "name": ["First Claimant"],
            "nativeName": ["First Claimant"],
            "direction": "LTR",
            "family": "Afro-Asiatic",
            "countries": ["FR"],
        },
    ],
    "languageFamilies": ["Afro-Asiatic", "Indo-European", "Niger-Congo"],
    "locales": [
        ["fr", "FR"],
        ["fr", "BE"],
        ["az", "AZ", "Cyrl"],
        ["ar", "MA", ""],
    ],
}


@pytest.fixture
def fixture_document() -> dict[str, Any]:
    """Fresh deep copy of the fixture dataset document."""
    return copy.deepcopy(FIXTURE_DOCUMENT)


@pytest.fixture
def cl(fixture_document: dict[str, Any]) -> CountryLanguage:
    """CountryLanguage over the fixture dataset, integrity check disabled."""
    return CountryLanguage(MappingDatasetLoader(fixture_document, "fixture"), validate=False)


@pytest.fixture(scope="session")
def bundled() -> CountryLanguage:
    """CountryLanguage over the bundled dataset (loaded once per session)."""
    return CountryLanguage()
