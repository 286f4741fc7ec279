"""Shared constants for countrylanguage.

Centralised configuration constants used across the dataset, lookup, and
diagnostics packages. Placing constants here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundled dataset
    "DATASET_PACKAGE",
    "DATASET_RESOURCE",
    "DATASET_ENCODING",
    # Dataset top-level keys
    "KEY_COUNTRIES",
    "KEY_LANGUAGES",
    "KEY_LANGUAGE_FAMILIES",
    "KEY_LOCALES",
    # Code lengths
    "ALPHA_2_LENGTH",
    "ALPHA_3_LENGTH",
    # Locale formatting
    "LOCALE_SEPARATOR",
    # Diagnostics
    "MAX_REPORTED_INPUT_LENGTH",
]

# ============================================================================
# BUNDLED DATASET
# ============================================================================

DATASET_PACKAGE: str = "countrylanguage.dataset.data"
"""Package holding the bundled dataset resource."""

DATASET_RESOURCE: str = "data.json"
"""File name of the bundled dataset inside DATASET_PACKAGE."""

DATASET_ENCODING: str = "utf-8"

# ============================================================================
# DATASET TOP-LEVEL KEYS
# ============================================================================

KEY_COUNTRIES: str = "countries"
KEY_LANGUAGES: str = "languages"
KEY_LANGUAGE_FAMILIES: str = "languageFamilies"
KEY_LOCALES: str = "locales"

# ============================================================================
# CODE LENGTHS
# ============================================================================
#
# Country: 2 -> alpha-2, 3 -> alpha-3.
# Language: 2 -> ISO-639-1, 3 -> ISO-639-2 / 2en / 3 (tried in that order).

ALPHA_2_LENGTH: int = 2
ALPHA_3_LENGTH: int = 3

# ============================================================================
# LOCALE FORMATTING
# ============================================================================

LOCALE_SEPARATOR: str = "_"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# User input echoed into error messages is truncated to this many characters.
MAX_REPORTED_INPUT_LENGTH: int = 50
