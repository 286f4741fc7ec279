"""Hypothesis strategies for countrylanguage property-based testing.

Strategies are organized by domain:

- codes: country and language codes drawn from the bundled dataset, case
  variants, and malformed codes

Usage:
    from tests.strategies import bundled_alpha2_codes, case_variants
    from tests.strategies.codes import malformed_country_codes
"""

from .codes import (
    bundled_alpha2_codes,
    bundled_alpha3_codes,
    bundled_family_names,
    bundled_iso639_1_codes,
    bundled_iso639_3_codes,
    bundled_numeric_codes,
    case_variants,
    malformed_country_codes,
    malformed_language_codes,
    unknown_alpha2_codes,
)

__all__ = [
    "bundled_alpha2_codes",
    "bundled_alpha3_codes",
    "bundled_family_names",
    "bundled_iso639_1_codes",
    "bundled_iso639_3_codes",
    "bundled_numeric_codes",
    "case_variants",
    "malformed_country_codes",
    "malformed_language_codes",
    "unknown_alpha2_codes",
]
