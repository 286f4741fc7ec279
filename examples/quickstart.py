"""Quickstart example for countrylanguage.

This example demonstrates the basic lookups: single records, code listings,
cross-references between countries and languages, families and locales.

Note: Examples use the shared default instance (module-level functions).
Applications that load their own dataset should create a CountryLanguage
with a PathDatasetLoader instead.
"""

import logging

import countrylanguage
from countrylanguage import (
    CountryCodeType,
    CountryLanguage,
    LanguageCodeType,
    MappingDatasetLoader,
    NotFoundError,
)
from countrylanguage.diagnostics import DiagnosticFormatter, OutputFormat

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Single country
print("=" * 50)
print("Example 1: Country Lookup")
print("=" * 50)

morocco = countrylanguage.get_country("MA")
print(f"{morocco.name} ({morocco.code_2}/{morocco.code_3}/{morocco.num_code})")
for language in morocco.languages:
    print(f"  speaks {language.name[0]} [{language.iso639_3}], {language.direction}")
# Output:
# Morocco (MA/MAR/504)
#   speaks Arabic [ara], RTL
#   speaks French [fra], LTR

# Example 2: Any code scheme, any case
print("\n" + "=" * 50)
print("Example 2: Language Code Schemes")
print("=" * 50)

for code in ("fr", "FRA", "fre"):
    french = countrylanguage.get_language(code, expand=False)
    print(f"{code!r:7} -> {french.name[0]}, spoken in {len(french.countries)} countries")
# Output (all three codes): French, spoken in 48 countries

# Example 3: Code listings
print("\n" + "=" * 50)
print("Example 3: Code Listings")
print("=" * 50)

print("Alpha-3:", countrylanguage.get_country_codes(CountryCodeType.ALPHA_3)[:5])
print("ISO-639-2 (2en):", countrylanguage.get_language_codes(LanguageCodeType.ISO639_2)[:5])
print("Has 'MAR':", countrylanguage.country_code_exists("MAR"))
print("Has 'ZZ':", countrylanguage.country_code_exists("ZZ"))

# Example 4: Cross-references
print("\n" + "=" * 50)
print("Example 4: Cross-References")
print("=" * 50)

arabic = countrylanguage.get_language_countries("ar")
print("Arabic is spoken in", ", ".join(codes.code_2 for codes in arabic))
swiss = countrylanguage.get_country_languages("CH")
print("Languages of Switzerland:", [c.iso639_1 for c in swiss])

# Example 5: Families and locales
print("\n" + "=" * 50)
print("Example 5: Families and Locales")
print("=" * 50)

members = countrylanguage.get_language_family_members("uralic")
print("Uralic:", [m.name[0] for m in members])
region_first = countrylanguage.get_locales()
script_first = countrylanguage.get_locales(mode=True)
print("Locales, region first:", [loc for loc in region_first if loc.startswith("az_")])
print("Locales, script first:", [loc for loc in script_first if loc.startswith("az_")])
# Output:
# Uralic: ['Estonian', 'Finnish', 'Hungarian', 'Komi', 'Northern Sami']
# Locales, region first: ['az_AZ_Cyrl', 'az_AZ_Latn']
# Locales, script first: ['az_Cyrl_AZ', 'az_Latn_AZ']

# Example 6: Errors
print("\n" + "=" * 50)
print("Example 6: Error Handling")
print("=" * 50)

try:
    countrylanguage.get_country("XX")
except NotFoundError as e:
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

# Example 7: Custom dataset
print("\n" + "=" * 50)
print("Example 7: Custom Dataset")
print("=" * 50)

custom = CountryLanguage(
    MappingDatasetLoader(
        {
            "countries": [
                {
                    "code_2": "NZ",
                    "code_3": "NZL",
                    "numCode": 554,
                    "name": "New Zealand",
                    "languages": ["en", "mi"],
                },
            ],
            "languages": [
                {
                    "iso639_1": "en",
                    "iso639_2": "eng",
                    "iso639_2en": "eng",
                    "iso639_3": "eng",
                    "name": "English",
                    "nativeName": "English",
                    "direction": "LTR",
                    "family": "Indo-European",
                    "countries": ["NZ"],
                },
            ],
            "languageFamilies": ["Indo-European"],
            "locales": [["en", "NZ"]],
        },
        name="inline",
    )
)
# NZ lists "mi", which has no language record: logged as a warning
print(custom.get_country("nzl"))
