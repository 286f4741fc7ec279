"""Lookup layer: code resolution, record fetch with expansion, aggregations.

Exports:
    LookupEngine: Fetches records by code and expands cross-references one hop
    resolve_country_field, resolve_language_fields: Code scheme inference

Aggregation functions live in countrylanguage.lookup.aggregation.

Python 3.13+.
"""

from .engine import LookupEngine
from .resolver import resolve_country_field, resolve_language_fields

__all__ = ["LookupEngine", "resolve_country_field", "resolve_language_fields"]
