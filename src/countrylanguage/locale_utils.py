"""Locale string utilities.

Centralizes locale identifier formatting and BCP-47 to POSIX conversion.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from countrylanguage.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale

    from countrylanguage.dataset.schema import LocaleTriple

__all__ = [
    "format_locales",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while POSIX and the dataset use
    underscores (en_US).

    Example:
        >>> normalize_locale("az-Cyrl-AZ")
        'az_Cyrl_AZ'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def format_locales(triples: Iterable[LocaleTriple], mode: bool = False) -> list[str]:
    """Format each locale triple as an underscore-joined string.

    Args:
        triples: Locale triples in the desired output order
        mode: False for language_region[_script], True for
            language[_script]_region

    Returns:
        One string per triple, in input order.

    Example:
        >>> format_locales([LocaleTriple("az", "AZ", "Cyrl")], mode=True)
        ['az_Cyrl_AZ']
    """
    return [triple.format(mode) for triple in triples]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("sr-Latn-RS").script
        'Latn'
    """
    return get_locale_class().parse(normalize_locale(locale_code))
