"""Core utilities shared across the dataset and lookup layers.

Exports:
    BabelImportError: Raised when an interop helper needs Babel and it is missing
    is_babel_available: Check whether Babel is importable
    require_babel: Fail fast when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
