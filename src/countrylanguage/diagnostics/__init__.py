"""Diagnostic system for countrylanguage errors.

Provides structured error diagnostics with codes, hints, and formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode
from .errors import (
    CountryLanguageError,
    DatasetLoadError,
    EmptyInputError,
    InvalidCodeFormatError,
    InvalidCodeTypeError,
    NotFoundError,
    UnknownFamilyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "CountryLanguageError",
    "DatasetLoadError",
    "Diagnostic",
    "DiagnosticFormatter",
    "EmptyInputError",
    "ErrorCode",
    "ErrorTemplate",
    "InvalidCodeFormatError",
    "InvalidCodeTypeError",
    "NotFoundError",
    "OutputFormat",
    "UnknownFamilyError",
    "ValidationResult",
]
