"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "ErrorCode",
]


class ErrorCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (caller supplied an unusable argument)
        2000-2999: Lookup errors (well-formed input, no matching record)
        3000-3999: Dataset errors (bundled or injected data is unusable)
        4000-4999: Integrity warnings (cross-reference consistency)
    """

    # Input errors (1000-1999)
    EMPTY_INPUT = 1001
    INVALID_CODE_FORMAT = 1002
    INVALID_CODE_TYPE = 1003

    # Lookup errors (2000-2999)
    COUNTRY_NOT_FOUND = 2001
    LANGUAGE_NOT_FOUND = 2002
    UNKNOWN_FAMILY = 2003

    # Dataset errors (3000-3999)
    DATASET_UNREADABLE = 3001
    DATASET_MALFORMED = 3002
    DATASET_FAMILY_UNKNOWN = 3003

    # Integrity warnings (4000-4999)
    DANGLING_LANGUAGE_REFERENCE = 4001
    DANGLING_COUNTRY_REFERENCE = 4002
    ASYMMETRIC_REFERENCE = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Offending caller input, truncated (None if not applicable)
        source: Dataset source description (dataset errors only)
        severity: Error severity level
    """

    code: ErrorCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default multi-line style.

        Example output:
            error[COUNTRY_NOT_FOUND]: There is no country with code 'XX'
              = input: XX
              = help: Use country_code_exists() to test a code before fetching it

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
