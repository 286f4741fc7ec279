"""Exception hierarchy with structured diagnostics.

Every failure a query can produce is a CountryLanguageError subclass carrying
a Diagnostic. Subclasses also derive from the closest builtin (ValueError for
bad arguments, LookupError for misses) so callers can catch either way.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode

__all__ = [
    "CountryLanguageError",
    "DatasetLoadError",
    "EmptyInputError",
    "InvalidCodeFormatError",
    "InvalidCodeTypeError",
    "NotFoundError",
    "UnknownFamilyError",
]


class CountryLanguageError(Exception):
    """Base exception for all countrylanguage errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CountryLanguageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> ErrorCode | None:
        """Error code of the attached diagnostic, if any."""
        return self.diagnostic.code if self.diagnostic is not None else None


class EmptyInputError(CountryLanguageError, ValueError):
    """Code or family argument is missing, blank, or not a string."""


class InvalidCodeFormatError(CountryLanguageError, ValueError):
    """Code length matches no known scheme for the requested kind.

    Example:
        get_country("MORO")  <- four characters, neither alpha-2 nor alpha-3
    """


class InvalidCodeTypeError(CountryLanguageError, ValueError):
    """Code type selector is outside 1..3."""


class NotFoundError(CountryLanguageError, LookupError):
    """Well-formed code with no matching record."""


class UnknownFamilyError(CountryLanguageError, LookupError):
    """Family name is not in the dataset's language family set."""


class DatasetLoadError(CountryLanguageError):
    """Dataset resource is unreadable or malformed.

    Fatal: the dataset is static, so the load is never retried.
    """
