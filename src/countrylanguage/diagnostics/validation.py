"""Validation result for dataset integrity checks.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic, ErrorCode

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a dataset integrity check.

    Integrity findings are warnings: a dataset with dangling or one-sided
    references still loads and answers queries.

    Attributes:
        warnings: Findings in dataset iteration order
    """

    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True when no findings were reported."""
        return not self.warnings

    @property
    def warning_count(self) -> int:
        """Number of findings."""
        return len(self.warnings)

    def by_code(self, code: ErrorCode) -> tuple[Diagnostic, ...]:
        """Findings with the given code."""
        return tuple(w for w in self.warnings if w.code is code)
