"""Core error types shared across syntax and runtime layers.

Provides error types that need to be importable from both syntax and runtime
packages without creating circular dependencies.

Python 3.13+.
"""

from dtlexengine.diagnostics import DateFormatError
from dtlexengine.diagnostics.codes import Diagnostic

__all__ = ["FormattingError"]


class FormattingError(DateFormatError):
    """Raised when locale-aware rendering of a directive fails.

    Covers CLDR lookups that Babel cannot answer (missing names, unknown
    plural categories) and values outside the range a directive accepts.
    The error carries a fallback_value so that error-collecting callers can
    still emit usable output.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
