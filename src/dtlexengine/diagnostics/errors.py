"""Exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object; the
Diagnostic is kept on the instance for tooling.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic

__all__ = [
    "DateFormatError",
    "LocaleResolutionError",
    "MalformedEscapeError",
    "TimeZoneResolutionError",
    "UnknownVocabularyError",
    "UnsupportedDirectiveError",
]


class DateFormatError(Exception):
    """Base exception for all dtlexengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedEscapeError(DateFormatError):
    """Escape start delimiter with no matching end delimiter.

    Terminal for the tokenize call that hit it; never retried.

    Attributes:
        pattern: The pattern being tokenized
        offset: Offset of the unmatched start delimiter
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str, offset: int) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.offset = offset


class UnsupportedDirectiveError(DateFormatError):
    """A recognized directive whose renderer is not implemented yet.

    Tokenization succeeds for such directives; this error is raised only
    when the driver renders the segment.

    Attributes:
        directive: The directive string (e.g. "YYYYYY")
        offset: Start offset of the directive in the pattern
    """

    def __init__(self, message: str | Diagnostic, *, directive: str, offset: int) -> None:
        super().__init__(message)
        self.directive = directive
        self.offset = offset


class UnknownVocabularyError(DateFormatError, LookupError):
    """Requested vocabulary is not registered.

    Attributes:
        name: Requested vocabulary name
        available: Names that are registered
    """

    def __init__(
        self, message: str | Diagnostic, *, name: str, available: Sequence[str] = ()
    ) -> None:
        super().__init__(message)
        self.name = name
        self.available = tuple(available)


class LocaleResolutionError(DateFormatError, ValueError):
    """Locale identifier is unknown to CLDR or malformed.

    Attributes:
        locale_code: The identifier (or joined candidates) that failed
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str) -> None:
        super().__init__(message)
        self.locale_code = locale_code


class TimeZoneResolutionError(DateFormatError, ValueError):
    """IANA time zone key could not be loaded.

    Attributes:
        time_zone: The requested zone key
    """

    def __init__(self, message: str | Diagnostic, *, time_zone: str) -> None:
        super().__init__(message)
        self.time_zone = time_zone
