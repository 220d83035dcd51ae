"""Diagnostic codes and data structures.

Defines error codes, pattern spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (tokenization failures)
        2000-2999: Directive errors (rendering failures)
        3000-3999: Configuration errors (vocabulary, locale, time zone, value type)
    """

    # Pattern errors (1000-1999)
    ESCAPE_UNTERMINATED = 1001
    PATTERN_NOT_STRING = 1002

    # Directive errors (2000-2999)
    DIRECTIVE_UNSUPPORTED = 2001
    FORMATTING_FAILED = 2002
    ORDINAL_SUFFIX_UNAVAILABLE = 2003

    # Configuration errors (3000-3999)
    VOCABULARY_UNKNOWN = 3001
    LOCALE_UNKNOWN = 3002
    LOCALE_INVALID = 3003
    TIME_ZONE_UNKNOWN = 3004
    VALUE_TYPE_UNSUPPORTED = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a problem inside a format pattern.

    Patterns are single-line, so a span is a pair of character offsets.
    Offsets count Unicode code points, not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start, as shown to users."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context (pattern,
    offset, directive) to locate a failure without re-running the format call.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the pattern (None when not pattern-related)
        pattern: The format pattern being processed, for snippet rendering
        hint: Suggestion for fixing the error
        directive: Directive string involved in the failure
        locale_code: Locale in effect when the failure happened
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    pattern: str | None = None
    hint: str | None = None
    directive: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[ESCAPE_UNTERMINATED]: Escape '[' at offset 5 is never closed
              --> pattern, column 6
               |
               | YYYY [Year
               |      ^^^^^
              = help: Close the escape with ']' or remove the '['

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
