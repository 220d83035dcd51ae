"""Diagnostic system for date format errors.

Provides structured error diagnostics with codes, pattern spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DateFormatError,
    LocaleResolutionError,
    MalformedEscapeError,
    TimeZoneResolutionError,
    UnknownVocabularyError,
    UnsupportedDirectiveError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleResolutionError",
    "MalformedEscapeError",
    "OutputFormat",
    "SourceSpan",
    "TimeZoneResolutionError",
    "UnknownVocabularyError",
    "UnsupportedDirectiveError",
]
