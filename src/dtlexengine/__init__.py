"""DTLexEngine - locale-aware date/time pattern formatting.

Formats date/time values with textual patterns such as "YYYY-MM-DD" or
"dddd, MMMM Do YYYY". A pattern is tokenized into literal and directive
segments under a directive vocabulary, then each directive is rendered
against the value with CLDR locale data.

Public API:
    format_datetime - Format a datetime or date with a pattern
    format_timestamp - Format an epoch instant in an IANA time zone
    format_temporal - Format any supported value (datetime, date, epoch number)
    format_datetime_with_errors - Format, collecting per-directive failures
    tokenize_pattern - Split a pattern into segments
    FormatConfig / using_config - Defaults for vocabulary, locale, time zone
    LocaleContext - Thread-safe Babel-backed locale data

Exceptions:
    DateFormatError - Base exception class
    MalformedEscapeError - Escape opened but never closed
    UnsupportedDirectiveError - Directive recognized but not implemented
    UnknownVocabularyError - Vocabulary name not registered
    LocaleResolutionError - Locale identifier unknown or malformed
    TimeZoneResolutionError - IANA zone key cannot be loaded
    FormattingError - Locale data lookup failed

Submodules:
    dtlexengine.syntax - Segments, escapes, directive registries, tokenizer
    dtlexengine.vocabulary - Built-in vocabularies (moment, date_fns)
    dtlexengine.runtime - Directive renderers, locale context, configuration
    dtlexengine.diagnostics - Error codes, diagnostics, and formatters
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import FormattingError
from .diagnostics import (
    DateFormatError,
    LocaleResolutionError,
    MalformedEscapeError,
    TimeZoneResolutionError,
    UnknownVocabularyError,
    UnsupportedDirectiveError,
)
from .formatting import (
    format_datetime,
    format_datetime_with_errors,
    format_temporal,
    format_timestamp,
    tokenize_pattern,
)
from .runtime import (
    FormatConfig,
    LocaleContext,
    get_config,
    reset_config,
    set_config,
    using_config,
)
from .syntax import DirectiveRegistry, clear_tokenizer_cache
from .vocabulary import available_vocabularies, get_vocabulary

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("dtlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateFormatError",
    "DirectiveRegistry",
    "FormatConfig",
    "FormattingError",
    "LocaleContext",
    "LocaleResolutionError",
    "MalformedEscapeError",
    "TimeZoneResolutionError",
    "UnknownVocabularyError",
    "UnsupportedDirectiveError",
    "__version__",
    "available_vocabularies",
    "clear_tokenizer_cache",
    "format_datetime",
    "format_datetime_with_errors",
    "format_temporal",
    "format_timestamp",
    "get_config",
    "get_vocabulary",
    "reset_config",
    "set_config",
    "tokenize_pattern",
    "using_config",
]
