"""Shared constants for dtlexengine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Defaults: Vocabulary, locale, and time zone used when nothing is configured
- Cache limits: Memory bounds for caching subsystems
- Escapes: Delimiters of the bracket escape convention
- Fallback strings: Output substituted for failed directives

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_VOCABULARY",
    "DEFAULT_LOCALE",
    "DEFAULT_TIME_ZONE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Escapes
    "BRACKET_ESCAPE_START",
    "BRACKET_ESCAPE_END",
    # Fallback strings
    "FALLBACK_DIRECTIVE",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Vocabulary used when neither the call nor the current configuration names one.
DEFAULT_VOCABULARY: str = "moment"

# Locale used when the system locale cannot be detected.
DEFAULT_LOCALE: str = "en_US"

# Zone applied to epoch timestamps when no zone is configured.
DEFAULT_TIME_ZONE: str = "UTC"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# ESCAPES
# ============================================================================

BRACKET_ESCAPE_START: str = "["
BRACKET_ESCAPE_END: str = "]"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Emitted in place of a directive that failed to render in error-collecting mode.
# Format string - use .format(directive=...)
FALLBACK_DIRECTIVE: str = "{{!{directive}}}"  # e.g., {!YYYYYY}
