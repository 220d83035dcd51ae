"""Locale context for thread-safe, locale-aware directive rendering.

This module provides the locale collaborator that directive renderers call
for names and calendar conventions. Uses Babel for CLDR data.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Name lookups (months, weekdays, eras, day periods) go through Babel
    - Week conventions (first weekday, minimal days in week 1) come from CLDR
    - No dependency on Python's locale module (avoids global state)

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state besides the guarded instance cache)
    - Explicit error handling (FormattingError carries a fallback value)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Sequence
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from dtlexengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from dtlexengine.core.errors import FormattingError
from dtlexengine.diagnostics import ErrorTemplate, LocaleResolutionError
from dtlexengine.locale_utils import get_babel_locale, locale_candidates, normalize_locale

__all__ = ["LocaleContext", "LocaleLike", "NameWidth"]

logger = logging.getLogger(__name__)

type NameWidth = Literal["wide", "abbreviated", "short", "narrow"]


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for rendering operations.

    Use LocaleContext.create() or create_or_raise() to construct instances.
    Direct construction via __init__ bypasses validation and caching.

    Cache Management:
        LocaleContext keeps an LRU cache of instances keyed by normalized
        locale code:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.month_name(3)
        'March'
        >>> LocaleContext.create('de-DE').weekday_name(0, width='abbreviated')
        'Mo.'

        >>> ctx = LocaleContext.create('invalid-locale')  # falls back to en_US
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable and may be shared freely. Cache operations
        are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with size, max_size, and cached locale keys (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def _cached(cls, cache_key: str) -> "LocaleContext | None":
        with cls._cache_lock:
            ctx = cls._cache.get(cache_key)
            if ctx is not None:
                cls._cache.move_to_end(cache_key)
            return ctx

    @classmethod
    def _store(cls, cache_key: str, ctx: "LocaleContext") -> "LocaleContext":
        with cls._cache_lock:
            existing = cls._cache.get(cache_key)
            if existing is not None and existing.is_fallback == ctx.is_fallback:
                return existing
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                evicted, _ = cls._cache.popitem(last=False)
                logger.debug("Evicted locale context '%s' from cache", evicted)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext, falling back to en_US for invalid locales.

        Always succeeds. Logs a warning on fallback and preserves the
        original locale_code for debugging. Use create_or_raise() when a
        bad locale must be reported.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance (cached per normalized code)
        """
        cache_key = normalize_locale(locale_code)
        cached = cls._cached(cache_key)
        if cached is not None:
            return cached

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)
        return cls._store(cache_key, ctx)

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with a valid locale

        Raises:
            LocaleResolutionError: If locale code is unknown or malformed
                (also a ValueError)
        """
        cache_key = normalize_locale(locale_code)
        cached = cls._cached(cache_key)
        if cached is not None and not cached.is_fallback:
            return cached

        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
            raise LocaleResolutionError(diagnostic, locale_code=locale_code) from None
        except (ValueError, TypeError) as e:
            diagnostic = ErrorTemplate.locale_invalid(locale_code, str(e))
            raise LocaleResolutionError(diagnostic, locale_code=locale_code) from None

        return cls._store(cache_key, cls(locale_code=locale_code, _babel_locale=babel_locale))

    @classmethod
    def resolve(cls, locale: "LocaleLike") -> "LocaleContext":
        """Resolve a caller-supplied locale argument strictly.

        Accepts an existing LocaleContext, a single identifier, or a
        sequence of identifiers tried in order (first known locale wins).

        Raises:
            LocaleResolutionError: If no candidate is a known locale
        """
        if isinstance(locale, LocaleContext):
            return locale

        candidates = locale_candidates(locale)
        if not candidates:
            diagnostic = ErrorTemplate.locale_invalid("", "no locale identifier given")
            raise LocaleResolutionError(diagnostic, locale_code="")

        failure: LocaleResolutionError | None = None
        for code in candidates:
            try:
                return cls.create_or_raise(code)
            except LocaleResolutionError as e:
                failure = e
                logger.debug("Locale candidate '%s' rejected: %s", code, e)

        if len(candidates) == 1 and failure is not None:
            raise failure
        joined = ", ".join(candidates)
        diagnostic = ErrorTemplate.locale_unknown(joined, "no candidate is a known locale")
        raise LocaleResolutionError(diagnostic, locale_code=joined) from failure

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def first_week_day(self) -> int:
        """First day of the week per CLDR (0 = Monday ... 6 = Sunday)."""
        return int(self._babel_locale.first_week_day)

    @property
    def min_week_days(self) -> int:
        """Minimal number of days the first week of a year must contain."""
        return int(self._babel_locale.min_week_days)

    def month_name(self, month: int, *, width: NameWidth = "wide") -> str:
        """Get the format-context month name (1 = January).

        Raises:
            FormattingError: If CLDR has no such name
        """
        try:
            return str(babel_dates.get_month_names(width, "format", self._babel_locale)[month])
        except (KeyError, ValueError, AttributeError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                f"month name {month}", self.locale_code, str(e)
            )
            raise FormattingError(diagnostic, fallback_value=str(month)) from e

    def weekday_name(self, weekday: int, *, width: NameWidth = "wide") -> str:
        """Get the format-context weekday name (0 = Monday, as datetime.weekday()).

        Raises:
            FormattingError: If CLDR has no such name
        """
        try:
            return str(babel_dates.get_day_names(width, "format", self._babel_locale)[weekday])
        except (KeyError, ValueError, AttributeError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                f"weekday name {weekday}", self.locale_code, str(e)
            )
            raise FormattingError(diagnostic, fallback_value=str(weekday)) from e

    def era_name(self, era: int, *, width: NameWidth = "abbreviated") -> str:
        """Get the Gregorian era name (0 = BC, 1 = AD).

        Raises:
            FormattingError: If CLDR has no such name
        """
        try:
            return str(babel_dates.get_era_names(width, self._babel_locale)[era])
        except (KeyError, ValueError, AttributeError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                f"era name {era}", self.locale_code, str(e)
            )
            raise FormattingError(diagnostic, fallback_value=("AD" if era else "BC")) from e

    def day_period_name(self, hour: int, *, width: NameWidth = "abbreviated") -> str:
        """Get the AM/PM marker for an hour of the day (0-23).

        Raises:
            FormattingError: If CLDR has no such name
        """
        period = "am" if hour < 12 else "pm"
        try:
            return str(babel_dates.get_period_names(width, "format", self._babel_locale)[period])
        except (KeyError, ValueError, AttributeError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                f"day period {period}", self.locale_code, str(e)
            )
            raise FormattingError(diagnostic, fallback_value=period.upper()) from e

    def ordinal_category(self, number: int) -> str:
        """Select the CLDR ordinal plural category for ``number``.

        Returns:
            One of "zero", "one", "two", "few", "many", "other"
        """
        return str(self._babel_locale.ordinal_form(number))


type LocaleLike = LocaleContext | str | Sequence[str]
