"""Locale identifier utilities.

Normalizes the identifiers callers pass in (BCP-47 with hyphens, POSIX with
underscores, or a list of candidates) into the POSIX form Babel expects,
and detects the process locale from the environment.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from dtlexengine.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locale_candidates",
    "normalize_locale",
]

# Pseudo-locales reported by C libraries that carry no CLDR data.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel parses.

    Also strips an encoding suffix such as ``.UTF-8``.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("lv")
        'lv'
    """
    return locale_code.split(".", 1)[0].replace("-", "_")


def locale_candidates(locale: str | Sequence[str]) -> tuple[str, ...]:
    """Expand a locale argument into an ordered tuple of candidate codes.

    A single string is one candidate; a sequence keeps its order. Empty
    strings are dropped.

    Example:
        >>> locale_candidates("en-US")
        ('en-US',)
        >>> locale_candidates(["xx", "de-DE", ""])
        ('xx', 'de-DE')
    """
    if isinstance(locale, str):
        return (locale,) if locale else ()
    return tuple(code for code in locale if code)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, caching the result.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the process locale.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_MESSAGES, LANG environment variables

    C and POSIX pseudo-locales are skipped. Returns DEFAULT_LOCALE ("en_US")
    when nothing usable is found.

    Example:
        >>> import os
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_locale()  # when getlocale() reports nothing
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in _PSEUDO_LOCALES:
        return normalize_locale(system_locale)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "")
        if normalize_locale(value) not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    return DEFAULT_LOCALE
