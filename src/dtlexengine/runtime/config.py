"""Formatting configuration and the current-configuration context.

FormatConfig bundles the defaults a formatting call falls back to when the
caller does not pass them explicitly: the directive vocabulary, the locale,
and the time zone applied to epoch timestamps.

The current configuration lives in a ContextVar, so each thread and each
asyncio task sees its own value and overrides never leak across them:

    >>> with using_config(locale="de_DE"):
    ...     format_datetime(datetime(2024, 3, 5), "dddd")
    'Dienstag'

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any

from dtlexengine.constants import DEFAULT_LOCALE, DEFAULT_VOCABULARY
from dtlexengine.diagnostics import LocaleResolutionError
from dtlexengine.locale_utils import get_system_locale

from .locale_context import LocaleContext

__all__ = [
    "FormatConfig",
    "get_config",
    "reset_config",
    "set_config",
    "using_config",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Defaults for formatting calls.

    Attributes:
        vocabulary: Directive vocabulary name (e.g. "moment", "date_fns")
        locale: Locale identifier, or candidates tried in order
        time_zone: IANA zone key for epoch timestamps; None means UTC
    """

    vocabulary: str = DEFAULT_VOCABULARY
    locale: str | tuple[str, ...] = DEFAULT_LOCALE
    time_zone: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.vocabulary, str) or not self.vocabulary:
            msg = f"vocabulary must be a non-empty str, got {self.vocabulary!r}"
            raise ValueError(msg)
        if isinstance(self.locale, Sequence) and not isinstance(self.locale, str):
            # Lists are accepted and frozen so the config stays hashable
            object.__setattr__(self, "locale", tuple(self.locale))
        if not self.locale:
            msg = "locale must be a non-empty identifier or sequence of identifiers"
            raise ValueError(msg)
        if self.time_zone is not None and not isinstance(self.time_zone, str):
            msg = f"time_zone must be an IANA key or None, got {self.time_zone!r}"
            raise TypeError(msg)


@functools.cache
def _default_config() -> FormatConfig:
    """Process-wide default, built once from the detected system locale.

    A detected locale Babel does not know is replaced by DEFAULT_LOCALE.
    """
    detected = get_system_locale()
    try:
        LocaleContext.create_or_raise(detected)
    except LocaleResolutionError:
        logger.warning(
            "System locale '%s' is unknown to Babel, defaulting to '%s'",
            detected,
            DEFAULT_LOCALE,
        )
        detected = DEFAULT_LOCALE
    config = FormatConfig(locale=detected)
    logger.debug("Default format configuration: %r", config)
    return config


_current_config: ContextVar[FormatConfig | None] = ContextVar(
    "dtlexengine_format_config", default=None
)


def get_config() -> FormatConfig:
    """Get the configuration in effect for the current context."""
    config = _current_config.get()
    return config if config is not None else _default_config()


def set_config(config: FormatConfig) -> Token[FormatConfig | None]:
    """Make ``config`` current for this context.

    Returns:
        Token for reset_config()

    Raises:
        TypeError: If config is not a FormatConfig
    """
    if not isinstance(config, FormatConfig):
        msg = f"Expected FormatConfig, got {type(config).__name__}"
        raise TypeError(msg)
    logger.debug("Format configuration set: %r", config)
    return _current_config.set(config)


def reset_config(token: Token[FormatConfig | None]) -> None:
    """Restore the configuration that was current before set_config()."""
    _current_config.reset(token)
    logger.debug("Format configuration reset: %r", get_config())


@contextmanager
def using_config(**overrides: Any) -> Iterator[FormatConfig]:
    """Temporarily override fields of the current configuration.

    Example:
        >>> with using_config(vocabulary="date_fns", time_zone="Europe/Riga") as config:
        ...     config.vocabulary
        'date_fns'
    """
    config = replace(get_config(), **overrides)
    token = set_config(config)
    try:
        yield config
    finally:
        reset_config(token)
