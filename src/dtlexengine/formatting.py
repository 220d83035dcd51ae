"""Public formatting API.

Ties the pieces together: vocabulary lookup, tokenization, value
normalization, and rendering. Arguments left as None fall back to the
current FormatConfig.

Example:
    >>> from datetime import datetime
    >>> format_datetime(datetime(2024, 3, 5), "YYYY-MM-DD")
    '2024-03-05'
    >>> format_datetime(datetime(2024, 3, 5), "[Year:] YYYY")
    'Year: 2024'
    >>> format_timestamp(0, "YYYY-MM-DD HH:mm Z", time_zone="Asia/Kolkata")
    '1970-01-01 05:30 +05:30'

Python 3.13+. Uses Babel (through the runtime) and zoneinfo.
"""

import logging
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import DEFAULT_TIME_ZONE
from .diagnostics import DateFormatError, ErrorTemplate, TimeZoneResolutionError
from .runtime import LocaleLike, get_config, render, render_with_errors, resolve_locale
from .syntax import DirectiveRegistry, Segment, tokenize
from .vocabulary import get_vocabulary

__all__ = [
    "format_datetime",
    "format_datetime_with_errors",
    "format_temporal",
    "format_timestamp",
    "resolve_time_zone",
    "resolve_vocabulary",
    "tokenize_pattern",
]

logger = logging.getLogger(__name__)

type Vocabulary = str | DirectiveRegistry
type Timestamp = int | float | Decimal


def resolve_vocabulary(vocabulary: Vocabulary | None) -> DirectiveRegistry:
    """Resolve a vocabulary argument to a registry.

    Registries pass through; names are looked up; None means the current
    configuration's vocabulary.

    Raises:
        UnknownVocabularyError: If the name is not registered
    """
    if isinstance(vocabulary, DirectiveRegistry):
        return vocabulary
    return get_vocabulary(vocabulary if vocabulary is not None else get_config().vocabulary)


def resolve_time_zone(time_zone: str | None) -> ZoneInfo:
    """Load an IANA zone; None means the configured zone, else UTC.

    Raises:
        TimeZoneResolutionError: If the zone key cannot be loaded (also a ValueError)
    """
    key = time_zone if time_zone is not None else (get_config().time_zone or DEFAULT_TIME_ZONE)
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        diagnostic = ErrorTemplate.time_zone_unknown(key, str(e))
        raise TimeZoneResolutionError(diagnostic, time_zone=key) from e


def _as_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _from_decimal_timestamp(seconds: Decimal) -> datetime:
    # Exact: whole seconds plus truncated microseconds
    whole = int(seconds)
    micros = int((seconds - whole) * 1_000_000)
    return _EPOCH + timedelta(seconds=whole, microseconds=micros)


def tokenize_pattern(pattern: str, vocabulary: Vocabulary | None = None) -> tuple[Segment, ...]:
    """Tokenize a pattern under a vocabulary (default: the configured one).

    Raises:
        UnknownVocabularyError: If the vocabulary name is not registered
        MalformedEscapeError: If an escape opens but never closes
        TypeError: If pattern is not a str
    """
    return tokenize(pattern, resolve_vocabulary(vocabulary))


def format_datetime(
    value: datetime | date,
    pattern: str,
    *,
    vocabulary: Vocabulary | None = None,
    locale: LocaleLike | None = None,
) -> str:
    """Format a date/time value with a pattern.

    Aware datetimes render in their own zone; naive ones render as-is and
    count as UTC for offsets and epoch directives. A date renders as its
    midnight.

    Args:
        value: datetime or date
        pattern: Format pattern (e.g. "dddd, MMMM Do YYYY")
        vocabulary: Vocabulary name or registry (default: configured)
        locale: Locale identifier(s) or LocaleContext (default: configured)

    Returns:
        Formatted string

    Raises:
        DateFormatError: Escape, vocabulary, locale, or directive failure
        TypeError: If pattern is not a str
    """
    registry = resolve_vocabulary(vocabulary)
    ctx = resolve_locale(locale)
    return render(tokenize(pattern, registry), _as_datetime(value), ctx)


def format_datetime_with_errors(
    value: datetime | date,
    pattern: str,
    *,
    vocabulary: Vocabulary | None = None,
    locale: LocaleLike | None = None,
) -> tuple[str, tuple[DateFormatError, ...]]:
    """Format like format_datetime(), collecting per-directive failures.

    Unsupported directives and locale data failures are replaced by
    ``{!<directive>}`` and returned alongside the text. Pattern, vocabulary,
    and locale errors still raise.
    """
    registry = resolve_vocabulary(vocabulary)
    ctx = resolve_locale(locale)
    text, errors = render_with_errors(tokenize(pattern, registry), _as_datetime(value), ctx)
    if errors:
        logger.debug("Formatting '%s' collected %d error(s)", pattern, len(errors))
    return text, errors


def format_timestamp(
    seconds: Timestamp,
    pattern: str,
    *,
    time_zone: str | None = None,
    vocabulary: Vocabulary | None = None,
    locale: LocaleLike | None = None,
) -> str:
    """Format an epoch instant (seconds since 1970-01-01T00:00Z) in a zone.

    Raises:
        TimeZoneResolutionError: If the zone key cannot be loaded
        OverflowError: If the instant is outside datetime's range
    """
    zone = resolve_time_zone(time_zone)
    if isinstance(seconds, Decimal):
        value = _from_decimal_timestamp(seconds).astimezone(zone)
    else:
        value = datetime.fromtimestamp(seconds, tz=zone)
    return format_datetime(value, pattern, vocabulary=vocabulary, locale=locale)


def format_temporal(
    value: datetime | date | Timestamp,
    pattern: str,
    *,
    time_zone: str | None = None,
    vocabulary: Vocabulary | None = None,
    locale: LocaleLike | None = None,
) -> str:
    """Format any supported temporal value.

    Dispatch:
        - datetime: format_datetime(), converted to time_zone when given
          (naive values count as UTC)
        - date: format_datetime() at midnight in time_zone when given
        - int / float / Decimal: format_timestamp() as epoch seconds

    Raises:
        TimeZoneResolutionError: If time_zone is given and cannot be loaded
        TypeError: For any other value type (bool included)
    """
    match value:
        case bool():
            pass
        case datetime():
            if time_zone is not None:
                aware = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
                value = aware.astimezone(resolve_time_zone(time_zone))
            return format_datetime(value, pattern, vocabulary=vocabulary, locale=locale)
        case date():
            if time_zone is not None:
                zone = resolve_time_zone(time_zone)
                value = datetime(value.year, value.month, value.day, tzinfo=zone)
            return format_datetime(value, pattern, vocabulary=vocabulary, locale=locale)
        case int() | float() | Decimal():
            return format_timestamp(
                value, pattern, time_zone=time_zone, vocabulary=vocabulary, locale=locale
            )

    diagnostic = ErrorTemplate.value_type_unsupported(type(value).__name__)
    raise TypeError(diagnostic.message)
