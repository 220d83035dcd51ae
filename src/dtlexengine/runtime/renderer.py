"""Segment renderer - turns tokenized segments into formatted text.

Walks segments in order: literal text is emitted as-is, directive segments
call their bound renderer with the value and the resolved locale and emit
``str()`` of the result.

Two modes:
    - render(): strict. An Unsupported result raises UnsupportedDirectiveError
      carrying the directive and its pattern offset; renderer exceptions
      propagate unchanged.
    - render_with_errors(): collecting. Unsupported results and
      FormattingError are recorded, and the directive is replaced by the
      fallback ``{!<directive>}`` so the rest of the output survives.

Thread Safety:
    Rendering keeps no state between calls. Locale resolution goes through
    the RLock-guarded LocaleContext cache.

Python 3.13+. Indirect dependency: Babel (via LocaleContext).
"""

from collections.abc import Sequence
from datetime import datetime

from dtlexengine.constants import FALLBACK_DIRECTIVE
from dtlexengine.core.errors import FormattingError
from dtlexengine.core.value_types import Unsupported
from dtlexengine.diagnostics import DateFormatError, ErrorTemplate, UnsupportedDirectiveError
from dtlexengine.syntax import DirectiveSegment, Segment

from .config import get_config
from .locale_context import LocaleContext, LocaleLike

__all__ = ["render", "render_with_errors", "resolve_locale"]


def resolve_locale(locale: LocaleLike | None) -> LocaleContext:
    """Resolve an optional locale argument, defaulting to the current configuration.

    Raises:
        LocaleResolutionError: If no candidate is a known locale
    """
    if locale is None:
        locale = get_config().locale
    return LocaleContext.resolve(locale)


def _unsupported_error(segment: DirectiveSegment) -> UnsupportedDirectiveError:
    diagnostic = ErrorTemplate.directive_unsupported(segment.directive, segment.start)
    return UnsupportedDirectiveError(diagnostic, directive=segment.directive, offset=segment.start)


def render(
    segments: Sequence[Segment], value: datetime, locale: LocaleLike | None = None
) -> str:
    """Render segments against a date value.

    Args:
        segments: Output of tokenize()
        value: Date/time value (aware or naive)
        locale: LocaleContext, identifier, candidate sequence, or None for
            the current configuration's locale

    Returns:
        Formatted string

    Raises:
        UnsupportedDirectiveError: A directive's renderer is not implemented
        LocaleResolutionError: The locale cannot be resolved
        FormattingError: Locale data lookup failed
    """
    ctx = resolve_locale(locale)
    parts: list[str] = []

    for segment in segments:
        if isinstance(segment, DirectiveSegment):
            result = segment.renderer(value, ctx)
            if isinstance(result, Unsupported):
                raise _unsupported_error(segment)
            parts.append(str(result))
        else:
            parts.append(segment.text)

    return "".join(parts)


def render_with_errors(
    segments: Sequence[Segment], value: datetime, locale: LocaleLike | None = None
) -> tuple[str, tuple[DateFormatError, ...]]:
    """Render segments, collecting per-directive failures instead of raising.

    Never raises for unsupported directives or locale data failures: each
    one is recorded and its directive is emitted as ``{!<directive>}``.

    Returns:
        Tuple of (formatted_string, errors)

    Raises:
        LocaleResolutionError: The locale cannot be resolved

    Example:
        >>> text, errors = render_with_errors(tokenize("YYYYYY-MM", MOMENT), value, "en_US")
        >>> text
        '{!YYYYYY}-03'
        >>> type(errors[0]).__name__
        'UnsupportedDirectiveError'
    """
    ctx = resolve_locale(locale)
    parts: list[str] = []
    errors: list[DateFormatError] = []

    for segment in segments:
        if not isinstance(segment, DirectiveSegment):
            parts.append(segment.text)
            continue

        try:
            result = segment.renderer(value, ctx)
        except FormattingError as e:
            errors.append(e)
            parts.append(FALLBACK_DIRECTIVE.format(directive=segment.directive))
            continue

        if isinstance(result, Unsupported):
            errors.append(_unsupported_error(segment))
            parts.append(FALLBACK_DIRECTIVE.format(directive=segment.directive))
        else:
            parts.append(str(result))

    return "".join(parts), tuple(errors)
