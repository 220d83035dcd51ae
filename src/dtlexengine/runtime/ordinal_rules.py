"""CLDR ordinal rules using Babel.

Selects the ordinal plural category of a number for a locale and maps it to
an English-style suffix ("1st", "2nd", "3rd", "4th").

The suffix table covers the categories English uses. Locales whose ordinal
rules produce only "other" (most of them) get "th" throughout; locales that
produce "zero" or "many" have no suffix and raise FormattingError.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from types import MappingProxyType

from dtlexengine.core.errors import FormattingError
from dtlexengine.diagnostics import ErrorTemplate

from .locale_context import LocaleContext

__all__ = ["ORDINAL_SUFFIXES", "ordinal"]

ORDINAL_SUFFIXES: MappingProxyType[str, str] = MappingProxyType(
    {
        "one": "st",
        "two": "nd",
        "few": "rd",
        "other": "th",
    }
)


def ordinal(n: int, locale: LocaleContext) -> str:
    """Render ``n`` followed by its ordinal suffix.

    Raises:
        FormattingError: If the locale's ordinal category has no suffix
            (fallback_value is the bare number)

    Examples:
        >>> en = LocaleContext.create("en_US")
        >>> [ordinal(n, en) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 101)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '23rd', '101st']
    """
    category = locale.ordinal_category(n)
    suffix = ORDINAL_SUFFIXES.get(category)
    if suffix is None:
        diagnostic = ErrorTemplate.ordinal_suffix_unavailable(n, category, locale.locale_code)
        raise FormattingError(diagnostic, fallback_value=str(n))
    return f"{n}{suffix}"
