"""Custom vocabulary example for dtlexengine.

A vocabulary is a DirectiveRegistry: a name, a mapping from directive
strings to renderer functions, and an optional escape recognizer. The
tokenizer picks the longest registered directive at each position, so
directives may share prefixes freely.

Renderers receive the value and a LocaleContext positionally and return
text, an int, or UNSUPPORTED.

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime

from dtlexengine import DirectiveRegistry, LocaleContext, format_datetime
from dtlexengine.core.value_types import UNSUPPORTED, DirectiveResult
from dtlexengine.runtime import directives as d
from dtlexengine.syntax import BracketEscape


def fiscal_quarter(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Fiscal year starting in April: April-June is Q1."""
    return f"FQ{(value.month - 4) % 12 // 3 + 1}"


def julian_day(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Not implemented yet; reported as an unsupported directive."""
    return UNSUPPORTED


# strftime-like directives with '' as the literal escape
STRFTIME_LIKE = DirectiveRegistry(
    "strftime_like",
    {
        "%Y": d.year_full,
        "%m": d.month_padded,
        "%d": d.day_of_month_padded,
        "%H": d.hour_padded,
        "%M": d.minute_padded,
        "%B": d.month_long,
        "%A": d.day_of_week_long,
        "%FQ": fiscal_quarter,
        "%J": julian_day,
    },
    escape=BracketEscape("'", "'"),
)

value = datetime(2024, 5, 17, 8, 30)

print("=" * 50)
print("Custom Vocabulary")
print("=" * 50)

print(format_datetime(value, "%Y-%m-%d %H:%M", vocabulary=STRFTIME_LIKE, locale="en_US"))
# Output: 2024-05-17 08:30

print(format_datetime(value, "%A, %d %B ('%FQ' = %FQ)", vocabulary=STRFTIME_LIKE, locale="en_US"))
# Output: Friday, 17 May (%FQ = FQ1)

print(format_datetime(value, "%A %d. %B", vocabulary=STRFTIME_LIKE, locale="de_DE"))
# Output: Freitag 17. Mai

print(f"\nRegistry: {STRFTIME_LIKE!r}")
print(f"Directives: {', '.join(STRFTIME_LIKE)}")
