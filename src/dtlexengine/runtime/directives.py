"""Directive rendering functions.

Every function here takes the date value and the resolved locale
positionally and returns text, an integer, or UNSUPPORTED. They are pure:
no configuration lookups, no caching, no I/O. Vocabularies bind them to
directive strings.

Architecture:
    - Numbers come straight from datetime fields
    - Names (months, weekdays, eras, day periods) come from LocaleContext
    - Ordinals go through CLDR ordinal categories (ordinal_rules)
    - Locale weeks use CLDR week conventions (first weekday, minimal days)
    - ISO weeks use datetime.isocalendar()
    - Naive datetimes are read as UTC wherever an instant is needed

Example:
    >>> en = LocaleContext.create("en_US")
    >>> value = datetime(2024, 3, 5, 14, 7)
    >>> month_long(value, en), day_of_month_ordinal(value, en), hour_12(value, en)
    ('March', '5th', 2)

Python 3.13+. Uses Babel (through LocaleContext) for i18n.
"""

from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, timedelta

from dtlexengine.core.value_types import UNSUPPORTED, DirectiveResult

from .locale_context import LocaleContext
from .ordinal_rules import ordinal

__all__ = [
    "am_pm_lower",
    "am_pm_upper",
    "day_of_month_number",
    "day_of_month_ordinal",
    "day_of_month_padded",
    "day_of_week_iso_number",
    "day_of_week_locale_number",
    "day_of_week_long",
    "day_of_week_narrow",
    "day_of_week_number",
    "day_of_week_ordinal",
    "day_of_week_short",
    "day_of_year_number",
    "day_of_year_ordinal",
    "day_of_year_padded",
    "epoch_milliseconds",
    "epoch_seconds",
    "era_long",
    "era_short",
    "era_year",
    "fractional_second",
    "hour_12",
    "hour_12_padded",
    "hour_24_from_one",
    "hour_24_from_one_padded",
    "hour_number",
    "hour_padded",
    "iso_week_number",
    "iso_week_ordinal",
    "iso_week_padded",
    "iso_week_year_full",
    "iso_week_year_short",
    "locale_week",
    "minute_number",
    "minute_padded",
    "month_long",
    "month_number",
    "month_ordinal",
    "month_padded",
    "month_short",
    "not_implemented",
    "quarter_number",
    "quarter_ordinal",
    "second_number",
    "second_padded",
    "utc_offset_colon",
    "utc_offset_compact",
    "week_number",
    "week_ordinal",
    "week_padded",
    "week_year_full",
    "week_year_short",
    "year_full",
    "year_short",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_DAYS_IN_WEEK = 7
_MAX_FRACTION_DIGITS = 9


def not_implemented(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Placeholder for directives the vocabulary knows but cannot render yet."""
    return UNSUPPORTED


def _as_instant(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _year_full(year: int) -> str:
    return f"{'-' if year < 0 else ''}{abs(year):04d}"


def _year_short(year: int) -> str:
    return f"{'-' if year < 0 else ''}{abs(year) % 100:02d}"


# ============================================================================
# MONTH
# ============================================================================


def month_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 11 12"""
    return value.month


def month_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd ... 11th 12th"""
    return ordinal(value.month, locale)


def month_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 11 12"""
    return f"{value.month:02d}"


def month_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Jan Feb ... Nov Dec"""
    return locale.month_name(value.month, width="abbreviated")


def month_long(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """January February ... November December"""
    return locale.month_name(value.month, width="wide")


# ============================================================================
# QUARTER
# ============================================================================


def quarter_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 3 4"""
    return (value.month - 1) // 3 + 1


def quarter_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd 3rd 4th"""
    return ordinal((value.month - 1) // 3 + 1, locale)


# ============================================================================
# DAY OF MONTH / DAY OF YEAR
# ============================================================================


def day_of_month_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 30 31"""
    return value.day


def day_of_month_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd ... 30th 31st"""
    return ordinal(value.day, locale)


def day_of_month_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 30 31"""
    return f"{value.day:02d}"


def day_of_year_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 365 366"""
    return value.timetuple().tm_yday


def day_of_year_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd ... 365th 366th"""
    return ordinal(value.timetuple().tm_yday, locale)


def day_of_year_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """001 002 ... 365 366"""
    return f"{value.timetuple().tm_yday:03d}"


# ============================================================================
# DAY OF WEEK
# ============================================================================


def day_of_week_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0 1 ... 5 6 (Sunday = 0)"""
    return value.isoweekday() % _DAYS_IN_WEEK


def day_of_week_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0th 1st ... 5th 6th"""
    return ordinal(value.isoweekday() % _DAYS_IN_WEEK, locale)


def day_of_week_narrow(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Su Mo ... Fr Sa

    First two characters of the wide weekday name.
    """
    return locale.weekday_name(value.weekday(), width="wide")[:2]


def day_of_week_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Sun Mon ... Fri Sat"""
    return locale.weekday_name(value.weekday(), width="abbreviated")


def day_of_week_long(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Sunday Monday ... Friday Saturday"""
    return locale.weekday_name(value.weekday(), width="wide")


def day_of_week_locale_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0 1 ... 5 6, counted from the locale's first day of the week.

    en_US starts weeks on Sunday, so this matches ``d`` there; de_DE starts
    on Monday, so Monday is 0.
    """
    return (value.weekday() - locale.first_week_day) % _DAYS_IN_WEEK


def day_of_week_iso_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 6 7 (Monday = 1)"""
    return value.isoweekday()


# ============================================================================
# LOCALE WEEK
# ============================================================================


def _jan1_ordinal(year: int) -> int:
    # Neighbouring years of MINYEAR/MAXYEAR are outside datetime's range
    if year < MINYEAR:
        return date(MINYEAR, 1, 1).toordinal() - 366  # proleptic year 0 is a leap year
    if year > MAXYEAR:
        return date(MAXYEAR, 12, 31).toordinal() + 1
    return date(year, 1, 1).toordinal()


def _week_one_start(year: int, first_day: int, min_days: int) -> int:
    jan1 = _jan1_ordinal(year)
    # date.weekday() == (toordinal() + 6) % 7
    offset = ((jan1 + 6) % _DAYS_IN_WEEK - first_day) % _DAYS_IN_WEEK
    start = jan1 - offset
    if _DAYS_IN_WEEK - offset < min_days:
        start += _DAYS_IN_WEEK
    return start


def locale_week(value: date, locale: LocaleContext) -> tuple[int, int]:
    """Compute (week-year, week) under the locale's CLDR week rules.

    Week 1 is the first week, starting on the locale's first weekday, that
    holds at least ``min_week_days`` days of the year. Days before it belong
    to the last week of the previous week-year.

    Examples:
        >>> en = LocaleContext.create("en_US")   # Sunday, min 1 day
        >>> locale_week(date(2024, 12, 28), en)
        (2024, 52)
        >>> locale_week(date(2024, 12, 29), en)
        (2025, 1)
        >>> de = LocaleContext.create("de_DE")   # Monday, min 4 days (ISO)
        >>> locale_week(date(2021, 1, 1), de)
        (2020, 53)
    """
    first_day = locale.first_week_day
    min_days = locale.min_week_days
    day = value.toordinal()
    year = value.year

    start = _week_one_start(year, first_day, min_days)
    if day < start:
        year -= 1
        start = _week_one_start(year, first_day, min_days)
    else:
        next_start = _week_one_start(year + 1, first_day, min_days)
        if day >= next_start:
            year += 1
            start = next_start

    return year, (day - start) // _DAYS_IN_WEEK + 1


def week_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 52 53"""
    return locale_week(value.date(), locale)[1]


def week_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd ... 52nd 53rd"""
    return ordinal(locale_week(value.date(), locale)[1], locale)


def week_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 52 53"""
    return f"{locale_week(value.date(), locale)[1]:02d}"


def week_year_full(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1970 1971 ... 2029 2030"""
    return _year_full(locale_week(value.date(), locale)[0])


def week_year_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """70 71 ... 29 30"""
    return _year_short(locale_week(value.date(), locale)[0])


# ============================================================================
# ISO WEEK
# ============================================================================


def iso_week_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 52 53"""
    return value.isocalendar().week


def iso_week_ordinal(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1st 2nd ... 52nd 53rd"""
    return ordinal(value.isocalendar().week, locale)


def iso_week_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 52 53"""
    return f"{value.isocalendar().week:02d}"


def iso_week_year_full(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1970 1971 ... 2029 2030"""
    return _year_full(value.isocalendar().year)


def iso_week_year_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """70 71 ... 29 30"""
    return _year_short(value.isocalendar().year)


# ============================================================================
# YEAR / ERA
# ============================================================================


def year_full(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0150 ... 1970 ... 2030"""
    return _year_full(value.year)


def year_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """70 71 ... 29 30"""
    return _year_short(value.year)


def era_year(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 2020 (year within its era; datetime has only AD years)"""
    return value.year


def era_short(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """BC AD"""
    return locale.era_name(1 if value.year > 0 else 0, width="abbreviated")


def era_long(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """Before Christ, Anno Domini"""
    return locale.era_name(1 if value.year > 0 else 0, width="wide")


# ============================================================================
# TIME OF DAY
# ============================================================================


def am_pm_upper(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """AM PM"""
    return locale.day_period_name(value.hour).upper()


def am_pm_lower(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """am pm"""
    return locale.day_period_name(value.hour).lower()


def hour_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0 1 ... 22 23"""
    return value.hour


def hour_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """00 01 ... 22 23"""
    return f"{value.hour:02d}"


def hour_12(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 11 12"""
    return value.hour % 12 or 12


def hour_12_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 11 12"""
    return f"{value.hour % 12 or 12:02d}"


def hour_24_from_one(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1 2 ... 23 24 (midnight = 24)"""
    return value.hour or 24


def hour_24_from_one_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """01 02 ... 23 24"""
    return f"{value.hour or 24:02d}"


def minute_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0 1 ... 58 59"""
    return value.minute


def minute_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """00 01 ... 58 59"""
    return f"{value.minute:02d}"


def second_number(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """0 1 ... 58 59"""
    return value.second


def second_padded(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """00 01 ... 58 59"""
    return f"{value.second:02d}"


def fractional_second(digits: int) -> "_FractionalSecond":
    """Build the renderer for a fractional-second directive of ``digits`` digits.

    Digits are truncated, never rounded; past microsecond precision they are
    zero-extended.

    Example:
        >>> fractional_second(3)(datetime(2024, 1, 1, microsecond=123456), en)
        '123'
    """
    if not 1 <= digits <= _MAX_FRACTION_DIGITS:
        msg = f"Fractional second digits must be 1-{_MAX_FRACTION_DIGITS}, got {digits}"
        raise ValueError(msg)
    return _FractionalSecond(digits)


class _FractionalSecond:
    __slots__ = ("digits",)

    def __init__(self, digits: int) -> None:
        self.digits = digits

    def __repr__(self) -> str:
        return f"fractional_second({self.digits})"

    def __call__(self, value: datetime, locale: LocaleContext, /) -> DirectiveResult:
        return f"{value.microsecond:06d}000"[: self.digits]


# ============================================================================
# TIME ZONE / EPOCH
# ============================================================================


def _utc_offset(value: datetime, separator: str) -> str:
    offset = value.utcoffset() or timedelta(0)
    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    hours, remainder = divmod(abs(total_seconds), 3600)
    return f"{sign}{hours:02d}{separator}{remainder // 60:02d}"


def utc_offset_colon(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """-07:00 -06:00 ... +06:00 +07:00"""
    return _utc_offset(value, ":")


def utc_offset_compact(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """-0700 -0600 ... +0600 +0700"""
    return _utc_offset(value, "")


def epoch_seconds(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1360013296"""
    return (_as_instant(value) - _EPOCH) // _ONE_SECOND


def epoch_milliseconds(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    """1360013296123"""
    return (_as_instant(value) - _EPOCH) // _ONE_MILLISECOND
