"""moment.js-style directive vocabulary.

Directives follow moment's ``format()`` tokens; ``[...]`` escapes literal
text. Declaration order is kept for introspection; the tokenizer picks the
longest directive at each position regardless of order.

Python 3.13+.
"""

from dtlexengine.runtime import directives as d
from dtlexengine.syntax import BracketEscape, DirectiveRegistry

__all__ = ["MOMENT"]

MOMENT = DirectiveRegistry(
    "moment",
    {
        # Month
        "M": d.month_number,
        "Mo": d.month_ordinal,
        "MM": d.month_padded,
        "MMM": d.month_short,
        "MMMM": d.month_long,
        # Quarter
        "Q": d.quarter_number,
        "Qo": d.quarter_ordinal,
        # Day of month
        "D": d.day_of_month_number,
        "Do": d.day_of_month_ordinal,
        "DD": d.day_of_month_padded,
        # Day of year
        "DDD": d.day_of_year_number,
        "DDDo": d.day_of_year_ordinal,
        "DDDD": d.day_of_year_padded,
        # Day of week
        "d": d.day_of_week_number,
        "do": d.day_of_week_ordinal,
        "dd": d.day_of_week_narrow,
        "ddd": d.day_of_week_short,
        "dddd": d.day_of_week_long,
        # Day of week (locale)
        "e": d.day_of_week_locale_number,
        # Day of week (ISO)
        "E": d.day_of_week_iso_number,
        # Week of year (locale)
        "w": d.week_number,
        "wo": d.week_ordinal,
        "ww": d.week_padded,
        # Week of year (ISO)
        "W": d.iso_week_number,
        "Wo": d.iso_week_ordinal,
        "WW": d.iso_week_padded,
        # Year
        "YY": d.year_short,
        "YYYY": d.year_full,
        "YYYYYY": d.not_implemented,
        "Y": d.not_implemented,
        # Era year
        "y": d.era_year,
        # Era
        "N": d.era_short,
        "NN": d.era_short,
        "NNN": d.era_short,
        "NNNN": d.era_long,
        "NNNNN": d.era_short,
        # Week year (locale)
        "gg": d.week_year_short,
        "gggg": d.week_year_full,
        # Week year (ISO)
        "GG": d.iso_week_year_short,
        "GGGG": d.iso_week_year_full,
        # AM/PM
        "A": d.am_pm_upper,
        "a": d.am_pm_lower,
        # Hour
        "H": d.hour_number,
        "HH": d.hour_padded,
        "h": d.hour_12,
        "hh": d.hour_12_padded,
        "k": d.hour_24_from_one,
        "kk": d.hour_24_from_one_padded,
        # Minute
        "m": d.minute_number,
        "mm": d.minute_padded,
        # Second
        "s": d.second_number,
        "ss": d.second_padded,
        # Fractional second
        **{"S" * digits: d.fractional_second(digits) for digits in range(1, 10)},
        # Time zone
        "z": d.not_implemented,
        "zz": d.not_implemented,
        "Z": d.utc_offset_colon,
        "ZZ": d.utc_offset_compact,
        # Unix timestamp
        "X": d.epoch_seconds,
        # Unix millisecond timestamp
        "x": d.epoch_milliseconds,
    },
    escape=BracketEscape(),
)
