"""Quickstart example for dtlexengine.

This example demonstrates formatting dates and times with moment-style
patterns, locales, time zones, and error collection.

Note: Locales are passed explicitly so the output does not depend on the
machine's locale. Without a locale argument the configured (by default,
the system) locale is used.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from dtlexengine import (
    DateFormatError,
    format_datetime,
    format_datetime_with_errors,
    format_temporal,
    format_timestamp,
    tokenize_pattern,
    using_config,
)

moment_value = datetime(2024, 3, 5, 14, 7, 9)

# Example 1: Simple patterns
print("=" * 50)
print("Example 1: Simple Patterns")
print("=" * 50)

print(format_datetime(moment_value, "YYYY-MM-DD", locale="en_US"))
# Output: 2024-03-05

print(format_datetime(moment_value, "dddd, MMMM Do YYYY [at] h:mm A", locale="en_US"))
# Output: Tuesday, March 5th 2024 at 2:07 PM

print(format_datetime(moment_value, "[Year:] YYYY, [quarter] Q", locale="en_US"))
# Output: Year: 2024, quarter 1

# Example 2: Locales
print("\n" + "=" * 50)
print("Example 2: Locale-aware Names")
print("=" * 50)

print(format_datetime(moment_value, "dddd, D. MMMM YYYY", locale="de-DE"))
# Output: Dienstag, 5. März 2024

print(format_datetime(moment_value, "dddd, MMMM", locale="lv_LV"))
# Output: otrdiena, marts

# Candidate lists: the first known locale wins
print(format_datetime(moment_value, "MMMM", locale=["xx-XX", "de-DE"]))
# Output: März

# Example 3: Time zones and timestamps
print("\n" + "=" * 50)
print("Example 3: Time Zones and Epoch Timestamps")
print("=" * 50)

print(format_timestamp(0, "YYYY-MM-DD HH:mm Z", time_zone="Asia/Kolkata", locale="en_US"))
# Output: 1970-01-01 05:30 +05:30

melbourne = datetime(2024, 1, 1, 9, 0, tzinfo=ZoneInfo("Australia/Melbourne"))
print(format_datetime(melbourne, "HH:mm ZZ [=] X", locale="en_US"))
# Output: 09:00 +1100 = 1704060000

print(format_temporal(melbourne, "HH:mm Z", time_zone="Europe/Riga", locale="en_US"))
# Output: 00:00 +02:00

# Example 4: Week numbering
print("\n" + "=" * 50)
print("Example 4: Locale Weeks vs ISO Weeks")
print("=" * 50)

sunday = date(2024, 12, 29)
weeks = "[locale week] w [of] gggg, [ISO week] W [of] GGGG"
print(format_datetime(sunday, weeks, locale="en_US"))
# Output: locale week 1 of 2025, ISO week 52 of 2024

print(format_datetime(sunday, "[locale week] w [of] gggg", locale="de_DE"))
# Output: locale week 52 of 2024

# Example 5: Collecting errors
print("\n" + "=" * 50)
print("Example 5: Error Collection")
print("=" * 50)

text, errors = format_datetime_with_errors(moment_value, "YYYYYY-MM", locale="en_US")
print(text)
# Output: {!YYYYYY}-03
for error in errors:
    print(f"  {type(error).__name__}: {error.diagnostic.message if error.diagnostic else error}")
# Output:   UnsupportedDirectiveError: Directive 'YYYYYY' at offset 0 is not supported yet

try:
    format_datetime(moment_value, "YYYY [Year", locale="en_US")
except DateFormatError as e:
    print(e)
# Output:
# error[ESCAPE_UNTERMINATED]: Escape '[' at offset 5 is never closed
#   --> pattern, column 6
#    |
#    | YYYY [Year
#    |      ^^^^^
#   = help: Close the escape with ']' or remove the '['

# Example 6: Configuration
print("\n" + "=" * 50)
print("Example 6: Scoped Configuration")
print("=" * 50)

with using_config(locale="de_DE", time_zone="Europe/Berlin"):
    print(format_timestamp(1_709_647_200, "dddd HH:mm"))
# Output: Dienstag 15:00

# Example 7: Inspecting a pattern
print("\n" + "=" * 50)
print("Example 7: Tokenizing")
print("=" * 50)

for segment in tokenize_pattern("[Day] DDD, HH:mm", "moment"):
    print(f"  {segment}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
