"""Thread Safety Example - Formatting from many threads at once.

Thread Safety:
    Formatting keeps no mutable state between calls. Token tables are
    cached per vocabulary (a benign race may build them twice), the
    LocaleContext cache is guarded by an RLock, and the current
    FormatConfig lives in a ContextVar, so configuration set in one thread
    is never seen by another.

Demonstrates:
1. Concurrent formatting with a shared vocabulary
2. Per-thread configuration via using_config()

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

from dtlexengine import LocaleContext, format_datetime, get_config, using_config

START = datetime(2024, 1, 1, tzinfo=UTC)


# Example 1: Concurrent formatting
def example_1_concurrent_formatting() -> None:
    """Example 1: Many threads format different days with one pattern."""
    print("=" * 60)
    print("Example 1: Concurrent Formatting")
    print("=" * 60)

    def render(day: int) -> str:
        value = START + timedelta(days=day)
        return format_datetime(value, "ddd, MMM Do [week] w", locale="en_US")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(render, range(7)))

    for line in results:
        print(f"  {line}")
    print(f"  LocaleContext cache: {LocaleContext.cache_info()}")


# Example 2: Per-thread configuration
def example_2_per_thread_config() -> None:
    """Example 2: Each worker sets its own locale without affecting others."""
    print("\n" + "=" * 60)
    print("Example 2: Per-thread Configuration")
    print("=" * 60)

    def render_in(locale: str) -> str:
        with using_config(locale=locale):
            return f"{locale}: {format_datetime(START, 'dddd, D MMMM YYYY')}"

    with ThreadPoolExecutor(max_workers=4) as pool:
        for line in pool.map(render_in, ["en_US", "de_DE", "lv_LV", "fr_FR"]):
            print(f"  {line}")

    print(f"  Main thread locale unchanged: {get_config().locale}")


if __name__ == "__main__":
    example_1_concurrent_formatting()
    example_2_per_thread_config()
