"""Hypothesis strategies for DTLexEngine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- patterns: Format patterns, ad-hoc registries, and datetime values

Usage:
    from tests.strategies import moment_patterns, ad_hoc_registries
    from tests.strategies.patterns import datetimes_any_zone

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - moment_patterns, ad_hoc_registries, datetimes_any_zone
"""

from .patterns import (
    IANA_ZONES,
    IMPLEMENTED_MOMENT_DIRECTIVES,
    LITERAL_CHARS,
    ad_hoc_patterns,
    ad_hoc_registries,
    datetimes_any_zone,
    escape_free_text,
    escape_fragments,
    literal_text,
    moment_patterns,
)

__all__ = [
    "IANA_ZONES",
    "IMPLEMENTED_MOMENT_DIRECTIVES",
    "LITERAL_CHARS",
    "ad_hoc_patterns",
    "ad_hoc_registries",
    "datetimes_any_zone",
    "escape_free_text",
    "escape_fragments",
    "literal_text",
    "moment_patterns",
]
