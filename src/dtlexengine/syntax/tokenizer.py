"""Pattern tokenizer.

Splits a format pattern into literal and directive segments under one
directive registry. Left to right, at every cursor position:

    1. Escape: the registry's recognizer may claim a literal span.
    2. Fast rejection: characters that appear in no directive are literal.
    3. Longest match: directives are tried longest first; the first one the
       pattern starts with at the cursor wins.
    4. Fallback: no directive matched, so the character is literal.

Adjacent literals are merged into one segment; directives never merge.
Step 2 is only a shortcut: removing it would not change any output.

Token Tables:
    The set of characters used by any directive and the directive list
    sorted by descending length are pure functions of a registry. They are
    computed on first use and kept per registry instance in a
    WeakKeyDictionary, so dropping a registry drops its tables.

Thread Safety (Accepted Race Condition):
    Table computation is pure and deterministic, and each cache write is a
    single dict assignment. Two threads tokenizing with a fresh registry may
    both compute the tables; both results are identical, so the duplicate
    work is the only cost. No lock is taken on the tokenize path.

Python 3.13+. Zero external dependencies.
"""

import logging
import weakref
from dataclasses import dataclass

from dtlexengine.diagnostics import ErrorTemplate

from .registry import DirectiveRegistry
from .segments import DirectiveSegment, LiteralSegment, Segment

__all__ = [
    "TokenTables",
    "clear_tokenizer_cache",
    "get_token_tables",
    "tokenize",
    "tokenizer_cache_size",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenTables:
    """Lookup data derived from a registry's directive set.

    Attributes:
        characters: Every character that occurs in any directive
        directives_by_length: Directives, longest first; equal lengths keep
            declaration order
    """

    characters: frozenset[str]
    directives_by_length: tuple[str, ...]


_token_tables_cache: weakref.WeakKeyDictionary[DirectiveRegistry, TokenTables] = (
    weakref.WeakKeyDictionary()
)


def clear_tokenizer_cache() -> None:
    """Drop all cached token tables. Useful in tests."""
    _token_tables_cache.clear()


def tokenizer_cache_size() -> int:
    """Number of registries with cached token tables."""
    return len(_token_tables_cache)


def _build_token_tables(registry: DirectiveRegistry) -> TokenTables:
    directives = registry.directives
    # sorted() is stable, so equal-length directives keep declaration order
    return TokenTables(
        characters=frozenset(char for directive in directives for char in directive),
        directives_by_length=tuple(sorted(directives, key=len, reverse=True)),
    )


def get_token_tables(registry: DirectiveRegistry, *, use_cache: bool = True) -> TokenTables:
    """Get the token tables for ``registry``, computing them at most once.

    Args:
        registry: Registry to derive tables from
        use_cache: If False, compute fresh tables and leave the cache untouched

    Returns:
        TokenTables for the registry
    """
    if not use_cache:
        return _build_token_tables(registry)

    cached = _token_tables_cache.get(registry)
    if cached is not None:
        return cached

    tables = _build_token_tables(registry)
    _token_tables_cache[registry] = tables
    logger.debug(
        "Built token tables for vocabulary '%s': %d directives, %d characters",
        registry.name,
        len(tables.directives_by_length),
        len(tables.characters),
    )
    return tables


class _SegmentBuilder:
    """Accumulates segments, merging consecutive literals."""

    __slots__ = ("_in_literal", "_literal_end", "_literal_parts", "_literal_start", "_segments")

    def __init__(self) -> None:
        self._segments: list[Segment] = []
        self._literal_parts: list[str] = []
        self._literal_start = 0
        self._literal_end = 0
        self._in_literal = False

    def add_literal(self, text: str, start: int, end: int) -> None:
        if not self._in_literal:
            self._in_literal = True
            self._literal_start = start
            self._literal_parts = []
        self._literal_parts.append(text)
        self._literal_end = end

    def add_directive(self, segment: DirectiveSegment) -> None:
        self._flush_literal()
        self._segments.append(segment)

    def build(self) -> tuple[Segment, ...]:
        self._flush_literal()
        return tuple(self._segments)

    def _flush_literal(self) -> None:
        if self._in_literal:
            self._segments.append(
                LiteralSegment(
                    text="".join(self._literal_parts),
                    start=self._literal_start,
                    end=self._literal_end,
                )
            )
            self._in_literal = False


def tokenize(
    pattern: str, registry: DirectiveRegistry, *, use_cache: bool = True
) -> tuple[Segment, ...]:
    """Split ``pattern`` into literal and directive segments.

    Args:
        pattern: Format pattern (e.g. "YYYY-MM-DD")
        registry: Directive vocabulary to match against
        use_cache: Reuse cached token tables for the registry (default: True)

    Returns:
        Segments in pattern order. Concatenating ``pattern[s.start:s.end]``
        over all segments reproduces the pattern. An empty pattern yields ().

    Raises:
        TypeError: If pattern is not a str
        MalformedEscapeError: If an escape opens but never closes

    Example:
        >>> [s.directive if isinstance(s, DirectiveSegment) else s.text
        ...  for s in tokenize("YYYY-MM-DD", MOMENT)]
        ['YYYY', '-', 'MM', '-', 'DD']
    """
    if not isinstance(pattern, str):
        diagnostic = ErrorTemplate.pattern_not_string(type(pattern).__name__)
        raise TypeError(diagnostic.message)

    tables = get_token_tables(registry, use_cache=use_cache)
    builder = _SegmentBuilder()
    pos = 0
    length = len(pattern)

    while pos < length:
        escaped = registry.escape_span(pattern, pos)
        if escaped is not None:
            builder.add_literal(escaped.text, escaped.start, escaped.end)
            pos = escaped.end
            continue

        char = pattern[pos]
        if char not in tables.characters:
            builder.add_literal(char, pos, pos + 1)
            pos += 1
            continue

        for directive in tables.directives_by_length:
            if pattern.startswith(directive, pos):
                end = pos + len(directive)
                builder.add_directive(
                    DirectiveSegment(
                        directive=directive,
                        renderer=registry.renderer(directive),
                        start=pos,
                        end=end,
                    )
                )
                pos = end
                break
        else:
            builder.add_literal(char, pos, pos + 1)
            pos += 1

    return builder.build()
