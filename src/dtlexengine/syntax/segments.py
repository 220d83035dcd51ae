"""Segment types produced by the tokenizer.

A tokenized pattern is a tuple of segments, each either literal text or a
directive bound to its renderer. Every segment records the half-open
``[start, end)`` range of the pattern it came from.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from dtlexengine.core.value_types import DirectiveRenderer

__all__ = ["DirectiveSegment", "EscapeSpan", "LiteralSegment", "Segment"]


@dataclass(frozen=True, slots=True)
class EscapeSpan:
    """Region of a pattern to emit verbatim.

    Returned by escape recognizers. ``text`` is what gets emitted; the
    delimiters are inside ``[start, end)`` but not inside ``text``.

    Example:
        >>> EscapeSpan(start=0, end=7, text="Year:")  # from "[Year:]"
        EscapeSpan(start=0, end=7, text='Year:')
    """

    start: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Literal text emitted as-is.

    For merged literals, ``[start, end)`` covers every merged part, so the
    span may be longer than ``text`` when escape delimiters were consumed.
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class DirectiveSegment:
    """A matched directive bound to its rendering function."""

    directive: str
    renderer: DirectiveRenderer
    start: int
    end: int


type Segment = LiteralSegment | DirectiveSegment
