"""Escape recognizers.

An escape recognizer answers one question for the tokenizer: does the
character at ``offset`` open a literal region, and if so, where does it
end? Vocabularies pick one recognizer each.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol

from dtlexengine.constants import BRACKET_ESCAPE_END, BRACKET_ESCAPE_START
from dtlexengine.diagnostics import ErrorTemplate, MalformedEscapeError

from .segments import EscapeSpan

__all__ = ["BracketEscape", "EscapeRecognizer", "no_escape"]


class EscapeRecognizer(Protocol):
    """Protocol for escape recognizers.

    Returns None when no escape starts at ``offset``. Raises
    MalformedEscapeError when an escape starts but never ends.
    """

    def __call__(self, pattern: str, offset: int, /) -> EscapeSpan | None:
        ...  # pragma: no cover  # Protocol stub - not executable


def no_escape(pattern: str, offset: int, /) -> EscapeSpan | None:
    """Recognizer for vocabularies without an escape convention."""
    return None


class BracketEscape:
    """Delimiter-pair escape, e.g. moment's ``[literal]``.

    The span runs from the start delimiter through the first end delimiter
    after it. Delimiters are consumed; only the enclosed text is emitted.
    Nesting is not supported: ``[a[b]`` escapes ``a[b``.

    Example:
        >>> escape = BracketEscape()
        >>> escape("[Year:] YYYY", 0)
        EscapeSpan(start=0, end=7, text='Year:')
        >>> escape("YYYY", 0) is None
        True
    """

    __slots__ = ("end_delimiter", "start_delimiter")

    def __init__(
        self, start_delimiter: str = BRACKET_ESCAPE_START, end_delimiter: str = BRACKET_ESCAPE_END
    ) -> None:
        if not start_delimiter or not end_delimiter:
            msg = "Escape delimiters must be non-empty"
            raise ValueError(msg)
        self.start_delimiter = start_delimiter
        self.end_delimiter = end_delimiter

    def __repr__(self) -> str:
        return f"BracketEscape({self.start_delimiter!r}, {self.end_delimiter!r})"

    def __call__(self, pattern: str, offset: int, /) -> EscapeSpan | None:
        if not pattern.startswith(self.start_delimiter, offset):
            return None

        content_start = offset + len(self.start_delimiter)
        close = pattern.find(self.end_delimiter, content_start)
        if close == -1:
            diagnostic = ErrorTemplate.escape_unterminated(pattern, offset, self.end_delimiter)
            raise MalformedEscapeError(diagnostic, pattern=pattern, offset=offset)

        return EscapeSpan(
            start=offset,
            end=close + len(self.end_delimiter),
            text=pattern[content_start:close],
        )
