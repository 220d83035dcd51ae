"""Pattern syntax: segments, escapes, directive registries, and the tokenizer.

Zero external dependencies; nothing here touches locale data.

Python 3.13+.
"""

from .escapes import BracketEscape, EscapeRecognizer, no_escape
from .registry import DirectiveRegistry
from .segments import DirectiveSegment, EscapeSpan, LiteralSegment, Segment
from .tokenizer import (
    TokenTables,
    clear_tokenizer_cache,
    get_token_tables,
    tokenize,
    tokenizer_cache_size,
)

__all__ = [
    "BracketEscape",
    "DirectiveRegistry",
    "DirectiveSegment",
    "EscapeRecognizer",
    "EscapeSpan",
    "LiteralSegment",
    "Segment",
    "TokenTables",
    "clear_tokenizer_cache",
    "get_token_tables",
    "no_escape",
    "tokenize",
    "tokenizer_cache_size",
]
