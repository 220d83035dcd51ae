"""Core types shared across syntax and runtime layers.

This package provides foundational types that both the syntax layer
(tokenization) and runtime layer (rendering) depend on. By isolating them
here, we maintain a clean dependency graph:

    core <- syntax <- runtime <- vocabulary

Exports:
    FormattingError: Exception raised when locale rendering fails
    Unsupported: Tagged renderer result for deferred directives
    DirectiveRenderer: Protocol for rendering functions

Python 3.13+.
"""

from .errors import FormattingError
from .value_types import UNSUPPORTED, DirectiveRenderer, DirectiveResult, Unsupported

__all__ = [
    "UNSUPPORTED",
    "DirectiveRenderer",
    "DirectiveResult",
    "FormattingError",
    "Unsupported",
]
